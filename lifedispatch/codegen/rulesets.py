"""
Cellular automaton rules written in the rule language. The compiler does not
know about any of these, they are ordinary trees built from the functions in
`lifedispatch.codegen.builder`.
"""

from typing import Callable
from typing import Dict
from typing import Iterable
from typing import List

import re

from .builder import alive, neighbors, const_u32, equal, or_, set_result, if_then_else
from .expressions import Expr
from .statements import Statement

MAX_NEIGHBORS = 8

_rulestring_regex = re.compile(r"^\s*([BS])([0-9]*)\s*/\s*([BS])([0-9]*)\s*$", re.IGNORECASE)

def conways_game_of_life() -> Statement:
    """
    An implementation of Conway's game of life: live cells survive with 2 or
    3 neighbors, dead cells come alive with exactly 3.
    """
    return if_then_else(
        alive(),
        set_result(or_(
            equal(neighbors(), const_u32(2)),
            equal(neighbors(), const_u32(3)),
        )),
        set_result(equal(neighbors(), const_u32(3))),
    )

def _validate_counts(counts: Iterable[int], name: str) -> List[int]:
    result = sorted(set(counts))

    for count in result:
        if count < 0 or count > MAX_NEIGHBORS:
            raise ValueError(f"{name} count {count} is outside of 0..{MAX_NEIGHBORS}!")

    return result

def neighbor_count_in(counts: Iterable[int]) -> Expr:
    """
    An expression which is 1 when the neighbor count is one of `counts`,
    written as a chain of `|` over equality tests. An empty set is always 0.
    """
    counts = list(counts)

    if len(counts) == 0:
        return const_u32(0)

    result = equal(neighbors(), const_u32(counts[0]))

    for count in counts[1:]:
        result = or_(result, equal(neighbors(), const_u32(count)))

    return result

def life_like(birth: Iterable[int], survival: Iterable[int]) -> Statement:
    """
    Build a life-like rule.

    Args:
        birth (`Iterable[int]`): Neighbor counts that bring a dead cell to life.
        survival (`Iterable[int]`): Neighbor counts that keep a live cell alive.

    Returns:
        `Statement`: The rule as a statement tree.
    """
    birth_counts = _validate_counts(birth, "Birth")
    survival_counts = _validate_counts(survival, "Survival")

    return if_then_else(
        alive(),
        set_result(neighbor_count_in(survival_counts)),
        set_result(neighbor_count_in(birth_counts)),
    )

def parse_rulestring(rulestring: str) -> Statement:
    """
    Parse a rule in B/S notation, like "B3/S23" for Conway's game of life or
    "B36/S23" for HighLife. The two halves may come in either order.
    """
    match = _rulestring_regex.match(rulestring)

    if match is None:
        raise ValueError(f"Invalid rulestring '{rulestring}', expected something like 'B3/S23'!")

    first_kind, first_digits, second_kind, second_digits = match.groups()

    if first_kind.upper() == second_kind.upper():
        raise ValueError(f"Invalid rulestring '{rulestring}', needs one 'B' and one 'S' part!")

    parts = {
        first_kind.upper(): [int(digit) for digit in first_digits],
        second_kind.upper(): [int(digit) for digit in second_digits],
    }

    return life_like(parts["B"], parts["S"])

_rulesets: Dict[str, Callable[[], Statement]] = {}

def register_ruleset(name: str, factory: Callable[[], Statement]) -> None:
    if name in _rulesets:
        raise ValueError(f"Ruleset '{name}' is already registered!")

    _rulesets[name] = factory

def get_ruleset(name: str) -> Statement:
    if name not in _rulesets:
        raise KeyError(f"Unknown ruleset '{name}', known rulesets are: {', '.join(list_rulesets())}")

    return _rulesets[name]()

def list_rulesets() -> List[str]:
    return sorted(_rulesets.keys())

def has_ruleset(name: str) -> bool:
    return name in _rulesets

register_ruleset("conway", conways_game_of_life)
register_ruleset("highlife", lambda: parse_rulestring("B36/S23"))
register_ruleset("seeds", lambda: parse_rulestring("B2/S"))
register_ruleset("day_and_night", lambda: parse_rulestring("B3678/S34678"))

def ruleset_from_string(text: str) -> Statement:
    """
    Look a rule up by registry name, falling back to B/S rulestring parsing.
    """
    if has_ruleset(text):
        return get_ruleset(text)

    try:
        return parse_rulestring(text)
    except ValueError as err:
        raise ValueError(f"'{text}' is neither a known ruleset ({', '.join(list_rulesets())}) nor a valid rulestring!") from err
