import lifedispatch.codegen as lc
import lifedispatch.codegen.rulesets as rulesets
from lifedispatch.codegen.abreviations import *

import numpy as np
import pytest

def test_conway_tree():
    expected = If(
        A(),
        Set(Or_(Eq(N(), C(2)), Eq(N(), C(3)))),
        Set(Eq(N(), C(3))),
    )

    assert lc.conways_game_of_life() == expected

def test_conway_shader_text():
    assert lc.conways_game_of_life().to_shader() == (
        "if (is_alive) { result = ((u32((num_neighbors) == (2u))) | (u32((num_neighbors) == (3u)))); } "
        "else { result = u32((num_neighbors) == (3u)); }"
    )

def test_life_like_matches_conway():
    assert lc.life_like([3], [2, 3]) == lc.conways_game_of_life()
    assert lc.life_like({3}, [3, 2, 2]) == lc.conways_game_of_life()

def test_life_like_empty_sets():
    rule = lc.life_like([], [])

    assert rule.to_shader() == "if (is_alive) { result = 0u; } else { result = 0u; }"

def test_life_like_validation():
    with pytest.raises(ValueError):
        lc.life_like([9], [2, 3])

    with pytest.raises(ValueError):
        lc.life_like([3], [-1])

def test_parse_rulestring():
    assert lc.parse_rulestring("B3/S23") == lc.conways_game_of_life()
    assert lc.parse_rulestring("s23/b3") == lc.conways_game_of_life()
    assert lc.parse_rulestring(" B3 / S23 ") == lc.conways_game_of_life()
    assert lc.parse_rulestring("B36/S23") == lc.life_like([3, 6], [2, 3])
    assert lc.parse_rulestring("B2/S") == lc.life_like([2], [])

@pytest.mark.parametrize("rulestring", ["", "B3", "B3/B23", "B3/S2x", "S23", "3/23", "B9/S23"])
def test_parse_rulestring_rejects(rulestring):
    with pytest.raises(ValueError):
        lc.parse_rulestring(rulestring)

def test_registry():
    names = lc.list_rulesets()

    assert names == sorted(names)
    assert {"conway", "highlife", "seeds", "day_and_night"} <= set(names)
    assert lc.get_ruleset("conway") == lc.conways_game_of_life()
    assert lc.get_ruleset("highlife") == lc.parse_rulestring("B36/S23")

    with pytest.raises(KeyError):
        lc.get_ruleset("not_a_rule")

    with pytest.raises(ValueError):
        lc.register_ruleset("conway", lc.conways_game_of_life)

def test_register_ruleset(monkeypatch):
    monkeypatch.setattr(rulesets, "_rulesets", dict(rulesets._rulesets))

    lc.register_ruleset("test_always_alive", lambda: lc.set_result(1))

    assert lc.has_ruleset("test_always_alive")
    assert lc.get_ruleset("test_always_alive") == lc.SetResult(lc.Const(1))
    assert lc.ruleset_from_string("test_always_alive") == lc.SetResult(lc.Const(1))

def test_ruleset_from_string():
    assert lc.ruleset_from_string("conway") == lc.conways_game_of_life()
    assert lc.ruleset_from_string("B36/S23") == lc.get_ruleset("highlife")

    with pytest.raises(ValueError):
        lc.ruleset_from_string("definitely not a rule")

def test_life_like_against_lookup_table():
    birth = [3, 6, 8]
    survival = [2, 4, 5]
    rule = lc.life_like(birth, survival)

    alive = np.repeat([0, 1], 9)
    neighbors = np.tile(np.arange(9), 2)

    expected = np.where(alive == 1, np.isin(neighbors, survival), np.isin(neighbors, birth)).astype(np.uint32)

    assert np.array_equal(lc.evaluate_statement(rule, alive, neighbors), expected)
