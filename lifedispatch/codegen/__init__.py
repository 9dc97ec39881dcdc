from .expressions import Expr, Const, Alive, NeighborCount
from .expressions import GreaterThan, GreaterOrEqual, LessThan, LessOrEqual, Equal
from .expressions import And, Or
from .expressions import ALIVE_NAME, NEIGHBORS_NAME, U32_MAX

from .statements import Statement, Noop, SetResult, IfThenElse
from .statements import RESULT_NAME, to_shader

from .builder import as_expr, const_u32, alive, neighbors
from .builder import gt, gte, lt, lte, equal, and_, or_
from .builder import void, set_result, if_then_else

from .rulesets import conways_game_of_life, life_like, parse_rulestring, neighbor_count_in
from .rulesets import register_ruleset, get_ruleset, list_rulesets, has_ruleset, ruleset_from_string

from .reference import evaluate_expr, evaluate_statement, count_neighbors, step

from .abreviations import *
