from typing import Union

import numpy as np

from .expressions import Expr, Const, Alive, NeighborCount, is_integer
from .expressions import GreaterThan, GreaterOrEqual, LessThan, LessOrEqual, Equal
from .expressions import And, Or
from .statements import Statement, Noop, SetResult, IfThenElse

ExprLike = Union[Expr, int, np.integer]

def as_expr(value: ExprLike) -> Expr:
    if isinstance(value, Expr):
        return value

    if is_integer(value):
        return Const(value)

    raise TypeError(f"Expected an Expr or an integer, got {value!r} of type {type(value)}!")

def as_statement(value: Statement) -> Statement:
    if not isinstance(value, Statement):
        raise TypeError(f"Expected a Statement, got {value!r} of type {type(value)}!")

    return value

def const_u32(value: int) -> Const:
    return Const(value)

def alive() -> Alive:
    return Alive()

def neighbors() -> NeighborCount:
    return NeighborCount()

def gt(lhs: ExprLike, rhs: ExprLike) -> GreaterThan:
    return GreaterThan(as_expr(lhs), as_expr(rhs))

def gte(lhs: ExprLike, rhs: ExprLike) -> GreaterOrEqual:
    return GreaterOrEqual(as_expr(lhs), as_expr(rhs))

def lt(lhs: ExprLike, rhs: ExprLike) -> LessThan:
    return LessThan(as_expr(lhs), as_expr(rhs))

def lte(lhs: ExprLike, rhs: ExprLike) -> LessOrEqual:
    return LessOrEqual(as_expr(lhs), as_expr(rhs))

def equal(lhs: ExprLike, rhs: ExprLike) -> Equal:
    return Equal(as_expr(lhs), as_expr(rhs))

def and_(lhs: ExprLike, rhs: ExprLike) -> And:
    return And(as_expr(lhs), as_expr(rhs))

def or_(lhs: ExprLike, rhs: ExprLike) -> Or:
    return Or(as_expr(lhs), as_expr(rhs))

def void() -> Noop:
    return Noop()

def set_result(expr: ExprLike) -> SetResult:
    return SetResult(as_expr(expr))

def if_then_else(condition: ExprLike, if_true_then: Statement, if_false_then: Statement) -> IfThenElse:
    return IfThenElse(
        as_expr(condition),
        as_statement(if_true_then),
        as_statement(if_false_then)
    )
