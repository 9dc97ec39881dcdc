"""
A numpy evaluator for rule trees. It gives every node the same meaning the
generated wgsl has (u32 values, comparisons produce 0 or 1, `&`/`|` are
bitwise) so rules can be checked on the CPU without a device.
"""

import numpy as np

from .expressions import Expr, Const, Alive, NeighborCount
from .expressions import GreaterThan, GreaterOrEqual, LessThan, LessOrEqual, Equal
from .expressions import And, Or
from .statements import Statement, Noop, SetResult, IfThenElse

_comparison_funcs = {
    GreaterThan: np.greater,
    GreaterOrEqual: np.greater_equal,
    LessThan: np.less,
    LessOrEqual: np.less_equal,
    Equal: np.equal,
}

_bitwise_funcs = {
    And: np.bitwise_and,
    Or: np.bitwise_or,
}

def evaluate_expr(expr: Expr, alive: np.ndarray, neighbors: np.ndarray) -> np.ndarray:
    """
    Evaluate an expression for every cell.

    Args:
        expr (`Expr`): The expression.
        alive (`np.ndarray`): 0/1 (or boolean) alive state of each cell.
        neighbors (`np.ndarray`): Live neighbor count of each cell, same shape as `alive`.

    Returns:
        `np.ndarray`: A uint32 array of the same shape.
    """
    alive = np.asarray(alive).astype(np.uint32)
    neighbors = np.asarray(neighbors).astype(np.uint32)

    if alive.shape != neighbors.shape:
        raise ValueError(f"Shape mismatch between alive {alive.shape} and neighbors {neighbors.shape}!")

    return _evaluate_expr(expr, alive, neighbors)

def _evaluate_expr(expr: Expr, alive: np.ndarray, neighbors: np.ndarray) -> np.ndarray:
    if isinstance(expr, Const):
        return np.full(alive.shape, expr.value, dtype=np.uint32)

    if isinstance(expr, Alive):
        return alive

    if isinstance(expr, NeighborCount):
        return neighbors

    expr_type = type(expr)

    if expr_type in _comparison_funcs:
        lhs = _evaluate_expr(expr.lhs, alive, neighbors)
        rhs = _evaluate_expr(expr.rhs, alive, neighbors)
        return _comparison_funcs[expr_type](lhs, rhs).astype(np.uint32)

    if expr_type in _bitwise_funcs:
        lhs = _evaluate_expr(expr.lhs, alive, neighbors)
        rhs = _evaluate_expr(expr.rhs, alive, neighbors)
        return _bitwise_funcs[expr_type](lhs, rhs).astype(np.uint32)

    raise TypeError(f"Unsupported expression {expr!r}!")

def evaluate_statement(statement: Statement, alive: np.ndarray, neighbors: np.ndarray) -> np.ndarray:
    """
    Run a statement for every cell and return the value of `result`, which
    starts out as 0 the same way the compute shader declares it.
    """
    alive = np.asarray(alive).astype(np.uint32)
    neighbors = np.asarray(neighbors).astype(np.uint32)

    if alive.shape != neighbors.shape:
        raise ValueError(f"Shape mismatch between alive {alive.shape} and neighbors {neighbors.shape}!")

    result = np.zeros(alive.shape, dtype=np.uint32)
    _run_statement(statement, alive, neighbors, result, np.ones(alive.shape, dtype=bool))

    return result

def _run_statement(statement: Statement, alive: np.ndarray, neighbors: np.ndarray, result: np.ndarray, mask: np.ndarray) -> None:
    if isinstance(statement, Noop):
        return

    if isinstance(statement, SetResult):
        value = _evaluate_expr(statement.expr, alive, neighbors)
        result[mask] = value[mask]
        return

    if isinstance(statement, IfThenElse):
        condition = _evaluate_expr(statement.condition, alive, neighbors) != 0
        _run_statement(statement.if_true_then, alive, neighbors, result, mask & condition)
        _run_statement(statement.if_false_then, alive, neighbors, result, mask & ~condition)
        return

    raise TypeError(f"Unsupported statement {statement!r}!")

def count_neighbors(grid: np.ndarray) -> np.ndarray:
    """
    Count the live Moore neighbors of every cell of a 2D grid. The grid wraps
    around at the edges.
    """
    grid = (np.asarray(grid) != 0).astype(np.uint32)

    if grid.ndim != 2:
        raise ValueError(f"Expected a 2D grid, got {grid.ndim} dimensions!")

    return sum(
        np.roll(np.roll(grid, dy, axis=0), dx, axis=1)
        for dy in (-1, 0, 1)
        for dx in (-1, 0, 1)
        if (dy, dx) != (0, 0)
    ).astype(np.uint32)

def step(grid: np.ndarray, statement: Statement) -> np.ndarray:
    """
    Advance a 2D grid by one generation. A cell is alive in the next
    generation when the rule leaves a non-zero `result`.
    """
    grid = (np.asarray(grid) != 0).astype(np.uint32)
    result = evaluate_statement(statement, grid, count_neighbors(grid))

    return (result != 0).astype(np.uint32)
