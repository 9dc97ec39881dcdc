import ast
import re

import lifedispatch.codegen as lc
import lifedispatch.codegen.expressions as expressions
from lifedispatch.codegen.abreviations import *

import numpy as np
import pytest

_comparisons = [lc.GreaterThan, lc.GreaterOrEqual, lc.LessThan, lc.LessOrEqual, lc.Equal]
_bitwise = [lc.And, lc.Or]

_ast_comparisons = {
    ast.Gt: lc.GreaterThan,
    ast.GtE: lc.GreaterOrEqual,
    ast.Lt: lc.LessThan,
    ast.LtE: lc.LessOrEqual,
    ast.Eq: lc.Equal,
}

def random_expr(rng: np.random.Generator, depth: int) -> lc.Expr:
    if depth == 0 or rng.integers(0, 4) == 0:
        leaf = rng.integers(0, 3)

        if leaf == 0:
            return lc.Const(int(rng.integers(0, 2**32)))
        if leaf == 1:
            return lc.Alive()
        return lc.NeighborCount()

    node_type = (_comparisons + _bitwise)[rng.integers(0, len(_comparisons) + len(_bitwise))]
    return node_type(random_expr(rng, depth - 1), random_expr(rng, depth - 1))

def parse_shader_expr(text: str) -> lc.Expr:
    """Rebuild a tree from compiled text by reading it back as a python expression."""
    python_text = re.sub(r"\b(\d+)u\b", r"\1", text)
    return expr_from_ast(ast.parse(python_text, mode="eval").body)

def expr_from_ast(node: ast.AST) -> lc.Expr:
    if isinstance(node, ast.Constant):
        return lc.Const(node.value)

    if isinstance(node, ast.Name):
        if node.id == lc.ALIVE_NAME:
            return lc.Alive()
        if node.id == lc.NEIGHBORS_NAME:
            return lc.NeighborCount()

    if isinstance(node, ast.Call) and node.func.id == "u32":
        compare = node.args[0]
        assert isinstance(compare, ast.Compare)
        assert len(compare.ops) == 1

        return _ast_comparisons[type(compare.ops[0])](
            expr_from_ast(compare.left),
            expr_from_ast(compare.comparators[0])
        )

    if isinstance(node, ast.BinOp):
        if isinstance(node.op, ast.BitAnd):
            return lc.And(expr_from_ast(node.left), expr_from_ast(node.right))
        if isinstance(node.op, ast.BitOr):
            return lc.Or(expr_from_ast(node.left), expr_from_ast(node.right))

    raise AssertionError(f"Unexpected node {ast.dump(node)}")

def test_leaves():
    assert lc.to_shader(lc.Const(0)) == "0u"
    assert lc.to_shader(lc.Const(42)) == "42u"
    assert lc.to_shader(lc.Const(2**32 - 1)) == "4294967295u"
    assert lc.to_shader(lc.Alive()) == "is_alive"
    assert lc.to_shader(lc.NeighborCount()) == "num_neighbors"

def test_const_suffix():
    rng = np.random.default_rng(0)

    for value in rng.integers(0, 2**32, size=256):
        assert lc.Const(value).to_shader() == f"{int(value)}u"

def test_const_validation():
    with pytest.raises(ValueError):
        lc.Const(-1)

    with pytest.raises(ValueError):
        lc.Const(2**32)

    with pytest.raises(ValueError):
        lc.Const(1.5)

    with pytest.raises(ValueError):
        lc.Const(True)

    assert lc.Const(np.uint8(7)) == lc.Const(7)

def test_comparisons():
    assert Gt(N(), 3).to_shader() == "u32((num_neighbors) > (3u))"
    assert Gte(N(), 3).to_shader() == "u32((num_neighbors) >= (3u))"
    assert Lt(N(), 3).to_shader() == "u32((num_neighbors) < (3u))"
    assert Lte(N(), 3).to_shader() == "u32((num_neighbors) <= (3u))"
    assert Eq(A(), 1).to_shader() == "u32((is_alive) == (1u))"

def test_bitwise_never_short_circuits():
    rng = np.random.default_rng(1)

    assert And_(A(), N()).to_shader() == "((is_alive) & (num_neighbors))"
    assert Or_(A(), N()).to_shader() == "((is_alive) | (num_neighbors))"

    for _ in range(200):
        text = random_expr(rng, 5).to_shader()

        assert "&&" not in text
        assert "||" not in text

def test_reparse_preserves_structure():
    rng = np.random.default_rng(2)

    for _ in range(300):
        expr = random_expr(rng, 6)
        assert parse_shader_expr(expr.to_shader()) == expr

def test_compiled_text_matches_reference():
    rng = np.random.default_rng(3)

    alive = rng.integers(0, 2, size=64).astype(np.uint32)
    neighbors = rng.integers(0, 9, size=64).astype(np.uint32)

    def u32(value):
        return np.asarray(value).astype(np.uint32)

    for _ in range(100):
        expr = random_expr(rng, 4)
        python_text = re.sub(r"\b(\d+)u\b", r"np.uint32(\1)", expr.to_shader())

        compiled_value = eval(python_text, {"np": np, "u32": u32, "is_alive": alive, "num_neighbors": neighbors})
        compiled_value = np.broadcast_to(u32(compiled_value), alive.shape)

        assert np.array_equal(compiled_value, lc.evaluate_expr(expr, alive, neighbors))

def test_statements():
    assert Void().to_shader() == ""
    assert Set(Eq(N(), 3)).to_shader() == "result = u32((num_neighbors) == (3u));"
    assert If(A(), Set(1), Set(0)).to_shader() == "if (is_alive) { result = 1u; } else { result = 0u; }"

def test_if_then_else_keeps_both_branches():
    text = If(A(), Void(), Void()).to_shader()

    assert text == "if (is_alive) {  } else {  }"
    assert "if (" in text
    assert "} else {" in text

    nested = If(A(), If(Gt(N(), 3), Set(0), Void()), Void()).to_shader()
    assert nested.count("else") == 2

def test_builders_wrap_integers():
    assert lc.gt(3, np.int64(4)) == lc.GreaterThan(lc.Const(3), lc.Const(4))
    assert lc.set_result(1) == lc.SetResult(lc.Const(1))

    with pytest.raises(TypeError):
        lc.gt("num_neighbors", 3)

    with pytest.raises(TypeError):
        lc.if_then_else(lc.alive(), lc.set_result(1), None)

def test_to_shader_rejects_other_types():
    with pytest.raises(TypeError):
        lc.to_shader("result = 1u;")

def test_trees_are_immutable():
    expr = lc.gt(lc.neighbors(), 3)

    with pytest.raises(Exception):
        expr.lhs = lc.alive()

@pytest.mark.parametrize("node_type", [
    expressions.Expr,
    expressions.BinaryExpr,
    expressions.Comparison,
    expressions.BitwiseExpr,
    lc.Statement,
])
def test_abstract_nodes_cannot_be_built(node_type):
    args = (lc.Const(1), lc.Const(2)) if issubclass(node_type, expressions.BinaryExpr) else ()

    with pytest.raises(TypeError):
        node_type(*args)

def test_constructors_check_children():
    with pytest.raises(TypeError):
        lc.SetResult("garbage")

    with pytest.raises(TypeError):
        lc.SetResult(lc.Noop())

    with pytest.raises(TypeError):
        lc.IfThenElse(lc.Alive(), None, lc.Noop())

    with pytest.raises(TypeError):
        lc.IfThenElse(lc.Noop(), lc.Noop(), lc.Noop())

    with pytest.raises(TypeError):
        lc.Equal(lc.NeighborCount(), 3)

    with pytest.raises(TypeError):
        lc.Or(lc.SetResult(lc.Const(1)), lc.Alive())

    assert lc.IfThenElse(lc.Alive(), lc.Noop(), lc.Noop()).to_shader() == "if (is_alive) {  } else {  }"
