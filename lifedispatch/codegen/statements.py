from typing import Union

import dataclasses

from .expressions import Expr

RESULT_NAME = "result"

@dataclasses.dataclass(frozen=True)
class Statement:
    """
    A statement of the rule language. Statements branch on expressions or set
    whether the current cell is alive to the value of an expression. The
    compiled statement is spliced into a compute shader that declares
    `is_alive`, `num_neighbors` and `var result: u32`.
    """

    def to_shader(self) -> str:
        raise NotImplementedError()

    def __post_init__(self) -> None:
        if type(self).to_shader is Statement.to_shader:
            raise TypeError(f"{type(self).__name__} is abstract, build one of its subclasses instead!")

@dataclasses.dataclass(frozen=True)
class Noop(Statement):
    def to_shader(self) -> str:
        return ""

@dataclasses.dataclass(frozen=True)
class SetResult(Statement):
    expr: Expr

    def __post_init__(self) -> None:
        super().__post_init__()

        if not isinstance(self.expr, Expr):
            raise TypeError(f"Expected an Expr, got {type(self.expr)}!")

    def to_shader(self) -> str:
        return f"{RESULT_NAME} = {self.expr.to_shader()};"

@dataclasses.dataclass(frozen=True)
class IfThenElse(Statement):
    condition: Expr
    if_true_then: Statement
    if_false_then: Statement

    def __post_init__(self) -> None:
        super().__post_init__()

        if not isinstance(self.condition, Expr):
            raise TypeError(f"Expected an Expr condition, got {type(self.condition)}!")

        for branch in (self.if_true_then, self.if_false_then):
            if not isinstance(branch, Statement):
                raise TypeError(f"Expected a Statement branch, got {type(branch)}!")

    def to_shader(self) -> str:
        return (
            f"if ({self.condition.to_shader()}) {{ {self.if_true_then.to_shader()} }} "
            f"else {{ {self.if_false_then.to_shader()} }}"
        )

def to_shader(tree: Union[Expr, Statement]) -> str:
    """
    Compile a rule tree to wgsl text.

    Args:
        tree (`Union[Expr, Statement]`): The expression or statement to compile.

    Returns:
        `str`: A wgsl expression for an `Expr`, a wgsl statement for a `Statement`.
    """

    if not isinstance(tree, (Expr, Statement)):
        raise TypeError(f"Expected an Expr or a Statement, got {type(tree)}!")

    return tree.to_shader()
