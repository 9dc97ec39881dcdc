from typing import Any
from typing import ClassVar

import dataclasses

import numpy as np

U32_MAX = 2**32 - 1

ALIVE_NAME = "is_alive"
NEIGHBORS_NAME = "num_neighbors"

def is_integer(value: Any) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False

    return isinstance(value, int) or np.issubdtype(type(value), np.integer)

@dataclasses.dataclass(frozen=True)
class Expr:
    """
    An expression of the rule language. Expressions do arithmetic and
    comparisons between unsigned constants, whether the current cell is alive
    and the number of live neighbors it has. Every expression evaluates to a
    `u32` in the generated wgsl.
    """

    def to_shader(self) -> str:
        """
        Convert the expression to an equivalent wgsl expression. The result is
        not a valid wgsl program, only a fragment that statements combine.
        """
        raise NotImplementedError()

    def __post_init__(self) -> None:
        if type(self).to_shader is Expr.to_shader:
            raise TypeError(f"{type(self).__name__} is abstract, build one of its subclasses instead!")

@dataclasses.dataclass(frozen=True)
class Const(Expr):
    value: int

    def __post_init__(self) -> None:
        super().__post_init__()

        if not is_integer(self.value):
            raise ValueError(f"Const value must be an integer, got {self.value!r} of type {type(self.value)}!")

        if self.value < 0 or self.value > U32_MAX:
            raise ValueError(f"Const value {self.value} does not fit in a u32!")

        # numpy scalars are stored as plain ints so equal trees compare equal
        object.__setattr__(self, "value", int(self.value))

    def to_shader(self) -> str:
        return f"{self.value}u"

@dataclasses.dataclass(frozen=True)
class Alive(Expr):
    def to_shader(self) -> str:
        return ALIVE_NAME

@dataclasses.dataclass(frozen=True)
class NeighborCount(Expr):
    def to_shader(self) -> str:
        return NEIGHBORS_NAME

@dataclasses.dataclass(frozen=True)
class BinaryExpr(Expr):
    lhs: Expr
    rhs: Expr

    operator: ClassVar[str] = ""

    def __post_init__(self) -> None:
        super().__post_init__()

        if not self.operator:
            raise TypeError(f"{type(self).__name__} is abstract, build one of its subclasses instead!")

        for side in (self.lhs, self.rhs):
            if not isinstance(side, Expr):
                raise TypeError(f"Expected an Expr operand, got {type(side)}! Use the builder functions to wrap integers.")

@dataclasses.dataclass(frozen=True)
class Comparison(BinaryExpr):
    """
    wgsl has no implicit bool to u32 conversion, so the comparison result is
    cast before it can meet `&` or `|`.
    """

    def to_shader(self) -> str:
        return f"u32(({self.lhs.to_shader()}) {self.operator} ({self.rhs.to_shader()}))"

@dataclasses.dataclass(frozen=True)
class GreaterThan(Comparison):
    operator: ClassVar[str] = ">"

@dataclasses.dataclass(frozen=True)
class GreaterOrEqual(Comparison):
    operator: ClassVar[str] = ">="

@dataclasses.dataclass(frozen=True)
class LessThan(Comparison):
    operator: ClassVar[str] = "<"

@dataclasses.dataclass(frozen=True)
class LessOrEqual(Comparison):
    operator: ClassVar[str] = "<="

@dataclasses.dataclass(frozen=True)
class Equal(Comparison):
    operator: ClassVar[str] = "=="

@dataclasses.dataclass(frozen=True)
class BitwiseExpr(BinaryExpr):
    """
    Combines two 0/1 values. Both sides are always evaluated, wgsl has no
    lazy `&` or `|`.
    """

    def to_shader(self) -> str:
        return f"(({self.lhs.to_shader()}) {self.operator} ({self.rhs.to_shader()}))"

@dataclasses.dataclass(frozen=True)
class And(BitwiseExpr):
    operator: ClassVar[str] = "&"

@dataclasses.dataclass(frozen=True)
class Or(BitwiseExpr):
    operator: ClassVar[str] = "|"
