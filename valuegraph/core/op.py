# valuegraph/core/op.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union

@dataclass(frozen=True, eq=False)
class Add:
    """
    Operation tag of a node produced by `a + b`.

    Attributes
    ----------
    a : Node
        Left operand.
    b : Node
        Right operand.
    """
    a: Any
    b: Any
    symbol = "+"

    @property
    def operands(self) -> Tuple[Any, ...]:
        return (self.a, self.b)


@dataclass(frozen=True, eq=False)
class Sub:
    """Operation tag of a node produced by `a - b`."""
    a: Any
    b: Any
    symbol = "-"

    @property
    def operands(self) -> Tuple[Any, ...]:
        return (self.a, self.b)


@dataclass(frozen=True, eq=False)
class Mul:
    """Operation tag of a node produced by `a * b`."""
    a: Any
    b: Any
    symbol = "x"

    @property
    def operands(self) -> Tuple[Any, ...]:
        return (self.a, self.b)


@dataclass(frozen=True, eq=False)
class Tanh:
    """Operation tag of a node produced by `tanh(a)`."""
    a: Any
    symbol = "tanh"

    @property
    def operands(self) -> Tuple[Any, ...]:
        return (self.a,)


# A leaf carries `None` instead of one of these
Op = Union[Add, Sub, Mul, Tanh]

OP_TYPES = (Add, Sub, Mul, Tanh)


def op_symbol(op: Optional[Op]) -> str:
    """Human-readable symbol of an operation tag; empty for a leaf."""
    return "" if op is None else op.symbol


def op_operands(op: Optional[Op]) -> Tuple[Any, ...]:
    """Operands of an operation tag in left-to-right order; empty for a leaf."""
    return () if op is None else op.operands
