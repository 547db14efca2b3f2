# valuegraph/core/node.py
from __future__ import annotations
import numbers
import numpy as np
from typing import Any, Optional, Tuple

from ..config import get_config
from . import tape as tape_mod  # module access for use_tape() compatibility
from .op import OP_TYPES, Op, op_operands, op_symbol


def as_scalar(value: Any):
    """
    Convert a real number to the configured NumPy scalar type.

    Accepts Python and NumPy real scalars (and 0-d arrays). Booleans,
    strings, sequences and multi-element arrays are rejected: nodes hold
    scalars only.
    """
    if isinstance(value, np.ndarray):
        if value.ndim != 0:
            raise TypeError(f"Node only accepts scalars, but got an array of shape {value.shape}")
        value = value[()]
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise TypeError(
            f"Node only accepts real scalars (int, float, numpy floating/integer), "
            f"but got {type(value)}"
        )
    try:
        return get_config().scalar_type(float(value))
    except OverflowError:
        raise TypeError(f"Node value {value!r} is too large for a float") from None


class Node:
    """
    One scalar value on the computation graph plus the operation that made it.

    Attributes
    ----------
    id : int
        Process-unique identity, increasing in construction order (read-only).
    data : numpy floating scalar
        Forward value. Mutable in place without changing identity.
    grad : numpy floating scalar
        Gradient slot, zero at construction. Nothing in this package writes it.
    op : Add | Sub | Mul | Tanh | None
        Operation and operand references that produced this node (read-only).
        None marks a leaf.
    name : Optional[str]
        Optional debug/pretty-print name.

    Nodes compare and hash by identity, so a node shared by several parents
    is always the same dictionary/set key.
    """

    __array_ufunc__ = None  # makes `np.float64(2.0) * node` defer to Node.__rmul__

    def __init__(self, data: Any, op: Optional[Op] = None, *, name: Optional[str] = None):
        if op is not None and not isinstance(op, OP_TYPES):
            raise TypeError(f"op must be one of {[t.__name__ for t in OP_TYPES]} or None, got {type(op)}")
        for operand in op_operands(op):
            if not isinstance(operand, Node):
                raise TypeError(f"operands must be Node, got {type(operand)}")

        self.data = as_scalar(data)
        self.grad = get_config().scalar_type(0.0)
        self.name = name
        self._op = op
        self._id = tape_mod.next_id()

        tape_mod.global_tape.push_node(self)

    @property
    def id(self) -> int:
        return self._id

    @property
    def op(self) -> Optional[Op]:
        return self._op

    @property
    def operands(self) -> Tuple["Node", ...]:
        """Nodes this one was computed from, left to right; empty for a leaf."""
        return op_operands(self._op)

    @property
    def symbol(self) -> str:
        return op_symbol(self._op)

    @property
    def is_leaf(self) -> bool:
        return self._op is None

    def label(self) -> str:
        """One-line summary used by renderers: id, data, grad and op symbol."""
        return f"{self.id} | data={self.data} grad={self.grad} op={self.symbol}"

    def __repr__(self):
        op = self.symbol or "leaf"
        return f"Node(id={self.id}, data={float(self.data)!r}, op={op!r}, name={self.name!r})"

    # Operator overloading for arithmetic operations
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)

    def tanh(self):
        from ..ops.transcendental import tanh
        return tanh(self)


def leaf(value: Any, name: Optional[str] = None) -> Node:
    """Create an input/constant node: op=None, grad=0, fresh id."""
    return Node(value, name=name)
