# valuegraph/core/__init__.py

"""
Core public API for the valuegraph package.

Exports:
    Node                : Scalar value plus the operation that produced it.
    leaf                : Create an input/constant node.
    Add, Sub, Mul, Tanh : Operation tags carried in Node.op.
    op_symbol           : Display symbol of an operation tag ("" for a leaf).
    Tape                : Construction-order record of nodes.
    global_tape         : The default tape.
    use_tape            : Context manager to temporarily switch the active tape.
    linearize           : Topological order of a root's dependency closure.
    reverse_topological : The same order, root first.
"""

from .op import Add, Sub, Mul, Tanh, op_symbol
from .node import Node, leaf
from .tape import Tape, global_tape, use_tape
from .engine import linearize, reverse_topological

__all__ = [
    "Node", "leaf",
    "Add", "Sub", "Mul", "Tanh", "op_symbol",
    "Tape", "global_tape", "use_tape",
    "linearize", "reverse_topological",
]
