# valuegraph/ops/arithmetic.py
import logging
import numpy as np
from ..core.node import Node
from ..core.op import Add, Sub, Mul

logger = logging.getLogger(__name__)

def _as_node(x):
    """Ensure x is a Node; otherwise wrap it as a constant leaf."""
    return x if isinstance(x, Node) else Node(x)

def _binary(x, y, f, op_cls):
    """
    Generic binary primitive:
      - computes out.data = f(x.data, y.data) eagerly
      - tags out with op_cls(x, y), keeping references to both operands
    NaN/inf propagate as in IEEE arithmetic; NumPy warnings are silenced.
    """
    x = _as_node(x)
    y = _as_node(y)
    with np.errstate(all="ignore"):
        data = f(x.data, y.data)
    out = Node(data, op_cls(x, y))
    logger.debug("%s: node %d = node %d %s node %d", op_cls.__name__, out.id, x.id, op_cls.symbol, y.id)
    return out

def add(x, y): return _binary(x, y, lambda a, b: a + b, Add)
def sub(x, y): return _binary(x, y, lambda a, b: a - b, Sub)
def mul(x, y): return _binary(x, y, lambda a, b: a * b, Mul)
