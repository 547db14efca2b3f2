# valuegraph/ops/transcendental.py
import logging
import numpy as np
from ..core.node import Node
from ..core.op import Tanh
from .arithmetic import _as_node

logger = logging.getLogger(__name__)

def tanh(x):
    x = _as_node(x)
    with np.errstate(all="ignore"):
        th = np.tanh(x.data)
    out = Node(th, Tanh(x))
    logger.debug("Tanh: node %d = tanh(node %d)", out.id, x.id)
    return out
