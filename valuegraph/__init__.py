# valuegraph/__init__.py
# Scalar computation graph with topological linearization

import logging

from .config import GraphConfig, get_config, set_config, load_config
from .core.node import Node, leaf
from .core.op import Add, Sub, Mul, Tanh, op_symbol
from .core.tape import Tape, global_tape, use_tape
from .core.engine import linearize, reverse_topological
from .core.graph_utils import (
    trace,
    get_graph_stats,
    print_computation_graph,
    analyze_graph_complexity,
)
from .ops import add, sub, mul, tanh

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Config
    'GraphConfig',
    'get_config',
    'set_config',
    'load_config',
    # Nodes
    'Node',
    'leaf',
    'Add',
    'Sub',
    'Mul',
    'Tanh',
    'op_symbol',
    # Construction
    'add',
    'sub',
    'mul',
    'tanh',
    # Tape
    'Tape',
    'global_tape',
    'use_tape',
    # Traversal
    'linearize',
    'reverse_topological',
    'trace',
    'get_graph_stats',
    'print_computation_graph',
    'analyze_graph_complexity',
]
