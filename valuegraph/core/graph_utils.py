"""
Computation graph utilities.

Print and analyze the structure of the graph reachable from a root node.
All functions walk the root's dependency closure in topological order.
"""

import logging
from collections import Counter
from typing import Dict, List, Optional, Tuple

import numpy as np

from ..config import get_config
from .engine import linearize
from .node import Node

logger = logging.getLogger(__name__)


def trace(root: Node) -> Tuple[List[Node], List[Tuple[Node, Node]]]:
    """
    Collect the nodes and edges of a root's dependency closure.

    Args:
        root: node to start from

    Returns:
        (nodes, edges): nodes in topological order, and one
        (operand, result) pair per operand reference. `x + x`
        therefore yields two edges from x.
    """
    nodes = linearize(root)
    edges = [(operand, node) for node in nodes for operand in node.operands]
    return nodes, edges


def get_graph_stats(root: Node) -> Dict:
    """
    Collect statistics of the computation graph (no printing).

    Returns:
        dict with node/edge counts, fan-in/fan-out, depth and the
        number of nodes per operation symbol (leaves under "leaf")
    """
    nodes, edges = trace(root)
    n_nodes = len(nodes)

    # fan-in: operand references per node
    fan_ins = [len(node.operands) for node in nodes]

    # fan-out: how often each node is used as an operand
    fan_out_by_id = Counter(operand.id for operand, _ in edges)
    fan_outs = [fan_out_by_id[node.id] for node in nodes]

    # longest operand chain ending at each node
    depth: Dict[int, int] = {}
    for node in nodes:
        depth[node.id] = 1 + max((depth[o.id] for o in node.operands), default=-1)

    op_counter = Counter(node.symbol or "leaf" for node in nodes)

    return {
        'nodes': n_nodes,
        'edges': len(edges),
        'leaves': op_counter.get("leaf", 0),
        'max_fan_in': max(fan_ins),
        'avg_fan_in': float(np.mean(fan_ins)),
        'max_fan_out': max(fan_outs),
        'avg_fan_out': float(np.mean(fan_outs)),
        'depth': depth[root.id],
        'operations': dict(op_counter),
    }


def print_computation_graph(root: Node, max_nodes: Optional[int] = None) -> None:
    """
    Print the graph structure, one line per node in topological order.

    Args:
        root: node to start from
        max_nodes: maximum number of nodes printed (defaults to the
            configured max_print_nodes)
    """
    if max_nodes is None:
        max_nodes = get_config().max_print_nodes
    if max_nodes < 0:
        raise ValueError(f"max_nodes must be non-negative, got {max_nodes}")

    nodes = linearize(root)

    print("\n" + "=" * 70)
    print("COMPUTATION GRAPH STRUCTURE")
    print("=" * 70)

    for node in nodes[:max_nodes]:
        if node.is_leaf:
            print(f"{node.label()} [leaf/input]")
        else:
            operand_info = ", ".join(f"Node{o.id}" for o in node.operands)
            print(f"{node.label()} <- [{operand_info}]")

    if len(nodes) > max_nodes:
        print(f"... ({len(nodes) - max_nodes} more nodes)")

    print("=" * 70 + "\n")


def analyze_graph_complexity(root: Node) -> str:
    """
    Analyze graph complexity and return a text report.
    """
    stats = get_graph_stats(root)

    report = []
    report.append("Graph Complexity Analysis:")
    report.append(f"  Total nodes: {stats['nodes']:,}")
    report.append(f"  Total connections: {stats['edges']:,}")
    report.append(f"  Depth: {stats['depth']}")
    report.append(f"  Average branching: {stats['avg_fan_out']:.2f}")

    if stats['nodes'] < 1000:
        complexity = "Low"
    elif stats['nodes'] < 10000:
        complexity = "Medium"
    else:
        complexity = "High"

    report.append(f"  Complexity level: {complexity}")

    top_ops = sorted(stats['operations'].items(), key=lambda x: x[1], reverse=True)[:3]
    report.append("  Top operations:")
    for op, count in top_ops:
        pct = 100.0 * count / stats['nodes']
        report.append(f"    - {op}: {pct:.1f}%")

    logger.debug("Complexity report for node %d: %s", root.id, complexity)
    return "\n".join(report)
