# valuegraph/core/engine.py
from __future__ import annotations
import logging
from typing import List
from .node import Node

logger = logging.getLogger(__name__)

def linearize(root: Node) -> List[Node]:
    """
    Topological order of the dependency closure of `root`.

    Args:
        root: any Node; its operands are followed recursively.

    Returns:
        list of Nodes where every node comes after all of its operands and
        `root` is last. Each node appears exactly once.

    Notes:
        - Depth-first postorder with a visited set keyed by node id.
        - Operands are walked left to right: the first operand's subgraph is
          finished before the second operand is entered.
        - A node that was already visited is skipped together with its
          subgraph, so shared nodes (diamonds, `x + x`) are emitted once.
        - Uses an explicit stack instead of recursion; the order is the same
          as the recursive formulation but depth is not bounded by
          sys.getrecursionlimit().
    """
    if not isinstance(root, Node):
        raise TypeError(f"linearize expects a Node, got {type(root)}")

    order: List[Node] = []
    visited = set()
    # (node, expanded): expanded=True means all operands are already emitted
    stack = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            order.append(node)
            continue
        if node.id in visited:
            continue
        visited.add(node.id)
        stack.append((node, True))
        # pushed in reverse so the first operand is popped first
        for operand in reversed(node.operands):
            if operand.id not in visited:
                stack.append((operand, False))

    logger.debug("Linearized node %d: %d nodes in closure", root.id, len(order))
    return order

def reverse_topological(root: Node) -> List[Node]:
    """
    Same nodes as linearize(root), root first.
    This is the order a backward sweep visits them in.
    """
    order = linearize(root)
    order.reverse()
    return order
