# scalar_aad/core/engine.py
from __future__ import annotations
import logging
from typing import List

import numpy as np

from .config import DTYPE, ROOT_SEED, NUMERIC_ERRSTATE
from .node import Node
from .rules import RULES

logger = logging.getLogger(__name__)


def topological_order(root: Node) -> List[Node]:
    """
    Every node reachable from `root`, each one placed after all of its operands.

    Depth-first post-order: a node is appended only once all of its operands
    have been appended. Visitedness is keyed on id(), never on value. The DFS
    keeps an explicit stack so long chains do not hit the recursion limit.
    """
    order: List[Node] = []
    visited = set()
    stack = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            order.append(node)
            continue
        if id(node) in visited:
            continue
        visited.add(id(node))
        stack.append((node, True))
        # reversed so operands are visited left to right
        for child in reversed(node.operands):
            if id(child) not in visited:
                stack.append((child, False))
    return order


def backward(root: Node) -> None:
    """
    Run a single reverse pass from `root`.

    Steps:
        1) root.adj := 1.0 (the only adjoint ever overwritten)
        2) topologically order the nodes reachable from root
        3) walk that order backwards, running each node's rule exactly once:
               p.adj += out.adj * (∂out/∂p)

    Notes:
        - All other adjoints are accumulated into, not reset. Calling this twice
          on the same graph adds the second pass on top of the first; use
          `zero_grad(root)` in between for a fresh result.
        - Nodes not reachable from root are left untouched.
    """
    root.adj = DTYPE(ROOT_SEED)
    topo = topological_order(root)
    logger.debug("reverse pass over %d nodes from %r", len(topo), root)

    processed = set()
    with np.errstate(**NUMERIC_ERRSTATE):
        for node in reversed(topo):
            if id(node) in processed:
                continue
            processed.add(id(node))
            RULES[node.op](node)


def zero_grad(root: Node) -> None:
    """
    Set the adjoint of every node reachable from `root` to zero.
    """
    for node in topological_order(root):
        node.adj = DTYPE(0.0)
