# scalar_aad/core/__init__.py

"""
Core public API for the scalar AAD package.

Exports:
    Node              : A float64 scalar in the computation graph.
    Op                : Operator tags carried by nodes.
    backward          : Run a single reverse pass to accumulate first-order adjoints.
    zero_grad         : Reset all adjoints reachable from a node to zero.
    topological_order : Nodes reachable from a root, operands first.
    grad, grads, grads_list : Convenience drivers that build and differentiate f.
    value             : Extract the primal value from a Node.
    configure_logging : Attach a handler to the package logger.
"""

from .node import Node, Op
from .engine import backward, zero_grad, topological_order
from .seeds import grad, grads, grads_list, value
from .config import configure_logging

__all__ = [
    "Node", "Op",
    "backward", "zero_grad", "topological_order",
    "grad", "grads", "grads_list", "value",
    "configure_logging",
]
