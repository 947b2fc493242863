# scalar_aad/ops/activations.py
from ..core.node import Node, Op
from .arithmetic import _check_node


def relu(x):
    """
    Rectifier: out.val = x.val if x.val > 0 else 0.
    Same strict test as the reverse rule in core.rules, so nan maps to 0.
    """
    _check_node(x, "operand")
    return Node._make(x.val if x.val > 0 else 0.0, Op.RELU, (x,))
