# scalar_aad/core/rules.py
"""
Local derivative rules, one per operator tag.

Each rule reads the node's own (already final) adjoint and accumulates
weighted contributions into its operands' adjoints:

    p.adj += out.adj * (∂out/∂p)

Rules only ever add to an operand adjoint, so a node used by several
consumers ends up with the sum of their contributions.
"""
from __future__ import annotations
import logging
from typing import Callable, Dict
import numpy as np

from .node import Node, Op

logger = logging.getLogger(__name__)


def _noop(out: Node) -> None:
    return None


def _add(out: Node) -> None:
    a, b = out.operands
    a.adj += out.adj
    b.adj += out.adj


def _add_scalar(out: Node) -> None:
    (a,) = out.operands
    a.adj += out.adj


def _mul(out: Node) -> None:
    a, b = out.operands
    a.adj += b.val * out.adj
    b.adj += a.val * out.adj


def _pow(out: Node) -> None:
    a, b = out.operands
    if a.val != 0:
        a.adj += b.val * np.power(a.val, b.val - 1.0) * out.adj
    if a.val > 0:
        b.adj += np.log(a.val) * out.val * out.adj
    else:
        # log(a) undefined: the exponent term is dropped, not an error
        logger.debug("Skipping ln(base) for base=%f <= 0 in pow backward", a.val)


def _relu(out: Node) -> None:
    (a,) = out.operands
    if a.val > 0:
        a.adj += out.adj


RULES: Dict[Op, Callable[[Node], None]] = {
    Op.LEAF: _noop,
    Op.SCALAR: _noop,
    Op.NEG: _noop,
    Op.ADD: _add,
    Op.ADD_SCALAR: _add_scalar,
    Op.MUL: _mul,
    Op.POW: _pow,
    Op.RELU: _relu,
}
