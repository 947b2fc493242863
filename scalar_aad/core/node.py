# scalar_aad/core/node.py
from __future__ import annotations
import enum
import numbers
from typing import Optional, Tuple
import numpy as np

from .config import DTYPE


class Op(str, enum.Enum):
    """Operator tag of a Node; selects its derivative rule in `core.rules`."""
    LEAF = ""
    SCALAR = "scalar"        # constant wrapped by a *_scalar operation
    NEG = "neg"              # the -1 constant used by negation
    ADD = "+"
    ADD_SCALAR = "+scalar"
    MUL = "*"
    POW = "**"
    RELU = "ReLU"


# operand count per tag
ARITY = {
    Op.LEAF: 0,
    Op.SCALAR: 0,
    Op.NEG: 0,
    Op.ADD: 2,
    Op.ADD_SCALAR: 1,
    Op.MUL: 2,
    Op.POW: 2,
    Op.RELU: 1,
}


def is_real(x) -> bool:
    """True for int/float/numpy reals; bools are not accepted as values."""
    return isinstance(x, numbers.Real) and not isinstance(x, (bool, np.bool_))


class Node:
    """
    One scalar in the computation graph.

    Attributes
    ----------
    val      : np.float64
        Forward value, fixed at construction.
    adj      : np.float64
        Gradient accumulator d(root)/d(this); starts at 0 and is only
        written by the reverse pass in `core.engine`.
    op       : Op
        Operator that produced this node.
    operands : Tuple[Node, ...]
        Inputs of `op`, shared (not owned) with any other node using them.
    name     : Optional[str]
        Optional debug name.
    """

    __slots__ = ("val", "adj", "op", "operands", "name")

    def __init__(self, val, *, name: Optional[str] = None):
        if not is_real(val):
            raise TypeError(
                f"Node only accepts real numeric scalars (int, float), but got {type(val)}"
            )
        self.val = DTYPE(val)
        self.adj = DTYPE(0.0)
        self.op = Op.LEAF
        self.operands: Tuple[Node, ...] = ()
        self.name = name

    @classmethod
    def _make(cls, val, op: Op, operands: Tuple["Node", ...] = ()) -> "Node":
        # used by ops/ only; val is already a computed float
        out = cls.__new__(cls)
        out.val = DTYPE(val)
        out.adj = DTYPE(0.0)
        out.op = op
        out.operands = tuple(operands)
        out.name = None
        return out

    @property
    def value(self) -> float:
        return float(self.val)

    @property
    def grad(self) -> float:
        return float(self.adj)

    @property
    def is_leaf(self) -> bool:
        return not self.operands

    def __repr__(self):
        label = f", name={self.name!r}" if self.name is not None else ""
        op = self.op.value
        if self.op is Op.POW:
            op += f"{self.operands[1].value:f}"
        return f"Node(val={self.value:f}, grad={self.grad:f}, op={op!r}{label})"

    # Operator overloading; raw numbers route to the *_scalar variants
    def __add__(self, other):
        from ..ops.arithmetic import add, add_scalar
        if isinstance(other, Node):
            return add(self, other)
        return add_scalar(self, other) if is_real(other) else NotImplemented

    def __radd__(self, other):
        from ..ops.arithmetic import add_scalar
        return add_scalar(self, other) if is_real(other) else NotImplemented

    def __sub__(self, other):
        from ..ops.arithmetic import sub, sub_scalar
        if isinstance(other, Node):
            return sub(self, other)
        return sub_scalar(self, other) if is_real(other) else NotImplemented

    def __rsub__(self, other):
        from ..ops.arithmetic import rsub_scalar
        return rsub_scalar(other, self) if is_real(other) else NotImplemented

    def __mul__(self, other):
        from ..ops.arithmetic import mul, mul_scalar
        if isinstance(other, Node):
            return mul(self, other)
        return mul_scalar(self, other) if is_real(other) else NotImplemented

    def __rmul__(self, other):
        from ..ops.arithmetic import mul_scalar
        return mul_scalar(self, other) if is_real(other) else NotImplemented

    def __truediv__(self, other):
        from ..ops.arithmetic import div, div_scalar
        if isinstance(other, Node):
            return div(self, other)
        return div_scalar(self, other) if is_real(other) else NotImplemented

    def __rtruediv__(self, other):
        from ..ops.arithmetic import rdiv_scalar
        return rdiv_scalar(other, self) if is_real(other) else NotImplemented

    def __pow__(self, other):
        from ..ops.arithmetic import pow, pow_scalar
        if isinstance(other, Node):
            return pow(self, other)
        return pow_scalar(self, other) if is_real(other) else NotImplemented

    def __rpow__(self, other):
        from ..ops.arithmetic import rpow_scalar
        return rpow_scalar(other, self) if is_real(other) else NotImplemented

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)

    def relu(self):
        from ..ops.activations import relu
        return relu(self)

    def backward(self):
        """Fill `grad` of every node reachable from this one; see `core.engine.backward`."""
        from .engine import backward
        backward(self)
