# scalar_aad/ops/arithmetic.py
import numpy as np
from ..core.config import NUMERIC_ERRSTATE
from ..core.node import Node, Op, is_real


def _check_node(x, argname):
    if not isinstance(x, Node):
        raise TypeError(f"{argname} must be a Node, but got {type(x)}")
    return x


def _check_scalar(k):
    if not is_real(k):
        raise TypeError(f"scalar operand must be a real number, but got {type(k)}")
    return k


def leaf(x, name=None):
    """Wrap a raw scalar as an input node."""
    return Node(x, name=name)


def constant(k, op=Op.SCALAR):
    """Operand-free node holding the raw scalar of a *_scalar operation."""
    return Node._make(_check_scalar(k), op)


def _binary(x, y, f, tag):
    """
    Generic binary primitive:
      - computes out.val = f(x.val, y.val)
      - records (x, y) as operands; the reverse rule lives in core.rules under `tag`
    """
    _check_node(x, "left operand")
    _check_node(y, "right operand")
    with np.errstate(**NUMERIC_ERRSTATE):
        val = f(x.val, y.val)
    return Node._make(val, tag, (x, y))


def add(x, y): return _binary(x, y, lambda a, b: a + b, Op.ADD)
def mul(x, y): return _binary(x, y, lambda a, b: a * b, Op.MUL)


def _power(a, b):
    # 0 ** -1 -> inf, (-8) ** 0.5 -> nan; _binary silences the numpy warnings
    return np.power(a, b)


def pow(x, y):
    """
    Power:
      out.val = x.val ** y.val

    Local partials (applied in core.rules):
      ∂out/∂x = y * x^(y-1)       skipped when x == 0
      ∂out/∂y = x^y * log(x)      skipped when x <= 0
    """
    return _binary(x, y, _power, Op.POW)


def add_scalar(x, k):
    _check_node(x, "operand")
    _check_scalar(k)
    with np.errstate(**NUMERIC_ERRSTATE):
        val = x.val + k
    return Node._make(val, Op.ADD_SCALAR, (x,))


def mul_scalar(x, k):
    return mul(x, constant(k))


def pow_scalar(x, k):
    return pow(x, constant(k))


def neg(x):
    """Negation as x * (-1); shares the multiply rule."""
    return mul(x, constant(-1.0, Op.NEG))


def sub(x, y):
    return add(x, neg(y))


def sub_scalar(x, k):
    return sub(x, constant(k))


def div(x, y):
    """Division as x * y^-1; y == 0 gives an infinite value, not an error."""
    return mul(x, pow_scalar(y, -1.0))


def div_scalar(x, k):
    return div(x, constant(k))


# Reflected forms for `k - x`, `k / x` and `k ** x` with a raw number on the left
def rsub_scalar(k, x):
    return add_scalar(neg(x), k)


def rdiv_scalar(k, x):
    return div(constant(k), x)


def rpow_scalar(k, x):
    return pow(constant(k), x)
