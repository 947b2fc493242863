# scalar_aad/__init__.py
# Reverse-mode automatic adjoint differentiation over float64 scalars

from .core.node import Node, Op
from .core.engine import backward, zero_grad, topological_order
from .core.seeds import grad, grads, grads_list, value
from .core.config import configure_logging

from . import ops
from .ops import (
    leaf, constant,
    add, add_scalar, sub, sub_scalar,
    mul, mul_scalar, div, div_scalar,
    neg, pow, pow_scalar,
    relu,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    'Node',
    'Op',
    # Engine
    'backward',
    'zero_grad',
    'topological_order',
    # Seeds
    'grad',
    'grads',
    'grads_list',
    'value',
    'configure_logging',
    # Ops
    'ops',
    'leaf',
    'constant',
    'add',
    'add_scalar',
    'sub',
    'sub_scalar',
    'mul',
    'mul_scalar',
    'div',
    'div_scalar',
    'neg',
    'pow',
    'pow_scalar',
    'relu',
]
