# scalar_aad/ops/__init__.py

# Convenience re-exports so users can do: from scalar_aad.ops import mul, relu, ...
from .arithmetic import (
    leaf, constant,
    add, add_scalar, sub, sub_scalar,
    mul, mul_scalar, div, div_scalar,
    neg, pow, pow_scalar,
)
from .activations import relu

__all__ = [
    "leaf", "constant",
    "add", "add_scalar", "sub", "sub_scalar",
    "mul", "mul_scalar", "div", "div_scalar",
    "neg", "pow", "pow_scalar",
    "relu",
]
