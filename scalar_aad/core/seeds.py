# scalar_aad/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through the graph.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List

from .node import Node
from .engine import backward


def value(x: Any) -> Any:
    """Return the numeric value of a Node; pass through plain numbers unchanged."""
    return x.value if isinstance(x, Node) else x


def _ensure_node(v: Any, *, name: str) -> Node:
    """Wrap a plain value as a leaf Node if needed; otherwise return the Node itself."""
    return v if isinstance(v, Node) else Node(v, name=name)


def _run(y: Any) -> None:
    # f may return a plain number when the output does not depend on the inputs
    if isinstance(y, Node):
        backward(y)


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[Node], Any], x0: float) -> float:
    """
    Derivative of y = f(x) at x0 (single input), from one reverse pass over
    a graph built fresh for this call.
    """
    x = _ensure_node(x0, name="x")
    _run(f(x))
    return x.grad


# ----------------------------- multi-input grads ----------------------------- #
def grads(f: Callable[[Dict[str, Node]], Any],
          inputs: Dict[str, float]) -> Dict[str, float]:
    """
    Gradient of y = f(vars) w.r.t. ALL inputs (dict form).
    Performs ONE reverse pass to obtain all ∂y/∂var simultaneously.

    Parameters
    ----------
    f       : function taking a dict {name: Node} and returning a Node
    inputs  : dict {name: number}

    Returns
    -------
    dict {name: float}  # gradients in the same key order as `inputs`
    """
    nodes: Dict[str, Node] = {k: _ensure_node(v, name=k) for k, v in inputs.items()}
    _run(f(nodes))
    return {k: nodes[k].grad for k in inputs.keys()}


def grads_list(f: Callable[[List[Node]], Any],
               x0_list: Iterable[float]) -> List[float]:
    """
    Same as grads(), but the inputs are provided as a list and the result is a list
    of partials in the same order.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> [4.0, 3.0]
    """
    xs: List[Node] = [_ensure_node(v, name=f"x{i}") for i, v in enumerate(x0_list)]
    _run(f(xs))
    return [x.grad for x in xs]
