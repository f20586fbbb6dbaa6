"""Integrands and integrand adapters.

Functions:
    inverse_sqrt_quartic: f(x) = 1 / sqrt(1 + x⁴), the default integrand
    pointwise: Adapt a scalar float -> float function to tensor inputs
    accepts_tensors: Check whether a callable evaluates tensors elementwise
"""

from collections.abc import Callable
from functools import wraps

import torch
from torch import Tensor


def inverse_sqrt_quartic(x: Tensor) -> Tensor:
    """Evaluate 1 / sqrt(1 + x⁴) elementwise.

    Finite and smooth on the whole real line, with ∫_0^∞ equal to
    Γ(1/4)² / (4√π).
    """
    return torch.rsqrt(1 + x**4)


def pointwise(func: Callable[[float], float]) -> Callable[[Tensor], Tensor]:
    """Wrap a scalar function so it accepts a tensor of points.

    The scalar function is called once per element with a Python float, in
    row-major order.

    Args:
        func: Function of a single float

    Returns:
        Elementwise tensor function with the same dtype as its input

    Example:
        >>> import math
        >>> f = pointwise(math.cos)
        >>> f(torch.zeros(2, 3)).shape
        torch.Size([2, 3])
    """

    @wraps(func)
    def wrapper(x: Tensor) -> Tensor:
        values = [func(v) for v in x.reshape(-1).tolist()]
        return torch.tensor(values, dtype=x.dtype, device=x.device).reshape(x.shape)

    return wrapper


def accepts_tensors(func: Callable, point: float = 0.0) -> bool:
    """Check whether ``func`` maps a tensor of points to matching values.

    ``func`` is called once on a 1 x 2 float64 tensor filled with ``point``.
    Two elements are used because single-element tensors convert silently
    to Python floats, which would let ``math`` functions pass.

    Args:
        func: Candidate integrand
        point: Value to evaluate at, normally inside the integration domain

    Returns:
        True if the call succeeds and its result broadcasts to the input
        shape, False if it fails with TypeError, ValueError or RuntimeError

    Example:
        >>> import math
        >>> accepts_tensors(torch.cos), accepts_tensors(math.cos)
        (True, False)
    """
    x = torch.full((1, 2), point, dtype=torch.float64)
    try:
        values = torch.as_tensor(func(x), dtype=torch.float64)
        torch.broadcast_to(values, x.shape)
    except (TypeError, ValueError, RuntimeError):
        return False
    return True
