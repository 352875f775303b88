"""
Strength validation for shadercolor pipelines.

Pipeline methods take a single adjustment strength. The decorator here binds
the call to the method's signature, checks that strength and hands the method
a plain float. The conversion functions themselves never validate values.
"""

from __future__ import annotations

import inspect
import math
import numbers
from collections.abc import Callable
from functools import wraps
from typing import Any

# Type alias for callables
F = Callable[..., Any]

_SUGGESTIONS = {
    "contrast": " Use 0.0 for no change, >0.0 for more contrast, <0.0 to flatten.",
    "exposure": " Use 0.0 for no change, >0.0 to brighten, <0.0 to darken.",
}


def check_strength(name: str, value: Any, min_val: float, max_val: float) -> float:
    """
    Validate one adjustment strength and return it as a float.

    Accepts Python and NumPy real scalars; bools are refused since they are
    never a meaningful strength.

    Raises:
        TypeError: If value is not a real number
        ValueError: If value is NaN, infinite or outside [min_val, max_val]
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(
            f"{name} must be a number, got {type(value).__name__}. "
            f"Provide a numeric value (int or float)."
        )

    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}.")
    if not min_val <= value <= max_val:
        raise ValueError(
            f"{name}={value} is outside valid range [{min_val}, {max_val}].{_SUGGESTIONS.get(name, '')}"
        )
    return value


def validate_range(min_val: float, max_val: float, param_name: str) -> Callable[[F], F]:
    """
    Decorator validating the strength argument named ``param_name``.

    The argument is found by binding the call to the wrapped function's
    signature, so it is checked whether passed positionally or by keyword.

    Example:
        >>> @validate_range(-1.0, 1.0, "contrast")
        ... def contrast(self, contrast: float) -> Self:
        ...     self._operations.append(("contrast", contrast))
        ...     return self
    """

    def decorator(func: F) -> F:
        signature = inspect.signature(func)
        if param_name not in signature.parameters:
            raise TypeError(f"{func.__qualname__} has no parameter named {param_name!r}")

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            bound = signature.bind(*args, **kwargs)
            if param_name in bound.arguments:
                bound.arguments[param_name] = check_strength(
                    param_name, bound.arguments[param_name], min_val, max_val
                )
            return func(*bound.args, **bound.kwargs)

        return wrapper  # type: ignore

    return decorator
