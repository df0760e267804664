"""
################################################
Mathematical functions (:mod:`dualnum.function`)
################################################

.. currentmodule:: dualnum.function

This module provides the elementary functions used by the dual-number engine. Each
of them accepts

* :class:`float` and :class:`int`, evaluated with :mod:`math`,
* mpmath numbers, evaluated with :mod:`mpmath`,
* numpy arrays and scalars of any floating-point width, evaluated with numpy ufuncs,
* any object whose type defines ``_dualnum_overload_(self, fun, *args)``. The method
  receives the public function object as `fun` and returns the result, or
  ``NotImplemented`` if it does not support `fun`.

:class:`~dualnum.autodiff.Dual` implements ``_dualnum_overload_``, so all the
functions below differentiate their argument when it is a dual number.

Invalid arguments are handled by the underlying library: :mod:`math` raises
:exc:`ValueError`, numpy returns NaN and emits :exc:`RuntimeWarning`, and mpmath may
return a complex number.

Power, exponents, and logarithmic functions
===========================================

.. autosummary::
    :toctree: generated/

    exp
    log
    sqrt

Trigonometric functions
=======================

.. autosummary::
    :toctree: generated/

    sin
    cos
    tan
    asin
    acos
    atan

Hyperbolic functions
====================

.. autosummary::
    :toctree: generated/

    sinh
    cosh
    tanh
    asinh
    acosh
    atanh

Miscellaneous
=============

.. autosummary::
    :toctree: generated/

    sign

"""

import math
from collections.abc import Callable
from typing import Any

import mpmath
import mpmath.ctx_mp_python
import numpy as np

from dualnum.typing import Elementary, SupportsElementary


def _apply(
    fun: Callable,
    x: Elementary | SupportsElementary,
    fmath: Callable[[float], float],
    fmp: Callable[[Any], Any],
    fnp: Callable[[Any], Any],
) -> Any:
    if hook := getattr(type(x), "_dualnum_overload_", None):
        if (res := hook(x, fun, x)) is not NotImplemented:
            return res

        raise TypeError(f"{type(x).__name__} does not support {fun.__name__}")

    match x:
        case mpmath.ctx_mp_python.mpnumeric():
            return fmp(x)

        # np.float64 derives from float, so numpy has to be matched first
        case np.ndarray() | np.generic():
            return fnp(x)

        case float() | int():
            return fmath(x)

        case _:
            raise TypeError(f"unsupported type: {type(x).__name__}")


def _fsign(x: float) -> float:
    if x > 0:
        return 1.0

    if x < 0:
        return -1.0

    return x * 0.0


def exp[T](x: T, /) -> T:
    """Exponential.

    Examples
    --------
    >>> print(format(exp(2), ".6f"))
    7.389056
    >>> from dualnum import Dual
    >>> exp(Dual.variable(0.0))
    Dual(real=1.0, grad=1.0)
    """
    return _apply(exp, x, math.exp, mpmath.exp, np.exp)


def log[T](x: T, /) -> T:
    """Natural logarithm.

    Examples
    --------
    >>> print(format(log(5), ".6f"))
    1.609438
    """
    return _apply(log, x, math.log, mpmath.log, np.log)


def sqrt[T](x: T, /) -> T:
    """Square root.

    Examples
    --------
    >>> print(format(sqrt(2.0), ".6f"))
    1.414214
    """
    return _apply(sqrt, x, math.sqrt, mpmath.sqrt, np.sqrt)


def sin[T](x: T, /) -> T:
    """Sine.

    Examples
    --------
    >>> print(format(sin(1.0), ".6f"))
    0.841471
    """
    return _apply(sin, x, math.sin, mpmath.sin, np.sin)


def cos[T](x: T, /) -> T:
    """Cosine."""
    return _apply(cos, x, math.cos, mpmath.cos, np.cos)


def tan[T](x: T, /) -> T:
    """Tangent."""
    return _apply(tan, x, math.tan, mpmath.tan, np.tan)


def asin[T](x: T, /) -> T:
    """Inverse sine.

    Examples
    --------
    >>> print(format(asin(0.5), ".6f"))
    0.523599
    """
    return _apply(asin, x, math.asin, mpmath.asin, np.arcsin)


def acos[T](x: T, /) -> T:
    """Inverse cosine."""
    return _apply(acos, x, math.acos, mpmath.acos, np.arccos)


def atan[T](x: T, /) -> T:
    """Inverse tangent."""
    return _apply(atan, x, math.atan, mpmath.atan, np.arctan)


def sinh[T](x: T, /) -> T:
    """Hyperbolic sine.

    Examples
    --------
    >>> print(format(sinh(1.0), ".6f"))
    1.175201
    """
    return _apply(sinh, x, math.sinh, mpmath.sinh, np.sinh)


def cosh[T](x: T, /) -> T:
    """Hyperbolic cosine."""
    return _apply(cosh, x, math.cosh, mpmath.cosh, np.cosh)


def tanh[T](x: T, /) -> T:
    """Hyperbolic tangent."""
    return _apply(tanh, x, math.tanh, mpmath.tanh, np.tanh)


def asinh[T](x: T, /) -> T:
    """Inverse hyperbolic sine."""
    return _apply(asinh, x, math.asinh, mpmath.asinh, np.arcsinh)


def acosh[T](x: T, /) -> T:
    """Inverse hyperbolic cosine.

    Examples
    --------
    >>> print(format(acosh(2.0), ".6f"))
    1.316958
    """
    return _apply(acosh, x, math.acosh, mpmath.acosh, np.arccosh)


def atanh[T](x: T, /) -> T:
    """Inverse hyperbolic tangent."""
    return _apply(atanh, x, math.atanh, mpmath.atanh, np.arctanh)


def sign[T](x: T, /) -> T:
    """Sign of `x`.

    Returns 1 for positive `x`, -1 for negative `x`, and `x` itself for zeros and
    NaN. For :class:`int` and :class:`float` the result is always a float.

    Examples
    --------
    >>> sign(-2.5)
    -1.0
    >>> sign(0)
    0.0
    """
    return _apply(sign, x, _fsign, mpmath.sign, np.sign)
