"""
##############################
Typing (:mod:`dualnum.typing`)
##############################

This module describes which numbers can serve as the components of a
:class:`~dualnum.autodiff.Dual`.

A component needs the field operations, an order, an absolute value, and the
elementary functions of :mod:`dualnum.function`. The built-in numbers, mpmath reals,
and numpy arrays and scalars have all of these. Any other type provides the
elementary functions through :class:`SupportsElementary`.

.. autoclass:: Scalar
    :show-inheritance:
    :no-members:

.. autoclass:: Real
    :show-inheritance:
    :no-members:

.. autoclass:: SupportsElementary
    :show-inheritance:
    :no-members:

.. autoclass:: ElementaryReal
    :show-inheritance:
    :no-members:

.. py:type:: Elementary

    Union of the types accepted as components of a dual number.

"""

from abc import abstractmethod
from collections.abc import Callable
from typing import Any, Protocol, Self, SupportsAbs

import mpmath
import numpy as np


class Scalar(Protocol):
    """Protocol for numbers closed under the four arithmetic operations.

    Both operands may be swapped, and either may be a plain :class:`int`, since the
    differentiation rules mix components with integer constants such as ``2`` in
    ``grad / (2 * sqrt(x))``. Integer powers are required for the constant 1, which
    is computed as ``x**0``.
    """

    __slots__ = ()

    @abstractmethod
    def __add__(self, rhs: Self | int) -> Self: ...

    @abstractmethod
    def __radd__(self, lhs: Self | int) -> Self: ...

    @abstractmethod
    def __sub__(self, rhs: Self | int) -> Self: ...

    @abstractmethod
    def __rsub__(self, lhs: Self | int) -> Self: ...

    @abstractmethod
    def __mul__(self, rhs: Self | int) -> Self: ...

    @abstractmethod
    def __rmul__(self, lhs: Self | int) -> Self: ...

    @abstractmethod
    def __truediv__(self, rhs: Self | int) -> Self: ...

    @abstractmethod
    def __rtruediv__(self, lhs: Self | int) -> Self: ...

    @abstractmethod
    def __pow__(self, rhs: int) -> Self: ...

    @abstractmethod
    def __neg__(self) -> Self: ...

    @abstractmethod
    def __pos__(self) -> Self: ...


class Real(Scalar, SupportsAbs, Protocol):
    """Protocol for ordered :class:`Scalar` with an absolute value.

    The derivative of ``abs`` needs the sign of the component, hence the order.
    """

    __slots__ = ()

    @abstractmethod
    def __lt__(self, rhs: Self) -> bool: ...

    @abstractmethod
    def __gt__(self, rhs: Self) -> bool: ...


class SupportsElementary(Protocol):
    """Protocol for numbers that evaluate the elementary functions themselves.

    Every function of :mod:`dualnum.function` called with such a number `x` returns
    ``type(x)._dualnum_overload_(x, fun, *args)``, where `fun` is the public function
    object, for instance :func:`dualnum.function.exp`, and `args` are the arguments
    of the call. Returning ``NotImplemented`` makes the call raise
    :exc:`TypeError`.
    """

    __slots__ = ()

    @abstractmethod
    def _dualnum_overload_(self, fun: Callable[..., Any], *args: Any) -> Any: ...


class ElementaryReal(Real, SupportsElementary, Protocol):
    """Protocol for user-defined real numbers usable as components of a dual
    number."""

    __slots__ = ()


type Elementary = float | int | mpmath.mpf | np.ndarray | np.generic | ElementaryReal
