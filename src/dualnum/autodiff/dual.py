import operator
from collections.abc import Callable
from typing import Any, Self

import numpy as np

from dualnum import function as dnf
from dualnum.context import getcontext
from dualnum.typing import Elementary, Scalar, SupportsElementary


def _unit[T: Elementary](x: T) -> T | int:
    if getcontext().legacy:
        return abs(dnf.sign(x))

    return 1


def _equal(lhs: Any, rhs: Any) -> bool:
    if isinstance(lhs, np.ndarray) or isinstance(rhs, np.ndarray):
        return np.array_equal(lhs, rhs)

    return bool(lhs == rhs)


class Dual[T: Elementary](Scalar, SupportsElementary):
    r"""Dual number carrying a value and its derivative.

    Parameters
    ----------
    real : T
        Value of the function at the point of evaluation.
    grad : T
        Derivative of `real` with respect to the independent variable.

    Attributes
    ----------
    real : T
    grad : T

    Raises
    ------
    TypeError
        If `real` or `grad` is a dual number.

    See Also
    --------
    dualnum.context

    Notes
    -----
    Instances of this class behave like elements of the ring
    :math:`T[\varepsilon]/(\varepsilon^2)`, where ``Dual(a, b)`` stands for
    :math:`a+b\varepsilon`. Applying an operation to ``Dual.variable(x)`` therefore
    yields the value of the composed function at `x` together with its derivative.

    Dual numbers are values. Every operation, including augmented assignment,
    returns a new instance and leaves its operands untouched.

    `real` and `grad` may be numpy arrays, in which case all operations are performed
    elementwise.

    Examples
    --------
    >>> x = Dual(0.0, 1.0)
    >>> y = x * x + x.sin()
    >>> y
    Dual(real=0.0, grad=1.0)
    >>> (Dual(2.0, 1.0) ** 3).grad
    12.0
    """

    __slots__ = ("real", "grad")
    __array_ufunc__ = None
    real: T
    grad: T

    def __init__(self, real: T, grad: T):
        if isinstance(real, Dual) or isinstance(grad, Dual):
            raise TypeError("nesting Dual is not supported")

        self.real = real
        self.grad = grad

    @classmethod
    def constant(cls, value: T) -> Self:
        """Return ``Dual(value, 0)``."""
        ONE = value**0
        return cls(value, ONE - 1)

    @classmethod
    def variable(cls, value: T) -> Self:
        """Return ``Dual(value, 1)``, the independent variable evaluated at `value`."""
        return cls(value, value**0)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(real={self.real!r}, grad={self.grad!r})"

    def __str__(self) -> str:
        return f"{type(self).__name__}(real={self.real}, grad={self.grad})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented

        return _equal(other.real, self.real) and _equal(other.grad, self.grad)  # type: ignore

    def __add__(self, rhs: Self | T | int) -> Self:
        if not isinstance(rhs, Dual):
            return self.__class__(self.real + rhs, self.grad)

        return self.__class__(self.real + rhs.real, self.grad + rhs.grad)

    def __sub__(self, rhs: Self | T | int) -> Self:
        if not isinstance(rhs, Dual):
            return self.__class__(self.real - rhs, self.grad)

        return self.__class__(self.real - rhs.real, self.grad - rhs.grad)

    def __mul__(self, rhs: Self | T | int) -> Self:
        if not isinstance(rhs, Dual):
            return self.__class__(self.real * rhs, self.grad * rhs)

        grad = self.real * rhs.grad + self.grad * rhs.real
        return self.__class__(self.real * rhs.real, grad)

    def __truediv__(self, rhs: Self | T | int) -> Self:
        if not isinstance(rhs, Dual):
            return self.__class__(self.real / rhs, self.grad / rhs)

        if getcontext().legacy:
            grad = self.real / rhs.grad + self.grad / rhs.real
            return self.__class__(self.real / rhs.real, grad)

        grad = (self.grad * rhs.real - self.real * rhs.grad) / (rhs.real * rhs.real)
        return self.__class__(self.real / rhs.real, grad)

    def __pow__(self, rhs: int) -> Self:
        try:
            rhs = operator.index(rhs)
        except TypeError:
            return NotImplemented

        if rhs < 0:
            return self.__pow__(-rhs).reciprocal()

        if rhs == 0:
            ONE = self.real**0
            return self.__class__(ONE, ONE - 1)

        result = self

        for _ in range(rhs - 1):
            result = result * self

        return result

    def __neg__(self) -> Self:
        if getcontext().legacy:
            return self.__class__(-self.grad, -self.real)

        return self.__class__(-self.real, -self.grad)

    def __pos__(self) -> Self:
        return self.__class__(+self.real, +self.grad)

    def __abs__(self) -> Self:
        if getcontext().legacy:
            return self.__class__(abs(self.real), abs(self.grad) * dnf.sign(self.real))

        return self.__class__(abs(self.real), self.grad * dnf.sign(self.real))

    def __radd__(self, lhs: T | int) -> Self:
        return self.__class__(lhs + self.real, self.grad)

    def __rsub__(self, lhs: T | int) -> Self:
        return self.__class__(lhs - self.real, -self.grad)

    def __rmul__(self, lhs: T | int) -> Self:
        return self.__class__(lhs * self.real, lhs * self.grad)

    def __rtruediv__(self, lhs: T | int) -> Self:
        grad = -lhs * self.grad / (self.real * self.real)
        return self.__class__(lhs / self.real, grad)

    def reciprocal(self) -> Self:
        """Return ``1 / self``."""
        grad = -self.grad / (self.real * self.real)
        return self.__class__(1 / self.real, grad)

    def exp(self) -> Self:
        tmp = dnf.exp(self.real)
        return self.__class__(tmp, self.grad * tmp)

    def ln(self) -> Self:
        """Natural logarithm."""
        return self.__class__(dnf.log(self.real), self.grad / self.real)

    def sqrt(self) -> Self:
        tmp = dnf.sqrt(self.real)
        return self.__class__(tmp, self.grad / (2 * tmp))

    def sin(self) -> Self:
        return self.__class__(dnf.sin(self.real), self.grad * dnf.cos(self.real))

    def cos(self) -> Self:
        return self.__class__(dnf.cos(self.real), -self.grad * dnf.sin(self.real))

    def tan(self) -> Self:
        tmp = dnf.cos(self.real)
        return self.__class__(dnf.tan(self.real), self.grad / (tmp * tmp))

    def asin(self) -> Self:
        x = self.real
        grad = self.grad / dnf.sqrt(_unit(x) - x * x)
        return self.__class__(dnf.asin(x), grad)

    def acos(self) -> Self:
        x = self.real
        grad = -self.grad / dnf.sqrt(_unit(x) - x * x)
        return self.__class__(dnf.acos(x), grad)

    def atan(self) -> Self:
        x = self.real
        return self.__class__(dnf.atan(x), self.grad / (_unit(x) + x * x))

    def sinh(self) -> Self:
        return self.__class__(dnf.sinh(self.real), self.grad * dnf.cosh(self.real))

    def cosh(self) -> Self:
        return self.__class__(dnf.cosh(self.real), self.grad * dnf.sinh(self.real))

    def tanh(self) -> Self:
        x = self.real
        tmp = dnf.tanh(x)

        if getcontext().legacy:
            grad = self.grad * (dnf.exp(x) - dnf.exp(-x)) / (dnf.exp(x) + dnf.exp(-x))
            return self.__class__(tmp, grad)

        return self.__class__(tmp, self.grad * (1 - tmp * tmp))

    def asinh(self) -> Self:
        x = self.real
        grad = self.grad / dnf.sqrt(_unit(x) + x * x)
        return self.__class__(dnf.asinh(x), grad)

    def acosh(self) -> Self:
        x = self.real
        grad = self.grad / dnf.sqrt(-_unit(x) + x * x)

        if getcontext().legacy:
            return self.__class__(dnf.acos(x), grad)

        return self.__class__(dnf.acosh(x), grad)

    def atanh(self) -> Self:
        x = self.real
        return self.__class__(dnf.atanh(x), self.grad / (_unit(x) - x * x))

    def sign(self) -> Self:
        return self.__class__(dnf.sign(self.real), self.grad * 0)

    def _dualnum_overload_(self, fun: Callable, *args: Any):
        if (method := _METHODS.get(fun)) is None:
            return NotImplemented

        return method(self)


_METHODS: dict[Callable, Callable[[Dual], Dual]] = {
    dnf.exp: Dual.exp,
    dnf.log: Dual.ln,
    dnf.sqrt: Dual.sqrt,
    dnf.sin: Dual.sin,
    dnf.cos: Dual.cos,
    dnf.tan: Dual.tan,
    dnf.asin: Dual.asin,
    dnf.acos: Dual.acos,
    dnf.atan: Dual.atan,
    dnf.sinh: Dual.sinh,
    dnf.cosh: Dual.cosh,
    dnf.tanh: Dual.tanh,
    dnf.asinh: Dual.asinh,
    dnf.acosh: Dual.acosh,
    dnf.atanh: Dual.atanh,
    dnf.sign: Dual.sign,
}
