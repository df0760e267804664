from collections.abc import Callable
from typing import Any

from dualnum.autodiff.dual import Dual


def deriv[T, **P](fun: Callable[P, T]) -> Callable[P, T]:
    """Return a function that evaluates the derivative of the univariate scalar-valued
    function.

    The first argument of the returned function is the point of evaluation. The other
    arguments are passed to `fun` unchanged and are not differentiated.

    Parameters
    ----------
    fun : Callable
        Differentiated function.

    Returns
    -------
    Callable
        Derivative of `fun`.

    Warnings
    --------
    `fun` must not contain conditional branches depending on its first argument. Only
    first-order derivatives are available; ``deriv(deriv(fun))`` raises
    :exc:`TypeError` when called.

    Examples
    --------
    >>> from dualnum import function as dnf
    >>> f = lambda x: x**2 + dnf.sqrt(x + 3)
    >>> df = deriv(f)
    >>> print(format(df(1.2), ".6g"))
    2.64398
    """

    def result(*args, **kwargs):
        return value_and_deriv(fun)(*args, **kwargs)[1]

    return result  # type: ignore


def value_and_deriv[T, **P](fun: Callable[P, T]) -> Callable[P, tuple[T, T]]:
    """Return a function that evaluates both the univariate scalar-valued function and
    its derivative.

    Parameters
    ----------
    fun : Callable
        Differentiated function.

    Returns
    -------
    Callable
        Function returning the pair ``(fun(x), fun'(x))``.

    See Also
    --------
    deriv
    """

    def result(x, *args, **kwargs):
        tmp: Any = fun(Dual.variable(x), *args, **kwargs)  # type: ignore

        if not isinstance(tmp, Dual):
            return tmp, tmp * 0

        return tmp.real, tmp.grad

    return result  # type: ignore
