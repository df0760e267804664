"""
################################
Context (:mod:`dualnum.context`)
################################

.. currentmodule:: dualnum.context

This module selects the differentiation rules used by
:class:`~dualnum.autodiff.Dual`.

Two rule sets are available. ``"STANDARD"``, the default, implements the usual
derivative of every operation. ``"LEGACY"`` switches the following operations to the
formulas of the earlier dual-number engine that this package replaces, including its
incorrect ones:

* ``a / b`` has the derivative ``a.real / b.grad + a.grad / b.real``,
* ``-a`` swaps the two components, giving ``(-a.grad, -a.real)``,
* ``acosh`` computes the real part with the inverse cosine,
* the constant 1 in the derivatives of ``asin``, ``acos``, ``atan``, ``asinh``,
  ``acosh``, and ``atanh`` is computed as ``abs(sign(a.real))``, which is 0 at the
  origin,
* ``tanh`` has the derivative ``a.grad * tanh(a.real)``, computed through ``exp``,
* ``abs`` has the derivative ``abs(a.grad) * sign(a.real)``.

Operations with a plain number as one operand, integer powers, and reciprocals do
not depend on the rule set.

.. autosummary::
    :toctree: generated/

    Context
    getcontext
    localcontext
    setcontext

"""

import contextlib
import contextvars
from typing import Literal, Self

type Rules = Literal["STANDARD", "LEGACY"]


class Context:
    """Create a new context.

    Parameters
    ----------
    rules : Literal["STANDARD", "LEGACY"], default="STANDARD"
        Differentiation rules.

    Raises
    ------
    ValueError
        If `rules` is not a known rule set.
    """

    __slots__ = ("_rules",)
    _rules: Rules

    def __init__(self, rules: Rules = "STANDARD"):
        if rules not in ("STANDARD", "LEGACY"):
            raise ValueError(f"unknown rules: {rules!r}")

        self._rules = rules

    @property
    def rules(self) -> Rules:
        return self._rules

    @property
    def legacy(self) -> bool:
        """``True`` if the legacy rules are in force."""
        return self._rules == "LEGACY"

    def copy(self) -> Self:
        return self.__class__(self._rules)

    def __repr__(self):
        return f"{type(self).__name__}({self._rules!r})"

    def __copy__(self) -> Self:
        return self.copy()


_var: contextvars.ContextVar[Context] = contextvars.ContextVar("dualnum")


def getcontext() -> Context:
    """Return the current context for the active thread."""
    if context := _var.get(None):
        return context

    context = Context()
    _var.set(context)
    return context


def setcontext(ctx: Context) -> None:
    """Set the current context for the active thread to `ctx`."""
    _var.set(ctx)


@contextlib.contextmanager
def localcontext(ctx: Context | None = None, *, rules: Rules | None = None):
    """Return a context manager that will set the current context for the active thread
    to a copy of `ctx` on entry to the with-statement and restore the previous context
    when exiting the with-statement.

    Parameters
    ----------
    ctx : Context, optional
        Context to copy. If no context is specified, the current context is used.
    rules : Literal["STANDARD", "LEGACY"], optional
        Overrides the rules of the copy.

    Examples
    --------
    >>> from dualnum import Dual
    >>> with localcontext(rules="LEGACY"):
    ...     -Dual(1.0, 2.0)
    Dual(real=-2.0, grad=-1.0)
    >>> -Dual(1.0, 2.0)
    Dual(real=-1.0, grad=-2.0)
    """
    if ctx is None:
        ctx = getcontext()

    if rules is None:
        rules = ctx.rules

    ctx = Context(rules)
    token = _var.set(ctx)

    try:
        yield ctx
    finally:
        _var.reset(token)
