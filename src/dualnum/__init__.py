from .autodiff import Dual, deriv, value_and_deriv
from .context import Context, getcontext, localcontext, setcontext

__all__ = [
    "Dual",
    "deriv",
    "value_and_deriv",
    "Context",
    "getcontext",
    "localcontext",
    "setcontext",
]
