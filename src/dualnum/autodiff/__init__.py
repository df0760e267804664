"""
###################################################
Automatic differentiation (:mod:`dualnum.autodiff`)
###################################################

.. currentmodule:: dualnum.autodiff

This module provides forward-mode automatic differentiation with respect to a single
variable.

Differential operators
----------------------

.. autosummary::
    :toctree: generated/

    deriv
    value_and_deriv

Dual numbers
------------

.. autosummary::
    :toctree: generated/

    Dual

"""

from .autodiff import deriv, value_and_deriv
from .dual import Dual

__all__ = ["deriv", "value_and_deriv", "Dual"]
