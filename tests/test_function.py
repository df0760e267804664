import math

import mpmath
import numpy as np
import pytest

from dualnum import Dual
from dualnum import function as dnf
from dualnum.typing import SupportsElementary


@pytest.mark.parametrize(
    ("name", "x", "expected"),
    [
        ("exp", 0.3, math.exp(0.3)),
        ("ln", 0.3, 1 / 0.3),
        ("sqrt", 0.3, 0.5 / math.sqrt(0.3)),
        ("sin", 0.3, math.cos(0.3)),
        ("cos", 0.3, -math.sin(0.3)),
        ("tan", 0.3, 1 / math.cos(0.3) ** 2),
        ("asin", 0.3, 1 / math.sqrt(1 - 0.3**2)),
        ("acos", 0.3, -1 / math.sqrt(1 - 0.3**2)),
        ("atan", 0.3, 1 / (1 + 0.3**2)),
        ("sinh", 0.3, math.cosh(0.3)),
        ("cosh", 0.3, math.sinh(0.3)),
        ("tanh", 0.3, 1 / math.cosh(0.3) ** 2),
        ("asinh", 0.3, 1 / math.sqrt(1 + 0.3**2)),
        ("acosh", 1.7, 1 / math.sqrt(1.7**2 - 1)),
        ("atanh", 0.3, 1 / (1 - 0.3**2)),
    ],
)
def test_chain_rule(name, x, expected):
    y = getattr(Dual.variable(x), name)()
    real = getattr(math, "log" if name == "ln" else name)(x)
    assert pytest.approx(y.real) == real
    assert pytest.approx(y.grad) == expected

    z = getattr(dnf, "log" if name == "ln" else name)(Dual.variable(x))
    assert z == y


def test_chain_rule_seed():
    y = Dual(0.3, 2.0).sin()
    assert pytest.approx(y.grad) == 2.0 * math.cos(0.3)


def test_abs():
    assert abs(Dual(-2.0, 3.0)) == Dual(2.0, -3.0)
    assert abs(Dual(2.0, 3.0)) == Dual(2.0, 3.0)
    assert abs(Dual(0.0, 1.0)) == Dual(0.0, 0.0)


def test_origin():
    for name in ("asin", "atan", "asinh", "atanh"):
        assert getattr(Dual.variable(0.0), name)().grad == 1.0

    assert Dual.variable(0.0).acos().grad == -1.0
    assert dnf.sign(Dual.variable(-4.0)) == Dual(-1.0, 0.0)


def test_domain():
    with pytest.raises(ValueError):
        Dual.variable(-1.0).ln()

    with np.errstate(invalid="ignore"):
        y = Dual.variable(np.float64(2.0)).asin()

    assert np.isnan(y.real) and np.isnan(y.grad)


def test_mpmath():
    x = mpmath.mpf("0.5")
    y = Dual.variable(x).sin()
    assert isinstance(y.real, mpmath.mpf)
    assert y.real == mpmath.sin(x)
    assert y.grad == mpmath.cos(x)


def test_scalar():
    assert dnf.exp(1.0) == math.exp(1.0)
    assert dnf.log(2) == math.log(2)
    assert isinstance(dnf.exp(mpmath.mpf(1)), mpmath.mpf)
    assert dnf.sin(np.float32(1.0)).dtype == np.float32
    np.testing.assert_array_equal(dnf.sign(np.array([-2.0, 0.0, 3.0])), [-1.0, 0.0, 1.0])

    assert dnf.sign(-2.5) == -1.0
    assert dnf.sign(7) == 1.0
    assert dnf.sign(0) == 0.0
    assert math.isnan(dnf.sign(math.nan))
    assert dnf.sign(mpmath.mpf(-3)) == -1

    with pytest.raises(TypeError):
        dnf.exp("1")

    with pytest.raises(TypeError):
        dnf.exp(1 + 1j)


def test_overload():
    class Symbol(SupportsElementary):
        def __init__(self, name):
            self.name = name

        def _dualnum_overload_(self, fun, *args):
            if fun is dnf.exp:
                return f"exp({self.name})"

            return NotImplemented

    assert dnf.exp(Symbol("x")) == "exp(x)"
    assert SupportsElementary in Dual.__mro__

    with pytest.raises(TypeError):
        dnf.log(Symbol("x"))
