import math

import pytest

from complexcalc.domain.entities.complex_number import ComplexNumber as C
from complexcalc.domain.errors import CalculatorError, DivisionByZeroError

SAMPLES = [C(2, 3), C(1, -1), C(-4.5, 0.25), C(0, 7), C(1e-3, -2e3), C(-0.1, -0.2)]


def test_add_subtract_multiply():
    assert C(2, 3).add(C(1, -1)) == C(3, 2)
    # left operand is the minuend
    assert C(5, 2).subtract(C(1, 1)) == C(4, 1)
    assert C(1, 1).subtract(C(5, 2)) == C(-4, -1)
    assert C(1, 2).multiply(C(3, 4)) == C(-5, 10)


def test_divide_undoes_multiply():
    for a in SAMPLES:
        for b in SAMPLES:
            assert a.multiply(b).divide(b).is_close(a, abs_tol=1e-9)


def test_divide_by_zero():
    with pytest.raises(DivisionByZeroError):
        C(1, 1).divide(C(0, 0))
    # typed both as a calculator error and as a plain ZeroDivisionError
    with pytest.raises(ZeroDivisionError):
        C(1, 1).divide(C(0.0, -0.0))
    with pytest.raises(CalculatorError):
        C(0, 0).divide(C(0, 0))


def test_absolute_value():
    assert C(3, 4).absolute_value() == 5.0
    assert C(0, 0).absolute_value() == 0.0


def test_square_doubles_value():
    assert C(2, 3).square() == C(4, 6)
    assert C(-1, 0.5).square() == C(-2, 1)


def test_root_principal_branch():
    assert C(3, 4).root() == C(2, 1)
    assert C(3, -4).root() == C(2, -1)
    assert C(4, 0).root() == C(2, 0)
    # zero imaginary part takes the positive branch
    assert C(-4, 0).root() == C(0, 2)


def test_root_squares_back():
    for a in SAMPLES:
        r = a.root()
        assert r.multiply(r).is_close(a, rel_tol=1e-9, abs_tol=1e-9)


def test_inverse():
    assert C(0, 2).inverse() == C(0, -0.5)
    assert C(1, 1).inverse() == C(0.5, -0.5)
    for a in SAMPLES:
        assert a.inverse().inverse().is_close(a)
        assert a.multiply(a.inverse()).is_close(C(1, 0))


def test_inverse_of_zero():
    with pytest.raises(DivisionByZeroError):
        C(0, 0).inverse()


def test_conjugate_is_an_involution():
    for a in SAMPLES:
        assert a.conjugate().conjugate() == a
    assert C(2, 3).conjugate() == C(2, -3)


def test_nan_and_inf_pass_through():
    nan = float("nan")
    inf = float("inf")
    out = C(nan, 1).add(C(1, 1))
    assert math.isnan(out.real) and out.imaginary == 2
    assert math.isnan(C(1, 1).divide(C(nan, 0)).real)
    assert C(inf, 0).absolute_value() == inf
    r = C(nan, nan).root()
    assert math.isnan(r.real)


def test_value_semantics():
    a = C(1, 2)
    assert a == C(1.0, 2.0)
    assert hash(a) == hash(C(1.0, 2.0))
    with pytest.raises(AttributeError):
        a.real = 5  # type: ignore[misc]
    assert C.zero() == C(0, 0)
