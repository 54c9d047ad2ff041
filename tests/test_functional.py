import math

import pytest

from scalargrad.functional import (
    add,
    backward,
    divide,
    exp,
    make_leaf,
    multiply,
    negate,
    power,
    subtract,
    tanh,
)


def test_make_leaf():
    x = make_leaf(2.5, "x")
    assert x.data == 2.5
    assert x.grad == 0.0
    assert x.label == "x"
    assert x._prev == ()


def test_scenario_through_functions():
    a = make_leaf(2.0, "a")
    b = make_leaf(-3.0, "b")
    c = make_leaf(10.0, "c")
    e = multiply(a, b)
    d = add(e, c)
    f = tanh(d)
    backward(f)

    expected = 1 - math.tanh(4.0) ** 2
    assert d.grad == pytest.approx(expected)
    assert a.grad == pytest.approx(b.data * e.grad)
    assert b.grad == pytest.approx(a.data * e.grad)


def test_divide_and_subtract():
    g, h = make_leaf(8.0), make_leaf(2.0)
    i = divide(g, h)
    backward(i)
    assert i.data == 4.0
    assert g.grad == pytest.approx(0.5)
    assert h.grad == pytest.approx(-2.0)

    p, q = make_leaf(1.0), make_leaf(4.0)
    r = subtract(p, q)
    backward(r)
    assert r.data == -3.0
    assert (p.grad, q.grad) == (1.0, -1.0)


def test_negate():
    a = make_leaf(3.0)
    n = negate(a)
    backward(n)
    assert n.data == -3.0
    assert a.grad == -1.0


def test_power_and_exp():
    a = make_leaf(2.0)
    y = exp(power(a, 2))  # e^(a^2) -> dy/da = 2a e^(a^2)
    backward(y)
    assert y.data == pytest.approx(math.exp(4.0))
    assert a.grad == pytest.approx(4.0 * math.exp(4.0))


def test_scalar_operands_are_wrapped():
    j = make_leaf(5.0)
    k = add(j, 10.0)
    backward(k)
    assert k.data == 15.0
    assert j.grad == 1.0

    assert add(10.0, j).data == 15.0
    assert multiply(j, 2).data == 10.0
    assert subtract(20, j).data == 15.0
    assert divide(j, 2).data == 2.5
    assert divide(1, j).data == pytest.approx(0.2)
