"""
Function-style interface to the autograd engine.

Everything here is a thin wrapper over the operators defined on Value, for
code that prefers ``multiply(a, b)`` to ``a * b``. Plain numbers are accepted
wherever a Value is and are wrapped as fresh unlabeled leaves.
"""

from scalargrad.engine import Value


def make_leaf(value, label=""):
    """Create an input or parameter node with no operands."""
    return Value(value, label=label)


def add(a, b):
    return _as_value(a) + b


def multiply(a, b):
    return _as_value(a) * b


def negate(a):
    return -_as_value(a)


def subtract(a, b):
    return _as_value(a) - b


def power(a, n):
    """Raise ``a`` to the constant exponent ``n`` (an int or float, never a Value)."""
    return _as_value(a) ** n


def divide(a, b):
    return _as_value(a) / b


def exp(a):
    return _as_value(a).exp()


def tanh(a):
    return _as_value(a).tanh()


def backward(root):
    """Populate ``grad`` on every node reachable from ``root``, treating it as the loss."""
    root.backward()


def _as_value(x):
    return x if isinstance(x, Value) else Value(x)
