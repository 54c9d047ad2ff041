import logging
import numbers

import numpy as np

logger = logging.getLogger(__name__)


def _no_backward(out):
    """Leaves have nothing to propagate."""


class Value:
    """
    Wraps a single scalar and tracks operations for automatic differentiation.

    The Value class is the core of the autograd engine. It stores data and its gradient,
    and builds a computational graph by tracking operations between Values.

    Example:
        >>> x = Value(2.0)
        >>> y = Value(3.0)
        >>> z = x * y + x
        >>> z.backward()  # Compute gradients
        >>> print(x.grad)  # dz/dx = y + 1 = 4.0
    """

    def __init__(self, data, _children=(), _op='', label=""):
        """
        Initialize a Value object.

        Args:
            data: The numerical value (any real number)
            _children: Tuple of operand Value objects (internal use for autograd)
            _op: String describing the operation that created this Value (internal)
            label: Optional label for debugging and visualization
        """
        # float64 gives inf/nan instead of ZeroDivisionError or complex results
        self.data = np.float64(data)

        # Gradient of the root with respect to this value (starts at zero)
        self.grad = np.float64(0.0)

        self.label = label

        # Internal variables for building the computational graph
        self._backward = _no_backward  # Called as _backward(self) by the engine
        self._prev = tuple(_children)  # Operand nodes in the graph
        self._op = _op                 # Operation that created this node

    # Accessors used by parameter-owning code (see scalargrad.nn)

    def add_to_grad(self, delta):
        """Accumulate ``delta`` into the gradient."""
        with np.errstate(all='ignore'):
            self.grad += delta

    def zero_grad(self):
        """Reset the gradient to zero. Safe to call any number of times."""
        self.grad = np.float64(0.0)

    def set_data(self, data):
        """
        Replace the stored value.

        Only meaningful for leaf parameters between passes: operation results
        were computed eagerly from their operands and are not recomputed.
        """
        self.data = np.float64(data)

    def __add__(self, other):
        """
        Addition operation: supports Value + Value and Value + scalar.

        Example:
            >>> a = Value(2.0)
            >>> b = Value(5.0)
            >>> c = a + b  # c.data = 7.0
        """
        # Convert other to Value if it's a plain number
        other = other if isinstance(other, Value) else Value(other)

        # Forward pass: compute the sum
        with np.errstate(all='ignore'):
            out = Value(self.data + other.data, (self, other), '+')

        def _backward(out):
            """
            Backward pass for addition: d(a+b)/da = 1, d(a+b)/db = 1

            The gradient flows equally to both inputs.
            """
            self.grad += out.grad
            other.grad += out.grad

        out._backward = _backward
        return out

    def __mul__(self, other):
        """
        Multiplication operation.

        Example:
            >>> a = Value(3.0)
            >>> b = Value(4.0)
            >>> c = a * b  # c.data = 12.0
        """
        other = other if isinstance(other, Value) else Value(other)

        with np.errstate(all='ignore'):
            out = Value(self.data * other.data, (self, other), '*')

        def _backward(out):
            """
            Backward pass for multiplication: d(a*b)/da = b, d(a*b)/db = a

            Each input receives the gradient multiplied by the other input's value.
            When both operands are the same node (x * x) both lines add to it.
            """
            self.grad += other.data * out.grad
            other.grad += self.data * out.grad

        out._backward = _backward
        return out

    def __pow__(self, other):
        """
        Power operation: raises Value to a constant scalar power.

        The exponent is fixed at graph-construction time and is never
        differentiated, so Value ** Value is not supported.

        Example:
            >>> x = Value(3.0)
            >>> y = x ** 2  # y.data = 9.0
        """
        assert isinstance(other, numbers.Real), "Only supporting real-number powers"

        with np.errstate(all='ignore'):
            out = Value(self.data ** other, (self,), f'**{other}')

        def _backward(out):
            """
            Backward pass for power: d(x^n)/dx = n * x^(n-1)

            This is the standard power rule from calculus.
            """
            self.grad += (other * self.data ** (other - 1)) * out.grad

        out._backward = _backward
        return out

    def exp(self):
        """
        Exponential: e^x

        Example:
            >>> x = Value(0.0)
            >>> y = x.exp()  # y.data = 1.0
        """
        with np.errstate(all='ignore'):
            out = Value(np.exp(self.data), (self,), 'exp')

        def _backward(out):
            """Backward pass for exp: d(e^x)/dx = e^x, which is the forward result."""
            self.grad += out.data * out.grad

        out._backward = _backward
        return out

    def tanh(self):
        """
        Hyperbolic tangent activation: tanh(x)

        Squashes input to range (-1, 1).

        Example:
            >>> x = Value(0.0)
            >>> y = x.tanh()  # y.data = 0.0
        """
        out = Value(np.tanh(self.data), (self,), 'tanh')

        def _backward(out):
            """
            Backward pass for tanh: d(tanh(x))/dx = 1 - tanh(x)^2

            Like sigmoid, the derivative is expressed through the output itself.
            """
            self.grad += (1 - out.data ** 2) * out.grad

        out._backward = _backward
        return out

    def backward(self):
        """
        Perform backpropagation: compute gradients for all Values in the graph.

        This method implements automatic differentiation using reverse-mode
        accumulation (backpropagation). It traverses the computational graph
        in reverse topological order and applies the chain rule.

        The Value it is called on is treated as the loss. Gradients accumulate
        into whatever is already stored on the other nodes, so callers reusing
        parameters must zero them between passes.

        Example:
            >>> x = Value(2.0)
            >>> y = x * 3 + 1
            >>> y.backward()
            >>> print(x.grad)  # dy/dx = 3.0
        """
        topo = build_topo(self)
        logger.debug("backward through %d nodes from %s", len(topo), self.label or self._op or 'leaf')

        # Initialize gradient of output to 1 (dL/dL = 1)
        self.grad = np.float64(1.0)

        # Traverse graph in reverse: apply chain rule to compute all gradients
        with np.errstate(all='ignore'):
            for v in reversed(topo):
                v._backward(v)

    # Reverse and derived operations (use the basic operations defined above)

    def __neg__(self):
        """Negation: -x = x * -1"""
        return self * -1

    def __radd__(self, other):
        """Right addition: other + self (when other is not a Value)"""
        return self + other

    def __sub__(self, other):
        """Subtraction: a - b = a + (-b)"""
        other = other if isinstance(other, Value) else Value(other)
        return self + (-other)

    def __rsub__(self, other):
        """Right subtraction: other - self"""
        return other + (-self)

    def __rmul__(self, other):
        """Right multiplication: other * self (when other is not a Value)"""
        return self * other

    def __truediv__(self, other):
        """Division: a / b = a * b^(-1)"""
        # Wrap first so a zero divisor goes through float64 rather than 0.0 ** -1
        other = other if isinstance(other, Value) else Value(other)
        return self * other**-1

    def __rtruediv__(self, other):
        """Right division: other / self"""
        return other * self**-1

    def __repr__(self):
        """Return a readable string representation of the Value."""
        label_str = f"'{self.label}' " if self.label else ""
        op_str = f" from {self._op}" if self._op else ""
        return f"Value({label_str}data={self.data}, grad={self.grad}{op_str})"


def build_topo(root):
    """
    Topologically sort the graph reachable from ``root``: operands before results.

    Depth-first post-order with an explicit stack, so long chains of
    operations do not run into the interpreter's recursion limit. Shared
    operands appear exactly once, and operands are visited in ``_prev`` order.

    Args:
        root: The Value to start from

    Returns:
        list: Every reachable Value, each after all of its operands
    """
    topo = []
    visited = set()
    stack = [(root, False)]

    while stack:
        v, expanded = stack.pop()
        if expanded:
            # All operands of v have been appended by now
            topo.append(v)
            continue
        if v in visited:
            continue
        visited.add(v)
        stack.append((v, True))
        for child in reversed(v._prev):
            if child not in visited:
                stack.append((child, False))

    return topo
