"""
Neural network building blocks for scalargrad.

This module composes scalar Values into neurons, layers and multi-layer
perceptrons. Every weight and bias is a leaf Value, so a training loop can
read ``p.grad`` after ``loss.backward()`` and write ``p.set_data(...)``.
"""

import logging

import numpy as np
from scalargrad.engine import Value

logger = logging.getLogger(__name__)


class Module:
    """
    Base class for all neural network modules.

    Provides common functionality for managing parameters and gradients.
    """

    def zero_grad(self):
        """
        Reset all gradients to zero.

        Call this before each backward pass to avoid accumulating gradients
        from multiple backward passes.
        """
        for p in self.parameters():
            p.zero_grad()

    def parameters(self):
        """
        Return a list of all trainable parameters (weights and biases).

        Override this in subclasses to return actual parameters.
        """
        return []


class Neuron(Module):
    """
    A single unit: output = tanh(w · x + b)

    Args:
        nin: Number of inputs
        rng: Random source for the weights. Anything ``np.random.default_rng``
             accepts: None, an integer seed, or a Generator.

    Example:
        >>> n = Neuron(2, rng=0)
        >>> out = n([1.0, -2.0])  # A Value in (-1, 1)
    """

    def __init__(self, nin, rng=None):
        rng = np.random.default_rng(rng)

        # Weights uniform on [-1, 1], bias starts at zero
        self.w = [Value(w) for w in rng.uniform(-1.0, 1.0, nin)]
        self.b = Value(0.0)

    def __call__(self, x):
        """
        Forward pass.

        Args:
            x: Sequence of Values or plain numbers, one per weight

        Returns:
            The activated output Value
        """
        assert len(x) == len(self.w), f"Expected {len(self.w)} inputs, got {len(x)}"

        # Start from the bias and accumulate w_i * x_i
        act = self.b
        for wi, xi in zip(self.w, x):
            act = act + wi * xi
        return act.tanh()

    def parameters(self):
        return self.w + [self.b]

    def __repr__(self):
        return f"Neuron({len(self.w)})"


class Layer(Module):
    """
    A layer of independent neurons that all see the same inputs.

    Args:
        nin: Number of inputs to each neuron
        nout: Number of neurons (the output size)
        rng: Random source shared by all neurons in the layer
    """

    def __init__(self, nin, nout, rng=None):
        rng = np.random.default_rng(rng)
        self.neurons = [Neuron(nin, rng=rng) for _ in range(nout)]

    def __call__(self, x):
        """Return a list with one output Value per neuron."""
        return [n(x) for n in self.neurons]

    def parameters(self):
        """Return parameters of all neurons, neuron by neuron."""
        return [p for n in self.neurons for p in n.parameters()]

    def __repr__(self):
        return f"Layer([{', '.join(str(n) for n in self.neurons)}])"


class MLP(Module):
    """
    Multi-Layer Perceptron: a sequence of tanh layers.

    Args:
        nin: Number of input features
        nouts: List of output sizes for each layer
               Example: [4, 4, 1] creates 3 layers: input→4→4→1
        rng: Random source for all weights. Passing the same integer seed
             builds an identical network.

    Example:
        >>> mlp = MLP(3, [4, 4, 1], rng=42)
        >>> out = mlp([2.0, 3.0, -1.0])[0]
        >>> loss = (out - 1.0) ** 2
        >>> mlp.zero_grad()  # Reset gradients
        >>> loss.backward()  # Compute gradients
        >>> # Update parameters (SGD)
        >>> for p in mlp.parameters():
        ...     p.set_data(p.data - learning_rate * p.grad)
    """

    def __init__(self, nin, nouts, rng=None):
        rng = np.random.default_rng(rng)

        # Build layer sizes: [input_size, hidden1, hidden2, ..., output_size]
        sizes = [nin] + list(nouts)
        self.layers = [Layer(sizes[i], sizes[i + 1], rng=rng) for i in range(len(nouts))]

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("built MLP %s with %d parameters", sizes, len(self.parameters()))

    def __call__(self, x):
        """
        Forward pass: pass input through all layers sequentially.

        Returns:
            List of output Values from the last layer
        """
        for layer in self.layers:
            x = layer(x)
        return x

    def parameters(self):
        """Return all trainable parameters from all layers."""
        return [p for layer in self.layers for p in layer.parameters()]

    def __repr__(self):
        layer_str = ' → '.join(str(len(layer.neurons)) for layer in self.layers)
        return f"MLP[{layer_str}]"
