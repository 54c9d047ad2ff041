"""
Scalargrad: a scalar reverse-mode automatic differentiation engine.

This package builds a computational graph as a side effect of ordinary
arithmetic on Values and backpropagates gradients through it.
"""

from scalargrad.engine import Value, build_topo
from scalargrad import functional, nn
from scalargrad.utils import draw_dot, trace

__version__ = "0.1.0"
__all__ = ["Value", "build_topo", "functional", "nn", "draw_dot", "trace"]
