"""
Visualization utilities for scalargrad computational graphs.

This module provides functions to visualize the computational graph created by
Value objects, showing the flow of data and gradients through operations.
"""

from graphviz import Digraph

from scalargrad.engine import build_topo


def trace(root):
    """
    Trace the computational graph starting from a root Value node.

    Collects every node reachable from ``root`` and the operand edges between
    them.

    Args:
        root: A Value object representing the output of a computation

    Returns:
        tuple: (nodes, edges) where:
            - nodes: set of all Value objects in the graph
            - edges: set of (operand, result) tuples representing connections

    Example:
        >>> from scalargrad.engine import Value
        >>> x = Value(2.0)
        >>> y = Value(3.0)
        >>> z = x * y + x
        >>> nodes, edges = trace(z)
        >>> len(nodes)  # x, y, x*y and z
        4
    """
    nodes = set(build_topo(root))
    edges = {(child, v) for v in nodes for child in v._prev}
    return nodes, edges


def draw_dot(root, format='svg', rankdir='LR'):
    """
    Render the graph behind ``root`` as a Graphviz digraph for debugging.

    Each Value becomes a record box showing its label, data and grad; each
    non-leaf also gets a small node for the operation that produced it.
    Nodes are emitted operands-first, so the DOT source is stable for a
    given graph.

    Args:
        root: A Value object (typically the loss) to visualize from
        format: Output format passed to graphviz ('svg', 'png', 'pdf', ...)
        rankdir: 'LR' (left-right) or 'TB' (top-bottom)

    Returns:
        Digraph: call ``.render()`` to write a file (needs the Graphviz
        binaries) or read ``.source`` for the DOT text (does not)
    """
    assert rankdir in ['LR', 'TB'], "rankdir must be 'LR' (left-right) or 'TB' (top-bottom)"

    dot = Digraph(format=format, graph_attr={'rankdir': rankdir})

    for v in build_topo(root):
        uid = str(id(v))
        dot.node(name=uid, shape='record',
                 label=f'{{ {v.label} | data {v.data:.4f} | grad {v.grad:.4f} }}')
        if not v._op:
            continue

        # operands -> op -> result
        dot.node(name=uid + v._op, label=v._op)
        dot.edge(uid + v._op, uid)
        for child in dict.fromkeys(v._prev):
            dot.edge(str(id(child)), uid + v._op)

    return dot
