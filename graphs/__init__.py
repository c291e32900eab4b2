"""
Graphs and trees built on the finite set algebra.

**Variants** (closed set, see operations.Graph)
    - ConcreteGraph (concrete.py): arbitrary vertices and links, components
      computed with scipy
    - Path (path.py), Cycle (cycle.py): vertices in sequence
    - Tree (tree.py): HierarchyNodes pointed at their root

**Building blocks**
    - Link (link.py): an unordered edge between two distinct vertices
    - HierarchyNode (node.py): node with parent link and cached hierarchy

**Capabilities** (operations.py)
    neighbours, on, connected_component, connected_components, edge_set,
    vertex_set, flow, flow_by, neighbours_of, are_connected
"""

from .concrete import ConcreteGraph, connected_classes
from .cycle import Cycle
from .link import Link
from .node import HierarchyNode
from .operations import (
    Graph,
    are_connected,
    connected_component,
    connected_components,
    edge_set,
    flow,
    flow_by,
    neighbours,
    neighbours_of,
    on,
    vertex_set,
)
from .path import Path
from .tree import Tree

__all__ = [
    # Variants
    "ConcreteGraph",
    "Cycle",
    "Path",
    "Tree",
    "Graph",
    # Building blocks
    "Link",
    "HierarchyNode",
    "connected_classes",
    # Capabilities
    "neighbours",
    "on",
    "connected_component",
    "connected_components",
    "edge_set",
    "vertex_set",
    "flow",
    "flow_by",
    "neighbours_of",
    "are_connected",
]
