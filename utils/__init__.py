"""
Generic helpers with no dependency on the set or graph packages.

Modules:
    preconditions - Argument checks raising InvalidArgument
    traversal     - Breadth-first and depth-first tree iterators
    parallel      - Thread-pool map for per-element set work
"""
