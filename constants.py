"""
Global constants used throughout the project
"""

# Optional cap on the cardinality power_set accepts; None enumerates any size
MAX_POWER_SET_CARDINALITY: int | None = None

# Worker threads used when a set operation is called with parallel=True
PARALLEL_WORKERS = 4

# Run the O(n²) reflexivity/symmetry/transitivity check in PartitionSet.from_relation
VALIDATE_EQUIVALENCE = False

# Check that every node of a Tree hangs from the same root
CHECK_TREE_ROOTS = True
