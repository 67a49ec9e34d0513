"""Sparse vectors, compressed sparse matrices, triplet assembly, pattern views and traversal stacks."""

__version__ = "0.1.0"
__all__ = ["stack", "sparse_iter", "vector", "vector_math", "triplet", "visu"]