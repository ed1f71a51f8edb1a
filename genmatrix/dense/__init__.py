"""
Dense matrix module.

Provides the generic row-major Matrix over any element type supporting
+, -, * and a default value.

Public API:
    Matrix  - construction, shape queries, transpose, +, -, *
"""

from genmatrix.dense.matrix import Matrix

__all__ = [
    "Matrix",
]
