"""
Domain models and errors.

Contains the dense Matrix entity and the typed failure hierarchy of the kernel.
"""

from src.core.domain.errors import (
    AllocationError,
    DimensionMismatch,
    MalformedInput,
    MatrixError,
    NotSquare,
    RangeError,
    SingularMatrix,
)
from src.core.domain.matrix import (
    Matrix,
    allocate_buffer,
    clone,
    create,
    format_matrix,
    matrix_from_values,
)

__all__ = [
    # Matrix model
    "Matrix",
    "allocate_buffer",
    "clone",
    "create",
    "format_matrix",
    "matrix_from_values",
    # Errors
    "MatrixError",
    "AllocationError",
    "DimensionMismatch",
    "NotSquare",
    "SingularMatrix",
    "RangeError",
    "MalformedInput",
]
