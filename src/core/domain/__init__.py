"""
Domain containers.

FixedVector (owned, fixed length), VectorView (borrowed references),
VectorSnapshot (immutable copy).
"""

from src.core.domain.fixed_vector import (
    DEFAULT_ELEMENT_POLICY,
    ElementPolicy,
    FixedVector,
    NonFiniteElementViolation,
    VectorIndexViolation,
    VectorLengthMismatch,
    VectorTypeMismatch,
)
from src.core.domain.snapshot import VectorSnapshot
from src.core.domain.vector_view import EmptyViewViolation, VectorView

__all__ = [
    # Containers
    "FixedVector",
    "VectorView",
    "VectorSnapshot",
    # Configuration
    "ElementPolicy",
    "DEFAULT_ELEMENT_POLICY",
    # Exceptions
    "VectorIndexViolation",
    "VectorLengthMismatch",
    "VectorTypeMismatch",
    "NonFiniteElementViolation",
    "EmptyViewViolation",
]
