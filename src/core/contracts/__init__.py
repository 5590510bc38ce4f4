"""
Contract Validation Module

Модуль для валидации JSON контрактов снимков векторов.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    VectorSnapshotValidator,
    snapshot_from_contract,
    snapshot_to_contract,
    validate_vector_snapshot,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "VectorSnapshotValidator",
    # Functions
    "validate_vector_snapshot",
    "snapshot_to_contract",
    "snapshot_from_contract",
]
