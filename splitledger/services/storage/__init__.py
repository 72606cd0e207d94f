"""
Storage Services Package

Provides the abstract audit storage interface and an in-memory
implementation. Transactions themselves are not persisted here.
"""

from splitledger.services.storage.interface import (
    AuditStorageInterface,
    StorageError,
)
from splitledger.services.storage.memory import InMemoryAuditStorage

__all__ = [
    # Interfaces
    "AuditStorageInterface",
    # Exceptions
    "StorageError",
    # In-memory implementation
    "InMemoryAuditStorage",
]
