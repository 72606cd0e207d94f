"""
Services Package

Collaborators the ledger engine talks to:
- directory: the set of known participant names
- storage: where audit events are appended
"""

from splitledger.services.directory import (
    InMemoryNameDirectory,
    NameDirectoryInterface,
)
from splitledger.services.storage import (
    AuditStorageInterface,
    InMemoryAuditStorage,
)

__all__ = [
    "AuditStorageInterface",
    "InMemoryAuditStorage",
    "InMemoryNameDirectory",
    "NameDirectoryInterface",
]
