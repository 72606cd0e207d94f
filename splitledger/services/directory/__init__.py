"""
Name Directory Package

Provides the abstract directory interface the engine validates against,
plus an in-memory implementation.
"""

from splitledger.services.directory.interface import (
    DirectoryError,
    DuplicateNameError,
    NameDirectoryInterface,
    UnknownNameError,
)
from splitledger.services.directory.memory import InMemoryNameDirectory

__all__ = [
    # Interface
    "NameDirectoryInterface",
    # Exceptions
    "DirectoryError",
    "DuplicateNameError",
    "UnknownNameError",
    # In-memory implementation
    "InMemoryNameDirectory",
]
