"""
Abstract Name Directory Interface

The ledger does not own the list of people; a contact directory does.
The engine only needs one thing from it: the set of names currently
known, taken as an immutable snapshot so a validation run never sees
the directory change halfway through.
"""

from abc import ABC, abstractmethod

from splitledger.models.name import Name


class NameDirectoryInterface(ABC):
    """
    Abstract interface for the directory of known participants.

    Any directory implementation (address book, database, etc.)
    must implement these methods.
    """

    @abstractmethod
    def snapshot(self) -> frozenset[Name]:
        """
        Return the names currently known.

        Returns:
            An immutable set; later directory changes do not affect it
        """
        pass

    def contains(self, name: Name) -> bool:
        """Check whether a name is currently known."""
        return name in self.snapshot()


class DirectoryError(Exception):
    """Base exception for directory operations."""
    pass


class DuplicateNameError(DirectoryError):
    """Attempted to add a name that is already known."""
    pass


class UnknownNameError(DirectoryError):
    """Name not found in the directory."""
    pass
