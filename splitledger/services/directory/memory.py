"""In-memory name directory, for tests and embedding."""

from collections.abc import Iterable
from threading import Lock

from splitledger.models.name import Name
from splitledger.services.directory.interface import (
    DuplicateNameError,
    NameDirectoryInterface,
    UnknownNameError,
)


class InMemoryNameDirectory(NameDirectoryInterface):
    """
    Directory backed by a set.

    Writers take a lock; readers only ever see frozen snapshots.
    Reserved names (SELF, OTHERS) are never stored here.
    """

    def __init__(self, names: Iterable[Name] = ()):
        self._lock = Lock()
        self._names: frozenset[Name] = frozenset()
        for name in names:
            self.add(name)

    def add(self, name: Name) -> None:
        if name.is_reserved:
            raise ValueError(f"'{name}' is reserved and cannot be added")
        with self._lock:
            if name in self._names:
                raise DuplicateNameError(f"'{name}' is already in the directory")
            self._names = self._names | {name}

    def remove(self, name: Name) -> None:
        with self._lock:
            if name not in self._names:
                raise UnknownNameError(f"'{name}' is not in the directory")
            self._names = self._names - {name}

    def snapshot(self) -> frozenset[Name]:
        return self._names
