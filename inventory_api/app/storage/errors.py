"""
Exceptions raised by storage implementations.

Services catch the specific subclasses and translate them into
domain errors; anything else deriving from ``StorageError`` is
treated as an opaque failure.
"""


class StorageError(Exception):
    """Base class for every storage failure."""


class AlreadyExistsError(StorageError):
    """A record with the same key is already stored."""

    def __init__(self, key: str) -> None:
        super().__init__(f"already exist: {key}")
        self.key = key


class NotFoundError(StorageError):
    """No record is stored under the key."""

    def __init__(self, key: str) -> None:
        super().__init__(f"not found: {key}")
        self.key = key


class InvalidInfoError(StorageError):
    """Credentials do not match a stored user."""

    def __init__(self) -> None:
        super().__init__("invalid info")
