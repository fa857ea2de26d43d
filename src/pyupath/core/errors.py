from __future__ import annotations

from typing import Optional

from .backend import StorageBackend


class UniversalPathError(ValueError):
    """Base class for errors raised while parsing or serializing a path."""


class InvalidUriError(UniversalPathError):

    def __init__(self, detail: str) -> None:
        super().__init__(f"invalid URI: {detail}")
        self.detail = detail


class StorageError(Exception):
    """Base class for every error a storage implementation raises."""


class UnsupportedBackendError(StorageError):

    def __init__(self, backend: StorageBackend) -> None:
        super().__init__(f"unsupported backend: {backend}")
        self.backend = backend


class UnsupportedFeatureError(StorageError):

    def __init__(self, feature: str) -> None:
        super().__init__(f"unsupported feature: {feature}")
        self.feature = feature


class InvalidPathError(StorageError):

    def __init__(self, msg: str = "invalid path for backend") -> None:
        super().__init__(msg)


class PathNotFoundError(StorageError):

    def __init__(self, msg: str = "not found") -> None:
        super().__init__(msg)


class NotAFileError(StorageError):

    def __init__(self, msg: str = "not a file") -> None:
        super().__init__(msg)


class NotADirError(StorageError):

    def __init__(self, msg: str = "not a directory") -> None:
        super().__init__(msg)


class RangeNotSatisfiableError(StorageError):

    def __init__(self, msg: str = "range not satisfiable") -> None:
        super().__init__(msg)


class StorageIOError(StorageError):
    """Wraps a native I/O failure that has no more specific storage error."""

    def __init__(self, error: OSError, msg: Optional[str] = None) -> None:
        super().__init__(msg or f"I/O error: {error}")
        self.error = error
