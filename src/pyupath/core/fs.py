# src/pyupath/core/fs.py
from __future__ import annotations

import abc
import enum
from dataclasses import dataclass
from typing import List, Optional

from .backend import StorageBackend
from .errors import UnsupportedFeatureError
from .path import UniversalPath


class EntryKind(enum.Enum):
    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


@dataclass(frozen=True)
class EntryMetadata:
    """
    Metadata of a single filesystem entry.

    - kind: file, directory, or anything else (socket, device, ...)
    - size_bytes: size in bytes, files only
    - modified_at: modification time as UNIX epoch seconds if known
    - created_at: creation (birth) time as UNIX epoch seconds if known
    """
    kind: EntryKind
    size_bytes: Optional[int] = None
    modified_at: Optional[float] = None
    created_at: Optional[float] = None


@dataclass(frozen=True)
class StorageCapabilities:
    """Advisory flags: what a backend claims to support. Nothing enforces them."""
    can_stat: bool = False
    can_read: bool = False
    can_read_range: bool = False
    can_list: bool = False
    can_glob: bool = False

    @classmethod
    def none(cls) -> "StorageCapabilities":
        return cls()


class Storage(abc.ABC):
    """
    Storage contract every backend implements.

    Implementations are stateless facades: they hold no handles or connections
    between calls and are safe to call concurrently. Every I/O operation is a
    coroutine and raises a ``StorageError`` subclass on failure.
    """

    # ----- identity -----
    @abc.abstractmethod
    def backend(self) -> StorageBackend:
        """Backend tag this implementation serves."""

    @abc.abstractmethod
    def capabilities(self) -> StorageCapabilities:
        """Static capability flags."""

    # ----- I/O primitives -----
    @abc.abstractmethod
    async def stat(self, path: UniversalPath) -> EntryMetadata:
        """Metadata for ``path``; ``PathNotFoundError`` if it does not exist."""

    @abc.abstractmethod
    async def read(self, path: UniversalPath) -> bytes:
        """Read the entire file as bytes."""

    @abc.abstractmethod
    async def read_range(self, path: UniversalPath, start: int, end: int) -> bytes:
        """
        Read the half-open byte interval ``[start, end)``.

        - ``start >= end``: empty bytes, no I/O
        - target not a regular file: ``NotAFileError``
        - ``start`` at or past EOF: ``RangeNotSatisfiableError``
        - ``end`` past EOF is clamped to the file length
        """

    @abc.abstractmethod
    async def list(self, path: UniversalPath) -> List[UniversalPath]:
        """Immediate children of a directory; ``NotADirError`` otherwise."""

    # ----- optional features -----
    async def glob(self, pattern: UniversalPath) -> List[UniversalPath]:
        """Paths matching ``pattern``. Backends opt in by overriding."""
        raise UnsupportedFeatureError("glob")
