from __future__ import annotations

import asyncio
import contextlib
import logging
import os
import stat as stat_mod
from typing import BinaryIO, Iterator, List, Optional

from .core.backend import StorageBackend
from .core.errors import (
    InvalidPathError,
    NotADirError,
    NotAFileError,
    PathNotFoundError,
    RangeNotSatisfiableError,
    StorageIOError,
)
from .core.fs import EntryKind, EntryMetadata, Storage, StorageCapabilities
from .core.path import UniversalPath
from .core.registry import register_storage

logger = logging.getLogger(__name__)


def native_path_for(path: UniversalPath, windows: Optional[bool] = None) -> str:
    """
    Translate a Local universal path into an absolute native path string.

    POSIX: ``/`` followed by the segments. Windows: a first segment ending in
    ``:`` is a drive root (``C:\\Users``), anything else is rooted at ``\\``.
    """
    if path.backend != StorageBackend.LOCAL:
        raise InvalidPathError(f"invalid path for backend: {path.backend} is not Local")
    if windows is None:
        windows = os.name == "nt"
    segments = path.segments
    if windows:
        if segments and segments[0].endswith(":"):
            return segments[0] + "\\" + "\\".join(segments[1:])
        return "\\" + "\\".join(segments)
    return "/" + "/".join(segments)


def read_fully(reader: BinaryIO, size: int) -> bytes:
    """Read up to ``size`` bytes, retrying short reads; stops early only at end of data."""
    buf = bytearray(size)
    got = 0
    with memoryview(buf) as view:
        while got < size:
            n = reader.readinto(view[got:])
            if not n:
                break
            got += n
    del buf[got:]
    return bytes(buf)


@contextlib.contextmanager
def _translate_os_errors(native: str, map_not_found: bool = True) -> Iterator[None]:
    try:
        yield
    except FileNotFoundError as ex:
        if not map_not_found:
            raise StorageIOError(ex) from ex
        raise PathNotFoundError(f"not found: {native}") from ex
    except OSError as ex:
        logger.debug("Local I/O failure on %s: %s", native, ex)
        raise StorageIOError(ex) from ex


class LocalStorage(Storage):
    """Storage backed by the local disk. Blocking calls run in a worker thread."""

    def backend(self) -> StorageBackend:
        return StorageBackend.LOCAL

    def capabilities(self) -> StorageCapabilities:
        return StorageCapabilities(
            can_stat=True,
            can_read=True,
            can_read_range=True,
            can_list=True,
            can_glob=False,
        )

    async def stat(self, path: UniversalPath) -> EntryMetadata:
        return await asyncio.to_thread(self._stat, native_path_for(path))

    async def read(self, path: UniversalPath) -> bytes:
        return await asyncio.to_thread(self._read, native_path_for(path))

    async def read_range(self, path: UniversalPath, start: int, end: int) -> bytes:
        if start < 0 or end < 0:
            raise ValueError(f"byte offsets must be non-negative: [{start}, {end})")
        if start >= end:
            return b""
        return await asyncio.to_thread(self._read_range, native_path_for(path), start, end)

    async def list(self, path: UniversalPath) -> List[UniversalPath]:
        return await asyncio.to_thread(self._list, native_path_for(path))

    # ----- blocking workers -----
    def _stat(self, native: str) -> EntryMetadata:
        with _translate_os_errors(native):
            st = os.stat(native)
        if stat_mod.S_ISDIR(st.st_mode):
            kind = EntryKind.DIRECTORY
        elif stat_mod.S_ISREG(st.st_mode):
            kind = EntryKind.FILE
        else:
            kind = EntryKind.OTHER
        return EntryMetadata(
            kind=kind,
            size_bytes=st.st_size if kind is EntryKind.FILE else None,
            modified_at=st.st_mtime,
            created_at=getattr(st, "st_birthtime", None),
        )

    def _read(self, native: str) -> bytes:
        with _translate_os_errors(native):
            with open(native, "rb") as f:
                return f.read()

    def _read_range(self, native: str, start: int, end: int) -> bytes:
        with _translate_os_errors(native):
            if not stat_mod.S_ISREG(os.stat(native).st_mode):
                raise NotAFileError(f"not a file: {native}")
            with open(native, "rb", buffering=0) as f:
                length = os.fstat(f.fileno()).st_size
                if start >= length:
                    raise RangeNotSatisfiableError(
                        f"range not satisfiable: start {start} >= length {length}"
                    )
                f.seek(start)
                return read_fully(f, min(end, length) - start)

    def _list(self, native: str) -> List[UniversalPath]:
        with _translate_os_errors(native, map_not_found=False):
            if not stat_mod.S_ISDIR(os.stat(native).st_mode):
                raise NotADirError(f"not a directory: {native}")
            names = sorted(os.listdir(native))
        return [UniversalPath.from_local(os.path.join(native, name)) for name in names]


register_storage(StorageBackend.LOCAL, LocalStorage)
