from typing import List

import pytest

from pyupath import LocalStorage
from pyupath.core import (
    EntryKind,
    EntryMetadata,
    Storage,
    StorageBackend,
    StorageCapabilities,
    UniversalPath,
    UnsupportedBackendError,
    UnsupportedFeatureError,
    open_storage_for,
    register_storage,
    registered_backends,
    unregister_storage,
)

MEMORY = StorageBackend.other("mem")


class MemoryStorage(Storage):
    """Minimal in-memory backend used to exercise registration."""

    def __init__(self):
        self.files = {("a.txt",): b"abc"}

    def backend(self) -> StorageBackend:
        return MEMORY

    def capabilities(self) -> StorageCapabilities:
        return StorageCapabilities(can_stat=True, can_read=True)

    async def stat(self, path: UniversalPath) -> EntryMetadata:
        data = self.files[tuple(path.segments)]
        return EntryMetadata(kind=EntryKind.FILE, size_bytes=len(data))

    async def read(self, path: UniversalPath) -> bytes:
        return self.files[tuple(path.segments)]

    async def read_range(self, path: UniversalPath, start: int, end: int) -> bytes:
        return (await self.read(path))[start:end]

    async def list(self, path: UniversalPath) -> List[UniversalPath]:
        return []


@pytest.fixture
def memory_backend():
    register_storage(MEMORY, MemoryStorage)
    yield
    unregister_storage(MEMORY)


def test_local_is_registered():
    assert StorageBackend.LOCAL in registered_backends()
    storage = open_storage_for(UniversalPath.from_local("/tmp"))
    assert isinstance(storage, LocalStorage)
    assert storage.backend() == StorageBackend.LOCAL


def test_unsupported_backend():
    with pytest.raises(UnsupportedBackendError) as exc:
        open_storage_for(UniversalPath.from_uri("s3://bucket/a/b.txt"))
    assert exc.value.backend == StorageBackend.S3
    assert str(exc.value) == "unsupported backend: S3"


@pytest.mark.asyncio
async def test_registered_extension_backend(memory_backend):
    path = UniversalPath.from_uri("mem://host/a.txt")
    storage = open_storage_for(path)
    assert isinstance(storage, MemoryStorage)
    assert await storage.read(path) == b"abc"
    assert (await storage.stat(path)).size_bytes == 3


def test_unregister_removes_backend(memory_backend):
    unregister_storage(MEMORY)
    with pytest.raises(UnsupportedBackendError):
        open_storage_for(UniversalPath(MEMORY, segments=["a.txt"]))


@pytest.mark.asyncio
async def test_glob_defaults_to_unsupported(memory_backend):
    storage = MemoryStorage()
    assert not storage.capabilities().can_glob
    with pytest.raises(UnsupportedFeatureError) as exc:
        await storage.glob(UniversalPath(MEMORY, segments=["*.txt"]))
    assert exc.value.feature == "glob"


def test_capabilities_none():
    caps = StorageCapabilities.none()
    assert not any([caps.can_stat, caps.can_read, caps.can_read_range, caps.can_list, caps.can_glob])
