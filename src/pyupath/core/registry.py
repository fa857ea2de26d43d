from __future__ import annotations

import logging
from typing import Callable, Dict, List

from .backend import StorageBackend
from .errors import UnsupportedBackendError
from .fs import Storage
from .path import UniversalPath

logger = logging.getLogger(__name__)

StorageFactory = Callable[[], Storage]

_FACTORIES: Dict[StorageBackend, StorageFactory] = {}


def register_storage(backend: StorageBackend, factory: StorageFactory) -> None:
    """Register the storage implementation serving ``backend``, replacing any previous one."""
    _FACTORIES[backend] = factory


def unregister_storage(backend: StorageBackend) -> None:
    _FACTORIES.pop(backend, None)


def registered_backends() -> List[StorageBackend]:
    return list(_FACTORIES)


def open_storage_for(path: UniversalPath) -> Storage:
    """
    Return a storage implementation for the path's backend.

    Raises ``UnsupportedBackendError`` when nothing is registered for it. That
    is a permanent condition, not a transient one.
    """
    factory = _FACTORIES.get(path.backend)
    if factory is None:
        logger.debug("No storage registered for backend %s", path.backend)
        raise UnsupportedBackendError(path.backend)
    return factory()
