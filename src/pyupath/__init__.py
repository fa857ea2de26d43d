from .core import (
    BackendKind,
    EntryKind,
    EntryMetadata,
    InvalidPathError,
    InvalidUriError,
    NotADirError,
    NotAFileError,
    PathNotFoundError,
    RangeNotSatisfiableError,
    Storage,
    StorageBackend,
    StorageCapabilities,
    StorageError,
    StorageIOError,
    UniversalPath,
    UniversalPathError,
    UnsupportedBackendError,
    UnsupportedFeatureError,
    open_storage_for,
    register_storage,
    registered_backends,
    unregister_storage,
)
from .local import LocalStorage, native_path_for

__all__ = [
    "BackendKind",
    "EntryKind",
    "EntryMetadata",
    "InvalidPathError",
    "InvalidUriError",
    "LocalStorage",
    "NotADirError",
    "NotAFileError",
    "PathNotFoundError",
    "RangeNotSatisfiableError",
    "Storage",
    "StorageBackend",
    "StorageCapabilities",
    "StorageError",
    "StorageIOError",
    "UniversalPath",
    "UniversalPathError",
    "UnsupportedBackendError",
    "UnsupportedFeatureError",
    "native_path_for",
    "open_storage_for",
    "register_storage",
    "registered_backends",
    "unregister_storage",
]
__version__ = "0.1.0"
