from .backend import BackendKind, StorageBackend
from .errors import (
    InvalidPathError,
    InvalidUriError,
    NotADirError,
    NotAFileError,
    PathNotFoundError,
    RangeNotSatisfiableError,
    StorageError,
    StorageIOError,
    UniversalPathError,
    UnsupportedBackendError,
    UnsupportedFeatureError,
)
from .fs import EntryKind, EntryMetadata, Storage, StorageCapabilities
from .path import UniversalPath, split_local_path
from .registry import open_storage_for, register_storage, registered_backends, unregister_storage
