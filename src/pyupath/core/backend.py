from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import ClassVar, Optional

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")


class BackendKind(enum.Enum):
    LOCAL = "Local"
    NETWORK_DRIVE = "NetworkDrive"
    FTP = "Ftp"
    SFTP = "Sftp"
    S3 = "S3"
    HTTP = "Http"
    HTTPS = "Https"
    OTHER = "Other"


_SCHEME_TO_KIND = {
    "": BackendKind.LOCAL,
    "file": BackendKind.LOCAL,
    "smb": BackendKind.NETWORK_DRIVE,
    "cifs": BackendKind.NETWORK_DRIVE,
    "ftp": BackendKind.FTP,
    "sftp": BackendKind.SFTP,
    "s3": BackendKind.S3,
    "http": BackendKind.HTTP,
    "https": BackendKind.HTTPS,
}

_KIND_TO_SCHEME = {
    BackendKind.LOCAL: "file",
    BackendKind.NETWORK_DRIVE: "smb",
    BackendKind.FTP: "ftp",
    BackendKind.SFTP: "sftp",
    BackendKind.S3: "s3",
    BackendKind.HTTP: "http",
    BackendKind.HTTPS: "https",
}


@dataclass(frozen=True)
class StorageBackend:
    """
    Identity of the storage system a path addresses.

    Known systems are plain kinds; anything else is ``Other`` and keeps the
    raw scheme token it was parsed from, so unknown schemes survive a
    parse/serialize round trip instead of being rejected.
    """
    kind: BackendKind
    raw_scheme: Optional[str] = None

    LOCAL: ClassVar["StorageBackend"]
    NETWORK_DRIVE: ClassVar["StorageBackend"]
    FTP: ClassVar["StorageBackend"]
    SFTP: ClassVar["StorageBackend"]
    S3: ClassVar["StorageBackend"]
    HTTP: ClassVar["StorageBackend"]
    HTTPS: ClassVar["StorageBackend"]

    def __post_init__(self) -> None:
        if self.kind is BackendKind.OTHER:
            if self.raw_scheme is None:
                raise ValueError("Other backend requires a raw scheme")
        elif self.raw_scheme is not None:
            raise ValueError(f"{self.kind.value} backend does not carry a raw scheme")

    @classmethod
    def other(cls, scheme: str) -> "StorageBackend":
        return cls(BackendKind.OTHER, scheme)

    @classmethod
    def from_scheme(cls, scheme: str) -> "StorageBackend":
        """Map a URI scheme token to a backend; unknown tokens become ``Other``."""
        kind = _SCHEME_TO_KIND.get(scheme.lower())
        if kind is None:
            return cls.other(scheme)
        return cls(kind)

    @property
    def scheme(self) -> str:
        """The scheme token this backend serializes to (not validated)."""
        if self.kind is BackendKind.OTHER:
            return self.raw_scheme  # type: ignore[return-value]
        return _KIND_TO_SCHEME[self.kind]

    def is_valid_scheme(self) -> bool:
        return bool(_SCHEME_RE.match(self.scheme))

    def __str__(self) -> str:
        if self.kind is BackendKind.OTHER:
            return f"Other({self.raw_scheme!r})"
        return self.kind.value


StorageBackend.LOCAL = StorageBackend(BackendKind.LOCAL)
StorageBackend.NETWORK_DRIVE = StorageBackend(BackendKind.NETWORK_DRIVE)
StorageBackend.FTP = StorageBackend(BackendKind.FTP)
StorageBackend.SFTP = StorageBackend(BackendKind.SFTP)
StorageBackend.S3 = StorageBackend(BackendKind.S3)
StorageBackend.HTTP = StorageBackend(BackendKind.HTTP)
StorageBackend.HTTPS = StorageBackend(BackendKind.HTTPS)
