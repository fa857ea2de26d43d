# src/pyupath/core/path.py
"""
Backend-agnostic path value.

A ``UniversalPath`` is (backend, host, port, segments). It can be parsed from a
URI or from a native local path string and serialized back to a URI. All
operations here are lexical: nothing touches a filesystem, nothing resolves
symlinks, and segments compare byte for byte with no Unicode normalization.
"""
from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union
from urllib.parse import quote, unquote, urlsplit

from .backend import StorageBackend
from .errors import InvalidUriError

StrOrPath = Union[str, os.PathLike]

_LOCAL_SEPARATORS = re.compile(r"[/\\]")
# RFC 3986 pchar minus the percent sign, plus "/" between segments.
_PATH_SAFE = "/:@!$&'()*+,;="
# Forbidden code points of a URI host; anything outside printable ASCII is rejected too.
_HOST_FORBIDDEN = frozenset(" \t\n\r#/:<>?@[\\]^|")


def split_local_path(path: StrOrPath) -> List[str]:
    """
    Split a native path string into segments without asking the OS.

    - ``C:\\Users\\x`` -> ``["C:", "Users", "x"]`` (drive marker kept as one segment)
    - ``\\\\server\\share\\f`` or ``//server/share/f`` -> ``["server", "share", "f"]``
    - ``/a//b/`` -> ``["a", "b"]``

    Both ``/`` and ``\\`` separate segments; empty segments are dropped.
    """
    s = os.fspath(path)
    if len(s) >= 2 and s[1] == ":":
        return [s[:2]] + _split_separators(s[2:])
    if s.startswith(("\\\\", "//")):
        return _split_separators(s[2:])
    return _split_separators(s)


def _split_separators(s: str) -> List[str]:
    return [seg for seg in _LOCAL_SEPARATORS.split(s) if seg]


def _split_authority(netloc: str) -> Tuple[Optional[str], Optional[int]]:
    hostport = netloc.rpartition("@")[2]
    if hostport.startswith("["):
        end = hostport.find("]")
        if end == -1:
            raise InvalidUriError(f"unterminated IPv6 host in {netloc!r}")
        host, rest = hostport[:end + 1], hostport[end + 1:]
        if rest and not rest.startswith(":"):
            raise InvalidUriError(f"unexpected characters after host in {netloc!r}")
        port_text = rest[1:]
    else:
        host, _, port_text = hostport.partition(":")

    port: Optional[int] = None
    if port_text:
        if not (port_text.isascii() and port_text.isdigit()):
            raise InvalidUriError(f"invalid port {port_text!r}")
        port = int(port_text)
        if port > 0xFFFF:
            raise InvalidUriError(f"port out of range: {port}")
    _check_host(host)
    return (host or None), port


def _check_host(host: str) -> None:
    if host.startswith("[") and host.endswith("]"):
        inner = host[1:-1]
        if not inner or any(c not in "0123456789abcdefABCDEF:." for c in inner):
            raise InvalidUriError(f"invalid IPv6 host {host!r}")
        return
    for c in host:
        if c in _HOST_FORBIDDEN or not 0x20 < ord(c) < 0x7F:
            raise InvalidUriError(f"invalid character {c!r} in host {host!r}")


@dataclass
class UniversalPath:
    """
    A location on some storage backend.

    - backend: which storage system the path addresses
    - host: authority host, for networked backends (e.g. S3 bucket, SFTP server)
    - port: optional authority port
    - segments: ordered, never-empty path components; ``[]`` is the root

    Instances are mutable values: ``append``/``pop`` change the receiver while
    ``join``/``parent`` return new paths. Equality is structural.
    """
    backend: StorageBackend
    host: Optional[str] = None
    port: Optional[int] = None
    segments: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.segments = list(self.segments)
        if any(not seg for seg in self.segments):
            raise ValueError("path segments must be non-empty strings")
        if self.port is not None and not 0 <= self.port <= 0xFFFF:
            raise ValueError(f"port out of range: {self.port}")

    # ----- construction -----
    @classmethod
    def from_uri(cls, uri: str) -> "UniversalPath":
        """Parse ``scheme://host[:port]/seg1/seg2``; raises ``InvalidUriError``."""
        try:
            parts = urlsplit(uri)
        except ValueError as ex:
            raise InvalidUriError(str(ex)) from ex
        if not parts.scheme:
            raise InvalidUriError(f"relative URI without a scheme: {uri!r}")

        host, port = None, None
        if parts.netloc:
            host, port = _split_authority(parts.netloc)

        upath = cls(StorageBackend.from_scheme(parts.scheme), host=host, port=port)
        # Decoded before splitting, so "%2F" separates and "%2E%2E" pops.
        for seg in unquote(parts.path).split("/"):
            upath.append(seg)
        return upath

    @classmethod
    def from_local(cls, path: StrOrPath) -> "UniversalPath":
        """Build a Local path from a POSIX, Windows drive or UNC path string."""
        return cls(StorageBackend.LOCAL, segments=split_local_path(path))

    local = from_local

    # ----- rendering -----
    def path(self) -> str:
        """Segments joined as ``/seg1/seg2`` (``/`` for the root)."""
        return "/" + "/".join(self.segments)

    def to_uri(self) -> str:
        scheme = self.backend.scheme
        if not self.backend.is_valid_scheme():
            raise InvalidUriError(f"invalid scheme {scheme!r}")
        try:
            encoded = quote(self.path(), safe=_PATH_SAFE, errors="strict")
        except UnicodeEncodeError as ex:
            raise InvalidUriError(f"path cannot be percent-encoded: {ex}") from ex

        if self.host is None:
            if encoded.startswith("//"):
                raise InvalidUriError(f"path {encoded!r} would be read back as an authority")
            return f"{scheme}:{encoded}"

        _check_host(self.host)
        authority = self.host if self.port is None else f"{self.host}:{self.port}"
        return f"{scheme}://{authority}{encoded}"

    def __str__(self) -> str:
        try:
            return self.to_uri()
        except InvalidUriError:
            return self.path()

    # ----- lexical manipulation -----
    def append(self, segment: str) -> None:
        """Push one segment; ``""``/``"."`` are ignored and ``".."`` pops (never below root)."""
        if segment in ("", "."):
            return
        if segment == "..":
            if self.segments:
                self.segments.pop()
            return
        self.segments.append(segment)

    def join(self, segment: str) -> "UniversalPath":
        joined = self.copy()
        joined.append(segment)
        return joined

    def __truediv__(self, segment: str) -> "UniversalPath":
        return self.join(segment)

    def pop(self) -> Optional[str]:
        if not self.segments:
            return None
        return self.segments.pop()

    def parent(self) -> Optional["UniversalPath"]:
        if not self.segments:
            return None
        p = self.copy()
        p.segments.pop()
        return p

    def relative_to(self, parent: "UniversalPath") -> Optional[List[str]]:
        """
        Segments of ``self`` below ``parent``, or None if ``self`` is not a
        (possibly equal) descendant on the same backend, host and port.
        """
        if (self.backend, self.host, self.port) != (parent.backend, parent.host, parent.port):
            return None
        n = len(parent.segments)
        if n > len(self.segments) or self.segments[:n] != parent.segments:
            return None
        return self.segments[n:]

    # ----- inspection -----
    def path_segments(self) -> List[str]:
        return list(self.segments)

    def last_segment(self) -> Optional[str]:
        return self.segments[-1] if self.segments else None

    def extension(self) -> Optional[str]:
        # ".bashrc" yields "bashrc": a leading dot is not special-cased.
        name = self.last_segment()
        if name is None or "." not in name:
            return None
        return name.rpartition(".")[2]

    def is_root(self) -> bool:
        return not self.segments

    def copy(self) -> "UniversalPath":
        return UniversalPath(self.backend, self.host, self.port, list(self.segments))
