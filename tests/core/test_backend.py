import pytest

from pyupath.core import BackendKind, StorageBackend


@pytest.mark.parametrize(
    "scheme, expected",
    [
        ("", StorageBackend.LOCAL),
        ("file", StorageBackend.LOCAL),
        ("FILE", StorageBackend.LOCAL),
        ("smb", StorageBackend.NETWORK_DRIVE),
        ("cifs", StorageBackend.NETWORK_DRIVE),
        ("ftp", StorageBackend.FTP),
        ("sftp", StorageBackend.SFTP),
        ("s3", StorageBackend.S3),
        ("http", StorageBackend.HTTP),
        ("https", StorageBackend.HTTPS),
    ],
)
def test_known_schemes(scheme, expected):
    assert StorageBackend.from_scheme(scheme) == expected


def test_unknown_scheme_kept_verbatim():
    backend = StorageBackend.from_scheme("Custom+Proto")
    assert backend.kind is BackendKind.OTHER
    assert backend.raw_scheme == "Custom+Proto"
    assert backend.scheme == "Custom+Proto"
    assert backend == StorageBackend.other("Custom+Proto")


def test_scheme_tokens():
    assert StorageBackend.LOCAL.scheme == "file"
    assert StorageBackend.NETWORK_DRIVE.scheme == "smb"
    assert StorageBackend.HTTPS.scheme == "https"
    assert StorageBackend.S3.is_valid_scheme()
    assert not StorageBackend.other("not a scheme").is_valid_scheme()
    assert not StorageBackend.other("3d").is_valid_scheme()


def test_display_names():
    assert str(StorageBackend.S3) == "S3"
    assert str(StorageBackend.NETWORK_DRIVE) == "NetworkDrive"
    assert str(StorageBackend.other("gs")) == "Other('gs')"


def test_backends_are_hashable_values():
    seen = {StorageBackend.LOCAL, StorageBackend(BackendKind.LOCAL), StorageBackend.other("gs")}
    assert len(seen) == 2


def test_raw_scheme_only_on_other():
    with pytest.raises(ValueError):
        StorageBackend(BackendKind.OTHER)
    with pytest.raises(ValueError):
        StorageBackend(BackendKind.S3, "s3")
