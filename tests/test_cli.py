import asyncio

import pytest
from click.testing import CliRunner

from pyupath import LocalStorage, StorageBackend, UniversalPath
from pyupath.cli import main, parse_target, print_listing


@pytest.fixture
def runner():
    return CliRunner()


def test_parse_target_heuristic():
    assert parse_target("s3://bucket/key").backend == StorageBackend.S3
    assert parse_target("file:/etc/hosts").path_segments() == ["etc", "hosts"]
    assert parse_target("C:\\Users\\x.txt").path_segments() == ["C:", "Users", "x.txt"]


def test_inspect_file(runner, tmp_path):
    f = tmp_path / "hello.txt"
    f.write_bytes(b"hello")
    result = runner.invoke(main, [str(f)])
    assert result.exit_code == 0, result.output
    assert "backend: Local" in result.output
    assert "extension: txt" in result.output
    assert "kind: file" in result.output
    assert "size_bytes: 5" in result.output
    assert "68 65 6C 6C 6F" in result.output
    assert "glob(): capability not supported" in result.output


def test_inspect_directory(runner, tmp_path):
    for name in ("a", "b", "c"):
        (tmp_path / name).write_bytes(b"")
    result = runner.invoke(main, [str(tmp_path), "--list-limit", "2"])
    assert result.exit_code == 0, result.output
    assert "kind: directory" in result.output
    assert "[1]" in result.output
    assert "... and 1 more" in result.output


def test_inspect_missing_path_tries_fallbacks(runner, tmp_path):
    result = runner.invoke(main, [str(tmp_path / "nope")])
    assert result.exit_code == 0, result.output
    assert "stat() error: not found" in result.output
    assert "list() attempt after stat failure:" in result.output
    assert "read_range() error:" in result.output


def test_inspect_unsupported_backend(runner):
    result = runner.invoke(main, ["s3://bucket/a/b.txt"])
    assert result.exit_code == 0, result.output
    assert "host: bucket" in result.output
    assert "Failed to open storage for path: unsupported backend: S3" in result.output


def test_inspect_invalid_uri(runner):
    result = runner.invoke(main, ["http://[::1/x"])
    assert result.exit_code == 2


def test_listing_without_remaining_count(tmp_path, capsys):
    for name in ("a", "b", "c"):
        (tmp_path / name).write_bytes(b"")
    path = UniversalPath.from_local(str(tmp_path))
    asyncio.run(print_listing(LocalStorage(), path, 2, show_remaining=False))
    out = capsys.readouterr().out
    assert "[1]" in out
    assert "[2]" not in out
    assert "... and" not in out

    asyncio.run(print_listing(LocalStorage(), path, 2))
    assert "... and 1 more" in capsys.readouterr().out
