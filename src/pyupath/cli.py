"""
pyupath-inspect - parse a URI or local path and exercise it through its storage backend.

Usage:
    pyupath-inspect file:/etc/hosts
    pyupath-inspect /etc/hosts
    pyupath-inspect s3://bucket/path/to/file
    pyupath-inspect sftp://host:22/path
"""
from __future__ import annotations

import asyncio
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

import click

from .config import Settings
from .core import (
    EntryKind,
    EntryMetadata,
    Storage,
    StorageCapabilities,
    StorageError,
    UniversalPath,
    UniversalPathError,
    UnsupportedBackendError,
    open_storage_for,
)
from .logging_config import configure_logging

logger = logging.getLogger(__name__)

HEX_PREVIEW_BYTES = 512
FALLBACK_LIST_LIMIT = 20
FALLBACK_READ_BYTES = 4096


def parse_target(target: str) -> UniversalPath:
    """Treat anything that looks like a URI as one, everything else as a local path."""
    if "://" in target or target.startswith("file:"):
        return UniversalPath.from_uri(target)
    return UniversalPath.from_local(target)


@click.command()
@click.argument("target")
@click.option("--log-level", default=None, help="Logging level (default: $PYUPATH_LOG_LEVEL or WARNING)")
@click.option(
    "--preview-bytes",
    type=click.IntRange(min=0),
    default=None,
    help="Bytes to read from a file (default: $PYUPATH_PREVIEW_BYTES or 65536)",
)
@click.option(
    "--list-limit",
    type=click.IntRange(min=0),
    default=None,
    help="Directory entries to print (default: $PYUPATH_LIST_LIMIT or 50)",
)
@click.version_option(package_name="pyupath")
def main(target: str, log_level: Optional[str], preview_bytes: Optional[int], list_limit: Optional[int]):
    """Inspect TARGET, a URI or a local path.

    \b
    Examples:
        pyupath-inspect /etc/hosts
        pyupath-inspect file:/etc
        pyupath-inspect s3://bucket/path/to/file
    """
    settings = Settings.from_env()
    try:
        configure_logging(log_level or settings.log_level, json_format=settings.log_json)
    except ValueError as ex:
        raise click.BadParameter(str(ex), param_hint="--log-level")

    try:
        upath = parse_target(target)
    except UniversalPathError as ex:
        click.echo(f"Failed to parse input into UniversalPath: {ex}", err=True)
        sys.exit(2)

    logger.debug("Inspecting %r as %r", target, upath)
    click.echo(f"Input: {target}")
    click.echo(f"Parsed as UniversalPath: {upath}")
    print_path_details(upath)

    asyncio.run(
        inspect_storage(
            upath,
            preview_bytes=settings.preview_bytes if preview_bytes is None else preview_bytes,
            list_limit=settings.list_limit if list_limit is None else list_limit,
        )
    )


async def inspect_storage(upath: UniversalPath, preview_bytes: int, list_limit: int) -> None:
    try:
        storage = open_storage_for(upath)
    except UnsupportedBackendError as ex:
        click.echo(f"\nFailed to open storage for path: {ex}")
        return

    click.echo(f"\nStorage backend: {storage.backend()}")
    caps = storage.capabilities()
    print_capabilities(caps)

    if caps.can_stat:
        try:
            meta = await storage.stat(upath)
        except StorageError as ex:
            click.echo(f"\nstat() error: {ex}")
            # Flags may still claim list/read; try them anyway.
            if caps.can_list:
                click.echo("\nlist() attempt after stat failure:")
                await print_listing(storage, upath, FALLBACK_LIST_LIMIT, show_remaining=False)
            if caps.can_read or caps.can_read_range:
                click.echo("\nread() attempt after stat failure:")
                await print_read(storage, upath, caps, FALLBACK_READ_BYTES)
        else:
            click.echo("\nstat():")
            print_metadata(meta)
            if meta.kind is EntryKind.DIRECTORY and caps.can_list:
                click.echo("\nlist():")
                await print_listing(storage, upath, list_limit)
            if meta.kind is EntryKind.FILE and (caps.can_read_range or caps.can_read):
                click.echo("\nread():")
                await print_read(storage, upath, caps, preview_bytes)
    else:
        click.echo("\nstat(): capability not supported")

    if caps.can_glob:
        click.echo("\nglob(): capability claimed but no pattern provided; skipping")
    else:
        click.echo("\nglob(): capability not supported")


def print_path_details(upath: UniversalPath) -> None:
    click.echo("\nUniversalPath details:")
    click.echo(f"  backend: {upath.backend}")
    click.echo(f"  host: {upath.host}")
    click.echo(f"  port: {upath.port}")
    click.echo(f"  path: {upath.path()}")
    click.echo(f"  is_root: {upath.is_root()}")
    click.echo(f"  last_segment: {upath.last_segment()}")
    click.echo(f"  extension: {upath.extension()}")
    try:
        click.echo(f"  to_uri(): {upath.to_uri()}")
    except UniversalPathError as ex:
        click.echo(f"  to_uri() error: {ex}")
    segments = upath.path_segments()
    click.echo(f"  path_segments ({len(segments)}): {segments}")


def print_capabilities(caps: StorageCapabilities) -> None:
    click.echo("\nStorage capabilities:")
    click.echo(f"  can_stat: {caps.can_stat}")
    click.echo(f"  can_read: {caps.can_read}")
    click.echo(f"  can_read_range: {caps.can_read_range}")
    click.echo(f"  can_list: {caps.can_list}")
    click.echo(f"  can_glob: {caps.can_glob}")


def print_metadata(meta: EntryMetadata) -> None:
    click.echo(f"  kind: {meta.kind.value}")
    click.echo(f"  size_bytes: {meta.size_bytes}")
    click.echo(f"  modified_at: {_format_time(meta.modified_at)}")
    click.echo(f"  created_at: {_format_time(meta.created_at)}")


async def print_listing(
    storage: Storage, upath: UniversalPath, limit: int, show_remaining: bool = True
) -> None:
    try:
        children = await storage.list(upath)
    except StorageError as ex:
        click.echo(f"  list() error: {ex}")
        return
    if not children:
        click.echo("  (empty)")
        return
    for idx, child in enumerate(children[:limit]):
        click.echo(f"  [{idx}] {child}")
    if show_remaining and len(children) > limit:
        click.echo(f"  ... and {len(children) - limit} more")


async def print_read(storage: Storage, upath: UniversalPath, caps: StorageCapabilities, size: int) -> None:
    if caps.can_read_range:
        try:
            buf = await storage.read_range(upath, 0, size)
        except StorageError as ex:
            click.echo(f"  read_range() error: {ex}")
            return
    else:
        try:
            buf = (await storage.read(upath))[:size]
        except StorageError as ex:
            click.echo(f"  read() error: {ex}")
            return
    print_preview(buf)


def print_preview(buf: bytes) -> None:
    shown = buf[:HEX_PREVIEW_BYTES]
    click.echo(f"  preview bytes: {len(buf)} (showing up to {HEX_PREVIEW_BYTES} bytes)")
    if shown:
        lines = [" ".join(f"{b:02X}" for b in shown[i:i + 16]) for i in range(0, len(shown), 16)]
        click.echo("  hex:\n" + _indent("\n".join(lines), 4))
    try:
        text = shown.decode("utf-8")
    except UnicodeDecodeError:
        click.echo("  utf8: (invalid UTF-8)")
    else:
        click.echo("  utf8: \n" + _indent(text, 4))


def _indent(block: str, spaces: int) -> str:
    pad = " " * spaces
    return "\n".join(pad + line for line in block.splitlines())


def _format_time(ts: Optional[float]) -> str:
    if ts is None:
        return "None"
    return datetime.fromtimestamp(ts, tz=timezone.utc).isoformat()


if __name__ == "__main__":
    main()
