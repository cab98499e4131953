"""Workspace export entry points."""

import asyncio
import logging
from pathlib import Path
from typing import Optional, Union

from .config import ExportConfig
from .exceptions import WorkspaceNotReadyError
from .fs.base import WorkspaceFS
from .models import ExportResult
from .walker import TreeWalker

logger = logging.getLogger(__name__)


async def export_workspace(handle: WorkspaceFS, config: Optional[ExportConfig] = None) -> ExportResult:
    """Export a whole workspace into a ZIP archive.

    Args:
        handle: Mounted workspace to export
        config: Export settings. Defaults to ExportConfig()

    Returns:
        ExportResult. A non-empty ``failures`` list means the export
        succeeded but some files could not be read.

    Raises:
        WorkspaceNotReadyError: If the workspace is not ready
        DirectoryReadError: If a directory cannot be listed
        EmptyArchiveError: If the archive came out empty
    """
    if config is None:
        config = ExportConfig()

    if not handle.ready:
        raise WorkspaceNotReadyError()

    logger.info("Starting workspace export from %s", handle.workdir or "<root>")
    walker = TreeWalker(exclude_dirs=config.exclude_dirs, compression_level=config.compression_level)
    result = await walker.walk(handle, handle.workdir)

    if result.failures:
        logger.warning("Export finished with %d unreadable file(s)", len(result.failures))
    logger.info("Export complete (%d bytes)", result.size)
    return result


def export_workspace_sync(handle: WorkspaceFS, config: Optional[ExportConfig] = None) -> ExportResult:
    """Synchronous wrapper around :func:`export_workspace`."""
    return asyncio.run(export_workspace(handle, config))


def archive_path(destination: Union[str, Path], archive_name: Optional[str] = None) -> Path:
    """Resolve where :func:`save_archive` will write for ``destination``."""
    path = Path(destination).expanduser()
    if path.is_dir():
        path = path / (archive_name or ExportConfig().archive_name)
    return path


def save_archive(
    result: ExportResult,
    destination: Union[str, Path],
    archive_name: Optional[str] = None,
) -> Path:
    """Write an export's archive to disk.

    Args:
        result: Finished export
        destination: Target file, or an existing directory to place
            ``archive_name`` in
        archive_name: File name used when destination is a directory.
            Defaults to ExportConfig().archive_name

    Returns:
        Path of the written archive
    """
    path = archive_path(destination, archive_name)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(result.archive)
    logger.info("Archive written to %s", path)
    return path
