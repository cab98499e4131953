"""wsexport: Export a project workspace into a single ZIP archive."""

import logging
import os
import sys

__version__ = "0.1.0"

# Configure logging to stderr (keep stdout clean for piping)
_log_level = os.environ.get("WSEXPORT_LOG_LEVEL", "WARNING").upper()
logging.basicConfig(
    level=getattr(logging, _log_level, logging.WARNING),
    format="%(levelname)s: %(name)s: %(message)s",
    stream=sys.stderr,
)

from .archive import ArchiveSink  # noqa: E402
from .exceptions import (  # noqa: E402
    ArchiveFinalizedError,
    DirectoryReadError,
    EmptyArchiveError,
    ExportError,
    WorkspaceNotReadyError,
)
from .export import export_workspace, export_workspace_sync, save_archive  # noqa: E402
from .models import DirEntry, ExportResult, ReadResult, SoftFailure  # noqa: E402
from .walker import TreeWalker  # noqa: E402

__all__ = [
    "__version__",
    "ArchiveSink",
    "TreeWalker",
    "export_workspace",
    "export_workspace_sync",
    "save_archive",
    "DirEntry",
    "ExportResult",
    "ReadResult",
    "SoftFailure",
    "ExportError",
    "WorkspaceNotReadyError",
    "DirectoryReadError",
    "EmptyArchiveError",
    "ArchiveFinalizedError",
]
