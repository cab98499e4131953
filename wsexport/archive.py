"""Archive sink: accumulates workspace entries and builds the ZIP archive."""

import asyncio
import io
import logging
import zipfile
from typing import Dict, List, Optional, Union

from .exceptions import ArchiveFinalizedError, EmptyArchiveError
from .models import PATH_SEPARATOR

logger = logging.getLogger(__name__)

# Fixed entry timestamp so the same tree always produces the same bytes
ZIP_EPOCH = (1980, 1, 1, 0, 0, 0)

DEFAULT_COMPRESSION_LEVEL = 9

_DIR_MODE = 0o40755
_FILE_MODE = 0o100644
_MSDOS_DIRECTORY_FLAG = 0x10


class ArchiveSink:
    """Collects folder markers and file contents for one export.

    Entries are written in insertion order. The sink is single-use: once
    :meth:`finalize` has run, any further call raises ArchiveFinalizedError.
    """

    def __init__(self):
        # Archive name -> content; None marks an empty folder entry
        self._entries: Dict[str, Optional[bytes]] = {}
        self._finalized = False

    @property
    def entries(self) -> List[str]:
        """Archive entry names in insertion order (folders end with '/')."""
        return list(self._entries)

    @property
    def finalized(self) -> bool:
        return self._finalized

    def __len__(self) -> int:
        return len(self._entries)

    def add_folder(self, path: str) -> None:
        """Register an empty directory entry. Duplicate paths are ignored.

        Args:
            path: Relative directory path
        """
        self._check_open()
        name = _normalize(path) + PATH_SEPARATOR
        if name in self._entries:
            return
        self._entries[name] = None

    def add_file(self, path: str, content: Union[bytes, str]) -> None:
        """Register file content at a relative path.

        Args:
            path: Relative file path
            content: File bytes, stored verbatim. Text is encoded as UTF-8.
        """
        self._check_open()
        if isinstance(content, str):
            content = content.encode("utf-8")
        self._entries[_normalize(path)] = bytes(content)

    async def finalize(self, compression_level: int = DEFAULT_COMPRESSION_LEVEL) -> bytes:
        """Build the ZIP archive.

        Args:
            compression_level: Deflate level, 0 (store) to 9 (best ratio)

        Returns:
            Archive bytes

        Raises:
            ValueError: If compression_level is out of range
            EmptyArchiveError: If no entries were added or the archive is empty
            ArchiveFinalizedError: If the sink was already finalized
        """
        self._check_open()
        if not 0 <= compression_level <= 9:
            raise ValueError(f"compression_level must be between 0 and 9, got {compression_level}")

        self._finalized = True
        if not self._entries:
            raise EmptyArchiveError()

        data = await asyncio.to_thread(self._build, compression_level)
        if not data:
            raise EmptyArchiveError()

        logger.info("Archive generated (%d entries, %d bytes)", len(self._entries), len(data))
        return data

    def _build(self, compression_level: int) -> bytes:
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED, compresslevel=compression_level) as zf:
            for name, content in self._entries.items():
                info = zipfile.ZipInfo(name, date_time=ZIP_EPOCH)
                if content is None:
                    info.compress_type = zipfile.ZIP_STORED
                    info.external_attr = (_DIR_MODE << 16) | _MSDOS_DIRECTORY_FLAG
                    zf.writestr(info, b"")
                else:
                    info.compress_type = zipfile.ZIP_DEFLATED
                    info.external_attr = _FILE_MODE << 16
                    zf.writestr(info, content, compresslevel=compression_level)
        return buffer.getvalue()

    def _check_open(self) -> None:
        if self._finalized:
            raise ArchiveFinalizedError("Archive has already been finalized")


def _normalize(path: str) -> str:
    normalized = path.replace("\\", PATH_SEPARATOR).strip(PATH_SEPARATOR)
    if not normalized:
        raise ValueError("Archive entries need a non-empty relative path")
    return normalized
