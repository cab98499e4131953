"""Depth-first workspace walker that feeds an archive sink."""

import logging
from typing import Iterable, Iterator, List, Optional, Tuple

from .archive import DEFAULT_COMPRESSION_LEVEL, ArchiveSink
from .exceptions import DirectoryReadError
from .fs.base import WorkspaceFS
from .models import DirEntry, ExportResult, ReadResult, SoftFailure, join_path, relative_to_workdir

logger = logging.getLogger(__name__)

DEFAULT_EXCLUDE_DIRS = ("node_modules", ".git")

# (relative directory path, remaining entries of that directory)
_Frame = Tuple[str, Iterator[DirEntry]]


class TreeWalker:
    """Walks a workspace and builds its archive.

    Entries of a directory are handled in listing order. A directory's
    folder marker and all of its descendants are emitted before its next
    sibling. Traversal keeps its own stack of directory frames, so tree
    depth is not bounded by the interpreter recursion limit.

    Directory listing failures are fatal at any depth. File read failures
    are recorded as soft failures and the walk continues.
    """

    def __init__(
        self,
        exclude_dirs: Iterable[str] = DEFAULT_EXCLUDE_DIRS,
        compression_level: int = DEFAULT_COMPRESSION_LEVEL,
    ):
        self.exclude_dirs = frozenset(exclude_dirs)
        self.compression_level = compression_level

    def is_excluded(self, entry: DirEntry) -> bool:
        return entry.is_directory and entry.name in self.exclude_dirs

    async def walk(self, handle: WorkspaceFS, root_path: Optional[str] = None) -> ExportResult:
        """Archive everything below ``root_path``.

        Args:
            handle: Workspace to read from
            root_path: Directory to start from, absolute (under ``handle.workdir``)
                or relative. Defaults to the workspace root.

        Returns:
            ExportResult with the archive bytes and any soft failures

        Raises:
            DirectoryReadError: If any directory cannot be listed
            ValueError: If root_path is absolute and outside the workspace
            EmptyArchiveError: If nothing ended up in the archive
        """
        start = relative_to_workdir(root_path if root_path is not None else handle.workdir, handle.workdir)
        sink = ArchiveSink()
        failures: List[SoftFailure] = []

        await self._walk_tree(handle, start, sink, failures)

        archive = await sink.finalize(self.compression_level)
        return ExportResult(archive=archive, failures=failures)

    async def _walk_tree(self, handle: WorkspaceFS, start: str, sink: ArchiveSink, failures: List[SoftFailure]) -> None:
        stack: List[_Frame] = [(start, iter(await self._list(handle, start)))]

        while stack:
            path, entries = stack[-1]
            entry = next(entries, None)
            if entry is None:
                stack.pop()
                continue

            entry_path = join_path(path, entry.name)

            if self.is_excluded(entry):
                logger.debug("Skipping directory: %s", entry_path)
                continue

            if entry.is_directory:
                logger.debug("Creating folder in archive: %s", entry_path)
                sink.add_folder(entry_path)
                stack.append((entry_path, iter(await self._list(handle, entry_path))))
                continue

            result = await self._read_entry(handle, entry_path)
            if result.ok:
                logger.debug("Adding file to archive: %s", entry_path)
                sink.add_file(entry_path, result.content)
            else:
                logger.error("Failed to read file %s: %s", entry_path, result.error)
                failures.append(SoftFailure(path=entry_path, message=result.error))

    async def _list(self, handle: WorkspaceFS, path: str) -> List[DirEntry]:
        logger.debug("Reading directory: %s", path or "<root>")
        try:
            return list(await handle.readdir(path))
        except Exception as e:
            logger.error("Failed to read directory %s: %s", path or "<root>", e)
            raise DirectoryReadError(path, _describe(e)) from e

    async def _read_entry(self, handle: WorkspaceFS, path: str) -> ReadResult:
        try:
            return ReadResult.success(await handle.read_file(path))
        except Exception as e:
            return ReadResult.failure(_describe(e))


def _describe(error: BaseException) -> str:
    return str(error) or type(error).__name__
