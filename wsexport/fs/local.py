"""Workspace backed by a directory on the local disk."""

import asyncio
import os
import stat
from pathlib import Path
from typing import Iterable, List, Optional, Union

from ..models import DirEntry
from .base import WorkspaceFS


class LocalWorkspace(WorkspaceFS):
    """Expose a local directory as a workspace.

    Listings are sorted by name so that repeated exports of the same tree
    produce the same entry order. Symlinked directories are reported as
    files and are never followed. Only regular files can be read; FIFOs,
    sockets and device files raise OSError instead of blocking.

    Args:
        root: Directory to expose
        ignore_paths: Relative paths left out of every listing
    """

    def __init__(self, root: Union[str, Path], ignore_paths: Optional[Iterable[str]] = None):
        self.root = Path(root).expanduser().resolve()
        self.workdir = str(self.root)
        self.ignore_paths = frozenset(p.strip("/") for p in ignore_paths or ())

    @property
    def ready(self) -> bool:
        return self.root.is_dir()

    def relative_path(self, path: Union[str, Path]) -> Optional[str]:
        """Path relative to the root, or None if ``path`` lies outside it."""
        resolved = Path(path).expanduser().resolve()
        try:
            return resolved.relative_to(self.root).as_posix()
        except ValueError:
            return None

    async def readdir(self, path: str) -> List[DirEntry]:
        entries = await asyncio.to_thread(self._scan, self._resolve(path))
        if not self.ignore_paths:
            return entries
        prefix = f"{path.strip('/')}/" if path.strip("/") else ""
        return [e for e in entries if f"{prefix}{e.name}" not in self.ignore_paths]

    async def read_file(self, path: str) -> bytes:
        return await asyncio.to_thread(self._read, self._resolve(path), path)

    def _resolve(self, path: str) -> Path:
        return self.root.joinpath(*[p for p in path.split("/") if p])

    @staticmethod
    def _read(file_path: Path, path: str) -> bytes:
        if not stat.S_ISREG(file_path.stat().st_mode):
            raise OSError(f"Not a regular file: {path}")
        return file_path.read_bytes()

    @staticmethod
    def _scan(directory: Path) -> List[DirEntry]:
        with os.scandir(directory) as it:
            entries = [DirEntry(name=e.name, is_directory=e.is_dir(follow_symlinks=False)) for e in it]
        return sorted(entries, key=lambda e: e.name)
