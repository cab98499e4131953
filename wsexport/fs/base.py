"""Base class for workspace filesystems."""

from abc import ABC, abstractmethod
from typing import List

from ..models import DirEntry


class WorkspaceFS(ABC):
    """Read-only view of a mounted workspace.

    Paths passed to :meth:`readdir` and :meth:`read_file` are relative to
    :attr:`workdir`, use '/' as separator and have no leading separator.
    The empty path is the workspace root.
    """

    workdir: str = ""

    @property
    def ready(self) -> bool:
        """Whether the workspace is mounted and can be read."""
        return True

    @abstractmethod
    async def readdir(self, path: str) -> List[DirEntry]:
        """List the immediate entries of a directory.

        Args:
            path: Relative directory path

        Returns:
            Entries in listing order

        Raises:
            OSError: If the path does not exist or is not a directory
        """
        pass

    @abstractmethod
    async def read_file(self, path: str) -> bytes:
        """Read the full content of a file.

        Args:
            path: Relative file path

        Returns:
            File content

        Raises:
            OSError: If the path does not exist, is a directory, or is unreadable
        """
        pass
