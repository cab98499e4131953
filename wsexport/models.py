"""Data models shared by the walker, the archive sink and the filesystems."""

from dataclasses import dataclass, field
from typing import List, Optional

PATH_SEPARATOR = "/"


def join_path(parent: str, name: str) -> str:
    """Join a relative directory path and an entry name.

    Args:
        parent: Relative path of the parent directory ("" for the root)
        name: Entry name (must not contain a separator)

    Returns:
        Forward-slash joined relative path without a leading separator
    """
    return name if not parent else f"{parent}{PATH_SEPARATOR}{name}"


def relative_to_workdir(path: str, workdir: str) -> str:
    """Convert an absolute workspace path to a path relative to ``workdir``.

    ``workdir`` itself maps to the empty path. Relative paths are returned
    normalized.

    Raises:
        ValueError: If ``path`` is absolute but not under ``workdir``
    """
    path = path.replace("\\", PATH_SEPARATOR)
    workdir = workdir.replace("\\", PATH_SEPARATOR).rstrip(PATH_SEPARATOR)
    if workdir and (path == workdir or path.startswith(workdir + PATH_SEPARATOR)):
        path = path[len(workdir) :]
    elif workdir and path.startswith(PATH_SEPARATOR):
        raise ValueError(f"Path {path} is outside the workspace {workdir}")
    return path.strip(PATH_SEPARATOR)


@dataclass(frozen=True)
class DirEntry:
    """One entry of a directory listing.

    Attributes:
        name: Entry name, without any path separator
        is_directory: Whether the entry is a directory
    """

    name: str
    is_directory: bool = False


@dataclass(frozen=True)
class SoftFailure:
    """A non-fatal per-entry error recorded during an export."""

    path: str
    message: str


@dataclass(frozen=True)
class ReadResult:
    """Outcome of reading one file: either content or an error message."""

    content: Optional[bytes] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, content: bytes) -> "ReadResult":
        return cls(content=content)

    @classmethod
    def failure(cls, error: str) -> "ReadResult":
        return cls(error=error)


@dataclass
class ExportResult:
    """Terminal output of one export.

    Attributes:
        archive: Finalized ZIP archive bytes
        failures: Files that could not be read, in traversal order
    """

    archive: bytes
    failures: List[SoftFailure] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        """True when every file in the workspace made it into the archive."""
        return not self.failures

    @property
    def size(self) -> int:
        return len(self.archive)
