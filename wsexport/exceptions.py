"""Custom exception classes for wsexport."""

from typing import Optional


class ExportError(RuntimeError):
    """Base class for errors that abort a whole export.

    Nothing partial is returned once one of these is raised.
    """


class WorkspaceNotReadyError(ExportError):
    """Raised when the workspace handle is not mounted or not available."""

    def __init__(self, message: str = "Workspace is not ready"):
        super().__init__(message)


class DirectoryReadError(ExportError):
    """Raised when a directory in the workspace cannot be listed.

    Attributes:
        path: Relative path of the directory ("" for the workspace root)
        reason: Underlying error message
    """

    def __init__(self, path: str, reason: Optional[str] = None):
        """Initialize DirectoryReadError.

        Args:
            path: Relative path of the directory that failed to list
            reason: Underlying error message
        """
        self.path = path
        self.reason = reason or "unknown error"
        super().__init__(f"Failed to read directory {path or '<root>'}: {self.reason}")


class EmptyArchiveError(ExportError):
    """Raised when the finalized archive contains nothing."""

    def __init__(self, message: str = "Generated archive is empty"):
        super().__init__(message)


class ArchiveFinalizedError(ExportError):
    """Raised when an archive sink is used after it has been finalized."""
