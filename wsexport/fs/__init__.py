"""Workspace filesystems the exporter can read from."""

from .base import WorkspaceFS
from .local import LocalWorkspace
from .memory import MemoryWorkspace

__all__ = ["WorkspaceFS", "LocalWorkspace", "MemoryWorkspace"]
