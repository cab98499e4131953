"""In-memory workspace backed by a nested dict."""

from typing import Any, Dict, List, Union

from ..models import PATH_SEPARATOR, DirEntry
from .base import WorkspaceFS

DEFAULT_WORKDIR = "/home/project"

Tree = Dict[str, Any]


class MemoryWorkspace(WorkspaceFS):
    """Virtual workspace whose tree lives in memory.

    ``tree`` maps names to either a dict (a directory) or file content
    (``bytes`` or ``str``). An exception instance in place of content makes
    reading that file raise it, which models an unreadable file.

    Example:
        MemoryWorkspace({"a.txt": "hi", "sub": {"b.txt": b"yo"}})
    """

    def __init__(self, tree: Tree, workdir: str = DEFAULT_WORKDIR, ready: bool = True):
        self.tree = tree
        self.workdir = workdir
        self._ready = ready

    @property
    def ready(self) -> bool:
        return self._ready

    @ready.setter
    def ready(self, value: bool) -> None:
        self._ready = value

    async def readdir(self, path: str) -> List[DirEntry]:
        node = self._lookup(path)
        if not isinstance(node, dict):
            raise NotADirectoryError(f"Not a directory: {path}")
        return [DirEntry(name=name, is_directory=isinstance(child, dict)) for name, child in node.items()]

    async def read_file(self, path: str) -> bytes:
        node = self._lookup(path)
        if isinstance(node, dict):
            raise IsADirectoryError(f"Is a directory: {path}")
        if isinstance(node, BaseException):
            raise node
        return _to_bytes(node)

    def _lookup(self, path: str) -> Any:
        node: Any = self.tree
        for part in [p for p in path.split(PATH_SEPARATOR) if p]:
            if not isinstance(node, dict) or part not in node:
                raise FileNotFoundError(f"No such file or directory: {path}")
            node = node[part]
        return node


def _to_bytes(content: Union[bytes, str]) -> bytes:
    if isinstance(content, str):
        return content.encode("utf-8")
    return bytes(content)
