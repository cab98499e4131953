"""Test configuration and fixtures."""

import io
import shutil
import tempfile
import zipfile
from pathlib import Path
from typing import Callable, Dict, Generator, Optional

import pytest

from wsexport.fs import MemoryWorkspace


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def sample_tree() -> dict:
    """Small project tree with an excluded node_modules directory."""
    return {
        "a.txt": "hi",
        "sub": {"b.txt": "yo"},
        "node_modules": {"x.txt": "skip"},
    }


@pytest.fixture
def sample_workspace(sample_tree) -> MemoryWorkspace:
    return MemoryWorkspace(sample_tree)


def _read_archive(data: bytes) -> Dict[str, Optional[bytes]]:
    entries: Dict[str, Optional[bytes]] = {}
    with zipfile.ZipFile(io.BytesIO(data)) as zf:
        for info in zf.infolist():
            entries[info.filename] = None if info.is_dir() else zf.read(info)
    return entries


@pytest.fixture
def unzip() -> Callable[[bytes], Dict[str, Optional[bytes]]]:
    """Open ZIP bytes and map entry names to content, in archive order (None for folders)."""
    return _read_archive
