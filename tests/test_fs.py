"""Tests for the workspace filesystems."""

import asyncio
import os

import pytest

from wsexport.fs import LocalWorkspace, MemoryWorkspace
from wsexport.models import DirEntry


class TestMemoryWorkspace:
    """Tests for the in-memory workspace."""

    @pytest.mark.asyncio
    async def test_readdir_keeps_insertion_order(self):
        workspace = MemoryWorkspace({"b.txt": "b", "a": {}, "c.txt": "c"})

        entries = await workspace.readdir("")

        assert entries == [
            DirEntry(name="b.txt", is_directory=False),
            DirEntry(name="a", is_directory=True),
            DirEntry(name="c.txt", is_directory=False),
        ]

    @pytest.mark.asyncio
    async def test_read_nested_file(self):
        workspace = MemoryWorkspace({"src": {"lib": {"x.py": "x = 1"}}})

        assert await workspace.read_file("src/lib/x.py") == b"x = 1"

    @pytest.mark.asyncio
    async def test_missing_path(self):
        workspace = MemoryWorkspace({"a.txt": "a"})

        with pytest.raises(FileNotFoundError):
            await workspace.readdir("missing")
        with pytest.raises(FileNotFoundError):
            await workspace.read_file("missing.txt")

    @pytest.mark.asyncio
    async def test_type_mismatches(self):
        workspace = MemoryWorkspace({"a.txt": "a", "dir": {}})

        with pytest.raises(NotADirectoryError):
            await workspace.readdir("a.txt")
        with pytest.raises(IsADirectoryError):
            await workspace.read_file("dir")

    @pytest.mark.asyncio
    async def test_exception_value_is_raised_on_read(self):
        workspace = MemoryWorkspace({"locked.txt": PermissionError("denied")})

        with pytest.raises(PermissionError, match="denied"):
            await workspace.read_file("locked.txt")

    def test_ready_toggle(self):
        workspace = MemoryWorkspace({}, ready=False)
        assert not workspace.ready

        workspace.ready = True
        assert workspace.ready


class TestLocalWorkspace:
    """Tests for the local disk workspace."""

    @pytest.mark.asyncio
    async def test_readdir_sorted(self, temp_dir):
        (temp_dir / "b.txt").write_text("b")
        (temp_dir / "a").mkdir()
        (temp_dir / "c.txt").write_text("c")

        entries = await LocalWorkspace(temp_dir).readdir("")

        assert entries == [
            DirEntry(name="a", is_directory=True),
            DirEntry(name="b.txt", is_directory=False),
            DirEntry(name="c.txt", is_directory=False),
        ]

    @pytest.mark.asyncio
    async def test_read_file_bytes(self, temp_dir):
        (temp_dir / "sub").mkdir()
        (temp_dir / "sub" / "data.bin").write_bytes(b"\x00\x01\xff")

        assert await LocalWorkspace(temp_dir).read_file("sub/data.bin") == b"\x00\x01\xff"

    @pytest.mark.asyncio
    async def test_errors_propagate(self, temp_dir):
        workspace = LocalWorkspace(temp_dir)

        with pytest.raises(FileNotFoundError):
            await workspace.readdir("missing")
        with pytest.raises(FileNotFoundError):
            await workspace.read_file("missing.txt")

    @pytest.mark.asyncio
    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not supported")
    async def test_symlinked_directory_is_not_a_directory(self, temp_dir):
        (temp_dir / "real").mkdir()
        (temp_dir / "link").symlink_to(temp_dir / "real", target_is_directory=True)

        entries = await LocalWorkspace(temp_dir).readdir("")

        assert DirEntry(name="link", is_directory=False) in entries

    def test_ready_and_workdir(self, temp_dir):
        workspace = LocalWorkspace(temp_dir)

        assert workspace.ready
        assert workspace.workdir == str(temp_dir.resolve())
        assert not LocalWorkspace(temp_dir / "missing").ready

    @pytest.mark.asyncio
    async def test_export_local_directory(self, temp_dir, unzip):
        from wsexport.export import export_workspace

        (temp_dir / "src").mkdir()
        (temp_dir / "src" / "main.py").write_text("print('hi')\n")
        (temp_dir / ".git").mkdir()
        (temp_dir / ".git" / "HEAD").write_text("ref: refs/heads/main")
        (temp_dir / "empty").mkdir()

        result = await export_workspace(LocalWorkspace(temp_dir))

        assert unzip(result.archive) == {
            "empty/": None,
            "src/": None,
            "src/main.py": b"print('hi')\n",
        }


class TestLocalWorkspaceSpecialFiles:
    """Tests for non-regular files and ignored paths on disk."""

    @pytest.mark.asyncio
    @pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="named pipes not supported")
    async def test_fifo_is_not_read(self, temp_dir):
        os.mkfifo(temp_dir / "pipe")

        with pytest.raises(OSError, match="Not a regular file: pipe"):
            await asyncio.wait_for(LocalWorkspace(temp_dir).read_file("pipe"), timeout=5)

    @pytest.mark.asyncio
    @pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="named pipes not supported")
    async def test_export_with_fifo_records_soft_failure(self, temp_dir, unzip):
        from wsexport.export import export_workspace

        (temp_dir / "a.txt").write_text("a")
        os.mkfifo(temp_dir / "pipe")

        result = await asyncio.wait_for(export_workspace(LocalWorkspace(temp_dir)), timeout=5)

        assert unzip(result.archive) == {"a.txt": b"a"}
        assert [f.path for f in result.failures] == ["pipe"]

    @pytest.mark.asyncio
    async def test_ignore_paths_filter_listings(self, temp_dir):
        (temp_dir / "a.txt").write_text("a")
        (temp_dir / "project.zip").write_bytes(b"zip")
        (temp_dir / "sub").mkdir()
        (temp_dir / "sub" / "project.zip").write_bytes(b"zip")

        workspace = LocalWorkspace(temp_dir, ignore_paths=["project.zip"])

        assert [e.name for e in await workspace.readdir("")] == ["a.txt", "sub"]
        assert [e.name for e in await workspace.readdir("sub")] == ["project.zip"]

    def test_relative_path(self, temp_dir):
        workspace = LocalWorkspace(temp_dir)

        assert workspace.relative_path(temp_dir / "sub" / "out.zip") == "sub/out.zip"
        assert workspace.relative_path(temp_dir.parent / "elsewhere.zip") is None
