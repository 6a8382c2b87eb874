"""Tests for candidate file discovery and file reading."""

from __future__ import annotations

from pathlib import Path

import pytest

from mcpscout.exceptions import FileReadSkipped, PathNotFoundError
from mcpscout.inventory.discovery import (
    is_candidate_file,
    iter_source_files,
    read_source_file,
)


def _names(root: Path) -> list[str]:
    return [p.relative_to(root.resolve()).as_posix() for p in iter_source_files(root)]


class TestCandidateFilter:
    """Extension filter on file names."""

    @pytest.mark.parametrize("name", ["index.ts", "server.js", "tools.mjs", "types.d.ts"])
    def test_accepted_extensions(self, name: str) -> None:
        assert is_candidate_file(name)

    @pytest.mark.parametrize(
        "name", ["App.tsx", "index.cjs", "package.json", "README.md", "INDEX.TS", "server.js.map"],
    )
    def test_rejected_extensions(self, name: str) -> None:
        assert not is_candidate_file(name)


class TestIterSourceFiles:
    """Depth-first walk with pruning."""

    def test_fixture_tree_order(self, weather_server_dir: Path) -> None:
        assert _names(weather_server_dir) == [
            "lib/helpers.mjs",
            "lib/legacy.js",
            "src/index.ts",
        ]

    def test_yields_absolute_paths(self, weather_server_dir: Path) -> None:
        assert all(p.is_absolute() for p in iter_source_files(weather_server_dir))

    def test_node_modules_pruned_at_any_depth(self, tmp_path: Path, write_source) -> None:
        write_source("index.ts", "")
        write_source("node_modules/sdk/index.js", "")
        write_source("packages/api/node_modules/zod/index.js", "")
        write_source("packages/api/src/main.ts", "")
        assert _names(tmp_path) == ["index.ts", "packages/api/src/main.ts"]

    def test_hidden_directories_pruned(self, tmp_path: Path, write_source) -> None:
        write_source(".git/hooks/pre-commit.js", "")
        write_source(".cache/build/out.mjs", "")
        write_source("src/server.ts", "")
        assert _names(tmp_path) == ["src/server.ts"]

    def test_hidden_files_skipped(self, tmp_path: Path, write_source) -> None:
        write_source(".eslintrc.js", "")
        write_source("server.js", "")
        assert _names(tmp_path) == ["server.js"]

    def test_non_candidate_files_ignored(self, tmp_path: Path, write_source) -> None:
        write_source("README.md", "server.tool('x', 'y')")
        write_source("component.tsx", "")
        assert _names(tmp_path) == []

    def test_restartable(self, weather_server_dir: Path) -> None:
        first = list(iter_source_files(weather_server_dir))
        second = list(iter_source_files(weather_server_dir))
        assert first == second

    def test_lazy(self, weather_server_dir: Path) -> None:
        walker = iter_source_files(weather_server_dir)
        assert next(walker).name == "helpers.mjs"

    def test_missing_root_raises(self, tmp_path: Path) -> None:
        with pytest.raises(PathNotFoundError) as exc_info:
            list(iter_source_files(tmp_path / "missing"))
        assert "missing" in str(exc_info.value)

    def test_file_root_raises(self, tmp_path: Path, write_source) -> None:
        path = write_source("index.ts", "")
        with pytest.raises(PathNotFoundError):
            list(iter_source_files(path))

    def test_empty_directory(self, empty_dir: Path) -> None:
        assert list(iter_source_files(empty_dir)) == []


class TestReadSourceFile:
    """Reading and decoding one candidate file."""

    def test_reads_content_and_name(self, write_source) -> None:
        path = write_source("src/index.ts", "const x = 1;\n")
        source = read_source_file(path)
        assert source.content == "const x = 1;\n"
        assert source.name == "index.ts"
        assert source.path == path

    def test_invalid_utf8_is_skipped(self, tmp_path: Path) -> None:
        path = tmp_path / "blob.js"
        path.write_bytes(b"\xff\xfe\x00\x81" * 32)
        with pytest.raises(FileReadSkipped) as exc_info:
            read_source_file(path)
        assert exc_info.value.path == path
        assert "UTF-8" in exc_info.value.reason

    def test_missing_file_is_skipped(self, tmp_path: Path) -> None:
        with pytest.raises(FileReadSkipped):
            read_source_file(tmp_path / "gone.ts")
