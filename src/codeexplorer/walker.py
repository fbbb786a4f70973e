"""Directory traversal for the function index.

Files are returned depth first with the entries of every directory sorted by
name, so the same tree always yields the same order.
"""

from __future__ import annotations

import os
from pathlib import Path

from .models import FileTreeNode

SOURCE_EXTENSIONS = (".ts", ".tsx", ".js", ".jsx")

# Directories never shown in the file tree
TREE_SKIP = frozenset({".git", "node_modules"})


def _is_skipped_dir(name: str) -> bool:
    """node_modules and hidden directories are never entered."""
    return name == "node_modules" or name.startswith(".")


def _sorted_entries(directory: Path) -> list[os.DirEntry]:
    with os.scandir(directory) as it:
        return sorted(it, key=lambda e: e.name)


def collect_files(root: str | Path) -> list[Path]:
    """Return absolute paths of the source files under root.

    Raises:
        OSError: If root is missing or cannot be read.
    """
    files: list[Path] = []
    _collect(Path(root).resolve(), files)
    return files


def _collect(directory: Path, files: list[Path]) -> None:
    for entry in _sorted_entries(directory):
        if entry.is_dir():
            if _is_skipped_dir(entry.name):
                continue
            _collect(directory / entry.name, files)
        elif entry.name.endswith(SOURCE_EXTENSIONS):
            files.append(directory / entry.name)


def build_file_tree(root: str | Path) -> FileTreeNode:
    """Build the nested directory structure under root.

    Skips .git and node_modules. Paths in the result are relative to root.
    """
    root = Path(root).resolve()
    if not root.is_dir():
        raise NotADirectoryError(f"Not a directory: {root}")
    return _tree_node(root, root)


def _tree_node(path: Path, root: Path) -> FileTreeNode:
    rel = path.relative_to(root).as_posix()
    node = FileTreeNode(name=path.name, path="" if rel == "." else rel)
    if path.is_dir():
        node.children = [
            _tree_node(path / entry.name, root)
            for entry in _sorted_entries(path)
            if entry.name not in TREE_SKIP
        ]
    return node
