"""Data models for the function index."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field


@dataclass
class FunctionInfo:
    """A function-like declaration recognized in one source file."""

    name: str
    params: list[str] = field(default_factory=list)  # Parameter source text
    return_type: str = "any"  # Annotation text, "any" when absent
    is_async: bool = False
    is_generator: bool = False  # Always False for arrow functions
    start: int = 0  # Byte offset of the statement owning the doc comment
    line: int = 0  # 1-based line of the declaration


@dataclass
class FunctionRecord:
    """One catalog entry, as served to callers."""

    name: str
    signature: str
    path: str  # Relative to the scan root, "/"-separated
    tags: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class FileTreeNode:
    """A file or directory in a repository tree."""

    name: str
    path: str  # Relative to the tree root, "" for the root itself
    children: list[FileTreeNode] | None = None  # None for files

    def to_dict(self) -> dict:
        item: dict = {"name": self.name, "path": self.path}
        if self.children is not None:
            item["children"] = [child.to_dict() for child in self.children]
        return item
