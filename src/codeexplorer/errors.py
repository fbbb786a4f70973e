"""Exceptions raised while building the function index.

Filesystem failures are not wrapped: the walker and the assembler let the
native ``OSError`` subclasses propagate so callers see the real cause.
"""

from __future__ import annotations


class CodeExplorerError(Exception):
    """Base exception for codeexplorer operations."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class SourceParseError(CodeExplorerError):
    """Raised when a source file is not valid syntax.

    A single malformed file fails the whole scan.
    """

    def __init__(
        self,
        message: str,
        path: str | None = None,
        line: int | None = None,
        column: int | None = None,
    ):
        super().__init__(message, path)
        self.line = line
        self.column = column
