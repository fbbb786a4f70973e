"""
Function index scanner for TypeScript and JavaScript source trees.

Usage:
    from codeexplorer import scan

    for record in scan("path/to/repo", tag="util"):
        print(record.path, record.signature)
"""

from .errors import CodeExplorerError, SourceParseError
from .models import FileTreeNode, FunctionInfo, FunctionRecord
from .parser import ParsedSource, parse_source
from .scan import scan, scan_as_dicts, scan_file
from .signatures import format_signature
from .tags import CommentIndex, extract_tags
from .walker import build_file_tree, collect_files

__all__ = [
    # Index
    "scan",
    "scan_as_dicts",
    "scan_file",
    # Components
    "collect_files",
    "build_file_tree",
    "parse_source",
    "format_signature",
    "extract_tags",
    "CommentIndex",
    # Models
    "FunctionInfo",
    "FunctionRecord",
    "FileTreeNode",
    "ParsedSource",
    # Errors
    "CodeExplorerError",
    "SourceParseError",
]
