"""Build the function index for a source tree."""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import SourceParseError
from .models import FunctionRecord
from .parser import parse_source
from .signatures import format_signature
from .walker import collect_files

log = logging.getLogger(__name__)

# Errors a scan raises for a bad repository (unreadable tree, bad source)
SCAN_ERRORS = (OSError, UnicodeDecodeError, SourceParseError)


def _relative_path(path: Path, root: Path) -> str:
    """Path relative to the scan root with "/" separators."""
    return path.relative_to(root).as_posix()


def scan_file(path: Path, root: Path) -> list[FunctionRecord]:
    """Index the functions of a single file, in declaration order."""
    text = path.read_text(encoding="utf-8-sig")
    rel = _relative_path(path, root)
    parsed = parse_source(text, rel)
    return [
        FunctionRecord(
            name=info.name,
            signature=format_signature(info),
            path=rel,
            tags=parsed.comments.tags_for(info.start),
        )
        for info in parsed.functions
    ]


def scan(root: str | Path, tag: str | None = None) -> list[FunctionRecord]:
    """Index every function under root.

    Files are visited in sorted depth-first order; records keep declaration
    order within each file. Nothing is cached between calls.

    Args:
        root: Directory to scan
        tag: If given, keep only records carrying this exact tag

    Returns:
        List of FunctionRecord

    Raises:
        OSError: If root or a file cannot be read
        SourceParseError: If any file is not valid syntax
    """
    root = Path(root).resolve()
    files = collect_files(root)

    records: list[FunctionRecord] = []
    for path in files:
        records.extend(scan_file(path, root))

    log.info(f"Scanned {len(files)} files under {root}: {len(records)} functions")

    if tag is not None:
        records = [r for r in records if tag in r.tags]
    return records


def scan_as_dicts(root: str | Path, tag: str | None = None) -> list[dict]:
    """JSON-ready form of scan()."""
    return [record.to_dict() for record in scan(root, tag=tag)]
