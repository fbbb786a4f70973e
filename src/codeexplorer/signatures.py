"""Canonical signature strings.

The format is consumed by external callers and must stay byte-for-byte
stable:

    add(a: number, b: number): number
    async asyncArrow(): any
    *gen(): any
    async *asyncGen(): any
"""

from __future__ import annotations

from .models import FunctionInfo


def format_signature(info: FunctionInfo) -> str:
    prefix = ""
    if info.is_async:
        prefix += "async "
    if info.is_generator:
        prefix += "*"
    return f"{prefix}{info.name}({', '.join(info.params)}): {info.return_type}"
