"""Doc-comment tag extraction.

Only ``/** ... */`` blocks count as doc comments, and a block belongs to a
declaration only when nothing but whitespace separates the two.
"""

from __future__ import annotations

import re
from bisect import bisect_right
from dataclasses import dataclass

_TAG_LINE = re.compile(r"^@tag\s+(.+)$")


def is_doc_comment(text: str) -> bool:
    return text.startswith("/**") and text.endswith("*/") and len(text) >= 5


def _comment_lines(comment: str) -> list[str]:
    """Strip the comment delimiters and the leading * gutter of each line."""
    body = comment[3:-2] if is_doc_comment(comment) else comment
    lines = []
    for line in body.split("\n"):
        line = line.strip()
        if line.startswith("*"):
            line = line[1:].strip()
        lines.append(line)
    return lines


def extract_tags(comment: str | None) -> list[str]:
    """Return the @tag values of a doc comment in the order they appear.

    Example:
        extract_tags("/**\\n * Adds.\\n * @tag util\\n */")  # ["util"]
    """
    if not comment:
        return []
    tags = []
    for line in _comment_lines(comment):
        match = _TAG_LINE.match(line)
        if match:
            value = match.group(1).strip()
            if value:
                tags.append(value)
    return tags


@dataclass(frozen=True)
class CommentRange:
    start: int
    end: int
    text: str


class CommentIndex:
    """Comments of one file, looked up by the offset of a declaration."""

    def __init__(self, source: bytes, comments: list[CommentRange]):
        self._source = source
        self._comments = sorted(comments, key=lambda c: c.start)
        self._ends = [c.end for c in self._comments]

    def __len__(self) -> int:
        return len(self._comments)

    def preceding(self, offset: int) -> CommentRange | None:
        """Nearest doc comment directly above offset, or None.

        The comment must end before offset with only whitespace between them.
        A nearer non-doc comment hides any doc comment above it.
        """
        i = bisect_right(self._ends, offset) - 1
        if i < 0:
            return None
        comment = self._comments[i]
        if self._source[comment.end : offset].strip():
            return None
        if not is_doc_comment(comment.text):
            return None
        return comment

    def tags_for(self, offset: int) -> list[str]:
        comment = self.preceding(offset)
        return extract_tags(comment.text) if comment else []
