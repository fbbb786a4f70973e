"""Tree-sitter parsing for the function index.

Recognizes exactly these constructs, at any nesting depth:

- named function declarations (``function f() {}``, ``async function f() {}``)
- generator declarations (``function* g() {}``, ``async function* g() {}``)
- arrow functions bound to a variable (``const f = async (x) => x``)

Class methods, object-literal methods and function expressions are not
recognized. Anonymous declarations such as ``export default function () {}``
produce nothing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import PurePath
from typing import Callable, Optional

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser

from .errors import SourceParseError
from .models import FunctionInfo
from .tags import CommentIndex, CommentRange

log = logging.getLogger(__name__)

TYPESCRIPT = Language(tree_sitter_typescript.language_typescript())
TSX = Language(tree_sitter_typescript.language_tsx())

# Nodes whose start is where a leading doc comment attaches
_STATEMENT_WRAPPERS = frozenset({"export_statement"})
_VARIABLE_DECLARATIONS = frozenset({"lexical_declaration", "variable_declaration"})
_FUNCTION_EXPRESSIONS = frozenset(
    {"function_expression", "function", "generator_function"}
)
_GENERATORS = frozenset({"generator_function_declaration", "generator_function"})


@dataclass
class ParsedSource:
    """Functions and comments found in one file."""

    functions: list[FunctionInfo]
    comments: CommentIndex


@dataclass
class _Walk:
    """Accumulators threaded through the visit."""

    functions: list[FunctionInfo]
    comments: list[CommentRange]


def language_for(filename: str | PurePath) -> Language:
    """Plain TypeScript for .ts, TSX (which accepts JSX) for everything else."""
    return TYPESCRIPT if str(filename).endswith(".ts") else TSX


def _text(node: Node) -> str:
    return node.text.decode("utf-8")


def _statement_start(node: Node) -> int:
    """Start offset of the statement a declaration belongs to."""
    while node.parent is not None and node.parent.type in _STATEMENT_WRAPPERS:
        node = node.parent
    return node.start_byte


def _has_keyword(node: Node, keyword: str) -> bool:
    return any(child.type == keyword for child in node.children)


def _params(node: Node) -> list[str]:
    """Source text of each formal parameter."""
    single = node.child_by_field_name("parameter")
    if single is not None:
        return [_text(single)]
    params = node.child_by_field_name("parameters")
    if params is None:
        return []
    return [_text(p) for p in params.named_children if p.type != "comment"]


def _return_type(node: Node) -> str:
    annotation = node.child_by_field_name("return_type")
    if annotation is None:
        return "any"
    return _text(annotation).lstrip(":").strip() or "any"


def _function_declaration(node: Node) -> Optional[FunctionInfo]:
    name = node.child_by_field_name("name")
    if name is None:
        return None
    return FunctionInfo(
        name=_text(name),
        params=_params(node),
        return_type=_return_type(node),
        is_async=_has_keyword(node, "async"),
        is_generator=node.type in _GENERATORS,
        start=_statement_start(node),
        line=node.start_point[0] + 1,
    )


def _arrow_declarator(node: Node) -> Optional[FunctionInfo]:
    name = node.child_by_field_name("name")
    value = node.child_by_field_name("value")
    if name is None or name.type != "identifier":
        return None
    if value is None or value.type != "arrow_function":
        return None

    statement = node.parent
    if statement is None or statement.type not in _VARIABLE_DECLARATIONS:
        statement = node

    return FunctionInfo(
        name=_text(name),
        params=_params(value),
        return_type=_return_type(value),
        is_async=_has_keyword(value, "async"),
        start=_statement_start(statement),
        line=node.start_point[0] + 1,
    )


def _named_default_export(node: Node) -> Optional[FunctionInfo]:
    """``export default function name() {}`` parsed as an expression."""
    value = node.child_by_field_name("value")
    if value is None or value.type not in _FUNCTION_EXPRESSIONS:
        return None
    return _function_declaration(value)


_HANDLERS: dict[str, Callable[[Node], Optional[FunctionInfo]]] = {
    "function_declaration": _function_declaration,
    "generator_function_declaration": _function_declaration,
    "variable_declarator": _arrow_declarator,
    "export_statement": _named_default_export,
}


def _visit(root: Node, walk: _Walk) -> None:
    """Pre-order walk over every node, in textual order.

    Uses an explicit stack: generated sources nest deeper than the
    interpreter's recursion limit.
    """
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "comment":
            walk.comments.append(
                CommentRange(node.start_byte, node.end_byte, _text(node))
            )
        else:
            handler = _HANDLERS.get(node.type)
            if handler is not None:
                info = handler(node)
                if info is not None:
                    walk.functions.append(info)
        stack.extend(reversed(node.children))


def _first_error(root: Node) -> Optional[Node]:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node
        stack.extend(child for child in reversed(node.children) if child.has_error)
    return None


def parse_source(text: str, filename: str | PurePath = "source.ts") -> ParsedSource:
    """Parse one file and collect its functions and comments.

    Args:
        text: File contents
        filename: Used to pick the grammar and in error messages

    Returns:
        ParsedSource with functions in textual order

    Raises:
        SourceParseError: If the file is not valid syntax
    """
    source = text.encode("utf-8")
    tree = Parser(language_for(filename)).parse(source)
    root = tree.root_node

    if root.has_error:
        bad = _first_error(root) or root
        line, column = bad.start_point[0] + 1, bad.start_point[1] + 1
        kind = f"missing {bad.type}" if bad.is_missing else "unexpected syntax"
        raise SourceParseError(
            f"{filename}:{line}:{column}: {kind}",
            path=str(filename),
            line=line,
            column=column,
        )

    walk = _Walk(functions=[], comments=[])
    _visit(root, walk)
    log.debug(f"Parsed {filename}: {len(walk.functions)} functions")
    return ParsedSource(
        functions=walk.functions,
        comments=CommentIndex(source, walk.comments),
    )
