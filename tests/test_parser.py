"""Tests for source parsing and function recognition."""

import pytest
from codeexplorer import SourceParseError, parse_source


def _names(source: str, filename: str = "a.ts") -> list[str]:
    return [f.name for f in parse_source(source, filename).functions]


class TestDeclarations:
    def test_named_declaration(self):
        (info,) = parse_source(
            "function add(a: number, b: number): number { return a + b; }"
        ).functions
        assert info.name == "add"
        assert info.params == ["a: number", "b: number"]
        assert info.return_type == "number"
        assert info.is_async is False
        assert info.is_generator is False

    def test_missing_return_type_is_any(self):
        (info,) = parse_source("function hi() {}").functions
        assert info.return_type == "any"
        assert info.params == []

    def test_async_declaration(self):
        (info,) = parse_source(
            "async function load(url: string): Promise<string> { return url; }"
        ).functions
        assert info.is_async is True
        assert info.is_generator is False
        assert info.return_type == "Promise<string>"

    def test_generators(self):
        functions = parse_source(
            "function* gen() {}\nasync function* asyncGen() {}"
        ).functions
        assert [(f.name, f.is_async, f.is_generator) for f in functions] == [
            ("gen", False, True),
            ("asyncGen", True, True),
        ]

    def test_parameter_source_text(self):
        (info,) = parse_source(
            "function f(a: number, b?: string, c = 1, ...rest: number[]) {}"
        ).functions
        assert info.params == ["a: number", "b?: string", "c = 1", "...rest: number[]"]

    def test_anonymous_default_export_skipped(self):
        source = "export default function () {}\nfunction named() {}\n"
        assert _names(source) == ["named"]

    def test_named_default_export(self):
        assert _names("export default function defaultDecl() {}\n") == ["defaultDecl"]

    def test_exported_declaration(self):
        assert _names("export function exported(): void {}\n") == ["exported"]

    def test_line_numbers(self):
        functions = parse_source("\n\nfunction third() {}\n").functions
        assert functions[0].line == 3


class TestArrows:
    def test_const_arrow(self):
        (info,) = parse_source("const arrow = (x: string) => x;").functions
        assert info.name == "arrow"
        assert info.params == ["x: string"]
        assert info.return_type == "any"
        assert info.is_generator is False

    def test_async_arrow(self):
        (info,) = parse_source("const asyncArrow = async () => {};").functions
        assert info.name == "asyncArrow"
        assert info.is_async is True
        assert info.is_generator is False

    def test_bare_parameter(self):
        (info,) = parse_source("let id = x => x;").functions
        assert info.params == ["x"]

    def test_arrow_return_type(self):
        (info,) = parse_source(
            "export const total = (xs: number[]): number => xs.length;"
        ).functions
        assert info.return_type == "number"

    def test_destructured_binding_dropped(self):
        assert _names("const [first] = [() => 1];") == []

    def test_non_arrow_values_ignored(self):
        source = "\n".join(
            [
                "const value = 1;",
                "const expr = function named() {};",
                "const obj = { method() {}, prop: () => 1 };",
            ]
        )
        assert _names(source) == []


class TestTraversal:
    def test_textual_order(self):
        source = "\n".join(
            [
                "function decl(a: number, b: number): number { return a + b; }",
                "const arrow = (x: string) => x;",
                "const asyncArrow = async () => {};",
                "function* gen() {}",
                "async function* asyncGen() {}",
            ]
        )
        assert _names(source) == ["decl", "arrow", "asyncArrow", "gen", "asyncGen"]

    def test_nested_constructs_found(self):
        source = "\n".join(
            [
                "function outer() {",
                "  function inner() {}",
                "  const helper = () => 1;",
                "  return helper;",
                "}",
                "namespace ns {",
                "  export function inNamespace() {}",
                "}",
            ]
        )
        assert _names(source) == ["outer", "inner", "helper", "inNamespace"]

    def test_class_members_ignored(self):
        source = "class MyClass {\n  method() {}\n  field = () => 1;\n}\n"
        assert _names(source) == []

    def test_javascript_and_jsx(self):
        assert _names("function hello(name) { return name; }", "a.js") == ["hello"]
        jsx = "export function App() { return <div>hi</div>; }\n"
        assert _names(jsx, "App.jsx") == ["App"]
        assert _names(jsx, "App.tsx") == ["App"]


class TestComments:
    def test_doc_comment_tags(self):
        source = "/** @tag util */\nfunction hi() {}\n"
        parsed = parse_source(source)
        (info,) = parsed.functions
        assert parsed.comments.tags_for(info.start) == ["util"]

    def test_comment_before_export(self):
        source = "/** @tag api */\nexport async function handler() {}\n"
        parsed = parse_source(source)
        (info,) = parsed.functions
        assert info.start == source.index("export")
        assert parsed.comments.tags_for(info.start) == ["api"]

    def test_comment_before_variable_statement(self):
        source = "/** @tag edge */\nexport const bye = () => {};\n"
        parsed = parse_source(source)
        (info,) = parsed.functions
        assert parsed.comments.tags_for(info.start) == ["edge"]


class TestParseErrors:
    def test_syntax_error(self):
        with pytest.raises(SourceParseError) as exc:
            parse_source("function broken( {", "src/bad.ts")
        assert exc.value.path == "src/bad.ts"
        assert exc.value.line == 1
        assert "src/bad.ts" in str(exc.value)

    def test_error_after_valid_code(self):
        with pytest.raises(SourceParseError) as exc:
            parse_source("function ok() {}\n\nconst = ;\n")
        assert exc.value.line == 3


class TestDeepTrees:
    def test_long_concatenation(self):
        source = "const s = " + " + ".join(["'a'"] * 2000) + ";\nfunction hi() {}\n"
        assert _names(source, "bundle.js") == ["hi"]

    def test_deep_error_located(self):
        source = "const s = " + " + ".join(["'a'"] * 2000) + " +;\n"
        with pytest.raises(SourceParseError) as exc:
            parse_source(source)
        assert exc.value.line == 1

    def test_order_kept_across_nesting(self):
        source = "\n".join(
            [
                "function a() {",
                "  function b() { const c = () => 1; }",
                "}",
                "const d = () => 2;",
            ]
        )
        assert _names(source) == ["a", "b", "c", "d"]
