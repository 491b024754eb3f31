"""Tests for record assembly."""

from doccatalog.build_records import (
    build_constant,
    build_function,
    build_type,
    constant_kind,
    constant_preview,
    merge_params,
    object_keys,
)
from doccatalog.declaration import Declaration
from doccatalog.interface_properties import interface_properties
from doccatalog.jsdoc import parse_jsdoc
from doccatalog.models import DocParam, DocTypeProperty


def fn(params_text: str | None, return_type: str | None = None, **kw) -> Declaration:
    return Declaration(
        kind="function",
        name=kw.pop("name", "f"),
        line=1,
        doc="/** x */",
        params_text=params_text,
        return_type=return_type,
        **kw,
    )


def test_add_record() -> None:
    """The declared signature and the doc comment combine into one record."""
    doc = parse_jsdoc(
        "/**\n * Adds two numbers.\n * @param {number} a - First\n"
        " * @param {number} b - Second\n * @returns {number} Sum\n"
        " * @example\n * add(1, 2); // 3\n * @since 1.0.0\n */"
    )
    record = build_function(
        fn("a: number, b: number", "number", name="add"),
        doc,
        "math",
        "src/core/math.ts",
        doc.since,
    )
    assert record.name == "add"
    assert record.category == "math"
    assert record.description == "Adds two numbers."
    assert record.syntax == "add(a: number, b: number): number"
    assert record.params == (
        DocParam("a", "number", "First", False),
        DocParam("b", "number", "Second", False),
    )
    assert record.returns.type == "number"
    assert record.returns.description == "Sum"
    assert record.example == "add(1, 2); // 3"
    assert record.since == "1.0.0"
    assert record.source_file == "src/core/math.ts"


def test_merge_params_declaration_wins() -> None:
    """Names, order and types come from the declaration."""
    doc = parse_jsdoc(
        "/**\n * @param {string} b - Bee\n * @param {string} a - Ay\n"
        " * @param {number} [c] - See\n */"
    )
    params = merge_params(fn("a: number, b, c = 1"), doc)
    assert params == [
        DocParam("a", "number", "Ay", False),
        DocParam("b", "string", "Bee", False),
        DocParam("c", "number", "See", True),
    ]


def test_merge_params_optional_from_doc_and_any_fallback() -> None:
    """A bracketed doc name marks optional and untyped params become any."""
    doc = parse_jsdoc("/**\n * @param [x] - Ex\n */")
    assert merge_params(fn("x, y"), doc) == [
        DocParam("x", "any", "Ex", True),
        DocParam("y", "any", "", False),
    ]


def test_merge_params_without_declaration() -> None:
    """Without a parameter list the doc tags are used."""
    doc = parse_jsdoc("/**\n * @param {number} n - Count\n */")
    assert merge_params(fn(None), doc) == [DocParam("n", "number", "Count", False)]


def test_merge_params_destructured_by_position() -> None:
    """A destructured parameter takes the doc tag at its position."""
    doc = parse_jsdoc("/**\n * @param {Opts} options - Settings\n */")
    (param,) = merge_params(fn("{ a, b }: Opts = {}"), doc)
    assert param == DocParam("options", "Opts", "Settings", True)


def test_return_type_fallbacks() -> None:
    """Returns use doc type, then declared type, then void or any."""
    with_tag = parse_jsdoc("/**\n * @returns The value\n */")
    without = parse_jsdoc("/** Nothing. */")
    assert build_function(fn("", "string"), with_tag, "c", "s", "").returns.type == (
        "string"
    )
    assert build_function(fn(""), without, "c", "s", "").returns.type == "void"
    assert build_function(fn(""), with_tag, "c", "s", "").returns.type == "any"


def test_rest_param_syntax() -> None:
    """Rest parameters keep their spread in the syntax line."""
    doc = parse_jsdoc("/**\n * @param nums - Values\n */")
    record = build_function(
        fn("...nums: number[]", "number", name="sum", type_params=None),
        doc,
        "math",
        "src/core/math.ts",
        "",
    )
    assert record.syntax == "sum(...nums: number[]): number"


def test_constant_kinds() -> None:
    """Initializers are classified by literal kind."""
    assert constant_kind('"abc"') == "string"
    assert constant_kind("`tpl`") == "string"
    assert constant_kind("42") == "number"
    assert constant_kind("-1") == "number"
    assert constant_kind("true") == "boolean"
    assert constant_kind("/^a+$/i") == "regexp"
    assert constant_kind("{ a: 1 }") == "object"
    assert constant_kind("[1, 2]") == "array"
    assert constant_kind("{ a: 1 }.a") == "expression"
    assert constant_kind("Math.PI * 2") == "expression"


def test_constant_previews() -> None:
    """Objects list keys, arrays list items and the rest is truncated."""
    obj = "{ a: 1, b: { c: 2 }, 'd': 3, e, f() {}, g: 5 }"
    assert object_keys(obj) == ["a", "b", "d", "e", "f", "g"]
    assert constant_preview(obj, "object") == "{ a, b, d, e, f, ... }"
    assert constant_preview("{}", "object") == "{}"
    assert constant_preview('["en", "fr", "de", "es"]', "array") == (
        '["en", "fr", "de", ...]'
    )
    assert constant_preview("[1, 2]", "array") == "[1, 2]"
    assert constant_preview("a" * 60, "expression") == (
        "a" * 50 + "..."
    )


def test_build_constant() -> None:
    """Constants drop ``as const`` and always use the constants category."""
    decl = Declaration(
        kind="const",
        name="DEFAULTS",
        line=1,
        doc="/** Defaults. */",
        value="{\n  retries: 3,\n} as const",
    )
    record = build_constant(decl, parse_jsdoc(decl.doc), "src/constants/index.ts", "")
    assert record.category == "constants"
    assert record.type == "object"
    assert record.value == "{\n  retries: 3,\n}"
    assert record.preview == "{ retries }"
    assert record.description == "Defaults."


def test_interface_properties() -> None:
    """Members, their docs, optional marks and method signatures are parsed."""
    body = (
        "\n  /** Retry count. */\n  retries?: number;\n"
        "  nested: { deep: string };\n"
        "  readonly id: string\n"
        "  onDone(result: string): void;\n"
        "  [key: string]: unknown;\n"
    )
    assert interface_properties(body) == (
        DocTypeProperty("retries", "number", "Retry count.", True),
        DocTypeProperty("nested", "{ deep: string }", "", False),
        DocTypeProperty("id", "string", "", False),
        DocTypeProperty("onDone", "(result: string) => void", "", False),
        DocTypeProperty("[key: string]", "unknown", "", False),
    )
    assert interface_properties("") == ()


def test_build_type() -> None:
    """Interfaces carry properties and aliases do not."""
    iface = Declaration(
        kind="interface",
        name="Point",
        line=1,
        doc="/** A point. */",
        definition="interface Point {\n  x: number;\n}",
        body="\n  x: number;\n",
    )
    record = build_type(iface, parse_jsdoc(iface.doc), "utils", "src/utils/p.ts", "")
    assert record.kind == "interface"
    assert record.properties == (DocTypeProperty("x", "number"),)
    alias = Declaration(
        kind="type", name="Id", line=1, doc="/** Id. */", definition="type Id = string"
    )
    record = build_type(alias, parse_jsdoc(alias.doc), "utils", "src/utils/p.ts", "")
    assert record.kind == "type"
    assert record.definition == "type Id = string"
    assert record.properties == ()
