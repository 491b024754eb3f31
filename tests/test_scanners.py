"""Tests for the lexer and regex declaration scanners."""

import pytest

from doccatalog.get_scanner import get_scanner
from doccatalog.jsdoc import parse_jsdoc
from doccatalog.lexer_scanner import LexerScanner
from doccatalog.regex_scanner import RegexScanner

ADD_SOURCE = """/**
 * Adds two numbers.
 * @param {number} a - First
 * @param {number} b - Second
 * @returns {number} Sum
 * @example
 * add(1, 2); // 3
 * @since 1.0.0
 */
export function add(a: number, b: number): number {
  return a + b;
}
"""

WELL_FORMED = """import { helper } from "./helper";

/**
 * Adds two numbers.
 */
export function add(a: number, b: number): number {
  return a + b;
}

/** Loads a resource. */
export async function load(url: string): Promise<string> {
  return fetch(url).then((r) => r.text());
}

/** Doubles a value. */
export const double = (n: number): number => n * 2;

/** Wraps a value. */
export const wrap = <T>(value: T): T[] => [value];

/** Negates. */
export const negate = function (flag: boolean): boolean {
  return !flag;
};

/** Defaults. */
export const DEFAULTS = {
  retries: 3,
  delay: 100,
} as const;

/** Options. */
export interface Options {
  /** Retry count. */
  retries?: number;
  nested: { deep: string };
}

/** A shape. */
export type Shape =
  | { kind: "circle"; r: number }
  | { kind: "square"; s: number };

/** A pair. */
export type Pair<T> = [T, T];

export function undocumented(): void {}
"""


def summary(decls: list) -> list[tuple]:
    return [
        (
            d.kind,
            d.name,
            d.line,
            parse_jsdoc(d.doc) if d.doc else None,
            d.type_params,
            d.params_text,
            d.return_type,
            d.value,
            d.definition,
            d.body,
        )
        for d in decls
    ]


@pytest.mark.parametrize("scanner", [LexerScanner(), RegexScanner()])
def test_add_function(scanner: LexerScanner | RegexScanner) -> None:
    """Both scanners find the documented function and its signature."""
    (decl,) = scanner.scan(ADD_SOURCE)
    assert decl.kind == "function"
    assert decl.name == "add"
    assert decl.line == 10  # noqa: PLR2004
    assert decl.params_text == "a: number, b: number"
    assert decl.return_type == "number"
    assert parse_jsdoc(decl.doc).since == "1.0.0"


def test_scanners_agree_on_well_formed_source() -> None:
    """The regex scanner matches the lexer scanner on ordinary code."""
    lexer = LexerScanner().scan(WELL_FORMED)
    regex = RegexScanner().scan(WELL_FORMED)
    assert summary(lexer) == summary(regex)
    assert [d.name for d in lexer] == [
        "add",
        "load",
        "double",
        "wrap",
        "negate",
        "DEFAULTS",
        "Options",
        "Shape",
        "Pair",
        "undocumented",
    ]


def test_lexer_declaration_details() -> None:
    """Arrow functions, constants, interfaces and aliases are split apart."""
    decls = {d.name: d for d in LexerScanner().scan(WELL_FORMED)}
    assert decls["load"].return_type == "Promise<string>"
    assert decls["double"].kind == "function"
    assert decls["double"].return_type == "number"
    assert decls["wrap"].type_params == "<T>"
    assert decls["wrap"].return_type == "T[]"
    assert decls["negate"].kind == "function"
    assert decls["negate"].params_text == "flag: boolean"
    assert decls["DEFAULTS"].kind == "const"
    assert decls["DEFAULTS"].value == "{\n  retries: 3,\n  delay: 100,\n} as const"
    assert decls["Options"].definition.startswith("interface Options {")
    assert decls["Options"].definition.endswith("}")
    assert "nested: { deep: string };" in decls["Options"].body
    assert decls["Shape"].definition == (
        'type Shape =\n  | { kind: "circle"; r: number }\n'
        '  | { kind: "square"; s: number }'
    )
    assert decls["Pair"].definition == "type Pair<T> = [T, T]"
    assert not decls["undocumented"].documented


def test_lexer_ignores_exports_inside_literals() -> None:
    """Strings and template literals cannot produce declarations."""
    source = (
        'const code = "export function fake() {}";\n'
        "const tpl = `\n"
        "export function alsoFake() {}\n"
        "`;\n"
        "/** Real. */\n"
        "export function real(): void {}\n"
    )
    assert [d.name for d in LexerScanner().scan(source)] == ["real"]


def test_lexer_skips_nested_bodies() -> None:
    """Nested braces in a body do not hide the next export."""
    source = (
        "/** Outer. */\n"
        "export function outer(): number {\n"
        "  const o = { a: { b: 1 } };\n"
        "  function inner() { return 2; }\n"
        "  return o.a.b;\n"
        "}\n"
        "\n"
        "/** Next. */\n"
        "export const next = 1;\n"
    )
    decls = LexerScanner().scan(source)
    assert [(d.name, d.documented) for d in decls] == [("outer", True), ("next", True)]
    assert decls[1].value == "1"


@pytest.mark.parametrize("scanner_cls", [LexerScanner, RegexScanner])
def test_blank_line_gap(scanner_cls: type) -> None:
    """A doc comment more than max_blank_lines away is not attached."""
    source = "/** Doc. */\n\n\nexport function gap(): void {}\n"
    assert not scanner_cls().scan(source)[0].documented
    assert scanner_cls(max_blank_lines=2).scan(source)[0].documented
    near = "/** Doc. */\n\nexport function gap(): void {}\n"
    assert scanner_cls().scan(near)[0].documented


@pytest.mark.parametrize("scanner_cls", [LexerScanner, RegexScanner])
def test_intervening_comment_detaches_doc(scanner_cls: type) -> None:
    """An ordinary comment between the doc and the export means no doc."""
    source = "/** Doc. */\n// note\nexport function x(): void {}\n"
    assert not scanner_cls().scan(source)[0].documented


@pytest.mark.parametrize("scanner_cls", [LexerScanner, RegexScanner])
def test_overload_signatures(scanner_cls: type) -> None:
    """Each overload is reported; only the documented one carries a doc."""
    source = (
        "export function pad(value: string): string;\n"
        "/** Pads. */\n"
        "export function pad(value: number): string;\n"
        "export function pad(value: unknown): string {\n"
        "  return String(value);\n"
        "}\n"
    )
    decls = scanner_cls().scan(source)
    assert [d.name for d in decls] == ["pad", "pad", "pad"]
    assert [d.documented for d in decls] == [False, True, False]
    assert decls[1].params_text == "value: number"
    assert decls[1].return_type == "string"


@pytest.mark.parametrize("scanner_cls", [LexerScanner, RegexScanner])
def test_multiple_declarators_share_doc(scanner_cls: type) -> None:
    """Every declarator of one export statement is reported with its doc."""
    source = (
        "/** Limits. */\n"
        "export const MIN = 1, MAX: number = 10, clamp = (n: number): number => n;\n"
        "export const NEXT = 3;\n"
    )
    decls = scanner_cls().scan(source)
    assert [d.name for d in decls] == ["MIN", "MAX", "clamp", "NEXT"]
    assert [d.documented for d in decls] == [True, True, True, False]
    assert [d.kind for d in decls] == ["const", "const", "function", "const"]
    assert [decls[0].value, decls[1].value] == ["1", "10"]
    assert decls[2].params_text == "n: number"
    assert decls[2].return_type == "number"
    assert {d.line for d in decls[:3]} == {2}


def test_get_scanner() -> None:
    """The factory builds known scanners and rejects unknown names."""
    assert get_scanner("lexer").name == "lexer"
    scanner = get_scanner("regex", max_blank_lines=3)
    assert scanner.name == "regex"
    assert scanner.max_blank_lines == 3  # noqa: PLR2004
    with pytest.raises(ValueError, match="Unknown scanner"):
        get_scanner("ast")
