"""Tests for the TypeScript tokenizer."""

from doccatalog.ts_lexer import blank_lines_between, tokenize


def kinds(source: str) -> list[tuple[str, str]]:
    return [(t.kind, t.text) for t in tokenize(source)]


def test_strings_and_comments() -> None:
    """Code-like text inside strings stays inside the string token."""
    source = 'const s = "export function x() {}"; // note\n/** doc */'
    assert kinds(source) == [
        ("ident", "const"),
        ("ident", "s"),
        ("punct", "="),
        ("string", '"export function x() {}"'),
        ("punct", ";"),
        ("comment", "// note"),
        ("doc", "/** doc */"),
    ]


def test_template_with_nested_substitution() -> None:
    """Braces inside ``${}`` do not end the template."""
    source = "`a ${ {b: 1}.b } c` + x"
    tokens = tokenize(source)
    assert tokens[0].kind == "template"
    assert tokens[0].text == "`a ${ {b: 1}.b } c`"
    assert [t.text for t in tokens[1:]] == ["+", "x"]


def test_regex_versus_division() -> None:
    """A slash after an operand is division, after '=' it starts a regex."""
    assert kinds("const r = /ab+c/gi;")[3] == ("regex", "/ab+c/gi")
    assert [k for k, _ in kinds("a / b / c")] == [
        "ident",
        "punct",
        "ident",
        "punct",
        "ident",
    ]


def test_multi_char_punctuators_and_lines() -> None:
    """Arrows and spreads are single tokens and lines are tracked."""
    tokens = tokenize("(...a) =>\n  a")
    assert [t.text for t in tokens] == ["(", "...", "a", ")", "=>", "a"]
    assert tokens[-1].line == 2  # noqa: PLR2004


def test_block_comment_is_not_doc() -> None:
    """Only ``/**`` opens a doc comment."""
    assert kinds("/* plain */ /**/")[0] == ("comment", "/* plain */")
    assert kinds("/**/")[0][0] == "comment"


def test_blank_lines_between() -> None:
    """Blank lines are newlines beyond the first."""
    assert blank_lines_between("a\nb", 1, 2) == 0
    assert blank_lines_between("a\n\n\nb", 1, 4) == 2  # noqa: PLR2004
    assert blank_lines_between("a b", 1, 2) == 0
