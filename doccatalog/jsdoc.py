"""Parsing of JSDoc comment blocks."""

import re
from dataclasses import dataclass, field

KNOWN_TAGS = ("param", "returns", "return", "example", "since")

# An inline tag inside a one-line comment: "/** Match tags @since 0.8.0 */"
INLINE_TAG_RE = re.compile(r"\s@(?=(?:%s)\b)" % "|".join(KNOWN_TAGS))
TAG_RE = re.compile(r"^@(\w+)\b\s*(.*)$")
PARAM_NAME_RE = re.compile(r"^(\[[^\]]*\]|\.{3}[\w$]+|[\w$][\w$.]*)\s*(.*)$", re.DOTALL)
SINCE_RE = re.compile(r"^(\S+)")
CODE_FENCE_RE = re.compile(r"^\s*```")


@dataclass
class ParamTag:
    """A single ``@param`` entry."""

    name: str
    type: str | None
    description: str
    optional: bool = False
    default: str | None = None


@dataclass
class ParsedDoc:
    """Structured content of one doc comment."""

    description: str = ""
    params: list[ParamTag] = field(default_factory=list)
    returns_type: str | None = None
    returns_description: str = ""
    has_returns: bool = False
    example: str = ""
    since: str = ""

    def param(self, name: str) -> ParamTag | None:
        """Look up a param tag by name."""
        for p in self.params:
            if p.name == name:
                return p
        return None


def comment_lines(comment: str) -> list[str]:
    """Strip the ``/**``, ``*/`` delimiters and leading ``*`` gutters."""
    body = comment.strip()
    if body.startswith("/**"):
        body = body[3:]
    elif body.startswith("/*"):
        body = body[2:]
    if body.endswith("*/"):
        body = body[:-2]

    lines: list[str] = []
    for raw in body.split("\n"):
        line = raw.rstrip()
        stripped = line.lstrip()
        if stripped.startswith("*"):
            stripped = stripped[1:]
            # One space after the gutter belongs to the gutter.
            if stripped.startswith(" "):
                stripped = stripped[1:]
            line = stripped
        else:
            line = stripped
        lines.append(line)
    return lines


def split_braced(text: str) -> tuple[str | None, str]:
    """Split a leading ``{type}`` (with nested braces) from the rest of a tag."""
    text = text.lstrip()
    if not text.startswith("{"):
        return None, text
    depth = 0
    for i, ch in enumerate(text):
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return text[1:i].strip(), text[i + 1 :].lstrip()
    # Unbalanced: treat everything as description.
    return None, text


def _strip_dash(text: str) -> str:
    text = text.strip()
    if text.startswith("-"):
        text = text[1:]
    return text.strip()


def _parse_param(rest: str) -> ParamTag | None:
    ptype, rest = split_braced(rest)
    m = PARAM_NAME_RE.match(rest)
    if not m:
        return None
    raw_name, desc = m.group(1), m.group(2)

    optional = False
    default = None
    name = raw_name
    if raw_name.startswith("[") and raw_name.endswith("]"):
        optional = True
        inner = raw_name[1:-1]
        if "=" in inner:
            inner, default = inner.split("=", 1)
            default = default.strip()
        name = inner.strip()
    if name.startswith("..."):
        name = name[3:]
    return ParamTag(
        name=name,
        type=ptype,
        description=_strip_dash(desc),
        optional=optional,
        default=default,
    )


def _expand_inline_tags(lines: list[str]) -> list[str]:
    """Move inline tags that follow text onto their own lines."""
    out: list[str] = []
    in_example = False
    for line in lines:
        if line.startswith("@"):
            in_example = line.startswith("@example")
        if in_example:
            out.append(line)
            continue
        parts = INLINE_TAG_RE.split(line)
        if len(parts) == 1:
            out.append(line)
            continue
        out.append(parts[0].rstrip())
        out.extend("@" + p.strip() for p in parts[1:])
    return out


def _finish_example(lines: list[str]) -> str:
    kept = [ln for ln in lines if not CODE_FENCE_RE.match(ln)]
    while kept and not kept[0].strip():
        kept.pop(0)
    while kept and not kept[-1].strip():
        kept.pop()
    return "\n".join(kept)


def _append(existing: str, extra: str) -> str:
    extra = extra.strip()
    if not extra:
        return existing
    return f"{existing} {extra}" if existing else extra


def parse_jsdoc(comment: str | None) -> ParsedDoc:
    """Parse a ``/** ... */`` block into description and tags.

    Non-tag lines before the first tag form the description. Continuation
    lines extend the previous ``@param`` or ``@returns`` description. Unknown
    tags are skipped together with their continuation lines.
    """
    result = ParsedDoc()
    if not comment:
        return result

    lines = _expand_inline_tags(comment_lines(comment))
    section = "description"
    description: list[str] = []
    example: list[str] = []

    for line in lines:
        # Indented "@" lines inside an example are code, not tags.
        is_tag = line.startswith("@") or (
            section != "example" and line.lstrip().startswith("@")
        )
        m = TAG_RE.match(line.strip()) if is_tag else None
        if m:
            tag, rest = m.group(1), m.group(2)
            if tag == "param":
                param = _parse_param(rest)
                if param:
                    result.params.append(param)
                section = "param"
            elif tag in {"returns", "return"}:
                rtype, rdesc = split_braced(rest)
                result.has_returns = True
                result.returns_type = rtype
                result.returns_description = _strip_dash(rdesc)
                section = "returns"
            elif tag == "example":
                example = [rest] if rest.strip() else []
                section = "example"
            elif tag == "since":
                sm = SINCE_RE.match(rest.strip())
                if sm:
                    result.since = sm.group(1)
                section = "since"
            else:
                section = "other"
            continue

        if section == "description":
            if line.strip():
                description.append(line.strip())
        elif section == "example":
            example.append(line)
        elif section == "param" and result.params:
            last = result.params[-1]
            last.description = _append(last.description, line)
        elif section == "returns":
            result.returns_description = _append(result.returns_description, line)

    result.description = " ".join(description)
    result.example = _finish_example(example)
    return result
