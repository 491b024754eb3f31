"""Token-based scanner for exported TypeScript declarations."""

from doccatalog.declaration import Declaration
from doccatalog.ts_lexer import Token, blank_lines_between, tokenize

OPEN = {"(": ")", "[": "]", "{": "}"}
CLOSE = {v: k for k, v in OPEN.items()}
STATEMENT_KEYWORDS = {
    "export",
    "import",
    "const",
    "let",
    "var",
    "function",
    "interface",
    "type",
    "class",
    "enum",
    "declare",
    "namespace",
}
# A "{" right after one of these is a type literal, not a function body.
TYPE_CONTINUERS = {"|", "&", "=>", ",", "(", "<", ":", "?", "["}
COMMENT_KINDS = {"comment", "doc"}


class LexerScanner:
    """Finds exported declarations by walking the token stream at depth 0."""

    name = "lexer"

    def __init__(self, max_blank_lines: int = 1) -> None:
        """Initialize with the largest blank-line gap a doc comment may leave."""
        self.max_blank_lines = max_blank_lines

    def scan(self, source: str) -> list[Declaration]:
        """Return every exported declaration in ``source``, in order."""
        walker = _Walker(source, tokenize(source), self.max_blank_lines)
        return walker.walk()


class _Walker:
    def __init__(self, source: str, tokens: list[Token], max_blank_lines: int) -> None:
        self.source = source
        self.tokens = tokens
        self.n = len(tokens)
        self.max_blank_lines = max_blank_lines

    # -----------------------------
    # Token helpers
    # -----------------------------

    def text_at(self, i: int) -> str:
        return self.tokens[i].text if i < self.n else ""

    def span(self, a: int, b: int) -> str:
        """Source text from token ``a`` through token ``b`` inclusive."""
        return self.source[self.tokens[a].start : self.tokens[b].end]

    def match(self, i: int) -> int:
        """Index of the bracket closing the one at ``i``."""
        depth = 0
        for k in range(i, self.n):
            tok = self.tokens[k]
            if tok.kind != "punct":
                continue
            if tok.text in OPEN:
                depth += 1
            elif tok.text in CLOSE:
                depth -= 1
                if depth == 0:
                    return k
        return self.n - 1

    def match_angle(self, i: int) -> int:
        """Index of the ``>`` closing the generic list opened at ``i``."""
        depth = 0
        for k in range(i, self.n):
            tok = self.tokens[k]
            if tok.kind != "punct":
                continue
            if tok.text in ("<", "(", "[", "{"):
                depth += 1
            elif tok.text in (">", ")", "]", "}"):
                depth -= 1
                if depth == 0:
                    return k
        return self.n - 1

    def is_boundary(self, k: int, start: int) -> bool:
        """True when token ``k`` starts a new top-level statement."""
        tok = self.tokens[k]
        if k <= start:
            return False
        if tok.kind == "doc":
            return True
        prev = self.tokens[k - 1]
        return (
            tok.kind == "ident"
            and tok.text in STATEMENT_KEYWORDS
            and tok.line > prev.line
            and prev.text not in TYPE_CONTINUERS
            and prev.text != "="
        )

    def last_code(self, a: int, b: int) -> int:
        """Last non-comment token index in ``[a, b]``, or ``a - 1``."""
        while b >= a and self.tokens[b].kind in COMMENT_KINDS:
            b -= 1
        return b

    # -----------------------------
    # Walk
    # -----------------------------

    def walk(self) -> list[Declaration]:
        decls: list[Declaration] = []
        depth = 0
        i = 0
        while i < self.n:
            tok = self.tokens[i]
            if tok.kind == "punct":
                if tok.text in OPEN:
                    depth += 1
                elif tok.text in CLOSE:
                    depth = max(0, depth - 1)
            elif depth == 0 and tok.kind == "ident" and tok.text == "export":
                found, nxt = self.declaration(i)
                decls.extend(found)
                i = max(nxt, i + 1)
                continue
            i += 1
        return decls

    def doc_before(self, i: int) -> str | None:
        if i == 0:
            return None
        prev = self.tokens[i - 1]
        if prev.kind != "doc":
            return None
        gap = blank_lines_between(self.source, prev.end, self.tokens[i].start)
        if gap > self.max_blank_lines:
            return None
        return prev.text

    def declaration(self, i: int) -> tuple[list[Declaration], int]:
        doc = self.doc_before(i)
        j = i + 1
        while self.text_at(j) in ("declare", "default"):
            j += 1
        if self.text_at(j) == "async" and self.text_at(j + 1) == "function":
            j += 1

        word = self.text_at(j)
        if word in ("const", "let", "var"):
            return self.variable(i, j, doc)
        if word == "function":
            decl, end = self.function(i, j, doc)
        elif word == "interface":
            decl, end = self.interface(i, j, doc)
        elif word == "type" and j + 1 < self.n and self.tokens[j + 1].kind == "ident":
            decl, end = self.type_alias(i, j, doc)
        else:
            return [], j
        return ([decl] if decl is not None else []), end

    def callable_tail(
        self, k: int, *, arrow: bool
    ) -> tuple[str | None, str | None, str | None, int]:
        """Parse ``<T>(params): Ret`` starting at ``k``.

        Returns type params, params text, return type and the index of the
        first token after the return type.
        """
        type_params = None
        if self.text_at(k) == "<":
            close = self.match_angle(k)
            type_params = self.span(k, close)
            k = close + 1
        if self.text_at(k) != "(":
            return type_params, None, None, k
        close = self.match(k)
        params_text = self.source[self.tokens[k].end : self.tokens[close].start]
        k = close + 1

        return_type = None
        if self.text_at(k) == ":":
            start = k + 1
            m = start
            depth = 0
            while m < self.n:
                tok = self.tokens[m]
                if tok.kind == "punct" and depth == 0:
                    if tok.text == ";":
                        break
                    if arrow and tok.text == "=>":
                        break
                    if (
                        not arrow
                        and tok.text == "{"
                        and m > start
                        and self.tokens[m - 1].text not in TYPE_CONTINUERS
                    ):
                        break
                if tok.kind == "punct":
                    if tok.text in ("(", "[", "{", "<"):
                        depth += 1
                    elif tok.text in (")", "]", "}", ">"):
                        depth -= 1
                        if depth < 0:
                            break
                m += 1
            last = self.last_code(start, m - 1)
            if last >= start:
                return_type = self.span(start, last)
            k = m
        return type_params, params_text, return_type, k

    def function(
        self, i: int, j: int, doc: str | None
    ) -> tuple[Declaration | None, int]:
        k = j + 1
        if self.text_at(k) == "*":
            k += 1
        if k >= self.n or self.tokens[k].kind != "ident":
            return None, k
        name = self.tokens[k].text
        type_params, params_text, return_type, k = self.callable_tail(
            k + 1, arrow=False
        )

        if self.text_at(k) == "{":
            end = self.match(k) + 1
        elif self.text_at(k) == ";":
            end = k + 1
        else:
            end = k
        decl = Declaration(
            kind="function",
            name=name,
            line=self.tokens[i].line,
            doc=doc,
            type_params=type_params,
            params_text=params_text,
            return_type=return_type,
        )
        return decl, end

    def variable(
        self, i: int, j: int, doc: str | None
    ) -> tuple[list[Declaration], int]:
        """Every declarator of ``const A = 1, B = 2``, all sharing ``doc``."""
        line = self.tokens[i].line
        decls: list[Declaration] = []
        k = j + 1
        while True:
            decl, k = self.declarator(k, line, doc)
            if decl is not None:
                decls.append(decl)
            if self.text_at(k) != ",":
                break
            k += 1
        end = k + 1 if self.text_at(k) == ";" else k
        return decls, end

    def declarator(
        self, k: int, line: int, doc: str | None
    ) -> tuple[Declaration | None, int]:
        """Parse ``name[: T] = value`` at ``k``; also return the terminator index."""
        if k >= self.n or self.tokens[k].kind != "ident":
            return None, k
        name = self.tokens[k].text
        k += 1

        if self.text_at(k) == ":":
            depth = 0
            k += 1
            while k < self.n:
                t = self.tokens[k]
                if t.kind == "punct":
                    if t.text == "=" and depth == 0:
                        break
                    if t.text in ("(", "[", "{", "<"):
                        depth += 1
                    elif t.text in (")", "]", "}", ">"):
                        depth -= 1
                    elif t.text in (";", ",") and depth == 0:
                        break
                k += 1
        if self.text_at(k) != "=":
            return None, k

        start = k + 1
        m = start
        if self.text_at(m) == "async":
            m += 1
        if self.text_at(m) == "<":
            # Generic arrow: commas inside <T, K> do not end the declarator.
            m = self.match_angle(m) + 1
        depth = 0
        while m < self.n:
            t = self.tokens[m]
            if t.kind == "punct":
                if t.text in OPEN:
                    depth += 1
                elif t.text in CLOSE:
                    depth -= 1
                    if depth < 0:
                        break
                elif t.text in (";", ",") and depth == 0:
                    break
            elif depth == 0 and self.is_boundary(m, start):
                break
            m += 1
        last = self.last_code(start, m - 1)
        if last < start:
            return None, m

        fn = self.function_value(start, last)
        if fn is not None:
            type_params, params_text, return_type = fn
            decl = Declaration(
                kind="function",
                name=name,
                line=line,
                doc=doc,
                type_params=type_params,
                params_text=params_text,
                return_type=return_type,
            )
        else:
            decl = Declaration(
                kind="const",
                name=name,
                line=line,
                doc=doc,
                value=self.span(start, last),
            )
        return decl, m

    def function_value(
        self, a: int, b: int
    ) -> tuple[str | None, str | None, str | None] | None:
        """Recognize an arrow function or function expression in ``[a, b]``."""
        if self.text_at(a) == "async" and a < b:
            a += 1
        if self.text_at(a) == "function":
            a += 1
            if self.text_at(a) == "*":
                a += 1
            if a <= b and self.tokens[a].kind == "ident":
                a += 1
            type_params, params_text, return_type, _ = self.callable_tail(
                a, arrow=False
            )
            return type_params, params_text, return_type

        tok = self.tokens[a]
        if tok.kind == "ident" and self.text_at(a + 1) == "=>":
            return None, tok.text, None
        if tok.text in ("(", "<"):
            type_params, params_text, return_type, k = self.callable_tail(a, arrow=True)
            if params_text is not None and k <= b and self.text_at(k) == "=>":
                return type_params, params_text, return_type
        return None

    def interface(
        self, i: int, j: int, doc: str | None
    ) -> tuple[Declaration | None, int]:
        if j + 1 >= self.n:
            return None, j + 1
        name = self.tokens[j + 1].text
        k = j + 2
        while k < self.n and self.text_at(k) != "{":
            if self.text_at(k) == "<":
                k = self.match_angle(k)
            k += 1
        if k >= self.n:
            return None, k
        close = self.match(k)
        decl = Declaration(
            kind="interface",
            name=name,
            line=self.tokens[i].line,
            doc=doc,
            definition=self.span(j, close),
            body=self.source[self.tokens[k].end : self.tokens[close].start],
        )
        return decl, close + 1

    def type_alias(
        self, i: int, j: int, doc: str | None
    ) -> tuple[Declaration | None, int]:
        name = self.tokens[j + 1].text
        start = j + 2
        m = start
        depth = 0
        while m < self.n:
            t = self.tokens[m]
            if t.kind == "punct":
                if t.text in OPEN:
                    depth += 1
                elif t.text in CLOSE:
                    depth -= 1
                    if depth < 0:
                        break
                elif t.text == ";" and depth == 0:
                    break
            elif depth == 0 and self.is_boundary(m, start + 1):
                break
            m += 1
        last = self.last_code(j, m - 1)
        end = m + 1 if self.text_at(m) == ";" else m
        decl = Declaration(
            kind="type",
            name=name,
            line=self.tokens[i].line,
            doc=doc,
            definition=self.span(j, last),
        )
        return decl, end
