"""Minimal structural model of a TSX/TS module.

``SourceDocument`` knows just enough about JavaScript syntax to patch a
layout file safely: where comments and string literals are, which top-level
lines are imports, where a ``const`` object literal starts and ends, and where
the first ``{children}`` JSX expression sits. Searches never match inside a
comment or a string literal.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_IMPORT_RE = re.compile(
    r"""^import\s[^;]*?["'](?P<source>[^"']+)["'][ \t]*;?[ \t]*$""",
    re.MULTILINE,
)
_DIRECTIVE_RE = re.compile(r"""^\s*["'](?P<name>use [a-z]+)["'];?""")
_CHILDREN_RE = re.compile(r"\{\s*children\s*\}")
_WORD_BEFORE_RE = re.compile(r"[A-Za-z0-9_$]+$")

# Keywords after which a quote opens a string even though a word precedes it.
_EXPRESSION_KEYWORDS = frozenset(
    {
        "await", "case", "default", "delete", "else", "export", "from",
        "import", "in", "new", "of", "return", "typeof", "void", "yield",
    }
)


@dataclass(frozen=True)
class Span:
    start: int
    end: int


@dataclass(frozen=True)
class ImportStatement:
    text: str
    source: str
    span: Span


def _opens_string(text: str, pos: int) -> bool:
    """Whether the quote at *pos* starts a string rather than sitting in JSX text.

    A quote directly after a word (``Don't``) is prose unless that word is a
    keyword such as ``from`` or ``return``.
    """
    j = pos - 1
    while j >= 0 and text[j] in " \t\r\n":
        j -= 1
    match = _WORD_BEFORE_RE.search(text, max(0, j - 40), j + 1)
    if match is None or match.end() != j + 1:
        return True
    return match.group(0) in _EXPRESSION_KEYWORDS


def _literal_spans(text: str) -> list[Span]:
    """Return the spans of comments and string literals in *text*.

    Quoted strings end at an unescaped matching quote or at the end of the
    line, and a quote that follows a plain word is treated as JSX text.
    Template literals may span lines.
    """
    spans: list[Span] = []
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        nxt = text[i + 1] if i + 1 < n else ""
        if ch == "/" and nxt == "/":
            end = text.find("\n", i)
            end = n if end == -1 else end
            spans.append(Span(i, end))
            i = end
        elif ch == "/" and nxt == "*":
            end = text.find("*/", i + 2)
            end = n if end == -1 else end + 2
            spans.append(Span(i, end))
            i = end
        elif ch == "`" or (ch in "\"'" and _opens_string(text, i)):
            j = i + 1
            while j < n:
                c = text[j]
                if c == "\\":
                    j += 2
                    continue
                if c == ch:
                    j += 1
                    break
                if c == "\n" and ch != "`":
                    break
                j += 1
            spans.append(Span(i, min(j, n)))
            i = j
        else:
            i += 1
    return spans


class SourceDocument:
    """Mutable text of one source file plus structural queries over it."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._spans: list[Span] | None = None

    @property
    def text(self) -> str:
        return self._text

    def _set_text(self, text: str) -> None:
        self._text = text
        self._spans = None

    # -- Literal / comment awareness -----------------------------------

    def _literals(self) -> list[Span]:
        if self._spans is None:
            self._spans = _literal_spans(self._text)
        return self._spans

    def _literal_at(self, pos: int) -> Span | None:
        for span in self._literals():
            if span.start <= pos < span.end:
                return span
            if span.start > pos:
                break
        return None

    def in_code(self, pos: int) -> bool:
        """``True`` if *pos* is outside every comment and string literal."""
        return self._literal_at(pos) is None

    def find_code(self, pattern: re.Pattern[str], start: int = 0) -> re.Match[str] | None:
        """First match of *pattern* that begins in code, not in a literal."""
        for match in pattern.finditer(self._text, start):
            if self.in_code(match.start()):
                return match
        return None

    def contains(self, needle: str) -> bool:
        return needle in self._text

    # -- Directives -------------------------------------------------------

    def has_directive(self, name: str) -> bool:
        """Whether the module prologue contains the ``"<name>"`` directive."""
        match = _DIRECTIVE_RE.match(self._text)
        return bool(match and match.group("name") == name)

    def ensure_directive(self, name: str) -> bool:
        """Prepend ``"<name>";`` when missing. Returns ``True`` if added."""
        if self.has_directive(name):
            return False
        self._set_text(f'"{name}";\n\n' + self._text)
        return True

    # -- Imports ----------------------------------------------------------

    def imports(self) -> list[ImportStatement]:
        result: list[ImportStatement] = []
        for match in _IMPORT_RE.finditer(self._text):
            if not self.in_code(match.start()):
                continue
            result.append(
                ImportStatement(
                    text=match.group(0).strip(),
                    source=match.group("source"),
                    span=Span(match.start(), match.end()),
                )
            )
        return result

    def has_import_from(self, source: str) -> bool:
        return any(stmt.source == source for stmt in self.imports())

    def insert_import(self, statement: str, after_source: str | None = None) -> bool:
        """Insert *statement* on its own line among the imports.

        The statement goes right after the import of *after_source* when that
        import exists; otherwise after the last import, or after the
        directive prologue when the file has no imports.

        Returns:
            ``True`` if the *after_source* anchor was found and used.
        """
        statements = self.imports()
        anchor = None
        if after_source is not None:
            anchor = next((s for s in statements if s.source == after_source), None)
        used_anchor = anchor is not None
        if anchor is None and statements:
            anchor = statements[-1]

        if anchor is not None:
            pos = anchor.span.end
            self._set_text(self._text[:pos] + "\n" + statement + self._text[pos:])
            return used_anchor

        directive = _DIRECTIVE_RE.match(self._text)
        if directive:
            pos = directive.end()
            self._set_text(self._text[:pos] + "\n" + statement + self._text[pos:])
        else:
            self._set_text(statement + "\n" + self._text)
        return False

    # -- Declarations -------------------------------------------------------

    def find_object_declaration(self, name: str) -> Span | None:
        """Span of ``export const <name>[: T] = { ... };`` including the semicolon.

        The closing brace is found by counting braces in code only, so nested
        objects, strings and comments containing ``}`` or ``};`` are handled.
        """
        pattern = re.compile(
            r"(?:export\s+)?const\s+" + re.escape(name) + r"\b[^=;]*=\s*\{"
        )
        match = self.find_code(pattern)
        if match is None:
            return None
        close = self.match_bracket(match.end() - 1)
        if close is None:
            return None
        end = close + 1
        rest = self._text[end:]
        stripped = rest.lstrip(" \t")
        if stripped.startswith(";"):
            end += len(rest) - len(stripped) + 1
        return Span(match.start(), end)

    def match_bracket(self, open_pos: int) -> int | None:
        """Index of the bracket closing the one at *open_pos*, counting code only."""
        pairs = {"{": "}", "[": "]", "(": ")"}
        opening = self._text[open_pos]
        closing = pairs[opening]
        depth = 0
        i = open_pos
        n = len(self._text)
        while i < n:
            literal = self._literal_at(i)
            if literal is not None:
                i = literal.end
                continue
            ch = self._text[i]
            if ch == opening:
                depth += 1
            elif ch == closing:
                depth -= 1
                if depth == 0:
                    return i
            i += 1
        return None

    def last_code_index(self, char: str) -> int | None:
        """Index of the last *char* that is not inside a literal."""
        pos = self._text.rfind(char)
        while pos != -1:
            if self.in_code(pos):
                return pos
            pos = self._text.rfind(char, 0, pos)
        return None

    def replace_span(self, span: Span, replacement: str) -> None:
        self._set_text(self._text[: span.start] + replacement + self._text[span.end :])

    # -- JSX --------------------------------------------------------------

    def find_children(self) -> Span | None:
        """Span of the first JSX ``{children}`` expression outside literals.

        A destructuring pattern such as ``({ children }: Props)`` has the same
        text, so matches preceded by ``(`` or followed by ``:``, ``=`` or ``)``
        are skipped.
        """
        for match in _CHILDREN_RE.finditer(self._text):
            if not self.in_code(match.start()):
                continue
            before = self._text[: match.start()].rstrip()
            after = self._text[match.end() :].lstrip()
            if before.endswith("(") or after[:1] in (":", "=", ")"):
                continue
            return Span(match.start(), match.end())
        return None

    def wrap_children(self, opening: str, closing: str, indent: str = "        ") -> bool:
        """Wrap the first ``{children}`` with *opening*/*closing* tags."""
        span = self.find_children()
        if span is None:
            return False
        outer = indent[:-2] if len(indent) >= 2 else ""
        replacement = f"{opening}\n{indent}{{children}}\n{outer}{closing}"
        self.replace_span(span, replacement)
        return True

    def insert_after_children(self, snippet: str) -> bool:
        """Insert *snippet* immediately after the first ``{children}``."""
        span = self.find_children()
        if span is None:
            return False
        self._set_text(self._text[: span.end] + snippet + self._text[span.end :])
        return True
