"""Partial Go parser that reads only the package clause and import declarations.

The lexer is lazy and the parser stops at the first token that is not part
of an import declaration, so only the head of a file is ever scanned.
"""

import re
from dataclasses import dataclass, field
from typing import Iterator, List, NamedTuple, Optional

from gobundle.errors import MetadataParseError

_TOKEN = re.compile(
    r"""
      (?P<space>[ \t\r\f\v]+)
    | (?P<newline>\n)
    | (?P<comment>//[^\n]*|/\*.*?\*/)
    | (?P<string>"(?:\\.|[^"\\\n])*"|`[^`]*`)
    | (?P<ident>[^\W\d]\w*)
    | (?P<punct>[().;])
    """,
    re.VERBOSE | re.DOTALL,
)


class HeaderToken(NamedTuple):
    kind: str
    value: str
    offset: int


def tokenize_header(text: str) -> Iterator[HeaderToken]:
    """Yield header tokens, inserting ``;`` at line breaks like the Go lexer."""
    pos = 0
    prev: Optional[HeaderToken] = None

    def terminates(tok: Optional[HeaderToken]) -> bool:
        return tok is not None and (tok.kind in ("ident", "string") or tok.value == ")")

    while pos < len(text):
        match = _TOKEN.match(text, pos)
        if match is None:
            yield HeaderToken("other", text[pos], pos)
            return
        kind, value = match.lastgroup, match.group()
        if kind == "newline" or (kind == "comment" and "\n" in value):
            if terminates(prev):
                prev = HeaderToken("punct", ";", pos)
                yield prev
        elif kind not in ("space", "comment"):
            prev = HeaderToken(kind, value, pos)
            yield prev
        pos = match.end()

    if terminates(prev):
        yield HeaderToken("punct", ";", pos)
    yield HeaderToken("eof", "", pos)


@dataclass
class FileHeader:
    package: str
    imports: List[str] = field(default_factory=list)


class HeaderParser:
    """``package`` clause followed by any number of ``import`` declarations."""

    def parse(self, text: str) -> FileHeader:
        self._tokens = tokenize_header(text)
        self._advance()

        self._expect_word("package")
        header = FileHeader(package=self._expect("ident").value)
        self._expect_terminator()

        while self.current.kind == "ident" and self.current.value == "import":
            self._advance()
            if self._accept("("):
                while not self._accept(")"):
                    header.imports.append(self._import_spec())
                    if not self._accept(";") and self.current.value != ")":
                        self._fail("';' or ')'")
            else:
                header.imports.append(self._import_spec())
            self._expect_terminator()
        return header

    def _import_spec(self) -> str:
        if self.current.kind == "ident" or self.current.value == ".":
            self._advance()
        path = self._expect("string").value
        return path[1:-1]

    def _advance(self) -> None:
        self.current = next(self._tokens, HeaderToken("eof", "", -1))

    def _accept(self, punct: str) -> bool:
        if self.current.kind == "punct" and self.current.value == punct:
            self._advance()
            return True
        return False

    def _expect(self, kind: str) -> HeaderToken:
        tok = self.current
        if tok.kind != kind:
            self._fail(kind)
        self._advance()
        return tok

    def _expect_word(self, word: str) -> None:
        if self.current.kind != "ident" or self.current.value != word:
            self._fail(repr(word))
        self._advance()

    def _expect_terminator(self) -> None:
        if self.current.kind == "eof":
            return
        if not self._accept(";"):
            self._fail("';'")

    def _fail(self, expected: str) -> None:
        found = self.current.value or self.current.kind
        raise MetadataParseError(f"offset {self.current.offset}: expected {expected}, found {found!r}")
