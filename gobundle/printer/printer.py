"""Syntax tree -> Go source text.

Line breaks are kept where the parsed source had them, lines are indented
with tabs by bracket depth, and every automatic semicolon the Go lexer
would insert at a line break is written out explicitly. The explicit
terminators are what let ``TextCompactor`` collapse line breaks later
without changing how the text tokenizes.
"""

from typing import List, Optional, Tuple

from gobundle.parser.syntax import IDENTIFIER_KINDS, LITERAL_KINDS, Node, SyntaxTree, Trivia, TriviaKind, token

KEYWORDS = frozenset(
    {
        "break",
        "case",
        "chan",
        "const",
        "continue",
        "default",
        "defer",
        "else",
        "fallthrough",
        "for",
        "func",
        "go",
        "goto",
        "if",
        "import",
        "interface",
        "map",
        "package",
        "range",
        "return",
        "select",
        "struct",
        "switch",
        "type",
        "var",
    }
)

# Tokens after which a line break ends the statement (Go language reference, "Semicolons").
TERMINATING_KEYWORDS = frozenset({"break", "continue", "fallthrough", "return"})
TERMINATING_PUNCTUATION = frozenset({"++", "--", ")", "]", "}"})

OPENERS = frozenset("([{")
CLOSERS = frozenset(")]}")
OPERATOR_CHARS = frozenset("+-*/%&|^<>=!:~")
NO_SPACE_AFTER_KEYWORD = frozenset("()[]{};,:.")


def _is_word_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def is_keyword(tok: Node) -> bool:
    # Keywords are anonymous tokens, so their kind is their own text.
    return tok.kind == tok.text and tok.text in KEYWORDS


def ends_statement(tok: Node) -> bool:
    """Would the Go lexer insert a semicolon after ``tok`` at a line break?"""
    if tok.kind in IDENTIFIER_KINDS or tok.kind in LITERAL_KINDS:
        return True
    text = tok.text
    if is_keyword(tok):
        return text in TERMINATING_KEYWORDS
    if text in TERMINATING_PUNCTUATION:
        return True
    first = text[0]
    return _is_word_char(first) or first in "\"'`" or (first == "." and text[1:2].isdigit())


def needs_space(prev: Node, tok: Node) -> bool:
    """True when ``prev`` and ``tok`` need a separating space."""
    left, right = prev.text[-1], tok.text[0]
    if _is_word_char(left) and _is_word_char(right):
        return True
    if left in OPERATOR_CHARS and right in OPERATOR_CHARS:
        return True
    return is_keyword(prev) and right not in NO_SPACE_AFTER_KEYWORD


class _Writer:
    def __init__(self, indent: str):
        self.indent = indent
        self.parts: List[str] = []
        self.depth = 0
        self.prev: Optional[Node] = None
        self.line_break = False
        self.after_comment = False

    def gap(self, leading: Tuple[Trivia, ...], final: bool = False) -> None:
        if not final and self.prev is not None and ends_statement(self.prev) and any(t.spans_lines for t in leading):
            self.parts.append(";")
            self.prev = token(";")
        for trivia in leading:
            if trivia.kind is TriviaKind.NEWLINE:
                self.line_break = bool(self.parts)
                continue
            self._separate()
            self.parts.append(trivia.text)
            self.after_comment = True
            if trivia.is_line_comment:
                self.line_break = True

    def write(self, tok: Node) -> None:
        if tok.text in CLOSERS and tok.kind == tok.text:
            self.depth = max(0, self.depth - 1)
        if self.line_break:
            self._separate()
        elif self.after_comment or (self.prev is not None and needs_space(self.prev, tok)):
            self.parts.append(" ")
        self.parts.append(tok.text)
        if tok.text in OPENERS and tok.kind == tok.text:
            self.depth += 1
        self.prev = tok
        self.after_comment = False

    def _separate(self) -> None:
        if self.line_break:
            self.parts.append("\n" + self.indent * self.depth)
            self.line_break = False
        elif self.parts:
            self.parts.append(" ")

    def finish(self) -> str:
        text = "".join(self.parts)
        return text if not text or text.endswith("\n") else text + "\n"


class Printer:
    """Deterministic printer for trees produced by the parser and transformer."""

    def __init__(self, indent: str = "\t"):
        self.indent = indent

    def print(self, tree: SyntaxTree) -> str:
        writer = _Writer(self.indent)
        for tok in tree.tokens():
            writer.gap(tok.leading)
            writer.write(tok)
        writer.gap(tree.trailing, final=True)
        return writer.finish()
