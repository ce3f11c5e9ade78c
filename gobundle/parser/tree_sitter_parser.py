"""Tree-sitter based Go parser producing the engine's immutable syntax tree."""

from typing import List, Optional, Tuple

import tree_sitter_go as tsgo
from loguru import logger
from tree_sitter import Language, Parser
from tree_sitter import Node as TSNode

from gobundle.errors import ParseError
from .syntax import LITERAL_KINDS, NEWLINE, Node, SyntaxTree, Trivia, TriviaKind

GO_LANGUAGE = Language(tsgo.language())


class _TriviaCollector:
    """Turns the gaps between tokens into leading trivia."""

    def __init__(self, source: bytes):
        self.source = source
        self.cursor = 0
        self.comments: List[Tuple[int, int]] = []

    def add_comment(self, node: TSNode) -> None:
        self.comments.append((node.start_byte, node.end_byte))

    def take(self, until: int) -> Tuple[Trivia, ...]:
        trivia: List[Trivia] = []
        pos = self.cursor
        for start, end in self.comments:
            self._gap(trivia, pos, start)
            trivia.append(Trivia(TriviaKind.COMMENT, self.source[start:end].decode("utf-8")))
            pos = end
        self._gap(trivia, pos, until)
        self.comments = []
        return tuple(trivia)

    def advance(self, end: int) -> None:
        self.cursor = end

    def _gap(self, trivia: List[Trivia], start: int, end: int) -> None:
        if b"\n" in self.source[start:end] and not (trivia and trivia[-1].kind is TriviaKind.NEWLINE):
            trivia.append(NEWLINE)


class TreeSitterParser:
    """Parse Go source text into a ``SyntaxTree``.

    Comments are retained as leading trivia of the following token so later
    stages decide whether to drop them. Grammar terminator tokens for line
    breaks are folded into ``newline`` trivia.
    """

    def __init__(self) -> None:
        self.parser = Parser(GO_LANGUAGE)

    def get_language(self) -> str:
        return "go"

    def parse_bytes(self, data: bytes, path: str = "<input>") -> SyntaxTree:
        try:
            code = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(path, f"invalid UTF-8 at byte {e.start}")
        return self.parse(code, path)

    def parse(self, code: str, path: str = "<input>") -> SyntaxTree:
        """Parse ``code``; raise ``ParseError`` if the grammar reports any error."""
        source = code.encode("utf-8")
        # The grammar wants a terminator after the last top-level declaration.
        if not source.endswith(b"\n"):
            source += b"\n"
        tree = self.parser.parse(source)
        root = tree.root_node
        if root.has_error:
            raise self._error(root, source, path)

        collector = _TriviaCollector(source)
        converted = self._convert(root, source, collector)
        trailing = collector.take(len(source))
        logger.debug(f"Parsed {path}: {len(source)} bytes")
        return SyntaxTree(root=converted, trailing=trailing, path=path)

    def _convert(self, root: TSNode, source: bytes, collector: _TriviaCollector) -> Node:
        """Depth-first conversion driven by a tree cursor and an explicit stack of open nodes."""
        cursor = root.walk()
        # (kind, converted children) for every inner node on the cursor's path.
        stack: List[Tuple[str, List[Node]]] = [(root.type, [])]
        descend = True

        while True:
            moved = descend and cursor.goto_first_child()
            if not moved and not cursor.goto_next_sibling():
                if not cursor.goto_parent():
                    break
                kind, children = stack.pop()
                node = Node(kind=kind, children=tuple(children))
                if not stack:
                    return node
                stack[-1][1].append(node)
                descend = False
                continue

            ts_node = cursor.node
            descend = False
            if ts_node.type == "comment":
                collector.add_comment(ts_node)
            elif ts_node.child_count == 0 or ts_node.type in LITERAL_KINDS:
                leaf = self._token(ts_node, source, collector)
                if leaf is not None:
                    stack[-1][1].append(leaf)
            else:
                stack.append((ts_node.type, []))
                descend = True

        # Only reached for a root without children.
        kind, children = stack.pop()
        return Node(kind=kind, children=tuple(children))

    @staticmethod
    def _token(ts_node: TSNode, source: bytes, collector: _TriviaCollector) -> Optional[Node]:
        text = source[ts_node.start_byte : ts_node.end_byte].decode("utf-8")
        # Newline and end-of-file terminators are whitespace; trivia records them.
        if not text.strip():
            return None
        leading = collector.take(ts_node.start_byte)
        collector.advance(ts_node.end_byte)
        return Node(kind=ts_node.type, text=text, leading=leading)

    def _error(self, root: TSNode, source: bytes, path: str) -> ParseError:
        bad = self._first_error(root)
        line, column = bad.start_point[0] + 1, bad.start_point[1] + 1
        if bad.is_missing:
            return ParseError(path, f"missing {bad.type!r}", line, column)
        snippet = source[bad.start_byte : bad.end_byte].decode("utf-8", errors="replace").strip()
        snippet = snippet.splitlines()[0][:40] if snippet else ""
        return ParseError(path, f"syntax error near {snippet!r}", line, column)

    @staticmethod
    def _first_error(node: TSNode) -> TSNode:
        """Follow ``has_error`` down to the first ERROR or missing node."""
        while True:
            for child in node.children:
                if child.is_error or child.is_missing:
                    return child
                if child.has_error:
                    node = child
                    break
            else:
                return node
