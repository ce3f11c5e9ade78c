"""Immutable syntax tree used between parsing and printing.

Tree-sitter trees are read-only views over the source buffer, so the parser
converts them into this small value model. Transformations build new trees
out of it instead of editing nodes in place.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, Iterator, List, Optional, Tuple


class TriviaKind(str, Enum):
    COMMENT = "comment"
    NEWLINE = "newline"


@dataclass(frozen=True)
class Trivia:
    """Non-semantic text attached in front of a token."""

    kind: TriviaKind
    text: str = "\n"

    @property
    def spans_lines(self) -> bool:
        """True when this trivia acts as a line break for semicolon insertion."""
        return self.kind is TriviaKind.NEWLINE or "\n" in self.text

    @property
    def is_line_comment(self) -> bool:
        return self.kind is TriviaKind.COMMENT and self.text.startswith("//")


NEWLINE = Trivia(TriviaKind.NEWLINE)

# Every node kind Go itself treats as an identifier, including the predeclared constants.
IDENTIFIER_KINDS = frozenset(
    {
        "identifier",
        "field_identifier",
        "type_identifier",
        "package_identifier",
        "label_name",
        "true",
        "false",
        "nil",
        "iota",
    }
)

# Literal nodes are kept whole; their inner quote/escape/content children do not matter.
LITERAL_KINDS = frozenset(
    {
        "interpreted_string_literal",
        "raw_string_literal",
        "rune_literal",
        "int_literal",
        "float_literal",
        "imaginary_literal",
    }
)


@dataclass(frozen=True)
class Node:
    """A syntax node. Leaf tokens carry ``text``; inner nodes carry ``children``."""

    kind: str
    text: Optional[str] = None
    children: Tuple["Node", ...] = ()
    leading: Tuple[Trivia, ...] = ()

    @property
    def is_token(self) -> bool:
        return self.text is not None

    def tokens(self) -> Iterator["Node"]:
        """Yield leaf tokens in source order."""
        stack = [self]
        while stack:
            node = stack.pop()
            if node.is_token:
                yield node
            else:
                stack.extend(reversed(node.children))

    def first_token(self) -> Optional["Node"]:
        return next(self.tokens(), None)

    def with_children(self, children) -> "Node":
        return replace(self, children=tuple(children))

    def with_leading(self, leading) -> "Node":
        """Return a copy whose first token carries ``leading`` trivia."""
        path = [self]
        while not path[-1].is_token:
            if not path[-1].children:
                return self
            path.append(path[-1].children[0])
        node = replace(path.pop(), leading=tuple(leading))
        while path:
            parent = path.pop()
            node = parent.with_children((node, *parent.children[1:]))
        return node

    def rebuild(
        self,
        token_fn: Optional[Callable[["Node"], "Node"]] = None,
        node_fn: Optional[Callable[["Node", List["Node"]], "Node"]] = None,
    ) -> "Node":
        """Rebuild the subtree bottom-up.

        ``token_fn(token)`` maps every leaf token. ``node_fn(node, children)``
        builds each inner node from its already rebuilt children and defaults
        to ``with_children``. The walk keeps its own stack: generated Go (long
        ``+`` chains, big table literals) nests deeper than the interpreter's
        recursion limit.
        """
        token_fn = token_fn or (lambda tok: tok)
        node_fn = node_fn or (lambda node, children: node.with_children(children))
        if self.is_token:
            return token_fn(self)

        stack = [(self, [], iter(self.children))]
        while True:
            node, children, pending = stack[-1]
            child = next(pending, None)
            if child is None:
                stack.pop()
                built = node_fn(node, children)
                if not stack:
                    return built
                stack[-1][1].append(built)
            elif child.is_token:
                children.append(token_fn(child))
            else:
                stack.append((child, [], iter(child.children)))

    def map_tokens(self, fn: Callable[["Node"], "Node"]) -> "Node":
        """Rebuild the subtree with ``fn`` applied to every token."""
        return self.rebuild(token_fn=fn)

    def find_children(self, kind: str) -> Tuple["Node", ...]:
        return tuple(child for child in self.children if child.kind == kind)


def token(text: str, kind: Optional[str] = None, leading: Tuple[Trivia, ...] = ()) -> Node:
    """Build a synthesized token. Punctuation and keywords use their text as kind."""
    return Node(kind=kind or text, text=text, leading=leading)


@dataclass(frozen=True)
class SyntaxTree:
    """One parsed file: the root node plus trivia found after the last token."""

    root: Node
    trailing: Tuple[Trivia, ...] = ()
    path: str = field(default="<input>", compare=False)

    def tokens(self) -> Iterator[Node]:
        return self.root.tokens()

    def replace_root(self, root: Node, trailing: Optional[Tuple[Trivia, ...]] = None) -> "SyntaxTree":
        return replace(self, root=root, trailing=self.trailing if trailing is None else trailing)
