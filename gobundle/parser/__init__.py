from .syntax import IDENTIFIER_KINDS, LITERAL_KINDS, NEWLINE, Node, SyntaxTree, Trivia, TriviaKind, token
from .tree_sitter_parser import TreeSitterParser

__all__ = [
    "IDENTIFIER_KINDS",
    "LITERAL_KINDS",
    "NEWLINE",
    "Node",
    "SyntaxTree",
    "Trivia",
    "TriviaKind",
    "token",
    "TreeSitterParser",
]
