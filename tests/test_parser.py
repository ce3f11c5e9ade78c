"""Tests for the tree-sitter backed parser and the syntax tree model."""

import pytest

from gobundle.errors import ParseError
from gobundle.parser import LITERAL_KINDS, TriviaKind


def test_tokens_in_source_order(parser):
    tree = parser.parse("package main\n\nfunc main() {\n\tx := 1\n}\n")

    assert tree.root.kind == "source_file"
    assert [tok.text for tok in tree.tokens()] == ["package", "main", "func", "main", "(", ")", "{", "x", ":=", "1", "}"]


def test_line_breaks_recorded_as_trivia(parser):
    tree = parser.parse("package main\n\nfunc main() { x := 1 }\n")
    tokens = {tok.text: tok for tok in tree.tokens()}

    assert any(t.kind is TriviaKind.NEWLINE for t in tokens["func"].leading)
    assert tokens["x"].leading == ()


def test_comments_kept_as_leading_trivia(parser):
    tree = parser.parse("package main\n\n// hello\nfunc main() {}\n")
    func = next(tok for tok in tree.tokens() if tok.text == "func")

    comments = [t.text for t in func.leading if t.kind is TriviaKind.COMMENT]
    assert comments == ["// hello"]


def test_comment_after_last_token_is_trailing(parser):
    tree = parser.parse("package main\n\n// bye\n")

    assert [t.text for t in tree.trailing if t.kind is TriviaKind.COMMENT] == ["// bye"]


def test_literals_are_single_tokens(parser):
    tree = parser.parse('package main\n\nvar s = "a\\tb"\nvar r = `raw\nline`\n')
    literals = [tok.text for tok in tree.tokens() if tok.kind in LITERAL_KINDS]

    assert literals == ['"a\\tb"', "`raw\nline`"]


def test_syntax_error_raises_parse_error(parser):
    with pytest.raises(ParseError) as exc_info:
        parser.parse("package main\n\nfunc main( {\n", path="bad.go")

    assert exc_info.value.path == "bad.go"
    assert exc_info.value.line is not None
    assert "bad.go" in str(exc_info.value)


def test_invalid_utf8_raises_parse_error(parser):
    with pytest.raises(ParseError):
        parser.parse_bytes(b"package main\nvar s = \"\xff\xfe\"\n", path="bin.go")


def test_sample_parses(parser, sample_source):
    tree = parser.parse(sample_source)

    assert tree.root.children[0].kind == "package_clause"
    assert parser.get_language() == "go"


def test_source_without_final_newline(parser):
    tree = parser.parse("package main\ntype T int")

    assert [tok.text for tok in tree.tokens()] == ["package", "main", "type", "T", "int"]


def test_grouped_declaration_without_final_newline(parser):
    tree = parser.parse("package main\nvar (\n\ta = 1\n)")

    assert tree.root.children[1].kind == "var_declaration"


def test_deeply_nested_expression(parser):
    terms = 1000
    source = "package main\n\nvar s = " + " +\n\t".join(f'"x{i}"' for i in range(terms)) + "\n"

    tree = parser.parse(source)

    assert sum(1 for tok in tree.tokens() if tok.kind == "interpreted_string_literal") == terms
