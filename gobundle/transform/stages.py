"""Tree rewriting stages.

Every stage is a pure function ``SyntaxTree -> SyntaxTree``. Nodes are
immutable, so a stage builds new nodes and never edits its input.
"""

from collections import defaultdict
from dataclasses import replace
from typing import Dict, Iterator, List, Set, Tuple

from loguru import logger

from gobundle.parser.syntax import IDENTIFIER_KINDS, NEWLINE, Node, SyntaxTree, Trivia, TriviaKind, token

IMPORT_DECLARATION = "import_declaration"
VAR_DECLARATION = "var_declaration"
PACKAGE_CLAUSE = "package_clause"

IDENTIFIER_LIMIT = 3


# ============================================================================
# Stage A: comments
# ============================================================================


def _strip_trivia(leading: Tuple[Trivia, ...]) -> Tuple[Trivia, ...]:
    kept: List[Trivia] = []
    for trivia in leading:
        if trivia.kind is TriviaKind.COMMENT:
            if not trivia.spans_lines:
                continue
            # A block comment containing a line break separates statements like one.
            trivia = NEWLINE
        if kept and kept[-1].kind is TriviaKind.NEWLINE:
            continue
        kept.append(trivia)
    return tuple(kept)


def strip_comments(tree: SyntaxTree) -> SyntaxTree:
    """Drop comment trivia everywhere, keeping the line breaks they implied."""

    def strip(tok: Node) -> Node:
        if any(t.kind is TriviaKind.COMMENT for t in tok.leading):
            return replace(tok, leading=_strip_trivia(tok.leading))
        return tok

    return tree.replace_root(tree.root.map_tokens(strip), _strip_trivia(tree.trailing))


# ============================================================================
# Stage B: var declaration merging
# ============================================================================


def var_specs(declaration: Node) -> Iterator[Node]:
    """Specs of a var declaration, whether written singly or as a group."""
    for child in declaration.children:
        if child.kind == "var_spec":
            yield child
        elif child.kind == "var_spec_list":
            yield from child.find_children("var_spec")


def _combine_vars(run: List[Node]) -> Node:
    keyword = run[0].children[0]
    items: List[Node] = [keyword, token("(")]
    for declaration in run:
        for spec in var_specs(declaration):
            items.extend((spec, token(";")))
    items.append(token(")"))
    return Node(kind=VAR_DECLARATION, children=tuple(items))


def _merge_vars(node: Node, children: List[Node]) -> Node:
    merged: List[Node] = []
    run: List[Node] = []
    separators: List[Node] = []

    def flush() -> None:
        if len(run) > 1:
            merged.append(_combine_vars(run))
        else:
            merged.extend(run)
        merged.extend(separators)
        run.clear()
        separators.clear()

    for child in children:
        if child.kind == VAR_DECLARATION:
            # Semicolons between two members of a run disappear with the run.
            separators.clear()
            run.append(child)
        elif run and child.kind == ";":
            separators.append(child)
        else:
            flush()
            merged.append(child)
    flush()
    return node.with_children(merged)


def merge_var_declarations(tree: SyntaxTree) -> SyntaxTree:
    """Coalesce consecutive ``var`` declarations in each scope into one group."""
    return tree.replace_root(tree.root.rebuild(node_fn=_merge_vars))


# ============================================================================
# Stage C: import consolidation
# ============================================================================


def import_specs(declaration: Node) -> Iterator[Node]:
    for child in declaration.children:
        if child.kind == "import_spec":
            yield child
        elif child.kind == "import_spec_list":
            yield from child.find_children("import_spec")


def _import_declaration(specs: List[Node]) -> Node:
    keyword = token("import", leading=(NEWLINE,))
    if len(specs) == 1:
        return Node(kind=IMPORT_DECLARATION, children=(keyword, specs[0].with_leading(())))
    items: List[Node] = [keyword, token("(")]
    for spec in specs:
        items.extend((spec.with_leading((NEWLINE,)), token(";")))
    items.append(token(")", leading=(NEWLINE,)))
    return Node(kind=IMPORT_DECLARATION, children=tuple(items))


def consolidate_imports(tree: SyntaxTree) -> SyntaxTree:
    """Replace all import declarations with one, placed right after the package clause."""
    specs: List[Node] = []
    seen: Set[Tuple[str, ...]] = set()
    kept: List[Node] = []
    after_import = False

    for child in tree.root.children:
        if child.kind == IMPORT_DECLARATION:
            for spec in import_specs(child):
                key = tuple(tok.text for tok in spec.tokens())
                if key not in seen:
                    seen.add(key)
                    specs.append(spec)
            after_import = True
            continue
        if after_import and child.kind == ";":
            after_import = False
            continue
        after_import = False
        kept.append(child)

    if not specs:
        return tree

    position = 0
    for index, child in enumerate(kept):
        if child.kind == PACKAGE_CLAUSE:
            position = index + 1
            if position < len(kept) and kept[position].kind == ";":
                position += 1
            break

    kept[position:position] = [_import_declaration(specs), token(";")]
    return tree.replace_root(tree.root.with_children(kept))


# ============================================================================
# Stage D: identifier truncation
# ============================================================================


def truncate_identifiers(tree: SyntaxTree, limit: int = IDENTIFIER_LIMIT) -> SyntaxTree:
    """Cut every identifier token to ``limit`` characters, each occurrence on its own.

    No symbol table is consulted: two names sharing a prefix end up bound to
    the same short name. Such collisions are logged, not prevented.
    """
    sources: Dict[str, Set[str]] = defaultdict(set)
    short_names: Set[str] = set()

    def truncate(tok: Node) -> Node:
        if tok.kind not in IDENTIFIER_KINDS:
            return tok
        if len(tok.text) <= limit:
            short_names.add(tok.text)
            return tok
        short = tok.text[:limit]
        sources[short].add(tok.text)
        return replace(tok, text=short)

    root = tree.root.map_tokens(truncate)

    clashes = sorted(short for short, names in sources.items() if len(names) > 1 or short in short_names)
    if clashes:
        examples = ", ".join(f"{short!r}<-{sorted(sources[short])}" for short in clashes[:3])
        logger.warning(f"{tree.path}: {len(clashes)} truncated identifier collision(s): {examples}")

    return tree.replace_root(root)
