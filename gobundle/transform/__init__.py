from .stages import (
    IDENTIFIER_KINDS,
    consolidate_imports,
    import_specs,
    merge_var_declarations,
    strip_comments,
    truncate_identifiers,
    var_specs,
)
from .transformer import TreeTransformer

__all__ = [
    "IDENTIFIER_KINDS",
    "TreeTransformer",
    "consolidate_imports",
    "import_specs",
    "merge_var_declarations",
    "strip_comments",
    "truncate_identifiers",
    "var_specs",
]
