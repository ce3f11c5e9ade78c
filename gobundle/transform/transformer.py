"""Level-driven composition of the rewriting stages."""

from typing import Callable, List, Tuple

from loguru import logger

from gobundle.models import MinifyLevel
from gobundle.parser.syntax import SyntaxTree
from .stages import consolidate_imports, merge_var_declarations, strip_comments, truncate_identifiers

Stage = Callable[[SyntaxTree], SyntaxTree]

# (minimum level, name, stage) in application order.
STAGES: Tuple[Tuple[MinifyLevel, str, Stage], ...] = (
    (MinifyLevel.COMMENTS, "strip_comments", strip_comments),
    (MinifyLevel.MERGE, "merge_var_declarations", merge_var_declarations),
    (MinifyLevel.MERGE, "consolidate_imports", consolidate_imports),
    (MinifyLevel.TRUNCATE, "truncate_identifiers", truncate_identifiers),
)


class TreeTransformer:
    """Apply every stage enabled at ``level`` to a tree, returning a new tree."""

    def __init__(self, level: int = MinifyLevel.COMMENTS):
        self.level = MinifyLevel(level)

    def stages(self) -> List[Tuple[str, Stage]]:
        return [(name, stage) for minimum, name, stage in STAGES if self.level >= minimum]

    def transform(self, tree: SyntaxTree) -> SyntaxTree:
        for name, stage in self.stages():
            logger.trace(f"{tree.path}: {name}")
            tree = stage(tree)
        return tree
