"""Source file discovery."""

from pathlib import Path
from typing import Iterator, Sequence, Tuple

from loguru import logger

GO_SUFFIX = ".go"


def is_excluded(rel_path: str, exclude_dirs: Sequence[str]) -> bool:
    """Prefix match of a '/'-separated relative path against excluded entries."""
    return any(prefix and rel_path.startswith(prefix) for prefix in exclude_dirs)


def walk_sources(root: Path, exclude_dirs: Sequence[str] = ("vendor", "testdata")) -> Iterator[Tuple[str, Path]]:
    """Yield ``(relative path, absolute path)`` for Go files in lexical walk order.

    Entries are visited sorted by name at each level, directories descended
    into where they sort, and excluded directories are not entered at all.
    """
    root = Path(root)

    def walk(directory: Path) -> Iterator[Tuple[str, Path]]:
        for entry in sorted(directory.iterdir(), key=lambda p: p.name):
            rel_path = entry.relative_to(root).as_posix()
            if is_excluded(rel_path, exclude_dirs):
                logger.debug(f"Skipping excluded path {rel_path}")
                continue
            if entry.is_dir():
                yield from walk(entry)
            elif entry.is_file() and entry.name.endswith(GO_SUFFIX):
                yield rel_path, entry

    yield from walk(root)
