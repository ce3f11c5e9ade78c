"""Per-file minification pipeline and the project-level run built on it."""

from typing import Iterable, Iterator, List, Sequence, Tuple, Union

from loguru import logger

from gobundle.bundle import assemble_bundle
from gobundle.discovery import walk_sources
from gobundle.errors import ParseError
from gobundle.manifest import read_manifest
from gobundle.metadata import MetadataExtractor
from gobundle.models import BundleConfig, BundleResult, FileRecord, MinifyLevel
from gobundle.parser import TreeSitterParser
from gobundle.printer import Printer, TextCompactor
from gobundle.transform import TreeTransformer

Source = Union[str, bytes]


class Minifier:
    """Parser -> TreeTransformer -> Printer -> TextCompactor for one file at a time."""

    def __init__(self, level: int = MinifyLevel.COMMENTS):
        self.parser = TreeSitterParser()
        self.transformer = TreeTransformer(level)
        self.printer = Printer()
        self.compactor = TextCompactor()

    @property
    def level(self) -> MinifyLevel:
        return self.transformer.level

    def minify(self, source: Source, path: str = "<input>") -> str:
        if isinstance(source, bytes):
            tree = self.parser.parse_bytes(source, path)
        else:
            tree = self.parser.parse(source, path)
        tree = self.transformer.transform(tree)
        return self.compactor.compact(self.printer.print(tree))


def minify_source(source: Source, level: int = MinifyLevel.COMMENTS, path: str = "<input>") -> str:
    """Minify a single Go file's text."""
    return Minifier(level).minify(source, path)


def build_bundle(
    sources: Iterable[Tuple[str, Source]],
    dependencies: Sequence[str] = (),
    level: int = MinifyLevel.COMMENTS,
    include_meta: bool = False,
    strict: bool = True,
) -> BundleResult:
    """Minify every ``(relative path, source)`` pair in order and assemble the bundle.

    With ``strict`` the first ``ParseError`` propagates; otherwise the file
    is skipped and reported in ``BundleResult.failed``.
    """
    minifier = Minifier(level)
    extractor = MetadataExtractor()
    files: List[FileRecord] = []
    failed: List[str] = []
    source_bytes = 0

    for rel_path, source in sources:
        size = len(source) if isinstance(source, bytes) else len(source.encode("utf-8"))
        try:
            content = minifier.minify(source, rel_path)
        except ParseError as e:
            if strict:
                raise
            logger.warning(f"Skipping {rel_path}: {e}")
            failed.append(rel_path)
            continue

        source_bytes += size
        logger.debug(f"{rel_path}: {size} -> {len(content.encode('utf-8'))} bytes")
        files.append(FileRecord(path=rel_path, content=content))
        extractor.add(rel_path, content)

    metadata = extractor.metadata(dependencies, include_structure=include_meta)
    text = assemble_bundle(metadata, files)
    logger.info(f"Bundled {len(files)} file(s) at level {int(minifier.level)}, {len(failed)} skipped")
    return BundleResult(metadata=metadata, files=files, failed=failed, text=text, source_bytes=source_bytes)


def read_sources(config: BundleConfig) -> Iterator[Tuple[str, bytes]]:
    for rel_path, path in walk_sources(config.project_dir, config.exclude_dirs):
        yield rel_path, path.read_bytes()


def bundle_project(config: BundleConfig) -> BundleResult:
    """Bundle the Go project at ``config.project_dir``. Does not write any output."""
    dependencies = read_manifest(config.project_dir)
    return build_bundle(
        read_sources(config),
        dependencies=dependencies,
        level=config.minify_level,
        include_meta=config.include_meta,
        strict=config.strict,
    )
