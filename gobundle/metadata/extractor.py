"""Project metadata accumulated from the headers of minified files."""

from typing import Dict, List, Optional, Sequence

from loguru import logger

from gobundle.errors import MetadataParseError
from gobundle.models import ProjectMetadata
from .header import FileHeader, HeaderParser


class MetadataExtractor:
    """Collects package structure and import paths across a project.

    Files are fed in traversal order. A file whose header cannot be read back
    is left out of the metadata only; it still belongs in the bundle.
    """

    def __init__(self, header_parser: Optional[HeaderParser] = None):
        self.header_parser = header_parser or HeaderParser()
        self._imports: Dict[str, None] = {}
        self.structure: Dict[str, List[str]] = {}
        self.excluded: List[str] = []

    def read_header(self, text: str) -> FileHeader:
        return self.header_parser.parse(text)

    def add(self, path: str, text: str) -> Optional[FileHeader]:
        try:
            header = self.read_header(text)
        except MetadataParseError as e:
            logger.warning(f"{path}: left out of metadata: {e}")
            self.excluded.append(path)
            return None

        self.structure.setdefault(header.package, []).append(path)
        for import_path in header.imports:
            self._imports.setdefault(import_path, None)
        return header

    @property
    def imports(self) -> List[str]:
        return list(self._imports)

    def metadata(self, dependencies: Sequence[str] = (), include_structure: bool = False) -> ProjectMetadata:
        return ProjectMetadata(
            dependencies=list(dependencies),
            imports=self.imports,
            structure={pkg: list(paths) for pkg, paths in self.structure.items()} if include_structure else None,
        )
