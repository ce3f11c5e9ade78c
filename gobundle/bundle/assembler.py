"""Bundle text format: one JSON metadata line, then one section per file."""

import json
from typing import Iterable

from gobundle.models import FileRecord, ProjectMetadata

FILE_MARKER = "###FILE:{path}###"


def encode_metadata(metadata: ProjectMetadata) -> str:
    return json.dumps(metadata.to_wire(), separators=(",", ":"), ensure_ascii=False)


def assemble_bundle(metadata: ProjectMetadata, files: Iterable[FileRecord], include_structure: bool = True) -> str:
    """Serialize ``metadata`` and ``files`` (kept in the given order) into bundle text."""
    if not include_structure:
        metadata = metadata.model_copy(update={"structure": None})
    parts = [encode_metadata(metadata), "\n"]
    for record in files:
        parts.append(f"{FILE_MARKER.format(path=record.path)}\n{record.content}\n\n")
    return "".join(parts)
