"""go.mod reader returning ``module@version`` requirement strings."""

import re
from pathlib import Path
from typing import List, Optional

from gobundle.errors import ManifestError

MANIFEST_NAME = "go.mod"

_COMMENT = re.compile(r"//.*$")
_REQUIREMENT = re.compile(r'^(?P<path>"[^"]+"|\S+)\s+(?P<version>\S+)$')


def _requirement(line: str, filename: str, lineno: int) -> str:
    match = _REQUIREMENT.match(line)
    if not match:
        raise ManifestError(f"{filename}:{lineno}: malformed require entry {line!r}")
    return f"{match.group('path').strip(chr(34))}@{match.group('version')}"


def parse_manifest(content: str, filename: str = MANIFEST_NAME) -> List[str]:
    """Return every ``require`` entry in file order, single-line and block forms."""
    dependencies: List[str] = []
    block: Optional[str] = None
    saw_module = False

    for lineno, raw in enumerate(content.splitlines(), start=1):
        line = _COMMENT.sub("", raw).strip()
        if not line:
            continue

        if block is not None:
            if line == ")":
                block = None
            elif block == "require":
                dependencies.append(_requirement(line, filename, lineno))
            continue

        verb, _, rest = line.partition(" ")
        rest = rest.strip()
        if rest == "(":
            block = verb
        elif verb == "module":
            saw_module = True
        elif verb == "require":
            dependencies.append(_requirement(rest, filename, lineno))

    if block is not None:
        raise ManifestError(f"{filename}: unterminated {block} block")
    if not saw_module:
        raise ManifestError(f"{filename}: missing module directive")
    return dependencies


def read_manifest(project_dir: Path) -> List[str]:
    path = Path(project_dir) / MANIFEST_NAME
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestError(f"cannot read {path}: {e}")
    return parse_manifest(content, str(path))
