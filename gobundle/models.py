"""
Core models for the gobundle engine.

Configuration and result records are pydantic models so the CLI can
validate user input and the bundle metadata can be dumped with its short
wire keys.
"""

from enum import IntEnum
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Minification
# ============================================================================


class MinifyLevel(IntEnum):
    """Aggressiveness levels. Each level includes every lower one."""

    COMMENTS = 1
    MERGE = 2
    TRUNCATE = 3


# ============================================================================
# File Models
# ============================================================================


class FileRecord(BaseModel):
    """One minified source file."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="File path relative to project root, '/' separated")
    content: str = Field(..., description="Minified file text")


# ============================================================================
# Project Metadata
# ============================================================================


class ProjectMetadata(BaseModel):
    """Project-level summary emitted as the first line of a bundle."""

    model_config = ConfigDict(populate_by_name=True)

    dependencies: List[str] = Field(default_factory=list, alias="d", description="module@version entries")
    imports: List[str] = Field(default_factory=list, alias="i", description="Distinct import paths")
    structure: Optional[Dict[str, List[str]]] = Field(
        default=None, alias="s", description="Package name -> files declaring it"
    )

    def to_wire(self) -> Dict[str, object]:
        """Short-key mapping with empty fields left out."""
        wire: Dict[str, object] = {}
        if self.dependencies:
            wire["d"] = list(self.dependencies)
        if self.imports:
            wire["i"] = list(self.imports)
        if self.structure:
            wire["s"] = {pkg: list(self.structure[pkg]) for pkg in sorted(self.structure)}
        return wire


# ============================================================================
# Run Configuration / Results
# ============================================================================


class BundleConfig(BaseModel):
    """Options for one bundling run."""

    project_dir: Path = Field(default=Path("."), description="Root directory of the Go project")
    output_file: Optional[Path] = Field(default=None, description="Where the bundle is written")
    exclude_dirs: List[str] = Field(default_factory=lambda: ["vendor", "testdata"])
    include_meta: bool = Field(default=False, description="Emit the package structure map")
    minify_level: MinifyLevel = Field(default=MinifyLevel.COMMENTS)
    strict: bool = Field(default=True, description="Abort the run on the first parse error")


class BundleResult(BaseModel):
    """Everything produced by a bundling run."""

    metadata: ProjectMetadata
    files: List[FileRecord] = Field(default_factory=list)
    failed: List[str] = Field(default_factory=list, description="Files skipped because they did not parse")
    text: str = ""
    source_bytes: int = Field(default=0, description="Size of the original sources")
