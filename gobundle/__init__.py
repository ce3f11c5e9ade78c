"""gobundle engine: minify Go sources and pack a project into one text bundle."""

from .errors import GoBundleError, ManifestError, MetadataParseError, ParseError
from .models import BundleConfig, BundleResult, FileRecord, MinifyLevel, ProjectMetadata
from .pipeline import Minifier, build_bundle, bundle_project, minify_source

__version__ = "1.0.0"

__all__ = [
    "BundleConfig",
    "BundleResult",
    "FileRecord",
    "GoBundleError",
    "ManifestError",
    "MetadataParseError",
    "Minifier",
    "MinifyLevel",
    "ParseError",
    "ProjectMetadata",
    "build_bundle",
    "bundle_project",
    "minify_source",
]
