"""CLI configuration: defaults, output naming and logging setup."""

import os
import re
import sys
from pathlib import Path
from typing import List

from loguru import logger

DEFAULT_EXCLUDES = "vendor,testdata"
DEFAULT_LOG_LEVEL = "WARNING"


def split_excludes(value: str) -> List[str]:
    """Comma-separated prefixes -> list, ignoring blanks."""
    return [part.strip() for part in value.split(",") if part.strip()]


def default_output_file(project_dir: Path) -> Path:
    """``<project name>_bundle.txt`` with the name reduced to ``[A-Za-z0-9_-]``."""
    name = re.sub(r"[^a-zA-Z0-9_-]", "_", Path(project_dir).resolve().name)
    return Path(f"{name}_bundle.txt")


def get_log_level(verbose: bool = False) -> str:
    env_level = os.environ.get("GOBUNDLE_LOG_LEVEL")
    if env_level:
        return env_level.upper()
    return "DEBUG" if verbose else DEFAULT_LOG_LEVEL


def configure_logging(verbose: bool = False) -> None:
    """Route loguru output to stderr at the configured level."""
    logger.remove()
    logger.add(sys.stderr, level=get_log_level(verbose), format="<level>{level: <8}</level> {message}")
