"""Locate a cargo project and classify its layout from the filesystem."""

import os
from enum import Enum
from pathlib import Path

SOURCE_DIR = "src"
LIBRARY_ENTRY = "lib.rs"
BINARY_ENTRY = "main.rs"
BIN_DIR = "bin"


class ProjectTopology(Enum):
    BINARY = "binary"
    LIBRARY = "library"


def resolve_project_path(project_name: str) -> Path:
    """Join the current working directory with project_name."""
    return Path(os.getcwd()) / project_name


def source_root(project_root: Path) -> Path:
    return project_root / SOURCE_DIR


def detect_topology(src_root: Path) -> ProjectTopology:
    """Classify the project by probing for src/lib.rs.

    Not cached: every call reflects the filesystem as it is right now.
    """
    if (src_root / LIBRARY_ENTRY).exists():
        return ProjectTopology.LIBRARY
    return ProjectTopology.BINARY


def looks_like_project_root(directory: Path) -> bool:
    return (directory / SOURCE_DIR).exists()
