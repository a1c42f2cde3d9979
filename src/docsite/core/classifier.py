"""Folder role classification.

Package and module folders are recognised purely from their position in the
output path. The two predicates are independent.
"""

import re
from dataclasses import dataclass

# packages/<package-name>
PACKAGE_FOLDER_PATTERN = re.compile(r"^packages/[^/]+$")

# packages/<package-name>/modules/<module-name>
MODULE_FOLDER_PATTERN = re.compile(r"^packages/[^/]+/modules/[^/]+$")


@dataclass(frozen=True)
class FolderRole:
    """Role flags derived from a folder's output path."""

    is_package_folder: bool
    is_module_folder: bool


def _standardize(path: str) -> str:
    if path.startswith("/"):
        path = path[1:]
    if path.startswith("./"):
        path = path[2:]
    return path.rstrip("/")


def is_package_folder_path(path: str) -> bool:
    """Return True if path is a folder directly inside the top-level packages folder."""
    return PACKAGE_FOLDER_PATTERN.match(_standardize(path)) is not None


def is_module_folder_path(path: str) -> bool:
    """Return True if path is a folder inside a package's modules folder."""
    return MODULE_FOLDER_PATTERN.match(_standardize(path)) is not None


def classify_folder_path(path: str) -> FolderRole:
    """Classify an output path.

    Args:
        path: Folder output path relative to the output root (e.g., "packages/module-vpc")

    Returns:
        FolderRole with both flags evaluated independently
    """
    return FolderRole(
        is_package_folder=is_package_folder_path(path),
        is_module_folder=is_module_folder_path(path),
    )
