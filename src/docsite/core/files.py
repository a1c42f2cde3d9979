"""Input file classification, exclusion and copying."""

import enum
import fnmatch
import logging
import shutil
from pathlib import Path, PurePosixPath

logger = logging.getLogger(__name__)

PAGE_SUFFIXES = frozenset({".md", ".markdown"})

ASSET_SUFFIXES = frozenset(
    {
        ".css",
        ".gif",
        ".ico",
        ".jpeg",
        ".jpg",
        ".js",
        ".json",
        ".pdf",
        ".png",
        ".svg",
        ".txt",
        ".webp",
        ".woff",
        ".woff2",
        ".yaml",
        ".yml",
        ".zip",
    }
)


class FileKind(enum.Enum):
    """What the generator does with an input file."""

    PAGE = "page"
    FILE = "file"
    UNMATCHED = "unmatched"


def classify_input_path(rel_path: str) -> FileKind:
    """Classify an input file by its suffix.

    Args:
        rel_path: Posix path relative to the input root

    Returns:
        PAGE for markdown sources, FILE for assets copied as-is,
        UNMATCHED otherwise
    """
    suffix = PurePosixPath(rel_path).suffix.lower()
    if suffix in PAGE_SUFFIXES:
        return FileKind.PAGE
    if suffix in ASSET_SUFFIXES:
        return FileKind.FILE
    return FileKind.UNMATCHED


def matches_globs(rel_path: str, patterns: list[str]) -> bool:
    """Check if a relative path matches any exclude pattern.

    Patterns are matched with PurePosixPath.match (right-anchored) and with
    fnmatch against the whole path, so "**/drafts/**" excludes at any depth.
    """
    path = PurePosixPath(rel_path)
    for pattern in patterns:
        if path.match(pattern):
            return True
        if any(fnmatch.fnmatchcase(rel_path, p) for p in _expand_pattern(pattern)):
            return True
    return False


def _expand_pattern(pattern: str) -> list[str]:
    # "**/x/**" also matches "x/..." at the top level and the directory "x" itself
    expanded = [pattern]
    if pattern.startswith("**/"):
        expanded.append(pattern[3:])
    for p in list(expanded):
        if p.endswith("/**"):
            expanded.append(p[:-3])
    return expanded


def copy_file(source: Path, target: Path) -> None:
    """Copy a single file, creating parent directories."""
    target.parent.mkdir(parents=True, exist_ok=True)
    shutil.copy2(source, target)


def copy_files(source_dir: Path, target_dir: Path) -> int:
    """Copy the contents of source_dir into target_dir.

    A missing source_dir is not an error; nothing is copied.

    Returns:
        Number of files copied
    """
    if not source_dir.is_dir():
        logger.debug(f"No assets to copy from {source_dir}")
        return 0

    count = 0
    for source in sorted(source_dir.rglob("*")):
        if not source.is_file():
            continue
        copy_file(source, target_dir / source.relative_to(source_dir))
        count += 1

    logger.info(f"Copied {count} files from {source_dir} to {target_dir}")
    return count
