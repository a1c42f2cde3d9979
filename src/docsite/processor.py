"""Site generation run.

Walks the input directory, copies plain files, loads markdown pages into the
navigation tree, then renders every page and copies the theme assets.
"""

import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from docsite.assets import get_static_dir
from docsite.config import Config
from docsite.core.files import FileKind, classify_input_path, copy_file, copy_files, matches_globs
from docsite.core.folder import Folder, new_root_folder
from docsite.core.packages import load_packages
from docsite.core.page import Page
from docsite.core.renderer import MarkdownRenderer
from docsite.core.template import PageTemplate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InputFile:
    """File discovered in the input directory."""

    rel_path: str
    full_path: Path
    kind: FileKind


@dataclass
class ProcessResult:
    """Summary of a generation run."""

    root_folder: Folder
    pages_written: int
    files_copied: int


def walk_input(input_dir: Path, excludes: list[str]) -> Iterator[InputFile]:
    """Walk input_dir in sorted order, yielding files that are not excluded.

    Excluded directories are not descended into.

    Raises:
        FileNotFoundError: If input_dir doesn't exist
    """
    if not input_dir.is_dir():
        raise FileNotFoundError(f"Input directory not found: {input_dir}")

    for dirpath, dirnames, filenames in os.walk(input_dir):
        current = Path(dirpath)

        kept_dirs = []
        for dirname in sorted(dirnames):
            rel_dir = (current / dirname).relative_to(input_dir).as_posix()
            if matches_globs(rel_dir, excludes):
                logger.info(f"Skipping path {rel_dir}")
                continue
            kept_dirs.append(dirname)
        dirnames[:] = kept_dirs

        for filename in sorted(filenames):
            full_path = current / filename
            rel_path = full_path.relative_to(input_dir).as_posix()
            if matches_globs(rel_path, excludes):
                logger.info(f"Skipping path {rel_path}")
                continue
            yield InputFile(rel_path, full_path, classify_input_path(rel_path))


def build_nav_tree(
    input_dir: Path,
    excludes: list[str],
    top_level_order: list[str] | None = None,
    output_dir: Path | None = None,
) -> tuple[Folder, int]:
    """Load markdown pages from input_dir into a new navigation tree.

    When output_dir is given, plain files are copied there as they are found.

    Returns:
        Root folder and the number of plain files copied
    """
    root_folder = new_root_folder(top_level_order)
    copied = 0

    for input_file in walk_input(input_dir, excludes):
        if input_file.kind is FileKind.UNMATCHED:
            logger.warning(f"File {input_file.rel_path} did not match any known file type, skipping")
            continue

        if input_file.kind is FileKind.FILE:
            if output_dir is not None:
                copy_file(input_file.full_path, output_dir / input_file.rel_path)
                copied += 1
            continue

        page = Page.from_source(input_file.rel_path, input_file.full_path)
        page.add_to_nav_tree(root_folder)

    logger.debug(f"Navigation tree:\n{root_folder.format_tree()}")
    return root_folder, copied


def load_template(config: Config) -> PageTemplate:
    """Load the page template from the configured theme or the bundled one."""
    return PageTemplate(config.theme.html_dir or get_static_dir())


def copy_theme_assets(html_dir: Path, output_dir: Path) -> int:
    """Copy theme css, images and favicons into the output directory."""
    copied = copy_files(html_dir / "css", output_dir / "_assets" / "css")
    copied += copy_files(html_dir / "img", output_dir / "_assets" / "img")
    copied += copy_files(html_dir / "favicons", output_dir)
    return copied


def process_files(config: Config) -> ProcessResult:
    """Run a full site generation.

    The first error aborts the run; nothing is rolled back.

    Args:
        config: Application configuration

    Returns:
        ProcessResult summary
    """
    docs = config.docs
    packages = load_packages(docs.manifest)
    template = load_template(config)
    renderer = MarkdownRenderer()

    excludes = list(docs.excludes)
    output_dir = docs.output_dir.resolve()
    input_dir = docs.input_dir.resolve()
    if output_dir == input_dir:
        raise ValueError(f"Output directory must differ from input directory: {input_dir}")
    if output_dir.is_relative_to(input_dir):
        excludes.append(output_dir.relative_to(input_dir).as_posix())

    root_folder, files_copied = build_nav_tree(
        input_dir,
        excludes,
        config.navigation.top_level_order,
        output_dir=output_dir,
    )

    root_folder.populate_children_page_body_properties(packages, renderer)
    root_folder.write_children_html(root_folder, output_dir, template)
    pages_written = sum(1 for _ in root_folder.iter_pages())

    files_copied += copy_theme_assets(template.template_dir, output_dir)

    logger.info(f"Wrote {pages_written} pages and copied {files_copied} files to {output_dir}")
    return ProcessResult(
        root_folder=root_folder,
        pages_written=pages_written,
        files_copied=files_copied,
    )
