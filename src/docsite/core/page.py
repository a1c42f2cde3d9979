"""Pages of the generated site.

A Page is one markdown source rendered to one HTML document. Pages live in
the navigation tree under the folder matching their output directory.
"""

from __future__ import annotations

import logging
import posixpath
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from docsite.core.navigation import render_nav_html
from docsite.core.ordering import OVERVIEW_TITLE
from docsite.core.packages import PackageDescriptor, find_package
from docsite.core.renderer import MarkdownRenderer, extract_title

if TYPE_CHECKING:
    from docsite.core.folder import Folder
    from docsite.core.template import PageTemplate

logger = logging.getLogger(__name__)

# Source file stems that become the folder's "Overview" page
OVERVIEW_STEMS = frozenset({"readme", "index", "overview"})


class DuplicatePageError(ValueError):
    """Raised when two sources would be written to the same output path."""


@dataclass(eq=False)
class Page:
    """Document page in the navigation tree."""

    title: str
    input_path: Path
    output_path: str
    parent_folder: Folder | None = field(default=None, repr=False)
    body_html: str = field(default="", repr=False)
    heading: str | None = None
    package: PackageDescriptor | None = field(default=None, repr=False)

    @classmethod
    def from_source(cls, rel_input_path: str, full_input_path: Path) -> Page:
        """Create a page for a markdown source file.

        Args:
            rel_input_path: Posix path of the source relative to the input root
            full_input_path: Absolute path of the source file

        Returns:
            Page with title and output path derived from the source path
        """
        rel = posixpath.normpath(rel_input_path.removeprefix("./"))
        stem, _ = posixpath.splitext(posixpath.basename(rel))
        title = OVERVIEW_TITLE if stem.lower() in OVERVIEW_STEMS else stem
        if stem.lower() == "readme":
            output_path = posixpath.join(posixpath.dirname(rel), "index.html")
        else:
            output_path = posixpath.splitext(rel)[0] + ".html"
        return cls(title=title, input_path=full_input_path, output_path=output_path)

    @property
    def folder_path(self) -> str:
        """Output directory of this page relative to the output root."""
        return posixpath.dirname(self.output_path)

    def add_to_nav_tree(self, root_folder: Folder) -> None:
        """Attach this page to the folder matching its output directory.

        Missing folders are created along the way.

        Raises:
            DuplicatePageError: If a page with the same output path is already attached
        """
        if self.folder_path:
            folder = root_folder.create_folder_if_not_exist(self.folder_path)
        else:
            folder = root_folder
        for existing in folder.child_pages:
            if existing.output_path == self.output_path:
                raise DuplicatePageError(
                    f"{self.input_path} and {existing.input_path} "
                    f"both map to {self.output_path}"
                )
        folder.add_page(self)

    def get_rel_path_to_page(self, other: Page) -> str:
        """Return the relative link from this page to other."""
        start = self.folder_path or "."
        return posixpath.relpath(other.output_path, start)

    def get_rel_path_to_root(self) -> str:
        """Return the relative path from this page's directory to the site root."""
        start = self.folder_path or "."
        return posixpath.relpath(".", start)

    def populate_body_properties(
        self,
        packages: list[PackageDescriptor],
        renderer: MarkdownRenderer,
    ) -> None:
        """Render the markdown body and resolve the owning package.

        Raises:
            FileNotFoundError: If the source file doesn't exist
        """
        markdown_text = self.input_path.read_text(encoding="utf-8")
        self.heading = extract_title(markdown_text)
        self.body_html = renderer.convert(markdown_text)
        self.package = self._find_package(packages)

    def _find_package(self, packages: list[PackageDescriptor]) -> PackageDescriptor | None:
        folder = self.parent_folder
        while folder is not None:
            if folder.is_package_folder:
                return find_package(packages, folder.name)
            folder = folder.parent_folder
        return None

    def write_full_page_html(
        self,
        root_folder: Folder,
        root_output_path: Path,
        template: PageTemplate,
    ) -> None:
        """Render this page with the navigation sidebar and write it to disk."""
        nav_html = render_nav_html(root_folder, self)
        html = template.render(self, nav_html, self.get_rel_path_to_root())

        target = root_output_path / self.output_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(html, encoding="utf-8")
        logger.debug(f"Wrote {target}")
