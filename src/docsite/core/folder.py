"""Navigation tree folders.

A Folder mirrors one directory of the output site. Folders own their child
folders and pages; the parent reference is a plain back-pointer set when a
node is attached.
"""

from __future__ import annotations

import logging
import posixpath
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from docsite.core.classifier import classify_folder_path
from docsite.core.ordering import DEFAULT_TOP_LEVEL_ORDER

if TYPE_CHECKING:
    from docsite.core.packages import PackageDescriptor
    from docsite.core.page import Page
    from docsite.core.renderer import MarkdownRenderer
    from docsite.core.template import PageTemplate

logger = logging.getLogger(__name__)

ROOT_FOLDER_NAME = "ROOT-FOLDER"


class InvalidFolderPathError(ValueError):
    """Raised when a folder path contains an empty segment."""


@dataclass(eq=False)
class Folder:
    """Folder node in the navigation tree."""

    output_path: str
    name: str
    child_pages: list[Page] = field(default_factory=list, repr=False)
    child_folders: list[Folder] = field(default_factory=list, repr=False)
    parent_folder: Folder | None = field(default=None, repr=False)
    is_root: bool = False
    is_package_folder: bool = False
    is_module_folder: bool = False
    top_level_order: list[str] = field(default_factory=list, repr=False)

    def add_folder(self, child_folder: Folder) -> None:
        """Attach child_folder to this folder."""
        self.child_folders.append(child_folder)
        child_folder.parent_folder = self

    def add_page(self, child_page: Page) -> None:
        """Attach child_page to this folder."""
        self.child_pages.append(child_page)
        child_page.parent_folder = self

    def has_child_folder(self, folder_name: str) -> bool:
        """Return True if a direct child folder has the given name."""
        return self.get_child_folder(folder_name) is not None

    def get_child_folder(self, folder_name: str) -> Folder | None:
        """Return the direct child folder with the given name, or None."""
        for folder in self.child_folders:
            if folder.name == folder_name:
                return folder
        return None

    def get_folder(self, folder_name: str) -> Folder | None:
        """Find a folder by name in this folder or any descendant.

        The search is depth-first and returns the first match.
        """
        if self.name == folder_name:
            return self
        for folder in self.child_folders:
            found = folder.get_folder(folder_name)
            if found is not None:
                return found
        return None

    def contains_folder_recursive(self, folder_name: str) -> bool:
        """Return True if this folder or any descendant has the given name."""
        return self.get_folder(folder_name) is not None

    def create_folder_if_not_exist(self, folder_path: str) -> Folder:
        """Create each folder along folder_path that does not exist yet.

        Accepts paths of the form x/y/z, ./x/y/z or /x/y/z. Existing folders are
        reused, so calling this twice with the same path returns the same node.

        Args:
            folder_path: Slash-delimited path relative to this folder

        Returns:
            The folder at the end of the path

        Raises:
            InvalidFolderPathError: If the path has an empty segment
        """
        folder_names = split_folder_path(folder_path)

        current = self
        for folder_name in folder_names:
            child = current.get_child_folder(folder_name)
            if child is None:
                child = new_folder(posixpath.join(current.output_path, folder_name), folder_name)
                current.add_folder(child)
            current = child
        return current

    def iter_pages(self) -> Iterator[Page]:
        """Yield every page in this subtree, own pages before child folders."""
        yield from self.child_pages
        for folder in self.child_folders:
            yield from folder.iter_pages()

    def populate_children_page_body_properties(
        self,
        packages: list[PackageDescriptor],
        renderer: MarkdownRenderer,
    ) -> None:
        """Populate the body of every page in this subtree.

        Stops at the first failure. The original exception propagates with a
        note naming the page.
        """
        for page in self.child_pages:
            try:
                page.populate_body_properties(packages, renderer)
            except Exception as e:
                e.add_note(f"while populating page {page.input_path}")
                raise

        for folder in self.child_folders:
            folder.populate_children_page_body_properties(packages, renderer)

    def write_children_html(
        self,
        root_folder: Folder,
        root_output_path: Path,
        template: PageTemplate,
    ) -> None:
        """Write every page in this subtree as a full HTML document.

        Pages of this folder are written before child folders. Stops at the
        first failure. The original exception propagates with a note naming
        the page.
        """
        for page in self.child_pages:
            try:
                page.write_full_page_html(root_folder, root_output_path, template)
            except Exception as e:
                e.add_note(f"while writing page {page.output_path}")
                raise

        for folder in self.child_folders:
            folder.write_children_html(root_folder, root_output_path, template)

    def format_tree(self) -> str:
        """Return an indented text dump of this subtree."""
        lines: list[str] = []
        self._format_tree_aux(0, lines)
        return "\n".join(lines)

    def _format_tree_aux(self, depth: int, lines: list[str]) -> None:
        lines.append(f"{'- ' * depth}FOLDER: {self.name}")
        for folder in self.child_folders:
            folder._format_tree_aux(depth + 1, lines)
        for page in self.child_pages:
            lines.append(f"{'- ' * (depth + 1)}{page.title}")


def split_folder_path(folder_path: str) -> list[str]:
    """Split a folder path into segments.

    Strips one leading "/" and then one leading "./" before splitting.

    Raises:
        InvalidFolderPathError: If any segment is empty
    """
    path = folder_path
    if path.startswith("/"):
        path = path[1:]
    if path.startswith("./"):
        path = path[2:]

    folder_names = path.split("/")
    if any(name == "" for name in folder_names):
        raise InvalidFolderPathError(f"Folder path has an empty segment: {folder_path!r}")
    return folder_names


def new_root_folder(top_level_order: list[str] | None = None) -> Folder:
    """Create the root folder of a navigation tree.

    Args:
        top_level_order: Pinned ordering of top-level folders in the sidebar
    """
    order = list(DEFAULT_TOP_LEVEL_ORDER) if top_level_order is None else list(top_level_order)
    return Folder(output_path="", name=ROOT_FOLDER_NAME, is_root=True, top_level_order=order)


def new_folder(output_path: str, name: str) -> Folder:
    """Create a non-root folder with role flags derived from its output path."""
    role = classify_folder_path(output_path)
    if role.is_package_folder or role.is_module_folder:
        logger.debug(
            f"Folder {output_path}: package={role.is_package_folder} module={role.is_module_folder}"
        )
    return Folder(
        output_path=output_path,
        name=name,
        is_package_folder=role.is_package_folder,
        is_module_folder=role.is_module_folder,
    )
