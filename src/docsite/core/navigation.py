"""Navigation sidebar rendering.

Renders the whole folder/page tree as nested lists for the sidebar of every
page. Rendering is the single sorting authority: child sequences are sorted in
place on each call, so it must not run concurrently on overlapping trees.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from markupsafe import Markup, escape

from docsite.core.ordering import reorder_top_level_folders, sort_folders, sort_pages

if TYPE_CHECKING:
    from docsite.core.folder import Folder
    from docsite.core.page import Page

SEPARATOR_PATTERN = re.compile(r"[-_]+")


def humanize(name: str) -> str:
    """Convert dashes and underscores to spaces and capitalize each word.

    Example: "getting-started" -> "Getting Started"
    """
    words = SEPARATOR_PATTERN.sub(" ", name).split(" ")
    return " ".join(word[:1].upper() + word[1:] for word in words)


def render_nav_html(root_folder: Folder, active_page: Page) -> Markup:
    """Render the navigation sidebar for active_page.

    Args:
        root_folder: Root of the navigation tree
        active_page: Page being rendered; highlighted and used for relative links

    Returns:
        Nested <ul> fragment safe to embed in a template
    """
    return Markup("".join(_render_folder(root_folder, active_page)))


def _render_folder(folder: Folder, active_page: Page) -> list[str]:
    if folder.is_root:
        folder.child_folders[:] = reorder_top_level_folders(
            folder.child_folders, folder.top_level_order
        )
    else:
        sort_folders(folder.child_folders)
    sort_pages(folder.child_pages)

    if not folder.child_folders:
        return []

    # Package folders collapse their internal structure by default
    parts = ["<ul class='hidden'>" if folder.is_package_folder else "<ul>"]

    for child in folder.child_folders:
        display_name = child.name if child.is_module_folder else humanize(child.name)
        parts.append(
            f"<li class='folder{_folder_css_classes(folder, child)}'>"
            f"<a href='#'>{escape(display_name)}</a>"
        )

        # Pages are emitted here, before the recursive call sorts the child
        sort_pages(child.child_pages)
        if child.child_pages:
            parts.append("<ul class='hidden'>")
            for page in child.child_pages:
                parts.append(_render_page(page, active_page))
            parts.append("</ul>")

        parts.extend(_render_folder(child, active_page))
        parts.append("</li>")

    parts.append("</ul>")
    return parts


def _folder_css_classes(parent: Folder, child: Folder) -> str:
    classes = ""
    if parent.is_root:
        classes += " top_level_folder"
    if child.is_package_folder:
        classes += " package_folder"
    if child.is_module_folder:
        classes += " module_folder"
    return classes


def _render_page(page: Page, active_page: Page) -> str:
    title = escape(humanize(page.title))
    if page is active_page:
        return f"<li class='page'><a class='active' href='#'>{title}</a></li>"
    href = escape(active_page.get_rel_path_to_page(page))
    return f"<li class='page'><a href='{href}'>{title}</a></li>"
