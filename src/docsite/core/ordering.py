"""Ordering rules for folders and pages in the navigation sidebar."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from docsite.core.folder import Folder
    from docsite.core.page import Page

OVERVIEW_TITLE = "Overview"

DEFAULT_TOP_LEVEL_ORDER: tuple[str, ...] = (
    "introduction",
    "getting-started",
    "guides",
    "packages",
)


def sort_folders(folders: list[Folder]) -> None:
    """Sort folders in place by name (case-sensitive)."""
    folders.sort(key=lambda folder: folder.name)


def reorder_top_level_folders(
    folders: list[Folder],
    top_level_order: list[str] | tuple[str, ...],
) -> list[Folder]:
    """Order root-level folders by the pinned top-level ordering.

    Folders named in top_level_order come first, in that order. The remaining
    folders follow in lexicographic order.

    Args:
        folders: Child folders of the root folder
        top_level_order: Preferred ordering of top-level folder names

    Returns:
        New list with the folders reordered
    """
    by_name = {folder.name: folder for folder in folders}
    pinned = [by_name[name] for name in dict.fromkeys(top_level_order) if name in by_name]
    pinned_names = {folder.name for folder in pinned}
    rest = sorted(
        (folder for folder in folders if folder.name not in pinned_names),
        key=lambda folder: folder.name,
    )
    return pinned + rest


def _page_sort_key(page: Page) -> tuple[bool, str]:
    # False sorts before True, so "Overview" pages lead
    return (page.title != OVERVIEW_TITLE, page.title)


def sort_pages(pages: list[Page]) -> None:
    """Sort pages in place: "Overview" first, then by title.

    The sort is stable, so pages with identical titles keep their relative order.
    """
    pages.sort(key=_page_sort_key)
