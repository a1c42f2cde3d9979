"""Navigation tree, page rendering and input classification."""

from docsite.core.folder import Folder, InvalidFolderPathError, new_folder, new_root_folder
from docsite.core.navigation import render_nav_html
from docsite.core.page import Page

__all__ = [
    "Folder",
    "InvalidFolderPathError",
    "Page",
    "new_folder",
    "new_root_folder",
    "render_nav_html",
]
