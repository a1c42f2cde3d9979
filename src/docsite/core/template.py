"""Shared HTML page template.

Every page is rendered through one jinja2 template. The template receives the
page, its body HTML, the navigation sidebar HTML and the relative path to the
site root for linking assets.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateNotFound
from markupsafe import Markup

if TYPE_CHECKING:
    from docsite.core.page import Page

TEMPLATE_FILENAME = "template.html"


class PageTemplate:
    """Renders full HTML documents from a template directory."""

    def __init__(self, template_dir: Path, template_name: str = TEMPLATE_FILENAME) -> None:
        """Load the page template.

        Args:
            template_dir: Directory containing the template file
            template_name: Template file name

        Raises:
            FileNotFoundError: If the template file doesn't exist
        """
        self._template_dir = template_dir
        self._env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=True,
            undefined=StrictUndefined,
        )
        try:
            self._template = self._env.get_template(template_name)
        except TemplateNotFound as e:
            raise FileNotFoundError(f"Page template not found: {template_dir / template_name}") from e

    @property
    def template_dir(self) -> Path:
        """Directory the template was loaded from."""
        return self._template_dir

    def render(self, page: Page, nav_html: Markup, root_rel_path: str) -> str:
        """Render a full HTML document for page.

        Args:
            page: Page being rendered (its body must be populated)
            nav_html: Navigation sidebar fragment
            root_rel_path: Relative path from the page's directory to the site root

        Returns:
            HTML document
        """
        return self._template.render(
            page=page,
            title=page.heading or page.title,
            body=Markup(page.body_html),
            nav=nav_html,
            package=page.package,
            root=root_rel_path,
            assets=f"{root_rel_path}/_assets",
        )
