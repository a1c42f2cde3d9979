"""Markdown to HTML conversion for page bodies.

Uses mistune for conversion.
"""

import logging
import re

import mistune

logger = logging.getLogger(__name__)

H1_PATTERN = re.compile(r"^#\s+(.+?)\s*#*\s*$", re.MULTILINE)

# Links between markdown sources point at .md files; the site serves .html
MD_LINK_PATTERN = re.compile(r'href="(?![a-z][a-z0-9+.-]*:)([^"#?]+)\.md([#?][^"]*)?"')


class MarkdownRenderer:
    """Convert Markdown to HTML page bodies."""

    def __init__(self) -> None:
        """Initialize the mistune HTML renderer."""
        self.markdown = mistune.create_markdown(
            escape=False,
            plugins=["strikethrough", "table", "url"],
        )

    def convert(self, markdown_text: str) -> str:
        """Convert Markdown text to HTML.

        Relative links to other markdown files are rewritten to their .html
        output.

        Args:
            markdown_text: Markdown source text

        Returns:
            HTML fragment
        """
        logger.debug(f"Converting {len(markdown_text)} characters of markdown")
        html = self.markdown(markdown_text)
        html = MD_LINK_PATTERN.sub(_rewrite_md_link, html)
        logger.debug(f"Converted to {len(html)} characters of HTML")
        return html


def extract_title(markdown_text: str) -> str | None:
    """Return the text of the first H1 heading, or None."""
    match = H1_PATTERN.search(markdown_text)
    if match is None:
        return None
    return match.group(1)


def _rewrite_md_link(match: re.Match[str]) -> str:
    suffix = match.group(2) or ""
    return f'href="{match.group(1)}.html{suffix}"'
