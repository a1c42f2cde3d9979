"""Theme discovery for the bundled HTML template and static assets.

Locates the default theme bundled into the docsite package.
"""

from importlib.resources import files
from pathlib import Path


def get_static_dir() -> Path:
    """Return path to the bundled theme.

    Returns:
        Path to the static directory containing template.html, css/, img/
        and favicons/.

    Raises:
        FileNotFoundError: If the theme is not bundled.
    """
    static = files("docsite").joinpath("static")
    if not static.is_dir():
        msg = "Bundled theme not found. Reinstall docsite with its package data."
        raise FileNotFoundError(msg)
    return Path(str(static))
