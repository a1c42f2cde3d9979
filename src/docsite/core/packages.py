"""Package manifest loading.

The manifest is a JSON file describing the documentation packages. It is
either a list of package objects or an object with a "packages" list.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


class ManifestError(ValueError):
    """Raised when the package manifest cannot be parsed."""


@dataclass(frozen=True)
class PackageDescriptor:
    """Metadata for one documentation package."""

    name: str
    title: str | None = None
    description: str | None = None
    url: str | None = None

    @property
    def display_title(self) -> str:
        """Title if set, otherwise the package name."""
        return self.title or self.name


def load_packages(manifest_path: Path | None) -> list[PackageDescriptor]:
    """Load package descriptors from a manifest file.

    Args:
        manifest_path: Path to JSON manifest, or None for no packages

    Returns:
        List of PackageDescriptor in manifest order

    Raises:
        FileNotFoundError: If manifest_path doesn't exist
        ManifestError: If the manifest is malformed
    """
    if manifest_path is None:
        return []

    if not manifest_path.exists():
        raise FileNotFoundError(f"Package manifest not found: {manifest_path}")

    try:
        data = json.loads(manifest_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ManifestError(f"Invalid JSON in {manifest_path}: {e}") from e

    packages = parse_packages(data, source=str(manifest_path))
    logger.info(f"Loaded {len(packages)} packages from {manifest_path}")
    return packages


def parse_packages(data: object, source: str = "manifest") -> list[PackageDescriptor]:
    """Parse decoded manifest JSON into package descriptors.

    Unknown keys are ignored.
    """
    if isinstance(data, dict):
        data = data.get("packages", [])

    if not isinstance(data, list):
        raise ManifestError(f"{source}: packages must be a list")

    packages: list[PackageDescriptor] = []
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            raise ManifestError(f"{source}: packages[{i}] must be an object")

        name = item.get("name")
        if not isinstance(name, str) or not name:
            raise ManifestError(f"{source}: packages[{i}].name must be a non-empty string")

        optional: dict[str, str | None] = {}
        for key in ("title", "description", "url"):
            value = item.get(key)
            if value is not None and not isinstance(value, str):
                raise ManifestError(f"{source}: packages[{i}].{key} must be a string")
            optional[key] = value

        packages.append(PackageDescriptor(name=name, **optional))

    return packages


def find_package(packages: list[PackageDescriptor], name: str) -> PackageDescriptor | None:
    """Return the package with the given name, or None."""
    for package in packages:
        if package.name == name:
            return package
    return None
