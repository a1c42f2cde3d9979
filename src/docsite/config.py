"""Configuration management for Docsite.

Supports TOML configuration format with auto-discovery.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from docsite.core.ordering import DEFAULT_TOP_LEVEL_ORDER

CONFIG_FILENAME = "docsite.toml"

DEFAULT_EXCLUDES = ["**/.git/**", "**/.DS_Store"]


@dataclass
class DocsConfig:
    """Input/output configuration."""

    input_dir: Path = field(default_factory=lambda: Path("docs"))
    output_dir: Path = field(default_factory=lambda: Path("site"))
    manifest: Path | None = None
    excludes: list[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDES))


@dataclass
class NavigationConfig:
    """Navigation sidebar configuration."""

    top_level_order: list[str] = field(default_factory=lambda: list(DEFAULT_TOP_LEVEL_ORDER))


@dataclass
class ThemeConfig:
    """Theme configuration.

    html_dir holds template.html plus optional css/, img/ and favicons/.
    None means the bundled theme.
    """

    html_dir: Path | None = None


@dataclass
class Config:
    """Application configuration."""

    docs: DocsConfig
    navigation: NavigationConfig
    theme: ThemeConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for docsite.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents."""
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> Config:
        return cls(
            docs=DocsConfig(),
            navigation=NavigationConfig(),
            theme=ThemeConfig(),
        )

    @classmethod
    def _load_from_file(cls, path: Path) -> Config:
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            data = tomllib.load(f)

        config_dir = path.parent

        return cls(
            docs=cls._parse_docs(data.get("docs"), config_dir),
            navigation=cls._parse_navigation(data.get("navigation")),
            theme=cls._parse_theme(data.get("theme"), config_dir),
            config_path=path,
        )

    @classmethod
    def _parse_docs(cls, data: object, config_dir: Path) -> DocsConfig:
        """Parse docs configuration section.

        Args:
            data: Raw docs section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            DocsConfig instance
        """
        if data is None:
            return DocsConfig(
                input_dir=config_dir / "docs",
                output_dir=config_dir / "site",
            )

        if not isinstance(data, dict):
            raise ValueError("docs section must be a dictionary")

        input_dir = data.get("input_dir", "docs")
        if not isinstance(input_dir, str):
            raise ValueError("docs.input_dir must be a string")

        output_dir = data.get("output_dir", "site")
        if not isinstance(output_dir, str):
            raise ValueError("docs.output_dir must be a string")

        manifest = data.get("manifest")
        if manifest is not None and not isinstance(manifest, str):
            raise ValueError("docs.manifest must be a string")

        excludes_raw = data.get("excludes", DEFAULT_EXCLUDES)
        if not isinstance(excludes_raw, list):
            raise ValueError("docs.excludes must be a list")
        excludes: list[str] = []
        for item in excludes_raw:
            if not isinstance(item, str):
                raise ValueError("docs.excludes items must be strings")
            excludes.append(item)

        return DocsConfig(
            input_dir=config_dir / input_dir,
            output_dir=config_dir / output_dir,
            manifest=config_dir / manifest if manifest is not None else None,
            excludes=excludes,
        )

    @classmethod
    def _parse_navigation(cls, data: object) -> NavigationConfig:
        """Parse navigation configuration section."""
        if data is None:
            return NavigationConfig()

        if not isinstance(data, dict):
            raise ValueError("navigation section must be a dictionary")

        order_raw = data.get("top_level_order", list(DEFAULT_TOP_LEVEL_ORDER))
        if not isinstance(order_raw, list):
            raise ValueError("navigation.top_level_order must be a list")
        top_level_order: list[str] = []
        for item in order_raw:
            if not isinstance(item, str):
                raise ValueError("navigation.top_level_order items must be strings")
            top_level_order.append(item)

        return NavigationConfig(top_level_order=top_level_order)

    @classmethod
    def _parse_theme(cls, data: object, config_dir: Path) -> ThemeConfig:
        """Parse theme configuration section."""
        if data is None:
            return ThemeConfig()

        if not isinstance(data, dict):
            raise ValueError("theme section must be a dictionary")

        html_dir = data.get("html_dir")
        if html_dir is not None and not isinstance(html_dir, str):
            raise ValueError("theme.html_dir must be a string")

        return ThemeConfig(html_dir=config_dir / html_dir if html_dir is not None else None)

    def with_overrides(
        self,
        *,
        input_dir: Path | None = None,
        output_dir: Path | None = None,
        manifest: Path | None = None,
        excludes: list[str] | None = None,
        html_dir: Path | None = None,
    ) -> Config:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified. Extra excludes are appended to the configured
        ones.

        Returns:
            New Config instance with overrides applied
        """
        docs = replace(
            self.docs,
            input_dir=input_dir if input_dir is not None else self.docs.input_dir,
            output_dir=output_dir if output_dir is not None else self.docs.output_dir,
            manifest=manifest if manifest is not None else self.docs.manifest,
            excludes=[*self.docs.excludes, *(excludes or [])],
        )

        theme = self.theme
        if html_dir is not None:
            theme = replace(self.theme, html_dir=html_dir)

        return replace(self, docs=docs, theme=theme)
