"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
from docsite.config import Config, DocsConfig, NavigationConfig, ThemeConfig


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """Create a small documentation tree.

    docs/
    ├── README.md
    ├── guides/
    │   ├── overview.md
    │   ├── setup.md
    │   └── diagram.png
    ├── packages/
    │   └── module-vpc/
    │       ├── README.md
    │       └── modules/
    │           └── vpc-app/
    │               └── usage.md
    └── notes.xyz
    """
    docs = tmp_path / "docs"
    (docs / "guides").mkdir(parents=True)
    (docs / "packages" / "module-vpc" / "modules" / "vpc-app").mkdir(parents=True)

    (docs / "README.md").write_text("# Welcome\n\nStart here.")
    (docs / "guides" / "overview.md").write_text("# Guides\n\nSee [setup](setup.md).")
    (docs / "guides" / "setup.md").write_text("# Setup\n\nInstall things.")
    (docs / "guides" / "diagram.png").write_bytes(b"\x89PNG\r\n")
    (docs / "packages" / "module-vpc" / "README.md").write_text("# VPC\n\nNetworking.")
    (docs / "packages" / "module-vpc" / "modules" / "vpc-app" / "usage.md").write_text(
        "# Usage\n\nRun it."
    )
    (docs / "notes.xyz").write_text("unknown")
    return docs


@pytest.fixture
def manifest_file(tmp_path: Path) -> Path:
    """Write a package manifest describing module-vpc."""
    manifest = tmp_path / "packages.json"
    manifest.write_text(
        json.dumps(
            {
                "packages": [
                    {
                        "name": "module-vpc",
                        "title": "VPC Package",
                        "description": "Networking modules",
                        "url": "https://example.com/module-vpc",
                    }
                ]
            }
        )
    )
    return manifest


@pytest.fixture
def test_config(tmp_path: Path, docs_dir: Path, manifest_file: Path) -> Config:
    """Create a test configuration with tmp_path directories."""
    return Config(
        docs=DocsConfig(
            input_dir=docs_dir,
            output_dir=tmp_path / "site",
            manifest=manifest_file,
            excludes=[],
        ),
        navigation=NavigationConfig(top_level_order=["guides", "packages"]),
        theme=ThemeConfig(),
    )
