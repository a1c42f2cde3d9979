"""Tests for package manifest loading."""

import json
from pathlib import Path

import pytest
from docsite.core.packages import (
    ManifestError,
    PackageDescriptor,
    find_package,
    load_packages,
    parse_packages,
)


class TestLoadPackages:
    """Tests for load_packages()."""

    def test__none__returns_empty(self) -> None:
        assert load_packages(None) == []

    def test__loads_manifest(self, manifest_file: Path) -> None:
        packages = load_packages(manifest_file)

        assert packages == [
            PackageDescriptor(
                name="module-vpc",
                title="VPC Package",
                description="Networking modules",
                url="https://example.com/module-vpc",
            )
        ]

    def test__missing_file__raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Package manifest not found"):
            load_packages(tmp_path / "missing.json")

    def test__invalid_json__raises(self, tmp_path: Path) -> None:
        manifest = tmp_path / "packages.json"
        manifest.write_text("{not json")

        with pytest.raises(ManifestError, match="Invalid JSON"):
            load_packages(manifest)


class TestParsePackages:
    """Tests for parse_packages()."""

    def test__accepts_top_level_list(self) -> None:
        packages = parse_packages([{"name": "a"}, {"name": "b", "extra": 1}])

        assert [p.name for p in packages] == ["a", "b"]
        assert packages[0].display_title == "a"

    def test__missing_name__raises(self) -> None:
        with pytest.raises(ManifestError, match=r"packages\[0\].name"):
            parse_packages([{"title": "No name"}])

    def test__wrong_type__raises(self) -> None:
        with pytest.raises(ManifestError, match=r"packages\[0\].url must be a string"):
            parse_packages({"packages": [{"name": "a", "url": 5}]})

    def test__packages_not_list__raises(self) -> None:
        with pytest.raises(ManifestError, match="packages must be a list"):
            parse_packages(json.loads('{"packages": "nope"}'))


class TestFindPackage:
    """Tests for find_package()."""

    def test__found_and_missing(self) -> None:
        packages = [PackageDescriptor(name="a"), PackageDescriptor(name="b")]

        assert find_package(packages, "b") is packages[1]
        assert find_package(packages, "c") is None
