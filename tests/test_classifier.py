"""Tests for folder role classification."""

import pytest
from docsite.core.classifier import (
    classify_folder_path,
    is_module_folder_path,
    is_package_folder_path,
)


class TestIsPackageFolderPath:
    """Tests for is_package_folder_path()."""

    @pytest.mark.parametrize(
        "path",
        ["packages/module-vpc", "/packages/module-vpc", "./packages/module-vpc", "packages/x/"],
    )
    def test__package_folder__returns_true(self, path: str) -> None:
        assert is_package_folder_path(path)

    @pytest.mark.parametrize(
        "path",
        [
            "packages",
            "packages/module-vpc/modules",
            "guides/module-vpc",
            "docs/packages/module-vpc",
            "",
        ],
    )
    def test__other_paths__returns_false(self, path: str) -> None:
        assert not is_package_folder_path(path)


class TestIsModuleFolderPath:
    """Tests for is_module_folder_path()."""

    def test__module_folder__returns_true(self) -> None:
        assert is_module_folder_path("packages/module-vpc/modules/vpc-app")

    @pytest.mark.parametrize(
        "path",
        [
            "packages/module-vpc/modules",
            "packages/module-vpc/modules/vpc-app/examples",
            "packages/module-vpc/examples/vpc-app",
            "modules/vpc-app",
        ],
    )
    def test__other_paths__returns_false(self, path: str) -> None:
        assert not is_module_folder_path(path)


class TestClassifyFolderPath:
    """Tests for classify_folder_path()."""

    def test__flags_are_independent(self) -> None:
        package_role = classify_folder_path("packages/module-vpc")
        module_role = classify_folder_path("packages/module-vpc/modules/vpc-app")
        plain_role = classify_folder_path("guides")

        assert package_role.is_package_folder and not package_role.is_module_folder
        assert module_role.is_module_folder and not module_role.is_package_folder
        assert not plain_role.is_package_folder and not plain_role.is_module_folder
