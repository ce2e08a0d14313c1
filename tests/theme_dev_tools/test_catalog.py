"""Tests for theme discovery and catalog helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from theme_dev_tools.catalog import (
    ProjectThemeRegistry,
    StaticThemeRegistry,
    ThemeDescriptor,
    list_themes,
    other_themes,
)
from theme_dev_tools.errors import CatalogUnavailable

from tests.theme_dev_tools.helpers import write


def test_project_registry_discovers_base_plugin_and_app_themes(tmp_path: Path) -> None:
    write(tmp_path / "vendor/shopware/storefront/Resources/theme.json", "{}")
    write(tmp_path / "custom/plugins/Zeta/src/Resources/theme.json", "{}")
    write(tmp_path / "custom/plugins/Alpha/src/Resources/theme.json", "{}")
    write(tmp_path / "custom/plugins/NoTheme/src/Resources/config/services.xml", "")
    write(tmp_path / "custom/apps/MyApp/Resources/theme.json", "{}")

    themes = ProjectThemeRegistry(tmp_path).list_themes()

    assert [t.technical_name for t in themes] == ["Storefront", "Alpha", "Zeta", "MyApp"]
    assert themes[1].base_path == (tmp_path / "custom/plugins/Alpha/src/Resources").resolve()
    assert themes[3].base_path == (tmp_path / "custom/apps/MyApp/Resources").resolve()


def test_project_registry_missing_root_is_unavailable(tmp_path: Path) -> None:
    with pytest.raises(CatalogUnavailable):
        ProjectThemeRegistry(tmp_path / "missing").list_themes()


def test_list_themes_rejects_empty_catalog(tmp_path: Path) -> None:
    with pytest.raises(CatalogUnavailable, match="No themes found"):
        list_themes(ProjectThemeRegistry(tmp_path))


def test_list_themes_enforces_minimum() -> None:
    registry = StaticThemeRegistry([ThemeDescriptor("Only", Path("/themes/Only"))])
    with pytest.raises(CatalogUnavailable, match="At least 2 themes"):
        list_themes(registry, minimum=2)


def test_list_themes_wraps_os_errors() -> None:
    class BrokenRegistry:
        def list_themes(self):
            raise PermissionError("denied")

    with pytest.raises(CatalogUnavailable, match="denied"):
        list_themes(BrokenRegistry())


@pytest.mark.parametrize("count", [2, 3, 5])
def test_other_themes_excludes_only_the_source(count: int) -> None:
    themes = [ThemeDescriptor(f"T{i}", Path(f"/themes/T{i}")) for i in range(count)]
    for source in themes:
        targets = other_themes(themes, source)
        assert source not in targets
        assert sorted(t.technical_name for t in targets) == sorted(
            t.technical_name for t in themes if t is not source
        )
        assert len(targets) == count - 1
