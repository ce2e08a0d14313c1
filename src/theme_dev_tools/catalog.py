"""Theme catalog: discovery of installed storefront themes.

A theme is any directory holding a ``theme.json`` manifest. Inside a shop
installation they live in three places:

- ``vendor/shopware/storefront/Resources`` (the bundled ``Storefront`` theme)
- ``custom/plugins/<Name>/src/Resources``
- ``custom/apps/<Name>/Resources``

The technical name of a plugin or app theme is its directory name.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Protocol, Sequence

from .errors import CatalogUnavailable

logger = logging.getLogger(__name__)

THEME_MANIFEST = "theme.json"
BASE_THEME_NAME = "Storefront"
BASE_THEME_RESOURCES = Path("vendor/shopware/storefront/Resources")
PLUGINS_DIR = Path("custom/plugins")
PLUGIN_RESOURCES = Path("src/Resources")
APPS_DIR = Path("custom/apps")
APP_RESOURCES = Path("Resources")


@dataclass(frozen=True, slots=True)
class ThemeDescriptor:
    """An installed theme: unique technical name plus absolute base path."""

    technical_name: str
    base_path: Path


class ThemeRegistry(Protocol):
    """Anything that can enumerate installed themes."""

    def list_themes(self) -> Sequence[ThemeDescriptor]: ...


class StaticThemeRegistry:
    """Registry over a fixed, in-memory list of themes."""

    def __init__(self, themes: Iterable[ThemeDescriptor]):
        self._themes = tuple(themes)

    def list_themes(self) -> Sequence[ThemeDescriptor]:
        return self._themes


class ProjectThemeRegistry:
    """Discover themes inside a shop installation on disk."""

    def __init__(self, project_root: Path):
        self.project_root = project_root

    def list_themes(self) -> Sequence[ThemeDescriptor]:
        root = self.project_root
        if not root.is_dir():
            raise CatalogUnavailable(f"Project root {root} is not a directory")

        themes: list[ThemeDescriptor] = []
        base = root / BASE_THEME_RESOURCES
        if (base / THEME_MANIFEST).is_file():
            themes.append(ThemeDescriptor(BASE_THEME_NAME, base.resolve()))

        try:
            themes.extend(self._scan(root / PLUGINS_DIR, PLUGIN_RESOURCES))
            themes.extend(self._scan(root / APPS_DIR, APP_RESOURCES))
        except OSError as exc:
            raise CatalogUnavailable(f"Cannot read themes in {root}: {exc}") from exc

        logger.debug("Discovered %d theme(s) in %s", len(themes), root)
        return themes

    @staticmethod
    def _scan(container: Path, resources: Path) -> list[ThemeDescriptor]:
        if not container.is_dir():
            return []
        found = []
        for extension_dir in sorted(container.iterdir(), key=lambda p: p.name):
            resources_dir = extension_dir / resources
            if (resources_dir / THEME_MANIFEST).is_file():
                found.append(ThemeDescriptor(extension_dir.name, resources_dir.resolve()))
        return found


def list_themes(registry: ThemeRegistry, *, minimum: int = 1) -> list[ThemeDescriptor]:
    """Query ``registry`` and require at least ``minimum`` themes.

    Raises:
        CatalogUnavailable: If the registry fails or returns too few themes.
    """
    try:
        themes = list(registry.list_themes())
    except CatalogUnavailable:
        raise
    except OSError as exc:
        raise CatalogUnavailable(f"Theme registry unavailable: {exc}") from exc

    if not themes:
        raise CatalogUnavailable("No themes found")
    if len(themes) < minimum:
        raise CatalogUnavailable(
            f"At least {minimum} themes are required, found {len(themes)}"
        )
    return themes


def other_themes(themes: Sequence[ThemeDescriptor], source: ThemeDescriptor) -> list[ThemeDescriptor]:
    """Return every theme except ``source``, keeping catalog order."""
    return [theme for theme in themes if theme.technical_name != source.technical_name]
