"""Plugin discovery for the exporter and analyzer categories.

This module provides functionality for:
- Checking that the plugin root contains the ``export`` and
  ``analysis`` subfolders
- Importing ``export/*_exporter.py`` and ``analysis/*_analyzer.py``
- Collecting the concrete Exporter/Analyzer subclasses they define into
  a PluginCatalog, a factory map from identifier to plugin class

Ordering is by module file name, then class name, so help output and
activation order are the same on every run.
"""

from __future__ import annotations

import importlib
import inspect
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path

from sitecrawl.analysis.analyzer import Analyzer, BaseAnalyzer
from sitecrawl.common.exceptions import SetupError
from sitecrawl.export.exporter import BaseExporter, Exporter
from sitecrawl.plugin import CrawlerPlugin

logger = logging.getLogger(__name__)

EXPORT_CATEGORY = "export"
ANALYSIS_CATEGORY = "analysis"

_CATEGORIES: dict[str, tuple[str, type[CrawlerPlugin]]] = {
    EXPORT_CATEGORY: ("*_exporter.py", Exporter),
    ANALYSIS_CATEGORY: ("*_analyzer.py", Analyzer),
}

_BASE_MARKERS = {Exporter, BaseExporter, Analyzer, BaseAnalyzer}


@dataclass
class PluginCatalog:
    """Discovered plugin classes, by category, in activation order."""

    exporters: dict[str, type[Exporter]] = field(default_factory=dict)
    analyzers: dict[str, type[Analyzer]] = field(default_factory=dict)

    def register(
        self, category: str, plugin_class: type[CrawlerPlugin]
    ) -> None:
        """Add a plugin class under its class name.

        Raises:
            SetupError: If the category is unknown, the class does not
                belong to it, or the identifier is already taken.
        """
        if category not in _CATEGORIES:
            raise SetupError(f"Unknown plugin category '{category}'")
        _pattern, base = _CATEGORIES[category]
        if not issubclass(plugin_class, base):
            raise SetupError(
                f"{plugin_class.__name__} does not subclass "
                f"{base.__name__}",
                {"category": category},
            )

        target: dict[str, type] = (
            self.exporters if category == EXPORT_CATEGORY else self.analyzers
        )
        identifier = plugin_class.__name__
        if identifier in target:
            raise SetupError(
                f"Plugin '{identifier}' is registered twice",
                {
                    "category": category,
                    "first": target[identifier].__module__,
                    "second": plugin_class.__module__,
                },
            )
        target[identifier] = plugin_class

    def __len__(self) -> int:
        return len(self.exporters) + len(self.analyzers)


def default_plugin_root() -> Path:
    """Directory of the installed sitecrawl package."""
    return Path(__file__).resolve().parent


def check_plugin_root(root: Path) -> None:
    """Verify that ``root`` holds both plugin category folders.

    Raises:
        SetupError: If ``root`` or one of its category folders is missing.
    """
    missing = [
        category
        for category in _CATEGORIES
        if not (root / category).is_dir()
    ]
    if not root.is_dir() or missing:
        raise SetupError(
            f"Crawler class directory {root} does not exist or does not "
            f"contain folders export and analysis.",
            {"missing": ", ".join(missing) or str(root)},
        )


def _plugin_classes(
    module_path: str, base: type[CrawlerPlugin]
) -> list[type[CrawlerPlugin]]:
    module = importlib.import_module(module_path)

    found = []
    for name in sorted(dir(module)):
        obj = getattr(module, name)
        if not isinstance(obj, type) or not issubclass(obj, base):
            continue
        if obj in _BASE_MARKERS or inspect.isabstract(obj):
            continue
        # Skip classes merely imported into the module
        if obj.__module__ != module.__name__:
            continue
        found.append(obj)
    return found


def discover_plugins(
    root: Path | None = None, package: str = "sitecrawl"
) -> PluginCatalog:
    """Discover exporters and analyzers below ``root``.

    Args:
        root: Directory containing the ``export`` and ``analysis``
            subpackages. Defaults to the sitecrawl package itself.
        package: Dotted package name that ``root`` is importable as.
            The parent of ``root`` is added to ``sys.path`` if absent.

    Returns:
        PluginCatalog with exporters and analyzers in stable order.

    Raises:
        SetupError: If the plugin folders are missing.
    """
    root = (root or default_plugin_root()).resolve()
    check_plugin_root(root)

    parent = str(root.parent)
    if parent not in sys.path:
        sys.path.insert(0, parent)

    catalog = PluginCatalog()
    for category, (pattern, base) in _CATEGORIES.items():
        for plugin_file in sorted((root / category).glob(pattern)):
            module_path = f"{package}.{category}.{plugin_file.stem}"
            for plugin_class in _plugin_classes(module_path, base):
                catalog.register(category, plugin_class)
                logger.debug(
                    f"Discovered {category} plugin: "
                    f"{module_path}:{plugin_class.__name__}"
                )

    return catalog
