"""Bootstrap sequence: from raw arguments to active plugins.

The Initiator runs the startup stages in a fixed order::

    DISCOVERED -> ASSEMBLED -> FILLED -> VALIDATED -> CORE_IMPORTED
               -> ACTIVATED

Construction covers discovery and assembly, ``validate_and_init()``
covers the rest. Every transition is one-way; the first error leaves
the initiator in FAILED and is propagated to the caller.

Example::

    initiator = Initiator(sys.argv)
    initiator.validate_and_init()
    for exporter in initiator.exporters:
        ...
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum
from pathlib import Path
from typing import TypeVar

from sitecrawl import __version__
from sitecrawl.analysis.analyzer import Analyzer
from sitecrawl.common.exceptions import UnknownOptionError
from sitecrawl.core_options import CoreOptions, core_option_groups
from sitecrawl.discovery import PluginCatalog, discover_plugins
from sitecrawl.export.exporter import Exporter
from sitecrawl.help import render_help
from sitecrawl.options import OptionRegistry, split_argument
from sitecrawl.plugin import CrawlerPlugin

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=CrawlerPlugin)


class BootstrapStage(Enum):
    """Progress of the bootstrap sequence."""

    DISCOVERED = "discovered"
    ASSEMBLED = "assembled"
    FILLED = "filled"
    VALIDATED = "validated"
    CORE_IMPORTED = "core_imported"
    ACTIVATED = "activated"
    FAILED = "failed"


class Initiator:
    """Builds the option registry and activates plugins.

    Args:
        argv: Full argument vector; ``argv[0]`` is the invocation token.
        plugin_root: Directory with ``export`` and ``analysis`` plugin
            folders. Defaults to the built-in plugins.
        plugin_package: Dotted package name of ``plugin_root``.
        catalog: Already discovered plugins; skips filesystem discovery.

    Raises:
        SetupError: If the plugin folders are missing.
    """

    def __init__(
        self,
        argv: Sequence[str],
        plugin_root: Path | None = None,
        plugin_package: str = "sitecrawl",
        catalog: PluginCatalog | None = None,
    ) -> None:
        self._arguments = list(argv[1:])
        self._known_options: set[str] = set()
        self._core_options: CoreOptions | None = None
        self._exporters: list[Exporter] = []
        self._analyzers: list[Analyzer] = []

        if catalog is None:
            catalog = discover_plugins(plugin_root, plugin_package)
        self._catalog = catalog
        self._stage = BootstrapStage.DISCOVERED

        self._options = self._setup_options()
        self._stage = BootstrapStage.ASSEMBLED

    @property
    def stage(self) -> BootstrapStage:
        return self._stage

    @property
    def options(self) -> OptionRegistry:
        return self._options

    @property
    def catalog(self) -> PluginCatalog:
        return self._catalog

    @property
    def known_options(self) -> frozenset[str]:
        return frozenset(self._known_options)

    @property
    def core_options(self) -> CoreOptions:
        self._require(BootstrapStage.CORE_IMPORTED)
        assert self._core_options is not None
        return self._core_options

    @property
    def exporters(self) -> list[Exporter]:
        self._require(BootstrapStage.ACTIVATED)
        return list(self._exporters)

    @property
    def analyzers(self) -> list[Analyzer]:
        self._require(BootstrapStage.ACTIVATED)
        return list(self._analyzers)

    def validate_and_init(self) -> None:
        """Parse arguments, validate them and activate plugins.

        May be called once.

        Raises:
            DuplicateOptionError: If two options share a name.
            TypeCoercionError: If a value does not match its option type.
            UnknownOptionError: If unrecognized arguments were given.
            RuntimeError: If called again.
        """
        if self._stage is not BootstrapStage.ASSEMBLED:
            raise RuntimeError(
                f"Bootstrap cannot run from stage {self._stage.value}"
            )

        try:
            # set values to all configured options from CLI arguments
            self._fill_all_options_values()
            self._stage = BootstrapStage.FILLED

            self._check_unknown_options()
            self._options.freeze()
            self._stage = BootstrapStage.VALIDATED

            self._core_options = CoreOptions.from_registry(self._options)
            self._stage = BootstrapStage.CORE_IMPORTED

            self._exporters = self._activate(self._catalog.exporters)
            self._analyzers = self._activate(self._catalog.analyzers)
            self._stage = BootstrapStage.ACTIVATED
        except Exception:
            self._stage = BootstrapStage.FAILED
            raise

        logger.info(
            f"Activated {len(self._exporters)} exporter(s) and "
            f"{len(self._analyzers)} analyzer(s)"
        )

    def render_help(self) -> str:
        """Help text for every declared option (declared defaults)."""
        return render_help(self._options, __version__)

    def _setup_options(self) -> OptionRegistry:
        registry = OptionRegistry(core_option_groups())

        for exporter_class in self._catalog.exporters.values():
            for group in exporter_class.get_option_groups():
                registry.add_group(group)

        for analyzer_class in self._catalog.analyzers.values():
            for group in analyzer_class.get_option_groups():
                registry.add_group(group)

        logger.debug(
            f"Assembled {len(registry.groups)} option groups from "
            f"{len(self._catalog)} plugins"
        )
        return registry

    def _fill_all_options_values(self) -> None:
        self._known_options = self._options.fill(self._arguments)

    def _check_unknown_options(self) -> None:
        unknown: list[str] = []
        for argument in self._arguments:
            name, _value = split_argument(argument)
            if name in self._known_options:
                continue
            if argument not in unknown:
                unknown.append(argument)

        if unknown:
            raise UnknownOptionError(unknown)

    def _activate(self, plugin_classes: dict[str, type[P]]) -> list[P]:
        active: list[P] = []
        for identifier, plugin_class in plugin_classes.items():
            plugin = plugin_class()
            plugin.set_config(self._options)
            if plugin.should_be_activated():
                logger.debug(f"Plugin {identifier} activated")
                active.append(plugin)
            else:
                logger.debug(f"Plugin {identifier} not activated")
        return active

    def _require(self, stage: BootstrapStage) -> None:
        order = list(BootstrapStage)
        if self._stage is BootstrapStage.FAILED or order.index(
            self._stage
        ) < order.index(stage):
            raise RuntimeError(
                f"Bootstrap has not reached stage {stage.value} "
                f"(current: {self._stage.value})"
            )
