"""Contract shared by exporters and analyzers.

A plugin describes its options before it is instantiated
(``get_option_groups``), receives the filled registry once parsing is
done (``set_config``) and decides for itself whether it takes part in
the run (``should_be_activated``).

Example::

    class CsvExporter(BaseExporter):
        @classmethod
        def get_option_groups(cls) -> list[OptionGroup]:
            return [
                OptionGroup(
                    "CSV exporter",
                    [Option("--csv-file", None, OptionType.FILE)],
                )
            ]

        def should_be_activated(self) -> bool:
            return bool(self.option_value("--csv-file"))
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from sitecrawl.options import OptionGroup, OptionRegistry


class CrawlerPlugin(ABC):
    """Base class for every exporter and analyzer."""

    # Category subfolder the plugin is discovered in ("export"/"analysis").
    category: ClassVar[str] = ""

    def __init__(self) -> None:
        self._config: OptionRegistry | None = None

    @classmethod
    @abstractmethod
    def get_option_groups(cls) -> list[OptionGroup]:
        """Return the option groups this plugin needs, in display order."""

    @abstractmethod
    def should_be_activated(self) -> bool:
        """Decide from the filled options whether the plugin is active.

        Must not parse arguments or change the registry.
        """

    @property
    def name(self) -> str:
        return self.__class__.__name__

    @property
    def config(self) -> OptionRegistry:
        if self._config is None:
            raise RuntimeError(f"{self.name} has no configuration yet")
        return self._config

    def set_config(self, config: OptionRegistry) -> None:
        self._config = config

    def option_value(self, name: str, default: Any = None) -> Any:
        """Return the filled value of ``name``, or ``default`` if unknown."""
        if not self.config.has_option(name):
            return default
        return self.config.get_value(name)

    def __repr__(self) -> str:
        return f"<{self.name}>"
