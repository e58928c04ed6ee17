"""Base classes for exporters.

Exporters turn crawl results into files, e-mails or other outputs.
Discovery only picks up concrete subclasses defined in
``export/*_exporter.py`` modules; ``Exporter`` and ``BaseExporter``
are markers and never activated.
"""

from __future__ import annotations

from abc import ABC

from sitecrawl.plugin import CrawlerPlugin


class Exporter(CrawlerPlugin, ABC):
    """Marker for the exporter category."""

    category = "export"


class BaseExporter(Exporter, ABC):
    """Convenience base for concrete exporters."""

    def any_option_set(self, *names: str) -> bool:
        """Whether at least one of ``names`` has a non-empty value."""
        return any(self.option_value(name) for name in names)
