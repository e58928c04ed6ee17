"""Base classes for analyzers.

Analyzers inspect crawled pages. Unless a subclass adds its own
condition, an analyzer is active whenever the core
``--analyzer-filter-regex`` option is unset or matches its class name.
"""

from __future__ import annotations

import re
from abc import ABC

from sitecrawl.options import OptionGroup
from sitecrawl.plugin import CrawlerPlugin

ANALYZER_FILTER_OPTION = "--analyzer-filter-regex"


class Analyzer(CrawlerPlugin, ABC):
    """Marker for the analyzer category."""

    category = "analysis"


class BaseAnalyzer(Analyzer, ABC):
    """Convenience base for concrete analyzers."""

    @classmethod
    def get_option_groups(cls) -> list[OptionGroup]:
        return []

    def should_be_activated(self) -> bool:
        return self.passes_filter()

    def passes_filter(self) -> bool:
        """Check the class name against the analyzer filter, if any."""
        pattern = self.option_value(ANALYZER_FILTER_OPTION)
        if not pattern:
            return True
        return re.search(pattern, self.name, re.IGNORECASE) is not None
