"""Analyzer listing the fastest responding URLs."""

from __future__ import annotations

from sitecrawl.analysis.analyzer import BaseAnalyzer
from sitecrawl.options import Option, OptionGroup, OptionType


class FastestAnalyzer(BaseAnalyzer):
    @classmethod
    def get_option_groups(cls) -> list[OptionGroup]:
        return [
            OptionGroup(
                "Fastest URL analyzer",
                [
                    Option(
                        "--fastest-top-limit",
                        None,
                        OptionType.INT,
                        default_value=20,
                        description="Number of URLs in TOP fastest list",
                    ),
                    Option(
                        "--fastest-max-time",
                        None,
                        OptionType.FLOAT,
                        default_value=1,
                        description=(
                            "Maximum response time for an URL to be "
                            "considered fast"
                        ),
                    ),
                ],
            )
        ]
