"""Analyzer listing the slowest responding URLs."""

from __future__ import annotations

from sitecrawl.analysis.analyzer import BaseAnalyzer
from sitecrawl.options import Option, OptionGroup, OptionType


class SlowestAnalyzer(BaseAnalyzer):
    @classmethod
    def get_option_groups(cls) -> list[OptionGroup]:
        return [
            OptionGroup(
                "Slowest URL analyzer",
                [
                    Option(
                        "--slowest-top-limit",
                        None,
                        OptionType.INT,
                        default_value=20,
                        description="Number of URLs in TOP slowest list",
                    ),
                    Option(
                        "--slowest-min-time",
                        None,
                        OptionType.FLOAT,
                        default_value=0.01,
                        description=(
                            "Minimum response time threshold for "
                            "slow URLs"
                        ),
                    ),
                    Option(
                        "--slowest-max-time",
                        None,
                        OptionType.FLOAT,
                        default_value=3,
                        description=(
                            "Maximum response time for an URL to be "
                            "considered very slow"
                        ),
                    ),
                ],
            )
        ]
