"""Analyzer checking HTML pages against common best practices."""

from __future__ import annotations

from sitecrawl.analysis.analyzer import BaseAnalyzer
from sitecrawl.options import Option, OptionGroup, OptionType


class BestPracticeAnalyzer(BaseAnalyzer):
    """Title/description uniqueness, heading structure, inline assets."""

    @classmethod
    def get_option_groups(cls) -> list[OptionGroup]:
        return [
            OptionGroup(
                "Best practice analyzer",
                [
                    Option(
                        "--max-inline-css-length",
                        None,
                        OptionType.INT,
                        default_value=262144,
                        description=(
                            "Maximum inline CSS length in bytes "
                            "before a warning is reported"
                        ),
                    ),
                    Option(
                        "--max-inline-js-length",
                        None,
                        OptionType.INT,
                        default_value=262144,
                        description=(
                            "Maximum inline JavaScript length in bytes "
                            "before a warning is reported"
                        ),
                    ),
                    Option(
                        "--max-heading-level",
                        None,
                        OptionType.INT,
                        default_value=3,
                        description="Deepest heading level checked",
                    ),
                ],
            )
        ]
