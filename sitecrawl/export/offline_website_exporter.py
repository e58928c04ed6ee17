"""Exporter storing a browsable offline copy of the website."""

from __future__ import annotations

from sitecrawl.export.exporter import BaseExporter
from sitecrawl.options import Option, OptionGroup, OptionType


class OfflineWebsiteExporter(BaseExporter):
    @classmethod
    def get_option_groups(cls) -> list[OptionGroup]:
        return [
            OptionGroup(
                "Offline exporter options",
                [
                    Option(
                        "--offline-export-dir",
                        "-oed",
                        OptionType.DIR,
                        description=(
                            "Path to directory where to save the "
                            "offline version of the website"
                        ),
                    ),
                    Option(
                        "--offline-export-store-only-url-regex",
                        None,
                        OptionType.REGEX,
                        default_value=[],
                        description=(
                            "Store only URLs matching this regex. "
                            "Can be specified multiple times"
                        ),
                        is_array=True,
                    ),
                    Option(
                        "--offline-export-no-auto-redirect-html",
                        None,
                        OptionType.BOOL,
                        default_value=False,
                        description=(
                            "Disable generating redirect HTML files "
                            "for directory URLs"
                        ),
                    ),
                ],
            )
        ]

    def should_be_activated(self) -> bool:
        return bool(self.option_value("--offline-export-dir"))
