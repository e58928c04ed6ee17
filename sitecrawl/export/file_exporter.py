"""Exporter writing the crawl report to HTML, JSON or text files."""

from __future__ import annotations

from sitecrawl.export.exporter import BaseExporter
from sitecrawl.options import Option, OptionGroup, OptionType


class FileExporter(BaseExporter):
    """Saves the report in every format that has a target file."""

    @classmethod
    def get_option_groups(cls) -> list[OptionGroup]:
        return [
            OptionGroup(
                "File export settings",
                [
                    Option(
                        "--output-html-report",
                        None,
                        OptionType.FILE,
                        description="Save HTML report into that file",
                    ),
                    Option(
                        "--output-json-file",
                        None,
                        OptionType.FILE,
                        description="Save report as JSON",
                    ),
                    Option(
                        "--output-text-file",
                        None,
                        OptionType.FILE,
                        description="Save output as TXT",
                    ),
                    Option(
                        "--add-timestamp-to-output-file",
                        None,
                        OptionType.BOOL,
                        default_value=False,
                        description=(
                            "Append timestamp to output filename "
                            "(HTML, JSON and TXT)"
                        ),
                    ),
                    Option(
                        "--add-host-to-output-file",
                        None,
                        OptionType.BOOL,
                        default_value=False,
                        description=(
                            "Append initial URL host to output filename "
                            "(HTML, JSON and TXT)"
                        ),
                    ),
                ],
            )
        ]

    def should_be_activated(self) -> bool:
        return self.any_option_set(
            "--output-html-report",
            "--output-json-file",
            "--output-text-file",
        )
