"""Exporter generating XML and TXT sitemaps of the crawled URLs."""

from __future__ import annotations

from sitecrawl.export.exporter import BaseExporter
from sitecrawl.options import Option, OptionGroup, OptionType


class SitemapExporter(BaseExporter):
    @classmethod
    def get_option_groups(cls) -> list[OptionGroup]:
        return [
            OptionGroup(
                "Sitemap options",
                [
                    Option(
                        "--sitemap-xml-file",
                        None,
                        OptionType.FILE,
                        description=(
                            "File name where the XML sitemap will be saved"
                        ),
                    ),
                    Option(
                        "--sitemap-txt-file",
                        None,
                        OptionType.FILE,
                        description=(
                            "File name where the TXT sitemap will be saved"
                        ),
                    ),
                    Option(
                        "--sitemap-base-priority",
                        None,
                        OptionType.FLOAT,
                        default_value=0.5,
                        description="Base priority for XML sitemap",
                    ),
                    Option(
                        "--sitemap-priority-increase",
                        None,
                        OptionType.FLOAT,
                        default_value=0.1,
                        description=(
                            "Priority increase per URL path level "
                            "above the base priority"
                        ),
                    ),
                ],
            )
        ]

    def should_be_activated(self) -> bool:
        return self.any_option_set("--sitemap-xml-file", "--sitemap-txt-file")
