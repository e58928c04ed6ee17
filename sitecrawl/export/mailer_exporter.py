"""Exporter e-mailing the HTML report after the crawl."""

from __future__ import annotations

from sitecrawl.export.exporter import BaseExporter
from sitecrawl.options import Option, OptionGroup, OptionType


class MailerExporter(BaseExporter):
    @classmethod
    def get_option_groups(cls) -> list[OptionGroup]:
        return [
            OptionGroup(
                "Mailer options",
                [
                    Option(
                        "--mail-to",
                        None,
                        OptionType.EMAIL,
                        default_value=[],
                        description=(
                            "Recipients of HTML e-mail reports. "
                            "Can be specified multiple times"
                        ),
                        is_array=True,
                    ),
                    Option(
                        "--mail-from",
                        None,
                        OptionType.EMAIL,
                        default_value="crawler@localhost.localdomain",
                        description="E-mail sender address",
                    ),
                    Option(
                        "--mail-from-name",
                        None,
                        OptionType.STRING,
                        default_value="sitecrawl",
                        description="E-mail sender name",
                    ),
                    Option(
                        "--mail-subject-template",
                        None,
                        OptionType.STRING,
                        default_value="Crawler Report for %domain% (%date%)",
                        description=(
                            "E-mail subject template. You can use "
                            "dynamic variables %domain%, %date% and "
                            "%datetime%"
                        ),
                    ),
                    Option(
                        "--mail-smtp-host",
                        None,
                        OptionType.STRING,
                        default_value="localhost",
                        description="SMTP host",
                    ),
                    Option(
                        "--mail-smtp-port",
                        None,
                        OptionType.INT,
                        default_value=25,
                        description="SMTP port",
                    ),
                    Option(
                        "--mail-smtp-user",
                        None,
                        OptionType.STRING,
                        description="SMTP user for authentication",
                        is_nullable=True,
                    ),
                    Option(
                        "--mail-smtp-pass",
                        None,
                        OptionType.STRING,
                        description="SMTP password for authentication",
                        is_nullable=True,
                    ),
                ],
            )
        ]

    def should_be_activated(self) -> bool:
        return bool(self.option_value("--mail-to"))
