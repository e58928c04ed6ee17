"""Options owned by the crawler itself.

The core groups are always added to the registry first, so a plugin
can never take over one of these names. Once the registry is filled,
``CoreOptions.from_registry`` projects the values into a typed model
for the rest of the application.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from sitecrawl.options import (
    Option,
    OptionGroup,
    OptionRegistry,
    OptionType,
)


def core_option_groups() -> list[OptionGroup]:
    """Build fresh core option groups in help display order."""
    return [
        OptionGroup(
            "Basic settings",
            [
                Option(
                    "--url",
                    "-u",
                    OptionType.URL,
                    description=(
                        "Required. HTTP or HTTPS URL address of the website "
                        "to be crawled"
                    ),
                ),
                Option(
                    "--device",
                    None,
                    OptionType.STRING,
                    default_value="desktop",
                    description=(
                        "Device type for User-Agent selection: desktop, "
                        "tablet or mobile"
                    ),
                ),
                Option(
                    "--user-agent",
                    None,
                    OptionType.STRING,
                    description="Override User-Agent selected by --device",
                    is_nullable=True,
                ),
                Option(
                    "--timeout",
                    "-t",
                    OptionType.INT,
                    default_value=5,
                    description="Request timeout (in sec)",
                ),
                Option(
                    "--max-depth",
                    None,
                    OptionType.INT,
                    default_value=0,
                    description=(
                        "Maximum crawling depth (for pages, not assets). "
                        "0 means unlimited"
                    ),
                ),
                Option(
                    "--single-page",
                    "-sp",
                    OptionType.BOOL,
                    default_value=False,
                    description=(
                        "Load only one page to which the URL is given (and "
                        "its assets), but do not follow other pages"
                    ),
                ),
                Option(
                    "--help",
                    "-h",
                    OptionType.BOOL,
                    default_value=False,
                    description="Show help and exit",
                ),
                Option(
                    "--version",
                    "-v",
                    OptionType.BOOL,
                    default_value=False,
                    description="Show crawler version and exit",
                ),
            ],
        ),
        OptionGroup(
            "Output settings",
            [
                Option(
                    "--output",
                    "-o",
                    OptionType.STRING,
                    default_value="text",
                    description="Output type `text` or `json`",
                ),
                Option(
                    "--no-color",
                    None,
                    OptionType.BOOL,
                    default_value=False,
                    description="Disable colored output",
                ),
                Option(
                    "--debug",
                    None,
                    OptionType.BOOL,
                    default_value=False,
                    description="Activate debug mode",
                ),
                Option(
                    "--debug-log-file",
                    None,
                    OptionType.FILE,
                    description="Log debug messages to this file",
                    is_nullable=True,
                ),
            ],
        ),
        OptionGroup(
            "Advanced crawler settings",
            [
                Option(
                    "--workers",
                    "-w",
                    OptionType.INT,
                    default_value=3,
                    description="Max concurrent workers (threads)",
                ),
                Option(
                    "--max-reqs-per-sec",
                    "-rps",
                    OptionType.FLOAT,
                    default_value=10,
                    description="Max requests/s for whole crawler",
                ),
                Option(
                    "--include-regex",
                    None,
                    OptionType.REGEX,
                    default_value=[],
                    description=(
                        "Include only URLs matching at least one regex. "
                        "Can be specified multiple times"
                    ),
                    is_array=True,
                ),
                Option(
                    "--ignore-regex",
                    None,
                    OptionType.REGEX,
                    default_value=[],
                    description=(
                        "Ignore URLs matching any regex. "
                        "Can be specified multiple times"
                    ),
                    is_array=True,
                ),
                Option(
                    "--analyzer-filter-regex",
                    None,
                    OptionType.REGEX,
                    description=(
                        "Use only analyzers that match the specified regexp"
                    ),
                    is_nullable=True,
                ),
                Option(
                    "--result-storage-dir",
                    None,
                    OptionType.DIR,
                    default_value="tmp/result-storage",
                    description="Directory for storing crawled page contents",
                ),
            ],
        ),
    ]


class CoreOptions(BaseModel):
    """Typed view of the core option values.

    Attributes mirror the core options with dashes replaced by
    underscores (``--max-reqs-per-sec`` becomes ``max_reqs_per_sec``).
    """

    model_config = ConfigDict(frozen=True)

    url: str | None = None
    device: str = "desktop"
    user_agent: str | None = None
    timeout: int = 5
    max_depth: int = 0
    single_page: bool = False
    help: bool = False
    version: bool = False

    output: str = "text"
    no_color: bool = False
    debug: bool = False
    debug_log_file: str | None = None

    workers: int = 3
    max_reqs_per_sec: float = 10
    include_regex: list[str] = Field(default_factory=list)
    ignore_regex: list[str] = Field(default_factory=list)
    analyzer_filter_regex: str | None = None
    result_storage_dir: str = "tmp/result-storage"

    @classmethod
    def from_registry(cls, registry: OptionRegistry) -> CoreOptions:
        """Read the core option values out of a filled registry."""
        values = {}
        for name in cls.model_fields:
            option_name = "--" + name.replace("_", "-")
            value = registry.get_value(option_name)
            if isinstance(value, list):
                value = list(value)
            values[name] = value
        return cls(**values)
