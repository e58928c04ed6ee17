"""Plain-text help rendered from the option registry.

Rendering only reads declarations (names, types, descriptions and
defaults), never filled values, so the output is the same before and
after the command line has been parsed.
"""

from __future__ import annotations

from typing import Any

from sitecrawl.options import Option, OptionRegistry, OptionType

USAGE = "Usage: sitecrawl --url=https://mydomain.tld/ [options]"
FOOTER = "For more detailed descriptions of parameters, see README.md."
CREDITS = "Created by the sitecrawl contributors."

NAME_COLUMN_WIDTH = 32

_PLACEHOLDERS: dict[OptionType, str] = {
    OptionType.BOOL: "",
    OptionType.INT: "=<int>",
    OptionType.STRING: "=<val>",
    OptionType.FLOAT: "=<val>",
    OptionType.REGEX: "=<regex>",
    OptionType.EMAIL: "=<email>",
    OptionType.URL: "=<url>",
    OptionType.FILE: "=<file>",
    OptionType.DIR: "=<dir>",
}


def _format_default(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return ", ".join(str(item) for item in value)
    return str(value)


def format_option(option: Option) -> str:
    """Render one help line for ``option``."""
    name_and_value = option.name + _PLACEHOLDERS[option.type]
    line = (
        name_and_value.ljust(NAME_COLUMN_WIDTH)
        + " "
        + option.description.rstrip(". ")
        + "."
    )
    # Empty and zero defaults are left out, like unset ones.
    if option.default_value:
        line += (
            f" Default value is `{_format_default(option.default_value)}`."
        )
    return line


def render_help(registry: OptionRegistry, version: str) -> str:
    """Render the full help text for ``registry``.

    Groups appear in registry order, each with an underlined heading and
    one line per option.
    """
    lines = ["", USAGE, f"Version: {version}", ""]

    for group in registry.groups:
        lines.append(f"{group.name}:")
        lines.append("-" * (len(group.name) + 1))
        for option in group.options:
            lines.append(format_option(option))
        lines.append("")

    lines.extend(["", FOOTER, "", CREDITS])
    return "\n".join(lines) + "\n"
