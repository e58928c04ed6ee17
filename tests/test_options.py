"""Tests for the option model.

This test module verifies:
- Argument matching for long and alternative names, with and without values
- Type coercion for every option type and the errors for bad input
- Defaults kept for absent options, flags true iff present
- Array options collecting repeated and comma-separated values
- Registry lookups, duplicate detection and freezing
"""

import os

import pytest

from sitecrawl.common.exceptions import (
    DuplicateOptionError,
    TypeCoercionError,
)
from sitecrawl.options import (
    Option,
    OptionGroup,
    OptionRegistry,
    OptionType,
    split_argument,
)


def filled(option: Option, *arguments: str) -> Option:
    option.set_value_from_argv(list(arguments))
    return option


class TestSplitArgument:
    def test_without_value(self):
        assert split_argument("--debug") == ("--debug", None)

    def test_with_value(self):
        assert split_argument("--url=https://a.b/?x=1") == (
            "--url",
            "https://a.b/?x=1",
        )

    def test_empty_value(self):
        assert split_argument("--user-agent=") == ("--user-agent", "")

    def test_whitespace_before_equals_is_dropped(self):
        assert split_argument("--workers =3") == ("--workers", "3")


class TestArgumentMatching:
    """Long and alternative names are matched the same way."""

    def test_long_name_with_value(self):
        option = filled(
            Option("--workers", "-w", OptionType.INT, 3), "--workers=7"
        )
        assert option.value == 7

    def test_alt_name_with_value(self):
        option = filled(Option("--workers", "-w", OptionType.INT, 3), "-w=7")
        assert option.value == 7

    def test_absent_option_keeps_default(self):
        option = filled(
            Option("--workers", "-w", OptionType.INT, 3), "--url=x"
        )
        assert option.value == 3

    def test_prefix_of_other_option_does_not_match(self):
        option = filled(
            Option("--url", None, OptionType.STRING, "default"),
            "--url-list=foo",
        )
        assert option.value == "default"

    def test_last_occurrence_wins(self):
        option = filled(
            Option("--workers", "-w", OptionType.INT, 3),
            "--workers=2",
            "-w=9",
        )
        assert option.value == 9

    def test_quotes_are_stripped(self):
        option = filled(
            Option("--user-agent", None, OptionType.STRING),
            "--user-agent='My Agent'",
        )
        assert option.value == "My Agent"

    def test_value_cannot_be_filled_twice(self):
        option = filled(Option("--workers", None, OptionType.INT, 3))
        with pytest.raises(RuntimeError):
            option.set_value_from_argv([])

    def test_value_before_fill_raises(self):
        option = Option("--workers", None, OptionType.INT, 3)
        assert not option.is_filled
        with pytest.raises(RuntimeError, match="--workers"):
            option.value


class TestBoolOptions:
    def test_present_flag_is_true(self):
        option = filled(Option("--debug", None, OptionType.BOOL), "--debug")
        assert option.value is True

    def test_absent_flag_is_false(self):
        option = filled(Option("--debug", None, OptionType.BOOL))
        assert option.value is False

    def test_flag_ignores_value_text(self):
        option = filled(
            Option("--debug", None, OptionType.BOOL), "--debug=false"
        )
        assert option.value is True

    def test_alt_flag(self):
        option = filled(Option("--help", "-h", OptionType.BOOL), "-h")
        assert option.value is True


class TestCoercion:
    """Each option type converts or rejects its textual value."""

    def test_int(self):
        assert Option("--n", None, OptionType.INT).coerce("42") == 42

    def test_int_rejects_text(self):
        with pytest.raises(TypeCoercionError) as exc_info:
            Option("--timeout", None, OptionType.INT).coerce("abc")

        assert exc_info.value.option_name == "--timeout"
        assert exc_info.value.value == "abc"
        assert exc_info.value.expected_type == "int"
        assert "timeout" in str(exc_info.value)

    def test_float(self):
        option = Option("--rps", None, OptionType.FLOAT)
        assert option.coerce("2.5") == 2.5

    def test_float_rejects_text(self):
        with pytest.raises(TypeCoercionError, match="float"):
            Option("--rps", None, OptionType.FLOAT).coerce("fast")

    def test_regex_is_kept_as_text(self):
        option = Option("--include-regex", None, OptionType.REGEX)
        assert option.coerce(r"/blog/\d+") == r"/blog/\d+"

    def test_invalid_regex(self):
        with pytest.raises(TypeCoercionError) as exc_info:
            Option("--include-regex", None, OptionType.REGEX).coerce("(")
        assert "reason" in exc_info.value.context

    def test_email(self):
        option = Option("--mail-to", None, OptionType.EMAIL)
        assert option.coerce("ops@example.com") == "ops@example.com"

    @pytest.mark.parametrize("value", ["ops", "ops@", "@example.com"])
    def test_invalid_email(self, value: str):
        with pytest.raises(TypeCoercionError, match="email"):
            Option("--mail-to", None, OptionType.EMAIL).coerce(value)

    def test_url_keeps_original_text(self):
        option = Option("--url", None, OptionType.URL)
        assert option.coerce("https://example.com") == "https://example.com"

    @pytest.mark.parametrize("value", ["example", "ftp://example.com"])
    def test_invalid_url(self, value: str):
        with pytest.raises(TypeCoercionError, match="url"):
            Option("--url", None, OptionType.URL).coerce(value)

    def test_file_expands_home(self):
        option = Option("--output-json-file", None, OptionType.FILE)
        assert option.coerce("~/report.json") == os.path.expanduser(
            "~/report.json"
        )

    def test_string_is_verbatim(self):
        option = Option("--device", None, OptionType.STRING)
        assert option.coerce(" mobile ") == " mobile "

    def test_nullable_empty_value_is_none(self):
        option = Option("--proxy", None, OptionType.STRING, is_nullable=True)
        assert option.coerce("") is None

    def test_empty_int_is_rejected(self):
        with pytest.raises(TypeCoercionError):
            filled(Option("--workers", None, OptionType.INT, 3), "--workers")


class TestArrayOptions:
    def test_repeated_and_comma_separated_values(self):
        option = filled(
            Option(
                "--mail-to", None, OptionType.EMAIL, [], is_array=True
            ),
            "--mail-to=a@example.com, b@example.com",
            "--mail-to=c@example.com",
        )
        assert option.value == [
            "a@example.com",
            "b@example.com",
            "c@example.com",
        ]

    def test_absent_array_gets_copy_of_default(self):
        default = ["^/blog"]
        option = filled(
            Option(
                "--include-regex",
                None,
                OptionType.REGEX,
                default,
                is_array=True,
            )
        )
        assert option.value == default
        assert option.value is not default

    def test_each_item_is_coerced(self):
        with pytest.raises(TypeCoercionError):
            filled(
                Option(
                    "--mail-to", None, OptionType.EMAIL, [], is_array=True
                ),
                "--mail-to=a@example.com,nope",
            )


class TestOptionRegistry:
    def _registry(self) -> OptionRegistry:
        return OptionRegistry(
            [
                OptionGroup(
                    "Basic settings",
                    [
                        Option("--url", "-u", OptionType.URL),
                        Option("--timeout", "-t", OptionType.INT, 5),
                    ],
                ),
                OptionGroup(
                    "Sitemap options",
                    [Option("--sitemap-xml-file", None, OptionType.FILE)],
                ),
            ]
        )

    def test_groups_keep_insertion_order(self):
        registry = self._registry()
        registry.add_group(OptionGroup("Mailer options"))

        assert [g.name for g in registry.groups] == [
            "Basic settings",
            "Sitemap options",
            "Mailer options",
        ]

    def test_lookup_by_alt_name(self):
        registry = self._registry()
        assert registry.get_option("-t").name == "--timeout"
        assert registry.has_option("--sitemap-xml-file")
        assert not registry.has_option("--depth")

    def test_unknown_lookup_raises_key_error(self):
        with pytest.raises(KeyError):
            self._registry().get_option("--depth")

    def test_fill_returns_all_names(self):
        registry = self._registry()
        known = registry.fill(["--url=https://example.com"])

        assert known == {
            "--url",
            "-u",
            "--timeout",
            "-t",
            "--sitemap-xml-file",
        }
        assert registry.get_value("--url") == "https://example.com"
        assert registry.get_value("--timeout") == 5

    def test_duplicate_name_across_groups(self):
        registry = self._registry()
        registry.add_group(
            OptionGroup(
                "Crawler depth",
                [Option("--timeout", None, OptionType.INT, 10)],
            )
        )

        with pytest.raises(DuplicateOptionError) as exc_info:
            registry.fill([])

        error = exc_info.value
        assert error.option_name == "--timeout"
        assert error.group == "Crawler depth"
        assert error.previous_group == "Basic settings"

    def test_duplicate_alt_name_against_long_name(self):
        registry = OptionRegistry(
            [
                OptionGroup("A", [Option("--a", "-x", OptionType.BOOL)]),
                OptionGroup("B", [Option("-x", None, OptionType.BOOL)]),
            ]
        )
        with pytest.raises(DuplicateOptionError, match="'-x'"):
            registry.collect_known_names()

    def test_duplicate_detected_before_any_value_is_filled(self):
        registry = OptionRegistry(
            [
                OptionGroup("A", [Option("--depth", None, OptionType.INT)]),
                OptionGroup("B", [Option("--depth", None, OptionType.INT)]),
            ]
        )
        with pytest.raises(DuplicateOptionError):
            registry.fill(["--depth=abc"])

        assert not registry.get_option("--depth").is_filled

    def test_only_first_duplicate_is_reported(self):
        registry = OptionRegistry(
            [
                OptionGroup(
                    "A",
                    [
                        Option("--one", None, OptionType.BOOL),
                        Option("--two", None, OptionType.BOOL),
                    ],
                ),
                OptionGroup(
                    "B",
                    [
                        Option("--two", None, OptionType.BOOL),
                        Option("--one", None, OptionType.BOOL),
                    ],
                ),
            ]
        )
        with pytest.raises(DuplicateOptionError) as exc_info:
            registry.fill([])
        assert exc_info.value.option_name == "--two"

    def test_frozen_registry_rejects_changes(self):
        registry = self._registry()
        registry.fill([])
        registry.freeze()

        assert registry.frozen
        with pytest.raises(RuntimeError):
            registry.add_group(OptionGroup("Late"))
        with pytest.raises(RuntimeError):
            registry.fill([])
