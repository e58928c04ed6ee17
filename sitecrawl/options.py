"""Option model shared by the crawler core and its plugins.

Options are declared up front by every contributor (the crawler itself
and each exporter/analyzer), bundled into named groups and collected
into a single OptionRegistry. Values are filled from the raw command
line exactly once.

Argument forms understood for an option named ``--timeout`` with the
alternative name ``-t``::

    --timeout          -t            (flags; other types see an empty value)
    --timeout=10       -t=10

Option names are global: a group name is only a display heading.
"""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import AnyHttpUrl, TypeAdapter, ValidationError

from sitecrawl.common.exceptions import (
    DuplicateOptionError,
    TypeCoercionError,
)

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_URL_ADAPTER: TypeAdapter[AnyHttpUrl] = TypeAdapter(AnyHttpUrl)

_UNSET: Any = object()


class OptionType(Enum):
    """Value type of an option.

    The enum value is the name used in error messages.
    """

    BOOL = "bool"
    INT = "int"
    STRING = "string"
    FLOAT = "float"
    REGEX = "regex"
    EMAIL = "email"
    URL = "url"
    FILE = "file"
    DIR = "dir"


def split_argument(argument: str) -> tuple[str, str | None]:
    """Split a raw argument into its name and optional value.

    ``"--url=https://a.b"`` becomes ``("--url", "https://a.b")`` and
    ``"--debug"`` becomes ``("--debug", None)``. Whitespace in front of
    the ``=`` is dropped.
    """
    key, separator, value = argument.partition("=")
    if not separator:
        return argument, None
    return key.rstrip(), value


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
        return value[1:-1]
    return value


@dataclass
class Option:
    """A single named, typed, configurable value.

    Attributes:
        name: Canonical name including dashes, e.g. ``--timeout``.
        alt_name: Optional short name including dashes, e.g. ``-t``.
        type: Declared value type.
        default_value: Value kept when the option is not given.
        description: One-line description shown in the help.
        is_array: Collect every occurrence (and comma-separated parts)
            into a list instead of keeping the last one.
        is_nullable: Treat an explicitly empty value as ``None``.
    """

    name: str
    alt_name: str | None
    type: OptionType
    default_value: Any = None
    description: str = ""
    is_array: bool = False
    is_nullable: bool = False
    _value: Any = field(default=_UNSET, init=False, repr=False)

    @property
    def names(self) -> tuple[str, ...]:
        """Canonical name followed by the alternative name, if any."""
        if self.alt_name:
            return (self.name, self.alt_name)
        return (self.name,)

    @property
    def is_filled(self) -> bool:
        return self._value is not _UNSET

    @property
    def value(self) -> Any:
        """The filled value.

        Raises:
            RuntimeError: If the option has not been filled yet.
        """
        if self._value is _UNSET:
            raise RuntimeError(f"Option {self.name} has not been filled")
        return self._value

    def set_value_from_argv(self, arguments: Sequence[str]) -> None:
        """Fill the value from raw arguments (invocation token excluded).

        Raises:
            TypeCoercionError: If a given value does not match the type.
            RuntimeError: If the option was already filled.
        """
        if self.is_filled:
            raise RuntimeError(f"Option {self.name} is already filled")

        given: list[str | None] = []
        for argument in arguments:
            key, raw = split_argument(argument)
            if key in self.names:
                given.append(raw)

        if self.type is OptionType.BOOL:
            self._value = True if given else bool(self.default_value)
        elif not given:
            self._value = self._default_copy()
        elif self.is_array:
            values: list[Any] = []
            for raw in given:
                for part in (raw or "").split(","):
                    part = _strip_quotes(part.strip())
                    if part:
                        values.append(self.coerce(part))
            self._value = values
        else:
            self._value = self.coerce(_strip_quotes(given[-1] or ""))

    def coerce(self, raw: str) -> Any:
        """Convert raw text to this option's type.

        Raises:
            TypeCoercionError: If ``raw`` is not a valid value.
        """
        if raw == "" and self.is_nullable:
            return None

        if self.type is OptionType.INT:
            try:
                return int(raw)
            except ValueError:
                raise TypeCoercionError(self.name, raw, "int") from None
        elif self.type is OptionType.FLOAT:
            try:
                return float(raw)
            except ValueError:
                raise TypeCoercionError(self.name, raw, "float") from None
        elif self.type is OptionType.REGEX:
            try:
                re.compile(raw)
            except re.error as e:
                raise TypeCoercionError(
                    self.name, raw, "regex", reason=str(e)
                ) from e
            return raw
        elif self.type is OptionType.EMAIL:
            if not _EMAIL_PATTERN.match(raw):
                raise TypeCoercionError(self.name, raw, "email")
            return raw
        elif self.type is OptionType.URL:
            try:
                _URL_ADAPTER.validate_python(raw)
            except ValidationError as e:
                raise TypeCoercionError(
                    self.name,
                    raw,
                    "url",
                    reason=e.errors()[0]["msg"],
                ) from e
            return raw
        elif self.type in (OptionType.FILE, OptionType.DIR):
            return os.path.expanduser(raw)
        elif self.type is OptionType.BOOL:
            return True
        return raw

    def _default_copy(self) -> Any:
        if self.is_array:
            return list(self.default_value or [])
        return self.default_value


@dataclass
class OptionGroup:
    """Named, ordered bundle of options owned by one contributor."""

    name: str
    options: list[Option] = field(default_factory=list)


class OptionRegistry:
    """Ordered collection of option groups.

    The insertion order of groups is the order used for help output and
    for duplicate detection, so contributors added first win naming
    conflicts: the second declaration is the one reported.
    """

    def __init__(self, groups: Iterable[OptionGroup] = ()) -> None:
        self._groups: list[OptionGroup] = []
        self._frozen = False
        for group in groups:
            self.add_group(group)

    @property
    def groups(self) -> tuple[OptionGroup, ...]:
        return tuple(self._groups)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def add_group(self, group: OptionGroup) -> None:
        """Append a group. Names are validated later, when filling."""
        if self._frozen:
            raise RuntimeError("Option registry is frozen")
        self._groups.append(group)

    def iter_options(self) -> Iterator[tuple[OptionGroup, Option]]:
        for group in self._groups:
            for option in group.options:
                yield group, option

    def get_option(self, name: str) -> Option:
        """Look up an option by canonical or alternative name.

        Raises:
            KeyError: If no option uses ``name``.
        """
        for _group, option in self.iter_options():
            if name in option.names:
                return option
        raise KeyError(name)

    def has_option(self, name: str) -> bool:
        try:
            self.get_option(name)
        except KeyError:
            return False
        return True

    def get_value(self, name: str) -> Any:
        return self.get_option(name).value

    def collect_known_names(self) -> set[str]:
        """Return every option name and alternative name.

        Raises:
            DuplicateOptionError: On the first name seen twice, in
                registry order.
        """
        known: dict[str, str] = {}
        for group, option in self.iter_options():
            for name in option.names:
                if name in known:
                    raise DuplicateOptionError(name, group.name, known[name])
                known[name] = group.name
        return set(known)

    def fill(self, arguments: Sequence[str]) -> set[str]:
        """Fill every option from ``arguments`` and return the known names.

        Duplicate names are rejected before any value is filled.

        Raises:
            DuplicateOptionError: If two options share a name.
            TypeCoercionError: If a value does not match its option type.
        """
        if self._frozen:
            raise RuntimeError("Option registry is frozen")

        known = self.collect_known_names()
        for _group, option in self.iter_options():
            option.set_value_from_argv(arguments)
        return known

    def freeze(self) -> None:
        """Reject further groups and fills."""
        self._frozen = True
