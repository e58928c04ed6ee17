"""Exception types for crawler bootstrap errors.

Every error raised while discovering plugins, assembling the option
registry, parsing arguments or activating plugins derives from
BootstrapError. None of them is recoverable: the caller reports the
message and terminates.
"""

from typing import Any


class BootstrapError(Exception):
    """Base class for configuration and startup failures.

    Subclasses provide a short message plus optional context that is
    rendered below it, one ``key: value`` pair per line.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable description of the failure.
            context: Optional dict of additional context (option, group, ...).
        """
        self.message = message
        self.context = context or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context.

        Returns:
            Formatted error message string.
        """
        parts = [self.message]

        if self.context:
            parts.append("Context:")
            for key, value in self.context.items():
                parts.append(f"  {key}: {value}")

        return "\n".join(parts)


class SetupError(BootstrapError):
    """Raised when the plugin directories are missing or inconsistent.

    This is a startup precondition: it is raised before any option is
    declared or parsed.
    """

    pass


class DuplicateOptionError(BootstrapError):
    """Raised when two options share a name or alternative name.

    Names are unique across the whole registry, not per group. Only the
    first collision found in registry order is reported.

    Attributes:
        option_name: The colliding identifier (``--name`` or ``-alt``).
        group: Name of the group declaring the second occurrence.
        previous_group: Name of the group that declared it first.
    """

    def __init__(
        self,
        option_name: str,
        group: str,
        previous_group: str,
    ) -> None:
        self.option_name = option_name
        self.group = group
        self.previous_group = previous_group

        message = (
            f"Detected duplicated option '{option_name}' "
            f"in more exporters/analyzers."
        )
        context = {
            "option": option_name,
            "declared_by": group,
            "first_declared_by": previous_group,
        }
        super().__init__(message, context)


class TypeCoercionError(BootstrapError):
    """Raised when a command-line value does not match its option type.

    Attributes:
        option_name: Canonical name of the option.
        value: The raw text that failed to convert.
        expected_type: Name of the declared option type.
    """

    def __init__(
        self,
        option_name: str,
        value: str,
        expected_type: str,
        reason: str | None = None,
    ) -> None:
        self.option_name = option_name
        self.value = value
        self.expected_type = expected_type

        message = (
            f"Option {option_name} expects {expected_type}, "
            f"got '{value}'"
        )
        context = {"option": option_name, "value": value}
        if reason:
            context["reason"] = reason
        super().__init__(message, context)


class UnknownOptionError(BootstrapError):
    """Raised when the command line contains unrecognized arguments.

    Unlike duplicate detection this check is exhaustive: every unknown
    argument is listed, each once, in the order given.

    Attributes:
        unknown_options: The unrecognized arguments as typed.
    """

    def __init__(self, unknown_options: list[str]) -> None:
        self.unknown_options = list(unknown_options)
        super().__init__(
            "Unknown options: " + ", ".join(self.unknown_options)
        )
