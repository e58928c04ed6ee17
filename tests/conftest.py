"""Shared fixtures for bootstrap tests."""

import textwrap
import uuid
from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from sitecrawl.options import (
    Option,
    OptionGroup,
    OptionRegistry,
    OptionType,
)

PluginPackageFactory = Callable[..., tuple[Path, str]]


@pytest.fixture
def make_plugin_package(tmp_path: Path) -> PluginPackageFactory:
    """Create an importable plugin package under ``tmp_path``.

    The returned factory takes ``exporters`` and ``analyzers`` mappings
    of module file name to source code and returns the package root
    and its (unique) dotted package name. Pass ``None`` for a category
    to leave its folder out.

    Returns:
        Factory building ``(root, package_name)``.
    """

    def factory(
        exporters: dict[str, str] | None = None,
        analyzers: dict[str, str] | None = None,
    ) -> tuple[Path, str]:
        package = f"plugins_{uuid.uuid4().hex[:12]}"
        root = tmp_path / package
        root.mkdir()
        (root / "__init__.py").write_text("")

        for category, modules in (
            ("export", exporters),
            ("analysis", analyzers),
        ):
            if modules is None:
                continue
            folder = root / category
            folder.mkdir()
            (folder / "__init__.py").write_text("")
            for file_name, source in modules.items():
                (folder / file_name).write_text(textwrap.dedent(source))

        return root, package

    return factory


@pytest.fixture
def url_timeout_registry() -> OptionRegistry:
    """Registry with ``--url`` (no default) and ``--timeout`` (5).

    Returns:
        An unfilled OptionRegistry with a single group.
    """
    return OptionRegistry(
        [
            OptionGroup(
                "Basic settings",
                [
                    Option("--url", "-u", OptionType.URL),
                    Option(
                        "--timeout",
                        "-t",
                        OptionType.INT,
                        default_value=5,
                        description="Request timeout (in sec)",
                    ),
                ],
            )
        ]
    )


@pytest.fixture
def runner() -> CliRunner:
    """Click test runner for invoking the CLI in-process."""
    return CliRunner()
