"""sitecrawl CLI: parse crawler options and activate plugins.

Usage:
    sitecrawl --url=https://mydomain.tld/ [options]
    sitecrawl --help                  # List every core and plugin option
    sitecrawl --version

Options are declared by the crawler core and by each exporter and
analyzer, so they are not known to click. Arguments are passed through
untouched to the Initiator, which parses and validates them.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import click

from sitecrawl import __version__
from sitecrawl.common.exceptions import BootstrapError
from sitecrawl.core_options import CoreOptions
from sitecrawl.initiator import Initiator
from sitecrawl.options import split_argument

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _has_flag(arguments: Sequence[str], *names: str) -> bool:
    return any(split_argument(arg)[0] in names for arg in arguments)


def _setup_logging(debug: bool) -> None:
    log_level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(level=log_level, format=LOG_FORMAT)
    logging.getLogger("sitecrawl").setLevel(log_level)


def _add_log_file(path: str) -> None:
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger = logging.getLogger("sitecrawl")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


@click.command(
    context_settings={
        "ignore_unknown_options": True,
        "allow_extra_args": True,
        "help_option_names": [],
    }
)
@click.argument("arguments", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, arguments: tuple[str, ...]) -> None:
    """Crawl a website with the exporters and analyzers its options enable.

    Run ``sitecrawl --help`` for the list of options.
    """
    _setup_logging(_has_flag(arguments, "--debug"))

    argv = [ctx.info_name or "sitecrawl", *arguments]
    try:
        initiator = Initiator(argv)
    except BootstrapError as e:
        raise click.ClickException(str(e)) from e

    if _has_flag(arguments, "--help", "-h"):
        click.echo(initiator.render_help(), nl=False)
        return
    if _has_flag(arguments, "--version", "-v"):
        click.echo(f"Version: {__version__}")
        return

    try:
        initiator.validate_and_init()
    except BootstrapError as e:
        raise click.ClickException(str(e)) from e

    core_options = initiator.core_options
    if core_options.debug_log_file:
        _add_log_file(core_options.debug_log_file)
    if not core_options.url:
        raise click.UsageError(
            "Missing required option --url. "
            "Run 'sitecrawl --help' for all options.",
            ctx,
        )

    _print_summary(core_options, initiator)


def _print_summary(core_options: CoreOptions, initiator: Initiator) -> None:
    exporters = ", ".join(e.name for e in initiator.exporters)
    analyzers = ", ".join(a.name for a in initiator.analyzers)

    click.echo(f"URL:       {core_options.url}")
    click.echo(f"Workers:   {core_options.workers}")
    click.echo(f"Timeout:   {core_options.timeout}s")
    click.echo(f"Exporters: {exporters or '(none)'}")
    click.echo(f"Analyzers: {analyzers or '(none)'}")


def main() -> None:
    cli()
