"""Click-based command line for HistoryExport."""

import sys

import click

from . import __version__
from .config import LOG_BACKUPS, LOG_MAX_BYTES, Settings
from .errors import ConfigurationError
from .logging_utils import setup_logging
from .runner import HistoryExporter


@click.group()
@click.version_option(version=__version__)
def cli():
    """HistoryExport - dump one-to-one chat history to JSON files."""


@cli.command(name="export")
@click.argument("token")
@click.argument("users", nargs=-1, required=True)
def export(token, users):
    """Export 1-1 chat history of one or more USERS (IDs or emails).

    Files land in HISTEXPORT_OUTPUT_DIR (default: current directory) as
    <timestamp>.<user>.json.
    """
    try:
        settings = Settings.from_env()
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    try:
        logger = setup_logging(
            console=not settings.quiet,
            debug=settings.debug,
            file_path=settings.log_file,
            max_bytes=LOG_MAX_BYTES,
            backups=LOG_BACKUPS,
        )
    except OSError as e:
        click.echo(f"Error: cannot open log file {settings.log_file}: {e}", err=True)
        sys.exit(1)

    try:
        exporter = HistoryExporter(
            settings.output_dir,
            base_url=settings.base_url,
            page_size=settings.page_size,
            timeout=settings.timeout,
            logger=logger,
        )
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    # ошибки по отдельным пользователям уже залогированы и код выхода не меняют
    exporter.run(token, users)


if __name__ == "__main__":
    cli()
