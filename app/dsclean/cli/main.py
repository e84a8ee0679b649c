"""Main CLI application entry point.

Defines the Typer application: one command that scans a directory tree
and moves every .DS_Store file it finds to the system trash.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from dsclean import __version__
from dsclean.cleanup.operator import TrashOperator
from dsclean.cleanup.orchestrator import CleanupOrchestrator
from dsclean.cli.display import ConsoleReporter, print_header, print_summary
from dsclean.core.config import ScanConfigError, build_scan_config
from dsclean.utils.formatting import print_error, print_warning

logger = logging.getLogger(__name__)

# Conventional exit status for SIGINT
EXIT_INTERRUPTED = 130

app = typer.Typer(
    name="dsclean",
    help="Recursively move .DS_Store junk files to the system trash.",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"dsclean version {__version__}")
        raise typer.Exit()


@app.command()
def clean(
    path: Annotated[
        Path,
        typer.Argument(help="Directory to scan."),
    ] = Path("."),
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            help="Preview mode: only show files that would be removed.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Display each file found and moved."),
    ] = False,
    no_recursive: Annotated[
        bool,
        typer.Option("--no-recursive", help="Do not scan subdirectories."),
    ] = False,
    max_depth: Annotated[
        int,
        typer.Option(
            "--max-depth",
            min=0,
            help=(
                "Maximum directory levels below PATH to examine (0 means unlimited). "
                "--max-depth 1 examines first-level subdirectories; --no-recursive "
                "does not, and wins when both are given."
            ),
        ),
    ] = 0,
    skip_hidden: Annotated[
        bool,
        typer.Option(
            "--skip-hidden",
            help="Skip hidden directories (the scan root and files are never skipped).",
        ),
    ] = False,
    workers: Annotated[
        int,
        typer.Option(
            "--workers",
            "-j",
            min=1,
            max=64,
            help="Number of threads moving files to the trash.",
        ),
    ] = 1,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging on stderr."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Scan PATH and move every .DS_Store file to the trash.

    Files are never permanently deleted. Use --dry-run to preview.
    """
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    try:
        config = build_scan_config(
            path,
            recursive=not no_recursive,
            max_depth=max_depth,
            skip_hidden=skip_hidden,
            dry_run=dry_run,
            verbose=verbose,
            workers=workers,
        )
    except ScanConfigError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    logger.debug("Scan configuration: %s", config)

    print_header(config)

    orchestrator = CleanupOrchestrator(
        config,
        operator=TrashOperator(),
        reporter=ConsoleReporter(verbose=verbose),
    )

    try:
        stats = orchestrator.run()
    except KeyboardInterrupt:
        print_warning("Interrupted; files already moved remain in the trash.")
        print_summary(orchestrator.stats.snapshot(), dry_run=config.dry_run)
        raise typer.Exit(code=EXIT_INTERRUPTED) from None

    print_summary(stats.snapshot(), dry_run=config.dry_run)


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
