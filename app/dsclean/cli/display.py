"""Rich display functions for a cleanup run.

Provides the per-file reporter used while the run is in progress and
the header and summary printed around it.
"""

from pathlib import Path

from rich.markup import escape

from dsclean.cleanup.identity import TARGET_FILENAME
from dsclean.cleanup.models import RemovalResult, WalkError
from dsclean.cleanup.stats import StatsSnapshot
from dsclean.core.config import ScanConfig
from dsclean.utils.formatting import console, err_console

RULE_WIDTH = 50
DRY_RUN_TIP = "Tip: Remove --dry-run flag to actually execute cleanup"


class ConsoleReporter:
    """Prints cleanup progress to the shared Rich consoles.

    Previews are always shown; found/moved lines only when verbose.
    Warnings and failures always go to stderr.

    Args:
        verbose: Print each found file and each successful move.
    """

    def __init__(self, verbose: bool = False) -> None:
        self._verbose = verbose

    def warning(self, error: WalkError) -> None:
        err_console.print(f"[warning]Warning:[/] {escape(error.message)}")

    def preview(self, path: Path) -> None:
        console.print(f"[preview]\\[Preview][/] {escape(str(path))}")

    def found(self, path: Path) -> None:
        if self._verbose:
            console.print(f"[found]\\[Found][/] {escape(str(path))}")

    def moved(self, path: Path) -> None:
        if self._verbose:
            console.print("  [success]✓ Moved to trash[/]")

    def failed(self, result: RemovalResult) -> None:
        err_console.print(
            f"  [error]✗[/] Failed to move file: [error]{escape(result.error or '')}[/]"
        )


def print_header(config: ScanConfig) -> None:
    """Print the scan path, mode and depth settings."""
    console.print(f"[bold_header]Scan path:[/] [path]{escape(str(config.root))}[/]")

    if config.dry_run:
        console.print("[bold][warning]Mode: Preview mode (files will not be removed)[/][/]")
    else:
        console.print("[bold][success]Mode: Execution mode (files will be moved to trash)[/][/]")

    if not config.recursive:
        console.print("[bold]Recursion: Disabled[/]")
    elif config.max_depth > 0:
        console.print(f"[bold]Max depth:[/] {config.max_depth}")

    console.print()


def print_summary(stats: StatsSnapshot, dry_run: bool) -> None:
    """Print final cleanup statistics.

    The found count is always shown. Moved and failed counts are shown
    only when files were actually processed, and a hint to drop
    --dry-run is shown when a preview found anything.

    Args:
        stats: Final counter values.
        dry_run: Whether the run was a preview.
    """
    rule = "=" * RULE_WIDTH

    console.print()
    console.print(f"[border]{rule}[/]")
    console.print("[bold_header]Cleanup Statistics:[/]")
    console.print(f"  [bold]Found {TARGET_FILENAME} files:[/] [path]{stats.found}[/]")

    if not dry_run:
        console.print(f"  [bold]Successfully moved to trash:[/] [success]{stats.moved}[/]")
        failed_style = "error" if stats.failed else "muted"
        console.print(f"  [bold]Failed:[/] [{failed_style}]{stats.failed}[/]")

    console.print(f"[border]{rule}[/]")

    if dry_run and stats.found > 0:
        console.print()
        console.print(f"[warning]{DRY_RUN_TIP}[/]")
