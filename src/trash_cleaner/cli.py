"""CLI interface for trash-cleaner.

Usage:
    # Preview what would go
    python -m trash_cleaner.cli --dry-run --file src/bang.ts

    # Clean in place, keeping the original as src/bang.ts.backup
    python -m trash_cleaner.cli --backup --patterns ".ru,yandex"

    # Take settings from a YAML file; flags still win
    python -m trash_cleaner.cli --config cleaner.yaml --dry-run

Exit status is 0 on success (including dry runs and no-op runs) and 1
when the file or config cannot be read or written.
"""

from __future__ import annotations
import argparse
import os
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from .cleaner import Cleaner, CleanerConfig, DEFAULT_FILE
from .config import ConfigError, build_config, load_from_yaml, split_patterns
from .files import FileOperationError, read_source, resolve_path, write_changes
from .log import get_logger, setup_logging
from .types import ProcessResult

log = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trash-cleaner",
        description="Clean unwanted entries from the bangs array",
    )
    parser.add_argument("--dry-run", action="store_true", default=None,
                        help="Show what would be removed without making changes")
    parser.add_argument("--backup", action="store_true", default=None,
                        help="Create a backup of the original file")
    parser.add_argument("--patterns", default=None,
                        help='Comma-separated list of patterns to remove (e.g. ".ru,russia")')
    parser.add_argument("--file", default=None,
                        help=f"Path to the bang file (default: {DEFAULT_FILE})")
    parser.add_argument("--config", type=Path, default=None, help="YAML config file")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Errors only")
    return parser


def _build_config(args: argparse.Namespace) -> CleanerConfig:
    config = CleanerConfig()
    if args.config is not None:
        config = build_config(config, load_from_yaml(args.config))

    overrides: dict = {}
    if args.dry_run:
        overrides["dry_run"] = True
    if args.backup:
        overrides["create_backup"] = True
    if args.file:
        overrides["file_path"] = args.file
    if args.patterns is not None:
        overrides["forbidden_patterns"] = split_patterns(args.patterns)
    return build_config(config, overrides)


def _print_configuration(console: Console, config: CleanerConfig) -> None:
    patterns = ", ".join(config.forbidden_patterns) or "(none)"
    console.print("[blue]Configuration:[/blue]")
    console.print(f"  [bright_black]Patterns:[/bright_black] {escape(patterns)}")
    console.print(f"  [bright_black]Backup:[/bright_black] {'Yes' if config.create_backup else 'No'}")
    console.print(f"  [bright_black]Dry run:[/bright_black] {'Yes' if config.dry_run else 'No'}")


def _print_removed(console: Console, result: ProcessResult) -> None:
    console.print(f"\n[magenta]Removed {result.removed_count} items:[/magenta]")
    for i, item in enumerate(result.removed_items, 1):
        line = f"[bright_black]{i}.[/bright_black] {escape(item.service)} [bright_black]({escape(item.domain)})"
        if item.url:
            line += escape(f" [URL: {item.url}]")
        console.print(line + "[/bright_black]")
        if item.reason:
            console.print(f"   [bright_black]{escape(item.reason)}[/bright_black]")

    percentage = result.removed_count / result.total_count * 100 if result.total_count else 0.0
    console.print(
        f"\n[green]Summary:[/green] Removed {result.removed_count}/{result.total_count} "
        f"bangs ({percentage:.1f}%)"
    )


def run(config: CleanerConfig, console: Console) -> int:
    """Clean the configured file.  Returns the process exit code."""
    path = resolve_path(config.file_path)

    try:
        console.print(f"[blue]Reading file:[/blue] {escape(str(path))}")
        source = read_source(path)
        _print_configuration(console, config)

        result = Cleaner(config).clean(source)
        log.info("content_processed", path=str(path),
                 total=result.total_count, removed=result.removed_count)

        if result.removed_count == 0:
            console.print(
                f"\n[green]No bangs with forbidden patterns found[/green] "
                f"out of {result.total_count} total bangs."
            )
            return 0

        if config.dry_run:
            console.print("\n[yellow]\\[DRY RUN]:[/yellow] No changes were made.")
            console.print(
                f"Would remove [red]{result.removed_count}[/red] out of {result.total_count} bangs."
            )
        else:
            backup = write_changes(path, source, result.modified_content,
                                   create_backup=config.create_backup)
            if backup is not None:
                console.print(f"[green]Backup created:[/green] {escape(str(backup))}")
            console.print(
                f"[green]Successfully removed {result.removed_count} out of "
                f"{result.total_count} bangs with forbidden patterns.[/green]"
            )
    except FileOperationError as e:
        log.error("file_operation_failed", path=str(path), error=str(e))
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return 1

    _print_removed(console, result)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    if args.verbose:
        level = "DEBUG"
    elif args.quiet:
        level = "ERROR"
    else:
        level = os.environ.get("LOG_LEVEL", "WARNING")
    setup_logging(level)

    console = Console(highlight=False, soft_wrap=True)
    try:
        config = _build_config(args)
    except ConfigError as e:
        log.error("config_invalid", error=str(e))
        console.print(f"[red]Config error:[/red] {escape(str(e))}")
        return 1

    return run(config, console)


if __name__ == "__main__":
    sys.exit(main())
