#!/usr/bin/env python3
"""
modmeta - Read mod metadata from a Minecraft mods folder
Supports mcmod.info, fabric.mod.json, forgeversion.properties and litemod.json
Output: JSON, CSV or Markdown file with one entry per mod
"""

import argparse
import glob
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn
from rich.table import Table

from modmeta import __version__
from modmeta.formatters import FORMATTERS, get_formatter
from modmeta.models import ArtifactType, ScanResult
from modmeta.scanner import ModScanner

console = Console()


def setup_logging(level: str = "INFO", log_file: Optional[Path] = None) -> None:
    """Configure logging with the rich handler."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: List[logging.Handler] = [RichHandler(
        console=console,
        show_time=False,
        show_path=False,
        rich_tracebacks=True
    )]

    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=handlers
    )


def print_summary(result: ScanResult) -> None:
    """Print a summary of the scan results."""
    table = Table(title="Scan Summary", show_header=False)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Total Mods", str(len(result.entries)))
    table.add_row("Without Metadata", str(len(result.without_metadata)))
    table.add_row("Scan Duration", f"{result.scan_duration:.2f}s")

    types = {}
    for entry in result.entries:
        types[entry.artifact_type.value] = types.get(entry.artifact_type.value, 0) + 1

    for artifact_type, count in sorted(types.items()):
        table.add_row(f"  {artifact_type}", str(count))

    console.print(table)

    duplicates = result.get_duplicates()
    if duplicates:
        console.print(f"\n[yellow]Found {len(duplicates)} potential duplicate mod(s):[/yellow]")
        for mod_id, entries in duplicates.items():
            console.print(f"  • {mod_id}: {', '.join(e.filename for e in entries)}")


def scan_with_progress(scanner: ModScanner, folder_path: Path, include_disabled: bool, exclude: List[str]) -> ScanResult:
    """Scan with a progress bar."""
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console
    ) as progress:
        task = progress.add_task("[cyan]Reading mods...", total=None)

        def update_progress(current: int, total: int, filename: str):
            if progress.tasks[task].total != total:
                progress.update(task, total=total)
            progress.update(task, completed=current, description=f"[cyan]{filename[:40]}")

        result = scanner.scan_folder(
            folder_path,
            include_disabled=include_disabled,
            exclude_patterns=exclude,
            progress_callback=update_progress
        )

        progress.update(task, completed=result.total_files, description="[green]Done!")

    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Read mod metadata from a mods folder and write it out in various formats",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py ./mods                       # Output to mods.json
  python main.py ./mods -o mods.csv -f csv    # Output as CSV
  python main.py ./mods --include-disabled    # Also read *.disabled mods
  python main.py ./mods --filter-type litemod # Only LiteLoader mods
        """
    )

    parser.add_argument(
        'input_folder',
        nargs='?',
        default='.',
        help='Mods folder (default: current directory)'
    )
    parser.add_argument(
        '-o', '--output',
        default='mods.json',
        help='Output file path (default: mods.json)'
    )
    parser.add_argument(
        '-f', '--format',
        choices=sorted(FORMATTERS),
        default='json',
        help='Output format (default: json)'
    )
    parser.add_argument(
        '-w', '--workers',
        type=int,
        default=4,
        help='Number of parallel workers (default: 4)'
    )
    parser.add_argument(
        '--exclude',
        nargs='*',
        default=[],
        help='Glob patterns to exclude (e.g., "*-sources.jar")'
    )
    parser.add_argument(
        '--include-disabled',
        action='store_true',
        help='Include *.disabled mods (marked with disabled: true)'
    )
    parser.add_argument(
        '--compact',
        action='store_true',
        help='Output compact JSON (no indentation)'
    )
    parser.add_argument(
        '--sort-by',
        choices=['name', 'version', 'filename'],
        help='Sort mods by field'
    )
    parser.add_argument(
        '--filter-type',
        choices=[t.value for t in ArtifactType],
        help='Only include mods packaged this way'
    )
    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default='INFO',
        help='Logging level (default: INFO)'
    )
    parser.add_argument(
        '--log-file',
        type=Path,
        help='Also write log messages to this file'
    )
    parser.add_argument(
        '-q', '--quiet',
        action='store_true',
        help='Suppress non-error output'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'modmeta {__version__}'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    log_level = 'ERROR' if args.quiet else args.log_level
    setup_logging(log_level, args.log_file)

    logger = logging.getLogger(__name__)

    try:
        input_path = Path(args.input_folder).resolve()
        output_path = Path(args.output).resolve()

        formatter = get_formatter(args.format)
        if not output_path.suffix:
            output_path = output_path.with_suffix(formatter.extension)

        if not args.quiet:
            console.print(f"[bold]modmeta v{__version__}[/bold]")
            console.print(f"Scanning: [cyan]{input_path}[/cyan]")
            console.print(f"Output: [cyan]{output_path}[/cyan] ({formatter.name})")
            console.print()

        # Never report our own output file as a mod
        exclude = list(args.exclude)
        if output_path.parent == input_path:
            exclude.append(glob.escape(output_path.name))

        scanner = ModScanner(workers=args.workers)
        if args.quiet:
            result = scanner.scan_folder(input_path, include_disabled=args.include_disabled, exclude_patterns=exclude)
        else:
            result = scan_with_progress(scanner, input_path, args.include_disabled, exclude)

        if args.filter_type:
            result.entries = result.filter_by_type(ArtifactType(args.filter_type))

        if args.sort_by:
            result.sort_entries(by=args.sort_by)

        formatter.save(result, output_path, compact=args.compact)

        if not args.quiet:
            print_summary(result)
            console.print(f"\n[green]✓ Output saved to {output_path}[/green]")

    except (FileNotFoundError, NotADirectoryError) as e:
        logger.error(str(e))
        return 1
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
