"""Command-line runner: load an employee export and print the hierarchy reports."""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from org_analytics import hierarchy
from org_analytics.config import AnalyticsConfig, load_analytics_config
from org_analytics.exceptions import OrgAnalyticsError
from org_analytics.utils.types import OutputFormat

console = Console()


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="org-analytics",
        description="Report salary policy violations and long reporting lines from an employee CSV",
    )
    parser.add_argument("--file", type=Path, help="Employee CSV export (default: SampleData.csv)")
    parser.add_argument("--no-header", action="store_true", help="The export has no header row")
    parser.add_argument("--profile", type=str, help="Policy profile: default, strict or lenient")
    parser.add_argument("--min-pct", type=int, help="Minimum % a manager should earn above their reports' average")
    parser.add_argument("--max-pct", type=int, help="Maximum % a manager may earn above their reports' average")
    parser.add_argument("--threshold", type=int, help="Maximum allowed managers between an employee and the CEO")
    parser.add_argument("--export-dir", type=Path, help="Also write both reports to this directory")
    parser.add_argument(
        "--format",
        type=OutputFormat,
        choices=list(OutputFormat),
        help="Export format (default: csv)",
    )
    parser.add_argument("--validate", action="store_true", help="Only validate the export, don't report")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def resolve_config(args: argparse.Namespace) -> AnalyticsConfig:
    """Layer command-line flags over the loaded configuration."""
    config = load_analytics_config(args.profile)

    policy = config.policy
    if args.min_pct is not None:
        policy = replace(policy, minimum_percentage=args.min_pct)
    if args.max_pct is not None:
        policy = replace(policy, maximum_percentage=args.max_pct)
    if args.threshold is not None:
        policy = replace(policy, reporting_lines_threshold=args.threshold)

    input_cfg = config.input
    if args.file is not None:
        input_cfg = replace(input_cfg, path=args.file)
    else:
        console.print(
            f"[yellow]WARNING: no --file given, looking for {input_cfg.path}[/yellow]"
        )
    if args.no_header:
        input_cfg = replace(input_cfg, has_header=False)

    output = config.output
    if args.export_dir is not None:
        output = replace(output, directory=args.export_dir)
    if args.format is not None:
        output = replace(output, fmt=args.format)

    return replace(config, policy=policy, input=input_cfg, output=output)


def validate_only(config: AnalyticsConfig) -> int:
    result = hierarchy.validate(config)

    table = Table(title="Validation Results")
    table.add_column("File")
    table.add_column("Valid")
    table.add_column("Details")

    match result:
        case {"status": "ok", "rows_available": rows}:
            table.add_row(str(config.input.path), "[green]✓[/green]", f"{rows} employees")
            code = 0
        case {"status": "warning", "message": msg}:
            table.add_row(str(config.input.path), "[yellow]![/yellow]", msg)
            code = 0
        case {"status": "error", "message": msg}:
            table.add_row(str(config.input.path), "[red]✗[/red]", msg)
            code = 1
        case _:
            table.add_row(str(config.input.path), "[red]✗[/red]", "Unknown validation result")
            code = 1

    console.print(table)
    return code


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = resolve_config(args)
        if args.validate:
            return validate_only(config)

        console.print("[bold]Running org hierarchy analytics...[/bold]")
        console.print(f"Loading file: {config.input.path}")
        hierarchy.run(config)
    except FileNotFoundError as exc:
        console.print(f"[red]ERROR when loading the file: {exc}[/red]")
        return 1
    except OrgAnalyticsError as exc:
        console.print(f"[red]ERROR: {exc}[/red]")
        return 1

    console.print("[bold green]Analytics reports finished[/bold green]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
