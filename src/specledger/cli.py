from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from specledger.artifacts.junit import write_junit
from specledger.artifacts.summary import write_summary
from specledger.config.loader import load_config
from specledger.config.models import ReporterConfig
from specledger.events.jsonl import iter_jsonl
from specledger.formatting.results import format_result_title
from specledger.reporter.aggregator import RunAggregator
from specledger.reporter.replay import replay_events

app = typer.Typer(add_completion=False, no_args_is_help=True)
console = Console()

_STATUS_STYLES = {
    "passed": "[green]PASS[/green]",
    "failed": "[red]FAIL[/red]",
    "pending": "[yellow]PENDING[/yellow]",
    "todo": "[yellow]TODO[/yellow]",
    "skipped": "[yellow]SKIP[/yellow]",
}


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Aggregate spec-engine lifecycle events into host test results."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def aggregate(
    events: str = typer.Argument(
        ...,
        help="Path to a JSONL file of recorded lifecycle events",
    ),
    test_path: Optional[str] = typer.Option(
        None,
        "--test-path",
        help="Test file the events belong to (defaults to the events path)",
    ),
    config: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to specledger.yaml or a directory containing it",
    ),
    output_dir: Optional[str] = typer.Option(
        None,
        "--output-dir",
        help="Output directory override",
    ),
    junit: bool = typer.Option(False, "--junit", help="Also write junit.xml"),
) -> None:
    """Replay recorded events and write the run summary."""
    events_path = Path(events)

    try:
        reporter_config = load_config(Path(config)) if config else ReporterConfig()
    except Exception as exc:
        console.print(f"[red]Failed to load config:[/red] {exc}")
        raise typer.Exit(code=1)

    aggregator = RunAggregator(
        reporter_config.global_config,
        reporter_config.project,
        test_path or str(events_path),
    )
    try:
        with events_path.open(encoding="utf-8") as stream:
            future = replay_events(aggregator, iter_jsonl(stream))
    except Exception as exc:
        console.print(f"[red]Failed to read events:[/red] {exc}")
        raise typer.Exit(code=1)

    if not future.done():
        console.print("[red]Event stream ended before run_done; no summary produced[/red]")
        raise typer.Exit(code=1)
    try:
        summary = future.result()
    except Exception as exc:
        console.print(f"[red]Failed to assemble summary:[/red] {exc}")
        raise typer.Exit(code=1)

    base_dir = Path(
        output_dir or reporter_config.global_config.output_dir or "specledger_out"
    )
    summary_path = write_summary(base_dir, summary)
    if junit:
        write_junit(base_dir, summary)

    table = Table(title="Spec Results", show_lines=False)
    table.add_column("Spec")
    table.add_column("Status")
    table.add_column("Duration (ms)", justify="right")
    for result in summary.test_results:
        duration = "-" if result.duration is None else str(result.duration)
        table.add_row(format_result_title(result), _STATUS_STYLES[result.status], duration)
    console.print(table)
    if summary.failure_message:
        console.print(summary.failure_message, markup=False, highlight=False)
    console.print(
        f"{summary.num_failing_tests} failing, {summary.num_passing_tests} passing, "
        f"{summary.num_pending_tests} pending, {summary.num_todo_tests} todo"
    )
    console.print(f"Summary written to: {summary_path}")

    raise typer.Exit(code=0 if summary.num_failing_tests == 0 else 1)
