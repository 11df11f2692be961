"""CLI entry point for the timetable optimizer."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from .config import ConfigLoader, load_json
from .edit_rules import SubjectRule, apply_scheduling_rules
from .engine import SchedulingBudget
from .exceptions import InvalidRequestError, OptimizerError
from .excel_generator import generate_timetable_excel
from .exporter import export_result_json, load_result
from .models import ScheduleEntry
from .optimizer import optimize_schedule
from .reporting import schedule_statistics, teacher_load_frame

app = typer.Typer(
    name="timetable-optimizer",
    help="Generate weekly school timetables with a greedy constraint-aware scheduler",
    add_completion=False,
)
console = Console()

DEFAULT_OUTPUT = Path("output/timetable.json")
DEFAULT_EXCEL_OUTPUT = Path("output/timetable.xlsx")


def _configure_logging(verbose: bool) -> None:
    # Log records are shown only with -v
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _fail(error: Exception) -> None:
    console.print(f"[bold red]Error:[/bold red] {error}")
    raise typer.Exit(1)


@app.command()
def optimize(
    request_file: Annotated[
        Path,
        typer.Argument(help="Scheduling request JSON file"),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("-o", "--output", help="Output JSON file path"),
    ] = None,
    rooms_csv: Annotated[
        Optional[Path],
        typer.Option("--rooms", help="rooms.csv replacing the request's rooms"),
    ] = None,
    max_iterations: Annotated[
        Optional[int],
        typer.Option("--max-iterations", help="Stop after this many slot checks"),
    ] = None,
    time_limit: Annotated[
        Optional[float],
        typer.Option("--time-limit", help="Stop after this many seconds"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Show detailed output"),
    ] = False,
) -> None:
    """Generate a timetable from a scheduling request."""
    _configure_logging(verbose)

    try:
        config = ConfigLoader(request_file, rooms_csv=rooms_csv)
    except OptimizerError as e:
        _fail(e)

    budget = config.budget
    if max_iterations is not None or time_limit is not None:
        budget = SchedulingBudget(max_iterations=max_iterations, time_limit=time_limit)

    request = config.request
    console.print(f"\n[bold]Timetable generation for:[/bold] {request_file.name}")
    console.print(f"  Classes: {len(request.classes)}")
    console.print(f"  Subjects: {len(request.subjects)}")
    console.print(f"  Teachers: {len(request.teachers)}")
    console.print(f"  Rooms: {len(request.rooms)}")

    with console.status("[bold green]Building timetable..."):
        result = optimize_schedule(request, weights=config.weights, budget=budget)

    console.print(f"\n[bold]Score:[/bold] {result.score}/100")
    console.print(f"  Scheduled periods: {result.total_entries}")

    constraint_table = Table(title="Constraints")
    constraint_table.add_column("Constraint", style="cyan")
    constraint_table.add_column("Status")
    for name in result.satisfied_constraints:
        constraint_table.add_row(name, "[green]satisfied[/green]")
    for name in result.violated_constraints:
        constraint_table.add_row(name, "[red]violated[/red]")
    if result.satisfied_constraints or result.violated_constraints:
        console.print(constraint_table)

    if result.suggestions:
        console.print(f"\n[bold yellow]Suggestions ({len(result.suggestions)}):[/bold yellow]")
        shown = result.suggestions if verbose else result.suggestions[:10]
        for suggestion in shown:
            console.print(f"  [yellow]• {suggestion}[/yellow]")
        if len(shown) < len(result.suggestions):
            console.print(f"  [yellow]... and {len(result.suggestions) - len(shown)} more[/yellow]")

    output_path = output or DEFAULT_OUTPUT
    if output_path.suffix != ".json":
        output_path = output_path.with_suffix(".json")
    with console.status(f"[bold green]Exporting to {output_path}..."):
        export_result_json(result, output_path)
    console.print(f"\n[bold green]✓[/bold green] Timetable exported to: {output_path}")


@app.command()
def stats(
    result_file: Annotated[
        Path,
        typer.Argument(help="Timetable JSON file from the optimize command"),
    ],
) -> None:
    """Show load statistics for a generated timetable."""
    try:
        result = load_result(result_file)
    except OptimizerError as e:
        _fail(e)

    statistics = schedule_statistics(result)

    overview_table = Table(title="Overview", show_header=False)
    overview_table.add_column("Metric", style="cyan")
    overview_table.add_column("Value", style="green")
    overview_table.add_row("Score", str(statistics["score"]))
    overview_table.add_row("Scheduled Periods", str(statistics["total_entries"]))
    overview_table.add_row("Violated Constraints", str(statistics["violated_constraints"]))
    overview_table.add_row("Suggestions", str(statistics["suggestions"]))
    overview_table.add_row("Teacher Idle Periods", str(statistics["teacher_idle_time"]))
    overview_table.add_row("Workload Balance", str(statistics["workload_balance"]))
    console.print(overview_table)

    day_table = Table(title="Periods by Day")
    day_table.add_column("Day", style="cyan")
    day_table.add_column("Count", style="green")
    for day, count in statistics["by_day"].items():
        day_table.add_row(day, str(count))
    console.print(day_table)

    frame = teacher_load_frame(result.schedule)
    if not frame.empty:
        load_table = Table(title="Teacher Load")
        load_table.add_column("Teacher", style="cyan")
        for column in frame.columns:
            load_table.add_column(str(column)[:3], style="green")
        for teacher, counts in frame.iterrows():
            load_table.add_row(str(teacher), *(str(int(v)) for v in counts))
        console.print(load_table)


@app.command("generate-excel")
def generate_excel(
    result_file: Annotated[
        Path,
        typer.Argument(help="Timetable JSON file from the optimize command"),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("-o", "--output", help="Output .xlsx path"),
    ] = None,
) -> None:
    """Generate an Excel workbook from a timetable JSON file."""
    try:
        result = load_result(result_file)
    except OptimizerError as e:
        _fail(e)

    output_path = output or DEFAULT_EXCEL_OUTPUT
    with console.status("[bold green]Generating Excel file..."):
        written = generate_timetable_excel(result, output_path)
    console.print(f"\n[bold green]✓[/bold green] Workbook written to: {written}")


@app.command("check-edit")
def check_edit(
    result_file: Annotated[
        Path,
        typer.Argument(help="Timetable JSON file holding the current schedule"),
    ],
    candidate_file: Annotated[
        Path,
        typer.Argument(help="JSON file with the entry to insert or update"),
    ],
    rules_file: Annotated[
        Optional[Path],
        typer.Option("--rules", help="JSON object: subject id -> {priority, is_solo, can_co_run, name}"),
    ] = None,
) -> None:
    """Check whether a manual timetable edit is allowed."""
    try:
        result = load_result(result_file)
        candidate_data = load_json(candidate_file)
        try:
            candidate = ScheduleEntry.from_dict(candidate_data)
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidRequestError(str(e), "candidate") from e
        rules: dict = {}
        if rules_file is not None:
            subject_ids = {entry.subject_id for entry in result.schedule}
            subject_ids.add(candidate.subject_id)
            rules_data = load_json(rules_file)
            if not isinstance(rules_data, dict):
                raise InvalidRequestError("expected an object", "rules")
            for key, value in rules_data.items():
                if not isinstance(value, dict):
                    raise InvalidRequestError(f"expected an object for subject {key}", "rules")
                try:
                    rule = SubjectRule.from_dict(value)
                except (TypeError, ValueError) as e:
                    raise InvalidRequestError(str(e), "rules") from e
                rules[key] = rule
                # JSON object keys are strings; match numeric subject ids too
                for subject_id in subject_ids:
                    if str(subject_id) == key:
                        rules[subject_id] = rule
    except OptimizerError as e:
        _fail(e)

    decision = apply_scheduling_rules(result.schedule, candidate, rules)
    if not decision.allowed:
        console.print(f"[bold red]✗ Edit rejected:[/bold red] {decision.error}")
        raise typer.Exit(1)

    console.print("[bold green]✓ Edit allowed[/bold green]")
    for entry_id in decision.entries_to_delete:
        console.print(f"  [yellow]- replaces {entry_id}[/yellow]")


if __name__ == "__main__":
    app()
