"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import Iterable, List, NoReturn, Optional, Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..adapters.schedule_file import ScheduleFile
from ..config import AppConfig
from ..domain.collection import PeriodCollection
from ..domain.exceptions import PeriodError
from ..domain.period import Period
from ..services.availability import AvailabilityCalculator, AvailabilityService

app = typer.Typer(
    name="timeperiods",
    help="Precision-aware interval algebra over date/time periods",
    add_completion=False
)

console = Console()

logger = logging.getLogger(__name__)

ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Path to config file. Defaults to ./timeperiods.yaml"),
]


def _load_config(config_file: Optional[Path]) -> AppConfig:
    """Load configuration and route log records through rich."""
    config = AppConfig.load(config_file)
    logging.basicConfig(
        level=config.get_log_level(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )
    return config


def _parse_period(text: str, config: AppConfig) -> Period:
    """
    Parse a period argument.

    Bracket notation carries its own precision and boundaries; a bare
    ``START,END`` pair uses the configured defaults.
    """
    tz = config.defaults.get_tzinfo()
    stripped = text.strip()

    if stripped[:1] in ("[", "("):
        return Period.from_string(stripped, tz=tz)

    start, separator, end = stripped.partition(",")
    if not separator:
        raise ValueError(f"Expected 'START,END' or bracket notation, got '{text}'")

    return Period.make(
        start.strip(),
        end.strip(),
        precision=config.defaults.get_precision(),
        boundaries=config.defaults.get_boundaries(),
        tz=tz,
    )


def _print_periods(periods: Iterable[Period], config: AppConfig, title: str) -> None:
    """Render periods as a table, or a notice when there are none."""
    periods = list(periods)

    if not periods:
        console.print(f"[yellow]⚠ {title}: no periods.[/yellow]")
        return

    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Period", style="bold yellow")
    if config.display.show_included:
        table.add_column("Included start", style="dim")
        table.add_column("Included end", style="dim")
    if config.display.show_length:
        table.add_column("Length", justify="right")

    for period in periods:
        row = [period.as_string()]
        if config.display.show_included:
            row.append(period.precision.format_date(period.included_start))
            row.append(period.precision.format_date(period.included_end))
        if config.display.show_length:
            row.append(f"{period.length()} {period.precision.unit}(s)")
        table.add_row(*row)

    console.print()
    console.print(table)
    console.print()


def _fail(exc: Exception) -> NoReturn:
    console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
    raise typer.Exit(1)


@app.command()
def show(
    period: Annotated[str, typer.Argument(help="Period, e.g. '[2022-01-01, 2022-01-31)'")],
    config_file: ConfigOption = None,
):
    """
    Show a period with its precision, boundaries and length.
    """
    try:
        config = _load_config(config_file)
        parsed = _parse_period(period, config)
    except (PeriodError, ValueError, FileNotFoundError) as e:
        _fail(e)

    included_start = parsed.precision.format_date(parsed.included_start)
    included_end = parsed.precision.format_date(parsed.included_end)
    console.print(Panel.fit(
        f"[bold]Precision:[/bold] {parsed.precision.unit}\n"
        f"[bold]Boundaries:[/bold] {parsed.boundaries.notation}\n"
        f"[bold]Included:[/bold] {included_start} – {included_end}\n"
        f"[bold]Length:[/bold] {parsed.length()} {parsed.precision.unit}(s)",
        title=parsed.as_string()
    ))


@app.command()
def overlap(
    periods: Annotated[List[str], typer.Argument(help="Two or more periods")],
    config_file: ConfigOption = None,
):
    """
    Show the part shared by all given periods.

    Example:

        timeperiods overlap "[2022-01-01, 2022-01-20]" "[2022-01-10, 2022-01-31]"
    """
    try:
        config = _load_config(config_file)
        first, *rest = [_parse_period(p, config) for p in periods]
        shared = first.overlap_all(*rest)
    except (PeriodError, ValueError, FileNotFoundError) as e:
        _fail(e)

    _print_periods([shared] if shared is not None else [], config, "Overlap")


@app.command()
def subtract(
    period: Annotated[str, typer.Argument(help="Period to subtract from")],
    others: Annotated[List[str], typer.Argument(help="Periods to remove")],
    config_file: ConfigOption = None,
):
    """
    Show what remains of a period once the others are removed.
    """
    try:
        config = _load_config(config_file)
        base = _parse_period(period, config)
        remainders = base.subtract(*[_parse_period(p, config) for p in others])
    except (PeriodError, ValueError, FileNotFoundError) as e:
        _fail(e)

    _print_periods(remainders, config, "Remainder")


@app.command()
def gaps(
    periods: Annotated[List[str], typer.Argument(help="Periods of the collection")],
    config_file: ConfigOption = None,
):
    """
    Show the gaps between the given periods.
    """
    try:
        config = _load_config(config_file)
        collection = PeriodCollection(*[_parse_period(p, config) for p in periods])
        found = collection.gaps()
    except (PeriodError, ValueError, FileNotFoundError) as e:
        _fail(e)

    _print_periods(found, config, "Gaps")


@app.command()
def free(
    schedule: Annotated[Path, typer.Argument(help="YAML file with busy periods per participant")],
    window: Annotated[str, typer.Option("--window", "-w", help="Period to search in")],
    participant: Annotated[Optional[List[str]], typer.Option("--participant", "-p", help="Participant to include. Defaults to everyone in the file.")] = None,
    min_length: Annotated[int, typer.Option("--min-length", "-m", help="Minimum length in precision units")] = 1,
    config_file: ConfigOption = None,
):
    """
    Find the periods in a window when all participants are free.

    Examples:

        timeperiods free schedule.yaml --window "[2022-01-03 08, 2022-01-03 18)"

        timeperiods free schedule.yaml -w "[2022-01-03 08, 2022-01-07 18)" -p alice -p bob -m 2
    """
    try:
        config = _load_config(config_file)
        search_window = _parse_period(window, config)
        source = ScheduleFile.load(schedule, tz=config.defaults.get_tzinfo())
        participants = participant or source.participants

        service = AvailabilityService(
            schedule_source=source,
            calculator=AvailabilityCalculator(min_length=min_length),
        )
        found = service.find_free_periods(participants=participants, window=search_window)
    except (PeriodError, ValueError, FileNotFoundError) as e:
        _fail(e)

    logger.info("Searched %s for %s", search_window, ", ".join(participants))
    _print_periods(found, config, "Free")


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]timeperiods[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
