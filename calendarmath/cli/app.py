"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import Any, Optional, Annotated

import typer
from pendulum import DateTime
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..config import AppConfig
from ..domain.exceptions import CalendarMathError
from ..services.calendar_service import CalendarService

app = typer.Typer(
    name="calendarmath",
    help="Date and calendar calculations: timestamps, weeks, quarters and work schedules",
    add_completion=False
)

console = Console()


def _service(ctx: typer.Context) -> CalendarService:
    return ctx.obj


def _require(result: Any, value: str) -> Any:
    """Exit with an error when an operation reports an invalid date."""
    if result is None:
        console.print(f"[bold red]Error:[/bold red] '{value}' is not a valid date")
        raise typer.Exit(1)
    return result


def _show_instant(instant: DateTime) -> None:
    console.print(f"{instant.to_iso8601_string()} ({instant.format('dddd', locale='en')})")


@app.callback()
def main(
    ctx: typer.Context,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./calendarmath.yaml")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
):
    """
    Load configuration and prepare the calendar service.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )

    try:
        config = AppConfig.load_from_yaml(config_file)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    ctx.obj = CalendarService.from_config(config)


@app.command()
def timestamp(
    ctx: typer.Context,
    date: Annotated[str, typer.Argument(help="Date and time, e.g. '04 Dec 1995 00:12:00 UTC'")],
):
    """
    Print milliseconds elapsed since 1970-01-01T00:00:00Z.
    """
    console.print(_require(_service(ctx).date_to_timestamp(date), date))


@app.command("time")
def time_of_day(
    ctx: typer.Context,
    date: Annotated[str, typer.Argument(help="Date and time (ISO 8601)")],
):
    """
    Print the local time of day as HH:mm:ss.
    """
    console.print(_require(_service(ctx).get_time(date), date))


@app.command()
def day_name(
    ctx: typer.Context,
    date: Annotated[str, typer.Argument(help="Date and time (ISO 8601)")],
):
    """
    Print the weekday name.
    """
    console.print(_require(_service(ctx).get_day_name(date), date))


@app.command("format")
def format_command(
    ctx: typer.Context,
    date: Annotated[str, typer.Argument(help="Date and time (ISO 8601)")],
):
    """
    Print the date as 'M/D/YYYY, h:mm:ss AM|PM' in UTC.
    """
    console.print(_require(_service(ctx).format_date(date), date))


@app.command()
def period_days(
    ctx: typer.Context,
    start: Annotated[str, typer.Argument(help="Period start (ISO 8601)")],
    end: Annotated[str, typer.Argument(help="Period end (ISO 8601)")],
):
    """
    Print the number of days in a period, both ends included.
    """
    console.print(_require(_service(ctx).get_count_days_on_period(start, end), f"{start} / {end}"))


@app.command()
def in_period(
    ctx: typer.Context,
    date: Annotated[str, typer.Argument(help="Date to check (ISO 8601)")],
    start: Annotated[str, typer.Argument(help="Period start (ISO 8601)")],
    end: Annotated[str, typer.Argument(help="Period end (ISO 8601)")],
):
    """
    Check whether a date lies in a period, both ends included.
    """
    if _service(ctx).is_date_in_period(date, {"start": start, "end": end}):
        console.print("[green]✓ yes[/green]")
    else:
        console.print("[yellow]✗ no[/yellow]")


@app.command()
def days_in_month(
    ctx: typer.Context,
    month: Annotated[int, typer.Argument(help="Month (1-12)")],
    year: Annotated[int, typer.Argument(help="Four-digit year")],
):
    """
    Print the number of days in a month.
    """
    try:
        console.print(_service(ctx).get_count_days_in_month(month, year))
    except CalendarMathError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def weekends(
    ctx: typer.Context,
    month: Annotated[int, typer.Argument(help="Month (1-12)")],
    year: Annotated[int, typer.Argument(help="Four-digit year")],
):
    """
    Print the number of Saturdays and Sundays in a month.
    """
    try:
        console.print(_service(ctx).get_count_weekends_in_month(month, year))
    except CalendarMathError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def quarter(
    ctx: typer.Context,
    date: Annotated[str, typer.Argument(help="Date (ISO 8601)")],
):
    """
    Print the quarter of the year (1-4).
    """
    console.print(int(_require(_service(ctx).get_quarter(date), date)))


@app.command()
def leap_year(
    ctx: typer.Context,
    date: Annotated[str, typer.Argument(help="Date (ISO 8601)")],
):
    """
    Check whether the date's year is a leap year.
    """
    if _require(_service(ctx).is_leap_year(date), date):
        console.print("[green]✓ leap year[/green]")
    else:
        console.print("[yellow]✗ common year[/yellow]")


@app.command()
def week_number(
    ctx: typer.Context,
    date: Annotated[str, typer.Argument(help="Date (ISO 8601)")],
):
    """
    Print the week of the year (weeks start on Monday, week 1 holds January 1).
    """
    console.print(_require(_service(ctx).get_week_number_by_date(date), date))


@app.command()
def next_friday(
    ctx: typer.Context,
    date: Annotated[str, typer.Argument(help="Date (ISO 8601)")],
):
    """
    Print the next Friday after the date.
    """
    _show_instant(_require(_service(ctx).get_next_friday(date), date))


@app.command("next-friday-13th")
def next_friday_the_13th(
    ctx: typer.Context,
    date: Annotated[str, typer.Argument(help="Date (ISO 8601)")],
):
    """
    Print the next Friday the 13th.
    """
    _show_instant(_require(_service(ctx).get_next_friday_the_13th(date), date))


@app.command()
def schedule(
    ctx: typer.Context,
    start: Annotated[str, typer.Argument(help="Period start (DD-MM-YYYY)")],
    end: Annotated[str, typer.Argument(help="Period end (DD-MM-YYYY)")],
    work: Annotated[Optional[int], typer.Option("--work", "-w", help="Consecutive working days. Defaults to config.")] = None,
    off: Annotated[Optional[int], typer.Option("--off", "-o", help="Consecutive days off. Defaults to config.")] = None,
):
    """
    List the first day of each work block within a period.

    Examples:

        calendarmath schedule 01-01-2024 15-01-2024 --work 1 --off 3
    """
    service = _service(ctx)
    try:
        dates = service.get_work_schedule({"start": start, "end": end}, work, off)
    except CalendarMathError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    if not dates:
        console.print("[yellow]⚠ No schedule: check that both dates use DD-MM-YYYY.[/yellow]")
        raise typer.Exit(1)

    table = Table(
        title=f"Work schedule {start} - {end}",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("#", style="dim")
    table.add_column("Block start", style="bold yellow")

    for idx, day in enumerate(dates, 1):
        table.add_row(str(idx), day)

    console.print(table)


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]calendarmath[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
