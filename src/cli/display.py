"""Display utilities for pace CLI with Rich formatting."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from src.shared.models import Metric

console = Console()


def display_smoothing(method: str, raw: list[float], smoothed: list[float]) -> None:
    """Display raw readings next to their smoothed values."""
    table = Table(title=f"Smoothed Pace ({method})", show_header=True, border_style="cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Raw", justify="right")
    table.add_column("Smoothed", justify="right", style="green")

    for index, (raw_value, smoothed_value) in enumerate(zip(raw, smoothed, strict=True), start=1):
        table.add_row(str(index), f"{raw_value:g}", f"{smoothed_value:.3f}")

    console.print(table)


def display_metric_pages(title: str, pages: list[list[Metric]]) -> None:
    """Display workout metrics, one panel per page."""
    for page in pages:
        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("Metric", style="dim")
        table.add_column("Value", style="bold yellow", justify="right")

        for metric in page:
            table.add_row(metric.label or "", metric.formatted_value)

        console.print(Panel(table, title=f"[bold cyan]{title}[/bold cyan]", border_style="cyan"))


def display_error(message: str) -> None:
    """Display error message."""
    console.print(f"[red]✗[/red] {escape(message)}")


def display_warning(message: str) -> None:
    """Display warning message."""
    console.print(f"[yellow]![/yellow] {escape(message)}")
