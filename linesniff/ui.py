import os
import random
import time

import plotille
import pyfiglet
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from linesniff.detectors.models import SnippetReport

console = Console()


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def print_welcome():
    clear_screen()
    ascii_banner = pyfiglet.figlet_format("LINESNIFF", font="slant")
    console.print(f"[bold magenta]{ascii_banner}[/bold magenta]")
    console.print("[dim]" + "─" * 80 + "[/dim]\n")
    console.print("[bold white]Paste a snippet and find out which lines read like a model wrote them.[/bold white]")
    console.print("[dim]Type 'help' at the prompt for commands.[/dim]\n")


def simulate_latency(min_seconds: float, max_seconds: float) -> float:
    """Spinner for a random duration, the way the hosted analyzer felt."""
    if max_seconds <= 0:
        return 0.0
    duration = random.uniform(max(min_seconds, 0.0), max_seconds)
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        transient=True,
        console=console,
    ) as progress:
        progress.add_task("[cyan]Sniffing lines...", total=None)
        time.sleep(duration)
    return duration


def format_label(is_ai: bool, blank: bool = False) -> str:
    if blank:
        return "[dim]-[/dim]"
    return "[bold red]AI[/bold red]" if is_ai else "[green]Human[/green]"


def format_confidence(confidence: float, is_ai: bool) -> str:
    if not is_ai:
        color = "green"
    elif confidence >= 0.8:
        color = "red bold"
    else:
        color = "yellow"
    return f"[{color}]{confidence * 100:.0f}%[/{color}]"


def format_reasons(reasons: list) -> str:
    return "\n".join(f"[yellow]•[/yellow] {escape(r)}" for r in reasons)


def build_report_table(report: SnippetReport, language: str) -> Table:
    table = Table(title=f"Line Analysis ({language})", show_header=True, header_style="bold magenta")
    table.add_column("#", style="dim", justify="right", width=5)
    table.add_column("Code", overflow="fold", max_width=60)
    table.add_column("Verdict", justify="center", width=8)
    table.add_column("Confidence", justify="center", width=11)
    table.add_column("Reasoning")

    for v in report.line_verdicts:
        if v.blank:
            table.add_row(str(v.line_number), "", format_label(False, blank=True), "", "")
            continue
        table.add_row(
            str(v.line_number),
            escape(v.content),
            format_label(v.is_ai),
            format_confidence(v.confidence, v.is_ai),
            format_reasons(v.justifications),
        )
    return table


def verdict_band(ai_percentage: float) -> tuple:
    if ai_percentage >= 50:
        return "🔴", "LIKELY AI-GENERATED", "bold red"
    if ai_percentage >= 25:
        return "🟡", "MIXED - PARTIALLY AI-GENERATED", "bold yellow"
    return "🟢", "LIKELY HUMAN-WRITTEN", "bold green"


def render_verdict(report: SnippetReport):
    """Render a bold final summary panel after analysis."""
    if report.total_lines == 0:
        console.print("[dim]Nothing to analyze: the snippet has no non-blank lines.[/dim]")
        return

    icon, label, color = verdict_band(report.ai_percentage)
    summary_text = (
        f"[{color}]{icon}  VERDICT: {label}[/{color}]\n\n"
        f"  AI-Generated Lines   : [bold red]{report.ai_lines}[/bold red] ({report.ai_percentage:.1f}%)\n"
        f"  Human-Written Lines  : [bold green]{report.human_lines}[/bold green] ({report.human_percentage:.1f}%)\n"
        f"  Lines Analyzed       : {report.total_lines}\n"
        f"  Overall Confidence   : {report.overall_confidence * 100:.1f}%"
    )

    console.print()
    console.print(Panel(
        summary_text,
        title="[bold]Analysis Complete[/bold]",
        border_style=color.replace("bold ", ""),
        expand=False,
        padding=(1, 4)
    ))
    console.print()


def render_confidence_chart(report: SnippetReport):
    lines = [v for v in report.line_verdicts if not v.blank]
    if len(lines) < 3:
        console.print("[dim]Not enough lines to chart (need at least 3 non-blank lines).[/dim]")
        return

    console.print("\n[bold cyan]AI-Likelihood Per Line (High = AI, Low = Human)[/bold cyan]")

    x_data = [v.line_number for v in lines]
    y_data = [v.confidence if v.is_ai else 1.0 - v.confidence for v in lines]

    fig = plotille.Figure()
    fig.width = 60
    fig.height = 15
    fig.set_x_limits(min_=x_data[0], max_=max(x_data[-1], x_data[0] + 1))
    fig.set_y_limits(min_=0.0, max_=1.0)
    fig.y_label = "AI-Likelihood"
    fig.x_label = "Line"

    plot_color = 'green' if report.ai_percentage < 25 else 'yellow' if report.ai_percentage < 50 else 'red'
    fig.plot(x_data, y_data, lc=plot_color)

    print(fig.show())
