import json
import sys
from pathlib import Path
from typing import Optional

import questionary
import typer
from rich.panel import Panel

from linesniff.config import settings
from linesniff.detectors.models import SnippetReport
from linesniff.detectors.scoring import analyze
from linesniff.languages import is_known, known_languages, normalize_language, resolve_language
from linesniff.logging import get_logger, setup_logging
from linesniff.ui import (
    build_report_table,
    clear_screen,
    console,
    print_welcome,
    render_confidence_chart,
    render_verdict,
    simulate_latency,
)

logger = get_logger("cli")
app = typer.Typer(help="linesniff: line-level AI-likelihood detection for code snippets", add_completion=False)


def _read_source(path: Optional[str]):
    """Return (code, error). A missing path or '-' reads stdin."""
    if path is None or path == "-":
        return sys.stdin.read(), None
    p = Path(path)
    if not p.is_file():
        return None, f"'{path}' is not a readable file."
    try:
        return p.read_text(encoding="utf-8", errors="replace"), None
    except OSError as e:
        return None, f"Could not read '{path}': {e}"


def _run_analysis(code: str, language: str) -> SnippetReport:
    if not is_known(language):
        logger.warning(
            "Unknown language '%s', applying general patterns only", language,
            extra={"language": language},
        )
    return analyze(code, language)


def _render(report: SnippetReport, language: str, chart: bool = True):
    console.print(build_report_table(report, language))
    if chart:
        render_confidence_chart(report)
    render_verdict(report)


@app.callback()
def main_callback(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override LINESNIFF_LOG_LEVEL"),
):
    setup_logging(log_level)


@app.command(name="analyze")
def analyze_cmd(
    path: Optional[str] = typer.Argument(None, help="File to analyze ('-' or omitted reads stdin)"),
    language: Optional[str] = typer.Option(None, "--language", "-l", help="Language identifier (javascript, python, typescript, ...)"),
    export_json: bool = typer.Option(False, "--json", help="Export the report as JSON"),
    delay: bool = typer.Option(True, "--delay/--no-delay", help="Simulate processing latency before showing results"),
    chart: bool = typer.Option(True, "--chart/--no-chart", help="Draw the per-line AI-likelihood chart"),
):
    """Classify each line of a snippet as AI-generated or human-written."""
    code, err = _read_source(path)
    if err:
        logger.error("Failed to read input", extra={"path": path, "error": err})
        if export_json:
            print(json.dumps({"error": err}))
        else:
            console.print(f"[bold red]Error[/bold red]: {err}")
        raise typer.Exit(code=1)

    lang = resolve_language(language, path if path != "-" else None, settings.DEFAULT_LANGUAGE)
    logger.info("Analyzing input", extra={"path": path or "<stdin>", "language": lang})

    report = _run_analysis(code, lang)

    if export_json:
        payload = report.to_dict()
        payload["language"] = lang
        print(json.dumps(payload, indent=2))
        return

    if delay:
        simulate_latency(settings.DELAY_MIN, settings.DELAY_MAX)
    _render(report, lang, chart=chart)


@app.command(name="languages")
def languages_cmd():
    """List languages with dedicated detection patterns."""
    for name in known_languages():
        console.print(f"  [bold]{name}[/bold]")
    console.print("[dim]Any other identifier is accepted and uses the general patterns only.[/dim]")


def _pick_language(current: str) -> str:
    choice = questionary.select(
        "Which language is the snippet written in?",
        choices=known_languages() + ["other"],
        default=current if is_known(current) else None,
    ).ask()
    if choice is None:
        return current
    return choice


def _read_pasted_code() -> str:
    console.print("[dim]Paste your code, then type 'EOF' on its own line.[/dim]")
    lines = []
    while True:
        try:
            line = input()
        except EOFError:
            break
        if line.strip() == "EOF":
            break
        lines.append(line)
    return "\n".join(lines)


@app.command(name="interactive")
def interactive_cmd():
    """Start an interactive session: pick a language, paste code, read the verdict."""
    print_welcome()
    language = _pick_language(normalize_language(settings.DEFAULT_LANGUAGE))
    console.print(f"[bold green]✔[/bold green] Language set to '{language}'\n")

    while True:
        try:
            try:
                raw_input = input(f"[{language}] linesniff> ")
            except EOFError:
                raw_input = None

            if raw_input is None:
                console.print("\n[dim]Session terminated.[/dim]")
                break

            command = raw_input.strip()
            lowered = command.lower()

            if not command:
                continue

            if lowered in ["exit", "quit", "q"]:
                console.print("[dim]Goodbye![/dim]")
                break

            elif lowered == "clear":
                clear_screen()
                print_welcome()

            elif lowered in ["help", "?"]:
                console.print(Panel(
                    "[bold cyan]Available Commands:[/bold cyan]\n"
                    "  [bold]paste[/bold]          - Paste a snippet and analyze it\n"
                    "  [bold]open <path>[/bold]    - Analyze a file from disk\n"
                    "  [bold]lang [name][/bold]    - Change the snippet language\n"
                    "  [bold]clear[/bold]          - Clear the terminal screen\n"
                    "  [bold]exit[/bold]           - Quit the session",
                    title="linesniff Help",
                    border_style="cyan",
                    expand=False
                ))

            elif lowered == "lang":
                language = _pick_language(language)
                console.print(f"[green]Language changed to:[/green] {language}")

            elif lowered.startswith("lang "):
                language = normalize_language(command[5:])
                if not is_known(language):
                    console.print(f"[yellow]'{language}' has no dedicated patterns; general patterns only.[/yellow]")
                console.print(f"[green]Language changed to:[/green] {language}")

            elif lowered == "paste":
                code = _read_pasted_code()
                report = _run_analysis(code, language)
                simulate_latency(settings.DELAY_MIN, settings.DELAY_MAX)
                _render(report, language)

            elif lowered.startswith("open "):
                path = command[5:].strip()
                code, err = _read_source(path)
                if err:
                    console.print(f"[bold red]Error[/bold red]: {err}")
                    continue
                file_language = resolve_language(None, path, language)
                report = _run_analysis(code, file_language)
                simulate_latency(settings.DELAY_MIN, settings.DELAY_MAX)
                _render(report, file_language)

            else:
                console.print(f"[yellow]Unknown command:[/yellow] '{command}'. Type 'help' to see available commands.")

        except KeyboardInterrupt:
            console.print("\n[dim]Session terminated.[/dim]")
            break
        except Exception as e:
            logger.exception("Interactive command failed")
            console.print(f"[bold red]An unexpected error occurred:[/bold red] {e}")


def main():
    if len(sys.argv) == 1:
        setup_logging()
        interactive_cmd()
    else:
        app()


if __name__ == "__main__":
    main()
