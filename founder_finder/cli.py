"""
Command-line interface for Founder Finder.

Uses Typer to provide a CLI with options for the most common
configuration settings. Supports loading .env files for the
User-Agent override.
"""

from __future__ import annotations

from pathlib import Path
import signal

from dotenv import load_dotenv
import typer
from rich.console import Console

from .config import load_config
from .core.clock import Sleeper
from .runner import run_pipeline

app = typer.Typer(add_completion=False)
console = Console()


@app.command()
def run(
    input: Path = typer.Argument(
        ...,
        exists=True,
        readable=True,
        dir_okay=False,
        help="Company list, one per line, optionally 'Name (https://url)'.",
    ),
    output: Path | None = typer.Argument(
        None, help="Output JSON file (default from config: founders.json)."
    ),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True, dir_okay=False),
    progress: bool = typer.Option(True, "--progress/--no-progress"),
    delay: float | None = typer.Option(
        None, "--delay", help="Seconds to wait between companies."
    ),
    user_agent: str | None = typer.Option(
        None, "--user-agent", help="Override the User-Agent sent with every request."
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    log_file: bool | None = typer.Option(
        None, "--log-file/--no-log-file", help="Enable or disable file logging."
    ),
):
    """Find company founders on Wikipedia.

    Resolves each company to a Wikipedia article, reads the founder row
    of its infobox and writes a JSON mapping of company to founders.

    Args:
        input: Path to the company list
        output: Path of the JSON file to write
        config: Optional path to YAML config file
        progress: Whether to show progress bar
        delay: Pause between companies in seconds
        user_agent: User-Agent header override
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Enable/disable file logging
    """
    # Load environment variables from .env if available
    load_dotenv()

    # Load base configuration
    cfg = load_config(str(config) if config else None)

    # Override with CLI options
    if delay is not None:
        cfg.batch.delay_seconds = delay
    if user_agent:
        cfg.fetch.user_agent = user_agent
        cfg.fetch.user_agent_env = ""
    if log_level:
        cfg.logging.level = log_level
    if log_file is not None:
        cfg.logging.file = log_file

    output_path = output or Path(cfg.output.default_filename)

    sleeper = Sleeper()
    previous_handler = signal.signal(signal.SIGINT, _interrupt_handler(sleeper))
    try:
        written = run_pipeline(
            input, output_path, cfg, show_progress=progress, console=console, sleeper=sleeper
        )
    except OSError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc
    finally:
        signal.signal(signal.SIGINT, previous_handler)

    if sleeper.cancelled:
        console.print(f"[yellow]Interrupted[/yellow]; partial results written to: {written}")
    else:
        console.print(f"Founders written: {written}")


def _interrupt_handler(sleeper: Sleeper):
    """Build a SIGINT handler that requests a graceful stop.

    The first interrupt cancels the shared sleeper: the wait in progress
    aborts, the current company fails cleanly and no further companies are
    started. A second interrupt stops immediately.
    """

    def handler(signum, frame):  # noqa: ANN001
        if sleeper.cancelled:
            raise KeyboardInterrupt
        console.print("[yellow]Interrupt received; stopping after the current company.[/yellow]")
        sleeper.cancel()

    return handler


if __name__ == "__main__":
    app()
