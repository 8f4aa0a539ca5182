"""Main CLI application using Typer."""
import asyncio
import logging
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from ..document import DocumentRenderer
from ..errors import UploadError
from ..prompts import get_system_prompt
from ..session import SessionState
from ..turns import TurnController
from ..upload import load_csv
from .providers import get_answer_provider

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="csvchat",
    help="Chat with your CSV data: answers with tables and charts in the terminal",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()

LOG_LEVELS = ("debug", "info", "warning", "error")


def _parse_level(log_level: str | None) -> int | None:
    if log_level is None:
        return None
    if log_level.lower() not in LOG_LEVELS:
        console.print(f"[red]Error: Unknown log level: {log_level}[/red]")
        raise typer.Exit(code=1)
    return getattr(logging, log_level.upper())


def configure_logging(log_level: str | None) -> None:
    """Send csvchat logs to stderr through rich."""
    level = _parse_level(log_level)
    if level is None:
        return
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )


def configure_tui_logging(log_level: str | None) -> None:
    """Send csvchat logs to the Textual devtools console."""
    from textual.logging import TextualHandler

    level = _parse_level(log_level)
    if level is None:
        return
    logging.basicConfig(level=level, handlers=[TextualHandler()])


def _load_or_exit(path: Path):
    try:
        return load_csv(path)
    except UploadError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)


@app.command()
def chat(
    csv_file: Path | None = typer.Argument(
        None,
        help="CSV file to load on start"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Log to the Textual console: debug, info, warning, or error"
    ),
):
    """Launch the interactive TUI chat interface."""
    configure_tui_logging(log_level)
    document = _load_or_exit(csv_file) if csv_file is not None else None
    provider = get_answer_provider(console)

    async def _chat():
        from ..ui import run_textual_tui

        await run_textual_tui(provider, document=document, subtitle=provider.model)

    try:
        asyncio.run(_chat())
    except KeyboardInterrupt:
        pass
    console.print("[dim]Goodbye![/dim]")


@app.command()
def ask(
    csv_file: Path = typer.Argument(
        ...,
        help="CSV file to analyze"
    ),
    question: str = typer.Argument(
        ...,
        help="Question about the data"
    ),
    raw: bool = typer.Option(
        False,
        "--raw",
        "-r",
        help="Print the answer document as markdown instead of rendering it"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Log level: debug, info, warning, or error"
    ),
):
    """Ask a single question about a CSV file."""
    configure_logging(log_level)
    session = SessionState(document=_load_or_exit(csv_file))
    provider = get_answer_provider(console)

    async def _ask():
        try:
            controller = TurnController(session, provider)
            with console.status("[dim]Analyzing your data...[/dim]"):
                return await controller.submit(question)
        finally:
            await provider.close()

    outcome = asyncio.run(_ask())
    if outcome is None:
        console.print("[red]Error: Question is empty[/red]")
        raise typer.Exit(code=1)

    if not outcome.succeeded:
        console.print(f"[red]{outcome.answer.content}[/red]")
        if outcome.error:
            console.print(f"[dim]{escape(outcome.error)}[/dim]")
        raise typer.Exit(code=1)

    if raw:
        console.print(outcome.answer.content, markup=False, highlight=False)
        return
    for renderable in DocumentRenderer().render(outcome.answer.content):
        console.print(renderable)


@app.command()
def render(
    document_file: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=True,
        dir_okay=False,
        help="Markdown document with chart blocks"
    ),
):
    """Render a saved answer document."""
    try:
        text = document_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    for renderable in DocumentRenderer().render(text):
        console.print(renderable)


@app.command()
def prompt():
    """Print the active system prompt."""
    console.print(get_system_prompt(), markup=False, highlight=False)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
