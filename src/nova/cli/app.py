"""Main CLI application using Typer."""
import asyncio

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..errors import EmptyInput, ensure_utterance
from ..intent import TimezoneResolver
from ..session import ConversationSession, Role
from ..ui.config import LogLevel
from .providers import console_debug_callback, get_generator, get_recognizer, get_synthesizer

load_dotenv()

app = typer.Typer(
    name="nova",
    help="Nova: chat with a local assistant backed by a remote generation service",
    no_args_is_help=True,
    add_completion=True,
)

console = Console()
err_console = Console(stderr=True)


def _check_log_level(value: str | None) -> str | None:
    if value is not None and value.lower() not in LogLevel.choices():
        raise typer.BadParameter(f"must be one of: {', '.join(LogLevel.choices())}")
    return value


@app.command()
def chat(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show the log panel at this level (debug, info, warning, error)",
        callback=_check_log_level,
    ),
    voice: bool = typer.Option(
        True,
        "--voice/--no-voice",
        help="Enable microphone input and spoken replies"
    ),
):
    """Start the interactive chat UI."""
    from ..ui import run_textual_tui

    async def _chat():
        generator = get_generator(err_console)
        session = ConversationSession(
            generator=generator,
            recognizer=get_recognizer() if voice else None,
            synthesizer=get_synthesizer(err_console) if voice else None,
        )
        try:
            await run_textual_tui(session, log_level=log_level)
        finally:
            if generator is not None:
                await generator.close()

    asyncio.run(_chat())


@app.command()
def ask(
    question: str = typer.Argument(..., help="Utterance to submit"),
    log_level: str = typer.Option(
        "warning",
        "--log-level",
        "-l",
        help="Minimum level of log lines printed to stderr",
        callback=_check_log_level,
    ),
):
    """Submit a single utterance and print the reply."""
    async def _ask() -> str | None:
        generator = get_generator(err_console)
        session = ConversationSession(generator=generator)
        session.set_debug_callback(console_debug_callback(err_console, log_level))
        try:
            if not session.submit(question):
                return None
            await session.wait_idle()
            last = session.messages[-1]
            return last.text if last.role == Role.ASSISTANT else None
        finally:
            session.close()
            if generator is not None:
                await generator.close()

    try:
        ensure_utterance(question)
    except EmptyInput:
        err_console.print("[yellow]Nothing to ask.[/yellow]")
        raise typer.Exit(code=1)

    reply = asyncio.run(_ask())
    if reply is None:
        err_console.print("[red]No reply.[/red] [dim]Re-run with --log-level info for details.[/dim]")
        raise typer.Exit(code=1)
    console.print(escape(reply))


@app.command()
def zones():
    """List the place names and abbreviations understood in time questions."""
    table = Table(title="Known time zones")
    table.add_column("Phrase", style="cyan")
    table.add_column("Zone", style="green")

    for phrase, zone in sorted(TimezoneResolver().known_zones().items()):
        table.add_row(phrase, zone)

    console.print(table)
    console.print("[dim]Any other IANA identifier (e.g. 'in Europe/Berlin') is used as given.[/dim]")


if __name__ == "__main__":
    app()
