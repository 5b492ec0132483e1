"""Main CLI application using Typer."""
import asyncio

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from .. import __version__
from ..errors import ChatError
from ..session import plan_operations
from .providers import configure_logging, get_controller

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="chat",
    help="Chat with a completion endpoint, keeping the conversation on disk",
    add_completion=False,
)

# Console for rich output
console = Console()
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"gptchat {__version__}")
        raise typer.Exit()


@app.command()
def main(
    prompt: str | None = typer.Argument(
        None,
        help="Prompt to send; the reply is appended to the history"
    ),
    clean: bool = typer.Option(
        False,
        "--clean",
        "-c",
        help="Clean history and exit without chatting"
    ),
    hint: str | None = typer.Option(
        None,
        "--hint",
        "-H",
        help="Set the system hint stored with the history"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log debug output to stderr"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit"
    ),
):
    """Send PROMPT with the stored history, or update the stored state."""
    configure_logging(verbose)
    operations = plan_operations(clean=clean, hint=hint, prompt=prompt)

    async def _run():
        controller = get_controller(console)
        await controller.run(operations)

    try:
        asyncio.run(_run())
    except ChatError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
