"""Duke CLI - task tracker."""

import logging
import sys

import click

from .adapters.json_store import JsonTaskStore
from .config import load_config
from .core import messages
from .core.errors import DukeError
from .core.formatting import make_formatted_text
from .session import Session


def _open_session() -> Session:
    config = load_config()
    return Session(JsonTaskStore(config.data_file))


@click.group(invoke_without_command=True)
@click.version_option(package_name="duke")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, debug: bool):
    """Duke - keeps track of your todos, deadlines and events."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )
    if ctx.invoked_subcommand is None:
        ctx.invoke(chat)


@main.command()
def chat():
    """Interactive session (the default)."""
    session = _open_session()
    click.echo(make_formatted_text(messages.GREET_HELLO))

    while True:
        try:
            line = click.prompt("", prompt_suffix="", default="", show_default=False)
        except click.Abort:
            # End of input
            click.echo()
            break

        line = line.strip()
        if not line:
            continue

        reply = session.handle(line)
        click.echo(make_formatted_text(reply.text))
        if reply.terminate:
            break


@main.command()
@click.argument("words", nargs=-1, required=True)
def run(words: tuple[str, ...]):
    """Run a single command, e.g. 'duke run todo read book'."""
    session = _open_session()
    try:
        reply = session.execute(" ".join(words))
    except DukeError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)
    click.echo(reply.text)


@main.command("help")
def help_cmd():
    """Show the command grammar."""
    click.echo(messages.HELP_TEXT)


@main.command()
def bot():
    """Run the Telegram bot."""
    try:
        from .telegram_bot import run_bot
        click.echo("Starting Duke Telegram bot...")
        click.echo("Press Ctrl+C to stop")
        run_bot()
    except ImportError as e:
        click.echo("Error: Missing dependencies. Run 'pip install python-telegram-bot telegramify-markdown'", err=True)
        click.echo(f"Details: {e}", err=True)
        sys.exit(1)
    except ValueError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        click.echo("\nBot stopped.")


if __name__ == "__main__":
    main()
