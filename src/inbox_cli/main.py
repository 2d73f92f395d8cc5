"""Thread Inbox CLI - Main entry point."""

import typer

from inbox_cli.commands.add import add_message
from inbox_cli.commands.gui import gui
from inbox_cli.commands.inbox import inbox
from inbox_cli.commands.list import list_threads
from inbox_cli.commands.new import new_thread
from inbox_cli.commands.purge import purge
from inbox_cli.commands.reopen import reopen_thread
from inbox_cli.commands.resolve import resolve_thread
from inbox_cli.commands.show import show_thread

app = typer.Typer(
    help="Threaded conversation inbox for managing user-AI interactions",
    no_args_is_help=True,
)

app.command(name="new")(new_thread)
app.command(name="list")(list_threads)
app.command(name="inbox")(inbox)
app.command(name="show")(show_thread)
app.command(name="add")(add_message)
app.command(name="resolve")(resolve_thread)
app.command(name="reopen")(reopen_thread)
app.command(name="purge")(purge)
app.command(name="gui")(gui)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
