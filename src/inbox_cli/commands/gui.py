import threading
import webbrowser
from pathlib import Path
from typing import Optional

import typer

from inbox_core.config.settings import settings
from inbox_server.main import find_free_port, serve

from ..utils import console, err_console, resolve_dir


def gui(
    directory: Optional[Path] = typer.Option(None, "--dir", help="Directory holding the threads file"),
    port: int = typer.Option(settings.port, "--port", help="Preferred port, the next free one is used if busy"),
    no_open: bool = typer.Option(False, "--no-open", help="Do not open a browser"),
):
    """Start the browser GUI on localhost."""
    target = resolve_dir(directory).resolve()
    try:
        actual_port = find_free_port(settings.host, port, settings.port_attempts)
    except OSError as e:
        err_console.print(f"Failed to start GUI server: {e}", style="red", markup=False)
        raise typer.Exit(code=1)

    url = f"http://localhost:{actual_port}"
    console.print(f"Thread Inbox GUI running at {url}", markup=False)
    console.print(f"Watching: {target}", markup=False)
    console.print("Press Ctrl+C to stop.")

    if settings.open_browser and not no_open:
        threading.Timer(1.0, webbrowser.open, args=(url,)).start()

    serve(directory=str(target), host=settings.host, port=actual_port, log_level=settings.log_level)
