import argparse
import logging
import socket
from typing import Optional, Sequence

from inbox_core.config.settings import settings


def find_free_port(host: str, port: int, attempts: int) -> int:
    """Return the first port from `port` onwards that can be bound on `host`."""
    for candidate in range(port, port + attempts):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
            try:
                sock.bind((host, candidate))
            except OSError:
                continue
            return candidate
    raise OSError(f"No free port in range {port}-{port + attempts - 1} on {host}")


def serve(
    directory: Optional[str],
    host: str,
    port: int,
    log_level: str,
) -> None:
    import uvicorn

    from inbox_server.app import create_app

    log_level = log_level.upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format=settings.log_format,
    )

    uvicorn.run(
        create_app(directory, settings),
        host=host,
        port=port,
        reload=False,
        timeout_keep_alive=30,
        log_level=log_level.lower(),
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="thread-inbox-server")
    parser.add_argument("--dir", "-d", default=None, help="Directory holding the threads file")
    parser.add_argument("--host", "-H", default=settings.host, help="Server host")
    parser.add_argument("--port", "-p", type=int, default=settings.port, help="Server port")
    parser.add_argument("--log-level", "-l", default=settings.log_level, help="Logging level")

    args = parser.parse_args(argv)
    try:
        port = find_free_port(args.host, args.port, settings.port_attempts)
    except OSError as e:
        parser.exit(1, f"Failed to start GUI server: {e}\n")
    serve(directory=args.dir, host=args.host, port=port, log_level=args.log_level)


if __name__ == "__main__":
    main()
