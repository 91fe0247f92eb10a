"""Command-line entry point: ``python -m dockdemo [--host HOST] [--port PORT]``."""

import argparse

from dockdemo.server.api import serve


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the Docker demo server")
    parser.add_argument("--host", default=None, help="Interface to bind (default from config)")
    parser.add_argument("--port", type=int, default=None, help="Port to listen on (default from config)")
    args = parser.parse_args()
    serve(port=args.port, host=args.host)


if __name__ == "__main__":
    main()
