"""Main entry point for the FEN diagram application."""

import argparse
import sys
from typing import List, Optional

import chess
import uvicorn
from rich.console import Console

from fen_diagram.renderer import BoardRenderer

console = Console(stderr=True)


def read_fen_file(file_path: str) -> Optional[str]:
    """
    Read a FEN record from the first line of a file.

    :param file_path: Path to the file
    :type file_path: str
    :return: FEN string, or None if the file could not be read
    :rtype: Optional[str]
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return f.readline().rstrip("\r\n")
    except FileNotFoundError:
        console.print(f"[red]Error: FEN file not found: {file_path}[/red]")
        return None
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Error reading FEN file:[/red] {e}")
        return None


def build_parser() -> argparse.ArgumentParser:
    """
    Build the command line parser.

    :return: Parser with ``render`` and ``serve`` subcommands
    :rtype: argparse.ArgumentParser
    """
    parser = argparse.ArgumentParser(description="Render FEN positions as text diagrams")
    subparsers = parser.add_subparsers(dest="command", required=True)

    render_parser = subparsers.add_parser("render", help="Print the diagram for a FEN string")
    render_parser.add_argument("fen", nargs="?", default=chess.STARTING_FEN,
                               help="FEN record (default: standard starting position)")
    render_parser.add_argument("--file", type=str, default=None,
                               help="Read the FEN record from the first line of a file")

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP render service")
    serve_parser.add_argument("--host", type=str, default="0.0.0.0", help="Host to bind the server to (default: 0.0.0.0)")
    serve_parser.add_argument("--port", type=int, default=9002, help="Port to bind the server to (default: 9002)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command line interface.

    ``render`` writes the diagram to stdout. ``serve`` starts the FastAPI
    app under uvicorn; visit http://<host>:<port>/docs for API documentation.

    :param argv: Arguments, sys.argv[1:] when omitted
    :type argv: Optional[List[str]]
    :return: Process exit status
    :rtype: int
    """
    args = build_parser().parse_args(argv)

    if args.command == "serve":
        uvicorn.run("fen_diagram.server:app", host=args.host, port=args.port)
        return 0

    fen = args.fen
    if args.file is not None:
        fen = read_fen_file(args.file)
        if fen is None:
            return 1
    BoardRenderer.write(fen, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
