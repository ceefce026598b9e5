#!/usr/bin/env python3
"""
Replay a game and print the board diagram after every move.

python-chess plays the moves and supplies the FEN strings, standing in
for a game server feeding positions to the renderer.
"""

import argparse
import io
import sys
from typing import List, Optional, TextIO

import chess
import chess.pgn
from rich.console import Console

from fen_diagram.renderer import BoardRenderer

console = Console()


def read_movetext(pgn_moves: str) -> Optional[chess.pgn.Game]:
    """
    Parse PGN movetext into a game.

    :param pgn_moves: PGN move string (e.g., '1.e4 e5 2.Nf3 Nc6')
    :type pgn_moves: str
    :return: Parsed game, or None if the text holds no game
    :rtype: Optional[chess.pgn.Game]
    """
    return chess.pgn.read_game(io.StringIO(pgn_moves))


def mainline_san(pgn_moves: str) -> List[str]:
    """
    Get the legal mainline moves of a movetext in SAN.

    :param pgn_moves: PGN move string
    :type pgn_moves: str
    :return: Moves up to the first illegal one
    :rtype: List[str]
    """
    game = read_movetext(pgn_moves)
    if game is None:
        return []
    return [node.san() for node in game.mainline()]


def replay(pgn_moves: str, stream: Optional[TextIO] = None) -> bool:
    """
    Replay moves from the starting position, printing each position.

    :param pgn_moves: PGN move string
    :type pgn_moves: str
    :param stream: Destination for the diagrams, stdout when omitted
    :type stream: Optional[TextIO]
    :return: True if every move was legal, False otherwise
    :rtype: bool
    """
    out = stream if stream is not None else sys.stdout
    game = read_movetext(pgn_moves)
    board = chess.Board()
    BoardRenderer.write(board, out)
    if game is None:
        return True

    for move in game.mainline_moves():
        san = board.san(move)
        board.push(move)
        out.write(f"\nAfter {san}:\n")
        BoardRenderer.write(board, out)

    if game.errors:
        console.print(f"[red]Replay stopped:[/red] {game.errors[0]}")
        return False
    return True


def main() -> None:
    """Replay the moves given on the command line."""
    parser = argparse.ArgumentParser(description="Replay a game as FEN board diagrams")
    parser.add_argument("moves", type=str, help="PGN move text, e.g. '1.e4 e5 2.Nf3 Nc6'")
    args = parser.parse_args()
    if not replay(args.moves):
        sys.exit(1)


if __name__ == "__main__":
    main()
