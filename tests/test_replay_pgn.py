#!/usr/bin/env python3
"""
Tests for the PGN replay demo.

The demo is not part of the package, so it is loaded from its file path.
"""

import importlib.util
import io
import sys
from pathlib import Path

import chess

from fen_diagram.renderer import BoardRenderer

demos_path = Path(__file__).parent.parent / 'demos'
spec = importlib.util.spec_from_file_location("replay_pgn", demos_path / 'replay_pgn.py')
replay_pgn = importlib.util.module_from_spec(spec)
sys.modules['replay_pgn'] = replay_pgn
spec.loader.exec_module(replay_pgn)


class TestReplayPgn:
    """Test suite for the replay demo."""

    def test_mainline_san(self) -> None:
        """Test move numbers and results are stripped."""
        assert replay_pgn.mainline_san("1.e4 e5 2.Nf3 Nc6 1-0") == ["e4", "e5", "Nf3", "Nc6"]

    def test_mainline_san_spaced_numbers(self) -> None:
        """Test move numbers separated from their moves."""
        assert replay_pgn.mainline_san("1. e4 1... e5 *") == ["e4", "e5"]

    def test_mainline_san_stops_at_illegal_move(self) -> None:
        """Test moves after an illegal one are dropped."""
        assert replay_pgn.mainline_san("1.e4 e4 2.Nf3") == ["e4"]

    def test_empty_movetext(self) -> None:
        """Test empty movetext prints only the starting position."""
        stream = io.StringIO()
        assert replay_pgn.replay("", stream) is True
        assert stream.getvalue() == BoardRenderer.render(chess.STARTING_FEN)

    def test_replay_prints_each_position(self) -> None:
        """Test a diagram is printed for the start and after every move."""
        stream = io.StringIO()
        assert replay_pgn.replay("1.e4 e5", stream) is True
        output = stream.getvalue()

        board = chess.Board()
        expected = BoardRenderer.render(board)
        for move in ["e4", "e5"]:
            board.push_san(move)
            expected += f"\nAfter {move}:\n" + BoardRenderer.render(board)
        assert output == expected

    def test_replay_stops_on_illegal_move(self) -> None:
        """Test replay stops at the first illegal move."""
        stream = io.StringIO()
        assert replay_pgn.replay("1.e4 e4", stream) is False
        assert "After e4:" in stream.getvalue()
        assert stream.getvalue().count("After") == 1
