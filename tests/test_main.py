"""Tests for the command line entry point."""

from unittest.mock import patch

import chess
import pytest

from fen_diagram.__main__ import build_parser, main
from fen_diagram.renderer import BoardRenderer


class TestMain:
    """Test cases for the command line interface."""

    def test_render_default(self, capsys) -> None:
        """Test the starting position is rendered by default."""
        assert main(["render"]) == 0
        assert capsys.readouterr().out == BoardRenderer.render(chess.STARTING_FEN)

    def test_render_fen(self, capsys) -> None:
        """Test rendering a FEN given on the command line."""
        fen = "4k3/8/8/8/8/8/8/4K3 w - - 0 1"
        assert main(["render", fen]) == 0
        assert capsys.readouterr().out == BoardRenderer.render(fen)

    def test_render_file(self, tmp_path, capsys) -> None:
        """Test reading the FEN from the first line of a file."""
        fen_file = tmp_path / "position.fen"
        fen_file.write_text("8/8/8/8/8/8/8/8 w - - 0 1\nrnbqkbnr/8/8/8/8/8/8/8\n")
        assert main(["render", "--file", str(fen_file)]) == 0
        assert capsys.readouterr().out == BoardRenderer.render("8/8/8/8/8/8/8/8")

    def test_render_missing_file(self, tmp_path, capsys) -> None:
        """Test a missing file is reported and exits with status 1."""
        assert main(["render", "--file", str(tmp_path / "missing.fen")]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "FEN file not found" in captured.err

    def test_render_undecodable_file(self, tmp_path, capsys) -> None:
        """Test a file that is not UTF-8 is reported and exits with status 1."""
        fen_file = tmp_path / "position.fen"
        fen_file.write_bytes(b"\xff\xfe8/8\n")
        assert main(["render", "--file", str(fen_file)]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error reading FEN file" in captured.err

    def test_serve(self) -> None:
        """Test serve starts uvicorn with the given address."""
        with patch("fen_diagram.__main__.uvicorn.run") as run:
            assert main(["serve", "--host", "127.0.0.1", "--port", "8080"]) == 0
        run.assert_called_once_with("fen_diagram.server:app", host="127.0.0.1", port=8080)

    def test_serve_defaults(self) -> None:
        """Test serve defaults."""
        args = build_parser().parse_args(["serve"])
        assert args.host == "0.0.0.0"
        assert args.port == 9002

    def test_command_required(self) -> None:
        """Test a subcommand must be given."""
        with pytest.raises(SystemExit):
            main([])
