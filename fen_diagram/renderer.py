"""Chess board text diagram rendering module."""

import io
import logging
import sys
from dataclasses import dataclass
from typing import List, Optional, TextIO, Union

import chess

from fen_diagram.tokenizer import EmptyRun, End, Piece, RankBreak, tokenize

logger = logging.getLogger(__name__)

Position = Union[str, chess.Board]


@dataclass
class ScanState:
    """
    Per-render scan state.

    :param rank_label: Label of the row currently being emitted
    :type rank_label: int
    :param cells_in_row: Cells written to the current row so far
    :type cells_in_row: int
    :param row_open: Whether a row-start marker has been written
    :type row_open: bool
    """

    rank_label: int = 8
    cells_in_row: int = 0
    row_open: bool = False


def position_fen(position: Position) -> str:
    """
    Get the FEN string for a position.

    :param position: FEN string or python-chess board
    :type position: Position
    :return: FEN string
    :rtype: str
    """
    if isinstance(position, chess.Board):
        return position.fen()
    return position


class BoardRenderer:
    """
    Renders a FEN position as a fixed-width text diagram.

    The layout is a 9x9 grid of cells: one header row of file letters
    (a-h) and one leading column of rank numbers, framed by ``+---+``
    borders. Piece letters are shown verbatim.
    """

    FILES = "abcdefgh"
    BORDER = "+---" * (len(FILES) + 1) + "+"
    HEADER = "|  " + "".join(f" | {file}" for file in FILES) + " |"
    EMPTY_CELL = " |  "
    RANK_SIZE = 8

    @classmethod
    def write(cls, position: Position, stream: Optional[TextIO] = None) -> None:
        """
        Stream the diagram for a position, one line at a time.

        :param position: FEN record, bare placement field or python-chess board
        :type position: Position
        :param stream: Destination text stream, stdout when omitted
        :type stream: Optional[TextIO]
        """
        out = stream if stream is not None else sys.stdout
        state = ScanState()

        out.write(cls.BORDER + "\n")
        out.write(cls.HEADER + "\n")
        out.write(cls.BORDER + "\n")

        for event in tokenize(position_fen(position)):
            if isinstance(event, End):
                break
            if not state.row_open:
                cls._open_row(out, state)
            if isinstance(event, Piece):
                out.write(f" | {event.symbol}")
                state.cells_in_row += 1
            elif isinstance(event, EmptyRun):
                out.write(cls.EMPTY_CELL * event.count)
                state.cells_in_row += event.count
            elif isinstance(event, RankBreak):
                cls._close_row(out, state)
                out.write(cls.BORDER + "\n")
                state.rank_label -= 1
                cls._open_row(out, state)

        if state.row_open:
            cls._close_row(out, state)
        out.write(cls.BORDER + "\n")

    @classmethod
    def render(cls, position: Position) -> str:
        """
        Render a position as a text diagram.

        :param position: FEN record, bare placement field or python-chess board
        :type position: Position
        :return: Diagram text, each line terminated by a newline
        :rtype: str
        """
        buffer = io.StringIO()
        cls.write(position, buffer)
        return buffer.getvalue()

    @classmethod
    def render_lines(cls, position: Position) -> List[str]:
        """
        Render a position as a list of diagram lines without newlines.

        :param position: FEN record, bare placement field or python-chess board
        :type position: Position
        :return: Diagram lines
        :rtype: List[str]
        """
        return cls.render(position).splitlines()

    @staticmethod
    def _open_row(out: TextIO, state: ScanState) -> None:
        out.write(f"| {state.rank_label}")
        state.cells_in_row = 0
        state.row_open = True

    @classmethod
    def _close_row(cls, out: TextIO, state: ScanState) -> None:
        if state.cells_in_row != cls.RANK_SIZE:
            logger.debug(f"Rank {state.rank_label} has {state.cells_in_row} cells, rendering as-is")
        out.write(" |\n")
        state.row_open = False
