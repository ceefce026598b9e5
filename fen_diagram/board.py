"""In-memory board grid built from a FEN piece-placement field."""

from typing import Dict, List, Optional, TextIO

import chess

from fen_diagram.renderer import BoardRenderer
from fen_diagram.tokenizer import EmptyRun, End, Piece, RankBreak, placement_field, tokenize

EMPTY_SQUARE = ' '


class FenBoard:
    """
    Grid view of a FEN position.

    Ranks are built from the same event stream the renderer consumes, so
    malformed placement fields give ragged rows instead of errors. Nothing
    about chess legality is checked.
    """

    def __init__(self, fen: str) -> None:
        """
        Build the grid for a FEN record.

        :param fen: Full FEN record or bare piece-placement field
        :type fen: str
        """
        self.fen = fen
        self._ranks = self._build_ranks(fen)

    @classmethod
    def from_board(cls, board: chess.Board) -> "FenBoard":
        """
        Create a grid view of a python-chess board.

        :param board: Board to snapshot
        :type board: chess.Board
        :return: Grid view of the board's current position
        :rtype: FenBoard
        """
        return cls(board.fen())

    @staticmethod
    def _build_ranks(fen: str) -> List[List[str]]:
        ranks: List[List[str]] = []
        current: Optional[List[str]] = None
        for event in tokenize(fen):
            if isinstance(event, End):
                break
            if current is None:
                current = []
                ranks.append(current)
            if isinstance(event, Piece):
                current.append(event.symbol)
            elif isinstance(event, EmptyRun):
                current.extend(EMPTY_SQUARE * event.count)
            elif isinstance(event, RankBreak):
                current = []
                ranks.append(current)
        return ranks

    def get_fen(self) -> str:
        """
        Get the FEN record this grid was built from.

        :return: FEN string as given
        :rtype: str
        """
        return self.fen

    def get_placement(self) -> str:
        """
        Get the piece-placement field.

        :return: FEN text before the first space
        :rtype: str
        """
        return placement_field(self.fen)

    def get_board_state(self) -> List[List[str]]:
        """
        Get the board as a list of ranks, rank 8 first.

        :return: Rows of piece symbols, with ' ' for empty squares
        :rtype: List[List[str]]
        """
        return [list(rank) for rank in self._ranks]

    def get_rank_labels(self) -> List[int]:
        """
        Get the label of each row, counting down from 8.

        :return: Rank labels in row order
        :rtype: List[int]
        """
        return [8 - index for index in range(len(self._ranks))]

    def get_all_coordinates(self) -> Dict[str, str]:
        """
        Get all piece positions that fall on the a-h / 1-8 board.

        :return: Dictionary mapping square coordinates to piece symbols
        :rtype: Dict[str, str]
        """
        coordinates = {}
        for rank_label, rank in zip(self.get_rank_labels(), self._ranks):
            if not 1 <= rank_label <= 8:
                continue
            for file_index, symbol in enumerate(rank[:8]):
                if symbol != EMPTY_SQUARE:
                    square = chess.square(file_index, rank_label - 1)
                    coordinates[chess.square_name(square)] = symbol
        return coordinates

    def render(self) -> str:
        """
        Render the position as a text diagram.

        :return: Diagram text
        :rtype: str
        """
        return BoardRenderer.render(self.fen)

    def print(self, stream: Optional[TextIO] = None) -> None:
        """Print the diagram, to stdout unless a stream is given."""
        BoardRenderer.write(self.fen, stream)
