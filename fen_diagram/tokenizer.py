"""FEN piece-placement tokenizer."""

import string
from dataclasses import dataclass
from typing import Iterator, Optional, Union

DIGITS = "0123456789"


@dataclass(frozen=True)
class Piece:
    """
    An occupied square.

    :param symbol: Piece letter, passed through verbatim
    :type symbol: str
    """

    symbol: str


@dataclass(frozen=True)
class EmptyRun:
    """
    A run of consecutive empty squares.

    :param count: Number of empty files, the face value of the digit
    :type count: int
    """

    count: int


@dataclass(frozen=True)
class RankBreak:
    """The current rank is complete and the next one begins."""


@dataclass(frozen=True)
class End:
    """Scanning stops; nothing after this point is examined."""


Event = Union[Piece, EmptyRun, RankBreak, End]


def classify(char: str) -> Optional[Event]:
    """
    Classify a single character of a piece-placement field.

    Unknown characters are ignored rather than rejected.

    :param char: One character of input
    :type char: str
    :return: The event for the character, or None if it carries no meaning
    :rtype: Optional[Event]
    """
    if len(char) != 1:
        return None
    if char in string.ascii_letters:
        return Piece(char)
    if char in DIGITS:
        return EmptyRun(int(char))
    if char == "/":
        return RankBreak()
    if char == " ":
        return End()
    return None


def tokenize(fen: str) -> Iterator[Event]:
    """
    Scan a FEN string and yield placement events.

    The stream always finishes with exactly one End event, whether the
    scan stopped at the first space or ran out of input.

    :param fen: Full FEN record or bare piece-placement field
    :type fen: str
    :return: Iterator over events in input order
    :rtype: Iterator[Event]
    """
    for char in fen:
        event = classify(char)
        if isinstance(event, End):
            break
        if event is not None:
            yield event
    yield End()


def placement_field(fen: str) -> str:
    """
    Return the piece-placement field of a FEN record.

    :param fen: Full FEN record
    :type fen: str
    :return: Everything before the first space
    :rtype: str
    """
    return fen.split(" ", 1)[0]
