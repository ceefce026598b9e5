"""FastAPI server exposing FEN diagram rendering."""

import logging
import os
from typing import Dict, List, Optional

import chess
from fastapi import FastAPI
from pydantic import BaseModel

from fen_diagram.board import FenBoard


def resolve_log_level(name: str) -> int:
    """
    Map a level name to a logging level, INFO for unknown names.

    :param name: Level name such as 'DEBUG' or 'warning'
    :type name: str
    :return: Numeric logging level
    :rtype: int
    """
    level = logging.getLevelName(name.strip().upper())
    if isinstance(level, int):
        return level
    return logging.INFO


# Configure logging
LOG_LEVEL = resolve_log_level(os.environ.get("FEN_DIAGRAM_LOG_LEVEL", "INFO"))
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

# Position rendered when a request carries no FEN
DEFAULT_FEN = os.environ.get("FEN_DIAGRAM_DEFAULT_FEN", chess.STARTING_FEN)

app = FastAPI(title="FEN Diagram API", version="1.0.0")


class RenderRequest(BaseModel):
    """
    Request model for rendering a position.

    :param fen: FEN record or bare piece-placement field
    :type fen: str
    """

    fen: str


class RenderResponse(BaseModel):
    """
    Response model for a rendered position.

    :param fen: FEN string that was rendered
    :type fen: str
    :param board: Rows of piece symbols, rank 8 first, ' ' for empty squares
    :type board: List[List[str]]
    :param rank_labels: Rank label of each row
    :type rank_labels: List[int]
    :param rendered: Text diagram of the board
    :type rendered: str
    """

    fen: str
    board: List[List[str]]
    rank_labels: List[int]
    rendered: str


def build_response(fen: str) -> RenderResponse:
    """
    Render a FEN string into a response model.

    :param fen: FEN record or bare piece-placement field
    :type fen: str
    :return: Grid and diagram for the position
    :rtype: RenderResponse
    """
    board = FenBoard(fen)
    logger.debug(f"Rendering placement '{board.get_placement()}'")
    return RenderResponse(
        fen=board.get_fen(),
        board=board.get_board_state(),
        rank_labels=board.get_rank_labels(),
        rendered=board.render()
    )


@app.get("/render", response_model=RenderResponse)
def render_get(fen: Optional[str] = None) -> RenderResponse:
    """
    Render a position passed as a query parameter.

    :param fen: FEN string, the default position when omitted
    :type fen: Optional[str]
    :return: Rendered position
    :rtype: RenderResponse
    """
    return build_response(DEFAULT_FEN if fen is None else fen)


@app.post("/render", response_model=RenderResponse)
def render_post(render_request: RenderRequest) -> RenderResponse:
    """
    Render a position passed in the request body.

    :param render_request: Request containing the FEN string
    :type render_request: RenderRequest
    :return: Rendered position
    :rtype: RenderResponse
    """
    return build_response(render_request.fen)


@app.get("/")
def root() -> Dict[str, str]:
    """
    Root endpoint providing API information.

    :return: API welcome message
    :rtype: Dict[str, str]
    """
    return {"message": "FEN Diagram API - Use /docs for API documentation"}
