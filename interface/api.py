"""FastAPI REST interface for the game session and the search engine."""

import threading

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field
from typing import List, Optional

from tictactoe.config import CONFIG
from tictactoe.core.board import Board, Move
from tictactoe.core.errors import IllegalMove, InvalidMove
from tictactoe.core.search import SearchEngine
from tictactoe.session import GameSession

app = FastAPI(title=CONFIG.ui.engine_name, version="1.0.0")

# Shared engine and session instance.
engine = SearchEngine(alpha_beta=CONFIG.search.alpha_beta, log_stats=CONFIG.search.log_stats)
session = GameSession(engine=engine)
_session_lock = threading.Lock()


class MoveRequest(BaseModel):
    row: int = Field(ge=0, le=2)
    col: int = Field(ge=0, le=2)


class SearchRequest(BaseModel):
    cells: List[List[str]]  # 3 rows of "A", "B" or "."


def _move_json(move: Optional[Move]):
    return {"row": move.row, "col": move.col} if move is not None else None


def _session_json():
    line = session.winning_line
    return {
        "cells": session.board.rows(),
        "turn": session.turn.value,
        "state": session.state.value,
        "status": session.status_message(),
        "result": session.result.value if session.result else None,
        "winning_line": [_move_json(m) for m in line] if line else None,
    }


@app.get("/board")
def get_board():
    with _session_lock:
        return _session_json()


@app.post("/move")
def make_move(req: MoveRequest):
    with _session_lock:
        try:
            reply = session.submit_human_move((req.row, req.col))
        except InvalidMove as e:
            raise HTTPException(status_code=400, detail=str(e))
        except IllegalMove as e:
            raise HTTPException(status_code=409, detail=str(e))
        return {**_session_json(), "engine_move": _move_json(reply)}


@app.post("/engine-move")
def engine_move():
    with _session_lock:
        try:
            reply = session.request_engine_move()
        except IllegalMove as e:
            raise HTTPException(status_code=409, detail=str(e))
        return {**_session_json(), "engine_move": _move_json(reply)}


@app.post("/search")
def search_move(req: SearchRequest):
    try:
        board = Board.from_rows(req.cells)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid board: {e}")

    best, score = engine.search_best_move(board)
    return {
        "best_move": _move_json(best),
        "score": score,
        "cells": board.rows(),
    }


@app.post("/reset")
def reset_board():
    global session
    with _session_lock:
        session = session.reset()
        return _session_json()


def run():
    import uvicorn

    uvicorn.run(app, port=CONFIG.ui.api_port)


if __name__ == "__main__":
    run()
