"""Terminal front end: play against the engine."""

import argparse
import logging
import time
from typing import Optional

from tictactoe.config import CONFIG
from tictactoe.core.board import Board, Cell, Move
from tictactoe.core.errors import GameError, InvalidMove
from tictactoe.session import GameSession, HUMAN_SIDE

logger = logging.getLogger("tictactoe.cli")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play tic-tac-toe against the engine.")
    parser.add_argument("--engine-first", action="store_true", help="Let the engine open the game")
    parser.add_argument("--no-delay", action="store_true", help="Show engine replies immediately")
    parser.add_argument("--log-level", type=str, default=CONFIG.log_level, help="Python logging level")
    return parser.parse_args(argv)


def render(board: Board) -> str:
    symbols = {Cell.A: CONFIG.ui.engine_symbol, Cell.B: CONFIG.ui.human_symbol}
    lines = []
    for r, row in enumerate(board.cells):
        lines.append(" | ".join(symbols.get(cell, str(r * 3 + c + 1)) for c, cell in enumerate(row)))
    return "\n---------\n".join(lines)


def parse_user_move(command: str) -> Optional[Move]:
    """'row col' (0-based) or a single 1..9 cell number; None if unparseable."""
    parts = command.replace(",", " ").split()
    try:
        if len(parts) == 1:
            return Move.from_index(int(parts[0]) - 1)
        if len(parts) == 2:
            return Move(int(parts[0]), int(parts[1]))
    except (ValueError, InvalidMove):
        return None
    return None


def run_cli(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    session = GameSession(human_first=not args.engine_first)
    delay = 0 if args.no_delay else CONFIG.ui.engine_delay_ms / 1000
    logger.info("Starting game. Human=%s Engine=%s", CONFIG.ui.human_symbol, CONFIG.ui.engine_symbol)
    print("Enter a cell number 1-9 or 'row col' (0-2). 'quit' exits.")

    if session.turn is not HUMAN_SIDE:
        time.sleep(delay)
        reply = session.request_engine_move()
        print(f"{CONFIG.ui.engine_name} plays {reply.row} {reply.col}")

    while not session.is_terminal:
        print()
        print(render(session.board))
        print(session.status_message())

        user_input = input("Your move> ").strip()
        if user_input.lower() in {"quit", "exit"}:
            print("Exiting game.")
            return

        move = parse_user_move(user_input)
        if move is None:
            print("Invalid input format.")
            continue
        try:
            reply = session.submit_human_move(move)
        except GameError as e:
            print(f"Rejected: {e}")
            continue
        if reply is not None:
            time.sleep(delay)
            print(f"{CONFIG.ui.engine_name} plays {reply.row} {reply.col}")

    print()
    print(render(session.board))
    print(session.status_message())


if __name__ == "__main__":
    run_cli()
