from tictactoe.core.evaluator import WIN_SCORE


def format_search_info(move, score, nodes, elapsed, pruned=True):
    move_str = f"{move.row},{move.col}" if move is not None else "-"
    nps = int(nodes / elapsed) if elapsed > 0 else 0
    mode = "alphabeta" if pruned else "minimax"

    if score is not None and abs(score) > 0:
        plies = WIN_SCORE - abs(score)
        score_str = f"win {plies}" if score > 0 else f"loss {plies}"
    else:
        score_str = "draw"

    return (f"info {mode} bestmove {move_str} score {score} ({score_str}) "
            f"nodes {nodes} nps {nps} time {int(elapsed * 1000)}ms")
