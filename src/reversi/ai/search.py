from __future__ import annotations

from typing import Optional

from reversi.ai.evaluator import evaluate
from reversi.config import DEFAULT_SETTINGS, SearchSettings
from reversi.othello.board import Board, Move, opponent

INF = 1000000


class SearchResult:
    def __init__(self, move: Optional[Move], score: int, nodes: int) -> None:
        self.move = move
        self.score = score
        self.nodes = nodes

    def __repr__(self) -> str:
        return f"SearchResult({self.move}, {self.score}, {self.nodes})"


def terminal_score(board: Board, ai_player: int, settings: SearchSettings) -> int:
    own = board.count(ai_player)
    opp = board.count(opponent(ai_player))

    if own > opp:
        return settings.terminal_score + (own - opp)
    if own < opp:
        return -settings.terminal_score - (opp - own)
    return 0


def minimax(
    board: Board,
    mover: int,
    depth: int,
    alpha: int,
    beta: int,
    ai_player: int,
    settings: SearchSettings,
    prune: bool = True,
) -> tuple[int, int]:
    """
    Returns the minimax value of `board` for `ai_player` with `mover` to move,
    and the number of visited nodes.
    """
    moves = board.get_moves_as_list(mover)

    if not moves:
        if not board.has_moves(opponent(mover)):
            return terminal_score(board, ai_player, settings), 1

        # Passing does not use up depth.
        value, nodes = minimax(
            board, opponent(mover), depth, alpha, beta, ai_player, settings, prune
        )
        return value, nodes + 1

    if depth == 0:
        return evaluate(board, ai_player, settings), 1

    nodes = 1

    if mover == ai_player:
        best = -INF
        for move in moves:
            child, _ = board.do_move(mover, move)
            value, child_nodes = minimax(
                child,
                opponent(mover),
                depth - 1,
                alpha,
                beta,
                ai_player,
                settings,
                prune,
            )
            nodes += child_nodes
            best = max(best, value)
            alpha = max(alpha, value)
            if prune and beta <= alpha:
                break
        return best, nodes

    best = INF
    for move in moves:
        child, _ = board.do_move(mover, move)
        value, child_nodes = minimax(
            child,
            opponent(mover),
            depth - 1,
            alpha,
            beta,
            ai_player,
            settings,
            prune,
        )
        nodes += child_nodes
        best = min(best, value)
        beta = min(beta, value)
        if prune and beta <= alpha:
            break
    return best, nodes


def search(
    board: Board,
    player: int,
    depth: int,
    settings: Optional[SearchSettings] = None,
    prune: bool = True,
) -> SearchResult:
    """
    Searches `depth` plies ahead and returns the best move for `player`.
    The first move reaching the best score wins ties. The move is None
    if `player` has no legal moves.
    """
    if depth < 1:
        raise ValueError(f"Search depth must be at least 1, got {depth}")

    if settings is None:
        settings = DEFAULT_SETTINGS

    moves = board.get_moves_as_list(player)
    if not moves:
        return SearchResult(None, 0, 1)

    best_move = moves[0]
    best_score = -INF
    nodes = 1

    for move in moves:
        child, _ = board.do_move(player, move)

        # Children that can't beat `best_score` may return an upper bound,
        # which never replaces the current best move.
        alpha = best_score if prune else -INF
        score, child_nodes = minimax(
            child, opponent(player), depth - 1, alpha, INF, player, settings, prune
        )
        nodes += child_nodes

        if settings.verbose:
            print(f"{Board.coord_to_field(move)}: {score}")

        if score > best_score:
            best_score = score
            best_move = move

    if settings.verbose:
        field = Board.coord_to_field(best_move)
        print(f"depth {depth} | nodes {nodes} | best {field} | score {best_score}")

    return SearchResult(best_move, best_score, nodes)


def best_move(
    board: Board, player: int, depth: int, settings: Optional[SearchSettings] = None
) -> Optional[Move]:
    return search(board, player, depth, settings).move
