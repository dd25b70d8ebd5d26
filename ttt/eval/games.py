# eval/games.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from ttt.env.state import Board, Cell, GameStatus, PlayerIdentity
from ttt.agents.base import AgentLike, apply_move


@dataclass
class GameResult:
    status: GameStatus                 # WON or DRAWN
    winner: Optional[PlayerIdentity]   # None on a draw
    moves: List[Tuple[PlayerIdentity, int, int]] = field(default_factory=list)

    @property
    def n_moves(self) -> int:
        return len(self.moves)

    def describe(self) -> str:
        if self.winner is None:
            return f"Draw in {self.n_moves} moves"
        return f"{self.winner.value} wins in {self.n_moves} moves"


def play_game(
    agent_X: AgentLike,
    agent_O: AgentLike,
    board: Optional[Board] = None,
    on_move: Optional[Callable[[Board], None]] = None,
) -> GameResult:
    """
    Play one game on `board` (a fresh one if omitted), X moving first.

    Whose turn it is comes from the marks already on the board: X when the
    counts are equal, O when X is one ahead. `on_move(board)` is called once
    before the first move and again after every move. Play stops as soon as
    the board is won or full.
    """
    if agent_X.identity is not PlayerIdentity.X or agent_O.identity is not PlayerIdentity.O:
        raise ValueError(
            f"Expected X vs O, got {agent_X.identity.value} vs {agent_O.identity.value}"
        )
    board = board if board is not None else Board()
    agents = {PlayerIdentity.X: agent_X, PlayerIdentity.O: agent_O}
    lead = board.count(Cell.X) - board.count(Cell.O)
    if lead not in (0, 1):
        raise ValueError(f"Unreachable position: X leads O by {lead} marks")
    to_move = PlayerIdentity.X if lead == 0 else PlayerIdentity.O
    moves: List[Tuple[PlayerIdentity, int, int]] = []

    if on_move is not None:
        on_move(board)

    while not board.is_over():
        row, col = apply_move(agents[to_move], board)
        moves.append((to_move, row, col))
        if on_move is not None:
            on_move(board)
        to_move = to_move.opposite()

    status = board.status()
    winner = None
    if status is GameStatus.WON:
        winner = PlayerIdentity.X if board.winner() == agent_X.identity.mark else PlayerIdentity.O
    return GameResult(status=status, winner=winner, moves=moves)
