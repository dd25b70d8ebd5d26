# ttt/agents/base.py
from __future__ import annotations
from typing import Protocol, runtime_checkable, Optional, Tuple
from ttt.env.state import Board, IllegalMove, PlayerIdentity

# Structural interface (duck-typed): anything with an identity and
# choose_move(board)->(row, col) is an Agent.
@runtime_checkable
class AgentLike(Protocol):
    identity: PlayerIdentity

    def choose_move(self, board: Board) -> Tuple[int, int]: ...

# (Optional) Nominal base class if you prefer inheritance + IDE help.
class Agent(AgentLike):
    name: str

    def __init__(self, identity: PlayerIdentity, name: Optional[str] = None) -> None:
        self.identity = identity
        self.name = name or f"{self.__class__.__name__}({identity.value})"

    def choose_move(self, board: Board) -> Tuple[int, int]:  # pragma: no cover - abstract
        raise NotImplementedError("Agents must implement choose_move(board) -> (row, col)")


def apply_move(agent: AgentLike, board: Board) -> Tuple[int, int]:
    """
    Ask `agent` for a move and write its mark onto `board`.

    The chosen cell must be available; anything else is a bug in the agent
    and raises IllegalMove. Returns the (row, col) that was played.
    """
    row, col = agent.choose_move(board)
    if not board.is_available(row, col):
        raise IllegalMove(f"{agent.identity.value} chose unavailable cell {(row, col)}")
    written = board.set(row, col, agent.identity.mark)
    assert written, f"set({row}, {col}) failed on an available cell"
    return row, col
