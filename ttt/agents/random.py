from typing import Optional, Tuple

import numpy as np
from ttt.env.state import Board, IllegalMove, PlayerIdentity, action_to_rc
from ttt.agents.base import Agent


class RandomAgent(Agent):
    """Plays a uniformly random available cell."""

    def __init__(
        self,
        identity: PlayerIdentity,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
        name: Optional[str] = None,
    ) -> None:
        super().__init__(identity, name)
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def seed(self, seed: Optional[int]) -> None:
        self.rng = np.random.default_rng(seed)

    def choose_move(self, board: Board) -> Tuple[int, int]:
        # Draw from the explicit candidate list, never by rejection.
        actions = board.available_actions()
        if actions.size == 0:
            raise IllegalMove("No available cells left")
        return action_to_rc(self.rng.choice(actions))
