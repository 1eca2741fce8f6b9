import numpy as np

from hearts.engine.card import Card
from hearts.engine.legality import is_legal
from .base.base_player import BasePlayer


class RandomPlayer(BasePlayer):
    """Plays a uniformly random legal card"""

    def __init__(self, random_state: int | np.random.Generator | None = None):
        self._rng = np.random.default_rng(random_state)

    def turn(self,
             hand: list[Card],
             current_score: int,
             already_played: list[Card],
             hearts_broken: bool,
             is_first_trick: bool) -> int:
        while True:
            card_idx = int(self._rng.integers(len(hand)))
            if is_legal(hand, card_idx, hearts_broken, already_played, is_first_trick).is_legal:
                return card_idx
