from collections.abc import Iterable

from hearts.engine.card import Card
from hearts.engine.legality import LegalResult
from .base.base_player import BasePlayer


class ScriptedPlayer(BasePlayer):
    """
    Replays a fixed sequence of card indexes, one per call to ``turn``.
    Useful for reproducible tests.

    Args:
        choices: 0-based card indexes, in the order they will be returned
    """

    def __init__(self, choices: Iterable[int]):
        self._choices = list(choices)
        self._next_choice = 0
        self.rejections: list[LegalResult] = []

    @property
    def choices_left(self) -> int:
        return len(self._choices) - self._next_choice

    def turn(self,
             hand: list[Card],
             current_score: int,
             already_played: list[Card],
             hearts_broken: bool,
             is_first_trick: bool) -> int:
        if self.choices_left == 0:
            raise RuntimeError('Scripted player has run out of choices')
        choice = self._choices[self._next_choice]
        self._next_choice += 1
        return choice

    def on_illegal_play(self, result: LegalResult) -> None:
        self.rejections.append(result)
