from abc import ABC, abstractmethod

from hearts.engine.card import Card
from hearts.engine.legality import LegalResult


class BasePlayer(ABC):
    """Abstract base class for all Hearts players"""

    @abstractmethod
    def turn(self,
             hand: list[Card],
             current_score: int,
             already_played: list[Card],
             hearts_broken: bool,
             is_first_trick: bool) -> int:
        """
        Args:
            hand: Cards held by the player
            current_score: Score from the finished rounds plus the points
                taken so far in this round
            already_played: Cards already played in the current trick
            hearts_broken: Whether hearts have been broken in this round
            is_first_trick: Whether this is the first trick of the round

        Returns:
            0-based index of the card in ``hand`` to play
        """
        raise NotImplementedError()

    def on_illegal_play(self, result: LegalResult) -> None:
        """A method which is called when the card chosen in ``turn`` was rejected"""
        pass

    def post_trick_callback(self, trick: list[Card], is_trick_taken: bool) -> None:
        """A method which is called after every trick to inform a player about its outcome"""
        pass

    def post_round_callback(self, score: int) -> None:
        """A method which is called after every round to inform a player about their score"""
        pass
