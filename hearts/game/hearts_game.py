import logging
from dataclasses import dataclass

import numpy as np

from hearts.engine import HeartsRound, HeartsRules, Card, TrickResult
from hearts.engine.constants import PLAYER_COUNT, CARDS_PER_PLAYER_COUNT, MAX_POINTS
from hearts.engine.utils import apply_moon_shot
from .players.base import BasePlayer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoundResult:
    """
    Args:
        points_collected: Points taken by each player in the round
        scores: Points added to each player's score, after the moon shot
        moon_shooter_idx: Index of the player who shot the moon, if any
    """
    points_collected: list[int]
    scores: list[int]
    moon_shooter_idx: int | None = None


@dataclass(frozen=True)
class MatchResult:
    """
    Args:
        scoreboard: Final cumulative score of each player
        winners: Indexes of all players sharing the lowest score
        rounds_played: Number of rounds in the match
    """
    scoreboard: list[int]
    winners: list[int]
    rounds_played: int

    @property
    def is_tie(self) -> bool:
        return len(self.winners) > 1


class HeartsGame:
    """
    A match of Hearts: rounds are played until any player's score reaches
    the target score. The player(s) with the lowest score win.

    Args:
        players: List of exactly 4 player 'brains'
        rules: Match settings (see :class:`HeartsRules` for defaults)
        random_state: Random seed for reproducibility. Does not control the
            randomness of players.
    """

    def __init__(self,
                 players: list[BasePlayer],
                 rules: HeartsRules = HeartsRules(),
                 random_state: int | np.random.Generator | None = None):

        if len(players) != PLAYER_COUNT:
            raise ValueError(f'There should be exactly {PLAYER_COUNT} players')

        self.players = players
        self.rules = rules
        self._rng = np.random.default_rng(random_state)

        self.round: HeartsRound | None = None
        self.round_no = 0
        self.scoreboard = [0 for _ in range(PLAYER_COUNT)]

    @property
    def hands(self) -> list[list[Card]]:
        if self.round is None:
            return [[] for _ in range(PLAYER_COUNT)]
        return self.round.hands

    @property
    def is_finished(self) -> bool:
        return max(self.scoreboard) >= self.rules.target_score

    @property
    def winners(self) -> list[int]:
        """Indexes of the players with the lowest score. More than one means a tie"""
        lowest_score = min(self.scoreboard)
        return [i for i, score in enumerate(self.scoreboard) if score == lowest_score]

    def current_score(self, player_idx: int) -> int:
        """Score from the finished rounds plus the points taken in the current one"""
        score = self.scoreboard[player_idx]
        if self.round is not None and not self.round.is_finished:
            score += self.round.points_collected[player_idx]
        return score

    def start_round(self) -> HeartsRound:
        """Deals the cards for the next round"""
        self.round_no += 1
        self.round = HeartsRound(rng=self._rng)
        logger.debug('Round %d dealt, player %d leads',
                     self.round_no, self.round.trick_starting_player_idx)
        return self.round

    def play_turn(self) -> Card:
        """
        Asks the current player for a card until they choose a legal one
        """
        player_idx = self.round.current_player_idx
        player = self.players[player_idx]

        while True:
            hand = self.round.hands[player_idx]
            card_idx = player.turn(
                hand=hand,
                current_score=self.current_score(player_idx),
                already_played=self.round.current_trick_cards,
                hearts_broken=self.round.hearts_broken,
                is_first_trick=self.round.is_first_trick,
            )
            result = self.round.play_card(card_idx)
            if result.is_legal:
                return hand[card_idx]

            logger.debug('Player %d proposed card index %r: %s',
                         player_idx, card_idx, result.verdict.name)
            player.on_illegal_play(result)

    def play_trick(self) -> TrickResult:
        for _ in range(PLAYER_COUNT):
            self.play_turn()

        trick_result = self.round.complete_trick()
        for i, player in enumerate(self.players):
            player.post_trick_callback(trick_result.cards, i == trick_result.winner_idx)
        return trick_result

    def play_round(self) -> RoundResult:
        if self.is_finished:
            raise RuntimeError('The match is over. No more rounds can be played')

        self.start_round()
        for _ in range(CARDS_PER_PLAYER_COUNT):
            self.play_trick()

        points_collected = self.round.points_collected
        scores = apply_moon_shot(points_collected)
        moon_shooter_idx = None
        if MAX_POINTS in points_collected:
            moon_shooter_idx = points_collected.index(MAX_POINTS)
            logger.info('Player %d shot the moon', moon_shooter_idx)

        for player_idx, player in enumerate(self.players):
            self.scoreboard[player_idx] += scores[player_idx]
            player.post_round_callback(scores[player_idx])

        logger.info('Round %d finished with scores %s, scoreboard %s',
                    self.round_no, scores, self.scoreboard)
        return RoundResult(
            points_collected=points_collected,
            scores=scores,
            moon_shooter_idx=moon_shooter_idx,
        )

    def play(self) -> MatchResult:
        """Plays rounds until the match is over"""
        while not self.is_finished:
            self.play_round()

        result = MatchResult(
            scoreboard=self.scoreboard.copy(),
            winners=self.winners,
            rounds_played=self.round_no,
        )
        logger.info('Match finished after %d rounds, winners: %s',
                    result.rounds_played, result.winners)
        return result
