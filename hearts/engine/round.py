import logging
from dataclasses import dataclass
from enum import Enum

import numpy as np

from .card import Card
from .constants import Suit, PLAYER_COUNT, CARDS_PER_PLAYER_COUNT
from .deck import deal, generate_deck
from .legality import LegalResult, is_legal
from .utils import is_point_card, is_starting_card, trick_points, get_winning_card_idx

logger = logging.getLogger(__name__)


class RoundPhase(Enum):
    DEALING = 0
    LEADING = 1
    FOLLOWING = 2
    TRICK_COMPLETE = 3
    ROUND_COMPLETE = 4


@dataclass(frozen=True)
class TrickResult:
    """
    Args:
        trick: ``(player_idx, card)`` pairs in the order the cards were played
        winner_idx: Index of the player who took the trick
        points: Points in the trick, all of them credited to the winner
    """
    trick: list[tuple[int, Card]]
    winner_idx: int
    points: int

    @property
    def cards(self) -> list[Card]:
        return [card for _, card in self.trick]


class HeartsRound:
    """
    State of a single round (13 tricks) of the standard 4-player Hearts.

    The round goes through the phases ``DEALING -> LEADING -> FOLLOWING ->
    TRICK_COMPLETE`` and then either back to ``LEADING`` with the trick winner
    as the new leader, or to ``ROUND_COMPLETE`` after the 13th trick.

    Args:
        hands: Hands to play with, one per player. If ``None``, a fresh deck
            is shuffled and dealt
        rng: Random generator used for dealing. Ignored if ``hands`` are given
    """

    def __init__(self,
                 hands: list[list[Card]] | None = None,
                 rng: np.random.Generator | None = None):
        self._phase = RoundPhase.DEALING

        if hands is None:
            hands = deal(PLAYER_COUNT, rng).hands
        self._validate_hands(hands)

        self._hands: list[list[Card]] = [list(hand) for hand in hands]
        self._taken_cards: list[list[Card]] = [[] for _ in range(PLAYER_COUNT)]
        self._played_cards: list[list[Card]] = [[] for _ in range(PLAYER_COUNT)]
        self._points_collected = [0 for _ in range(PLAYER_COUNT)]
        self._current_trick: list[tuple[int, Card]] = []
        self._hearts_broken = False
        self.trick_no = 1

        self._trick_starting_player_idx = self._find_starting_player()
        self._phase = RoundPhase.LEADING

    @staticmethod
    def _validate_hands(hands: list[list[Card]]):
        if len(hands) != PLAYER_COUNT:
            raise ValueError(f'There should be exactly {PLAYER_COUNT} hands')
        if any(len(hand) != CARDS_PER_PLAYER_COUNT for hand in hands):
            raise ValueError(f'Every hand should have exactly {CARDS_PER_PLAYER_COUNT} cards')
        all_cards = [card for hand in hands for card in hand]
        if set(all_cards) != set(generate_deck()) or len(all_cards) != len(set(all_cards)):
            raise ValueError('Hands should contain every card of the deck exactly once')

    def _find_starting_player(self) -> int:
        """
        Returns:
            Index of the player with 2 of clubs on hand
        """
        for player_idx, hand in enumerate(self._hands):
            if any(is_starting_card(card) for card in hand):
                return player_idx
        raise RuntimeError('Nobody holds the 2 of clubs')

    @property
    def phase(self) -> RoundPhase:
        return self._phase

    @property
    def hands(self) -> list[list[Card]]:
        return [hand.copy() for hand in self._hands]

    @property
    def taken_cards(self) -> list[list[Card]]:
        return [cards.copy() for cards in self._taken_cards]

    @property
    def played_cards(self) -> list[list[Card]]:
        return [cards.copy() for cards in self._played_cards]

    @property
    def hearts_broken(self) -> bool:
        return self._hearts_broken

    @property
    def trick_starting_player_idx(self) -> int:
        return self._trick_starting_player_idx

    @property
    def current_trick(self) -> list[tuple[int, Card]]:
        return self._current_trick.copy()

    @property
    def current_trick_cards(self) -> list[Card]:
        return [card for _, card in self._current_trick]

    @property
    def leading_suit(self) -> Suit | None:
        """Leading suit in the current trick, or None if the trick is empty"""
        if len(self._current_trick) == 0:
            return None
        return self._current_trick[0][1].suit

    @property
    def current_player_idx(self) -> int:
        """ID of the player that is expected to throw the next card"""
        return (self._trick_starting_player_idx + len(self._current_trick)) % PLAYER_COUNT

    @property
    def is_first_trick(self) -> bool:
        return self.trick_no == 1

    @property
    def is_current_trick_full(self) -> bool:
        return len(self._current_trick) == PLAYER_COUNT

    @property
    def is_finished(self) -> bool:
        return self._phase == RoundPhase.ROUND_COMPLETE

    @property
    def points_collected(self) -> list[int]:
        """
        The number of points collected by each player in the round.
        Does not take the moon shot into account.
        """
        return self._points_collected.copy()

    def check(self, card_index: int) -> LegalResult:
        """
        Checks if the current player may play the card at ``card_index`` of
        their hand, without changing the state
        """
        return is_legal(
            hand=self._hands[self.current_player_idx],
            card_index=card_index,
            hearts_broken=self._hearts_broken,
            trick=self.current_trick_cards,
            is_first_trick=self.is_first_trick,
        )

    def play_card(self, card_index: int) -> LegalResult:
        """
        Play a card from the current player's hand in the current trick.
        An illegal play leaves the state untouched.

        Returns:
            Result of the legality check
        """
        if self.is_finished:
            raise RuntimeError('The round has ended. The trick cannot be played')
        if self.is_current_trick_full:
            raise RuntimeError('Cannot play card because the trick is full. '
                               'Complete the trick before playing the next card')

        result = self.check(card_index)
        if not result.is_legal:
            return result

        player_idx = self.current_player_idx
        card = self._hands[player_idx].pop(card_index)
        self._played_cards[player_idx].append(card)
        self._current_trick.append((player_idx, card))

        # takes effect immediately, for the rest of the current trick too
        if is_point_card(card) and not self._hearts_broken:
            logger.debug('Hearts broken by %s', card)
            self._hearts_broken = True

        if self.is_current_trick_full:
            self._phase = RoundPhase.TRICK_COMPLETE
        else:
            self._phase = RoundPhase.FOLLOWING
        return result

    def complete_trick(self) -> TrickResult:
        """
        Complete the current trick and prepare for the next one
        """
        if not self.is_current_trick_full:
            raise RuntimeError('The trick is not full and therefore cannot be completed')

        trick = self._current_trick
        cards = [card for _, card in trick]
        winner_idx = trick[get_winning_card_idx(cards)][0]
        points = trick_points(cards)

        self._taken_cards[winner_idx].extend(cards)
        self._points_collected[winner_idx] += points
        self._trick_starting_player_idx = winner_idx
        self._current_trick = []
        logger.debug('Trick %d: %s taken by player %d (%d pts)',
                     self.trick_no, ' '.join(str(c) for c in cards), winner_idx, points)

        self.trick_no += 1
        if self.trick_no > CARDS_PER_PLAYER_COUNT:
            if any(len(hand) > 0 for hand in self._hands):
                raise RuntimeError('Cards left in hands after the last trick')
            self._phase = RoundPhase.ROUND_COMPLETE
        else:
            self._phase = RoundPhase.LEADING

        return TrickResult(trick=trick, winner_idx=winner_idx, points=points)
