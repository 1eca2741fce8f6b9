from dataclasses import dataclass
from enum import Enum

from .card import Card
from .constants import Suit
from .utils import is_heart, is_point_card, is_starting_card


class Verdict(Enum):
    LEGAL = 0
    OUT_OF_RANGE = 1
    HEARTS_NOT_YET_BROKEN = 2
    MUST_FOLLOW_SUIT = 3
    MUST_LEAD_STARTING_CARD = 4
    NO_POINTS_ON_FIRST_TRICK = 5


@dataclass(frozen=True)
class LegalResult:
    """
    Args:
        verdict: Outcome of the check
        expected_suit: The led suit, set only for ``MUST_FOLLOW_SUIT``
    """
    verdict: Verdict
    expected_suit: Suit | None = None

    @property
    def is_legal(self) -> bool:
        return self.verdict == Verdict.LEGAL


LEGAL = LegalResult(Verdict.LEGAL)
OUT_OF_RANGE = LegalResult(Verdict.OUT_OF_RANGE)
HEARTS_NOT_YET_BROKEN = LegalResult(Verdict.HEARTS_NOT_YET_BROKEN)
MUST_LEAD_STARTING_CARD = LegalResult(Verdict.MUST_LEAD_STARTING_CARD)
NO_POINTS_ON_FIRST_TRICK = LegalResult(Verdict.NO_POINTS_ON_FIRST_TRICK)


def must_follow_suit(expected_suit: Suit) -> LegalResult:
    return LegalResult(Verdict.MUST_FOLLOW_SUIT, expected_suit)


def is_legal(hand: list[Card],
             card_index: int,
             hearts_broken: bool,
             trick: list[Card],
             is_first_trick: bool = False) -> LegalResult:
    """
    Checks whether the card at ``card_index`` in ``hand`` may be played.

    Args:
        hand: Cards held by the player
        card_index: 0-based index into ``hand``
        hearts_broken: Whether a heart or the queen of spades has already
            been played in this round
        trick: Cards already played in the current trick, in play order
        is_first_trick: Whether this is the first trick of the round. Enables
            the standard restrictions: the 2 of clubs must be led and point
            cards cannot be discarded unless there is no other choice

    Returns:
        ``LEGAL`` or the first rule the play breaks
    """
    if not 0 <= card_index < len(hand):
        return OUT_OF_RANGE
    card = hand[card_index]

    leading_suit = trick[0].suit if len(trick) > 0 else None

    if leading_suit is None:
        if is_first_trick and any(is_starting_card(c) for c in hand) and not is_starting_card(card):
            return MUST_LEAD_STARTING_CARD
    elif card.suit != leading_suit and any(c.suit == leading_suit for c in hand):
        return must_follow_suit(leading_suit)

    # following the led suit is never blocked by unbroken hearts
    if (is_heart(card) and card.suit != leading_suit and not hearts_broken
            and not all(is_heart(c) for c in hand)):
        return HEARTS_NOT_YET_BROKEN

    if (leading_suit is not None and is_first_trick and is_point_card(card)
            and not all(is_point_card(c) for c in hand)):
        return NO_POINTS_ON_FIRST_TRICK

    return LEGAL


def valid_plays(hand: list[Card],
                hearts_broken: bool,
                trick: list[Card],
                is_first_trick: bool = False) -> list[int]:
    """
    Returns:
        Indices of all cards in ``hand`` that may be played
    """
    return [
        i for i in range(len(hand))
        if is_legal(hand, i, hearts_broken, trick, is_first_trick).is_legal
    ]
