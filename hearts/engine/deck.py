from dataclasses import dataclass, field

import numpy as np

from .card import Card
from .constants import Suit, CARDS_IN_DECK_COUNT, PLAYER_COUNT, MIN_CARD_VALUE, MAX_CARD_VALUE


def generate_deck() -> list[Card]:
    """
    Returns:
        Standard deck of 52 cards, ordered by suit and within each suit
        from 2 to Ace
    """
    return [
        Card(suit, value)
        for suit in Suit
        for value in range(MIN_CARD_VALUE, MAX_CARD_VALUE + 1)
    ]


@dataclass
class Deal:
    """
    Args:
        hands: One hand per player, in seat order
        kitty: Cards set aside for the round when the deck does not divide
            evenly among the players. They are neither played nor scored
    """
    hands: list[list[Card]]
    kitty: list[Card] = field(default_factory=list)


def deal(player_count: int = PLAYER_COUNT,
         rng: np.random.Generator | None = None) -> Deal:
    """
    Shuffles a full deck and deals it round-robin to ``player_count`` hands.
    With 4 players every hand gets 13 cards; otherwise the cards that do not
    divide evenly end up in the kitty.

    Args:
        player_count: Number of hands to deal, from 1 to 4
        rng: Random generator used for shuffling. A fresh, unseeded one is
            created if not provided
    """
    if not 1 <= player_count <= PLAYER_COUNT:
        raise ValueError(f'Player count must be between 1 and {PLAYER_COUNT}, '
                         f'got {player_count}')
    if rng is None:
        rng = np.random.default_rng()

    deck = generate_deck()
    shuffled = [deck[i] for i in rng.permutation(len(deck))]

    dealt_count = CARDS_IN_DECK_COUNT // player_count * player_count
    hands: list[list[Card]] = [shuffled[i:dealt_count:player_count] for i in range(player_count)]
    return Deal(hands=hands, kitty=shuffled[dealt_count:])
