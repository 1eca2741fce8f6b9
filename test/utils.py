"""
Utilities for tests
"""
from hearts.engine import Card, Suit, generate_deck


def c(card_str: str) -> Card:
    """
    A quick way to parse a Card object from a string e.g. "10♥"
    """
    return Card.parse(card_str)


def cl(cards_str: list[str]) -> list[Card]:
    """
    A quick way to parse a list of Card object from a string e.g. ["10♥", "Q♣"]
    """
    return [c(s) for s in cards_str]


def suit_hands() -> list[list[Card]]:
    """
    A deal where every player holds a whole suit, from 2 to Ace:
    player 0 - clubs, 1 - diamonds, 2 - spades, 3 - hearts.
    Whatever is played, player 0 takes all the tricks and shoots the moon
    """
    deck = generate_deck()
    return [[card for card in deck if card.suit == suit] for suit in Suit]


def diamond_lead_hands() -> list[list[Card]]:
    """
    A deal where player 3 takes the first trick with the A♣ and then leads the
    K♦ while everyone else is void in diamonds:
    player 0 follows with the Q♠, player 1 with the 3♥, player 2 with the 7♥
    """
    return [
        cl(['2♣', '3♣', '4♣', '5♣', '6♣', '7♣', 'Q♠', '2♠', '3♠', '4♠', '5♠', '6♠', '7♠']),
        cl(['2♦', '3♥', '8♠', '9♠', '10♠', 'J♠', 'K♠', 'A♠', '2♥', '4♥', '5♥', '6♥', '8♥']),
        cl(['8♣', '9♣', '10♣', 'J♣', 'Q♣', 'K♣', '7♥', '9♥', '10♥', 'J♥', 'Q♥', 'K♥', 'A♥']),
        cl(['A♣', '3♦', '4♦', '5♦', '6♦', '7♦', '8♦', '9♦', '10♦', 'J♦', 'Q♦', 'K♦', 'A♦']),
    ]
