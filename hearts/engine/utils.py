from .card import Card
from .constants import Suit, HEART_POINTS, Q_SPADES_POINTS, MAX_POINTS

Q_SPADES = Card(Suit.SPADE, 12)
STARTING_CARD = Card(Suit.CLUB, 2)


def is_heart(card: Card) -> bool:
    return card.suit == Suit.HEART


def is_q_spades(card: Card) -> bool:
    return card == Q_SPADES


def is_starting_card(card: Card) -> bool:
    return card == STARTING_CARD


def is_point_card(card: Card) -> bool:
    return is_heart(card) or is_q_spades(card)


def points_for_card(card: Card) -> int:
    if is_heart(card):
        return HEART_POINTS
    if is_q_spades(card):
        return Q_SPADES_POINTS
    return 0


def trick_points(cards: list[Card]) -> int:
    return sum(points_for_card(card) for card in cards)


def get_winning_card_idx(cards: list[Card]) -> int:
    """
    Returns:
        Position of the winning card in the trick, i.e. the highest card of
        the suit of the first card played
    """
    leading_suit = cards[0].suit
    winning_idx = 0
    for i, card in enumerate(cards):
        if card.suit == leading_suit and card.value > cards[winning_idx].value:
            winning_idx = i
    return winning_idx


def apply_moon_shot(points_collected: list[int]) -> list[int]:
    """
    If one player collected all the points, they get 0 and everyone else
    gets the maximum instead. Otherwise the points are returned unchanged.
    """
    if MAX_POINTS not in points_collected:
        return points_collected.copy()
    return [MAX_POINTS - points for points in points_collected]
