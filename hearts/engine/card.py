from dataclasses import dataclass

from .constants import Suit, MIN_CARD_VALUE, MAX_CARD_VALUE


@dataclass(frozen=True)
class Card:
    """
    Args:
        suit: Suit of the card
        value: Numerical representation of card's rank (2-14, where Ace=14)
    """
    suit: Suit
    value: int

    rank_mapper = {
        **{i: str(i) for i in range(2, 11)},
        11: 'J',
        12: 'Q',
        13: 'K',
        14: 'A',
    }

    def __post_init__(self):
        if not MIN_CARD_VALUE <= self.value <= MAX_CARD_VALUE:
            raise ValueError(f'Card value must be between {MIN_CARD_VALUE} '
                             f'and {MAX_CARD_VALUE}, got {self.value}')

    @classmethod
    def of(cls, rank: str, suit: Suit) -> 'Card':
        for value, rank_str in cls.rank_mapper.items():
            if rank_str == rank.upper():
                return cls(suit, value)
        raise ValueError(f'Unknown rank: {rank!r}')

    @classmethod
    def parse(cls, card_str: str) -> 'Card':
        """
        Parses both renderings of a card, e.g. ``"10♥"`` or ``"10H"``
        """
        card_str = card_str.strip()
        if len(card_str) < 2:
            raise ValueError(f'Cannot parse a card from {card_str!r}')
        return cls.of(card_str[:-1], Suit.from_symbol(card_str[-1]))

    @property
    def rank(self) -> str:
        return Card.rank_mapper[self.value]

    def format_short(self) -> str:
        """ASCII-only rendering, e.g. ``QS`` for the queen of spades"""
        return f'{self.rank}{self.suit.letter}'

    def __str__(self) -> str:
        return f'{self.rank}{self.suit.value}'

    def __repr__(self) -> str:
        return str(self)
