from enum import Enum

PLAYER_COUNT = 4
CARDS_IN_DECK_COUNT = 52
CARDS_PER_PLAYER_COUNT = CARDS_IN_DECK_COUNT // PLAYER_COUNT
MIN_CARD_VALUE = 2
MAX_CARD_VALUE = 14

HEART_POINTS = 1
Q_SPADES_POINTS = 13
MAX_POINTS = 26

DEFAULT_TARGET_SCORE = 100


class Suit(Enum):
    CLUB = '\u2663'
    DIAMOND = '\u2666'
    SPADE = '\u2660'
    HEART = '\u2665'

    @property
    def letter(self) -> str:
        """One-letter name used in the short card format, e.g. ``H``"""
        return self.name[0]

    @classmethod
    def from_symbol(cls, symbol: str) -> 'Suit':
        for suit in cls:
            if symbol in (suit.value, suit.letter, suit.letter.lower()):
                return suit
        raise ValueError(f'Unknown suit: {symbol!r}')
