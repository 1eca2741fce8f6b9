"""
This module contains the rules of Hearts: cards and dealing, the legality of
plays and the state of a single round, in the form of the
:class:`HeartsRound` class.
"""

from .card import Card
from .constants import Suit
from .deck import Deal, deal, generate_deck
from .legality import LegalResult, Verdict, is_legal, valid_plays
from .round import HeartsRound, RoundPhase, TrickResult
from .rules import HeartsRules
