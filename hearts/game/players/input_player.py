import os

from hearts.engine.card import Card
from hearts.engine.constants import Suit
from hearts.engine.legality import LegalResult, Verdict, is_legal
from hearts.engine.utils import trick_points
from .base.base_player import BasePlayer


def clear_screen() -> None:
    os.system('cls' if os.name == 'nt' else 'clear')


class InputPlayer(BasePlayer):
    """
    A player with console input

    Args:
        name: Shown at the top of every turn so that several humans can share
            one terminal
        clear_between_turns: Clear the screen before showing the hand, so
            the previous player's hand is not visible
        pause_after_trick: Wait for [Enter] after showing each trick outcome
    """

    rejection_messages = {
        Verdict.OUT_OF_RANGE: "That's not in your hand.",
        Verdict.HEARTS_NOT_YET_BROKEN: "You can't play that yet; hearts haven't been broken.",
        Verdict.MUST_LEAD_STARTING_CARD: 'The first trick must be led with the 2♣.',
        Verdict.NO_POINTS_ON_FIRST_TRICK: "You can't play points on the first trick.",
    }

    def __init__(self,
                 name: str = 'Player',
                 clear_between_turns: bool = True,
                 pause_after_trick: bool = True):
        self.name = name
        self.clear_between_turns = clear_between_turns
        self.pause_after_trick = pause_after_trick

    @staticmethod
    def _sorted_hand(hand: list[Card]) -> list[Card]:
        suit_order = list(Suit)
        return sorted(hand, key=lambda card: (suit_order.index(card.suit), card.value))

    @staticmethod
    def pretty_print_hand(hand: list[Card]) -> None:
        numbers_row = ' | '.join(f'{i + 1:^3}' for i in range(len(hand)))
        cards_row = ' | '.join(f'{str(card):^3}' for card in hand)
        print(numbers_row)
        print(cards_row)

    @classmethod
    def describe_rejection(cls, result: LegalResult) -> str:
        if result.verdict == Verdict.MUST_FOLLOW_SUIT:
            return f'You must follow suit ({result.expected_suit.value}).'
        return cls.rejection_messages[result.verdict]

    def turn(self,
             hand: list[Card],
             current_score: int,
             already_played: list[Card],
             hearts_broken: bool,
             is_first_trick: bool) -> int:
        if self.clear_between_turns:
            clear_screen()

        print(f'{self.name}, you have {current_score} points.')
        if len(already_played) == 0:
            print('You are leading the trick')
        else:
            print(f'Cards played already: {" ".join(str(card) for card in already_played)}')
        if not hearts_broken:
            print('Hearts have not been broken yet.')

        print('Here is your hand:')
        sorted_hand = self._sorted_hand(hand)
        self.pretty_print_hand(sorted_hand)

        while True:
            raw_choice = input('Which card would you like to play?\n> ')
            try:
                choice = int(raw_choice) - 1
            except ValueError:
                print('You must enter a number.')
                continue

            if not 0 <= choice < len(sorted_hand):
                print(self.rejection_messages[Verdict.OUT_OF_RANGE])
                continue

            card_idx = hand.index(sorted_hand[choice])
            result = is_legal(hand, card_idx, hearts_broken, already_played, is_first_trick)
            if result.is_legal:
                return card_idx
            print(self.describe_rejection(result))

    def on_illegal_play(self, result: LegalResult) -> None:
        print(self.describe_rejection(result))

    def post_trick_callback(self, trick: list[Card], is_trick_taken: bool) -> None:
        print(f'Trick outcome: {", ".join(str(card) for card in trick)} '
              f'({trick_points(trick)} pts)')
        if is_trick_taken:
            print(f'{self.name}, you take this trick.')
        if self.pause_after_trick:
            input('Press [Enter] to proceed ')

    def post_round_callback(self, score: int) -> None:
        print('=====')
        print(f'Round finished. {self.name}, your score for the round: {score}')
        print('=====')
