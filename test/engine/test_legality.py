import unittest

from hearts.engine import Suit, Verdict, is_legal, valid_plays, generate_deck
from test.utils import c, cl


class TestIsLegal(unittest.TestCase):
    def test_must_follow_suit(self):
        hand = cl(['2♣', '5♥', 'K♠'])
        result = is_legal(hand, 1, hearts_broken=False, trick=cl(['9♣']))
        self.assertEqual(Verdict.MUST_FOLLOW_SUIT, result.verdict)
        self.assertEqual(Suit.CLUB, result.expected_suit)

        result = is_legal(hand, 0, hearts_broken=False, trick=cl(['9♣']))
        self.assertTrue(result.is_legal)

    def test_only_hearts_can_be_led(self):
        result = is_legal(cl(['5♥']), 0, hearts_broken=False, trick=[])
        self.assertTrue(result.is_legal)

    def test_out_of_range(self):
        hand = cl(['2♣', '5♥'])
        for card_index in [2, 10, -1]:
            result = is_legal(hand, card_index, hearts_broken=True, trick=[])
            self.assertEqual(Verdict.OUT_OF_RANGE, result.verdict, card_index)

    def test_out_of_range_empty_hand(self):
        self.assertEqual(Verdict.OUT_OF_RANGE, is_legal([], 0, False, []).verdict)

    def test_leading_hearts_before_broken(self):
        hand = cl(['3♦', '5♥'])
        result = is_legal(hand, 1, hearts_broken=False, trick=[])
        self.assertEqual(Verdict.HEARTS_NOT_YET_BROKEN, result.verdict)

        result = is_legal(hand, 1, hearts_broken=True, trick=[])
        self.assertTrue(result.is_legal)

    def test_leading_q_spades_before_broken(self):
        result = is_legal(cl(['Q♠', '5♥']), 0, hearts_broken=False, trick=[])
        self.assertTrue(result.is_legal)

    def test_discarding_hearts_when_void(self):
        hand = cl(['5♥', 'K♠'])
        result = is_legal(hand, 0, hearts_broken=False, trick=cl(['9♦']))
        self.assertEqual(Verdict.HEARTS_NOT_YET_BROKEN, result.verdict)
        self.assertEqual([1], valid_plays(hand, False, cl(['9♦'])))

        result = is_legal(hand, 0, hearts_broken=True, trick=cl(['9♦']))
        self.assertTrue(result.is_legal)

    def test_discarding_hearts_when_only_hearts_left(self):
        hand = cl(['5♥', '9♥'])
        result = is_legal(hand, 0, hearts_broken=False, trick=cl(['9♦']))
        self.assertTrue(result.is_legal)

    def test_following_hearts_before_broken(self):
        hand = cl(['5♥', 'K♠'])
        result = is_legal(hand, 0, hearts_broken=False, trick=cl(['2♥']))
        self.assertTrue(result.is_legal)

    def test_follow_suit_takes_precedence_over_hearts(self):
        hand = cl(['3♥', '5♥', '8♦'])
        result = is_legal(hand, 2, hearts_broken=False, trick=cl(['2♥']))
        self.assertEqual(Verdict.MUST_FOLLOW_SUIT, result.verdict)
        self.assertEqual(Suit.HEART, result.expected_suit)

    def test_first_trick_must_lead_two_of_clubs(self):
        hand = cl(['2♣', '3♦', 'A♣'])
        result = is_legal(hand, 2, hearts_broken=False, trick=[], is_first_trick=True)
        self.assertEqual(Verdict.MUST_LEAD_STARTING_CARD, result.verdict)

        result = is_legal(hand, 0, hearts_broken=False, trick=[], is_first_trick=True)
        self.assertTrue(result.is_legal)

    def test_no_points_on_first_trick(self):
        hand = cl(['Q♠', '5♥', '3♦'])
        result = is_legal(hand, 0, False, cl(['2♣']), is_first_trick=True)
        self.assertEqual(Verdict.NO_POINTS_ON_FIRST_TRICK, result.verdict)
        result = is_legal(hand, 1, False, cl(['2♣']), is_first_trick=True)
        self.assertEqual(Verdict.HEARTS_NOT_YET_BROKEN, result.verdict)
        self.assertTrue(is_legal(hand, 2, False, cl(['2♣']), is_first_trick=True).is_legal)

    def test_points_on_first_trick_when_nothing_else(self):
        hand = cl(['Q♠', '5♥'])
        result = is_legal(hand, 0, False, cl(['2♣']), is_first_trick=True)
        self.assertTrue(result.is_legal)
        result = is_legal(hand, 1, False, cl(['2♣']), is_first_trick=True)
        self.assertEqual(Verdict.HEARTS_NOT_YET_BROKEN, result.verdict)

        hand = cl(['5♥', '9♥'])
        self.assertEqual([0, 1], valid_plays(hand, False, cl(['2♣']), is_first_trick=True))

    def test_any_off_suit_card_is_rejected_when_suit_can_be_followed(self):
        deck = generate_deck()
        hand = deck[::4]
        for leading_card in deck:
            for card_index, card in enumerate(hand):
                result = is_legal(hand, card_index, True, [leading_card])
                if card.suit == leading_card.suit:
                    self.assertTrue(result.is_legal)
                elif any(h.suit == leading_card.suit for h in hand):
                    self.assertEqual(Verdict.MUST_FOLLOW_SUIT, result.verdict)


class TestValidPlays(unittest.TestCase):
    def test_valid_plays(self):
        hand = cl(['2♣', '5♥', 'K♠', '9♣'])
        self.assertEqual([0, 3], valid_plays(hand, False, cl(['10♣'])))
        self.assertEqual([0, 2, 3], valid_plays(hand, False, []))
        self.assertEqual([0], valid_plays(hand, False, [], is_first_trick=True))

    def test_never_empty(self):
        hand = [c('Q♠')]
        self.assertEqual([0], valid_plays(hand, False, cl(['2♣']), is_first_trick=True))
