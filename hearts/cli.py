"""
Command-line entry point for playing Hearts in the terminal.

Usage examples:

    hearts                       # asks how many humans will play
    hearts --humans 1 --seed 24  # one human against three random players
    python -m hearts --humans 0 --yes --log-level INFO  # watch random players
"""
import argparse
import logging
import sys

import numpy as np

from hearts.engine import HeartsRules
from hearts.engine.constants import PLAYER_COUNT, DEFAULT_TARGET_SCORE
from hearts.game import HeartsGame, MatchResult
from hearts.game.players import InputPlayer, RandomPlayer
from hearts.game.players.base import BasePlayer

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f'{value!r} is not a number') from None
    if number < 1:
        raise argparse.ArgumentTypeError(f'{value!r} is not a positive number')
    return number


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog='hearts', description='Play Hearts in the terminal.')
    parser.add_argument(
        '--humans',
        type=int,
        default=None,
        help=f'Number of human players (1-{PLAYER_COUNT}). Asked interactively if omitted. '
             'The remaining seats are taken by random players.',
    )
    parser.add_argument(
        '--target-score',
        type=_positive_int,
        default=DEFAULT_TARGET_SCORE,
        help='The match ends once any player reaches this score.',
    )
    parser.add_argument('--seed', type=int, default=None, help='Random seed for reproducibility.')
    parser.add_argument('--yes', '-y', action='store_true', help='Skip the readiness prompt.')
    parser.add_argument(
        '--no-clear',
        action='store_true',
        help='Do not clear the screen between turns.',
    )
    parser.add_argument(
        '--log-level',
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging verbosity.',
    )
    return parser.parse_args(argv)


def parse_human_count(raw: str, allow_zero: bool = False) -> int:
    """
    Raises:
        ValueError: if ``raw`` is not a number within the allowed range
    """
    lowest = 0 if allow_zero else 1
    try:
        count = int(raw)
    except ValueError:
        raise ValueError(f'Must be a number {lowest}-{PLAYER_COUNT}.') from None
    if not lowest <= count <= PLAYER_COUNT:
        raise ValueError(f'Must be a number {lowest}-{PLAYER_COUNT}.')
    return count


def build_players(human_count: int,
                  rng: np.random.Generator,
                  clear_between_turns: bool = True) -> list[BasePlayer]:
    players: list[BasePlayer] = [
        InputPlayer(name=f'Player {i + 1}', clear_between_turns=clear_between_turns)
        for i in range(human_count)
    ]
    players.extend(
        RandomPlayer(random_state=rng.integers(999999))
        for _ in range(PLAYER_COUNT - human_count)
    )
    return players


def print_match_result(result: MatchResult) -> None:
    print(f'Game over after {result.rounds_played} rounds.')
    for player_idx, score in enumerate(result.scoreboard):
        print(f'Player {player_idx + 1}: {score}')
    winners = ', '.join(f'Player {i + 1}' for i in result.winners)
    if result.is_tie:
        print(f'Tie between {winners}.')
    else:
        print(f'{winners} wins!')


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        return run(args)
    except EOFError:
        print('\nInput closed, leaving the game.', file=sys.stderr)
        return 1


def run(args: argparse.Namespace) -> int:
    if not args.yes:
        ready = input('Hello, welcome to hearts! Ready to play? (Y/n): ')
        if ready.strip().lower().startswith('n'):
            return 0

    try:
        if args.humans is None:
            human_count = parse_human_count(input('How many players? '))
        else:
            human_count = parse_human_count(str(args.humans), allow_zero=True)
    except ValueError as e:
        print(e, file=sys.stderr)
        return 2

    if human_count < PLAYER_COUNT:
        print('Warning: AI is currently just a random player.')

    rng = np.random.default_rng(args.seed)
    players = build_players(human_count, rng, clear_between_turns=not args.no_clear)
    game = HeartsGame(
        players,
        rules=HeartsRules(target_score=args.target_score),
        random_state=rng.integers(999999),
    )
    logger.info('Starting a match with %d human player(s)', human_count)

    result = game.play()
    print_match_result(result)
    return 0
