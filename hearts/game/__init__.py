from .hearts_game import HeartsGame, RoundResult, MatchResult

__all__ = ['HeartsGame', 'RoundResult', 'MatchResult']
