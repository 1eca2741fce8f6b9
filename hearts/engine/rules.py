from dataclasses import dataclass

from .constants import DEFAULT_TARGET_SCORE


@dataclass(frozen=True)
class HeartsRules:
    """
    Args:
        target_score: The match ends once any player's cumulative score
            reaches or exceeds this value
    """
    target_score: int = DEFAULT_TARGET_SCORE

    def __post_init__(self):
        if self.target_score < 1:
            raise ValueError(f'Target score must be positive, got {self.target_score}')
