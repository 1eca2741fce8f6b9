from .input_player import InputPlayer
from .random_player import RandomPlayer
from .scripted_player import ScriptedPlayer

__all__ = [
    'InputPlayer',
    'RandomPlayer',
    'ScriptedPlayer',
]
