from .base_player import BasePlayer

__all__ = ['BasePlayer']
