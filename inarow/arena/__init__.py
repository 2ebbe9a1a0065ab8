from .game_arena import GameArena

__all__ = ["GameArena"]
