# ttt/agents/__init__.py
from .base import Agent, AgentLike, apply_move
from .random import RandomAgent

__all__ = ["Agent", "AgentLike", "RandomAgent", "apply_move"]
