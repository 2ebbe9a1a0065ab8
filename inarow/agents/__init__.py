from .base import Agent
from .console_agent import ConsoleAgent
from .scripted_agent import ScriptedAgent

__all__ = [
    # Base classes
    "Agent",
    "ConsoleAgent",
    "ScriptedAgent",
]
