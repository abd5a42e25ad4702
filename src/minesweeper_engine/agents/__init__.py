"""
Automated Minesweeper players.

Provides agents that drive the engine through MinesweeperEnv:
- RandomAgent: Baseline random reveals
- LogicAgent: Single-constraint deduction with flagging
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent
from .logic_agent import LogicAgent

__all__ = [
    "BaseAgent",
    "RandomAgent",
    "LogicAgent",
]
