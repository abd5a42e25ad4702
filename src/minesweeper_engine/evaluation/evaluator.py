"""
Evaluation harness for Minesweeper agents.

Plays whole games through MinesweeperEnv and reports aggregate
statistics.
"""
import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..agents.base_agent import BaseAgent
from ..game.difficulty import DEFAULT_DIFFICULTY
from ..game.environment import MinesweeperEnv

logger = logging.getLogger(__name__)


# ============================================================================
# Evaluation Configuration
# ============================================================================

@dataclass
class EvaluationConfig:
    """Configuration for an evaluation run."""

    difficulty: str = DEFAULT_DIFFICULTY
    games: int = 100
    max_steps: int = 1000
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.games < 1:
            raise ValueError("Number of games must be positive")
        if self.max_steps < 1:
            raise ValueError("Max steps must be positive")


# ============================================================================
# Evaluation Statistics
# ============================================================================

@dataclass
class GameStats:
    """Statistics for a single game."""

    total_reward: float = 0.0
    steps: int = 0
    won: bool = False
    revealed_cells: int = 0


@dataclass
class EvaluationStats:
    """Accumulated statistics over an evaluation run."""

    games: List[GameStats] = field(default_factory=list)

    @property
    def wins(self) -> int:
        """Games won."""
        return sum(game.won for game in self.games)

    def summary(self) -> Dict[str, float]:
        """Average the per-game statistics."""
        count = len(self.games) or 1
        return {
            "win_rate": self.wins / count,
            "avg_reward": sum(g.total_reward for g in self.games) / count,
            "avg_steps": sum(g.steps for g in self.games) / count,
            "avg_revealed": sum(g.revealed_cells for g in self.games) / count,
        }


# ============================================================================
# Agent Evaluator
# ============================================================================

class Evaluator:
    """
    Evaluate and compare agents.

    Every agent plays the same number of games at the same difficulty.
    With a seed, a run is reproducible for a deterministic agent.
    """

    def __init__(self, config: Optional[EvaluationConfig] = None) -> None:
        """
        Initialize the evaluator.

        Args:
            config: Evaluation settings (default: 100 games on normal).
        """
        self.config = config or EvaluationConfig()

    def play_game(
        self,
        env: MinesweeperEnv,
        agent: BaseAgent,
        seed: Optional[int] = None,
    ) -> GameStats:
        """Play one game to completion or until the step limit."""
        observation, _ = env.reset(seed=seed)
        agent.reset()
        stats = GameStats()

        for _ in range(self.config.max_steps):
            action = agent.select_action(observation, env.get_action_mask())
            observation, reward, terminated, truncated, info = env.step(action)

            stats.total_reward += float(reward)
            stats.steps += 1

            if terminated or truncated:
                stats.won = info.get("game_state") == "WON"
                stats.revealed_cells = info.get("revealed", 0)
                break
        else:
            logger.debug("Game stopped after %d steps", self.config.max_steps)
            stats.revealed_cells = env.session.revealed_count

        return stats

    def run(self, agent: BaseAgent) -> EvaluationStats:
        """Play all configured games with one agent."""
        env = MinesweeperEnv(self.config.difficulty)
        stats = EvaluationStats()
        for game in range(self.config.games):
            # Seed only the first reset; later games continue the sequence.
            seed = self.config.seed if game == 0 else None
            stats.games.append(self.play_game(env, agent, seed=seed))
        return stats

    def evaluate(self, agent: BaseAgent) -> Dict[str, float]:
        """
        Evaluate a single agent.

        Args:
            agent: Agent to evaluate.

        Returns:
            Dictionary with win_rate, avg_reward, avg_steps and
            avg_revealed.
        """
        return self.run(agent).summary()

    def compare(
        self, agents: Dict[str, BaseAgent]
    ) -> Dict[str, Dict[str, float]]:
        """
        Compare multiple agents.

        Args:
            agents: Dictionary of agent_name -> agent.

        Returns:
            Dictionary of agent_name -> evaluation metrics.
        """
        results = {}
        for name, agent in agents.items():
            logger.info("Evaluating %s", name)
            results[name] = self.evaluate(agent)
        return results

    def save_results(
        self, results: Dict[str, Any], path: Union[str, Path]
    ) -> Path:
        """Write results and the config that produced them as JSON."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(
                {"config": asdict(self.config), "results": results},
                f,
                indent=2,
            )
        return path
