"""The player's level, line clear counts and score."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from tetrion.hud import HudDisplayParams

DEFAULT_GAME_LEVEL = 1
DEFAULT_SCORE = 0
DEFAULT_LINE_CLEAR_COUNT = 0


@dataclass
class GamePlayInfo:
    """What happened during one turn: the rows to be cleared."""

    hit_list: List[int] = field(default_factory=list)

    def reset(self) -> None:
        """Forget the rows of the last turn."""
        self.hit_list.clear()


@dataclass
class PlayerState:
    """Level, line clears in this level and in total, the current goal and the score."""

    game_level: int = DEFAULT_GAME_LEVEL
    line_clear_count: int = DEFAULT_LINE_CLEAR_COUNT
    total_line_clear_count: int = 0
    line_clear_goal: int = 0
    score: int = DEFAULT_SCORE

    def initialize(self, goals) -> None:
        """Set the line clear goal of the current level from ``goals``."""
        self.line_clear_goal = goals.level_up_goal(self.game_level)

    def level_up(self, goals) -> None:
        """Advance one level, carrying lines cleared beyond the goal into the new level."""
        self.game_level += 1
        self.total_line_clear_count += self.line_clear_count
        over = self.line_clear_count - self.line_clear_goal
        new_goal = goals.level_up_goal(self.game_level)
        if new_goal <= 0:
            raise ValueError(f"line clear goal must be positive, got {new_goal}")
        if not 0 <= over < new_goal:
            raise ValueError(
                f"carried line clears {over} outside [0, {new_goal}) after level up"
            )
        self.line_clear_count = over
        self.line_clear_goal = new_goal

    def update(self, info: GamePlayInfo) -> None:
        """Count the lines cleared in the turn described by ``info``."""
        self.line_clear_count += len(info.hit_list)

    def add_score(self, value: int) -> None:
        """Add ``value`` to the score."""
        self.score += value

    def hud_params(self) -> HudDisplayParams:
        """Return the figures for the HUD."""
        return HudDisplayParams(self.game_level, self.line_clear_count, self.line_clear_goal)