"""Goal systems deciding how many cleared lines each level needs."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional


class GoalSystemType(Enum):
    """The kinds of goal system a game can use."""

    NONE = 0
    FIXED = 1
    VARIABLE = 2


class GoalSystem(ABC):
    """Decides the line clear goal of each level."""

    @abstractmethod
    def level_up_goal(self, level: int) -> int:
        """Return how many lines must be cleared to leave ``level``."""

    def is_level_up_condition(self, state) -> bool:
        """Return True if ``state`` has cleared enough lines to level up."""
        return state.line_clear_count >= self.level_up_goal(state.game_level)


class FixedGoalSystem(GoalSystem):
    """Every level needs the same number of lines."""

    LEVEL_UP_LINE_COUNT_GOAL = 10

    def level_up_goal(self, level: int) -> int:
        """Return the fixed goal, whatever the level."""
        return self.LEVEL_UP_LINE_COUNT_GOAL


class VariableGoalSystem(GoalSystem):
    """Each level needs a multiple of its number in lines."""

    LEVEL_UP_LINE_COUNT_GOAL_MULTIPLIER = 5

    def level_up_goal(self, level: int) -> int:
        """Return the level number times the multiplier."""
        return level * self.LEVEL_UP_LINE_COUNT_GOAL_MULTIPLIER


def create_goal_system(kind) -> Optional[GoalSystem]:
    """Return a goal system of ``kind``, or None for ``GoalSystemType.NONE``."""
    try:
        kind = GoalSystemType(kind)
    except ValueError:
        raise ValueError(f"unknown goal system type: {kind!r}") from None
    if kind is GoalSystemType.FIXED:
        return FixedGoalSystem()
    if kind is GoalSystemType.VARIABLE:
        return VariableGoalSystem()
    return None