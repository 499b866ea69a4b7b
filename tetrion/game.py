"""One game in progress: the player's state, the goal system and the play manager."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from tetrion.goals import GoalSystem, GoalSystemType, create_goal_system
from tetrion.play_manager import PlayManager
from tetrion.player_state import GamePlayInfo, PlayerState
from tetrion.timing import Phase, TimerManager

log = logging.getLogger(__name__)

TETRIS_LEVEL_NAME = "TetrisLevel"
SOFT_DROP_MULTIPLIER = 20.0


def normal_fall_speed(level: int) -> float:
    """Return the seconds a piece takes to fall one row at ``level``."""
    base = 0.8 - ((level - 1) * 0.007)
    return base ** float(level - 1)


def soft_drop_speed(normal_fall_speed: float) -> float:
    """Return the seconds per row while soft dropping, given the normal fall speed."""
    return normal_fall_speed / SOFT_DROP_MULTIPLIER


class Game:
    """Ties the play manager to the player's level, line goals and the HUD."""

    def __init__(
        self,
        goal_system_type: GoalSystemType = GoalSystemType.NONE,
        *,
        timers: Optional[TimerManager] = None,
        generator: Any = None,
        sound_player: Optional[Callable[[str], None]] = None,
        hud: Any = None,
        normal_fall_off: bool = False,
        on_game_over: Optional[Callable[[], None]] = None,
    ) -> None:
        self.goal_system_type = GoalSystemType(goal_system_type)
        self.timers = timers if timers is not None else TimerManager()
        self.normal_fall_off = normal_fall_off
        self.hud = hud
        self.player_state = PlayerState()
        self.goals: Optional[GoalSystem] = None
        self.play_manager = PlayManager(
            game=self,
            timers=self.timers,
            generator=generator,
            sound_player=sound_player,
        )
        self.start_time = 0.0
        self.game_over = False
        self._on_game_over = on_game_over

    def start(self) -> None:
        """Set everything up and spawn the first piece."""
        self.goals = create_goal_system(self.goal_system_type)
        self.play_manager.initialize()
        if self.goals is not None:
            self.player_state.initialize(self.goals)
        if self.hud is not None:
            self.hud.update_display(self.player_state.hud_params())
        self.game_over = False
        self.start_time = self.timers.time
        self.play_manager.enter_phase(Phase.GENERATION)

    def elapsed_time(self) -> float:
        """Seconds of play since the game started."""
        return self.timers.time - self.start_time

    def current_fall_speed(self) -> float:
        """The normal fall speed at the player's current level."""
        return normal_fall_speed(self.player_state.game_level)

    def update_game_play(self, info: GamePlayInfo) -> None:
        """Record the turn described by ``info``, levelling up when the goal is met."""
        self.player_state.update(info)
        if self.goals is not None and self.goals.is_level_up_condition(self.player_state):
            self.level_up()
        if self.hud is not None:
            self.hud.update_display(self.player_state.hud_params())

    def run_game_over(self) -> None:
        """End the game."""
        self.game_over = True
        if self._on_game_over is not None:
            self._on_game_over()

    def level_up(self) -> None:
        """Advance the player one level and speed up the normal fall."""
        if self.goals is None:
            raise RuntimeError("cannot level up without a goal system")
        self.player_state.level_up(self.goals)
        old_speed = self.play_manager.normal_fall_speed
        new_speed = self.current_fall_speed()
        if old_speed == new_speed:
            raise RuntimeError("level up did not change the normal fall speed")
        self.play_manager.normal_fall_speed = new_speed
        log.info("level up: new normal fall speed %f", new_speed)