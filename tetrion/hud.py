"""Text shown on the in-game heads-up display."""

from __future__ import annotations

import math
from dataclasses import dataclass

LINE_LENGTH = 35

LEVEL_NAME = "Level"
LINE_CLEAR_NAME = "Line Clear"
TIME_NAME = "Time"


def format_time(seconds: float) -> str:
    """Format elapsed ``seconds`` as ``MM : SS``."""
    total = math.floor(seconds)
    minutes = int(total / 60)
    secs = total - minutes * 60
    return f"{minutes:02d} : {secs:02d}"


def name_value_line(name: str, value: str) -> str:
    """Return ``name`` followed by ``value`` padded so the line fits the display width."""
    margin = LINE_LENGTH - (len(name) + len(value))
    if margin >= 0:
        return name + value.rjust(margin)
    return name + value.ljust(-margin)


@dataclass(frozen=True)
class HudDisplayParams:
    """The figures the in-game HUD shows."""

    level: int = 0
    line_clear: int = 0
    line_clear_goal: int = 0


class HudIngame:
    """The three text lines of the in-game HUD: level, line clears and time."""

    def __init__(self, params: HudDisplayParams = HudDisplayParams()) -> None:
        self.level_text = ""
        self.line_clear_text = ""
        self.time_text = ""
        self.update_display(params)

    def update_display(self, params: HudDisplayParams) -> None:
        """Refresh the level and line clear lines from ``params``."""
        self.level_text = name_value_line(LEVEL_NAME, str(params.level))
        self.line_clear_text = name_value_line(
            LINE_CLEAR_NAME, f"{params.line_clear} / {params.line_clear_goal}"
        )

    def update_time(self, seconds: float) -> None:
        """Refresh the time line with ``seconds`` elapsed."""
        self.time_text = name_value_line(TIME_NAME, format_time(seconds))