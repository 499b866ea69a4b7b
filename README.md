# tetrion

`tetrion` is a small, dependency-free engine for falling-block puzzle games
in the style of the modern guideline. It models the rules and the game state;
it draws nothing. You drive it from whatever front end you like (a terminal,
a GUI toolkit, a test harness) by calling its input handlers and stepping its
clock.

## Modules

- `tetrion.shapes`: the seven shapes (`Shape`), the four orientations
  (`Facing`, with `Facing.rotated(steps)`) and `RotationDirection`. It holds
  each shape's mino layout per facing (`mino_locations`), the Super Rotation
  System kick tables (`srs_offsets`), spawn locations (`initial_location`),
  colours (`shape_info`), and names (`shape_name`, `facing_name`).
  Locations are `(row, col)` pairs; a larger row lies lower.
- `tetrion.pieces`: `Mino` and `MinoInfo`, the piece in play (`Tetrimino`)
  and its landing preview (`GhostPiece`). A `Tetrimino` moves
  (`move_by`), rotates (`rotate_to`, `rotate_with_offset`) and keeps its ghost
  on the landing row while it is on a board.
- `tetrion.generator`: `BagGenerator`, a seven-bag randomiser that deals
  every shape once before any repeats. Pass a `random.Random` for a
  repeatable sequence.
- `tetrion.piece_queue`: `PieceQueue`, a first-in first-out queue used for
  the Next and Hold queues, with `layout()` placing pieces in slots.
- `tetrion.board`: `Board`, a 10 × 40 matrix of which the lower 20 rows are
  visible, with the skyline at row 20. It checks collisions, movement and
  rotation, finds the hard-drop landing location
  (`final_falling_location`), locks minos in (`add_minos`) and clears rows
  (`clear_rows`), dropping the rows above.
- `tetrion.goals`: level goals built by `create_goal_system`:
  `FixedGoalSystem` (10 lines per level) or `VariableGoalSystem`
  (5 × level lines). `GoalSystemType.NONE` gives no goal system.
- `tetrion.timing`: the phases of a turn (`Phase`, `phase_name`), the
  lock-down reset counter (`ExtendedPlacement`, 15 resets) and
  `TimerManager`, a simulated clock that fires callbacks only when you call
  `advance(seconds)`.
- `tetrion.play_manager`: `PlayManager` runs the turn cycle, Generation →
  Falling → Lock → Pattern → Iterate → Animate → Eliminate → Completion. It
  handles auto-repeat movement, soft drop, hard drop, rotation, hold, and the
  block-out and lock-out game-over conditions.
- `tetrion.game`: `Game` ties a `PlayManager` to a `PlayerState` and a goal
  system, levels the player up and speeds up the fall
  (`normal_fall_speed`, `soft_drop_speed`).
- `tetrion.player_state`: `PlayerState` (level, lines this level, total
  lines, goal, score) and `GamePlayInfo` (the rows cleared in a turn).
- `tetrion.controller`: `Controller` turns key press and release events into
  play actions. While left and right are both held, releasing the key of the
  current direction makes the piece move the other way.
- `tetrion.hud`: HUD text: `format_time`, `name_value_line` and `HudIngame`.
- `tetrion.menu`: `Menu`, keyboard focus over a list of buttons that wraps
  round at either end, and the key-to-direction helpers.
- `tetrion.audio`: `AudioSettings`, per-sound-class volumes stored in an INI
  file and passed to a mixer callback you supply.

## Installation

```
pip install tetrion
```

Python 3.10 or newer; no runtime dependencies.

## Example

```python
import random

from tetrion.controller import Controller
from tetrion.game import Game, normal_fall_speed, soft_drop_speed
from tetrion.generator import BagGenerator
from tetrion.goals import GoalSystemType
from tetrion.hud import format_time

game = Game(GoalSystemType.FIXED, generator=BagGenerator(random.Random(1)))
game.start()                       # spawns the first piece
controller = Controller(game)

controller.on_move_left_started()
controller.on_move_left_completed()
controller.on_hard_drop_started()  # locks the piece at its landing row
game.timers.advance(0.2)           # the next piece spawns after 0.2 s

normal_fall_speed(1)               # 1.0 seconds per row
soft_drop_speed(1.0)               # 0.05
format_time(75.0)                  # "01 : 15"
```

The engine never reads a real clock: time moves on only through
`TimerManager.advance`, so a game is deterministic given its inputs and its
random generator.

## What it does not do

`tetrion` has no screen, no rendering and no command to start a game.
It plays no sounds itself: `PlayManager` and `Game` accept a `sound_player`
callable that receives a sound name ("Rotation", "AutoRepeatMovement",
"GameOver"), and `AudioSettings` hands volumes to a `mixer` callable. There is
no scoring beyond `PlayerState.add_score`, and no pause or main-menu screens;
`Menu` only tracks focus.

## Running the tests

```
pip install "tetrion[test]"
pytest
```