# chickenrun

chickenrun is a small endless-runner arcade game. A chicken runs along the
ground and obstacles scroll in from the right. Some obstacles sit on the ground
and some fly. Jump over them to stay alive. The score goes up by one point every
20 frames.

## Installation

```
pip install .
```

This installs `pygame`, which handles the window, drawing and keyboard input.

## Playing

```
chickenrun
```

An 800×450 window titled "Chicken Run" opens. The game runs at 60 frames per
second. The command takes no options apart from `--help`.

| Key     | Action                                      |
|---------|---------------------------------------------|
| Enter   | Start the game from the title screen        |
| Space   | Jump (only while on the ground)             |
| P       | Pause or resume                             |
| R       | Restart after a game over                   |
| Escape  | Quit (closing the window also quits)        |

Touching an obstacle ends the run. Press R to put the chicken back on the
ground, set the score to zero, send the obstacles back to the right edge, and
play on.

### Assets

Images are loaded from an `Assets/` directory relative to the current working
directory:

- `Assets/background.png`: the sky backdrop
- `Assets/tanah.png`: the ground strip
- `Assets/Spritepitikjalan.png`: the chicken, a sheet of three frames side by side
- `Assets/Obstacle.png`: the obstacle

If an image cannot be loaded, that piece is not drawn. The game logic keeps
running. Without the chicken sprite, its hit box is worked out from a 128×128
frame.

## Using the pieces

The game logic does not need a window. You can drive it one frame at a time by
passing the set of keys pressed during that frame:

```python
import pygame

from chickenrun.game import GameManager
from chickenrun.state import GameState

manager = GameManager()
assert manager.handle_frame(set()) is GameState.START
assert manager.handle_frame({pygame.K_RETURN}) is GameState.PLAYING
```

`GameManager.handle_frame` returns the phase the game is in after the frame.
`GameManager.run()` opens the window and loops until it is closed. The
`chickenrun` command calls `chickenrun.game.main`, which does this.

The building blocks:

- `chickenrun.state.GameState`: `START`, `PLAYING`, `PAUSED`, `GAME_OVER`.
- `chickenrun.game`: `Game` (the playing field), `Ground` (the scenery),
  `GameManager` and `main`.
- `chickenrun.player.Player`: jump physics, the running animation and the
  `rect` hit box as `(x, y, width, height)`.
- `chickenrun.obstacle`: `Obstacle` and `create_obstacle(kind)`, where `kind`
  is `"ground"` or `"flying"`. Any other kind raises `ValueError`.
- `chickenrun.score`: `Score` notifies `ScoreObserver` instances when it
  changes. `ScoreDisplay` is one such observer. It keeps `last_score` and logs
  each change through the standard `logging` module.
- `chickenrun.commands`: `Command`, `JumpCommand`, `PauseCommand` and
  `InputHandler`. `InputHandler` binds keys to commands and runs the command
  for each bound key that was pressed.

## What it does not do

There is no high-score table and nothing is saved between runs. There is no
sound, and there are no settings.

## Running the tests

```
pip install .[test]
pytest
```