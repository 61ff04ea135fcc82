# yorutris

A falling-block puzzle game played on a 30 x 30 board. Besides the seven
classic pieces it has three extra shapes (C, V and a 2 x 3 slab), which enter
the mix once your score reaches 1000.

## Installing

```
pip install .
```

This pulls in `pygame` for the window, sound and drawing, and `pillow` for
reading animated GIFs.

## Playing

```
yorutris
```

The game opens full screen with a splash animation, then a welcome screen.

- **Enter**: start a game, or restart after a game over
- **Left / Right**: move the piece sideways
- **Down**: drop the piece one row
- **Up**: rotate the piece
- **Escape** or closing the window: quit
- Click **Leaderboard** on the welcome screen to see the best scores. Pressing
  **Enter** there starts a game.

A preview marks where the current piece would land. Pieces also fall by
themselves, faster as your score grows. Background music plays while a game
is running.

### Scoring

| Rows cleared at once | Points |
|----------------------|--------|
| 1                    | 100    |
| 2                    | 300    |
| 3                    | 500    |
| 4                    | 1000   |

Each piece that locks also gives 10 points. The level goes up by one every
250 points.

### Leaderboard

When a game ends its score is recorded under the name `Player`. The top ten
scores are kept in `scores.txt` in the directory the game was started from,
one `name score level` entry per line, best first. An entry identical to one
already in the table is not added again.

### Media

The game looks for these files relative to the working directory and carries
on without any of them that are missing:

- `resources/YoRu_n.gif`: splash animation
- `Media/5.gif`: background animation
- `Font/monogram.ttf`: interface font (pygame's default font otherwise)
- `Sounds/music.mp3`, `Sounds/rotate.wav`, `Sounds/clear.wav`,
  `Sounds/GameOver.wav`: music and sound effects

## What it does not do

The welcome screen shows **Themes**, **Settings** and **Exit** buttons, but
clicking them does nothing: there are no themes or settings, and the game is
quit with Escape or by closing the window. Player names cannot be entered.

## Using the pieces in code

The game rules run without a window:

```python
from yorutris.game import Game, Action

game = Game()
game.update(Action.LEFT)
game.move_down()
print(game.score, game.level(), game.speed())
```

`Game` takes an optional `random.Random` for repeatable piece sequences and
an optional `play_sound` callback, called with `"rotate"`, `"clear"` or
`"game_over"`.

`yorutris.grid.Grid`, `yorutris.block.Block` and `yorutris.blocks` (with
`basic_blocks()` and `all_blocks()`) give the board and the piece shapes,
`yorutris.leaderboard.LeaderBoard` manages the score file, and
`yorutris.animation` holds `Animation`, `SplashScreen` and
`load_gif_frames()` for GIF playback.

## Running the tests

```
pip install ".[test]"
pytest
```