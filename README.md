# flappyweb

A small Flappy Bird style arcade game. Guide the bird through the gaps
between the pipes; every pipe you pass scores a point. Touch a pipe or
fall to the bottom of the screen and the round is over.

## Installing

```
pip install .
```

## Playing

```
flappyweb
```

The game opens a 400 × 600 window on a menu screen.

- **Menu**: press Space or click the start button to begin. The button in
  the top-right corner turns sound on and off.
- **Playing**: press Space or click to flap.
- **Game over**: your score and the best score so far are shown. Press
  Space or click to go back to the menu.

Options:

- `--assets DIR`: directory holding the images, sounds and font
  (default: the working directory).
- `--high-score FILE`: file keeping the best score
  (default: `highscore.txt` in the working directory).

A missing or unreadable high-score file counts as a best score of 0.

### Assets

The game looks for these files in the asset directory:
`background.png`, `bird.png`, `pipe.png`, `menu.png`, `start_button.png`,
`soundon.png`, `soundoff.png`, `arialbd.ttf`, `music.mp3`, `jump.wav`,
`gameover.wav` and `menu_music.mp3`.

Any that are missing are simply left out: an image that cannot be loaded
is not drawn, a missing sound or piece of music stays silent, and without
the font pygame's default font is used. If no audio device can be opened
the game runs without sound.

## Using it as a library

The game rules live apart from the drawing code, so they can be driven
without a window:

```python
import random
from flappyweb.engine import Cue, Engine, GameState

engine = Engine("highscore.txt", random.Random(1))
cues = engine.handle_space()          # leave the menu
assert engine.state is GameState.PLAYING
assert cues == [Cue.GAME_MUSIC]
for _ in range(200):
    engine.update()
```

`Engine.handle_space()`, `Engine.handle_click(x, y)`, `Engine.update()`
and `Engine.reset()` each return the list of `Cue` values (music changes,
jumps, sound on/off) that a front end should act on. When a round ends
with a new best score, it is written to the engine's high-score file.

`flappyweb.bird.Bird`, `flappyweb.pipe.Pipe`, `flappyweb.button.Button`
and `flappyweb.geometry.Rect` are the building blocks the engine uses;
`flappyweb.highscore` provides `load_high_score(path)` and
`save_high_score(path, score)`. The window itself is
`flappyweb.app.App`.

## Running the tests

```
pip install ".[test]"
pytest
```