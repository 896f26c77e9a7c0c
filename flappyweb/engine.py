"""Game rules: states, scoring, pipe spawning and collisions, free of any display."""

from __future__ import annotations

import enum
import os
import random
from typing import Optional, Union

from .bird import Bird
from .button import Button
from .geometry import Rect
from .highscore import load_high_score, save_high_score
from .pipe import Pipe

SCREEN_WIDTH = 400
SCREEN_HEIGHT = 600
GRAVITY = 0.5
JUMP_STRENGTH = -8.0
PIPE_WIDTH = 60
PIPE_GAP = 180
PIPE_SPEED = 3
PIPE_HEIGHT = 400
PIPE_SPACING = 300
GAP_MARGIN = 50

BIRD_START = (100, 250, 60, 50)

START_BUTTON_RECT = Rect(SCREEN_WIDTH // 2 - 100, SCREEN_HEIGHT // 2, 200, 100)
SOUND_BUTTON_RECT = Rect(SCREEN_WIDTH - 60, 20, 40, 40)

PathLike = Union[str, "os.PathLike[str]"]


class GameState(enum.Enum):
    """Which screen the game is on."""

    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class Cue(enum.Enum):
    """Something the front end should play or change in response to the rules."""

    MENU_MUSIC = "menu_music"
    GAME_MUSIC = "game_music"
    GAME_OVER_MUSIC = "game_over_music"
    JUMP = "jump"
    SOUND_ON = "sound_on"
    SOUND_OFF = "sound_off"


class Engine:
    """The state of one game session and the rules that move it forward.

    Every input and update method returns the list of cues it raised, in
    the order they happened.
    """

    def __init__(
        self,
        high_score_path: PathLike,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.high_score_path = high_score_path
        self.rng = rng if rng is not None else random.Random()
        self.state = GameState.MENU
        self.score = 0
        self.high_score = load_high_score(high_score_path)
        self.sound_on = True
        self.bird = Bird(*BIRD_START)
        self.pipes: list[Pipe] = []
        self.start_button = Button(START_BUTTON_RECT)
        self.sound_button = Button(SOUND_BUTTON_RECT)

    def _start(self) -> list[Cue]:
        self.state = GameState.PLAYING
        self.bird = Bird(*BIRD_START)
        self.pipes.clear()
        self.score = 0
        return [Cue.GAME_MUSIC]

    def _jump(self) -> list[Cue]:
        self.bird.jump(JUMP_STRENGTH)
        return [Cue.JUMP]

    def _toggle_sound(self) -> list[Cue]:
        self.sound_on = not self.sound_on
        return [Cue.SOUND_ON if self.sound_on else Cue.SOUND_OFF]

    def _game_over(self) -> list[Cue]:
        if self.score > self.high_score:
            self.high_score = self.score
            save_high_score(self.high_score_path, self.high_score)
        self.state = GameState.GAME_OVER
        return [Cue.GAME_OVER_MUSIC]

    def handle_space(self) -> list[Cue]:
        """React to the space key: start, jump or return to the menu."""
        if self.state is GameState.MENU:
            return self._start()
        if self.state is GameState.PLAYING:
            return self._jump()
        return self.reset()

    def handle_click(self, x: int, y: int) -> list[Cue]:
        """React to a left click at (x, y)."""
        if self.state is GameState.MENU:
            cues: list[Cue] = []
            if self.start_button.is_clicked(x, y):
                cues += self._start()
            if self.sound_button.is_clicked(x, y):
                cues += self._toggle_sound()
            return cues
        if self.state is GameState.PLAYING:
            return self._jump()
        return self.reset()

    def update(self) -> list[Cue]:
        """Advance the game by one frame while playing."""
        if self.state is not GameState.PLAYING:
            return []

        self.bird.update(GRAVITY)
        bird_rect = self.bird.rect
        if bird_rect.y > SCREEN_HEIGHT - bird_rect.h:
            return self._game_over()

        for pipe in self.pipes:
            pipe.update(PIPE_SPEED)
            if pipe.collides_with(bird_rect):
                return self._game_over()
            if not pipe.passed and bird_rect.x > pipe.x + PIPE_WIDTH:
                self.score += 1
                pipe.passed = True

        if not self.pipes or self.pipes[-1].x < SCREEN_WIDTH - PIPE_SPACING:
            self.generate_pipe()

        if self.pipes and self.pipes[0].x + PIPE_WIDTH < 0:
            del self.pipes[0]

        return []

    def generate_pipe(self) -> Pipe:
        """Add a new pipe pair at the right edge with a random gap, and return it."""
        gap_y = self.rng.randrange(SCREEN_HEIGHT - PIPE_GAP - 2 * GAP_MARGIN) + GAP_MARGIN
        pipe = Pipe(
            SCREEN_WIDTH,
            gap_y - PIPE_HEIGHT,
            SCREEN_WIDTH,
            gap_y + PIPE_GAP,
            PIPE_WIDTH,
            PIPE_HEIGHT,
        )
        self.pipes.append(pipe)
        return pipe

    def reset(self) -> list[Cue]:
        """Return to the menu with a fresh bird and no pipes."""
        self.state = GameState.MENU
        self.score = 0
        self.pipes.clear()
        self.bird = Bird(*BIRD_START)
        return [Cue.MENU_MUSIC]