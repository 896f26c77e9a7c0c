"""The playable window: loads assets, feeds input to the engine and draws it."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import Optional, Sequence, Union

import pygame

from .engine import SCREEN_HEIGHT, SCREEN_WIDTH, Cue, Engine, GameState
from .geometry import Rect

WINDOW_TITLE = "Flappy Bird"
FRAME_DELAY_MS = 16
FONT_SIZE = 28
TEXT_COLOR = (255, 255, 255)

_IMAGE_FILES = {
    "background": "background.png",
    "bird": "bird.png",
    "pipe": "pipe.png",
    "menu": "menu.png",
    "start": "start_button.png",
    "sound_on": "soundon.png",
    "sound_off": "soundoff.png",
}
_FONT_FILE = "arialbd.ttf"
_JUMP_SOUND_FILE = "jump.wav"
# Each music cue maps to its file and the pygame loop count (-1 repeats forever).
_MUSIC_FILES = {
    Cue.MENU_MUSIC: ("menu_music.mp3", -1),
    Cue.GAME_MUSIC: ("music.mp3", -1),
    Cue.GAME_OVER_MUSIC: ("gameover.wav", 0),
}

PathLike = Union[str, "os.PathLike[str]"]


class App:
    """A window running one game session on top of an :class:`Engine`."""

    def __init__(
        self,
        asset_dir: PathLike = ".",
        high_score_path: PathLike = "highscore.txt",
    ) -> None:
        self.asset_dir = Path(asset_dir)
        pygame.init()
        self._audio = self._init_audio()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)

        self.images = {name: self._load_image(file) for name, file in _IMAGE_FILES.items()}
        self.font = self._load_font()
        self._jump_sound = self._load_sound(_JUMP_SOUND_FILE)
        self._music = {
            cue: (self._existing(file), loops) for cue, (file, loops) in _MUSIC_FILES.items()
        }
        self._scaled: dict[tuple[int, tuple[int, int]], pygame.Surface] = {}

        self.engine = Engine(high_score_path)
        self.engine.start_button.image = self.images["start"]
        self.engine.sound_button.image = self.images["sound_on"]
        self.running = True
        self._play_music(Cue.MENU_MUSIC)

    # -- asset loading -------------------------------------------------

    def _existing(self, file: str) -> Optional[Path]:
        path = self.asset_dir / file
        return path if path.is_file() else None

    def _init_audio(self) -> bool:
        try:
            pygame.mixer.init(44100, -16, 2, 2048)
        except pygame.error:
            return False
        return pygame.mixer.get_init() is not None

    def _load_image(self, file: str) -> Optional[pygame.Surface]:
        path = self._existing(file)
        if path is None:
            return None
        try:
            return pygame.image.load(str(path)).convert_alpha()
        except (pygame.error, OSError):
            return None

    def _load_font(self) -> pygame.font.Font:
        path = self._existing(_FONT_FILE)
        if path is not None:
            try:
                return pygame.font.Font(str(path), FONT_SIZE)
            except (pygame.error, OSError):
                pass
        return pygame.font.Font(None, FONT_SIZE)

    def _load_sound(self, file: str) -> Optional[pygame.mixer.Sound]:
        path = self._existing(file)
        if not self._audio or path is None:
            return None
        try:
            return pygame.mixer.Sound(str(path))
        except (pygame.error, OSError):
            return None

    # -- sound ---------------------------------------------------------

    def _play_music(self, cue: Cue) -> None:
        if not self._audio:
            return
        pygame.mixer.music.stop()
        path, loops = self._music[cue]
        if path is None:
            return
        try:
            pygame.mixer.music.load(str(path))
            pygame.mixer.music.play(loops)
        except pygame.error:
            pass

    def _set_volume(self, volume: float) -> None:
        if not self._audio:
            return
        pygame.mixer.music.set_volume(volume)
        if self._jump_sound is not None:
            self._jump_sound.set_volume(volume)

    def _apply(self, cues: list[Cue]) -> None:
        for cue in cues:
            if cue in self._music:
                self._play_music(cue)
            elif cue is Cue.JUMP:
                if self._jump_sound is not None:
                    self._jump_sound.play()
            elif cue is Cue.SOUND_ON:
                self.engine.sound_button.image = self.images["sound_on"]
                self._set_volume(1.0)
            elif cue is Cue.SOUND_OFF:
                self.engine.sound_button.image = self.images["sound_off"]
                self._set_volume(0.0)

    # -- input ---------------------------------------------------------

    def handle_event(self, event: pygame.event.Event) -> list[Cue]:
        """Apply one pygame event to the game and return the cues it raised."""
        if event.type == pygame.QUIT:
            self.running = False
            return []
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            cues = self.engine.handle_click(*event.pos)
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
            cues = self.engine.handle_space()
        else:
            return []
        self._apply(cues)
        return cues

    # -- drawing -------------------------------------------------------

    def _scale(self, image: pygame.Surface, size: tuple[int, int]) -> pygame.Surface:
        key = (id(image), size)
        scaled = self._scaled.get(key)
        if scaled is None:
            scaled = pygame.transform.scale(image, size)
            self._scaled[key] = scaled
        return scaled

    def _draw(self, image: Optional[pygame.Surface], rect: Rect) -> None:
        if image is None or rect.is_empty:
            return
        self.screen.blit(self._scale(image, (rect.w, rect.h)), (rect.x, rect.y))

    def _draw_full(self, image: Optional[pygame.Surface]) -> None:
        self._draw(image, Rect(0, 0, SCREEN_WIDTH, SCREEN_HEIGHT))

    def _draw_text(self, text: str, y: int) -> None:
        surface = self.font.render(text, False, TEXT_COLOR)
        self.screen.blit(surface, (SCREEN_WIDTH // 2 - surface.get_width() // 2, y))

    def _draw_bird(self) -> None:
        image = self.images["bird"]
        rect = self.engine.bird.rect
        if image is None or rect.is_empty:
            return
        # Positive angles tilt clockwise, pygame rotates counter-clockwise.
        rotated = pygame.transform.rotate(self._scale(image, (rect.w, rect.h)), -self.engine.bird.angle)
        centre = (rect.x + rect.w // 2, rect.y + rect.h // 2)
        self.screen.blit(rotated, rotated.get_rect(center=centre))

    def render(self) -> None:
        """Draw the current screen and show it."""
        self.screen.fill((0, 0, 0))
        engine = self.engine
        if engine.state is GameState.MENU:
            self._draw_full(self.images["menu"])
            for button in (engine.start_button, engine.sound_button):
                self._draw(button.image, button.rect)
        elif engine.state is GameState.PLAYING:
            self._draw_full(self.images["background"])
            self._draw_bird()
            for pipe in engine.pipes:
                self._draw(self.images["pipe"], pipe.top)
                self._draw(self.images["pipe"], pipe.bottom)
            self._draw_text(str(engine.score), 20)
        else:
            self._draw_full(self.images["background"])
            self._draw_text("Game Over!", SCREEN_HEIGHT // 3)
            self._draw_text(f"Score: {engine.score}", SCREEN_HEIGHT // 2)
            self._draw_text(f"High Score: {engine.high_score}", SCREEN_HEIGHT // 2 + 50)
            self._draw_text("Press Space to Restart", SCREEN_HEIGHT // 2 + 100)
        pygame.display.flip()

    # -- main loop -----------------------------------------------------

    def run(self) -> None:
        """Run frames until the window is closed, then shut pygame down."""
        try:
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                self._apply(self.engine.update())
                self.render()
                pygame.time.delay(FRAME_DELAY_MS)
        finally:
            self._close()

    def _close(self) -> None:
        if self._audio:
            pygame.mixer.music.stop()
            pygame.mixer.quit()
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the game window."""
    parser = argparse.ArgumentParser(prog="flappyweb", description="Play Flappy Bird.")
    parser.add_argument("--assets", default=".", help="directory holding images, sounds and font")
    parser.add_argument("--high-score", default="highscore.txt", help="file keeping the best score")
    args = parser.parse_args(argv)
    App(args.assets, args.high_score).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())