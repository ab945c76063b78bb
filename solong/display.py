"""The game window: loading sprites, drawing the map and running the loop."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from solong.animation import FrameCounter, RandomSource, step_text  # noqa: E402
from solong.game import Game, GameEnded, ImageName  # noqa: E402
from solong.tiles import IMG_SIZE, Key  # noqa: E402

DEFAULT_ASSET_DIR = Path("assets") / "xpm"
WINDOW_TITLE = "so_long"
STATUS_BAR_HEIGHT = 25
TEXT_COLOUR = (0xFF, 0xC0, 0xCB)
LOOP_RATE = 1000
"""Upper bound on loop iterations per second."""

_PYGAME_KEYS = {
    pygame.K_ESCAPE: Key.ESC,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
}


class DisplayError(Exception):
    """Raised when the window or its images cannot be set up."""


def _keycode(key: int) -> int:
    return _PYGAME_KEYS.get(key, key)


def asset_paths(
    asset_dir: str | os.PathLike[str] = DEFAULT_ASSET_DIR, bonus: bool = False
) -> dict[ImageName, Path]:
    """Map each image the game needs to its file, in loading order."""
    base = Path(asset_dir)
    return {name: base / name.filename for name in ImageName.required(bonus)}


def _load_images(paths: Mapping[ImageName, Path]) -> dict[ImageName, pygame.Surface]:
    images = {}
    for name, path in paths.items():
        if not path.is_file():
            raise DisplayError(f"Could not load image {name.value}")
        try:
            images[name] = pygame.image.load(str(path)).convert_alpha()
        except (pygame.error, OSError, ValueError) as exc:
            raise DisplayError(f"Could not load image {name.value}") from exc
    return images


class Window:
    """A window showing one game, with its sprites loaded."""

    def __init__(
        self,
        game: Game,
        asset_dir: str | os.PathLike[str] = DEFAULT_ASSET_DIR,
        rng: RandomSource | None = None,
    ) -> None:
        self.game = game
        self.counter = FrameCounter(game.bonus, rng)
        self.width = game.tilemap.width * IMG_SIZE
        self.height = game.tilemap.height * IMG_SIZE
        self.images: dict[ImageName, pygame.Surface] = {}
        self._font: pygame.font.Font | None = None
        try:
            self._open(asset_dir)
        except BaseException:
            self.close()
            raise

    def _open(self, asset_dir: str | os.PathLike[str]) -> None:
        try:
            pygame.display.init()
        except pygame.error as exc:
            raise DisplayError("Could not initialize display") from exc
        bar = STATUS_BAR_HEIGHT if self.game.bonus else 0
        try:
            self._screen = pygame.display.set_mode((self.width, self.height + bar))
        except pygame.error as exc:
            raise DisplayError("Could not initialize window") from exc
        pygame.display.set_caption(WINDOW_TITLE)
        self.images = _load_images(asset_paths(asset_dir, self.game.bonus))
        if self.game.bonus:
            try:
                pygame.font.init()
                self._font = pygame.font.Font(None, 18)
            except (pygame.error, OSError) as exc:
                raise DisplayError("Could not load font") from exc
        self._clock = pygame.time.Clock()

    def __enter__(self) -> Window:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Release the images and the window."""
        self.images = {}
        self._font = None
        pygame.quit()

    def _draw(self) -> None:
        self._screen.fill((0, 0, 0))
        if self._font is not None:
            text = self._font.render(step_text(self.game.steps), True, TEXT_COLOUR)
            self._screen.blit(text, (10, self.height + 6))
        for tile in self.game.tilemap:
            if tile.image is not None:
                self._screen.blit(
                    self.images[ImageName(tile.image)],
                    (tile.x * IMG_SIZE, tile.y * IMG_SIZE),
                )

    def run(self) -> str:
        """Run the game loop until it ends and return why it ended.

        The result is "closed" when the window was closed, otherwise the
        reason carried by the game's end.
        """
        try:
            while True:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        return "closed"
                    if event.type == pygame.KEYDOWN:
                        self.game.key_press(_keycode(event.key))
                self._draw()
                pygame.display.flip()
                self.counter.tick(self.game)
                self._clock.tick(LOOP_RATE)
        except GameEnded as end:
            return end.reason
        finally:
            self.close()


def run_game(
    game: Game,
    asset_dir: str | os.PathLike[str] = DEFAULT_ASSET_DIR,
    rng: RandomSource | None = None,
) -> str:
    """Open a window for `game`, play it to the end and return why it ended."""
    with Window(game, asset_dir, rng) as window:
        return window.run()