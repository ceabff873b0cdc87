"""pygame host for Grid Snake: window, input, frame loop and drawing."""

from __future__ import annotations

import logging

import pygame

from .config import (
    BLOCK,
    FONT_NAME,
    FONT_SIZE,
    FPS,
    HUD_HEIGHT,
    PALETTE,
    TILE_COUNT,
    WINDOW_SIZE,
)
from .controls import SwipeTracker, command_for_key, direction_for_key
from .highscore import HighScoreStore
from .model import Cell, Direction, SessionState, Snapshot
from .session import GameSession

logger = logging.getLogger(__name__)

WINDOW_HEIGHT = WINDOW_SIZE + HUD_HEIGHT


def _finger_pos(event: pygame.event.Event) -> tuple[float, float]:
    """Finger events carry normalized coordinates; scale them to pixels."""
    return event.x * WINDOW_SIZE, event.y * WINDOW_HEIGHT


def interpolated_segments(snapshot: Snapshot) -> list[tuple[float, float]]:
    """Return per-segment draw positions in cell units.

    While running, each segment slides from its previous-tick cell toward its
    current cell by the interpolation factor. A freshly grown tail segment
    has no previous cell and is drawn where it is.
    """
    smooth = snapshot.state is SessionState.RUNNING
    t = snapshot.interpolation
    points: list[tuple[float, float]] = []
    for idx, seg in enumerate(snapshot.snake):
        if smooth and idx < len(snapshot.previous_snake):
            prev = snapshot.previous_snake[idx]
            x = prev.x + (seg.x - prev.x) * t
            y = prev.y + (seg.y - prev.y) * t
            points.append((x, y))
        else:
            points.append((float(seg.x), float(seg.y)))
    return points


class Renderer:
    """Draws one snapshot; never touches the session."""

    def __init__(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        self.surface = surface
        self.font = font
        self.board = pygame.Surface((WINDOW_SIZE, WINDOW_SIZE))
        self.background = self._build_background()

    def _build_background(self) -> pygame.Surface:
        """Bake the grid once to keep draw() light."""
        surface = pygame.Surface((WINDOW_SIZE, WINDOW_SIZE))
        surface.fill(PALETTE["bg"])
        for i in range(0, WINDOW_SIZE + 1, BLOCK):
            pygame.draw.line(surface, PALETTE["grid"], (i, 0), (i, WINDOW_SIZE), 1)
            pygame.draw.line(surface, PALETTE["grid"], (0, i), (WINDOW_SIZE, i), 1)
        return surface

    def _cell_rect(self, x: float, y: float) -> pygame.Rect:
        return pygame.Rect(int(x * BLOCK) + 1, int(y * BLOCK) + 1, BLOCK - 2, BLOCK - 2)

    def _draw_food(self, food: Cell) -> None:
        marker = pygame.Surface((BLOCK + 4, BLOCK + 4), pygame.SRCALPHA)
        marker.fill(PALETTE["food_marker"])
        self.board.blit(marker, (food.x * BLOCK - 2, food.y * BLOCK - 2))
        center = (food.x * BLOCK + BLOCK // 2, food.y * BLOCK + BLOCK // 2)
        pygame.draw.circle(self.board, PALETTE["food"], center, BLOCK // 2 - 2)

    def _draw_snake(self, snapshot: Snapshot) -> None:
        points = interpolated_segments(snapshot)
        # Tail first so the head stays on top when segments overlap mid-slide
        for idx in range(len(points) - 1, -1, -1):
            rect = self._cell_rect(*points[idx])
            if idx == 0:
                pygame.draw.rect(self.board, PALETTE["head"], rect)
                pygame.draw.rect(self.board, PALETTE["head_outline"], rect, width=2)
                self._draw_eyes(rect, snapshot.direction)
            else:
                pygame.draw.rect(self.board, PALETTE["body"], rect)
                pygame.draw.rect(self.board, PALETTE["head"], rect, width=1)

    def _draw_eyes(self, rect: pygame.Rect, direction: Direction) -> None:
        dx, dy = direction.vector
        cx, cy = rect.center
        # Eyes sit on the leading edge; default to facing up while idle
        if (dx, dy) == (0, 0):
            dy = -1
        offset = BLOCK // 4
        if dx:
            eyes = [(cx + dx * offset, cy - offset), (cx + dx * offset, cy + offset)]
        else:
            eyes = [(cx - offset, cy + dy * offset), (cx + offset, cy + dy * offset)]
        for ex, ey in eyes:
            pygame.draw.circle(self.board, (255, 255, 255), (ex, ey), 2)
            pygame.draw.circle(self.board, (0, 0, 0), (ex + dx, ey + dy), 1)

    def _draw_hud(self, snapshot: Snapshot) -> None:
        hud_rect = pygame.Rect(0, 0, WINDOW_SIZE, HUD_HEIGHT)
        pygame.draw.rect(self.surface, PALETTE["hud"], hud_rect)
        if snapshot.food is not None:
            apple = f"APPLE {snapshot.food.x},{snapshot.food.y}"
        else:
            apple = "NO APPLE"
        text = f"SCORE {snapshot.score:04}  BEST {snapshot.high_score:04}  {apple}"
        surf = self.font.render(text, True, PALETTE["hud_text"])
        self.surface.blit(surf, surf.get_rect(midleft=(10, HUD_HEIGHT // 2)))

    def _draw_overlay(self, lines: list[str], shade: bool = True) -> None:
        overlay = pygame.Surface((WINDOW_SIZE, WINDOW_SIZE), pygame.SRCALPHA)
        if shade:
            overlay.fill((0, 0, 0, 170))
        color = PALETTE["overlay_text"] if shade else PALETTE["text"]
        top = WINDOW_SIZE // 2 - (len(lines) - 1) * (FONT_SIZE + 8) // 2
        for idx, text in enumerate(lines):
            surf = self.font.render(text, True, color)
            center = (WINDOW_SIZE // 2, top + idx * (FONT_SIZE + 8))
            overlay.blit(surf, surf.get_rect(center=center))
        self.board.blit(overlay, (0, 0))

    def draw(self, snapshot: Snapshot) -> None:
        self.board.blit(self.background, (0, 0))
        self._draw_snake(snapshot)
        if snapshot.food is not None:
            self._draw_food(snapshot.food)

        if snapshot.state is SessionState.IDLE:
            self._draw_overlay(["Press ENTER to begin!"], shade=False)
        elif snapshot.state is SessionState.PAUSED:
            self._draw_overlay(["GAME PAUSED", "Press SPACE to resume"])
        elif snapshot.state is SessionState.GAME_OVER:
            self._draw_overlay(
                [
                    "Game Over",
                    f"Score: {snapshot.score}",
                    f"Best:  {snapshot.high_score}",
                    "R to restart / Q to quit",
                ]
            )

        self.surface.fill((0, 0, 0))
        self._draw_hud(snapshot)
        self.surface.blit(self.board, (0, HUD_HEIGHT))


class GridSnake:
    """Wires the session to a pygame window, input and the high score file."""

    def __init__(
        self,
        session: GameSession | None = None,
        store: HighScoreStore | None = None,
    ) -> None:
        pygame.init()
        self._base_window_flags = pygame.DOUBLEBUF | pygame.SCALED
        self.fullscreen = False
        self.window = pygame.display.set_mode(
            (WINDOW_SIZE, WINDOW_HEIGHT), self._base_window_flags
        )
        pygame.display.set_caption("Grid Snake")
        self.font = pygame.font.SysFont(FONT_NAME, FONT_SIZE)

        self.store = store or HighScoreStore()
        self.session = session or GameSession(high_score=self.store.load())
        if self.session.tile_count != TILE_COUNT:
            raise ValueError(
                f"window is laid out for a {TILE_COUNT}x{TILE_COUNT} board, "
                f"session has {self.session.tile_count}"
            )
        self.session.subscribe(self.store.on_game_over)
        self.renderer = Renderer(self.window, self.font)
        self.swipe = SwipeTracker()

    def _apply_display_mode(self) -> None:
        """Recreate the main window honoring the fullscreen toggle."""
        flags = self._base_window_flags
        if self.fullscreen:
            flags |= pygame.FULLSCREEN
        self.window = pygame.display.set_mode((WINDOW_SIZE, WINDOW_HEIGHT), flags)
        self.renderer.surface = self.window
        title = "Grid Snake" + (" [Fullscreen]" if self.fullscreen else "")
        pygame.display.set_caption(title)

    # --- Input --------------------------------------------------------

    def _run_command(self, command: str) -> bool:
        if command == "quit":
            return False
        if command == "start":
            self.session.start()
        elif command == "pause":
            self.session.toggle_pause()
        elif command == "restart":
            self.session.restart()
        elif command == "fullscreen":
            self.fullscreen = not self.fullscreen
            self._apply_display_mode()
        return True

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Translate one event into a session command; False means quit."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            command = command_for_key(event.key)
            if command:
                return self._run_command(command)
            self._turn(direction_for_key(event.key))
        elif event.type == pygame.FINGERDOWN:
            self.swipe.begin(_finger_pos(event))
        elif event.type == pygame.FINGERUP:
            self._turn(self.swipe.end(_finger_pos(event)))
        elif getattr(event, "touch", False):
            # Mouse events synthesized from touch; fingers already handled
            pass
        elif event.type == pygame.MOUSEBUTTONDOWN:
            self.swipe.begin(event.pos)
        elif event.type == pygame.MOUSEBUTTONUP:
            self._turn(self.swipe.end(event.pos))
        return True

    def _turn(self, direction: Direction | None) -> None:
        if direction is not None:
            self.session.request_direction(direction)

    def handle_events(self) -> bool:
        running = True
        for event in pygame.event.get():
            running = self.handle_event(event) and running
        return running

    # --- Frame --------------------------------------------------------

    def frame(self, timestamp: float) -> None:
        """One host frame: advance the session, then draw its snapshot."""
        self.session.on_frame(timestamp)
        self.session.ensure_food()
        self.renderer.draw(self.session.snapshot())

    def start(self) -> None:
        """Run the main loop until the window closes or the player quits."""
        clock = pygame.time.Clock()
        running = True
        logger.info("High score on record: %d", self.session.high_score)

        while running:
            clock.tick(FPS)
            running = self.handle_events()
            self.frame(float(pygame.time.get_ticks()))
            pygame.display.update()

        pygame.quit()


if __name__ == "__main__":
    game = GridSnake()
    game.start()
