# game.py
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple
import pygame # type: ignore

from .config import (
    BG, BLACK, HEAD, GREEN, TEXT, SHADE, FAINT,
    UP, DOWN, LEFT, RIGHT,
)
from .engine import Phase, SnakeEngine
from .grid import Grid, Point
from .host import RenderSink

KEY_DIRECTIONS = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_w: UP,
    pygame.K_s: DOWN,
    pygame.K_a: LEFT,
    pygame.K_d: RIGHT,
}
START_KEYS = (pygame.K_SPACE, pygame.K_r, pygame.K_RETURN)

# Drags shorter than this (px) are taps, not swipes
SWIPE_DEAD_ZONE = 10

# ---------- Helpers ----------
def direction_from_swipe(dx: float, dy: float, dead_zone: float = SWIPE_DEAD_ZONE) -> Optional[Tuple[int, int]]:
    """Dominant axis of a drag picks the direction; ties go vertical."""
    if abs(dx) < dead_zone and abs(dy) < dead_zone:
        return None
    if abs(dx) > abs(dy):
        return RIGHT if dx > 0 else LEFT
    return DOWN if dy > 0 else UP

def draw_cell(screen: pygame.Surface, grid: Grid, p: Point, color: Tuple[int, int, int]) -> None:
    half = grid.cell_size / 2
    rect = pygame.Rect(int(p.x - half), int(p.y - half), grid.cell_size, grid.cell_size)
    pygame.draw.rect(screen, color, rect)

# ---------- Input ----------
@dataclass
class InputState:
    swipe_start: Optional[Tuple[int, int]] = None
    start_requested: bool = False
    resize: Optional[Tuple[int, int]] = None

def handle_input(engine: SnakeEngine, inp: InputState, events: Optional[Iterable[pygame.event.Event]] = None) -> bool:
    """
    Process events; steer the snake (no 180° guard, reversing into the neck
    is a legal move that ends the game). Return False to quit.
    """
    if events is None:
        events = pygame.event.get()
    running = engine.phase is Phase.RUNNING
    for event in events:
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key in KEY_DIRECTIONS and running:
                engine.set_direction(KEY_DIRECTIONS[event.key])
            elif event.key in START_KEYS and not running:
                inp.start_requested = True
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            inp.swipe_start = event.pos
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            if inp.swipe_start is not None:
                sx, sy = inp.swipe_start
                cand = direction_from_swipe(event.pos[0] - sx, event.pos[1] - sy)
                inp.swipe_start = None
                if cand is None and not running:
                    inp.start_requested = True  # tap to start
                elif cand is not None and running:
                    engine.set_direction(cand)
        elif event.type == pygame.VIDEORESIZE:
            inp.resize = (event.w, event.h)
    return True

# ---------- Draw ----------
def draw_board(screen: pygame.Surface, grid: Grid, snake: Sequence[Point], food: Optional[Point]) -> None:
    screen.fill(BG)
    if food is not None:
        draw_cell(screen, grid, food, GREEN)

    # Joints are only drawn inside a run; a wrap leaves a gap
    for run in grid.split_runs(snake):
        if len(run) > 1:
            pygame.draw.lines(
                screen, BLACK, False,
                [(int(p.x), int(p.y)) for p in run],
                max(1, grid.cell_size // 3),
            )
    for p in snake[1:]:
        draw_cell(screen, grid, p, BLACK)
    if snake:
        draw_cell(screen, grid, snake[0], HEAD)

def _blit_text(screen: pygame.Surface, font: pygame.font.Font, text: str, color, **anchor) -> None:
    """Render text and place it by a Rect anchor, e.g. center=(x, y)."""
    surf = font.render(text, True, color)
    screen.blit(surf, surf.get_rect(**anchor))

def draw_score(screen: pygame.Surface, font: pygame.font.Font, score: int) -> None:
    _blit_text(screen, font, f"Score: {score}", TEXT, topleft=(8, 6))

def make_renderer(screen: pygame.Surface, font: pygame.font.Font, grid: Grid) -> RenderSink:
    """Render sink for FrameDriver: draws one frame and flips."""
    def draw(snake: Sequence[Point], food: Optional[Point], score: int) -> None:
        draw_board(screen, grid, snake, food)
        draw_score(screen, font, score)
        pygame.display.flip()
    return draw

def _draw_centered(screen: pygame.Surface, font: pygame.font.Font, lines, color) -> None:
    w, h = screen.get_size()
    y = h // 2 - 16 * (len(lines) - 1)
    for text in lines:
        _blit_text(screen, font, text, color, center=(w // 2, y))
        y += 32

def draw_idle(screen: pygame.Surface, font: pygame.font.Font) -> None:
    screen.fill(BG)
    _draw_centered(screen, font, ["SNAKE", "Press Space or tap to start"], TEXT)

def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, score: int) -> None:
    shade = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
    shade.fill(SHADE)
    screen.blit(shade, (0, 0))
    _draw_centered(screen, font, ["GAME OVER", f"Score: {score}", "Press Space to restart"], FAINT)
