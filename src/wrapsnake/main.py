# main.py
import argparse
from dataclasses import replace

import pygame # type: ignore
from .config import WIDTH, HEIGHT, CELL_SIZE, CFG, Config
from .engine import Phase, SnakeEngine
from .game import InputState, handle_input, make_renderer, draw_idle, draw_game_over
from .host import FrameDriver

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Snake on a wrap-around grid")
    parser.add_argument("--width", type=int, default=WIDTH, help="window width in px")
    parser.add_argument("--height", type=int, default=HEIGHT, help="window height in px")
    parser.add_argument("--cell-size", type=int, default=CELL_SIZE, help="grid cell size in px")
    parser.add_argument("--seed", type=int, default=None, help="food placement seed")
    parser.add_argument("--fps", type=int, default=CFG.fps, help="frame cap")
    parser.add_argument("--debug", action="store_true", help="print every step")
    args = parser.parse_args(argv)
    if args.cell_size <= 0:
        parser.error("--cell-size must be positive")
    if args.width < args.cell_size or args.height < args.cell_size:
        parser.error("window must fit at least one cell")
    return args

def build_config(args: argparse.Namespace) -> Config:
    return replace(CFG, seed=args.seed, fps=args.fps, debug=args.debug)

def main(argv=None):
    args = parse_args(argv)
    cfg = build_config(args)

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
    pygame.display.set_caption("Snake — wrap-around")
    clock = pygame.time.Clock()

    engine = SnakeEngine(cfg)
    engine.initialize(args.width, args.height, args.cell_size)
    driver = FrameDriver(
        engine,
        now=lambda: pygame.time.get_ticks() / 1000.0,
        draw=make_renderer(screen, font, engine.grid),
    )
    print(f"[wrapsnake] grid {engine.grid.cols}x{engine.grid.rows}, cell={args.cell_size}px")

    inp = InputState()
    running = True

    while running:
        # 1) input
        running = handle_input(engine, inp)
        if not running:
            break

        # the grid only follows the window between games
        if inp.resize is not None:
            w, h = inp.resize
            inp.resize = None
            if engine.phase is not Phase.RUNNING and w >= args.cell_size and h >= args.cell_size:
                screen = pygame.display.set_mode((w, h), pygame.RESIZABLE)
                engine.initialize(w, h, args.cell_size)
                driver.draw = make_renderer(screen, font, engine.grid)
                print(f"[wrapsnake] resized grid to {engine.grid.cols}x{engine.grid.rows}")

        # 2) update + render
        if engine.phase is Phase.RUNNING:
            if not driver.tick():
                draw_game_over(screen, font, engine.score)
                pygame.display.flip()
                print(f"[wrapsnake] Game over! Your score: {engine.score} (steps={engine.steps})")
        elif inp.start_requested:
            inp.start_requested = False
            driver.start()
            print("[wrapsnake] New game")
        elif engine.phase is Phase.IDLE:
            draw_idle(screen, font)
            pygame.display.flip()

        clock.tick(cfg.fps)  # movement is paced by the engine, not the frame rate

    pygame.quit()

if __name__ == "__main__":
    main()
