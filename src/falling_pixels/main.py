"""Falling pixels progress bar.

A W x H pixel bar that darkens column by column, right to left, each column
in its own seeded random row order with a one-cell comet trail.

Controls:
- Space: one step; hold LeftCtrl to scroll (one step per frame).
- Hold LeftShift: step backwards instead.
- R: new random reveal order. H: hide/show help. Esc or closing the window quits.
"""

from __future__ import annotations

import argparse
import logging
import time
from typing import List, Tuple

from falling_pixels.animation import (
    RANDOMIZE,
    STEP_BACKWARD,
    STEP_FORWARD,
    TOGGLE_HELP,
    AnimationState,
)
from falling_pixels.prng import U64_MASK
from falling_pixels.renderer import DARK, LIT, Grid, format_grid

Color = Tuple[int, int, int]

PIXEL_LIGHT: Color = (0, 228, 48)
PIXEL_DARK: Color = (0, 0, 0)
TEXT_COLOR: Color = (80, 80, 80)

HELP = "[Space]: step, [LeftCtrl]: scroll, Hold [LeftShift]: reverse, [R]: randomize order, [H]: hide help"

log = logging.getLogger(__name__)


class ProgressBarWindow:
    def __init__(
        self,
        state: AnimationState,
        *,
        cell_size: int,
        fps: float,
    ) -> None:
        if cell_size < 1:
            raise ValueError("cell_size must be at least 1")

        self.state = state
        self.cell_size = cell_size
        self.fps = fps
        self._last_frame_wall = time.perf_counter()

        import pygame

        pygame.init()
        self._pygame = pygame
        self._screen = pygame.display.set_mode(
            (state.width * cell_size, state.height * cell_size), pygame.RESIZABLE
        )
        pygame.display.set_caption("Tetris progressbar")
        self._font = pygame.font.SysFont(None, 22)
        # Native-resolution image of the grid, scaled up on every frame.
        self._image = pygame.Surface((state.width, state.height))

    # ---------- input ----------
    def poll_events(self) -> List[str]:
        """Translate pygame input into animation events for this frame."""
        pg = self._pygame
        events: List[str] = []
        stepped = False
        for event in pg.event.get():
            if event.type == pg.QUIT:
                raise KeyboardInterrupt
            if event.type != pg.KEYDOWN:
                continue
            if event.key == pg.K_ESCAPE:
                raise KeyboardInterrupt
            if event.key == pg.K_r:
                events.append(RANDOMIZE)
            elif event.key == pg.K_h:
                events.append(TOGGLE_HELP)
            elif event.key == pg.K_SPACE:
                stepped = True

        keys = pg.key.get_pressed()
        if stepped or keys[pg.K_LCTRL]:
            events.append(STEP_BACKWARD if keys[pg.K_LSHIFT] else STEP_FORWARD)
        return events

    # ---------- timing ----------
    def _throttle(self) -> None:
        if self.fps <= 0:
            return
        target_dt = 1.0 / self.fps
        elapsed = time.perf_counter() - self._last_frame_wall
        if elapsed < target_dt:
            time.sleep(target_dt - elapsed)
        self._last_frame_wall = time.perf_counter()

    # ---------- drawing ----------
    def _blit_grid(self, grid: Grid) -> None:
        for y, row in enumerate(grid):
            for x, cell in enumerate(row):
                self._image.set_at((x, y), PIXEL_LIGHT if cell == LIT else PIXEL_DARK)
        scaled = self._pygame.transform.scale(self._image, self._screen.get_size())
        self._screen.blit(scaled, (0, 0))

    def _draw_text(self, text: str, pos: Tuple[int, int]) -> None:
        self._screen.blit(self._font.render(text, True, TEXT_COLOR), pos)

    def draw_frame(self) -> None:
        self._blit_grid(self.state.frame())
        self._draw_text(f"step: {self.state.step}", (20, 20))
        if self.state.show_help:
            self._draw_text(HELP, (20, 40))
        self._pygame.display.flip()

    # ---------- loop ----------
    def tick(self) -> None:
        for event in self.poll_events():
            self.state.handle(event)
            if event in (STEP_FORWARD, STEP_BACKWARD):
                log.debug("step=%d", self.state.step)
        self.draw_frame()
        self._throttle()

    def run(self) -> None:
        while True:
            self.tick()

    def close(self) -> None:
        self._pygame.quit()


# ---------- utility mode: text dump ----------
def run_dump(state: AnimationState, step: int) -> int:
    state.counter.set(step)
    print(f"seed={state.seed} step={state.step}/{state.counter.max_step}")
    grid = state.frame()
    print(format_grid(grid))
    dark = sum(row.count(DARK) for row in grid)
    print(f"dark cells: {dark}/{state.width * state.height}")
    return 0


# ---------- CLI ----------
def _seed_arg(text: str) -> int:
    try:
        value = int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid seed: {text!r}")
    if not 0 <= value <= U64_MASK:
        raise argparse.ArgumentTypeError("seed must be an unsigned 64-bit integer")
    return value


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Falling pixels progress bar")
    p.add_argument(
        "--mode",
        choices=["window", "dump"],
        default="window",
        help="window: interactive pygame view; dump: print the grid at --step as text",
    )
    p.add_argument("--width", type=int, default=58, help="Grid width")
    p.add_argument("--height", type=int, default=30, help="Grid height")
    p.add_argument("--seed", type=_seed_arg, default=None, help="Reveal order seed (default: from clock)")
    p.add_argument("--step", type=int, default=0, help="Step to print in dump mode (clamped)")
    p.add_argument("--cell-size", type=int, default=16, help="Initial window pixels per cell")
    p.add_argument("--fps", type=float, default=60.0, help="Frames per second (0 = unlimited)")
    p.add_argument(
        "--legacy-shuffle",
        action="store_true",
        help="Draw shuffle indices the original biased way, for old seeds",
    )
    p.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging verbosity",
    )
    return p


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.width < 1 or args.height < 1:
        parser.error("width/height must be at least 1")
    if args.cell_size < 1:
        parser.error("cell-size must be at least 1")

    seed = args.seed if args.seed is not None else time.time_ns() & U64_MASK
    state = AnimationState(args.width, args.height, seed, exact_bounds=not args.legacy_shuffle)
    log.info("grid %dx%d, max step %d, seed=%d", args.width, args.height, state.counter.max_step, seed)

    if args.mode == "dump":
        return run_dump(state, args.step)

    window = ProgressBarWindow(state, cell_size=args.cell_size, fps=args.fps)
    try:
        window.run()
    except KeyboardInterrupt:
        log.info("exiting at step %d", state.step)
    finally:
        window.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
