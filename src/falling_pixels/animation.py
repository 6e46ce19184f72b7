"""Long-lived animation state driven by discrete input events."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from falling_pixels.pendings import Pendings
from falling_pixels.prng import U64_MASK, Pcg32
from falling_pixels.renderer import Grid, max_step, render

STEP_FORWARD = "step_forward"
STEP_BACKWARD = "step_backward"
RANDOMIZE = "randomize"
TOGGLE_HELP = "toggle_help"

EVENTS = (STEP_FORWARD, STEP_BACKWARD, RANDOMIZE, TOGGLE_HELP)

log = logging.getLogger(__name__)


@dataclass
class StepCounter:
    max_step: int
    step: int = 0

    def __post_init__(self) -> None:
        if self.max_step < 0:
            raise ValueError("max_step must be non-negative")
        self.set(self.step)

    def set(self, value: int) -> None:
        self.step = min(max(value, 0), self.max_step)

    def forward(self) -> None:
        self.set(self.step + 1)

    def backward(self) -> None:
        self.set(self.step - 1)


class AnimationState:
    def __init__(self, width: int, height: int, seed: int, *, exact_bounds: bool = True) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"width/height must be at least 1 (got {width}x{height})")
        self.width = width
        self.height = height
        self.rng = Pcg32()
        self.pendings = Pendings(seed, width, height, self.rng, exact_bounds=exact_bounds)
        self.counter = StepCounter(max_step(width, height))
        self.show_help = True

    @property
    def step(self) -> int:
        return self.counter.step

    @property
    def seed(self) -> int:
        return self.pendings.seed

    def step_forward(self) -> None:
        self.counter.forward()

    def step_backward(self) -> None:
        self.counter.backward()

    def toggle_help(self) -> None:
        self.show_help = not self.show_help

    def randomize(self, new_seed: Optional[int] = None) -> int:
        """Regenerate the reveal orders; returns the seed used.

        Without new_seed the seed is drawn from the shared stream, so a session
        is reproducible from its first seed. In legacy mode it is drawn with
        the float-scaled gen_range over the whole 64-bit range, the way the
        first version of the animation picked it.
        """
        if new_seed is None:
            if self.pendings.exact_bounds:
                new_seed = self.rng.next_u64()
            else:
                new_seed = self.rng.gen_range(0, U64_MASK)
        self.pendings.update_seed(new_seed)
        log.info("randomized reveal order, seed=%d", new_seed)
        return new_seed

    def handle(self, event: str, *args: int) -> None:
        if event == STEP_FORWARD:
            self.step_forward()
        elif event == STEP_BACKWARD:
            self.step_backward()
        elif event == RANDOMIZE:
            self.randomize(*args)
        elif event == TOGGLE_HELP:
            self.toggle_help()
        else:
            raise ValueError(f"unknown event: {event!r}")

    def frame(self) -> Grid:
        return render(self.step, self.width, self.height, self.pendings.orders)
