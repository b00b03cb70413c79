"""Headless renderer for testing."""

from __future__ import annotations

import random
import time
from typing import Optional

from weather_world.types import PrecipitationKind, WeatherFrame

from .lightning import generate_bolt

# Sky shading from bright to dark
SKY_SHADES = " .:-=+*#%@"

# Chance per frame that a discharge frequency of 1.0 produces a flash
FLASH_CHANCE = 0.2


class HeadlessRenderer:
    """A headless renderer that draws weather frames as ASCII art.

    Used for testing and demo environments.
    """

    def __init__(self, width: int = 80, height: int = 24, seed: Optional[int] = None):
        """Initialize the headless renderer.

        Args:
            width: Screen width in characters.
            height: Screen height in characters.
            seed: Seed for particle placement and flashes.
        """
        self.width = width
        self.height = height
        self.screen: list[list[str]] = [[" " for _ in range(width)] for _ in range(height)]
        self.last_render_time: float = 0.0
        self.last_frame: Optional[WeatherFrame] = None
        self.particle_count: int = 0
        self.flash_count: int = 0
        self._render_count = 0
        self._rng = random.Random(seed)

    @property
    def render_count(self) -> int:
        """Number of frames rendered."""
        return self._render_count

    def clear(self) -> None:
        """Clear the screen buffer."""
        self.screen = [[" " for _ in range(self.width)] for _ in range(self.height)]
        self.particle_count = 0

    def render_frame(self, frame: WeatherFrame) -> None:
        """Render a complete frame.

        Args:
            frame: The weather frame to render.
        """
        self.clear()
        start_time = time.perf_counter()

        self._render_sky(frame)
        self._render_haze(frame)
        self._render_precipitation(frame)
        self._render_lightning(frame)

        # Status row last, on top of everything
        self._render_status(frame)

        self.last_frame = frame
        self.last_render_time = time.perf_counter() - start_time
        self._render_count += 1

    def _render_sky(self, frame: WeatherFrame) -> None:
        """Shade the sky by darkness."""
        darkness = frame.parameters.sky_darkness
        shade = SKY_SHADES[min(len(SKY_SHADES) - 1, int(darkness * len(SKY_SHADES)))]
        for y in range(1, self.height):
            for x in range(self.width):
                self.screen[y][x] = shade

    def _render_haze(self, frame: WeatherFrame) -> None:
        """Cover the lowest rows with haze."""
        rows = int(frame.parameters.haze_density / 0.05 * (self.height - 1) / 2)
        for y in range(self.height - rows, self.height):
            for x in range(self.width):
                self.screen[y][x] = "~"

    def _render_precipitation(self, frame: WeatherFrame) -> None:
        """Scatter precipitation glyphs at a density following intensity."""
        kind = frame.parameters.precipitation_kind
        if kind is PrecipitationKind.NONE:
            return

        if kind is PrecipitationKind.RAIN:
            if frame.wind.x > 1.0:
                glyph = "\\"
            elif frame.wind.x < -1.0:
                glyph = "/"
            else:
                glyph = "|"
        elif kind is PrecipitationKind.SNOW:
            glyph = "*"
        else:
            glyph = ","

        density = frame.parameters.precipitation_intensity * 0.3
        for y in range(1, self.height):
            for x in range(self.width):
                if self._rng.random() < density:
                    self.screen[y][x] = glyph
                    self.particle_count += 1

    def _render_lightning(self, frame: WeatherFrame) -> None:
        """Draw a bolt when a discharge fires this frame."""
        frequency = frame.parameters.discharge_frequency
        if frequency <= 0 or self._rng.random() >= frequency * FLASH_CHANCE:
            return

        self.flash_count += 1
        bolt = generate_bolt(
            seed=self._rng.randrange(2**31),
            depth=4,
            start=(self._rng.uniform(0.2, 0.8), 0.0),
            end=(self._rng.uniform(0.2, 0.8), 1.0),
        )
        for bx, by in bolt:
            x = int(bx * (self.width - 1))
            y = 1 + int(by * (self.height - 2))
            if 0 <= x < self.width and 1 <= y < self.height:
                self.screen[y][x] = "#"

    def _render_status(self, frame: WeatherFrame) -> None:
        """Render the status row."""
        if frame.current_state == frame.target_state:
            state_text = str(frame.current_state)
        else:
            state_text = f"{frame.current_state}->{frame.target_state} {frame.progress:.0%}"
        status = f"{state_text} | {frame.parameters.precipitation_kind} wind {frame.wind.magnitude:.1f}"
        self.draw_text(0, 0, status)

    def draw_text(self, x: int, y: int, text: str) -> None:
        """Draw text at screen position."""
        if y < 0 or y >= self.height:
            return

        for i, char in enumerate(text):
            px = x + i
            if 0 <= px < self.width:
                self.screen[y][px] = char

    def get_screen_string(self) -> str:
        """Get the screen as a string."""
        return "\n".join("".join(row) for row in self.screen)
