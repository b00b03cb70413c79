"""Still-image renderer for weather frames."""

from __future__ import annotations

import math
import random
import time
from typing import Optional

from PIL import Image, ImageDraw

from weather_world.types import PrecipitationKind, WeatherFrame

from .lightning import generate_bolt

HAZE_COLOR = (200, 200, 205)

# Scales haze_density into veil opacity (0.05 -> ~86%)
HAZE_OPACITY_SCALE = 40.0

# Particles per 10k pixels at full intensity
PARTICLE_DENSITY = 12.0


class SnapshotRenderer:
    """Renders weather frames into Pillow images."""

    def __init__(self, width: int = 320, height: int = 200, seed: Optional[int] = None):
        """Initialize the renderer.

        Args:
            width: Image width in pixels.
            height: Image height in pixels.
            seed: Seed for particle placement and flashes.
        """
        self.width = width
        self.height = height
        self.frame: Optional[Image.Image] = None
        self.last_render_time: float = 0.0
        self._rng = random.Random(seed)

    def render_frame(self, frame: WeatherFrame) -> Image.Image:
        """Render a frame to an RGB image.

        Args:
            frame: The weather frame to render.

        Returns:
            The rendered image, also kept on ``self.frame``.
        """
        start_time = time.perf_counter()
        params = frame.parameters

        # Sky darkened toward black
        light = 1.0 - 0.7 * params.sky_darkness
        sky = tuple(int(c * light) for c in frame.hints.sky_color)
        image = Image.new("RGB", (self.width, self.height), sky)

        # Haze veil
        opacity = 1.0 - math.exp(-params.haze_density * HAZE_OPACITY_SCALE)
        if opacity > 0:
            veil = Image.new("RGB", image.size, HAZE_COLOR)
            image = Image.blend(image, veil, opacity)

        draw = ImageDraw.Draw(image)
        self._draw_precipitation(draw, frame)
        if params.discharge_frequency > 0 and self._rng.random() < params.discharge_frequency:
            self._draw_bolt(draw)

        self.frame = image
        self.last_render_time = time.perf_counter() - start_time
        return image

    def _draw_precipitation(self, draw: ImageDraw.ImageDraw, frame: WeatherFrame) -> None:
        params = frame.parameters
        if params.precipitation_kind is PrecipitationKind.NONE:
            return

        count = int(params.precipitation_intensity * PARTICLE_DENSITY * self.width * self.height / 10000)
        color = frame.hints.precipitation_color
        length = frame.hints.streak_length
        size = max(1, int(frame.hints.particle_size * 2))

        # Streaks lean with the horizontal wind
        magnitude = max(frame.wind.magnitude, 1e-6)
        dx = frame.wind.x / magnitude * length * 0.5
        dy = length

        for _ in range(count):
            x = self._rng.uniform(0, self.width)
            y = self._rng.uniform(0, self.height)
            if length > 0:
                draw.line([(x, y), (x + dx, y + dy)], fill=color, width=1)
            else:
                draw.ellipse([x, y, x + size, y + size], fill=color)

    def _draw_bolt(self, draw: ImageDraw.ImageDraw) -> None:
        bolt = generate_bolt(
            seed=self._rng.randrange(2**31),
            depth=6,
            start=(self._rng.uniform(0.2, 0.8), 0.0),
            end=(self._rng.uniform(0.2, 0.8), 0.9),
        )
        points = [(float(x) * self.width, float(y) * self.height) for x, y in bolt]
        draw.line(points, fill=(235, 240, 255), width=2)
