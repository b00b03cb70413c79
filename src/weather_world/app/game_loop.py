"""Frame loop coordinating the weather controller, scheduler and renderer."""

from __future__ import annotations

import asyncio
import time
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from weather_world.engine import WeatherController
    from weather_world.engine.systems import BiomeScheduler
    from weather_world.types import WeatherFrame

# Longest delta a single frame may consume
MAX_FRAME_DT = 0.25


class WeatherLoop:
    """Main loop that ticks the weather once per rendered frame."""

    def __init__(
        self,
        controller: WeatherController,
        renderer: Any,
        scheduler: Optional[BiomeScheduler] = None,
        target_fps: int = 30,
    ):
        """Initialize the loop.

        Args:
            controller: The weather controller.
            renderer: Any object with ``render_frame(frame)``.
            scheduler: Optional biome scheduler driving state changes.
            target_fps: Target frames per second.
        """
        self.controller = controller
        self.renderer = renderer
        self.scheduler = scheduler
        self.target_fps = target_fps
        self.target_frame_time = 1.0 / target_fps

        self._running = False
        self._last_time = 0.0
        self._frame_count = 0
        self._fps = 0.0
        self._fps_update_time = 0.0
        self.last_frame: Optional[WeatherFrame] = None
        self.elapsed = 0.0

    def tick(self, dt: float) -> WeatherFrame:
        """Process a single frame.

        Args:
            dt: Delta time in seconds.

        Returns:
            The rendered weather frame.
        """
        if self.scheduler is not None:
            self.scheduler.tick(dt)

        frame = self.controller.tick(dt)
        self.renderer.render_frame(frame)
        self.last_frame = frame
        self.elapsed += dt

        # Track FPS
        self._frame_count += 1
        self._fps_update_time += dt
        if self._fps_update_time >= 1.0:
            self._fps = self._frame_count / self._fps_update_time
            self._frame_count = 0
            self._fps_update_time = 0.0

        return frame

    def run_for(self, seconds: float) -> int:
        """Step through simulated time at the target frame rate.

        No sleeping: frames are produced as fast as possible.

        Args:
            seconds: Simulated seconds to cover.

        Returns:
            Number of frames processed.
        """
        frames = 0
        remaining = seconds
        while remaining > 1e-9:
            dt = min(self.target_frame_time, remaining)
            self.tick(dt)
            remaining -= dt
            frames += 1
        return frames

    def start(self) -> None:
        """Start the loop."""
        self._running = True
        self._last_time = time.perf_counter()

    def stop(self) -> None:
        """Stop the loop."""
        self._running = False

    @property
    def is_running(self) -> bool:
        """Check if loop is running.

        Returns:
            True if running.
        """
        return self._running

    @property
    def fps(self) -> float:
        """Get current FPS.

        Returns:
            Current frames per second.
        """
        return self._fps

    def process_frame(self) -> float:
        """Process a single frame with wall-clock timing.

        Returns:
            The delta time used for this frame.
        """
        current_time = time.perf_counter()
        dt = current_time - self._last_time
        self._last_time = current_time

        # Cap delta time to prevent spiral of death
        if dt > MAX_FRAME_DT:
            dt = MAX_FRAME_DT

        self.tick(dt)

        return dt

    async def run_async(self) -> None:
        """Run the loop asynchronously until stopped."""
        self.start()
        while self._running:
            frame_start = time.perf_counter()

            self.process_frame()

            # Sleep off the rest of the frame budget
            frame_time = time.perf_counter() - frame_start
            sleep_time = max(0, self.target_frame_time - frame_time)

            if sleep_time > 0:
                await asyncio.sleep(sleep_time)
            else:
                await asyncio.sleep(0)
