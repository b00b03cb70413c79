#!/usr/bin/env python3
"""Save a single rendered weather frame to view."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from weather_world.engine import WeatherController
from weather_world.renderer.snapshot import SnapshotRenderer


def main():
    state = sys.argv[1] if len(sys.argv) > 1 else "storm"

    controller = WeatherController.create(initial_state=state)
    renderer = SnapshotRenderer(width=800, height=500, seed=1)

    # Render
    renderer.render_frame(controller.tick(0.0))

    # Save to file
    output = Path(__file__).parent.parent / f"frame_{state}.png"
    renderer.frame.save(output)
    print(f"Saved frame to {output}")
    print(f"Render time: {renderer.last_render_time*1000:.1f}ms")


if __name__ == "__main__":
    main()
