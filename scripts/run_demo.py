#!/usr/bin/env python3
"""Run a biome's weather in headless mode and print frames."""

import logging
import sys
from pathlib import Path

# Add src to path for running directly
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from weather_world.app import WeatherLoop
from weather_world.engine import WeatherConfig, WeatherController
from weather_world.engine.systems import BiomeScheduler
from weather_world.renderer.headless import HeadlessRenderer
from weather_world.worlds import BiomeLoader


def print_frame(loop, renderer):
    """Print the current frame."""
    frame = loop.last_frame
    params = frame.parameters
    print("\n" + "=" * 60)
    print(f"Time: {loop.elapsed / 60:.1f} min")
    print(f"State: {frame.current_state} -> {frame.target_state} ({frame.progress:.0%})")
    print(f"Precipitation: {params.precipitation_kind} @ {params.precipitation_intensity:.2f}")
    print(f"Haze: {params.haze_density:.3f}  Darkness: {params.sky_darkness:.2f}")
    print(f"Discharge: {params.discharge_frequency:.2f}  Wind: {frame.wind.magnitude:.1f}")
    print("-" * 40)
    for line in renderer.get_screen_string().split("\n")[:10]:
        print(line)
    print("-" * 40)


def main():
    """Main entry point."""
    import argparse

    loader = BiomeLoader()
    parser = argparse.ArgumentParser(description="Weather World - biome weather demo")
    parser.add_argument("--biome", default="temperate", choices=loader.available_biomes)
    parser.add_argument("--minutes", type=float, default=120.0, help="Simulated minutes")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    controller = WeatherController.create(WeatherConfig())
    scheduler = BiomeScheduler(controller, loader.load(args.biome), seed=args.seed)
    renderer = HeadlessRenderer(width=60, height=16, seed=args.seed)
    loop = WeatherLoop(controller, renderer, scheduler=scheduler, target_fps=10)

    print(f"Weather World Demo - {args.biome}")
    for _ in range(int(args.minutes)):
        loop.run_for(60.0)
        print_frame(loop, renderer)

    print("\n" + "=" * 60)
    print("Demo Complete!")
    print(f"  - Requests: {[str(s) for s in scheduler.requests]}")
    print(f"  - Degraded transitions: {controller.degraded_transitions}")


if __name__ == "__main__":
    main()
