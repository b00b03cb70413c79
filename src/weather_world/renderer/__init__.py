"""Renderer package for Weather World."""

from __future__ import annotations

from .lightning import generate_bolt
from .headless import HeadlessRenderer
from .snapshot import SnapshotRenderer

__all__ = [
    "generate_bolt",
    "HeadlessRenderer",
    "SnapshotRenderer",
]
