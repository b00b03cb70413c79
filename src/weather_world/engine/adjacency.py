"""Transition adjacency matrix."""

from __future__ import annotations

from typing import Any, Mapping

import numpy as np

from weather_world.types import (
    ConfigurationError,
    TransitionKind,
    WeatherType,
)

_CODES: dict[str, TransitionKind] = {
    "N": TransitionKind.NATURAL,
    "A": TransitionKind.ABRUPT,
    "F": TransitionKind.FORBIDDEN,
}


class AdjacencyMatrix:
    """Classification of every ordered state pair.

    Rows are sources and columns destinations, both in WeatherType order.
    The grid is not assumed symmetric.
    """

    def __init__(self, rows: Mapping[Any, str]):
        """Build the matrix from one code string per source state.

        Args:
            rows: Source state -> string of N/A/F codes, one per destination.

        Raises:
            ConfigurationError: If a row is missing, malformed or unknown.
        """
        size = len(WeatherType)
        grid = np.full((size, size), -1, dtype=np.int8)

        for key, codes in rows.items():
            try:
                source = WeatherType(key)
            except ValueError:
                raise ConfigurationError(f"Adjacency row for unknown state {key!r}") from None
            codes = codes.replace(" ", "")
            if len(codes) != size:
                raise ConfigurationError(
                    f"Adjacency row {source} has {len(codes)} entries, expected {size}"
                )
            for column, code in enumerate(codes):
                if code not in _CODES:
                    raise ConfigurationError(
                        f"Adjacency row {source} has invalid code {code!r}"
                    )
                grid[source.index, column] = _CODES[code].value

        missing = [w.value for w in WeatherType if grid[w.index, 0] < 0]
        if missing:
            raise ConfigurationError(
                f"Adjacency matrix missing rows for: {', '.join(missing)}"
            )

        grid.setflags(write=False)
        self._grid = grid

    @classmethod
    def default(cls) -> "AdjacencyMatrix":
        """Create the matrix from the shipped adjacency table."""
        from weather_world.worlds.weather_tables import ADJACENCY_ROWS

        return cls(ADJACENCY_ROWS)

    @property
    def grid(self) -> np.ndarray:
        """Read-only grid of TransitionKind values."""
        return self._grid

    def classify(self, from_state: Any, to_state: Any) -> TransitionKind:
        """Classify the direct transition between two states.

        Raises:
            UnknownStateError: If either state is unknown.
        """
        source = WeatherType.parse(from_state)
        destination = WeatherType.parse(to_state)
        return TransitionKind(int(self._grid[source.index, destination.index]))

    def is_forbidden(self, from_state: Any, to_state: Any) -> bool:
        """Check whether a direct transition is forbidden."""
        return self.classify(from_state, to_state) is TransitionKind.FORBIDDEN

    def neighbours(self, from_state: Any) -> list[WeatherType]:
        """States directly reachable (natural or abrupt) from a state."""
        source = WeatherType.parse(from_state)
        forbidden = TransitionKind.FORBIDDEN.value
        return [w for w in WeatherType if self._grid[source.index, w.index] != forbidden]

    def forbidden_pairs(self) -> list[tuple[WeatherType, WeatherType]]:
        """All ordered pairs classified as forbidden."""
        rows, columns = np.nonzero(self._grid == TransitionKind.FORBIDDEN.value)
        states = list(WeatherType)
        return [(states[r], states[c]) for r, c in zip(rows, columns)]
