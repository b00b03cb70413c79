"""Weather state catalog."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from weather_world.types import (
    ConfigurationError,
    UnknownStateError,
    WeatherState,
    WeatherType,
)


class StateCatalog:
    """Immutable table of weather profiles, one per WeatherType."""

    def __init__(self, entries: Iterable[WeatherState]):
        """Build the catalog.

        Args:
            entries: One WeatherState per WeatherType.

        Raises:
            ConfigurationError: If an entry is duplicated or a state is missing.
        """
        states: dict[WeatherType, WeatherState] = {}
        for entry in entries:
            if entry.id in states:
                raise ConfigurationError(f"Duplicate catalog entry for {entry.id}")
            states[entry.id] = entry

        missing = [w.value for w in WeatherType if w not in states]
        if missing:
            raise ConfigurationError(
                f"Catalog missing required states: {', '.join(missing)}"
            )

        self._states = states

    @classmethod
    def default(cls) -> "StateCatalog":
        """Create the catalog from the shipped weather table."""
        from weather_world.worlds.weather_tables import CATALOG_ENTRIES

        return cls(CATALOG_ENTRIES)

    def lookup(self, state_id: Any) -> WeatherState:
        """Get the catalog entry for a state.

        Raises:
            UnknownStateError: If the id is not a registered state.
        """
        return self._states[WeatherType.parse(state_id)]

    def __contains__(self, state_id: Any) -> bool:
        try:
            return WeatherType.parse(state_id) in self._states
        except UnknownStateError:
            return False

    def __iter__(self) -> Iterator[WeatherState]:
        return iter(self._states[w] for w in WeatherType)

    def __len__(self) -> int:
        return len(self._states)
