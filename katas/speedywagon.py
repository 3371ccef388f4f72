"""Monitoring sensors placed around the pillar men."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

__all__ = [
    "PillarMenSensor",
    "connection_check",
    "activity_counter",
    "alarm_control",
    "uv_light_heuristic",
    "uv_alarm",
]


@dataclass
class PillarMenSensor:
    """A sensor reading: its activity level, location and raw UV data."""

    activity: int = 0
    location: str = ""
    data: list[int] = field(default_factory=list)


def connection_check(sensor: PillarMenSensor | None) -> bool:
    """Return True if a sensor is connected."""
    return sensor is not None


def activity_counter(sensors: Iterable[PillarMenSensor] | None) -> int:
    """Return the total activity of the given sensors; none counts as zero."""
    if sensors is None:
        return 0
    return sum(sensor.activity for sensor in sensors)


def alarm_control(sensor: PillarMenSensor | None) -> bool:
    """Return True if a connected sensor reports any activity."""
    return connection_check(sensor) and sensor.activity > 0


def uv_light_heuristic(data: Sequence[int]) -> int:
    """Return how many readings lie strictly above the mean; 0 for no readings."""
    if not data:
        return 0
    average = sum(data) / len(data)
    return sum(1 for reading in data if reading > average)


def uv_alarm(sensor: PillarMenSensor | None) -> bool:
    """Return True if a connected sensor's UV heuristic exceeds its activity."""
    return connection_check(sensor) and uv_light_heuristic(sensor.data) > sensor.activity