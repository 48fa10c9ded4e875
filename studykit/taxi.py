"""Map rider and driver positions to rectangular areas and estimate demand."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Point:
    lat: float
    lng: float

    def within_bounds(self, upper_left: Point, lower_right: Point) -> bool:
        """Naive box test, inclusive on every edge; ignores the antimeridian."""
        return (
            lower_right.lat <= self.lat <= upper_left.lat
            and lower_right.lng <= self.lng <= upper_left.lng
        )


@dataclass(frozen=True)
class Location:
    upper_left: Point
    lower_right: Point

    def contains(self, point: Point) -> bool:
        return point.within_bounds(self.upper_left, self.lower_right)


LOCATIONS: tuple[Location, ...] = (
    Location(upper_left=Point(70, 70), lower_right=Point(69, 69)),
    Location(upper_left=Point(69, 69), lower_right=Point(68, 68)),
)


class Consumer:
    """Counts riders and drivers per location.

    A point on a shared edge belongs to the first matching location.
    """

    def __init__(self, locations: Iterable[Location] = LOCATIONS) -> None:
        self.locations = tuple(locations)
        self._riders: Counter[Location] = Counter()
        self._drivers: Counter[Location] = Counter()

    def _locate(self, point: Point) -> Location | None:
        return next((loc for loc in self.locations if loc.contains(point)), None)

    def _consume(self, points: Iterable[Point], counter: Counter[Location]) -> list[Location | None]:
        found = []
        for point in points:
            location = self._locate(point)
            if location is not None:
                counter[location] += 1
            found.append(location)
        return found

    def consume_rider(self, points: Iterable[Point]) -> list[Location | None]:
        """Count rider positions; return each point's location, or None if outside all."""
        return self._consume(points, self._riders)

    def consume_driver(self, points: Iterable[Point]) -> list[Location | None]:
        """Count driver positions; return each point's location, or None if outside all."""
        return self._consume(points, self._drivers)

    def get_demand(self, point: Point) -> float:
        """Riders per driver in the location holding ``point``.

        Raises ValueError if the point is outside every location or the
        location has no drivers.
        """
        location = self._locate(point)
        if location is None:
            raise ValueError("point is outside every location")
        drivers = self._drivers[location]
        if drivers == 0:
            raise ValueError("no drivers in location")
        return self._riders[location] / drivers