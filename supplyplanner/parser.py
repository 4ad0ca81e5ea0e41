"""Reading disaster-planning worlds from their text format.

Each data line has the form::

    City Name (X, Y): Neighbour One, Neighbour Two

Blank lines and lines starting with ``#`` are ignored. Roads listed in one
direction are added in the other direction as well.
"""

from __future__ import annotations

import io
import re
from collections.abc import Iterable
from dataclasses import dataclass, field

__all__ = ["Point", "DisasterTest", "DisasterParseError", "load_disaster", "loads_disaster"]

_CITY_PATTERN = re.compile(
    r"([A-Za-z0-9 .\-]+)\(\s*(-?[0-9]+(?:\.[0-9]+)?)\s*,\s*(-?[0-9]+(?:\.[0-9]+)?)\s*\)"
)


class DisasterParseError(ValueError):
    """Raised when a disaster-planning world is malformed."""


@dataclass(frozen=True)
class Point:
    """A location in the logical drawing space."""

    x: float
    y: float


@dataclass
class DisasterTest:
    """A road network together with where each city is drawn."""

    network: dict[str, set[str]] = field(default_factory=dict)
    city_locations: dict[str, Point] = field(default_factory=dict)


def _parse_city(city_info: str, result: DisasterTest) -> str:
    match = _CITY_PATTERN.fullmatch(city_info.strip())
    if match is None:
        raise DisasterParseError(f"Can't parse this data; is it city info? {city_info}")

    name = match.group(1).strip()
    if not name:
        raise DisasterParseError("City names can't be empty.")

    result.city_locations[name] = Point(float(match.group(2)), float(match.group(3)))
    result.network[name] = set()
    return name


def _parse_links(city: str, links: str, result: DisasterTest) -> None:
    if not links.strip():
        result.network[city] = set()
        return

    outgoing = result.network[city]
    for dest in links.split(","):
        clean = dest.strip()
        if not clean:
            raise DisasterParseError("Blank name in list of outgoing cities?")
        if clean in outgoing:
            raise DisasterParseError("City appears twice in outgoing list?")
        outgoing.add(clean)


def _parse_city_line(line: str, result: DisasterTest) -> None:
    if line.count(":") != 1:
        raise DisasterParseError("Each data line should have exactly one colon on it.")
    city_info, links = line.split(":", 1)
    name = _parse_city(city_info, result)
    _parse_links(name, links, result)


def _add_reverse_edges(result: DisasterTest) -> None:
    network = result.network
    for source in sorted(network):
        for dest in sorted(network[source]):
            if dest not in network:
                raise DisasterParseError(f"Outgoing link found to nonexistent city '{dest}'")
            network[dest].add(source)


def _validate_locations(result: DisasterTest) -> None:
    seen: dict[Point, str] = {}
    for city in sorted(result.city_locations):
        location = result.city_locations[city]
        if location in seen:
            raise DisasterParseError(f"{city} is at the same location as {seen[location]}")
        seen[location] = city


def load_disaster(source: Iterable[str]) -> DisasterTest:
    """Parse a world from an iterable of lines, such as an open text file.

    Raises:
        DisasterParseError: if the data is malformed.
    """
    result = DisasterTest()
    for raw in source:
        line = raw.rstrip("\r\n")
        if not line.strip() or line.startswith("#"):
            continue
        _parse_city_line(line, result)

    _add_reverse_edges(result)
    _validate_locations(result)
    return result


def loads_disaster(text: str) -> DisasterTest:
    """Parse a world held in a string."""
    return load_disaster(io.StringIO(text))