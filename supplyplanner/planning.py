"""Choosing cities to stockpile emergency supplies in.

A road network maps each city to the cities it has a direct road to. A city
is covered by a set of supply locations when it holds supplies itself or one
of its neighbours does.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Mapping

__all__ = ["place_emergency_supplies", "make_symmetric", "is_covered"]

RoadNetwork = Mapping[str, Iterable[str]]


def place_emergency_supplies(
    road_network: RoadNetwork, num_cities: int
) -> frozenset[str] | None:
    """Return at most ``num_cities`` supply locations covering every city.

    Cities are considered in sorted order, so the answer is deterministic.
    Returns ``None`` when no such placement exists.

    Raises:
        ValueError: if ``num_cities`` is negative.
    """
    if num_cities < 0:
        raise ValueError("Number of cities cannot be negative")

    neighbours = {city: frozenset(links) for city, links in road_network.items()}

    # reach[o]: the cities that become covered when supplies are placed at o.
    reach: dict[str, set[str]] = defaultdict(set)
    for city, links in neighbours.items():
        reach[city].add(city)
        for other in links:
            reach[other].add(city)
            reach[other].add(other)
    best_reach = max((len(covered) for covered in reach.values()), default=1)

    # Feasibility of a state depends only on what is uncovered and how many
    # picks remain, so a failure is remembered by the largest budget it had.
    failed: dict[frozenset[str], int] = {}

    def search(
        uncovered: frozenset[str], supplies: frozenset[str], left: int
    ) -> frozenset[str] | None:
        if not uncovered:
            return supplies
        if left == 0:
            return None
        if failed.get(uncovered, -1) >= left or len(uncovered) > left * best_reach:
            return None

        target = min(uncovered)
        for option in sorted(neighbours.get(target, frozenset()) | {target}):
            remaining = uncovered - reach.get(option, {option})
            result = search(remaining, supplies | {option}, left - 1)
            if result is not None:
                return result

        failed[uncovered] = max(failed.get(uncovered, -1), left)
        return None

    return search(frozenset(neighbours), frozenset(), num_cities)


def make_symmetric(source: RoadNetwork) -> dict[str, set[str]]:
    """Return a copy of ``source`` in which every road runs both ways."""
    result: dict[str, set[str]] = {city: set(links) for city, links in source.items()}
    for origin, links in source.items():
        for dest in links:
            result.setdefault(origin, set()).add(dest)
            result.setdefault(dest, set()).add(origin)
    return result


def is_covered(
    city: str, road_network: RoadNetwork, supply_locations: Iterable[str]
) -> bool:
    """Tell whether ``city`` has supplies or is next to a city that does."""
    supplies = set(supply_locations)
    if city in supplies:
        return True
    return any(neighbour in supplies for neighbour in road_network.get(city, ()))