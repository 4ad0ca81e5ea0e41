"""Console demo for disaster planning, plus the geometry used to draw a world."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from enum import IntEnum

from .console import make_file_selection
from .parser import DisasterTest, Point, load_disaster
from .planning import place_emergency_supplies

__all__ = [
    "CityState",
    "Geometry",
    "PROBLEM_SUFFIX",
    "compute_geometry",
    "logical_to_physical",
    "shorthand_for",
    "city_state",
    "solve_optimally",
    "sample_problems",
    "describe_network",
    "describe_best_cities",
    "main",
]

PROBLEM_SUFFIX = ".dst"

# Space left around the drawing, in pixels.
BUFFER_SPACE = 60.0

# Lower bound on the width or height of the data range, for collinear points.
LOGICAL_PADDING = 1e-5

# Longest label drawn inside a city.
MAX_LABEL_LENGTH = 3


class CityState(IntEnum):
    """How a city is served by a set of supply locations."""

    UNCOVERED = 0
    COVERED_INDIRECTLY = 1
    COVERED_DIRECTLY = 2


@dataclass(frozen=True)
class Geometry:
    """The data range of a world and the screen area it is drawn in."""

    min_data_x: float
    min_data_y: float
    max_data_x: float
    max_data_y: float
    min_draw_x: float
    min_draw_y: float
    max_draw_x: float
    max_draw_y: float


def compute_geometry(
    network: DisasterTest, canvas_width: float, canvas_height: float
) -> Geometry:
    """Fit the world's city locations into a canvas, keeping their aspect ratio.

    Raises:
        ValueError: if the world has no cities or the canvas is too small.
    """
    locations = list(network.city_locations.values())
    if not locations:
        raise ValueError("Cannot compute geometry for a world with no cities.")
    if canvas_width <= 2 * BUFFER_SPACE or canvas_height <= 2 * BUFFER_SPACE:
        raise ValueError("Canvas is too small to draw in.")

    min_x = min(p.x for p in locations) - LOGICAL_PADDING
    min_y = min(p.y for p in locations) - LOGICAL_PADDING
    max_x = max(p.x for p in locations) + LOGICAL_PADDING
    max_y = max(p.y for p in locations) + LOGICAL_PADDING

    win_width = canvas_width - 2 * BUFFER_SPACE
    win_height = canvas_height - 2 * BUFFER_SPACE
    win_aspect = win_width / win_height
    data_aspect = (max_x - min_x) / (max_y - min_y)

    if data_aspect >= win_aspect:
        data_width = win_width
        data_height = data_width / data_aspect
    else:
        data_height = win_height
        data_width = data_aspect * data_height

    min_draw_x = (win_width - data_width) / 2.0 + BUFFER_SPACE
    min_draw_y = (win_height - data_height) / 2.0 + BUFFER_SPACE
    return Geometry(
        min_x,
        min_y,
        max_x,
        max_y,
        min_draw_x,
        min_draw_y,
        min_draw_x + data_width,
        min_draw_y + data_height,
    )


def logical_to_physical(point: Point, geometry: Geometry) -> Point:
    """Map a point in data space onto the drawing area."""
    g = geometry
    x = (point.x - g.min_data_x) / (g.max_data_x - g.min_data_x) * (
        g.max_draw_x - g.min_draw_x
    ) + g.min_draw_x
    y = (point.y - g.min_data_y) / (g.max_data_y - g.min_data_y) * (
        g.max_draw_y - g.min_draw_y
    ) + g.min_draw_y
    return Point(x, y)


def shorthand_for(name: str) -> str:
    """Return a short label: the first three letters of one word, else initials."""
    components = name.split(" ")
    if len(components) == 1:
        word = components[0]
        return word if len(word) < MAX_LABEL_LENGTH else word[:3]

    initials = ""
    for word in components:
        if len(initials) >= MAX_LABEL_LENGTH:
            break
        if word:
            initials += word[0]
    return initials


def city_state(
    city: str, network: Mapping[str, Iterable[str]], selected: Iterable[str]
) -> CityState:
    """Tell whether a city holds supplies, is next to supplies, or neither."""
    chosen = set(selected)
    if city in chosen:
        return CityState.COVERED_DIRECTLY
    if chosen.intersection(network.get(city, ())):
        return CityState.COVERED_INDIRECTLY
    return CityState.UNCOVERED


def solve_optimally(network: Mapping[str, Iterable[str]]) -> frozenset[str]:
    """Find a smallest set of supply locations by binary search on the budget."""
    low, high = 0, len(network)
    best = place_emergency_supplies(network, high)
    result = best if best is not None else frozenset()

    while low < high:
        mid = low + (high - low) // 2
        attempt = place_emergency_supplies(network, mid)
        if attempt is not None:
            high = mid
            result = attempt
        else:
            low = mid + 1
    return result


def sample_problems(base_path: str) -> list[str]:
    """List the world files in a directory, sorted by name."""
    return sorted(
        entry.name
        for entry in os.scandir(base_path)
        if entry.name.endswith(PROBLEM_SUFFIX)
    )


def _pluralize(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


def describe_network(network: Mapping[str, Iterable[str]]) -> str:
    """Return a text listing of every city and its neighbours."""
    lines = [
        f"This transportation grid has {_pluralize(len(network), 'city', 'cities')}."
    ]
    for city in sorted(network):
        neighbours = sorted(network[city])
        lines.append(
            f"  The city {city} is adjacent to "
            f"{_pluralize(len(neighbours), 'city', 'cities')}."
        )
        lines.extend(f"    {neighbour}" for neighbour in neighbours)
    return "\n".join(lines)


def describe_best_cities(cities: Iterable[str]) -> str:
    """Return a text listing of the cities chosen for supplies."""
    chosen = sorted(cities)
    lines = [
        f"You need to stockpile in {_pluralize(len(chosen), 'city', 'cities')}"
        " to provide coverage."
    ]
    lines.extend(f"  {city}" for city in chosen)
    return "\n".join(lines)


def _ask_yes_or_no(prompt: str) -> bool:
    while True:
        reply = input(prompt).strip().lower()
        if reply.startswith("y"):
            return True
        if reply.startswith("n"):
            return False
        print("Please type a word that starts with 'Y' or 'N'.")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the console demo: pick a world, solve it, and report the answer."""
    parser = argparse.ArgumentParser(description="Disaster planning demo.")
    parser.add_argument(
        "directory",
        nargs="?",
        default="res/",
        help="directory holding world files",
    )
    args = parser.parse_args(argv)

    print("Disaster Planning")
    while True:
        path = make_file_selection(PROBLEM_SUFFIX, args.directory)
        with open(path, encoding="utf-8") as handle:
            scenario = load_disaster(handle)

        print(describe_network(scenario.network))
        print(
            "Running your code to find the fewest number of cities needed... ",
            end="",
            flush=True,
        )
        cities = solve_optimally(scenario.network)
        print("done!")
        print(describe_best_cities(cities))

        if not _ask_yes_or_no("Try another demo file? "):
            break
    return 0