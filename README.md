# supplyplanner

Decide where to stockpile emergency supplies in a road network so that
every city either holds supplies itself or is next to a city that does.

## Installing

```
pip install .
```

## Using the library

```python
from supplyplanner.planning import make_symmetric, place_emergency_supplies, is_covered

network = make_symmetric({
    "A": {"B"},
    "B": {"C", "D"},
    "C": {"D"},
    "D": {"F", "G"},
    "E": {"F"},
    "F": {"G"},
})

print(place_emergency_supplies(network, 1))   # None: one city is not enough
print(place_emergency_supplies(network, 2))   # frozenset({'B', 'F'})
print(is_covered("E", network, {"B", "F"}))   # True
```

`place_emergency_supplies(road_network, num_cities)` returns a `frozenset`
of at most `num_cities` cities covering the whole network, or `None` if
there is no such set. Cities are tried in sorted order, so the answer is
deterministic. A negative count raises `ValueError`.

`make_symmetric` returns a copy of a network in which every road runs both
ways; `is_covered` tells whether one city is served by a set of supply
locations.

### Map files

Network files (`.dst`) hold one city per line, written as
`Name (x, y): Neighbour, Other Neighbour`. Blank lines and lines starting
with `#` are skipped, and roads are made two-way automatically.

```python
from supplyplanner.parser import loads_disaster

test = loads_disaster("""
A (0, 0): B
B (1, 0):
""")
print(test.network)          # {'A': {'B'}, 'B': {'A'}}
print(test.city_locations)   # {'A': Point(x=0.0, y=0.0), 'B': Point(x=1.0, y=0.0)}
```

`load_disaster` reads from any iterable of lines, such as an open file.
Malformed data (a missing or extra colon, a blank or repeated neighbour, a
link to an unknown city, two cities at the same spot) raises
`DisasterParseError`, a subclass of `ValueError`.

### Solving and describing a world

`supplyplanner.demo` holds the pieces used by the command line tool:

- `solve_optimally(network)` finds a smallest covering set by binary search
  over the number of cities.
- `describe_network(network)` and `describe_best_cities(cities)` return
  text listings.
- `sample_problems(base_path)` lists the `.dst` files in a directory.
- `compute_geometry`, `logical_to_physical`, `shorthand_for` and
  `city_state` work out where and how a city would be drawn: the screen
  area a world fits in, a city's position in it, a short label for it, and
  whether it is covered directly, indirectly or not at all (`CityState`).

## Command line

```
supplyplanner [directory]
```

lists the `.dst` files in `directory` (default `res/`), asks you to pick
one, prints the network and the fewest cities needed to cover it, and
offers to do another.

## Other modules

- `supplyplanner.shifts`: `Day` and `Shift` (ordered, with `overlaps_with`
  and `length`), the `STANDARD_SHIFTS` week, `hour_to_string`,
  `assign_subcolumns` for laying overlapping shifts side by side,
  `total_profit`, `total_length` and `randomize_values`.
- `supplyplanner.color`: `Color`, an immutable RGB value with named presets
  and `from_hex`, `from_hsv`, `random`, `to_rgb` and `to_html`.
- `supplyplanner.font`: `Font`, `FontFamily` and `FontStyle`, an immutable
  font description with `with_*` copies and `library_string`.
- `supplyplanner.styled_console`: `StyledConsole` collects text written in
  different styles (`set_style`, or the `styled` context manager) and
  renders it as HTML with `render_html`.
- `supplyplanner.console`: `make_selection_from` and `make_file_selection`,
  numbered-menu prompts.

## What it does not do

- There is no graphical window: the drawing helpers compute positions,
  labels and colours but nothing is drawn on screen.
- There is no shift scheduling solver; `supplyplanner.shifts` provides the
  shift type and layout helpers only.

## Running the tests

```
pip install .[test]
pytest
```