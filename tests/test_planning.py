from itertools import permutations

import pytest

from supplyplanner.planning import (
    is_covered,
    make_symmetric,
    place_emergency_supplies,
)


def _covers_everything(network, supplies):
    return all(is_covered(city, network, supplies) for city in network)


DONT_BE_GREEDY = make_symmetric(
    {
        "A": {"B"},
        "B": {"C", "D"},
        "C": {"D"},
        "D": {"F", "G"},
        "E": {"F"},
        "F": {"G"},
    }
)


def _grid():
    grid = {}
    rows = "ABCDEF"
    for r, row in enumerate(rows):
        for col in range(1, 7):
            name = f"{row}{col}"
            links = grid.setdefault(name, set())
            if r + 1 < len(rows):
                links.add(f"{rows[r + 1]}{col}")
            if col < 6:
                links.add(f"{row}{col + 1}")
    return make_symmetric(grid)


def test_negative_count_raises():
    with pytest.raises(ValueError):
        place_emergency_supplies({}, -137)


def test_map_with_no_cities():
    assert place_emergency_supplies({}, 0) == set()
    assert place_emergency_supplies({}, 137) == set()


def test_one_city():
    network = make_symmetric({"Solipsist": set()})
    assert place_emergency_supplies(network, 0) is None
    assert place_emergency_supplies(network, 1) == {"Solipsist"}
    assert place_emergency_supplies(network, 2) == {"Solipsist"}


def test_two_linked_cities():
    network = make_symmetric({"A": {"B"}})
    assert place_emergency_supplies(network, 0) is None

    one = place_emergency_supplies(network, 1)
    assert one is not None
    assert len(one) == 1
    assert one <= {"A", "B"}

    two = place_emergency_supplies(network, 2)
    assert two is not None
    assert len(two) <= 2
    assert two <= {"A", "B"}


def test_four_disconnected_cities():
    network = make_symmetric({"A": set(), "B": set(), "C": set(), "D": set()})
    for count in range(4):
        assert place_emergency_supplies(network, count) is None
    assert place_emergency_supplies(network, 4) == {"A", "B", "C", "D"}


def test_ethene_in_every_ordering():
    for cities in permutations("ABCDEF"):
        network = make_symmetric(
            {
                cities[2]: {cities[0], cities[1], cities[3]},
                cities[3]: {cities[4], cities[5]},
            }
        )
        assert place_emergency_supplies(network, 2) == {cities[2], cities[3]}
        assert place_emergency_supplies(network, 1) is None


def test_six_cities_in_a_line_in_every_ordering():
    for cities in permutations("ABCDEF"):
        network = {
            cities[i]: {cities[i - 1], cities[i + 1]} for i in range(1, len(cities) - 1)
        }
        network = make_symmetric(network)

        chosen = place_emergency_supplies(network, 2)
        assert chosen is not None
        assert len(chosen) == 2
        assert cities[1] in chosen
        assert cities[4] in chosen
        assert place_emergency_supplies(network, 1) is None


def test_dont_be_greedy():
    assert place_emergency_supplies(DONT_BE_GREEDY, 0) is None
    assert place_emergency_supplies(DONT_BE_GREEDY, 1) is None
    assert place_emergency_supplies(DONT_BE_GREEDY, 2) == {"B", "F"}


def test_dont_be_greedy_in_every_ordering():
    for cities in permutations("ABCDEFG"):
        network = make_symmetric(
            {
                cities[1]: {cities[0], cities[2], cities[5]},
                cities[2]: {cities[3], cities[5], cities[6]},
                cities[3]: {cities[4], cities[6]},
            }
        )
        assert place_emergency_supplies(network, 2) == {cities[1], cities[3]}
        assert place_emergency_supplies(network, 1) is None


def test_six_by_six_grid():
    grid = _grid()
    locations = place_emergency_supplies(grid, 10)
    assert locations is not None
    assert len(locations) <= 10
    assert _covers_everything(grid, locations)


def test_result_covers_network_and_respects_budget():
    for count in range(2, 6):
        chosen = place_emergency_supplies(DONT_BE_GREEDY, count)
        assert chosen is not None
        assert len(chosen) <= count
        assert _covers_everything(DONT_BE_GREEDY, chosen)


def test_input_network_is_not_modified():
    network = {"A": {"B"}, "B": {"A"}}
    place_emergency_supplies(network, 1)
    assert network == {"A": {"B"}, "B": {"A"}}


def test_make_symmetric_adds_reverse_roads():
    result = make_symmetric({"A": {"B"}, "B": {"C"}})
    assert result == {"A": {"B"}, "B": {"A", "C"}, "C": {"B"}}


def test_make_symmetric_leaves_source_alone():
    source = {"A": {"B"}}
    make_symmetric(source)
    assert source == {"A": {"B"}}


def test_make_symmetric_is_idempotent():
    once = make_symmetric({"A": {"B", "C"}, "D": {"A"}})
    assert make_symmetric(once) == once


def test_is_covered_by_own_supplies():
    network = make_symmetric({"A": {"B"}, "C": set()})
    assert is_covered("C", network, {"C"})


def test_is_covered_by_neighbour():
    network = make_symmetric({"A": {"B"}, "C": set()})
    assert is_covered("A", network, {"B"})
    assert is_covered("B", network, {"A"})


def test_is_not_covered():
    network = make_symmetric({"A": {"B"}, "C": set()})
    assert not is_covered("C", network, {"A", "B"})
    assert not is_covered("A", network, set())


def test_is_covered_for_unknown_city():
    assert not is_covered("Nowhere", {"A": {"B"}}, {"A"})
    assert is_covered("Nowhere", {"A": {"B"}}, {"Nowhere"})