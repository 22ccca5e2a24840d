import pytest

from statcore.errors import InsufficientSampleError
from statcore.grouping import map_groups, pairwise_comparisons
from statcore.stats.descriptive import mean
from statcore.stats.hypothesis import two_sample_t_test


GROUPED = {
    "north": [10.0, 12.0, 14.0],
    "south": [20.0, 22.0, 24.0],
    ("east", 1): [11.0, 13.0, 18.0],
}


def test_map_groups_preserves_key_order():
    result = map_groups(GROUPED, mean)
    assert list(result) == ["north", "south", ("east", 1)]
    assert result["north"] == 12.0
    assert result[("east", 1)] == 14.0


def test_map_groups_empty_mapping():
    assert map_groups({}, mean) == {}


def test_pairwise_covers_every_unordered_pair():
    result = pairwise_comparisons(GROUPED, two_sample_t_test)
    assert list(result) == [
        ("north", "south"),
        ("north", ("east", 1)),
        ("south", ("east", 1)),
    ]
    assert result[("north", "south")].p_value < 0.01


def test_pairwise_needs_two_groups():
    with pytest.raises(InsufficientSampleError):
        pairwise_comparisons({"only": [1.0, 2.0]}, two_sample_t_test)


def test_input_not_mutated():
    grouped = {"a": [3.0, 1.0, 2.0], "b": [6.0, 4.0, 5.0]}
    map_groups(grouped, sorted)
    pairwise_comparisons(grouped, two_sample_t_test)
    assert grouped == {"a": [3.0, 1.0, 2.0], "b": [6.0, 4.0, 5.0]}
