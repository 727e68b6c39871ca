"""
Tests for the permutation engine.

These tests verify:
    - Backtracking order of generated orderings
    - Exclusion of the original ordering
    - Handling of equal elements
    - Edge cases (empty and single-element input)
"""

import pytest

from testhelpers import permutations
from testhelpers.permutations import count_orderings, permutate_sequence


class TestPermutateSequence:
    """Test ordering generation."""

    def test_three_distinct_elements(self):
        """Should list the five non-identical orderings in backtracking order."""
        result = permutate_sequence(["one", "two", "three"])
        assert result == [
            ["one", "three", "two"],
            ["two", "one", "three"],
            ["two", "three", "one"],
            ["three", "one", "two"],
            ["three", "two", "one"],
        ]

    def test_include_original(self):
        """Original ordering comes first when requested."""
        result = permutate_sequence([1, 2, 3], include_original=True)
        assert result == [
            [1, 2, 3],
            [1, 3, 2],
            [2, 1, 3],
            [2, 3, 1],
            [3, 1, 2],
            [3, 2, 1],
        ]

    def test_empty_input(self):
        """Empty input has no orderings, not even the empty one."""
        assert permutate_sequence([]) == []
        assert permutate_sequence([], include_original=True) == []

    def test_single_element(self):
        """A single element only has the original ordering."""
        assert permutate_sequence(["only"]) == []
        assert permutate_sequence(["only"], include_original=True) == [["only"]]

    def test_equal_elements_are_not_repeated(self):
        """Orderings equal to an earlier one are emitted once."""
        assert permutate_sequence([1, 1, 2]) == [[1, 2, 1], [2, 1, 1]]
        assert permutate_sequence([1, 1, 2], include_original=True) == [
            [1, 1, 2],
            [1, 2, 1],
            [2, 1, 1],
        ]

    def test_all_equal_elements(self):
        """Every ordering of equal elements is the original."""
        assert permutate_sequence(["x", "x"]) == []

    def test_unhashable_elements(self):
        """Elements only need ==."""
        result = permutate_sequence([{"a": 1}, [2]])
        assert result == [[[2], {"a": 1}]]

    def test_returns_fresh_lists(self):
        """Orderings are new lists, safe to mutate."""
        items = [1, 2]
        result = permutate_sequence(items, include_original=True)
        result[0].append(3)
        assert items == [1, 2]
        assert result[1] == [2, 1]

    def test_accepts_tuples(self):
        """Any sequence works; orderings are lists."""
        assert permutate_sequence(("a", "b")) == [["b", "a"]]

    def test_deterministic(self):
        """Equal inputs give equal outputs."""
        assert permutate_sequence([3, 1, 2]) == permutate_sequence([3, 1, 2])

    def test_warns_on_long_sequence(self, monkeypatch):
        """Long sequences trigger a UserWarning but are still enumerated."""
        monkeypatch.setattr(permutations, "LARGE_SEQUENCE_WARNING_LENGTH", 2)
        with pytest.warns(UserWarning, match="3 elements"):
            result = permutate_sequence([1, 2, 3])
        assert len(result) == 5


class TestCountOrderings:
    """Test the ordering count."""

    @pytest.mark.parametrize(
        "items,expected",
        [
            ([], 0),
            ([1], 1),
            ([1, 2], 2),
            ([1, 2, 3], 6),
            ([1, 2, 3, 4], 24),
            ([1, 1, 2], 3),
            ([1, 1, 2, 2], 6),
            (["a", "a", "a"], 1),
        ],
    )
    def test_counts(self, items, expected):
        """Should be the multinomial coefficient of the element groups."""
        assert count_orderings(items) == expected

    @pytest.mark.parametrize("items", [[1, 2, 3], [1, 1, 2], [1, 2, 2, 3]])
    def test_agrees_with_generation(self, items):
        """Count matches the number of generated orderings."""
        assert count_orderings(items) == len(permutate_sequence(items, include_original=True))
