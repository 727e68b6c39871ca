"""
Matchers for use inside equality-based assertions and mock call checks.

    mock.assert_called_once_with(any_permutation_of(expected_request))
"""
from __future__ import annotations

from typing import Any, List

from testhelpers.expander import generate_slice_permutations_for_tests


class AnyOf:
    """Compares equal to any object equal to one of its candidates."""

    def __init__(self, *candidates: Any) -> None:
        self.candidates: List[Any] = list(candidates)

    def __eq__(self, other: Any) -> bool:
        return any(candidate == other for candidate in self.candidates)

    def __ne__(self, other: Any) -> bool:
        return not self.__eq__(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"AnyOf({', '.join(repr(c) for c in self.candidates)})"


def any_permutation_of(value: Any) -> AnyOf:
    """Match `value` or any of its single-field list reorderings."""
    return AnyOf(*generate_slice_permutations_for_tests(value))
