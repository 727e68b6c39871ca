"""
Test Helpers Package

Support code for table-driven tests:
    - Permutation fixtures: every reordering of a record's list fields,
      for asserting order-independent matches
    - Error-message checks for expected exceptions

ARCHITECTURAL GUARANTEE:
------------------------
Every helper is a pure function of its input.
Nothing here holds state between calls, does I/O, or needs configuration.
"""

from .assertion import assert_matches_any, error_with_message
from .expander import Ref, expand_record, generate_slice_permutations_for_tests, variable_fields
from .matchers import AnyOf, any_permutation_of
from .permutations import count_orderings, permutate_sequence

__version__ = "0.1.0"

__all__ = [
    "AnyOf",
    "Ref",
    "any_permutation_of",
    "assert_matches_any",
    "count_orderings",
    "error_with_message",
    "expand_record",
    "generate_slice_permutations_for_tests",
    "permutate_sequence",
    "variable_fields",
]
