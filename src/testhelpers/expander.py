"""
Field Expander

Builds every single-field reordering of a record fixture.

A record is a dataclass instance. Its fields are examined in declaration
order and fall into three groups:
    - list fields: reordered with the permutation engine
    - nested records (or Refs to records): expanded recursively
    - everything else: copied verbatim, never varied

Each generated record differs from the base in exactly one field.
Fields are never varied together, so the result length is
    1 + sum(variants of each field)
and not their product.

Lists of lists are reordered at their own level only; the inner
lists are never varied.
"""

from __future__ import annotations

import copy
import dataclasses
from dataclasses import dataclass
from typing import Any, List, Set

from testhelpers.permutations import permutate_sequence


@dataclass
class Ref:
    """
    A single-slot box standing for a reference to a record.

    Expanding a Ref expands the record it holds and boxes every
    generated record in a new Ref, so callers that hand out shared
    objects can check they received some reordering of them.

    Two Refs are equal when the values they hold are equal.
    """

    value: Any

    def deref(self) -> Any:
        return self.value


_MISSING = object()


def _is_record(value: Any) -> bool:
    if isinstance(value, (type, Ref)):
        return False
    return dataclasses.is_dataclass(value)


def _is_nested_record(value: Any) -> bool:
    if isinstance(value, Ref):
        return _is_record(value.value)
    return _is_record(value)


def _pointee_id(value: Any) -> int:
    if isinstance(value, Ref):
        return id(value.value)
    return id(value)


def _field_variants(current: Any, active: Set[int]) -> List[Any]:
    """Replacement values for one field, the base value excluded."""
    if isinstance(current, list):
        return permutate_sequence(current)
    if _is_nested_record(current) and _pointee_id(current) not in active:
        return _expand(current, active)[1:]
    return []


def _copy_structure(value: Any, active: Set[int]) -> Any:
    """
    Copy the parts the expander walks: records, Refs to records and lists.

    List elements and opaque field values are kept by reference, so
    objects compared by identity still match the base.
    """
    if isinstance(value, list):
        return list(value)
    if not _is_nested_record(value) or _pointee_id(value) in active:
        return value
    if isinstance(value, Ref):
        return Ref(_copy_structure(value.value, active))

    clone = copy.copy(value)
    active = active | {id(value)}
    for f in dataclasses.fields(value):
        current = getattr(value, f.name, _MISSING)
        if current is _MISSING:
            continue
        # object.__setattr__ also works on frozen dataclasses.
        object.__setattr__(clone, f.name, _copy_structure(current, active))
    return clone


def _with_field(base: Any, name: str, replacement: Any, active: Set[int]) -> Any:
    """Copy `base` with one field overwritten."""
    clone = _copy_structure(base, active - {id(base)})
    object.__setattr__(clone, name, replacement)
    return clone


def variable_fields(value: Any) -> List[str]:
    """Names of the fields `expand_record` would vary, in declaration order."""
    if isinstance(value, Ref):
        value = value.value
    if not _is_record(value):
        return []

    names = []
    for f in dataclasses.fields(value):
        current = getattr(value, f.name, _MISSING)
        if isinstance(current, list) and len(current) > 0:
            names.append(f.name)
        elif _is_nested_record(current):
            names.append(f.name)
    return names


def expand_record(value: Any) -> List[Any]:
    """
    Expand a record into itself plus all its single-field reorderings.

    Args:
        value: A dataclass instance, a Ref to one, or anything else

    Returns:
        List whose first element is always `value` itself. For a Ref,
        every other element is a new Ref to an independent copy.
        Any input that is not a record (or a Ref to one) gives [value].

    Generated records are new objects, and so are their lists and nested
    records. List elements and opaque field values are shared with the
    base. A record that refers back to one of its enclosing records is
    not expanded again; the back reference is kept as is.
    """
    return _expand(value, set())


def _expand(value: Any, active: Set[int]) -> List[Any]:
    if isinstance(value, Ref):
        if not _is_record(value.value):
            return [value]
        expanded = _expand(value.value, active)
        return [value] + [Ref(record) for record in expanded[1:]]

    if not _is_record(value):
        return [value]

    active = active | {id(value)}
    result = [value]
    for f in dataclasses.fields(value):
        current = getattr(value, f.name, _MISSING)
        if current is _MISSING:
            continue
        for variant in _field_variants(current, active):
            result.append(_with_field(value, f.name, variant, active))
    return result


def generate_slice_permutations_for_tests(value: Any) -> List[Any]:
    """
    Generate copies of a fixture with every list field reordered.

    Intended for "matches any of" checks, e.g. with AnyOf, when the code
    under test may emit list fields in any order.
    """
    return list(expand_record(value))
