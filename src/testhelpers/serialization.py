"""
Rendering helpers for fixtures (records, Refs, lists, scalars).

Converts fixtures to plain dicts and YAML so assertion failures can show
which candidates were tried. Field order is kept as declared.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Dict, FrozenSet, Iterable, List

import yaml

from testhelpers.expander import Ref


_SCALARS = (str, int, float, bool, type(None))


def record_to_dict(record: Any, _active: FrozenSet[int] = frozenset()) -> Dict[str, Any]:
    active = _active | {id(record)}
    return {
        f.name: fixture_to_dict(getattr(record, f.name, None), active)
        for f in dataclasses.fields(record)
    }


def ref_to_dict(ref: Ref, _active: FrozenSet[int] = frozenset()) -> Dict[str, Any]:
    return {"ref": fixture_to_dict(ref.value, _active | {id(ref)})}


def fixture_to_dict(value: Any, _active: FrozenSet[int] = frozenset()) -> Any:
    # Back references to an enclosing container render as a marker.
    if id(value) in _active:
        return f"<cycle: {type(value).__name__}>"
    if isinstance(value, Ref):
        return ref_to_dict(value, _active)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return record_to_dict(value, _active)
    if isinstance(value, (list, tuple)):
        active = _active | {id(value)}
        return [fixture_to_dict(item, active) for item in value]
    if isinstance(value, dict):
        active = _active | {id(value)}
        return {str(k): fixture_to_dict(v, active) for k, v in value.items()}
    if isinstance(value, _SCALARS):
        return value
    return repr(value)


def fixtures_to_yaml(values: Iterable[Any]) -> str:
    converted: List[Any] = [fixture_to_dict(v) for v in values]
    return yaml.safe_dump(converted, sort_keys=False)
