"""Shallow comparison of current and desired settings records."""

import json
from collections.abc import Mapping
from typing import Any

from settings_sync.types.sync import DiffResult

_MISSING = object()


def _canonical(value: Any) -> str:
    # key order is irrelevant, True and 1 stay distinct
    return json.dumps(value, sort_keys=True, separators=(",", ":"), default=str)


def values_equal(current: Any, desired: Any) -> bool:
    """Compare two JSON-like values structurally."""
    if current is _MISSING:
        return False
    return _canonical(current) == _canonical(desired)


def compute_diff(current: Mapping[str, Any], desired: Mapping[str, Any]) -> DiffResult:
    """
    Compute the top-level keys of ``desired`` that ``current`` does not satisfy.

    Keys present only in ``current`` are ignored. A key missing from
    ``current`` always counts as different.

    Args:
        current: The live record
        desired: The wanted values

    Returns:
        DiffResult holding exactly the differing keys and their desired values
    """
    changes = {
        key: value
        for key, value in desired.items()
        if not values_equal(current.get(key, _MISSING), value)
    }
    return DiffResult(changes=changes)
