"""Pure normalization of parsed JSON trees for snapshot comparison.

Two kinds of run-to-run noise are removed:

1. **Dynamic attributes**: values under listed keys are replaced with
   DYNAMIC_TOKEN, whatever their type, so ids and timestamps never cause a
   mismatch. The key itself stays, so a missing key is still a difference.
2. **Ignore-order fields**: lists found under listed keys are sorted by the
   canonical JSON of their normalized elements.

Lists only become order-insensitive through the key they sit under. The root
value has no key and is never sorted, and neither is a list nested directly in
another list: only a mapping gives its values an enclosing key. Sorting uses
a number-canonical form so that `1` and `1.0` sort to the same position.

All functions are pure and return new containers.
"""

from __future__ import annotations

import json
from typing import AbstractSet, Any, Optional


DYNAMIC_TOKEN = "===DYNAMIC==="


def normalize(
    value: Any,
    dynamic_attributes: AbstractSet[str] = frozenset(),
    ignore_order: AbstractSet[str] = frozenset(),
) -> Any:
    """Return the canonical comparison form of a parsed JSON value.

    Args:
        value: Parsed JSON (dict, list, str, int, float, bool, None)
        dynamic_attributes: Keys whose values are always considered equal
        ignore_order: Keys whose list values are compared as multisets

    Returns:
        A new tree; the input is not modified

    Examples:
        >>> normalize({"id": 7, "tags": ["b", "a"]}, {"id"}, {"tags"})
        {'id': '===DYNAMIC===', 'tags': ['a', 'b']}
    """
    return _normalize(value, None, dynamic_attributes, ignore_order)


def _normalize(
    value: Any,
    key: Optional[str],
    dynamic_attributes: AbstractSet[str],
    ignore_order: AbstractSet[str],
) -> Any:
    if isinstance(value, dict):
        result = {}
        for child_key, child in value.items():
            if child_key in dynamic_attributes:
                result[child_key] = DYNAMIC_TOKEN
            else:
                result[child_key] = _normalize(child, child_key, dynamic_attributes, ignore_order)
        return result
    if isinstance(value, (list, tuple)):
        items = [_normalize(item, None, dynamic_attributes, ignore_order) for item in value]
        if key is not None and key in ignore_order:
            items.sort(key=_sort_key)
        return items
    return value


def canonical_json(value: Any) -> str:
    """Return canonical JSON with stable key ordering."""
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=True)


def _sort_key(value: Any) -> str:
    return canonical_json(_canonical_numbers(value))


def _canonical_numbers(value: Any) -> Any:
    # integral floats sort as ints; tree_equal treats them as equal
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, dict):
        return {k: _canonical_numbers(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_canonical_numbers(item) for item in value]
    return value


def tree_equal(left: Any, right: Any) -> bool:
    """Structural equality for normalized trees.

    Mapping key order is irrelevant. Booleans never equal numbers, which plain
    ``==`` would allow (``True == 1``).
    """
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left is right
    if isinstance(left, dict):
        if not isinstance(right, dict) or left.keys() != right.keys():
            return False
        return all(tree_equal(left[key], right[key]) for key in left)
    if isinstance(left, list):
        if not isinstance(right, list) or len(left) != len(right):
            return False
        return all(tree_equal(a, b) for a, b in zip(left, right))
    if isinstance(left, (int, float)):
        return isinstance(right, (int, float)) and left == right
    return type(left) is type(right) and left == right
