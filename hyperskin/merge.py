"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Deep merge of a partial configuration over a complete one.
"""
from __future__ import annotations

import copy
from typing import Any, Mapping


def is_plain_object(value: Any) -> bool:
    return isinstance(value, Mapping)


def deep_merge(base: Mapping[str, Any], overlay: Mapping[str, Any]) -> dict[str, Any]:
    """Return a new dict with `overlay` merged over `base`.

    Keys present in both where both values are plain objects are merged
    recursively. Any other overlay value (scalar, list, None, or a type
    mismatch) replaces the base value outright; lists are never concatenated.
    Keys absent from `overlay` keep the base value. Neither input is mutated
    and the result shares no mutable structure with them.
    """
    result = {key: copy.deepcopy(value) for key, value in base.items()}
    for key, overlay_val in overlay.items():
        base_val = result.get(key)
        if is_plain_object(overlay_val) and is_plain_object(base_val):
            result[key] = deep_merge(base_val, overlay_val)
        else:
            result[key] = copy.deepcopy(overlay_val)
    return result
