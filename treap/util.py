from __future__ import annotations
import numbers
import warnings
from typing import Any

class InvalidArgument(ValueError):
    """Reports a key or priority that cannot be placed in a treap"""
    pass

def check_key(key: Any):
    if key is None:
        raise InvalidArgument("Key cannot be None")
    # NaN compares false against everything so it would break the ordering
    try:
        unordered = bool(key != key)
    except (TypeError, ValueError) as e:
        raise InvalidArgument(f"Key of type {key.__class__.__name__} cannot be compared as a single value") from e
    if unordered:
        raise InvalidArgument(f"Key {key!r} is not equal to itself and cannot be ordered")

def check_priority(priority: Any, max_priority: int) -> int:
    """Validates an explicit priority and returns it as a python int. Priorities outside the generated range
    are allowed but will always sit above (or below) every randomly assigned priority, so we warn about them."""
    if isinstance(priority, bool) or not isinstance(priority, numbers.Integral):
        raise InvalidArgument(f"Priority must be an integer, got {priority.__class__.__name__}")
    priority = int(priority)
    if not 0 <= priority < max_priority:
        warnings.warn(f"Priority {priority} is outside of the generated range [0, {max_priority})")
    return priority
