"""Range checks used by the bounded scalar helpers.

A bound may be:

    None                          anything passes
    4                             value == 4
    range(1, 10), Between(1, 9)   membership
    {"min": 1, "max": 9}          named comparisons, all must hold

Named comparisons: before (<), after (>), min (>=), max (<=), less_than,
less_than_or_equal_to, greater_than, greater_than_or_equal_to.
"""

import logging
import operator
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict

from .rules import values_equal

logger = logging.getLogger(__name__)

_COMPARISONS = (
    ("before", operator.lt),
    ("after", operator.gt),
    ("min", operator.ge),
    ("max", operator.le),
    ("less_than", operator.lt),
    ("less_than_or_equal_to", operator.le),
    ("greater_than", operator.gt),
    ("greater_than_or_equal_to", operator.ge),
)


class RangeSpec(BaseModel):
    """Named comparisons a value must satisfy. Unset comparisons are skipped."""
    before: Any = None
    after: Any = None
    min: Any = None
    max: Any = None
    less_than: Any = None
    less_than_or_equal_to: Any = None
    greater_than: Any = None
    greater_than_or_equal_to: Any = None

    model_config = ConfigDict(extra="ignore", frozen=True)

    def contains(self, value: Any) -> bool:
        for name, compare in _COMPARISONS:
            bound = getattr(self, name)
            if bound is None:
                continue
            try:
                if not compare(value, bound):
                    return False
            except TypeError:
                logger.debug(f"Cannot compare {value!r} with {name}={bound!r}")
                return False
        return True


@dataclass(frozen=True)
class Between:
    """Inclusive range ``lower <= value <= upper``."""
    lower: Any
    upper: Any

    def __contains__(self, value: Any) -> bool:
        try:
            return self.lower <= value <= self.upper
        except TypeError:
            return False


def normalize_bound(bound: Any) -> Any:
    """Parse mapping bounds once so repeated checks skip model validation."""
    if isinstance(bound, Mapping):
        return RangeSpec.model_validate(dict(bound))
    return bound


def in_range(value: Any, bound: Any) -> bool:
    """Determine whether ``value`` satisfies ``bound``.

    Args:
        value: A number, date, length or other comparable value
        bound: None, a scalar, a container, a mapping of named comparisons
            or a RangeSpec

    Returns:
        True if every check the bound describes holds
    """
    if bound is None:
        return True

    bound = normalize_bound(bound)
    if isinstance(bound, RangeSpec):
        return bound.contains(value)

    if isinstance(bound, (str, bytes)) or not hasattr(bound, "__contains__"):
        return values_equal(value, bound)

    try:
        return value in bound
    except TypeError:
        return False
