"""Rule variants and the Validation wrapper.

A rule describes a condition some data must satisfy. The set of variants is
closed: the evaluator in :mod:`deepvalid.engine` dispatches on exactly the
classes defined here. Raw Python values are coerced into rules so schemas can
be written with plain literals, compiled patterns and dicts:

    {"name": re.compile(r"^[A-Z]"), "age": integer(1..100), "nickname": None}

A dict is always a structure, never a literal to compare against.
"""

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .errors import MissingRuleError


def values_equal(left: Any, right: Any) -> bool:
    """Value equality that keeps booleans and numbers apart."""
    if isinstance(left, bool) != isinstance(right, bool):
        return False
    try:
        return bool(left == right)
    except (TypeError, ValueError):
        return False


class Rule:
    """Base class for rule variants."""

    kind = "rule"


@dataclass(frozen=True)
class Literal(Rule):
    """Matches data equal to ``value``."""

    value: Any

    kind = "literal"


@dataclass(frozen=True)
class Pattern(Rule):
    """Matches text the regular expression finds a match in.

    Anchor the pattern (``^...$``) to require the whole text to match.
    """

    regex: re.Pattern

    kind = "pattern"

    def __post_init__(self):
        if isinstance(self.regex, str):
            object.__setattr__(self, "regex", re.compile(self.regex))


@dataclass(frozen=True, eq=False)
class Structure(Rule):
    """Matches mappings whose keys satisfy the per-key member rules."""

    members: Mapping[Any, Any]

    kind = "structure"

    def __post_init__(self):
        object.__setattr__(
            self, "members", {key: as_member(value) for key, value in self.members.items()}
        )


@dataclass(frozen=True)
class Predicate(Rule):
    """Matches data for which ``fn`` returns a truthy value."""

    fn: Callable[[Any], Any]
    label: str | None = field(default=None, compare=False)

    kind = "predicate"


@dataclass(frozen=True)
class Reference(Rule):
    """Matches data the rule registered under ``name`` matches.

    The name is resolved against ``registry`` only when evaluated, so the
    referenced rule may be defined later or refer back to this one.
    """

    name: str
    registry: Any = field(repr=False, compare=False)

    kind = "reference"


@dataclass(frozen=True)
class Deferred(Rule):
    """A rule computed from the top-level data at evaluation time."""

    resolver: Callable[[Any], Any]

    kind = "deferred"


@dataclass(frozen=True)
class Absent(Rule):
    """Matches when the enclosing mapping does not contain the key."""

    kind = "absent"


ABSENT = Absent()


class Validation:
    """A single rule plus options.

    Args:
        rule: A rule variant or raw value (pattern, mapping, literal).
        predicate: Callable taking the data and returning a truth value.
        optional: Inside a structure, a missing key passes.

    Patterns and mappings take precedence over ``predicate``; for any other
    rule value the predicate wins and the value is ignored.
    """

    def __init__(self, rule: Any = None, *, predicate: Callable[[Any], Any] | None = None,
                 optional: bool = False):
        if rule is None and predicate is None:
            raise MissingRuleError()

        self.rule = self._select_rule(rule, predicate)
        self.optional = optional

    @staticmethod
    def _select_rule(rule: Any, predicate: Callable[[Any], Any] | None) -> Rule:
        if rule is not None:
            coerced = as_rule(rule)
            if predicate is None or isinstance(coerced, (Pattern, Structure)):
                return coerced
        return Predicate(predicate)

    @property
    def options(self) -> dict[str, Any]:
        return {"optional": self.optional}

    def valid(self, data: Any) -> bool:
        """Check ``data`` against this validation."""
        from .engine import valid

        return valid(self, data)

    def __repr__(self) -> str:
        suffix = ", optional=True" if self.optional else ""
        return f"Validation({self.rule!r}{suffix})"


def as_rule(obj: Any) -> Rule:
    """Coerce a raw value into a rule variant."""
    if isinstance(obj, Rule):
        return obj
    if isinstance(obj, Validation):
        return obj.rule
    if obj is None:
        raise MissingRuleError()
    if isinstance(obj, re.Pattern):
        return Pattern(obj)
    if isinstance(obj, Mapping):
        return Structure(obj)
    return Literal(obj)


def as_member(obj: Any) -> Rule | Validation:
    """Coerce a structure member; ``None`` means the key must be absent."""
    if obj is None:
        return ABSENT
    if isinstance(obj, Validation):
        return obj
    return as_rule(obj)


def as_validation(obj: Any) -> Validation:
    """Return ``obj`` if it is a Validation, else wrap it with empty options."""
    if isinstance(obj, Validation):
        return obj
    return Validation(obj)
