"""Helpers that build common Validations.

Every helper returns a Validation wrapping a predicate, so the results nest
anywhere a rule is accepted:

    {
        "id": token(32),
        "name": string(Between(1, 128)),
        "tags": sequence(any_of("red", "green", "blue")),
        "scores": mapping({token(): integer({"min": 0})}),
    }
"""

import datetime as dt
import json
import logging
import re
from collections.abc import Callable, Mapping
from typing import Any

from .errors import MissingRuleError
from .ranges import in_range, normalize_bound
from .rules import Predicate, Rule, Validation, as_validation, values_equal

logger = logging.getLogger(__name__)

_TOKEN = re.compile(r"[0-9A-Za-z_]*")


def _predicate(fn: Callable[[Any], bool], label: str) -> Validation:
    return Validation(Predicate(fn, label=label))


def string(size: Any = None) -> Validation:
    """Validate text, optionally bounding its length.

    Args:
        size: Length bound accepted by ``in_range``
    """
    bound = normalize_bound(size)

    def check(data: Any) -> bool:
        return isinstance(data, str) and in_range(len(data), bound)

    return _predicate(check, "string")


def token(size: Any = None) -> Validation:
    """Validate tokens: text made of letters, digits and underscores only."""
    bound = normalize_bound(size)

    def check(data: Any) -> bool:
        return (
            isinstance(data, str)
            and _TOKEN.fullmatch(data) is not None
            and in_range(len(data), bound)
        )

    return _predicate(check, "token")


def integer(limit: Any = None) -> Validation:
    """Validate integers (booleans excluded) with an optional limit."""
    bound = normalize_bound(limit)

    def check(data: Any) -> bool:
        return isinstance(data, int) and not isinstance(data, bool) and in_range(data, bound)

    return _predicate(check, "integer")


def float_(limit: Any = None) -> Validation:
    """Validate floats with an optional limit."""
    bound = normalize_bound(limit)

    def check(data: Any) -> bool:
        return isinstance(data, float) and in_range(data, bound)

    return _predicate(check, "float")


def date(limit: Any = None) -> Validation:
    """Validate calendar dates. Datetimes are not dates here."""
    bound = normalize_bound(limit)

    def check(data: Any) -> bool:
        return (
            isinstance(data, dt.date)
            and not isinstance(data, dt.datetime)
            and in_range(data, bound)
        )

    return _predicate(check, "date")


def time(limit: Any = None) -> Validation:
    """Validate times of day."""
    bound = normalize_bound(limit)

    def check(data: Any) -> bool:
        return isinstance(data, dt.time) and in_range(data, bound)

    return _predicate(check, "time")


def datetime(limit: Any = None) -> Validation:
    """Validate datetimes. Naive and aware values do not compare."""
    bound = normalize_bound(limit)

    def check(data: Any) -> bool:
        return isinstance(data, dt.datetime) and in_range(data, bound)

    return _predicate(check, "datetime")


def instance_of(kind: type | tuple[type, ...]) -> Validation:
    """Validate by class."""
    name = getattr(kind, "__name__", repr(kind))
    return _predicate(lambda data: isinstance(data, kind), f"instance_of({name})")


def json_text(size: Any = None) -> Validation:
    """Validate that text parses as JSON, optionally bounding its length."""
    bound = normalize_bound(size)

    def check(data: Any) -> bool:
        if not isinstance(data, (str, bytes, bytearray)):
            return False
        try:
            json.loads(data)
        except ValueError as e:
            logger.debug(f"Rejecting malformed JSON text: {e}")
            return False
        return in_range(len(data), bound)

    return _predicate(check, "json")


def any_of(*options: Any) -> Validation:
    """Validate data meeting at least one option.

    When every option is a Validation (or rule) they are tried in turn.
    Otherwise the options are literal values and the data must equal one.
    """
    if all(isinstance(option, (Validation, Rule)) for option in options):
        validations = [as_validation(option) for option in options]
        return _predicate(lambda data: any(v.valid(data) for v in validations), "any_of")

    return _predicate(
        lambda data: any(values_equal(data, option) for option in options), "one_of"
    )


def all_of(*options: Any) -> Validation:
    """Validate data meeting every option."""
    validations = [as_validation(option) for option in options]
    return _predicate(lambda data: all(v.valid(data) for v in validations), "all_of")


def boolean() -> Validation:
    """Validate True or False."""
    return any_of(True, False)


def mapping(example: Mapping[Any, Any] | None = None) -> Validation:
    """Validate every key and value of a mapping.

    The example holds one representative pair; any further pairs are
    ignored. To require 32 character token keys with 1 to 128 character
    string values:

        mapping({token(32): string(Between(1, 128))})

    Args:
        example: ``{key_rule: value_rule}``, or None to accept any mapping
    """
    if example is None:
        return _predicate(lambda data: isinstance(data, Mapping), "mapping")
    if not example:
        raise MissingRuleError("mapping() example needs a key/value pair")

    key_rule, value_rule = next(iter(example.items()))
    key_validation = as_validation(key_rule)
    value_validation = as_validation(value_rule)

    def check(data: Any) -> bool:
        return isinstance(data, Mapping) and all(
            key_validation.valid(key) and value_validation.valid(value)
            for key, value in data.items()
        )

    return _predicate(check, "mapping")


def sequence(rule: Any = None) -> Validation:
    """Validate a list or tuple, optionally checking every element."""
    if rule is None:
        return _predicate(lambda data: isinstance(data, (list, tuple)), "sequence")

    validation = as_validation(rule)

    def check(data: Any) -> bool:
        return isinstance(data, (list, tuple)) and all(validation.valid(item) for item in data)

    return _predicate(check, "sequence")


def structure_ref(registry: Any, name: str) -> Validation:
    """Validate against the rule ``registry`` holds under ``name``.

    The lookup happens on every check, so ``name`` may be defined after
    this call, or be the rule this one is nested in.
    """
    return _predicate(lambda data: registry.lookup(name).valid(data), f"structure({name})")
