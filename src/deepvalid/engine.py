"""Recursive rule evaluation.

``valid`` is a total boolean function: a type mismatch anywhere in the data
makes the data invalid rather than raising. Only errors that indicate a
broken validator, such as a reference to an undefined rule, propagate.

The data handed to a top-level ``valid`` call is kept for the whole
recursion and is what every ``Deferred`` resolver receives, including
resolvers nested deep inside structures.
"""

import logging
from collections.abc import Mapping
from typing import Any

from .errors import DeepValidError
from .rules import (
    Absent,
    Deferred,
    Literal,
    Pattern,
    Predicate,
    Reference,
    Rule,
    Structure,
    Validation,
    as_member,
    as_validation,
    values_equal,
)

logger = logging.getLogger(__name__)


class _Missing:
    """Subject used for a key the enclosing mapping does not contain."""

    def __repr__(self) -> str:
        return "<missing>"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


def valid(rule: Any, data: Any) -> bool:
    """Check ``data`` against a Validation, a rule, or a raw rule value."""
    return _check(as_validation(rule), data, data)


def match_structure(members: Mapping[Any, Any], data: Any, root: Any = MISSING) -> bool:
    """Check every ``(key, member)`` pair of a structure against ``data``.

    Args:
        members: Key to rule mapping, as held by a Structure
        data: The mapping being checked
        root: Top-level data for Deferred members (defaults to ``data``)

    Returns:
        True if ``data`` is a mapping and every pair holds
    """
    if root is MISSING:
        root = data
    if not isinstance(data, Mapping):
        return False

    for key, member in members.items():
        member = _resolve(as_member(member), root)
        if member is None:
            return False

        present = key in data
        if isinstance(member, Validation) and member.optional and not present:
            continue

        subject = data[key] if present else MISSING
        if not _check(member, subject, root):
            return False

    return True


def _resolve(rule: Rule | Validation, root: Any) -> Rule | Validation | None:
    """Replace a Deferred rule by the rule its resolver computes."""
    if not isinstance(rule, Deferred):
        return rule
    try:
        resolved = as_member(rule.resolver(root))
    except (DeepValidError, RecursionError):
        raise
    except Exception as e:
        logger.debug(f"Deferred resolver {rule.resolver!r} failed: {e}")
        return None
    return _resolve(resolved, root)


def _check(rule: Rule | Validation, subject: Any, root: Any) -> bool:
    rule = _resolve(rule, root)
    if rule is None:
        return False

    if isinstance(rule, Validation):
        return _check(rule.rule, subject, root)

    if isinstance(rule, Reference):
        return _check(rule.registry.lookup(rule.name), subject, root)

    if isinstance(rule, Pattern):
        return isinstance(subject, str) and rule.regex.search(subject) is not None

    if isinstance(rule, Structure):
        return match_structure(rule.members, subject, root)

    if isinstance(rule, Predicate):
        return _call_predicate(rule, subject)

    if isinstance(rule, Absent):
        return subject is MISSING

    if isinstance(rule, Literal):
        return subject is not MISSING and values_equal(subject, rule.value)

    raise TypeError(f"Unsupported rule type: {type(rule).__name__}")


def _call_predicate(rule: Predicate, subject: Any) -> bool:
    value = None if subject is MISSING else subject
    try:
        return bool(rule.fn(value))
    except (DeepValidError, RecursionError):
        raise
    except Exception as e:
        logger.debug(f"Predicate {rule.label or rule.fn!r} raised {type(e).__name__}: {e}")
        return False
