"""Named rule registry.

A registry is filled during schema definition and only read afterwards.
Entries may reference each other in any order, including themselves, since
names are resolved when data is checked, never when a reference is built.
"""

import logging
from collections.abc import Iterator
from typing import Any

from .errors import UnknownNameError
from .helpers import structure_ref
from .rules import Reference, Validation, as_validation

logger = logging.getLogger(__name__)


class Registry:
    """A named collection of Validations scoped to one schema."""

    def __init__(self, name: str | None = None):
        self.name = name
        self._definitions: dict[str, Validation] = {}

    def define(self, name: str, rule: Any) -> Validation:
        """Add or replace a definition.

        Args:
            name: Key used to retrieve the Validation
            rule: A Validation, rule variant or raw rule value

        Returns:
            The stored Validation
        """
        validation = as_validation(rule)
        if name in self._definitions:
            logger.debug(f"Redefining rule '{name}' in {self!r}")
        self._definitions[name] = validation
        return validation

    def lookup(self, name: str) -> Validation:
        """Retrieve a definition, raising UnknownNameError if undefined."""
        try:
            return self._definitions[name]
        except KeyError:
            logger.debug(f"Lookup of undefined rule '{name}' in {self!r}")
            raise UnknownNameError(name, self.name) from None

    __getitem__ = lookup

    def get(self, name: str, default: Validation | None = None) -> Validation | None:
        return self._definitions.get(name, default)

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def __iter__(self) -> Iterator[str]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def names(self) -> list[str]:
        return list(self._definitions)

    def reference(self, name: str) -> Reference:
        """A rule resolving ``name`` in this registry when evaluated."""
        return Reference(name, self)

    def structure(self, name: str) -> Validation:
        """A predicate Validation checking data against ``name``."""
        return structure_ref(self, name)

    def valid(self, name: str, data: Any) -> bool:
        """Check ``data`` against the rule defined under ``name``."""
        return self.lookup(name).valid(data)

    def __repr__(self) -> str:
        label = f"'{self.name}'" if self.name else "anonymous"
        return f"<Registry {label} with {len(self)} rules>"
