"""Exceptions raised while building or resolving deepvalid rules.

Evaluation itself never raises for malformed data; these errors signal a
broken validator rather than invalid input.
"""


class DeepValidError(Exception):
    """Base class for deepvalid errors."""


class MissingRuleError(DeepValidError, ValueError):
    """Raised when a Validation is built without a rule or predicate."""

    def __init__(self, message: str = "No validation rule specified"):
        super().__init__(message)


class UnknownNameError(DeepValidError, LookupError):
    """Raised when a registry lookup names a rule that was never defined."""

    def __init__(self, name: str, registry_name: str | None = None):
        self.name = name
        self.registry_name = registry_name
        location = f" in registry '{registry_name}'" if registry_name else ""
        super().__init__(f"Unknown rule '{name}'{location}")


class SchemaLoadError(DeepValidError):
    """Raised when a schema target cannot be imported or interpreted."""

    def __init__(self, target: str, reason: str):
        self.target = target
        self.reason = reason
        super().__init__(f"Cannot load schema '{target}': {reason}")
