"""Class-level schema definitions.

Subclassing Schema gives the class its own Registry. Rules are declared in
a ``define_rules`` classmethod, which runs once when the subclass is created:

    class People(Schema):

        @classmethod
        def define_rules(cls):
            cls.define("person", {
                "name": string(Between(1, 100)),
                "reviews": sequence(cls.structure("review")),
            })
            # referenced above, defined afterwards
            cls.define("review", {"author": string(Between(1, 100))})

    People["person"].valid(data)
    People.valid("person", data)
"""

from typing import Any

from .registry import Registry
from .rules import Reference, Validation


class SchemaMeta(type):
    """Lets ``SchemaClass[name]`` and ``name in SchemaClass`` read the registry."""

    def __getitem__(cls, name: str) -> Validation:
        return cls.registry.lookup(name)

    def __contains__(cls, name: object) -> bool:
        return name in cls.registry


class Schema(metaclass=SchemaMeta):
    """Base class for groups of named validations."""

    registry: Registry = Registry("Schema")

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.registry = Registry(cls.__qualname__)
        if "define_rules" in cls.__dict__:
            cls.define_rules()

    @classmethod
    def define(cls, name: str, rule: Any) -> Validation:
        return cls.registry.define(name, rule)

    @classmethod
    def lookup(cls, name: str) -> Validation:
        return cls.registry.lookup(name)

    @classmethod
    def structure(cls, name: str) -> Validation:
        return cls.registry.structure(name)

    @classmethod
    def reference(cls, name: str) -> Reference:
        return cls.registry.reference(name)

    @classmethod
    def valid(cls, name: str, data: Any) -> bool:
        return cls.registry.valid(name, data)

    @classmethod
    def names(cls) -> list[str]:
        return cls.registry.names()
