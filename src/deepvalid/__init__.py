"""deepvalid - structural validation for nested data.

Rules are built from literals, patterns, mappings and predicates, combined
with helpers such as ``any_of`` and ``sequence``, and collected in named
registries whose entries may reference each other in any order.
"""

__version__ = "0.1.0"
__author__ = "deepvalid contributors"
__description__ = "Structural validation of nested data against declarative rules"

from deepvalid.engine import match_structure, valid
from deepvalid.errors import DeepValidError, MissingRuleError, SchemaLoadError, UnknownNameError
from deepvalid.helpers import (
    all_of,
    any_of,
    boolean,
    date,
    datetime,
    float_,
    instance_of,
    integer,
    json_text,
    mapping,
    sequence,
    string,
    structure_ref,
    time,
    token,
)
from deepvalid.ranges import Between, RangeSpec, in_range
from deepvalid.registry import Registry
from deepvalid.rules import (
    ABSENT,
    Absent,
    Deferred,
    Literal,
    Pattern,
    Predicate,
    Reference,
    Rule,
    Structure,
    Validation,
    as_validation,
)
from deepvalid.schema import Schema

__all__ = [
    "__version__",
    "__author__",
    "__description__",
    "ABSENT",
    "Absent",
    "Between",
    "DeepValidError",
    "Deferred",
    "Literal",
    "MissingRuleError",
    "Pattern",
    "Predicate",
    "RangeSpec",
    "Reference",
    "Registry",
    "Rule",
    "Schema",
    "SchemaLoadError",
    "Structure",
    "UnknownNameError",
    "Validation",
    "all_of",
    "any_of",
    "as_validation",
    "boolean",
    "date",
    "datetime",
    "float_",
    "in_range",
    "instance_of",
    "integer",
    "json_text",
    "mapping",
    "match_structure",
    "sequence",
    "string",
    "structure_ref",
    "time",
    "token",
    "valid",
]
