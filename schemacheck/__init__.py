"""Composable schemas for validating nested data."""

from .combinators import (
    AllOf,
    Any,
    Boolean,
    Case,
    Collection,
    Function,
    Integer,
    Map,
    Nil,
    NonNegativeNumber,
    Nothing,
    Number,
    NumberFrom,
    OneOf,
    Optional,
    Pattern,
    PositiveNumber,
    Record,
    String,
    Table,
    Test,
    Tuple,
    UserData,
)
from .core import (
    Literal,
    Predicate,
    Schema,
    as_schema,
    assert_schema,
    check_schema,
    evaluate,
    type_name,
)
from .errors import (
    DocumentLoadError,
    ErrorNode,
    PathError,
    SchemaCheckError,
    SchemaDefinitionError,
    SchemaValidationFailed,
    error,
    merge_errors,
)
from .formatter import format_output
from .path import Path, RelativePath

__version__ = "0.1.0"

__all__ = [
    "AllOf",
    "Any",
    "Boolean",
    "Case",
    "Collection",
    "Function",
    "Integer",
    "Map",
    "Nil",
    "NonNegativeNumber",
    "Nothing",
    "Number",
    "NumberFrom",
    "OneOf",
    "Optional",
    "Pattern",
    "PositiveNumber",
    "Record",
    "String",
    "Table",
    "Test",
    "Tuple",
    "UserData",
    "Literal",
    "Predicate",
    "Schema",
    "as_schema",
    "assert_schema",
    "check_schema",
    "evaluate",
    "type_name",
    "DocumentLoadError",
    "ErrorNode",
    "PathError",
    "SchemaCheckError",
    "SchemaDefinitionError",
    "SchemaValidationFailed",
    "error",
    "merge_errors",
    "format_output",
    "Path",
    "RelativePath",
]
