"""Schema descriptors and the evaluation entry points."""

import logging
from collections.abc import Mapping
from typing import Any, Callable, Optional

from .errors import (
    ErrorNode,
    Errors,
    SchemaDefinitionError,
    SchemaValidationFailed,
    error,
)
from .path import Path

logger = logging.getLogger(__name__)

CheckFn = Callable[[Any, Path], Optional[Errors]]


def type_name(value: Any) -> str:
    """Return the kind of ``value`` as used in error messages."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (Mapping, list, tuple)):
        return "table"
    if callable(value):
        return "function"
    return "userdata"


class Schema:
    """Base class for schema descriptors."""

    __slots__ = ()


class Literal(Schema):
    """Matches values equal to ``value`` and of the same kind."""

    __slots__ = ("value",)

    def __init__(self, value: Any):
        object.__setattr__(self, "value", value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Schemas are immutable")

    def __repr__(self) -> str:
        return repr(self.value)


class Predicate(Schema):
    """Wraps a check function taking ``(value, path)``.

    The function returns None on success or a non-empty sequence of
    :class:`ErrorNode` on failure.
    """

    __slots__ = ("fn", "name")

    def __init__(self, fn: CheckFn, name: Optional[str] = None):
        object.__setattr__(self, "fn", fn)
        object.__setattr__(self, "name", name or getattr(fn, "__name__", "Predicate"))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Schemas are immutable")

    def __call__(self, value: Any, path: Path) -> Optional[Errors]:
        return evaluate(self, value, path)

    def __repr__(self) -> str:
        return self.name


def as_schema(descriptor: Any) -> Schema:
    """Normalise a raw descriptor into a :class:`Schema`."""
    if isinstance(descriptor, Schema):
        return descriptor
    if callable(descriptor):
        return Predicate(descriptor)
    return Literal(descriptor)


def _normalise(result: Any, schema: Predicate) -> Optional[Errors]:
    if result is None:
        return None
    if isinstance(result, ErrorNode):
        return (result,)
    try:
        errors = tuple(result)
    except TypeError:
        raise SchemaDefinitionError(
            f"Schema {schema!r} returned {type(result).__name__}, expected None or error nodes"
        )
    if not errors:
        return None
    if not all(isinstance(node, ErrorNode) for node in errors):
        raise SchemaDefinitionError(f"Schema {schema!r} returned something other than error nodes")
    return errors


def _literal_equal(value: Any, literal: Any) -> bool:
    """Deep equality that also requires matching kinds at every level."""
    if type_name(value) != type_name(literal):
        return False
    if isinstance(literal, Mapping):
        if not isinstance(value, Mapping) or value.keys() != literal.keys():
            return False
        return all(_literal_equal(value[key], literal[key]) for key in literal)
    if isinstance(literal, (list, tuple)):
        if not isinstance(value, (list, tuple)) or len(value) != len(literal):
            return False
        return all(_literal_equal(item, expected) for item, expected in zip(value, literal))
    return value == literal


def evaluate(schema: Any, value: Any, path: Path) -> Optional[Errors]:
    """Check ``value`` at ``path`` against ``schema``."""
    schema = as_schema(schema)
    if isinstance(schema, Predicate):
        return _normalise(schema.fn(value, path), schema)
    if isinstance(schema, Literal):
        if _literal_equal(value, schema.value):
            return None
        return error(f"Invalid value: '{path}' should be {schema.value!r}", path)
    raise SchemaDefinitionError(f"Unknown schema variant: {type(schema).__name__}")


def check_schema(value: Any, schema: Any) -> Optional[Errors]:
    """Validate ``value`` against ``schema``.

    Returns None when the value is valid, otherwise a tuple of
    :class:`ErrorNode` trees. Evaluation recurses a few frames per level of
    nesting, so with the default interpreter recursion limit data nested more
    than roughly 300 levels deep raises ``RecursionError``.
    """
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Checking {type_name(value)} value against schema {as_schema(schema)!r}")
    errors = evaluate(schema, value, Path(value))
    if errors:
        logger.debug(f"Validation produced {len(errors)} top-level error(s)")
    return errors


def assert_schema(value: Any, schema: Any, description: Optional[str] = None) -> None:
    """Raise :class:`SchemaValidationFailed` unless ``value`` matches ``schema``."""
    from .formatter import format_output

    errors = check_schema(value, schema)
    if errors:
        raise SchemaValidationFailed(errors, format_output(errors), description)
