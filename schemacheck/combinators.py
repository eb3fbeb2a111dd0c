"""Built-in schema constructors.

Every value exported here is a :class:`~schemacheck.core.Predicate`. They hold
no mutable state and can be shared between validation calls and threads.
"""

import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any as AnyType
from typing import Callable, Optional as OptionalType, Tuple as TupleType

from .core import Predicate, as_schema, evaluate, type_name
from .errors import SchemaDefinitionError, error, merge_errors
from .path import Path, RelativePath


def _type_schema(kind: str, name: str) -> Predicate:
    def check(value: AnyType, path: Path):
        actual = type_name(value)
        if actual != kind:
            return error(f"Type mismatch: '{path}' should be {kind}, is {actual}", path)
        return None

    return Predicate(check, name)


# Primitive schemas


def _any(value: AnyType, path: Path):
    return None


def _nothing(value: AnyType, path: Path):
    return error(f"Failure: '{path}' will always fail", path)


Any = Predicate(_any, "Any")
Nothing = Predicate(_nothing, "Nothing")
Nil = _type_schema("nil", "Nil")
Boolean = _type_schema("boolean", "Boolean")
Number = _type_schema("number", "Number")
String = _type_schema("string", "String")
Function = _type_schema("function", "Function")
Table = _type_schema("table", "Table")
UserData = _type_schema("userdata", "UserData")


def _number_check(name: str, predicate: Callable[[AnyType], bool], requirement: str) -> Predicate:
    """Number type check followed by ``predicate``, reported only if the type matched."""

    def check(value: AnyType, path: Path):
        errors = evaluate(Number, value, path)
        if errors:
            return errors
        if not predicate(value):
            return error(f"Invalid value: '{path}' {requirement}", path)
        return None

    return Predicate(check, name)


def _is_integral(value) -> bool:
    return isinstance(value, int) or value.is_integer()


Integer = _number_check("Integer", _is_integral, "must be an integral number")
NonNegativeNumber = _number_check("NonNegativeNumber", lambda x: x >= 0, "must be >= 0")
PositiveNumber = _number_check("PositiveNumber", lambda x: x > 0, "must be > 0")


def NumberFrom(lower, upper) -> Predicate:
    """Numbers in the inclusive range ``[lower, upper]``."""
    if lower > upper:
        raise SchemaDefinitionError(f"NumberFrom: lower bound {lower} exceeds upper bound {upper}")
    return _number_check(
        f"NumberFrom({lower}, {upper})",
        lambda x: lower <= x <= upper,
        f"must be between {lower} and {upper}",
    )


def Pattern(pattern: str) -> Predicate:
    """Strings containing a match for the regular expression ``pattern``."""
    compiled = re.compile(pattern)

    def check(value: AnyType, path: Path):
        errors = evaluate(String, value, path)
        if errors:
            return errors
        if not compiled.search(value):
            return error(f"Invalid value: '{path}' must match pattern {pattern}", path)
        return None

    return Predicate(check, f"Pattern({pattern!r})")


# Logical composition


def AllOf(*schemas) -> Predicate:
    """All schemas must match; errors from every failing schema are collected."""
    schemas = tuple(as_schema(s) for s in schemas)

    def check(value: AnyType, path: Path):
        return merge_errors(*(evaluate(s, value, path) for s in schemas))

    return Predicate(check, f"AllOf({', '.join(map(repr, schemas))})")


def OneOf(*schemas) -> Predicate:
    """The first matching schema wins. Failures are summarised in one error."""
    schemas = tuple(as_schema(s) for s in schemas)

    def check(value: AnyType, path: Path):
        for schema in schemas:
            if not evaluate(schema, value, path):
                return None
        return error(f"No suitable alternative: no schema matches '{path}'", path)

    return Predicate(check, f"OneOf({', '.join(map(repr, schemas))})")


def Optional(schema) -> Predicate:
    return OneOf(schema, Nil)


# Structural combinators


def Record(fields, additional_values: bool = False) -> Predicate:
    """Mappings whose string keys are checked against ``fields``.

    Keys missing from the value are checked as None. Unless
    ``additional_values`` is set, keys absent from ``fields`` are reported,
    and non-string keys are reported as invalid keys instead.
    """
    if not isinstance(fields, Mapping):
        raise SchemaDefinitionError(f"Record fields must be a mapping, got {type(fields).__name__}")
    fields = MappingProxyType({key: as_schema(s) for key, s in fields.items()})

    def check(value: AnyType, path: Path):
        if not isinstance(value, Mapping):
            return error(f"Type mismatch: '{path}' should be a mapping, is {type(value).__name__}", path)

        results = []
        for key, schema in fields.items():
            with path.enter(key):
                results.append(evaluate(schema, value.get(key), path))

        if additional_values:
            return merge_errors(*results)

        for key in value:
            with path.enter(key):
                if not isinstance(key, str):
                    results.append(error(f"Invalid key: '{path}' must be of type string", path))
                elif key not in fields:
                    results.append(
                        error(f"Superfluous value: '{path}' does not appear in the record schema", path)
                    )
        return merge_errors(*results)

    return Predicate(check, f"Record({', '.join(fields)})")


def Tuple(*schemas) -> Predicate:
    """Lists or tuples of exactly ``len(schemas)`` elements, checked by position."""
    schemas = tuple(as_schema(s) for s in schemas)

    def check(value: AnyType, path: Path):
        if not isinstance(value, (list, tuple)):
            return error(f"Type mismatch: '{path}' should be a sequence, is {type(value).__name__}", path)
        if len(value) != len(schemas):
            return error(f"Invalid length: '{path}' should have exactly {len(schemas)} elements", path)

        results = []
        for index, (schema, item) in enumerate(zip(schemas, value)):
            with path.enter(index):
                results.append(evaluate(schema, item, path))
        return merge_errors(*results)

    return Predicate(check, f"Tuple({', '.join(map(repr, schemas))})")


def Map(key_schema, value_schema) -> Predicate:
    """Tables whose every key and value match the given schemas."""
    key_schema = as_schema(key_schema)
    value_schema = as_schema(value_schema)

    def check(value: AnyType, path: Path):
        if isinstance(value, Mapping):
            entries = value.items()
        elif isinstance(value, (list, tuple)):
            entries = enumerate(value)
        else:
            return error(f"Type mismatch: '{path}' should be a map, is {type_name(value)}", path)

        results = []
        for key, item in entries:
            with path.enter(key):
                key_errors = evaluate(key_schema, key, path)
                if key_errors:
                    results.append(error("Invalid map key", path, key_errors))
                results.append(evaluate(value_schema, item, path))
        return merge_errors(*results)

    return Predicate(check, f"Map({key_schema!r}, {value_schema!r})")


def Collection(value_schema) -> Predicate:
    return Map(Any, value_schema)


# Conditional combinator


def Case(relative_path, *pairs) -> Predicate:
    """Pick a schema based on a value elsewhere in the same document.

    ``relative_path`` is resolved against the current path; a plain key ``k``
    is shorthand for ``RelativePath("..", k)``, a sibling field. Each pair is
    a ``(condition, consequence)`` tuple. The condition is checked against the
    resolved value; the consequence of the first holding condition is checked
    against the current value.
    """
    if not isinstance(relative_path, RelativePath):
        relative_path = RelativePath("..", relative_path)

    normalised = []
    for index, pair in enumerate(pairs, 1):
        if not isinstance(pair, tuple) or len(pair) != 2:
            raise SchemaDefinitionError(f"Case: alternative {index} must be a (condition, consequence) tuple")
        normalised.append((as_schema(pair[0]), as_schema(pair[1])))
    cases: TupleType = tuple(normalised)

    def check(value: AnyType, path: Path):
        target_path = path.resolve(relative_path)
        target = target_path.target()

        for index, (condition, consequence) in enumerate(cases, 1):
            if evaluate(condition, target, target_path):
                continue
            errors = evaluate(consequence, value, path)
            if not errors:
                return None
            return error(
                f"Case failed: condition {index} of '{target_path}' holds but the consequence does not",
                path,
                errors,
            )
        return error(f"No suitable alternative: no condition on '{target_path}' holds", target_path)

    return Predicate(check, f"Case({relative_path!r})")


# Extension point


def Test(fn: Callable[[AnyType], bool], message: OptionalType[str] = None) -> Predicate:
    """Wrap a boolean function as a schema."""

    def check(value: AnyType, path: Path):
        if fn(value):
            return None
        suffix = f": {message}" if message else ""
        return error(f"Invalid value: '{path}'{suffix}", path)

    return Predicate(check, f"Test({getattr(fn, '__name__', 'fn')})")
