"""Error nodes and exception types."""

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional, Sequence, Tuple

Errors = Tuple["ErrorNode", ...]


class SchemaCheckError(Exception):
    """Base exception for schemacheck."""

    pass


class SchemaDefinitionError(SchemaCheckError):
    """Raised when a schema is malformed or a predicate misbehaves."""

    pass


class PathError(SchemaCheckError):
    """Raised on out-of-bounds path navigation."""

    pass


class DocumentLoadError(SchemaCheckError):
    """Raised when a document or schema reference cannot be loaded."""

    pass


class SchemaValidationFailed(SchemaCheckError):
    """Raised by assert_schema when a value does not match its schema."""

    def __init__(self, errors: Errors, text: str, description: Optional[str] = None):
        self.errors = errors
        self.text = text
        self.description = description
        header = f"{description} does not match its schema" if description else "Schema validation failed"
        super().__init__(f"{header}:\n{text}")


@dataclass(frozen=True)
class ErrorNode:
    """A validation error with path information and nested causes."""

    message: str
    path: Tuple[Any, ...] = ()
    children: Errors = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", tuple(self.path))
        object.__setattr__(self, "children", tuple(self.children))
        if not self.message and not self.children:
            raise ValueError("An error node needs a message or at least one child")

    def with_children(self, *children: "ErrorNode") -> "ErrorNode":
        """Return a copy of this node with ``children`` appended."""
        return ErrorNode(self.message, self.path, self.children + tuple(children))

    def walk(self, depth: int = 0) -> Iterator[Tuple[int, "ErrorNode"]]:
        """Depth-first iteration yielding ``(depth, node)`` pairs."""
        yield depth, self
        for child in self.children:
            yield from child.walk(depth + 1)

    def __str__(self) -> str:
        path_str = " -> ".join(str(key) for key in self.path) if self.path else "root"
        return f"{path_str}: {self.message}"


def error(message: str, path: Any, children: Sequence[ErrorNode] = ()) -> Errors:
    """Build a single-node error result.

    ``path`` may be a :class:`~schemacheck.path.Path` or any key sequence; it
    is snapshotted so later navigation does not change the error.
    """
    keys = path.snapshot() if hasattr(path, "snapshot") else tuple(path)
    return (ErrorNode(message, keys, tuple(children)),)


def merge_errors(*results: Optional[Sequence[ErrorNode]]) -> Optional[Errors]:
    """Concatenate error results in order, ignoring successes."""
    merged: Tuple[ErrorNode, ...] = ()
    for result in results:
        if result:
            merged += tuple(result)
    return merged or None
