"""Navigation context over the object being checked."""

from collections.abc import Mapping, Sequence
from contextlib import contextmanager
from typing import Any, Iterator, List, Tuple

from .errors import PathError

PARENT = ".."


def _lookup(container: Any, key: Any) -> Any:
    """Return ``container[key]`` or None when there is no such entry."""
    if isinstance(container, Mapping):
        return container.get(key)
    if isinstance(container, Sequence) and not isinstance(container, (str, bytes)):
        if isinstance(key, int) and not isinstance(key, bool) and 0 <= key < len(container):
            return container[key]
    return None


class RelativePath:
    """A reference to another location, relative to the current path.

    ``".."`` ascends one level; any other segment descends into that key.
    """

    def __init__(self, *segments: Any):
        self.segments: Tuple[Any, ...] = tuple(segments)

    def __repr__(self) -> str:
        return f"RelativePath({', '.join(repr(s) for s in self.segments)})"

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, RelativePath) and self.segments == other.segments

    def __hash__(self) -> int:
        return hash(self.segments)


class Path:
    """Breadcrumb trail from the root object to the value being checked."""

    def __init__(self, base: Any, keys: Sequence[Any] = ()):
        self._base = base
        self._keys: List[Any] = list(keys)

    def push(self, key: Any) -> None:
        self._keys.append(key)

    def pop(self) -> Any:
        if not self._keys:
            raise PathError("Cannot pop from the root path")
        return self._keys.pop()

    @contextmanager
    def enter(self, *keys: Any) -> Iterator["Path"]:
        """Context manager that descends into ``keys`` and restores the path."""
        depth = len(self._keys)
        self._keys.extend(keys)
        try:
            yield self
        finally:
            del self._keys[depth:]

    def copy(self) -> "Path":
        return Path(self._base, self._keys)

    def get_base(self) -> Any:
        return self._base

    def target(self) -> Any:
        """Dereference the current keys against the base object."""
        value = self._base
        for key in self._keys:
            value = _lookup(value, key)
        return value

    @property
    def keys(self) -> Tuple[Any, ...]:
        return tuple(self._keys)

    def snapshot(self) -> Tuple[Any, ...]:
        return tuple(self._keys)

    def parent(self) -> "Path":
        if not self._keys:
            raise PathError("The root path has no parent")
        return Path(self._base, self._keys[:-1])

    def resolve(self, relative: RelativePath) -> "Path":
        """Return a new path obtained by applying ``relative`` to this one."""
        keys = list(self._keys)
        for segment in relative.segments:
            if segment == PARENT:
                if not keys:
                    raise PathError(f"{relative!r} ascends past the root from '{self}'")
                keys.pop()
            else:
                keys.append(segment)
        return Path(self._base, keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, Path)
            and other._base is self._base
            and other._keys == self._keys
        )

    def __repr__(self) -> str:
        return f"Path({self._keys!r})"

    def __str__(self) -> str:
        return " -> ".join(str(key) for key in self._keys) if self._keys else "root"
