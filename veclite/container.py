"""An ordered list wrapper with a space-separated rendering.

``Veclite`` keeps its elements in a plain ``list`` exposed as ``data`` and
adds a few list-like helpers on top: ``append``, ``prepend``, ``remove`` by
position and a non-raising ``get``. ``str()`` renders the elements separated
by single spaces, which makes the container handy to print.
"""
from __future__ import annotations

import copy as _copy
import logging
import operator
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

from .exceptions import OutOfBoundsError
from .observability import inc_out_of_bounds

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Veclite(Generic[T]):
    """Ordered, indexable container preserving insertion order."""

    def __init__(self, iterable: Iterable[T] | None = None) -> None:
        self.data: List[T] = list(iterable) if iterable is not None else []

    @classmethod
    def new(cls) -> "Veclite[T]":
        """Return an empty container."""
        return cls()

    @classmethod
    def from_iterable(cls, iterable: Iterable[T]) -> "Veclite[T]":
        return cls(iterable)

    def append(self, value: T) -> None:
        """Insert ``value`` at the end."""
        self.data.append(value)

    add = append
    push = append

    def prepend(self, value: T) -> None:
        """Insert ``value`` at position 0.

        Every existing element moves one position later, so this is linear in
        the current length.
        """
        self.data.insert(0, value)

    def _in_bounds(self, index: int) -> bool:
        return 0 <= index < len(self.data)

    def remove(self, index: int) -> T:
        """Remove and return the element at ``index``.

        Raises ``OutOfBoundsError`` when ``index`` is negative or not less
        than the length; the container is left unchanged in that case.
        """
        index = operator.index(index)
        if not self._in_bounds(index):
            logger.debug(
                "remove rejected",
                extra={"index": index, "length": len(self.data)},
            )
            inc_out_of_bounds()
            raise OutOfBoundsError(index, len(self.data))
        return self.data.pop(index)

    def get(self, index: int, default: Optional[T] = None) -> Optional[T]:
        """Return the element at ``index`` or ``default`` when out of range."""
        index = operator.index(index)
        if not self._in_bounds(index):
            return default
        return self.data[index]

    def length(self) -> int:
        return len(self.data)

    def is_empty(self) -> bool:
        return not self.data

    def iter(self) -> Iterator[T]:
        """Iterate front to back without consuming the container."""
        return iter(self.data)

    def update(self, func: Callable[[T], T]) -> None:
        """Replace every element with ``func(element)``, in order."""
        for i, item in enumerate(self.data):
            self.data[i] = func(item)

    def render(self) -> str:
        return " ".join(str(item) for item in self.data)

    def copy(self) -> "Veclite[T]":
        """Return a shallow copy backed by a new list."""
        return type(self)(self.data)

    def sort(self, *, key: Callable[[T], Any] | None = None, reverse: bool = False) -> None:
        self.data.sort(key=key, reverse=reverse)

    def reverse(self) -> None:
        self.data.reverse()

    def clear(self) -> None:
        self.data.clear()

    def __copy__(self) -> "Veclite[T]":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "Veclite[T]":
        return type(self)(_copy.deepcopy(self.data, memo))

    def __len__(self) -> int:
        return len(self.data)

    def __bool__(self) -> bool:
        return bool(self.data)

    def __getitem__(self, index: int) -> T:
        index = operator.index(index)
        if not self._in_bounds(index):
            raise OutOfBoundsError(index, len(self.data))
        return self.data[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self.data)

    def __contains__(self, value: object) -> bool:
        return value in self.data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Veclite):
            return NotImplemented
        return self.data == other.data

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.data!r})"


# Short alias.
Vel = Veclite


def vel(*values: T) -> Veclite[T]:
    """Build a container from the given values, e.g. ``vel(1, 2, 3)``."""
    return Veclite(values)
