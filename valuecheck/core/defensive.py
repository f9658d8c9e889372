"""Defensive-copy holder.

Owns an independent copy of a caller's sequence. Nothing the caller
does to the original, or to any snapshot handed out, can reach the
internal storage.
"""

import copy
from collections.abc import Iterable
from typing import Any

from .errors import InvalidArgumentError, OutOfRangeError


class DefensiveCopy:
    """Holds a private copy of a sequence and hands out fresh copies.

    Copies are taken once at construction and once per get() call.
    Turning off either copy (copy_on_construct / copy_on_get) reproduces
    the aliasing bug the copies exist to prevent; the flags are only for
    demonstrating that failure mode.
    """

    def __init__(
        self,
        source: Iterable[Any],
        deep: bool = False,
        copy_on_construct: bool = True,
        copy_on_get: bool = True,
    ):
        if source is None:
            raise InvalidArgumentError("source must be a sequence, got None")
        if isinstance(source, (str, bytes)) or not isinstance(source, Iterable):
            raise InvalidArgumentError(
                f"source must be a non-string sequence, got {type(source).__name__}"
            )
        if not copy_on_construct and not isinstance(source, list):
            raise InvalidArgumentError(
                "copy_on_construct=False requires a list source to alias"
            )
        self.deep = deep
        self.copy_on_get = copy_on_get
        self._data: list[Any] = self._copy(source) if copy_on_construct else source

    def _copy(self, items: Iterable[Any]) -> list[Any]:
        if self.deep:
            return [copy.deepcopy(item) for item in items]
        return list(items)

    def get(self) -> list[Any]:
        """Return a fresh copy of the held elements."""
        if not self.copy_on_get:
            return self._data
        return self._copy(self._data)

    def item(self, index: int) -> Any:
        """Return the element at index.

        Negative indices are rejected rather than counted from the end.

        Raises:
            OutOfRangeError: If index is outside [0, length).
        """
        if not 0 <= index < len(self._data):
            raise OutOfRangeError(index, len(self._data))
        element = self._data[index]
        return copy.deepcopy(element) if self.deep else element

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DefensiveCopy):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"DefensiveCopy({self._data!r})"
