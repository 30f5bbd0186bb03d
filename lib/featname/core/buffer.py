"""Bounded, append-only string builder used to assemble feature names."""

from __future__ import annotations

import logging
from typing import Any, List

from featname.core.errors import InvalidArgumentError

DEFAULT_BUFFER_SIZE = 256


class NameBuffer:
    """Accumulate formatted fragments up to a fixed number of characters.

    ``append`` mirrors ``snprintf`` truncation reporting: the stored text never
    exceeds ``capacity`` characters, but the return value is the length the
    buffer would have had without truncation. Callers compare it with
    ``capacity`` to detect a truncated name.
    """

    def __init__(self, capacity: int = DEFAULT_BUFFER_SIZE) -> None:
        if capacity <= 0:
            raise InvalidArgumentError(f"Buffer capacity must be positive, got {capacity}.")
        self.capacity = capacity
        self._parts: List[str] = []
        self._length = 0
        self.truncated = False

    def append(self, fmt: str, *args: Any) -> int:
        text = fmt % args if args else fmt
        current = self._length
        logical = current + len(text)
        room = self.capacity - current
        if len(text) > room:
            if not self.truncated:
                logging.debug(
                    "Feature name truncated at %d characters (dropped %d).",
                    self.capacity,
                    len(text) - room,
                )
            self.truncated = True
            text = text[:room]
        if text:
            self._parts.append(text)
            self._length += len(text)
        return logical

    @property
    def value(self) -> str:
        return "".join(self._parts)

    def __len__(self) -> int:
        return self._length

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"NameBuffer(capacity={self.capacity}, value={self.value!r})"


__all__ = ["DEFAULT_BUFFER_SIZE", "NameBuffer"]
