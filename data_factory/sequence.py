"""
Sequence: cycle through a fixed list of values across a batch.
"""

from typing import Any, List

from .exceptions import InvalidConstruction


class Sequence:
    """
    Cyclic value generator with a cursor.

    Each call returns ``slots[index % len(slots)]`` and advances the cursor.
    A callable slot is called with the sequence itself, so it can read
    ``index`` to vary its output.
    """

    def __init__(self, *slots: Any):
        if not slots:
            raise InvalidConstruction("Sequence must contain at least one value")

        self._slots: List[Any] = list(slots)
        self.index = 0

    def __len__(self) -> int:
        return len(self._slots)

    def length(self) -> int:
        """Number of slots, fixed at construction."""
        return len(self._slots)

    def __call__(self) -> Any:
        return self.invoke()

    def invoke(self) -> Any:
        """Return the next value in the sequence."""
        value = self._slots[self.index % len(self._slots)]
        if callable(value) and not isinstance(value, type):
            value = value(self)

        # The cursor advances for literal and callable slots alike
        self.index += 1
        return value

    def reset(self) -> None:
        self.index = 0

    def copy(self) -> "Sequence":
        """Independent sequence with the same slots and cursor position."""
        clone = Sequence(*self._slots)
        clone.index = self.index
        return clone

    def __repr__(self) -> str:
        return f"Sequence(length={len(self._slots)}, index={self.index})"
