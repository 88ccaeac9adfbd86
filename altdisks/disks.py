"""
Disk row data model for the alternating disks problem

A row holds 2n disks, each either light or dark. The row is created in the
alternating layout (dark at index 0, light at index 1, and so on) and can only
be rearranged by swapping two adjacent disks.
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

import numpy as np

from altdisks.exceptions import UnknownDiskColorError

logger = logging.getLogger(__name__)


class DiskColor(IntEnum):
    """Color of a single disk"""

    LIGHT = 0
    DARK = 1

    @property
    def symbol(self) -> str:
        """Single-character token used when rendering a row"""
        return "L" if self is DiskColor.LIGHT else "D"

    @classmethod
    def from_symbol(cls, symbol: str) -> "DiskColor":
        """Convert a rendered token back to a color"""
        symbol_map = {"L": cls.LIGHT, "D": cls.DARK}
        try:
            return symbol_map[symbol.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown disk symbol: {symbol!r}") from None


class DiskState:
    """A fixed-length row of light and dark disks

    Storage is a private int8 numpy buffer. Its length is set at construction
    and never changes; ``swap`` is the only mutation.
    """

    __slots__ = ("_colors",)

    def __init__(self, light_count: int):
        """Create a row of ``2 * light_count`` disks in alternating layout

        Args:
            light_count: Number of light disks (equal to the number of dark
                disks). Must be at least 1.
        """
        if light_count < 1:
            raise ValueError(f"light_count must be at least 1, got {light_count}")

        self._colors = np.full(light_count * 2, DiskColor.LIGHT, dtype=np.int8)
        self._colors[::2] = DiskColor.DARK

    @classmethod
    def from_colors(cls, colors: Iterable[DiskColor]) -> "DiskState":
        """Build a row with an arbitrary layout

        The layout must have an even, non-zero number of disks. Equal color
        counts are not enforced, so callers can model rows the sorting
        algorithms were never meant to see.
        """
        values = [DiskColor(color) for color in colors]
        if not values or len(values) % 2:
            raise ValueError(f"A disk row needs an even, non-zero length, got {len(values)}")

        state = cls.__new__(cls)
        state._colors = np.array(values, dtype=np.int8)
        return state

    @classmethod
    def parse(cls, text: str) -> "DiskState":
        """Build a row from its rendered form, e.g. ``"D L D L"``"""
        return cls.from_colors(DiskColor.from_symbol(token) for token in text.split())

    def copy(self) -> "DiskState":
        """Return an independent row with the same layout"""
        state = DiskState.__new__(DiskState)
        state._colors = self._colors.copy()
        return state

    def frozen_copy(self) -> "DiskState":
        """Return an independent row that refuses ``swap``"""
        state = self.copy()
        state._colors.flags.writeable = False
        return state

    def is_frozen(self) -> bool:
        return not self._colors.flags.writeable

    def total_count(self) -> int:
        return int(self._colors.size)

    def light_count(self) -> int:
        return self.total_count() // 2

    def dark_count(self) -> int:
        return self.light_count()

    def count(self, color: DiskColor) -> int:
        """Number of disks of the given color actually present in the row"""
        return int(np.count_nonzero(self._colors == color))

    def is_index(self, index: int) -> bool:
        return 0 <= index < self.total_count()

    def get(self, index: int) -> DiskColor:
        if not self.is_index(index):
            raise IndexError(f"Disk index {index} out of range for {self.total_count()} disks")
        return self._color_at(index)

    def swap(self, left_index: int) -> None:
        """Exchange the disks at ``left_index`` and ``left_index + 1``"""
        if not (self.is_index(left_index) and self.is_index(left_index + 1)):
            raise IndexError(
                f"Cannot swap at index {left_index} in a row of {self.total_count()} disks"
            )
        if self.is_frozen():
            raise ValueError("Cannot swap disks in a read-only row")
        colors = self._colors
        colors[left_index], colors[left_index + 1] = colors[left_index + 1], colors[left_index]

    def equals(self, other: "DiskState") -> bool:
        if not isinstance(other, DiskState):
            return False
        return self._colors.shape == other._colors.shape and bool(
            np.array_equal(self._colors, other._colors)
        )

    def colors(self) -> tuple[DiskColor, ...]:
        return tuple(self)

    def is_initialized(self) -> bool:
        """Return True when the row is in alternating layout

        Index 0 must be dark, index 1 light, and so on for the entire row.
        """
        expected = DiskColor.DARK
        for color in self:
            if color is not expected:
                return False
            expected = DiskColor.LIGHT if expected is DiskColor.DARK else DiskColor.DARK
        return True

    def is_sorted(self) -> bool:
        """Return True when no dark disk is in the low half and no light disk in the high half"""
        half = self.total_count() // 2
        for index in range(self.total_count()):
            color = self._color_at(index)
            if index < half and color is DiskColor.DARK:
                return False
            if index >= half and color is DiskColor.LIGHT:
                return False
        return True

    def render(self) -> str:
        return " ".join(color.symbol for color in self)

    def _color_at(self, index: int) -> DiskColor:
        value = int(self._colors[index])
        try:
            return DiskColor(value)
        except ValueError:
            logger.error(f"Unknown disk color {value} at index {index}")
            raise UnknownDiskColorError(index, value) from None

    def __len__(self) -> int:
        return self.total_count()

    def __iter__(self) -> Iterator[DiskColor]:
        for index in range(self.total_count()):
            yield self._color_at(index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DiskState):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"DiskState({self.render()!r})"


@dataclass(frozen=True)
class SortedDisks:
    """Output of a sorting algorithm: the final row and the number of swaps performed"""

    after: DiskState
    swap_count: int

    def __post_init__(self):
        if self.swap_count < 0:
            raise ValueError(f"swap_count must be non-negative, got {self.swap_count}")
        # The result keeps its own read-only row, detached from the caller's
        object.__setattr__(self, "after", self.after.frozen_copy())

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for reporting"""
        return {
            "disks": self.after.total_count(),
            "swap_count": self.swap_count,
            "after": self.after.render(),
            "sorted": self.after.is_sorted(),
        }
