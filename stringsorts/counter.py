"""Character-level comparison counting shared by all string sorts."""

from __future__ import annotations

from dataclasses import dataclass

END_OF_STRING = -1
"""Value returned by :meth:`CharCompareCounter.char_at` past the end of a string."""


@dataclass
class CharCompareCounter:
    """Compares strings character by character and counts every character inspected."""

    count: int = 0

    def compare(self, a: str, b: str) -> int:
        """Return -1, 0 or 1 as ``a`` sorts before, equal to or after ``b``."""
        for x, y in zip(a, b):
            self.count += 1
            if x != y:
                return -1 if x < y else 1
        self.count += 1
        if len(a) == len(b):
            return 0
        return -1 if len(a) < len(b) else 1

    def less(self, a: str, b: str) -> bool:
        """Return True if ``a`` sorts strictly before ``b``."""
        return self.compare(a, b) < 0

    def char_at(self, s: str, d: int) -> int:
        """Return the code of the character at position ``d``, or -1 past the end."""
        self.count += 1
        return ord(s[d]) if d < len(s) else END_OF_STRING

    def reset(self) -> None:
        """Set the comparison count back to zero."""
        self.count = 0