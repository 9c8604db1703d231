"""Generation of random, reverse-sorted and almost-sorted string data sets."""

from __future__ import annotations

import random
import sys
from pathlib import Path
from typing import Sequence

CHARACTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789!@#%:;^&*()-."
"""Alphabet from which random strings are drawn."""

STRING_COUNT = 3000
"""Number of random strings in a full data set."""

MIN_LENGTH = 10
MAX_LENGTH = 200

SWAP_COUNT = 30
"""Number of random swaps applied to sorted data to make it almost sorted."""

SIZES = range(100, 3001, 100)
"""Prefix sizes written for every data variant."""


class StringGenerator:
    """Builds string data sets and writes them as files of increasing size."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def random_string(self, min_len: int = MIN_LENGTH, max_len: int = MAX_LENGTH) -> str:
        """Return a string of random length in ``[min_len, max_len]`` over :data:`CHARACTERS`."""
        length = self._rng.randint(min_len, max_len)
        return "".join(self._rng.choices(CHARACTERS, k=length))

    def random_strings(self, count: int = STRING_COUNT) -> list[str]:
        """Return ``count`` independent random strings."""
        return [self.random_string() for _ in range(count)]

    def reverse_sorted(self, base: Sequence[str]) -> list[str]:
        """Return a copy of ``base`` sorted in descending order."""
        return sorted(base, reverse=True)

    def almost_sorted(self, base: Sequence[str]) -> list[str]:
        """Return ``base`` sorted ascending, then disturbed by a few random swaps."""
        almost = sorted(base)
        if len(almost) < 2:
            return almost
        for _ in range(SWAP_COUNT):
            first = self._rng.randrange(len(almost))
            second = self._rng.randrange(len(almost))
            if first != second:
                almost[first], almost[second] = almost[second], almost[first]
        return almost

    def save_variants(self, root: str | Path, folder: str, data: Sequence[str]) -> list[Path]:
        """Write the first ``size`` strings of ``data`` for every size in :data:`SIZES`.

        Each file starts with its size on a line of its own, followed by one
        string per line. Files that cannot be written are reported on stderr
        and skipped. Returns the paths that were written.
        """
        if len(data) < SIZES[-1]:
            raise ValueError(f"need at least {SIZES[-1]} strings, got {len(data)}")
        directory = Path(root) / folder
        directory.mkdir(parents=True, exist_ok=True)
        written = []
        for size in SIZES:
            path = directory / f"{folder}_{size}.txt"
            try:
                with path.open("w", encoding="utf-8", newline="\n") as out:
                    out.write(f"{size}\n")
                    out.writelines(f"{s}\n" for s in data[:size])
            except OSError:
                print(f"Failed to open file: {path}", file=sys.stderr)
                continue
            written.append(path)
        return written

    def generate_all(self, root: str | Path) -> None:
        """Generate a random data set and save its random, reverse and almost sorted variants."""
        strings = self.random_strings()
        self.save_variants(root, "random", strings)
        self.save_variants(root, "reverse_sort", self.reverse_sorted(strings))
        self.save_variants(root, "almost_sort", self.almost_sorted(strings))