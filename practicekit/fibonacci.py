"""An endless Fibonacci sequence."""

from __future__ import annotations

from collections.abc import Iterator


def fibonacci() -> Iterator[int]:
    """Yield 1, 1, 2, 3, 5, ... without end."""
    current, following = 0, 1
    while True:
        current, following = following, current + following
        yield current