"""Print greetings and name/height records."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence

GREETINGS = ("Grüß Gott!", "世界，你好", "World, hello")

DEFAULT_DATA = """
    zhangsan,160
    lisi,155
    wangwu,165
    invalid,data
    """


def greet_world() -> list[str]:
    """Print each greeting on its own line and return them."""
    for greeting in GREETINGS:
        print(greeting)
    return list(GREETINGS)


def _parse_height(text: str) -> float | None:
    if "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _format_height(height: float) -> str:
    if math.isnan(height):
        return "NaN"
    if math.isfinite(height) and height.is_integer():
        return str(int(height))
    return repr(height)


def parse_records(data: str) -> list[tuple[str, float]]:
    """Parse ``name,height`` lines, skipping blank lines and unparsable heights.

    A non-blank line without a comma is malformed and raises ValueError.
    """
    records = []
    for line in data.split("\n"):
        if not line.strip():
            continue
        fields = [field.strip() for field in line.split(",")]
        if len(fields) < 2:
            raise ValueError(f"record {line.strip()!r} has no height field")
        height = _parse_height(fields[1])
        if height is not None:
            records.append((fields[0], height))
    return records


def print_info(data: str = DEFAULT_DATA) -> list[tuple[str, float]]:
    """Print each valid record of ``data`` and return the parsed records."""
    records = parse_records(data)
    for name, height in records:
        print(f"name:{name}, height:{_format_height(height)}")
    return records


def main(argv: Sequence[str] | None = None) -> int:
    """Print the greeting banner and the built-in records."""
    del argv
    print("Hello, world!")
    greet_world()
    print_info()
    return 0


if __name__ == "__main__":
    sys.exit(main())