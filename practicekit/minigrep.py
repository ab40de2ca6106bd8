"""Search the lines of a text file for a query string."""

from __future__ import annotations

import json
import os
import sys
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

IGNORE_CASE_VAR = "IGNORE_CASE"
IGNORE_CASE_ARG = "ignore_case"


class ConfigError(ValueError):
    """Raised when the command line does not describe a search."""


@dataclass(frozen=True)
class Config:
    """What to search for, where, and whether case matters."""

    key: str
    file: str
    ignore_case: bool = False


def build_config(args: Iterable[str], env: Mapping[str, str] | None = None) -> Config:
    """Build a Config from argv-style arguments (program name first).

    The ``IGNORE_CASE`` environment variable wins when set: ``"1"`` turns
    case folding on, any other value turns it off. Without it, a third
    argument equal to ``ignore_case`` turns case folding on.
    """
    environment = os.environ if env is None else env
    remaining = iter(args)
    next(remaining, None)

    key = next(remaining, None)
    if key is None:
        raise ConfigError("Didn't get a query string")
    file = next(remaining, None)
    if file is None:
        raise ConfigError("Didn't get a file path")

    flag = environment.get(IGNORE_CASE_VAR)
    if flag is not None:
        ignore_case = flag == "1"
    else:
        ignore_case = next(remaining, None) == IGNORE_CASE_ARG

    return Config(key=key, file=file, ignore_case=ignore_case)


def _lines(contents: str) -> list[str]:
    """Split on newlines, dropping a trailing empty line and any ``\\r`` ending."""
    if not contents:
        return []
    parts = contents.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def search(key: str, contents: str) -> list[str]:
    """Return the lines of ``contents`` that contain ``key``."""
    return [line for line in _lines(contents) if key in line]


def search_case_insensitive(key: str, contents: str) -> list[str]:
    """Return the lines of ``contents`` that contain ``key``, ignoring case."""
    folded_key = key.lower()
    return [line for line in _lines(contents) if folded_key in line.lower()]


def run(config: Config) -> list[str]:
    """Search the configured file, print the matching lines and return them."""
    contents = Path(config.file).read_text(encoding="utf-8")
    if config.ignore_case:
        results = search_case_insensitive(config.key, contents)
    else:
        results = search(config.key, contents)
    print(f"Results:{json.dumps(results, ensure_ascii=False)}")
    return results


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point; ``argv`` excludes the program name."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        config = build_config(["minigrep", *args])
    except ConfigError as err:
        print(f"Problem parsing arguments: {err}", file=sys.stderr)
        return 1

    print(f"Searching for [{config.key}] In file [{config.file}]")

    try:
        run(config)
    except (OSError, UnicodeDecodeError) as error:
        print(f"Failed to run application: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())