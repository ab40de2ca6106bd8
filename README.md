# practicekit

A collection of small, self-contained examples: a line-search command,
a stack, an immutable list with shared tails, a double-ended queue, a
parent/child tree, a value cache and a handful of classic exercises.
It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

### minigrep

Print the lines of a UTF-8 text file that contain a search key:

```
minigrep <key> <file> [ignore_case]
```

It first prints `Searching for [<key>] In file [<file>]`, then the
matching lines as a list, e.g. `Results:["Rust:", "Trust me."]`.

Matching is case-sensitive by default. When the environment variable
`IGNORE_CASE` is set, case is ignored if its value is `1` and respected
otherwise. When that variable is not set, case is ignored if the third
argument is `ignore_case`. Missing arguments or an unreadable file
produce a message on standard error and exit status 1.

### practicekit-greet

Print `Hello, world!`, a greeting in several languages, then the name
and height of each valid record in a small built-in table:

```
practicekit-greet
```

## Library

- `practicekit.minigrep`: `Config`, `ConfigError`, `build_config(args, env=None)`,
  `search`, `search_case_insensitive`, `run` (prints and returns the matches), `main`
- `practicekit.greeting`: `greet_world`, `parse_records` (raises `ValueError`
  for a non-blank line without a comma), `print_info`, `main`
- `practicekit.leetcode`: `max_profit`, `max_profit_windows`, `remove_duplicates`
  (compacts a sorted list in place and returns the distinct count)
- `practicekit.stack`: `Stack`, a LIFO stack with `push`, `pop`, `peek`,
  `replace_top`, `update` and `drain`; iteration runs from the top down
- `practicekit.persistent`: `PersistentList`, an immutable list with shared
  tails: `prepend`, `tail`, `peek`
- `practicekit.deque`: `Deque` (push, pop, peek and set at both ends) and
  `DequeDrain`, returned by `Deque.drain()`, which pops from the front on
  `next()` and from the back on `next_back()`
- `practicekit.tree`: `Node`, where children are held strongly and the
  `parent` only through a weak reference
- `practicekit.caching`: `Cacher` (computes once, then always returns the
  first result), `make_offset`
- `practicekit.fibonacci`: `fibonacci`, an endless generator of 1, 1, 2, 3, 5, ...
- `practicekit.units`: `Meters` (a 32-bit unsigned distance that adds and
  prints as `"10 meters"`), `Operation`
- `practicekit.conversion`: `Number`, `EvenNum` (raises `ValueError` for odd
  values), `DisplayPoint`, `saturating_u8`, `wrapping_u8`
- `practicekit.geometry`: `Point` (`+`, `summarize`, `mixup`), `summarize`, `Human`
- `practicekit.traffic`: `TrafficLight`, `TrafficLightColor`
- `practicekit.production`: `production_rate_per_hour`, `multiply` (parses
  two 32-bit integers; raises `ValueError` on bad input and `OverflowError`
  when the product does not fit)

Empty containers raise `IndexError` from `pop` and `peek`.

```python
from practicekit.minigrep import search_case_insensitive
from practicekit.stack import Stack

text = "Rust:\nsafe, fast, productive.\nPick three.\nTrust me."
print(search_case_insensitive("rUsT", text))  # ['Rust:', 'Trust me.']

stack = Stack()
stack.push(1)
stack.push(2)
print(stack.pop())  # 2
```