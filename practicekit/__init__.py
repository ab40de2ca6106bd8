"""Small worked examples: a line-search tool, data structures, conversions and classic exercises."""

__version__ = "0.1.0"