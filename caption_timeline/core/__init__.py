"""Core data types and timing logic.

WHY: The grouping and lookup rules are the stable heart of the package.
Everything else (styles, exporters, CLI, HTTP API) consumes them.

HOW: ir.py defines the data structures, errors.py the failure taxonomy,
grouping.py validates word lists and builds caption groups, lookup.py
answers "which group / word is active", clock.py turns frames into
milliseconds.

RULES:
- No module in core performs I/O or keeps mutable state
- IR dataclasses are frozen; derived groups reference input words as-is
"""
