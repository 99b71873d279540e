"""Whitespace classification and trimming used by the parser."""

from __future__ import annotations

__all__ = ["is_space", "trim_leading", "trim_trailing", "trim"]


def is_space(ch: str) -> bool:
    """Return True if the single character *ch* is whitespace."""
    return ch.isspace()


def trim_leading(s: str) -> str:
    """Return *s* without leading whitespace."""
    return s.lstrip()


def trim_trailing(s: str) -> str:
    """Return *s* without trailing whitespace."""
    return s.rstrip()


def trim(s: str) -> str:
    """Return *s* with whitespace removed from both ends."""
    return trim_leading(trim_trailing(s))
