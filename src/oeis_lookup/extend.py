"""Extend a known prefix with the terms of a matching sequence."""

from __future__ import annotations

from collections.abc import Sequence


def is_prefix(prefix: Sequence[int], values: Sequence[int]) -> bool:
    return len(prefix) <= len(values) and all(a == b for a, b in zip(prefix, values))


def extend(prefix: Sequence[int], candidate: Sequence[int]) -> list[int]:
    """Return the longest suffix of ``candidate`` that starts with ``prefix``.

    Suffixes are tried from ``candidate`` itself down to the empty suffix, so
    terms of ``candidate`` that precede the match are dropped. When no suffix
    matches, ``prefix`` is returned unchanged; either way ``prefix`` is a
    prefix of the result.
    """

    for start in range(len(candidate) + 1):
        suffix = candidate[start:]
        if is_prefix(prefix, suffix):
            return list(suffix)
    return list(prefix)


__all__ = ["extend", "is_prefix"]
