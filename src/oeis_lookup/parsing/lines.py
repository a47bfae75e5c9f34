"""Split responses into lines and reassemble tagged lines with their continuations."""

from __future__ import annotations

from collections.abc import Iterable

TAG_MARKER = "%"


def is_tagged(line: str) -> bool:
    """Return ``True`` when ``line`` starts a new field."""

    return line.startswith(TAG_MARKER)


def split_lines(text: str) -> list[str]:
    """Split ``text`` on ``\\n`` only, dropping a ``\\r`` before each break.

    Other Unicode line boundaries (``\\u2028``, form feeds, ...) stay inside
    the payload they belong to.
    """

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def reassemble_lines(lines: Iterable[str]) -> list[str]:
    """Merge every tagged line with the untagged lines that follow it.

    Continuations are left-trimmed and appended without a separator. Input
    that does not start with a tagged line is returned unchanged; the field
    decoder rejects such lines later on.
    """

    raw = list(lines)
    if not raw or not is_tagged(raw[0]):
        return raw

    logical: list[str] = []
    current: list[str] = []
    for line in raw:
        if is_tagged(line):
            if current:
                logical.append("".join(current))
            current = [line]
        else:
            current.append(line.lstrip())
    logical.append("".join(current))
    return logical


__all__ = ["TAG_MARKER", "is_tagged", "reassemble_lines", "split_lines"]
