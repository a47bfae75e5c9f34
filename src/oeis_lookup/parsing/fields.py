"""Decode logical record lines and fold them into a :class:`SequenceEntry`.

A logical line looks like ``%S A000040 2,3,5,7,11`` - a marker, a one-letter
tag, an echo of the catalog number and the payload. The ``%I`` line has no
echo: everything after the tag token is the list of catalog numbers.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import NamedTuple

from oeis_lookup.models import Keyword, Language, Program, SequenceEntry
from oeis_lookup.parsing.lines import TAG_MARKER
from oeis_lookup.utils.errors import DecodeError

IDENTIFIER_TAG = "I"
UNSIGNED_TAGS = frozenset("STU")
SIGNED_TAGS = frozenset("VWX")

_INTEGER = re.compile(r"-?[0-9]+")
_WHITESPACE = re.compile(r"\s")
_KEYWORDS = {keyword.value.capitalize(): keyword for keyword in Keyword}


class FieldUpdate(NamedTuple):
    """One decoded logical line."""

    tag: str
    payload: str
    line: str


def _split_word(text: str) -> tuple[str, str]:
    match = _WHITESPACE.search(text)
    if match is None:
        return text, ""
    return text[: match.start()], text[match.start() :].lstrip()


def split_logical_line(line: str) -> tuple[str, str]:
    """Split a logical line into its tag character and payload."""

    token, rest = _split_word(line)
    if len(token) < 2 or not token.startswith(TAG_MARKER):
        raise DecodeError(line, "expected a tag token such as '%S'")
    tag = token[1]
    if tag == IDENTIFIER_TAG:
        return tag, rest
    _echo, payload = _split_word(rest)
    return tag, payload


def csv_items(payload: str) -> list[str]:
    """Split a comma separated payload; one trailing comma is allowed."""

    if not payload:
        return []
    items = payload.split(",")
    if items[-1] == "":
        items.pop()
    return items


def parse_integers(payload: str) -> list[int]:
    numbers: list[int] = []
    for item in csv_items(payload):
        if not _INTEGER.fullmatch(item):
            raise ValueError(f"non-numeric term {item!r}")
        numbers.append(int(item))
    return numbers


def parse_offset(payload: str) -> tuple[int, int]:
    """Parse an ``offset,first_large_index`` pair."""

    offset, sep, first_large = payload.partition(",")
    if not sep:
        raise ValueError("offset line needs two comma separated integers")
    for item in (offset, first_large):
        if not _INTEGER.fullmatch(item.strip()):
            raise ValueError(f"non-numeric offset {item!r}")
    return int(offset), int(first_large)


def parse_keywords(payload: str) -> tuple[Keyword, ...]:
    keywords: list[Keyword] = []
    for token in csv_items(payload):
        keyword = _KEYWORDS.get(token.strip().capitalize())
        if keyword is None:
            raise ValueError(f"unknown keyword {token!r}")
        keywords.append(keyword)
    return tuple(keywords)


_Rule = Callable[[SequenceEntry, str], SequenceEntry]


def _append(field: str) -> _Rule:
    def rule(entry: SequenceEntry, payload: str) -> SequenceEntry:
        return entry.model_copy(update={field: (*getattr(entry, field), payload)})

    return rule


def _replace(field: str) -> _Rule:
    def rule(entry: SequenceEntry, payload: str) -> SequenceEntry:
        return entry.model_copy(update={field: payload})

    return rule


def _extend_numbers(field: str) -> _Rule:
    def rule(entry: SequenceEntry, payload: str) -> SequenceEntry:
        numbers = parse_integers(payload)
        return entry.model_copy(update={field: (*getattr(entry, field), *numbers)})

    return rule


def _program(language: Language) -> _Rule:
    def rule(entry: SequenceEntry, payload: str) -> SequenceEntry:
        program = Program(language, payload)
        return entry.model_copy(update={"programs": (*entry.programs, program)})

    return rule


def _catalog_ids(entry: SequenceEntry, payload: str) -> SequenceEntry:
    return entry.model_copy(update={"catalog_ids": tuple(payload.split())})


def _offset(entry: SequenceEntry, payload: str) -> SequenceEntry:
    offset, first_large = parse_offset(payload)
    return entry.model_copy(update={"offset": offset, "first_large_index": first_large})


def _keywords(entry: SequenceEntry, payload: str) -> SequenceEntry:
    return entry.model_copy(update={"keywords": parse_keywords(payload)})


FIELD_RULES: dict[str, _Rule] = {
    IDENTIFIER_TAG: _catalog_ids,
    **{tag: _extend_numbers("values") for tag in UNSIGNED_TAGS},
    **{tag: _extend_numbers("signed_values") for tag in SIGNED_TAGS},
    "N": _replace("description"),
    "D": _append("references"),
    "H": _append("links"),
    "F": _append("formulas"),
    "Y": _append("cross_references"),
    "A": _replace("author"),
    "O": _offset,
    "p": _program(Language.MATHEMATICA),
    "t": _program(Language.MAPLE),
    "o": _program(Language.OTHER),
    "E": _append("extensions"),
    "e": _append("examples"),
    "K": _keywords,
    "C": _append("comments"),
}


def decode_line(line: str) -> FieldUpdate:
    tag, payload = split_logical_line(line)
    return FieldUpdate(tag, payload, line)


def apply_field(
    entry: SequenceEntry,
    tag: str,
    payload: str,
    *,
    line: str | None = None,
) -> SequenceEntry:
    """Return ``entry`` updated with one field; unknown tags are ignored."""

    rule = FIELD_RULES.get(tag)
    if rule is None:
        return entry
    try:
        return rule(entry, payload)
    except ValueError as exc:
        raise DecodeError(line if line is not None else payload, str(exc)) from exc


def apply_update(entry: SequenceEntry, update: FieldUpdate) -> SequenceEntry:
    return apply_field(entry, update.tag, update.payload, line=update.line)


__all__ = [
    "FIELD_RULES",
    "FieldUpdate",
    "apply_field",
    "apply_update",
    "csv_items",
    "decode_line",
    "parse_integers",
    "parse_keywords",
    "parse_offset",
    "split_logical_line",
]
