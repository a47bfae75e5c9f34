"""Render a :class:`SequenceEntry` back into the tagged-line response format."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from oeis_lookup.models import Language, SequenceEntry

GREETING = "# Greetings from The On-Line Encyclopedia of Integer Sequences! http://oeis.org/"
FOOTER = "# Content is available under The OEIS End-User License Agreement: http://oeis.org/LICENSE"
DEFAULT_CATALOG_ID = "A000000"

_PROGRAM_TAGS = {
    Language.MATHEMATICA: "p",
    Language.MAPLE: "t",
    Language.OTHER: "o",
}


def _join_numbers(values: Iterable[int]) -> str:
    return ",".join(str(value) for value in values)


def _tagged(tag: str, catalog_id: str, payloads: Iterable[str]) -> Iterator[str]:
    for payload in payloads:
        yield f"%{tag} {catalog_id} {payload}"


def render_lines(entry: SequenceEntry, *, catalog_id: str | None = None) -> list[str]:
    """Return the tagged lines describing ``entry`` in canonical field order."""

    echo = catalog_id or entry.catalog_id or DEFAULT_CATALOG_ID
    lines: list[str] = []
    if entry.catalog_ids:
        lines.append("%I " + " ".join(entry.catalog_ids))
    if entry.values:
        lines.extend(_tagged("S", echo, [_join_numbers(entry.values)]))
    if entry.signed_values:
        lines.extend(_tagged("V", echo, [_join_numbers(entry.signed_values)]))
    if entry.description:
        lines.extend(_tagged("N", echo, [entry.description]))
    lines.extend(_tagged("D", echo, entry.references))
    lines.extend(_tagged("H", echo, entry.links))
    lines.extend(_tagged("F", echo, entry.formulas))
    lines.extend(_tagged("Y", echo, entry.cross_references))
    if entry.author:
        lines.extend(_tagged("A", echo, [entry.author]))
    lines.extend(_tagged("O", echo, [f"{entry.offset},{entry.first_large_index}"]))
    for program in entry.programs:
        lines.extend(_tagged(_PROGRAM_TAGS[program.language], echo, [program.code]))
    lines.extend(_tagged("E", echo, entry.extensions))
    lines.extend(_tagged("e", echo, entry.examples))
    if entry.keywords:
        lines.extend(_tagged("K", echo, [",".join(keyword.value for keyword in entry.keywords)]))
    lines.extend(_tagged("C", echo, entry.comments))
    return lines


def render_record(entry: SequenceEntry, *, catalog_id: str | None = None) -> str:
    """Render a full response body that :func:`parse_record` reads back as ``entry``."""

    query = catalog_id or entry.catalog_id or DEFAULT_CATALOG_ID
    banner = [GREETING, "", f"Search: id:{query.lower()}", "Showing 1-1 of 1", ""]
    body = render_lines(entry, catalog_id=catalog_id)
    return "\n".join([*banner, *body, "", FOOTER]) + "\n"


__all__ = ["render_lines", "render_record"]
