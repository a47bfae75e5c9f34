"""Parse a complete ``fmt=text`` response body into a :class:`SequenceEntry`."""

from __future__ import annotations

from functools import reduce

from oeis_lookup.logging_setup import get_logger
from oeis_lookup.models import SequenceEntry
from oeis_lookup.parsing.fields import apply_update, decode_line
from oeis_lookup.parsing.lines import reassemble_lines, split_lines
from oeis_lookup.utils.errors import DecodeError

NO_RESULTS = "No results."
HEADER_LINES = 5
FOOTER_LINES = 1
# Zero-based index of the "Showing 1-1 of 1" / "No results." banner line.
RESULT_COUNT_LINE = 3

logger = get_logger(__name__)


def is_no_results(lines: list[str]) -> bool:
    return len(lines) > RESULT_COUNT_LINE and lines[RESULT_COUNT_LINE].startswith(NO_RESULTS)


def record_lines(lines: list[str]) -> list[str]:
    """Strip the fixed banner and footer from the response lines."""

    if len(lines) < HEADER_LINES + FOOTER_LINES:
        raise DecodeError("\n".join(lines), "response is too short to hold a record")
    return lines[HEADER_LINES:-FOOTER_LINES]


def parse_record(raw_text: str) -> SequenceEntry | None:
    """Parse a response body.

    Returns ``None`` when the database reports no results and raises
    :class:`DecodeError` when any logical line cannot be decoded.
    """

    lines = split_lines(raw_text)
    if is_no_results(lines):
        logger.debug("no_results")
        return None

    updates = [decode_line(line) for line in reassemble_lines(record_lines(lines))]
    entry = reduce(apply_update, updates, SequenceEntry())
    logger.debug("record_parsed", catalog_id=entry.catalog_id, fields=len(updates))
    return entry


__all__ = ["NO_RESULTS", "is_no_results", "parse_record", "record_lines"]
