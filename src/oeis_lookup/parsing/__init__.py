"""Parser for the tagged-line ``fmt=text`` record format."""

from oeis_lookup.parsing.fields import FieldUpdate, apply_field, decode_line, split_logical_line
from oeis_lookup.parsing.lines import reassemble_lines, split_lines
from oeis_lookup.parsing.record import NO_RESULTS, parse_record
from oeis_lookup.parsing.render import render_lines, render_record

__all__ = [
    "FieldUpdate",
    "NO_RESULTS",
    "apply_field",
    "decode_line",
    "parse_record",
    "reassemble_lines",
    "render_lines",
    "render_record",
    "split_lines",
    "split_logical_line",
]
