"""Typed representation of a parsed OEIS record."""

from __future__ import annotations

from enum import Enum
from typing import Any, NamedTuple

from pydantic import BaseModel, ConfigDict


class Language(str, Enum):
    """Language of a program listed in a record.

    The database only marks Mathematica (``%t``) and Maple (``%p``) natively;
    everything else is ``OTHER`` and usually names its language in parentheses
    at the start of the snippet.
    """

    MATHEMATICA = "mathematica"
    MAPLE = "maple"
    OTHER = "other"


class Keyword(str, Enum):
    """Record keywords, see https://oeis.org/eishelp2.html#RK."""

    ALLOCATED = "allocated"
    BASE = "base"
    BREF = "bref"
    CHANGED = "changed"
    COFR = "cofr"
    CONS = "cons"
    CORE = "core"
    DEAD = "dead"
    DUMB = "dumb"
    DUPE = "dupe"
    EASY = "easy"
    EIGEN = "eigen"
    FINI = "fini"
    FRAC = "frac"
    FULL = "full"
    HARD = "hard"
    HEAR = "hear"
    LESS = "less"
    LOOK = "look"
    MORE = "more"
    MULT = "mult"
    NEW = "new"
    NICE = "nice"
    NONN = "nonn"
    OBSC = "obsc"
    RECYCLED = "recycled"
    SIGN = "sign"
    TABF = "tabf"
    TABL = "tabl"
    UNED = "uned"
    UNKN = "unkn"
    WALK = "walk"
    WORD = "word"


class Program(NamedTuple):
    """A snippet of code that generates the sequence."""

    language: Language
    code: str


class SequenceEntry(BaseModel):
    """Structured OEIS entry; see https://oeis.org/eishelp2.html.

    Instances are frozen and every list-valued field is a tuple, so an entry
    returned by the parser cannot be mutated by its caller.
    """

    model_config = ConfigDict(frozen=True)

    catalog_ids: tuple[str, ...] = ()
    values: tuple[int, ...] = ()
    signed_values: tuple[int, ...] = ()
    description: str = ""
    references: tuple[str, ...] = ()
    links: tuple[str, ...] = ()
    formulas: tuple[str, ...] = ()
    cross_references: tuple[str, ...] = ()
    author: str = ""
    offset: int = 0
    first_large_index: int = 0
    programs: tuple[Program, ...] = ()
    extensions: tuple[str, ...] = ()
    examples: tuple[str, ...] = ()
    keywords: tuple[Keyword, ...] = ()
    comments: tuple[str, ...] = ()

    @property
    def catalog_id(self) -> str | None:
        return self.catalog_ids[0] if self.catalog_ids else None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping of the entry."""

        data = self.model_dump(mode="json")
        data["programs"] = [
            {"language": program.language.value, "code": program.code} for program in self.programs
        ]
        return data


__all__ = ["Keyword", "Language", "Program", "SequenceEntry"]
