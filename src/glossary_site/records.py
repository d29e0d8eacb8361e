"""Read term/definition records and assemble the glossary mapping."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Union

import ftfy

LOGGER = logging.getLogger(__name__)
RESERVED_TERMS = {".", ".."}


class InputFormatError(ValueError):
    """The input does not follow the term / definition / blank line layout."""

    def __init__(
        self,
        message: str,
        *,
        line_number: Optional[int] = None,
        source: Optional[Union[str, Path]] = None,
    ) -> None:
        self.message = message
        self.line_number = line_number
        self.source = source
        super().__init__(str(self))

    def __str__(self) -> str:
        where = str(self.source) if self.source else "<input>"
        if self.line_number is not None:
            where = f"{where}:{self.line_number}"
        return f"{where}: {self.message}"


def normalize_text(raw_text: str) -> str:
    """Repair broken encoding and line endings, leaving valid text untouched."""
    text = ftfy.fix_text(
        raw_text,
        uncurl_quotes=False,
        unescape_html=False,
        fix_latin_ligatures=False,
        fix_character_width=False,
        normalization=None,
    )
    return text.replace("\r\n", "\n")


def split_lines(text: str) -> List[str]:
    # a final newline ends the last line, it does not open a new one
    if text.endswith("\n"):
        text = text[:-1]
    return text.split("\n")


def check_term(
    term: str, line_number: int, source: Optional[Union[str, Path]] = None
) -> None:
    if term in RESERVED_TERMS or "/" in term or "\\" in term:
        raise InputFormatError(
            f"term {term!r} cannot be used as a page name",
            line_number=line_number,
            source=source,
        )


def build_glossary(
    lines: Iterable[str], source: Optional[Union[str, Path]] = None
) -> Dict[str, str]:
    """Group ``lines`` into records and return a term -> definition dict.

    Each record is a term line followed by definition lines up to the next
    empty line or the end of input. Definition lines are joined with nothing
    in between. When a term appears twice the first definition is kept.
    Empty lines where a term is expected are skipped.
    """
    rows: List[str] = [line.rstrip("\r\n") for line in lines]
    glossary: Dict[str, str] = {}
    index = 0
    while index < len(rows):
        term = rows[index]
        index += 1
        if not term:
            continue
        term_line = index
        if index >= len(rows):
            raise InputFormatError(
                "missing definition for last term",
                line_number=term_line,
                source=source,
            )
        check_term(term, term_line, source)
        parts: List[str] = []
        while index < len(rows) and rows[index]:
            parts.append(rows[index])
            index += 1
        # step over the blank delimiter
        index += 1
        if term in glossary:
            LOGGER.warning(
                "Duplicate term %r at line %d ignored; keeping first definition",
                term,
                term_line,
            )
            continue
        glossary[term] = "".join(parts)
    return glossary


def sorted_keys(mapping: Mapping[str, str]) -> List[str]:
    """Terms of ``mapping`` in ascending code point order."""
    return sorted(mapping)


def read_glossary(path: Path, encoding: str = "utf-8") -> Dict[str, str]:
    LOGGER.info("Reading glossary from %s", path)
    raw_text = path.read_text(encoding=encoding)
    text = normalize_text(raw_text)
    glossary = build_glossary(split_lines(text), source=path)
    LOGGER.info("Loaded %d terms from %s", len(glossary), path.name)
    return glossary
