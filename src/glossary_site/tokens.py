"""Split text into maximal runs of separator and non-separator characters."""
from __future__ import annotations

from typing import AbstractSet, Iterator, NamedTuple

DEFAULT_SEPARATORS = frozenset(" .,;:")


class Token(NamedTuple):
    text: str
    start: int
    separator: bool

    @property
    def end(self) -> int:
        return self.start + len(self.text)


def next_token(text: str, position: int, separators: AbstractSet[str]) -> str:
    """Return the word or separator run of ``text`` that begins at ``position``.

    The run is maximal: it stops at the first character whose membership in
    ``separators`` differs from that of ``text[position]``, or at the end of
    the text.
    """
    if not 0 <= position < len(text):
        raise ValueError(
            f"position {position} out of range for text of length {len(text)}"
        )
    is_separator = text[position] in separators
    end = position
    while end < len(text) and (text[end] in separators) == is_separator:
        end += 1
    return text[position:end]


def iter_tokens(text: str, separators: AbstractSet[str]) -> Iterator[Token]:
    position = 0
    while position < len(text):
        chunk = next_token(text, position, separators)
        yield Token(chunk, position, chunk[0] in separators)
        position += len(chunk)
