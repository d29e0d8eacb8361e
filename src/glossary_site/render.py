"""Turn a definition into HTML, linking every token that names a known term."""
from __future__ import annotations

from typing import AbstractSet, Collection, List, Tuple
from urllib.parse import quote

from markupsafe import Markup, escape

from .tokens import Token, iter_tokens


def term_href(term: str) -> str:
    return f"{quote(term)}.html"


def link_tokens(
    definition: str,
    known_terms: Collection[str],
    separators: AbstractSet[str],
    *,
    link_separators: bool = True,
) -> List[Tuple[Token, bool]]:
    """Tokenize ``definition`` and flag the tokens that should become links.

    A token is linked only when its whole text equals a known term (case
    sensitive). Separator runs are tested too unless ``link_separators`` is
    false.
    """
    flagged: List[Tuple[Token, bool]] = []
    for token in iter_tokens(definition, separators):
        linked = token.text in known_terms
        if token.separator and not link_separators:
            linked = False
        flagged.append((token, linked))
    return flagged


def render_definition(
    definition: str,
    known_terms: Collection[str],
    separators: AbstractSet[str],
    *,
    link_separators: bool = True,
) -> Markup:
    pieces: List[str] = []
    for token, linked in link_tokens(
        definition, known_terms, separators, link_separators=link_separators
    ):
        if linked:
            pieces.append(
                f'<a href="{escape(term_href(token.text))}">{escape(token.text)}</a>'
            )
        else:
            pieces.append(str(escape(token.text)))
    return Markup("".join(pieces))
