"""HTML templates for the index and term pages, and writing them to disk."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import AbstractSet, Collection, Dict, List, Mapping, Sequence

from markupsafe import Markup, escape

from .records import sorted_keys
from .render import link_tokens, render_definition, term_href

LOGGER = logging.getLogger(__name__)
INDEX_PAGE = "index.html"
INDENT = "&nbsp;" * 12


def render_index_page(ordered_terms: Sequence[str]) -> str:
    lines = [
        "<html>",
        "<head>",
        "<title>Glossary</title>",
        "</head>",
        "<body>",
        "<h1>Glossary</h1>",
        "<hr>",
        "<h2>Index</h2>",
        "<ul>",
    ]
    for term in ordered_terms:
        lines.append(f'<li><a href="{escape(term_href(term))}">{escape(term)}</a></li>')
    lines.extend(["</ul>", "</body>", "</html>"])
    return "\n".join(lines) + "\n"


def render_term_page(term: str, fragment: Markup) -> str:
    title = escape(term)
    lines = [
        "<html>",
        "<head>",
        f"<title>{title}</title>",
        "</head>",
        "<body>",
        f"<h1><em><b style='color:red;'>{title}</b></em></h1>",
        "<p>",
        f"{INDENT}{fragment}</p>",
        "<hr>",
        f'<p>Return to <a href="{INDEX_PAGE}">index</a>.</p>',
        "</body>",
        "</html>",
    ]
    return "\n".join(lines) + "\n"


def page_name(term: str) -> str:
    return f"{term}.html"


def page_terms(glossary: Mapping[str, str]) -> List[str]:
    """Sorted terms that get a page of their own.

    A term whose page would overwrite the index is left out of the index
    list and is never linked.
    """
    terms: List[str] = []
    for term in sorted_keys(glossary):
        if page_name(term) == INDEX_PAGE:
            LOGGER.warning("Term %r collides with the index page; its page is skipped", term)
            continue
        terms.append(term)
    return terms


def build_site(
    glossary: Mapping[str, str],
    separators: AbstractSet[str],
    *,
    link_separators: bool = True,
) -> Dict[str, str]:
    """Render every page of the site, keyed by file name.

    The index comes first, then one page per term in sorted order. Nothing
    is written here.
    """
    ordered = page_terms(glossary)
    known = frozenset(ordered)
    documents: Dict[str, str] = {INDEX_PAGE: render_index_page(ordered)}
    for term in ordered:
        fragment = render_definition(
            glossary[term], known, separators, link_separators=link_separators
        )
        documents[page_name(term)] = render_term_page(term, fragment)
        if LOGGER.isEnabledFor(logging.DEBUG):
            LOGGER.debug(
                "Term %s links to %s",
                term,
                linked_terms(
                    glossary[term], known, separators, link_separators=link_separators
                ),
            )
    return documents


def write_site(
    documents: Mapping[str, str], output_dir: Path, encoding: str = "utf-8"
) -> List[Path]:
    output_dir.mkdir(parents=True, exist_ok=True)
    written: List[Path] = []
    for name, document in documents.items():
        path = output_dir / name
        path.write_text(document, encoding=encoding)
        written.append(path)
    LOGGER.info("Wrote %d pages to %s", len(written), output_dir)
    return written


def linked_terms(
    definition: str,
    known_terms: Collection[str],
    separators: AbstractSet[str],
    *,
    link_separators: bool = True,
) -> List[str]:
    found: List[str] = []
    for token, linked in link_tokens(
        definition, known_terms, separators, link_separators=link_separators
    ):
        if linked and token.text not in found:
            found.append(token.text)
    return found
