from __future__ import annotations

import html
import re

import pytest

from glossary_site.render import link_tokens, render_definition, term_href
from glossary_site.tokens import DEFAULT_SEPARATORS

TAG_RE = re.compile(r"</?a[^>]*>")
SEPARATORS = frozenset({" ", "."})


def plain_text(fragment: str) -> str:
    return html.unescape(TAG_RE.sub("", fragment))


def test_link_tokens_marks_full_matches() -> None:
    flagged = link_tokens("Java is like Python.", {"Java", "Python"}, SEPARATORS)

    assert [(token.text, linked) for token, linked in flagged] == [
        ("Java", True),
        (" ", False),
        ("is", False),
        (" ", False),
        ("like", False),
        (" ", False),
        ("Python", True),
        (".", False),
    ]


def test_render_definition_links_terms() -> None:
    fragment = render_definition("Java is like Python.", {"Java", "Python"}, SEPARATORS)

    assert fragment == (
        '<a href="Java.html">Java</a> is like <a href="Python.html">Python</a>.'
    )


def test_matching_is_case_sensitive_and_whole_token() -> None:
    fragment = render_definition("java JavaScript Java", {"Java"}, SEPARATORS)

    assert fragment == 'java JavaScript <a href="Java.html">Java</a>'


def test_term_spanning_a_separator_is_not_linked() -> None:
    known = {"New York"}

    assert render_definition("New York.", known, SEPARATORS) == "New York."


def test_separator_run_equal_to_term_is_linked_by_default() -> None:
    fragment = render_definition("a. b", {". "}, SEPARATORS)

    assert fragment == 'a<a href=".%20.html">. </a>b'


def test_separator_links_can_be_disabled() -> None:
    fragment = render_definition("a. b", {". ", "a"}, SEPARATORS, link_separators=False)

    assert fragment == '<a href="a.html">a</a>. b'


def test_markup_is_escaped() -> None:
    fragment = render_definition("x < y & C#", {"C#"}, DEFAULT_SEPARATORS)

    assert fragment == 'x &lt; y &amp; <a href="C%23.html">C#</a>'


def test_term_href_quotes_special_characters() -> None:
    assert term_href("Java") == "Java.html"
    assert term_href("C#") == "C%23.html"


def test_empty_definition() -> None:
    assert render_definition("", {"Java"}, SEPARATORS) == ""


@pytest.mark.parametrize(
    "definition",
    [
        "Java is like Python.",
        "  Java,Java;Java:  ",
        "<b>Java</b> & \"Python\" 'quotes'",
        "nothing to link here",
    ],
)
def test_round_trip_reconstructs_definition(definition: str) -> None:
    fragment = render_definition(definition, {"Java", "Python", " "}, DEFAULT_SEPARATORS)

    assert plain_text(fragment) == definition
