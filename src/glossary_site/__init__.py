"""Build a cross-linked HTML glossary from a plain text term list."""

from .records import InputFormatError, build_glossary, read_glossary, sorted_keys
from .render import render_definition
from .tokens import DEFAULT_SEPARATORS, iter_tokens, next_token

__all__ = [
    "DEFAULT_SEPARATORS",
    "InputFormatError",
    "build_glossary",
    "iter_tokens",
    "next_token",
    "read_glossary",
    "render_definition",
    "sorted_keys",
]
