"""
String casing helpers.
"""

import re

_WORD_SEPARATORS = re.compile(r"[\s\-_.]+")
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_CASE_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


def _check_text(text) -> None:
    if not isinstance(text, str):
        raise TypeError(f"Expected a string, got {type(text).__name__}")


def capitalize(text: str) -> str:
    """Upper-case the first character and leave the rest untouched."""
    _check_text(text)
    return text[:1].upper() + text[1:]


def camel_case(text: str) -> str:
    """
    Convert text to camelCase.

    Words are split on whitespace, '-', '_', '.' and on lower-to-upper case
    changes, so "HTTPServer error" becomes "httpServerError".

    Example:
        camel_case("hello world")  # "helloWorld"
        camel_case("Foo-bar_baz")  # "fooBarBaz"
    """
    _check_text(text)

    spaced = _CASE_BOUNDARY.sub(r"\1 \2", _ACRONYM_BOUNDARY.sub(r"\1 \2", text))
    words = [word for word in _WORD_SEPARATORS.split(spaced) if word]

    if not words:
        return ""

    return words[0].lower() + "".join(word.capitalize() for word in words[1:])
