"""String case conversion for template expressions.

Every function here is total and maps the empty string to the empty string.
``kebab``, ``snake``, ``constant`` and ``title`` keep a word separator in
their output and are idempotent: ``f(f(x)) == f(x)``.  Input is split into
words on any non-alphanumeric character and on camel-case boundaries, so
``"my-plugin"``, ``"my_plugin"``, ``"My Plugin"`` and ``"myPlugin"`` all
produce the same words.
"""

from __future__ import annotations

import re

__all__ = [
    "CASE_FUNCTIONS",
    "camel",
    "constant",
    "kebab",
    "pascal",
    "snake",
    "split_words",
    "title",
]


_NON_ALNUM = re.compile(r"[^A-Za-z0-9]+")
# "HTTPServer" -> "HTTP Server"
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
# "myPlugin" -> "my Plugin"
_LOWER_UPPER_BOUNDARY = re.compile(r"([a-z])([A-Z])")
# "v2Beta" -> "v2 Beta"
_DIGIT_WORD_BOUNDARY = re.compile(r"([0-9])([A-Z][a-z])")


def split_words(value: str) -> list[str]:
    """Split *value* into its words, preserving the original letter case."""
    words: list[str] = []
    for chunk in _NON_ALNUM.split(str(value)):
        if not chunk:
            continue
        chunk = _ACRONYM_BOUNDARY.sub(r"\1 \2", chunk)
        chunk = _LOWER_UPPER_BOUNDARY.sub(r"\1 \2", chunk)
        chunk = _DIGIT_WORD_BOUNDARY.sub(r"\1 \2", chunk)
        words.extend(chunk.split())
    return words


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def kebab(value: str) -> str:
    """``"My Plugin"`` -> ``"my-plugin"``."""
    return "-".join(word.lower() for word in split_words(value))


def snake(value: str) -> str:
    """``"My Plugin"`` -> ``"my_plugin"``."""
    return "_".join(word.lower() for word in split_words(value))


def constant(value: str) -> str:
    """``"my-plugin"`` -> ``"MY_PLUGIN"``."""
    return "_".join(word.upper() for word in split_words(value))


def title(value: str) -> str:
    """``"my-plugin"`` -> ``"My Plugin"``."""
    return " ".join(_capitalize(word) for word in split_words(value))


def pascal(value: str) -> str:
    """``"my-plugin"`` -> ``"MyPlugin"``."""
    return "".join(_capitalize(word) for word in split_words(value))


def camel(value: str) -> str:
    """``"my-plugin"`` -> ``"myPlugin"``."""
    result = pascal(value)
    return result[:1].lower() + result[1:]


CASE_FUNCTIONS = {
    "kebab": kebab,
    "snake": snake,
    "constant": constant,
    "title": title,
    "pascal": pascal,
    "camel": camel,
}
