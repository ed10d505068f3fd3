import re
from typing import Iterable

_WHITESPACE_RUN = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE_RUN.sub(" ", text).strip()


def assemble(fragments: Iterable[str]) -> str:
    """Join matched fragment strings in their given order into one line.

    Fragments are joined with a single space, then every whitespace run is
    collapsed so the result has no double or leading/trailing blanks.
    An empty input yields "".
    """
    return collapse_whitespace(" ".join(fragments))
