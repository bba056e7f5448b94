"""
Complex-number literal parsing.

Accepted token forms (tried in this order, whole token must match):
    pure real       "3", "-0.5", ".25"
    pure imaginary  "i", "-i", "2i", "-1.5i"
    binomial        "1+2i", "3-i", "-1.5-0.5i"

Main entrypoints:
    parse_token(token) -> complex | None
    split_and_parse(text) -> list[complex]
"""

from __future__ import annotations

import math
import re
from typing import List, NamedTuple, Optional

# ASCII digits only; float() would otherwise accept other unicode digits
REAL_RE = re.compile(r"-?\d*\.?\d+", re.ASCII)
IMAG_RE = re.compile(r"(-?\d*\.?\d*)i", re.ASCII)
BINOMIAL_RE = re.compile(r"(-?\d*\.?\d+)([-+])(\d*\.?\d*)i", re.ASCII)

SEPARATOR_RE = re.compile(r"[,\s]+")
WHITESPACE_RE = re.compile(r"\s")


class ParsedToken(NamedTuple):
    kind: str
    value: Optional[complex]


UNRECOGNIZED = ParsedToken("unrecognized", None)


def _to_float(s: str) -> Optional[float]:
    """float(s), or None for fragments like '.' / '-.' and overflow to inf."""
    try:
        x = float(s)
    except ValueError:
        return None
    if not math.isfinite(x):
        return None
    return x


def _imag_magnitude(s: str) -> Optional[float]:
    # bare "i" means 1, bare "-i" means -1
    if s == "":
        return 1.0
    if s == "-":
        return -1.0
    return _to_float(s)


def classify_token(token: str) -> ParsedToken:
    """
    Parse one token and report which grammar matched.

    Whitespace anywhere in the token is ignored.
    """
    s = WHITESPACE_RE.sub("", token)

    if REAL_RE.fullmatch(s):
        x = _to_float(s)
        if x is None:
            return UNRECOGNIZED
        return ParsedToken("real", complex(x, 0.0))

    m = IMAG_RE.fullmatch(s)
    if m:
        y = _imag_magnitude(m.group(1))
        if y is None:
            return UNRECOGNIZED
        return ParsedToken("imaginary", complex(0.0, y))

    m = BINOMIAL_RE.fullmatch(s)
    if m:
        x = _to_float(m.group(1))
        sign = 1.0 if m.group(2) == "+" else -1.0
        mag = _imag_magnitude(m.group(3))
        if x is None or mag is None:
            return UNRECOGNIZED
        return ParsedToken("binomial", complex(x, sign * mag))

    return UNRECOGNIZED


def parse_token(token: str) -> Optional[complex]:
    """Return the complex value of `token`, or None if it is not a literal."""
    return classify_token(token).value


def split_tokens(text: str) -> List[str]:
    """Split text into tokens: non-blank lines, then comma/whitespace runs."""
    tokens = []
    for line in text.split("\n"):
        if not line.strip():
            continue
        tokens.extend(part for part in SEPARATOR_RE.split(line) if part.strip())
    return tokens


def split_and_parse(text: str) -> List[complex]:
    """
    Parse every literal in `text`, in reading order.

    Tokens that are not valid literals are dropped without notice.
    """
    values = []
    for token in split_tokens(text):
        value = parse_token(token)
        if value is not None:
            values.append(value)
    return values
