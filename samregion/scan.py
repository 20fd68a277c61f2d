"""Scanner for ``path:start-end`` region text.

Two grammars share one scanner. The path is everything before the last ``:``
and the coordinates are split on the first ``-``. Any Unicode decimal digit
matches the grammar, but only ASCII digits convert to a number::

    optional bounds   <path>:<digits>?-?<digits>?
    mandatory bounds  <path>:<digits>-?<digits>

A bare ``chr1``, ``chr1:`` and ``chr1:100`` are optional-bounds text only.
"""

from __future__ import annotations

from typing import Optional

U64_MAX = 0xFFFFFFFFFFFFFFFF

_DIGITS = frozenset("0123456789")


class RegionParseError(ValueError):
    """Region text does not follow the expected grammar."""


def _all_digits(text: str) -> bool:
    return all(c in _DIGITS for c in text)


def _all_decimal(text: str) -> bool:
    return all(c.isdecimal() for c in text)


def parse_u64(text: str) -> int:
    """Parse *text* as an unsigned 64-bit integer.

    Only ASCII digits are accepted (no sign, whitespace or underscores).
    Raises ValueError on failure.
    """
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _all_digits(text):
        raise ValueError(f"invalid digit found in {text!r}")
    value = int(text)
    if value > U64_MAX:
        raise ValueError(f"number too large to fit in 64 bits: {text}")
    return value


def _split(text: str) -> tuple[str, str, str]:
    path, colon, coords = text.rpartition(":")
    if not colon:
        raise RegionParseError(f"Invalid genomic range: {text!r}")
    if not path or "\n" in path:
        raise RegionParseError(f"Invalid genomic range path: {text!r}")

    start, _, end = coords.partition("-")
    if not (_all_decimal(start) and _all_decimal(end)):
        raise RegionParseError(f"Invalid genomic range: {text!r}")
    return path, start, end


def scan_optional(text: str) -> tuple[str, Optional[int], Optional[int]]:
    """Scan optional-bounds text into ``(path, start, end)``.

    A bare path with no ``:`` has neither bound. Bounds that are empty, too
    large for 64 bits, or written in non-ASCII digits come back as None.
    """
    if ":" not in text and text and "\n" not in text:
        return text, None, None
    path, start, end = _split(text)

    def bound(digits: str) -> Optional[int]:
        try:
            return parse_u64(digits)
        except ValueError:
            return None

    return path, bound(start), bound(end)


def scan_required(text: str) -> tuple[str, int, int]:
    """Scan mandatory-bounds text into ``(path, start, end)``."""
    path, start, end = _split(text)
    return path, _required(text, "start", start), _required(text, "end", end)


def scan_columns(text: str) -> Optional[tuple[str, int, int]]:
    """Scan whitespace-separated ``path start end`` text.

    Returns None when *text* has fewer than three columns, so the caller can
    fall back to the colon grammar. Extra columns are ignored.
    """
    columns = text.split()
    if len(columns) < 3:
        return None
    path, start, end = columns[:3]
    return path, _required(text, "start", start), _required(text, "end", end)


def _required(text: str, which: str, digits: str) -> int:
    try:
        return parse_u64(digits)
    except ValueError as exc:
        raise RegionParseError(
            f"Invalid genomic range {text!r}: cannot parse {which} position, {exc}"
        ) from exc
