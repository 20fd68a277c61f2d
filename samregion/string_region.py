"""Regions with two coordinate bounds that remember their original orientation."""

from __future__ import annotations

from dataclasses import dataclass

from .prefix import normalize_path
from .scan import U64_MAX, scan_columns, scan_required


class CoordinateUnderflowError(ArithmeticError):
    """A coordinate would drop below zero."""


class RegionInvariantError(AssertionError):
    """A region was built or changed so that ``start > end``."""


def check_u64(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= U64_MAX:
        raise RegionInvariantError(f"Region: {name} must be an unsigned 64-bit integer ({value!r})")


def check_order(start: int, end: int) -> None:
    if start > end:
        raise RegionInvariantError(
            f"Region: start should not be greater than end ({start} > {end})"
        )


@dataclass
class StringRegion:
    """Named region with ``start <= end``.

    Bounds given end-first (``chr1:200-100``) are swapped on construction and
    ``inverted`` is set, so :meth:`left`/:meth:`right` and the text form keep
    the original orientation while ``start``/``end`` are always ordered.
    Bounds must be unsigned 64-bit integers; assigning one that breaks
    ``start <= end`` raises :class:`RegionInvariantError`.
    """

    path: str
    start: int
    end: int
    inverted: bool = False

    def __post_init__(self) -> None:
        if self.start > self.end:
            self.start, self.end = self.end, self.start
            self.inverted = True
        object.__setattr__(self, "_ordered", True)

    def __setattr__(self, name: str, value: object) -> None:
        if name in ("start", "end"):
            check_u64(name, value)
            if self.__dict__.get("_ordered"):
                if name == "start":
                    check_order(value, self.end)
                else:
                    check_order(self.start, value)
        super().__setattr__(name, value)

    @classmethod
    def parse(cls, text: str) -> StringRegion:
        """Parse ``chr1 100 200`` or ``chr1:100-200`` text.

        Whitespace-separated columns are tried first whenever there are at
        least three of them; otherwise the colon/dash form is required.
        """
        columns = scan_columns(text)
        if columns is not None:
            return cls(*columns)
        return cls(*scan_required(text))

    @classmethod
    def parse_with_prefix(cls, text: str, prefix: str) -> StringRegion:
        """Parse colon/dash text only, normalizing the path's *prefix*."""
        path, start, end = scan_required(text)
        return cls(normalize_path(path, prefix), start, end)

    def interval(self) -> int:
        return self.end - self.start

    def left(self) -> int:
        """First bound as written."""
        return self.end if self.inverted else self.start

    def right(self) -> int:
        """Second bound as written."""
        return self.start if self.inverted else self.end

    def extend(self, length: int) -> None:
        """Pad both sides by *length*; ``start`` stops at zero."""
        if length < 0:
            raise OverflowError(f"Padding length must be non-negative: {length}")
        end = self.end + length
        if end > U64_MAX:
            raise OverflowError(f"Region end overflows 64 bits: {self.end} + {length}")
        self.start = max(0, self.start - length)
        self.end = end

    def start_minus(self) -> None:
        """Shift ``start`` down by one, turning a 1-based start into a BED start."""
        if self.start == 0:
            raise CoordinateUnderflowError(f"Region start is already 0: {self}")
        self.start -= 1

    def uuid(self) -> str:
        return str(self)

    def __str__(self) -> str:
        return f"{self.path}:{self.left()}-{self.right()}"
