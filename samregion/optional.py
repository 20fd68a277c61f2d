"""Regions whose start and end bounds may be missing (``chr1``, ``chr1:100``)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .prefix import normalize_path
from .scan import scan_optional


@dataclass
class OptionalRegion:
    """A path with zero, one or two coordinate bounds, in the order given."""

    path: str
    start: Optional[int] = None
    end: Optional[int] = None

    @classmethod
    def parse(cls, text: str) -> OptionalRegion:
        """Parse ``path:start-end`` text where both bounds are optional.

        Bounds that cannot be read as unsigned 64-bit integers are left as
        None rather than failing the parse.
        """
        path, start, end = scan_optional(text)
        return cls(path=path, start=start, end=end)

    @classmethod
    def parse_with_prefix(cls, text: str, prefix: str) -> OptionalRegion:
        """Like :meth:`parse`, with the path run through :func:`normalize_path`."""
        path, start, end = scan_optional(text)
        return cls(path=normalize_path(path, prefix), start=start, end=end)

    def interval(self) -> Optional[int]:
        """Distance between the bounds, or None unless both are present."""
        if self.start is None or self.end is None:
            return None
        return abs(self.end - self.start)

    def inverted(self) -> Optional[bool]:
        """Whether the bounds were given end-first, or None unless both are present."""
        if self.start is None or self.end is None:
            return None
        return self.start > self.end

    def uuid(self) -> str:
        return str(self)

    def __str__(self) -> str:
        if self.start is None:
            return self.path
        if self.end is None:
            return f"{self.path}:{self.start}"
        return f"{self.path}:{self.start}-{self.end}"
