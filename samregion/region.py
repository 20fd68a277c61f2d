"""Numeric regions keyed by reference id."""

from __future__ import annotations

from typing import Callable, Optional

from .scan import scan_required
from .string_region import RegionInvariantError, StringRegion, check_order, check_u64

# Maps a reference name to its numeric id, or None when the name is unknown.
ToId = Callable[[str], Optional[int]]


class ReferenceNotFoundError(LookupError):
    """A region path has no reference id."""


class Region:
    """Half-open interval ``[start, end)`` on reference ``ref_id``.

    ``ref_id`` is 0-based. ``start <= end`` holds for every live instance;
    breaking it raises :class:`RegionInvariantError`.
    """

    __slots__ = ("_ref_id", "_start", "_end")

    def __init__(self, ref_id: int, start: int, end: int) -> None:
        check_u64("ref_id", ref_id)
        check_u64("start", start)
        check_u64("end", end)
        check_order(start, end)
        self._ref_id = ref_id
        self._start = start
        self._end = end

    @classmethod
    def convert(cls, region: StringRegion, to_id: ToId) -> Region:
        """Resolve ``region.path`` with *to_id*; orientation is not kept."""
        ref_id = to_id(region.path)
        if ref_id is None:
            raise ReferenceNotFoundError(
                f"Reference id is not recognized: {region.path!r}"
            )
        return cls(ref_id, region.start, region.end)

    @classmethod
    def parse(cls, text: str, to_id: ToId) -> Region:
        """Parse ``path:start-end`` text and resolve the path in one step.

        End-first bounds are put in order, as :class:`StringRegion` does.
        """
        return cls.convert(StringRegion(*scan_required(text)), to_id)

    @property
    def ref_id(self) -> int:
        return self._ref_id

    @ref_id.setter
    def ref_id(self, value: int) -> None:
        check_u64("ref_id", value)
        self._ref_id = value

    @property
    def start(self) -> int:
        return self._start

    @start.setter
    def start(self, value: int) -> None:
        check_u64("start", value)
        check_order(value, self._end)
        self._start = value

    @property
    def end(self) -> int:
        return self._end

    @end.setter
    def end(self, value: int) -> None:
        check_u64("end", value)
        check_order(self._start, value)
        self._end = value

    @property
    def length(self) -> int:
        return self._end - self._start

    def contains(self, ref_id: int, pos: int) -> bool:
        """Whether position *pos* on *ref_id* falls inside ``[start, end)``."""
        return self._ref_id == ref_id and self._start <= pos < self._end

    def include(self, other: Region) -> bool:
        """Whether *other* sits inside this region, ending strictly before ``end``.

        A region does not include an identical copy of itself.
        """
        return (
            self._ref_id == other._ref_id
            and self._start <= other._start
            and other._end < self._end
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Region):
            return NotImplemented
        return (self._ref_id, self._start, self._end) == (other._ref_id, other._start, other._end)

    def __repr__(self) -> str:
        return f"Region(ref_id={self._ref_id}, start={self._start}, end={self._end})"
