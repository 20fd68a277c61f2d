"""BED rendering and reading of regions."""

from __future__ import annotations

import dataclasses
from typing import Iterable, Iterator, Optional, TextIO

from .prefix import normalize_path
from .scan import RegionParseError
from .string_region import StringRegion

HEADER_PREFIXES = ("#", "track", "browser")


# ── Writing ──────────────────────────────────────────────────────────────────


def write_bed_entry(
    fp: TextIO, chrom: str, start: int, end: int, name: Optional[str] = None
) -> None:
    """Write a single BED3 line, or BED4 when *name* is given."""
    if name is None:
        fp.write(f"{chrom}\t{start}\t{end}\n")
    else:
        fp.write(f"{chrom}\t{start}\t{end}\t{name}\n")


def string_region_to_bed(region: StringRegion) -> StringRegion:
    """Return a copy of a 1-based, inclusive region in 0-based half-open coordinates."""
    bed = dataclasses.replace(region)
    bed.start_minus()
    return bed


def write_bed_regions(
    fp: TextIO, regions: Iterable[StringRegion], pad: int = 0, one_based: bool = True
) -> int:
    """Write regions as BED4 lines named by their original text.

    Regions are 1-based and inclusive unless *one_based* is False, in which
    case they are already BED coordinates (as from :func:`bed_read_regions`)
    and are written unshifted. Each region is padded by *pad* on both sides
    first. Returns the number of lines written.
    """
    n = 0
    for region in regions:
        bed = string_region_to_bed(region) if one_based else dataclasses.replace(region)
        if pad:
            bed.extend(pad)
        write_bed_entry(fp, bed.path, bed.start, bed.end, name=region.uuid())
        n += 1
    return n


# ── Reading ──────────────────────────────────────────────────────────────────


def bed_read_regions(fp: TextIO, prefix: Optional[str] = None) -> Iterator[StringRegion]:
    """Yield a StringRegion for every BED record in *fp*.

    Coordinates are kept as written, 0-based and half-open; pass the regions
    to :func:`write_bed_regions` with ``one_based=False``.

    Header, comment and blank lines are skipped, as are lines with fewer than
    three columns. When *prefix* is given, contig names go through
    :func:`normalize_path`.
    """
    for lineno, line in enumerate(fp, start=1):
        line = line.rstrip("\n")
        if not line.strip() or line.startswith(HEADER_PREFIXES):
            continue
        if len(line.split()) < 3:
            continue

        try:
            region = StringRegion.parse(line)
        except RegionParseError as exc:
            raise RegionParseError(f"line {lineno}: {exc}") from exc

        if prefix is not None:
            region.path = normalize_path(region.path, prefix)
        yield region
