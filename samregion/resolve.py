"""Reference-name resolvers for :meth:`Region.convert` and :meth:`Region.parse`."""

from __future__ import annotations

import sys
from typing import Mapping, Optional, Sequence, Union

import pysam

from .prefix import toggle_chr
from .region import ToId


def mapping_resolver(names: Union[Mapping[str, int], Sequence[str]]) -> ToId:
    """Build a name -> id lookup from a mapping, or from names in id order.

    Names missing verbatim are retried with a leading 'chr' toggled.
    """
    if isinstance(names, Mapping):
        ids = dict(names)
    else:
        ids = {name: i for i, name in enumerate(names)}

    def to_id(name: str) -> Optional[int]:
        if name in ids:
            return ids[name]
        return ids.get(toggle_chr(name))

    return to_id


def resolve_contig_name(header: pysam.AlignmentHeader, contig: str) -> str | None:
    """Resolve *contig* against a BAM header, trying chr-prefix variants.

    Returns the matching name from the header, or None.
    """
    references = set(header.references)

    if contig in references:
        return contig

    alt = toggle_chr(contig)
    if alt in references:
        print(f"Note: Using contig '{alt}' (matched from '{contig}')", file=sys.stderr)
        return alt

    return None


def header_resolver(header: pysam.AlignmentHeader) -> ToId:
    """Build a name -> tid lookup over the references of an alignment header."""

    def to_id(name: str) -> Optional[int]:
        resolved = resolve_contig_name(header, name)
        if resolved is None:
            return None
        return header.get_tid(resolved)

    return to_id
