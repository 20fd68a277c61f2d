"""Contig-name prefix handling."""

from __future__ import annotations

DEFAULT_PREFIX = "chr"


def _strip_chr(name: str) -> str:
    return name[len(DEFAULT_PREFIX):] if name.startswith(DEFAULT_PREFIX) else name


def normalize_path(path: str, prefix: str) -> str:
    """Normalize the leading *prefix* of a region path.

    An empty *prefix* strips a literal ``chr``. Otherwise *prefix* is stripped,
    and put back if what is left is shorter than the prefix itself, so
    ``chr1`` stays ``chr1`` while ``chrUn_123`` becomes ``Un_123``.
    """
    if not prefix:
        return _strip_chr(path)

    if path.startswith(prefix):
        path = path[len(prefix):]
    if len(path) < len(prefix):
        return prefix + path
    return path


def toggle_chr(name: str) -> str:
    """Return *name* with a leading 'chr' removed, or added if absent."""
    if name.startswith(DEFAULT_PREFIX):
        return name[len(DEFAULT_PREFIX):]
    return DEFAULT_PREFIX + name
