"""samregion - parsing and arithmetic for samtools-style genomic regions."""

from .optional import OptionalRegion
from .region import ReferenceNotFoundError, Region
from .scan import RegionParseError
from .string_region import CoordinateUnderflowError, RegionInvariantError, StringRegion

__version__ = "0.1.0"

__all__ = [
    "CoordinateUnderflowError",
    "OptionalRegion",
    "ReferenceNotFoundError",
    "Region",
    "RegionInvariantError",
    "RegionParseError",
    "StringRegion",
    "__version__",
]
