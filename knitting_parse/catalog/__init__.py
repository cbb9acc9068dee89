from .types import ALLOWED_WIDTHS, Stitch, StitchEntry
from .registry import StitchCatalog, get_catalog, line_width, width

__all__ = [
    "Stitch",
    "StitchEntry",
    "ALLOWED_WIDTHS",
    "StitchCatalog",
    "get_catalog",
    "width",
    "line_width",
]
