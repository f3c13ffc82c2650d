from filecatalog.introspection.byte_cursor import ByteCursor
from filecatalog.introspection.dispatcher import FormatDispatcher, FormatFamily, classify
from filecatalog.introspection.models import ExtractedAttributes, ImageDimensions, TextStats

__all__ = [
    "ByteCursor",
    "ExtractedAttributes",
    "FormatDispatcher",
    "FormatFamily",
    "ImageDimensions",
    "TextStats",
    "classify",
]
