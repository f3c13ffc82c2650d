from filecatalog.introspection.base import BaseDimensionDecoder
from filecatalog.introspection.byte_cursor import ByteCursor
from filecatalog.introspection.models import ImageDimensions

PNG_SIGNATURE_PREFIX = b"\x89PNG"
# 8-byte signature + IHDR length/type + width + height
PNG_MIN_HEADER_LENGTH = 24


class PngDimensionDecoder(BaseDimensionDecoder):
    """Reads IHDR width/height at fixed offsets 16 and 20.

    Only the first four signature bytes are checked and the IHDR chunk is
    assumed to follow the signature directly; no chunk validation is done.
    """

    def decode(self, cursor: ByteCursor) -> ImageDimensions | None:
        if not cursor.startswith(PNG_SIGNATURE_PREFIX):
            return None
        if len(cursor) < PNG_MIN_HEADER_LENGTH:
            return None
        return ImageDimensions(
            width=cursor.uint32_be_at(16),
            height=cursor.uint32_be_at(20),
        )
