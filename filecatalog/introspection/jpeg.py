from filecatalog.introspection.base import BaseDimensionDecoder
from filecatalog.introspection.byte_cursor import ByteCursor
from filecatalog.introspection.models import ImageDimensions

JPEG_SOI = b"\xff\xd8"
# Baseline start-of-frame only; progressive (FF C2) is not recognized.
JPEG_SOF0 = b"\xff\xc0"


class JpegDimensionDecoder(BaseDimensionDecoder):
    """Reads dimensions from the first baseline start-of-frame segment."""

    def decode(self, cursor: ByteCursor) -> ImageDimensions | None:
        if not cursor.startswith(JPEG_SOI):
            return None
        for offset in cursor.find_all(JPEG_SOF0, start=len(JPEG_SOI)):
            return ImageDimensions(
                width=cursor.uint16_be_at(offset + 7),
                height=cursor.uint16_be_at(offset + 5),
            )
        return None
