from abc import ABC, abstractmethod

from filecatalog.introspection.byte_cursor import ByteCursor
from filecatalog.introspection.models import ImageDimensions


class BaseDimensionDecoder(ABC):
    """Contract for image decoders that read width/height from a header."""

    @abstractmethod
    def decode(self, cursor: ByteCursor) -> ImageDimensions | None:
        """Read image dimensions from raw bytes.

        Args:
            cursor: Bounds-checked reader over the file content.

        Returns:
            The dimensions, or None if the buffer is not in this format.

        Raises:
            DecodeAnomaly: if the header is recognized but truncated.
        """
