from dataclasses import dataclass


@dataclass(frozen=True)
class ImageDimensions:
    width: int
    height: int


@dataclass(frozen=True)
class TextStats:
    text_length: int
    word_count: int


@dataclass(frozen=True)
class ExtractedAttributes:
    """Format-specific facts; every field is None when not applicable."""

    page_count: int | None = None
    image_dimensions: ImageDimensions | None = None
    text_length: int | None = None
    word_count: int | None = None
    document_type: str | None = None
    archive_type: str | None = None
