from collections.abc import Callable
from enum import Enum

from filecatalog.introspection.base import BaseDimensionDecoder
from filecatalog.introspection.byte_cursor import ByteCursor
from filecatalog.introspection.jpeg import JpegDimensionDecoder
from filecatalog.introspection.models import ExtractedAttributes
from filecatalog.introspection.pdf import PdfPageEstimator
from filecatalog.introspection.png import PngDimensionDecoder
from filecatalog.introspection.text import TextStatsAnalyzer

OFFICE_DOCUMENT_EXTENSIONS = frozenset({"doc", "docx", "xls", "xlsx", "ppt", "pptx"})
ARCHIVE_EXTENSIONS = frozenset({"zip", "rar", "7z", "tar", "gz"})
OFFICE_DOCUMENT_TYPE = "office_document"


class FormatFamily(str, Enum):
    PDF = "pdf"
    IMAGE = "image"
    TEXT = "text"
    OFFICE_DOCUMENT = "office_document"
    ARCHIVE = "archive"
    UNKNOWN = "unknown"


def classify(mime_type: str | None, extension: str) -> FormatFamily:
    """Pick the single format family for a declared MIME type and extension.

    Rules are checked in precedence order and the first match wins, so every
    input maps to exactly one family.
    """
    mime = (mime_type or "").lower()
    if mime == "application/pdf" or extension == "pdf":
        return FormatFamily.PDF
    if mime.startswith("image/"):
        return FormatFamily.IMAGE
    if mime.startswith("text/") or extension == "txt":
        return FormatFamily.TEXT
    if extension in OFFICE_DOCUMENT_EXTENSIONS:
        return FormatFamily.OFFICE_DOCUMENT
    if extension in ARCHIVE_EXTENSIONS:
        return FormatFamily.ARCHIVE
    return FormatFamily.UNKNOWN


Extractor = Callable[[bytes, str], ExtractedAttributes]


class FormatDispatcher:
    """Routes file content to the extractor registered for its format family."""

    def __init__(
        self,
        image_decoders: list[BaseDimensionDecoder] | None = None,
        pdf_estimator: PdfPageEstimator | None = None,
        text_analyzer: TextStatsAnalyzer | None = None,
    ) -> None:
        self._image_decoders = (
            image_decoders
            if image_decoders is not None
            else [PngDimensionDecoder(), JpegDimensionDecoder()]
        )
        self._pdf_estimator = pdf_estimator or PdfPageEstimator()
        self._text_analyzer = text_analyzer or TextStatsAnalyzer()
        self.extractors: dict[FormatFamily, Extractor] = {
            FormatFamily.PDF: self._extract_pdf,
            FormatFamily.IMAGE: self._extract_image,
            FormatFamily.TEXT: self._extract_text,
            FormatFamily.OFFICE_DOCUMENT: self._extract_office_document,
            FormatFamily.ARCHIVE: self._extract_archive,
            FormatFamily.UNKNOWN: self._extract_nothing,
        }

    def dispatch(
        self, data: bytes, mime_type: str | None, extension: str
    ) -> ExtractedAttributes:
        """Run the extractor for the content's format family.

        Raises:
            DecodeAnomaly: if a decoder recognizes the format but cannot read it.
        """
        family = classify(mime_type, extension)
        return self.extractors[family](data, extension)

    def _extract_pdf(self, data: bytes, extension: str) -> ExtractedAttributes:
        return ExtractedAttributes(page_count=self._pdf_estimator.estimate(ByteCursor(data)))

    def _extract_image(self, data: bytes, extension: str) -> ExtractedAttributes:
        cursor = ByteCursor(data)
        for decoder in self._image_decoders:
            dimensions = decoder.decode(cursor)
            if dimensions is not None:
                return ExtractedAttributes(image_dimensions=dimensions)
        return ExtractedAttributes()

    def _extract_text(self, data: bytes, extension: str) -> ExtractedAttributes:
        stats = self._text_analyzer.analyze(data)
        return ExtractedAttributes(text_length=stats.text_length, word_count=stats.word_count)

    def _extract_office_document(self, data: bytes, extension: str) -> ExtractedAttributes:
        return ExtractedAttributes(document_type=OFFICE_DOCUMENT_TYPE)

    def _extract_archive(self, data: bytes, extension: str) -> ExtractedAttributes:
        return ExtractedAttributes(archive_type=extension)

    def _extract_nothing(self, data: bytes, extension: str) -> ExtractedAttributes:
        return ExtractedAttributes()
