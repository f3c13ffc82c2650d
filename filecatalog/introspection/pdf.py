from filecatalog.introspection.byte_cursor import ByteCursor

PDF_EOF_MARKER = b"%%EOF"


class PdfPageEstimator:
    """Estimates page count by counting %%EOF trailer markers.

    This is a heuristic: incrementally updated files carry one marker per
    revision, and files without a trailer yield no count at all.
    """

    def estimate(self, cursor: ByteCursor) -> int | None:
        count = sum(1 for _ in cursor.find_all(PDF_EOF_MARKER))
        return count or None
