from collections.abc import Callable
from datetime import datetime, timezone

from filecatalog.catalog.models import CatalogRecord, RecordStatus
from filecatalog.introspection.dispatcher import FormatDispatcher
from filecatalog.introspection.models import ExtractedAttributes
from filecatalog.logging.logger import Log
from filecatalog.storage.models import RawFileContent, StorageLocator


def file_extension(file_name: str) -> str:
    """Lowercased suffix after the last '.', or '' when there is none."""
    if "." not in file_name:
        return ""
    return file_name.rsplit(".", 1)[-1].lower()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MetadataRecordBuilder:
    """Composes decoder output and declared metadata into a CatalogRecord.

    Decoder failures never abort construction: the format-specific fields are
    left empty and the rest of the record is still produced.
    """

    def __init__(
        self,
        dispatcher: FormatDispatcher,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._dispatcher = dispatcher
        self._clock = clock

    def build(
        self,
        content: RawFileContent,
        locator: StorageLocator,
        file_id: str,
    ) -> CatalogRecord:
        extension = file_extension(content.file_name)
        attributes = self._extract(content, extension, file_id)
        declared = content.metadata

        return CatalogRecord(
            file_id=file_id,
            s3_bucket=locator.bucket,
            s3_object_key=locator.key,
            extracted_at=self._clock(),
            status=RecordStatus.ACTIVE,
            file_size=content.size,
            file_type=content.mime_type,
            file_extension=extension,
            number_of_pages=attributes.page_count,
            image_dimensions=attributes.image_dimensions,
            text_content_length=attributes.text_length,
            word_count=attributes.word_count,
            document_type=attributes.document_type,
            archive_type=attributes.archive_type,
            original_filename=declared.get("original_filename"),
            author_name=declared.get("author_name") or None,
            upload_date=declared.get("upload_date") or None,
            expiration_date=declared.get("expiration_date") or None,
            object_metadata=dict(declared),
        )

    def _extract(
        self, content: RawFileContent, extension: str, file_id: str
    ) -> ExtractedAttributes:
        try:
            return self._dispatcher.dispatch(content.data, content.mime_type, extension)
        except Exception as exc:
            Log.warning("Metadata extraction failed", file_id=file_id, error=exc)
            return ExtractedAttributes()
