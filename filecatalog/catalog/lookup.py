import re
from datetime import datetime, timezone
from typing import Any

from filecatalog.catalog.exceptions import (
    CatalogRecordNotFoundError,
    FileExpiredError,
    FileUnavailableError,
    InvalidFileIdError,
)
from filecatalog.catalog.models import CatalogRecord, RecordStatus
from filecatalog.database.repositories.catalog_repository import CatalogRepository
from filecatalog.logging.logger import Log

FILE_ID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}", re.IGNORECASE
)


def _parse_timestamp(value: str) -> datetime:
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def public_view(record: CatalogRecord) -> dict[str, Any]:
    """Fields of a record that may be shown to clients; storage fields are omitted."""
    dimensions = record.image_dimensions
    return {
        "file_id": record.file_id,
        "original_filename": record.original_filename,
        "file_size": record.file_size,
        "mime_type": record.file_type,
        "file_extension": record.file_extension,
        "author_name": record.author_name,
        "number_of_pages": record.number_of_pages,
        "image_dimensions": (
            {"width": dimensions.width, "height": dimensions.height}
            if dimensions is not None
            else None
        ),
        "text_content_length": record.text_content_length,
        "word_count": record.word_count,
        "document_type": record.document_type,
        "archive_type": record.archive_type,
        "expiration_date": record.expiration_date,
        "upload_date": record.upload_date,
        "status": record.status.value,
    }


class CatalogLookup:
    """Read side of the catalog: returns records that are still available."""

    def __init__(self, repository: CatalogRepository) -> None:
        self._repository = repository

    def get_available(self, file_id: str, now: datetime | None = None) -> dict[str, Any]:
        """Load the public view of an active, unexpired record.

        Raises:
            InvalidFileIdError: if file_id is not a UUID.
            CatalogRecordNotFoundError: if no record has this id.
            FileUnavailableError: if the record is not active.
            FileExpiredError: if the record's expiration date has passed.
        """
        if not FILE_ID_PATTERN.fullmatch(file_id):
            raise InvalidFileIdError(f"Invalid file_id '{file_id}': must be a valid UUID")

        record = self._repository.find_by_id(file_id)
        if record is None:
            raise CatalogRecordNotFoundError(f"File {file_id} not found")

        if record.status != RecordStatus.ACTIVE:
            raise FileUnavailableError(
                f"File {file_id} is no longer available (status: {record.status.value})"
            )

        if record.expiration_date and self._is_expired(record.expiration_date, now):
            raise FileExpiredError(f"File {file_id} expired at {record.expiration_date}")

        return public_view(record)

    def _is_expired(self, expiration_date: str, now: datetime | None) -> bool:
        """Unparseable expiration dates never expire a record."""
        try:
            expires_at = _parse_timestamp(expiration_date)
        except ValueError:
            Log.warning("Ignoring unparseable expiration date", value=expiration_date)
            return False
        return expires_at <= (now or datetime.now(timezone.utc))
