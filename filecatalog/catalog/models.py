from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from filecatalog.introspection.models import ImageDimensions


class RecordStatus(str, Enum):
    ACTIVE = "active"
    DELETED = "deleted"
    EXPIRED = "expired"


@dataclass(frozen=True)
class CatalogRecord:
    """Catalog entry for one stored object, keyed by file_id."""

    file_id: str
    s3_bucket: str
    s3_object_key: str
    extracted_at: datetime
    file_size: int
    file_type: str
    file_extension: str
    status: RecordStatus = RecordStatus.ACTIVE
    number_of_pages: int | None = None
    image_dimensions: ImageDimensions | None = None
    text_content_length: int | None = None
    word_count: int | None = None
    document_type: str | None = None
    archive_type: str | None = None
    original_filename: str | None = None
    author_name: str | None = None
    upload_date: str | None = None
    expiration_date: str | None = None
    object_metadata: dict[str, str] = field(default_factory=dict)
