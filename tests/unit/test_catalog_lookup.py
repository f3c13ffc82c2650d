from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from filecatalog.catalog.exceptions import (
    CatalogRecordNotFoundError,
    FileExpiredError,
    FileUnavailableError,
    InvalidFileIdError,
)
from filecatalog.catalog.lookup import CatalogLookup
from filecatalog.catalog.models import CatalogRecord, RecordStatus
from filecatalog.database.repositories.catalog_repository import CatalogRepository

FILE_ID = "550e8400-e29b-41d4-a716-446655440000"
NOW = datetime(2025, 6, 1, tzinfo=timezone.utc)


def _make_record(**overrides: object) -> CatalogRecord:
    fields: dict[str, object] = {
        "file_id": FILE_ID,
        "s3_bucket": "uploads",
        "s3_object_key": f"{FILE_ID}.pdf",
        "extracted_at": NOW,
        "file_size": 1024,
        "file_type": "application/pdf",
        "file_extension": "pdf",
        "number_of_pages": 1,
        "original_filename": "report.pdf",
        "author_name": "Ada",
    }
    fields.update(overrides)
    return CatalogRecord(**fields)  # type: ignore[arg-type]


def _make_lookup(record: CatalogRecord | None) -> CatalogLookup:
    repo = MagicMock(spec=CatalogRepository)
    repo.find_by_id.return_value = record
    return CatalogLookup(repo)


class TestGetAvailable:
    def test_returns_public_view(self) -> None:
        view = _make_lookup(_make_record()).get_available(FILE_ID, now=NOW)

        assert view["file_id"] == FILE_ID
        assert view["mime_type"] == "application/pdf"
        assert view["number_of_pages"] == 1
        assert view["status"] == "active"
        assert "s3_bucket" not in view
        assert "s3_object_key" not in view

    def test_rejects_non_uuid(self) -> None:
        with pytest.raises(InvalidFileIdError, match="valid UUID"):
            _make_lookup(_make_record()).get_available("not-a-uuid", now=NOW)

    def test_raises_when_missing(self) -> None:
        with pytest.raises(CatalogRecordNotFoundError, match=FILE_ID):
            _make_lookup(None).get_available(FILE_ID, now=NOW)

    def test_raises_when_deleted(self) -> None:
        lookup = _make_lookup(_make_record(status=RecordStatus.DELETED))
        with pytest.raises(FileUnavailableError, match="deleted"):
            lookup.get_available(FILE_ID, now=NOW)

    def test_raises_when_expired(self) -> None:
        lookup = _make_lookup(_make_record(expiration_date="2025-05-31T00:00:00Z"))
        with pytest.raises(FileExpiredError):
            lookup.get_available(FILE_ID, now=NOW)

    def test_future_expiration_is_available(self) -> None:
        lookup = _make_lookup(_make_record(expiration_date="2025-12-31T00:00:00Z"))
        view = lookup.get_available(FILE_ID, now=NOW)
        assert view["expiration_date"] == "2025-12-31T00:00:00Z"

    def test_unparseable_expiration_is_available(self) -> None:
        lookup = _make_lookup(_make_record(expiration_date="next week"))
        view = lookup.get_available(FILE_ID, now=NOW)
        assert view["expiration_date"] == "next week"

    def test_uppercase_id_is_accepted(self) -> None:
        view = _make_lookup(_make_record()).get_available(FILE_ID.upper(), now=NOW)
        assert view["status"] == "active"


class TestFileIdFormat:
    @pytest.mark.parametrize(
        "file_id",
        [
            "550e8400e29b41d4a716446655440000",
            "{550e8400-e29b-41d4-a716-446655440000}",
            "urn:uuid:550e8400-e29b-41d4-a716-446655440000",
            "550e8400-e29b-41d4-a716-446655440000\n",
        ],
    )
    def test_rejects_non_canonical_forms(self, file_id: str) -> None:
        repo = MagicMock(spec=CatalogRepository)

        with pytest.raises(InvalidFileIdError):
            CatalogLookup(repo).get_available(file_id, now=NOW)

        repo.find_by_id.assert_not_called()
