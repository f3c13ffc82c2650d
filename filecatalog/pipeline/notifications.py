from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from urllib.parse import unquote_plus

from filecatalog.pipeline.exceptions import InvalidNotificationError
from filecatalog.storage.models import StorageLocator


@dataclass(frozen=True)
class NotificationRecord:
    """One storage-change event pointing at a single object."""

    bucket: str
    key: str

    @property
    def locator(self) -> StorageLocator:
        return StorageLocator(bucket=self.bucket, key=self.key)

    @property
    def file_name(self) -> str:
        return self.key.rsplit("/", 1)[-1]

    @property
    def file_id(self) -> str:
        """File name up to the first '.'; stable for a given key."""
        return self.file_name.split(".", 1)[0]


def decode_object_key(raw_key: str) -> str:
    """Undo notification key encoding: '+' becomes a space, then %XX escapes."""
    return unquote_plus(raw_key)


def parse_notification_batch(event: Mapping[str, Any]) -> list[NotificationRecord]:
    """Turn an S3-style event into notification records, preserving order.

    Raises:
        InvalidNotificationError: if a record lacks a bucket name or object key.
    """
    records: list[NotificationRecord] = []
    for index, raw in enumerate(event.get("Records") or []):
        try:
            bucket = raw["s3"]["bucket"]["name"]
            key = raw["s3"]["object"]["key"]
        except (KeyError, TypeError) as exc:
            raise InvalidNotificationError(
                f"Notification record {index} has no bucket/key: {exc}"
            ) from exc
        records.append(NotificationRecord(bucket=bucket, key=decode_object_key(key)))
    return records
