from typing import Any

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from filecatalog.config.settings import Settings
from filecatalog.storage.base import BaseObjectStore
from filecatalog.storage.exceptions import RetrievalError
from filecatalog.storage.models import DEFAULT_CONTENT_TYPE, RawFileContent, StorageLocator


def create_s3_client(settings: Settings) -> Any:
    """Build a boto3 S3 client; path-style addressing keeps LocalStack working."""
    return boto3.client(
        "s3",
        region_name=settings.aws_region,
        endpoint_url=settings.s3_endpoint_url or None,
        aws_access_key_id=settings.aws_access_key_id or None,
        aws_secret_access_key=settings.aws_secret_access_key or None,
        config=Config(s3={"addressing_style": "path"}),
    )


class S3ObjectStore(BaseObjectStore):
    """Reads objects from S3 (or an S3-compatible endpoint) via boto3."""

    def __init__(self, client: Any) -> None:
        self._client = client

    def fetch(self, locator: StorageLocator) -> RawFileContent:
        try:
            response = self._client.get_object(Bucket=locator.bucket, Key=locator.key)
            data = response["Body"].read()
        except (ClientError, BotoCoreError) as exc:
            raise RetrievalError(
                f"Failed to read s3://{locator.bucket}/{locator.key}: {exc}"
            ) from exc

        return RawFileContent(
            data=data,
            file_name=locator.file_name,
            mime_type=response.get("ContentType") or DEFAULT_CONTENT_TYPE,
            metadata=dict(response.get("Metadata") or {}),
        )
