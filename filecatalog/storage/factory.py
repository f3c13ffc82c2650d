from pathlib import Path

from filecatalog.config.settings import Settings
from filecatalog.storage.base import BaseObjectStore
from filecatalog.storage.exceptions import UnsupportedObjectStoreError
from filecatalog.storage.local_adapter import LocalObjectStore
from filecatalog.storage.s3_adapter import S3ObjectStore, create_s3_client


class ObjectStoreFactory:
    """Creates the object store adapter named in settings."""

    BACKENDS = ("s3", "local")

    @classmethod
    def create(cls, settings: Settings) -> BaseObjectStore:
        backend = settings.object_store_backend.lower()
        if backend == "s3":
            return S3ObjectStore(create_s3_client(settings))
        if backend == "local":
            return LocalObjectStore(Path(settings.local_storage_root))
        raise UnsupportedObjectStoreError(
            f"Unknown object store backend '{backend}'. Choose from: {list(cls.BACKENDS)}"
        )
