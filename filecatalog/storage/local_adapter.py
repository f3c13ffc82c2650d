import mimetypes
from pathlib import Path

from filecatalog.storage.base import BaseObjectStore
from filecatalog.storage.exceptions import RetrievalError
from filecatalog.storage.models import DEFAULT_CONTENT_TYPE, RawFileContent, StorageLocator


def object_file_path(storage_root: Path, locator: StorageLocator) -> Path:
    """Build path to object file: {storage_root}/{bucket}/{key}"""
    return storage_root / locator.bucket / locator.key


class LocalObjectStore(BaseObjectStore):
    """Serves objects from a directory tree laid out as bucket/key.

    Content type is guessed from the file name; no user metadata is stored.
    """

    def __init__(self, storage_root: Path) -> None:
        self._storage_root = storage_root

    def fetch(self, locator: StorageLocator) -> RawFileContent:
        path = object_file_path(self._storage_root, locator)
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise RetrievalError(f"Failed to read {path}: {exc}") from exc

        mime_type, _encoding = mimetypes.guess_type(locator.file_name)
        return RawFileContent(
            data=data,
            file_name=locator.file_name,
            mime_type=mime_type or DEFAULT_CONTENT_TYPE,
        )
