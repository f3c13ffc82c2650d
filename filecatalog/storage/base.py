from abc import ABC, abstractmethod

from filecatalog.storage.models import RawFileContent, StorageLocator


class BaseObjectStore(ABC):
    """Contract for all object store read adapters."""

    @abstractmethod
    def fetch(self, locator: StorageLocator) -> RawFileContent:
        """Read an object's bytes, content type and user metadata.

        Args:
            locator: Bucket and key of the object.

        Returns:
            The object content. A missing content type is reported as
            application/octet-stream.

        Raises:
            RetrievalError: if the object is missing or cannot be read.
        """
