class ObjectStoreError(Exception):
    """Base exception for all object store errors."""


class RetrievalError(ObjectStoreError):
    """Raised when an object cannot be read from the object store."""


class UnsupportedObjectStoreError(ObjectStoreError):
    """Raised when settings name an object store backend that does not exist."""
