class CatalogError(Exception):
    """Base exception for all catalog-related errors."""


class PersistError(CatalogError):
    """Raised when a catalog record cannot be written."""


class CatalogRecordNotFoundError(CatalogError):
    """Raised when no catalog record exists for a file id."""


class InvalidFileIdError(CatalogError):
    """Raised when a file id is not a UUID."""


class FileUnavailableError(CatalogError):
    """Raised when a catalog record is no longer active."""


class FileExpiredError(FileUnavailableError):
    """Raised when a catalog record's expiration date has passed."""
