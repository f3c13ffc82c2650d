class PipelineError(Exception):
    """Base exception for all ingestion pipeline errors."""


class InvalidNotificationError(PipelineError):
    """Raised when a notification record does not name a bucket and key."""


class BatchFailedError(PipelineError):
    """Raised to make the invoking framework redeliver the batch."""
