from collections.abc import Mapping
from typing import Any

from filecatalog.logging.logger import Log
from filecatalog.pipeline.exceptions import BatchFailedError
from filecatalog.pipeline.ingestion import IngestionPipeline
from filecatalog.pipeline.models import OutcomeStatus
from filecatalog.pipeline.notifications import parse_notification_batch


class EventHandler:
    """Entry point for storage notifications; raising signals the batch for redelivery."""

    def __init__(self, pipeline: IngestionPipeline) -> None:
        self._pipeline = pipeline

    def handle(self, event: Mapping[str, Any]) -> dict[str, Any]:
        """Process one notification batch.

        Raises:
            BatchFailedError: if any record could not be fetched or persisted.
            InvalidNotificationError: if the event is malformed.
        """
        notifications = parse_notification_batch(event)
        result = self._pipeline.process_batch(notifications)

        if not result.succeeded:
            failed = [o for o in result.outcomes if o.status == OutcomeStatus.FAILED]
            Log.error(
                f"Batch failed for {len(failed)} of {len(result.outcomes)} record(s); "
                "raising for redelivery"
            )
            raise BatchFailedError(
                "Upload processing failed for: " + ", ".join(o.key for o in failed)
            )

        Log.info(f"Batch of {len(result.outcomes)} record(s) processed successfully")
        return {
            "processed": result.count(OutcomeStatus.PROCESSED),
            "file_ids": [o.file_id for o in result.outcomes],
        }
