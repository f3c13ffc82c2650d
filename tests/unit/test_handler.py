from unittest.mock import MagicMock

import pytest

from filecatalog.pipeline.exceptions import BatchFailedError, InvalidNotificationError
from filecatalog.pipeline.ingestion import IngestionPipeline
from filecatalog.pipeline.models import (
    BatchResult,
    OutcomeStatus,
    PipelineState,
    RecordOutcome,
)
from filecatalog.pipeline.notifications import NotificationRecord
from filecatalog.worker.handler import EventHandler


def _event(*keys: str) -> dict:
    return {
        "Records": [
            {"s3": {"bucket": {"name": "uploads"}, "object": {"key": key}}} for key in keys
        ]
    }


def _outcome(key: str, status: OutcomeStatus) -> RecordOutcome:
    return RecordOutcome(bucket="uploads", key=key, file_id=key.split(".")[0], status=status)


def _make_handler(result: BatchResult) -> tuple[EventHandler, MagicMock]:
    pipeline = MagicMock(spec=IngestionPipeline)
    pipeline.process_batch.return_value = result
    return EventHandler(pipeline), pipeline


class TestHandle:
    def test_passes_parsed_records_to_pipeline(self) -> None:
        result = BatchResult(
            state=PipelineState.COMPLETED,
            outcomes=[_outcome("a b.txt", OutcomeStatus.PROCESSED)],
        )
        handler, pipeline = _make_handler(result)

        handler.handle(_event("a+b.txt"))

        pipeline.process_batch.assert_called_once_with(
            [NotificationRecord(bucket="uploads", key="a b.txt")]
        )

    def test_returns_summary_on_success(self) -> None:
        result = BatchResult(
            state=PipelineState.COMPLETED,
            outcomes=[
                _outcome("a.txt", OutcomeStatus.PROCESSED),
                _outcome("b.png", OutcomeStatus.PROCESSED),
            ],
        )
        handler, _pipeline = _make_handler(result)

        summary = handler.handle(_event("a.txt", "b.png"))

        assert summary == {"processed": 2, "file_ids": ["a", "b"]}

    def test_raises_for_redelivery_on_failure(self) -> None:
        result = BatchResult(
            state=PipelineState.FAILED_BATCH,
            outcomes=[
                _outcome("a.txt", OutcomeStatus.PROCESSED),
                _outcome("b.txt", OutcomeStatus.FAILED),
            ],
        )
        handler, _pipeline = _make_handler(result)

        with pytest.raises(BatchFailedError, match="b.txt"):
            handler.handle(_event("a.txt", "b.txt"))

    def test_malformed_event_propagates(self) -> None:
        handler, pipeline = _make_handler(BatchResult())

        with pytest.raises(InvalidNotificationError):
            handler.handle({"Records": [{"s3": {}}]})

        pipeline.process_batch.assert_not_called()
