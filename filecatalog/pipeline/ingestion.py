from psycopg_pool import ConnectionPool

from filecatalog.catalog.builder import MetadataRecordBuilder
from filecatalog.catalog.exceptions import PersistError
from filecatalog.config.settings import Settings
from filecatalog.database.repositories.catalog_repository import CatalogRepository
from filecatalog.introspection.dispatcher import FormatDispatcher
from filecatalog.logging.logger import Log
from filecatalog.pipeline.models import (
    BatchResult,
    FailurePolicy,
    OutcomeStatus,
    PipelineState,
    RecordOutcome,
)
from filecatalog.pipeline.notifications import NotificationRecord
from filecatalog.pipeline.pipeline import PipelineContext, PipelineStep
from filecatalog.pipeline.steps import BuildRecordStep, FetchContentStep, PersistRecordStep
from filecatalog.storage.base import BaseObjectStore
from filecatalog.storage.exceptions import RetrievalError
from filecatalog.storage.factory import ObjectStoreFactory


class IngestionPipeline:
    """Runs fetch -> build -> persist for each notification record, in order.

    Retrieval and persistence failures are recorded per record. Under the
    ABORT policy the first one stops the batch and the remaining records are
    reported as skipped; records already persisted are not rolled back.
    """

    def __init__(
        self,
        object_store: BaseObjectStore,
        catalog_repo: CatalogRepository,
        builder: MetadataRecordBuilder,
        failure_policy: FailurePolicy = FailurePolicy.ABORT,
    ) -> None:
        self._failure_policy = failure_policy
        self._steps: list[PipelineStep] = [
            FetchContentStep(object_store),
            BuildRecordStep(builder),
            PersistRecordStep(catalog_repo),
        ]

    def process_batch(self, notifications: list[NotificationRecord]) -> BatchResult:
        result = BatchResult()
        Log.info(f"Processing batch of {len(notifications)} record(s)")

        for index, notification in enumerate(notifications):
            result.state = PipelineState.PROCESSING
            outcome = self._process_record(notification)
            result.outcomes.append(outcome)
            if (
                outcome.status == OutcomeStatus.FAILED
                and self._failure_policy == FailurePolicy.ABORT
            ):
                result.outcomes.extend(
                    self._skipped(remaining) for remaining in notifications[index + 1 :]
                )
                break

        result.state = PipelineState.COMPLETED if result.succeeded else PipelineState.FAILED_BATCH
        Log.info(
            f"Batch finished ({result.state.value}): "
            f"{result.count(OutcomeStatus.PROCESSED)} processed, "
            f"{result.count(OutcomeStatus.FAILED)} failed, "
            f"{result.count(OutcomeStatus.SKIPPED)} skipped"
        )
        return result

    def _process_record(self, notification: NotificationRecord) -> RecordOutcome:
        Log.info(f"Processing file {notification.key} from bucket {notification.bucket}")
        context = PipelineContext(notification=notification)
        try:
            for step in self._steps:
                context = step.run(context)
        except (RetrievalError, PersistError) as exc:
            Log.error(
                "Failed to process record",
                bucket=notification.bucket,
                key=notification.key,
                error=exc,
            )
            return RecordOutcome(
                bucket=notification.bucket,
                key=notification.key,
                file_id=notification.file_id,
                status=OutcomeStatus.FAILED,
                error=str(exc),
            )
        return RecordOutcome(
            bucket=notification.bucket,
            key=notification.key,
            file_id=notification.file_id,
            status=OutcomeStatus.PROCESSED,
        )

    def _skipped(self, notification: NotificationRecord) -> RecordOutcome:
        return RecordOutcome(
            bucket=notification.bucket,
            key=notification.key,
            file_id=notification.file_id,
            status=OutcomeStatus.SKIPPED,
        )


def build_pipeline(settings: Settings, pool: ConnectionPool) -> IngestionPipeline:
    """Build an IngestionPipeline with all required adapters."""
    object_store = ObjectStoreFactory.create(settings)
    catalog_repo = CatalogRepository(pool, table=settings.catalog_table)
    builder = MetadataRecordBuilder(FormatDispatcher())
    return IngestionPipeline(
        object_store=object_store,
        catalog_repo=catalog_repo,
        builder=builder,
        failure_policy=FailurePolicy(settings.batch_failure_policy.lower()),
    )
