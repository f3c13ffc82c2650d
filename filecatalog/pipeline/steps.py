from filecatalog.catalog.builder import MetadataRecordBuilder
from filecatalog.database.repositories.catalog_repository import CatalogRepository
from filecatalog.logging.logger import Log
from filecatalog.pipeline.pipeline import PipelineContext, PipelineStep
from filecatalog.storage.base import BaseObjectStore


class FetchContentStep(PipelineStep):
    def __init__(self, object_store: BaseObjectStore) -> None:
        self._object_store = object_store

    def run(self, context: PipelineContext) -> PipelineContext:
        context.content = self._object_store.fetch(context.notification.locator)
        Log.info(
            f"Fetched {context.content.size} bytes for {context.notification.key} "
            f"from bucket {context.notification.bucket}"
        )
        return context


class BuildRecordStep(PipelineStep):
    def __init__(self, builder: MetadataRecordBuilder) -> None:
        self._builder = builder

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.content is None:
            raise ValueError("PipelineContext.content must be set before building the record")
        context.record = self._builder.build(
            context.content,
            context.notification.locator,
            context.notification.file_id,
        )
        return context


class PersistRecordStep(PipelineStep):
    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.record is None:
            raise ValueError("PipelineContext.record must be set before persist")
        self._catalog_repo.upsert(context.record)
        Log.info(f"Stored metadata for file {context.record.file_id}")
        return context
