from abc import ABC, abstractmethod
from dataclasses import dataclass

from filecatalog.catalog.models import CatalogRecord
from filecatalog.pipeline.notifications import NotificationRecord
from filecatalog.storage.models import RawFileContent


@dataclass(slots=True)
class PipelineContext:
    notification: NotificationRecord
    content: RawFileContent | None = None
    record: CatalogRecord | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
