from dataclasses import dataclass, field
from enum import Enum


class FailurePolicy(str, Enum):
    ABORT = "abort"
    CONTINUE = "continue"


class PipelineState(str, Enum):
    IDLE = "idle"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED_BATCH = "failed_batch"


class OutcomeStatus(str, Enum):
    PROCESSED = "processed"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class RecordOutcome:
    bucket: str
    key: str
    file_id: str
    status: OutcomeStatus
    error: str | None = None


@dataclass
class BatchResult:
    """Per-record outcomes of one pipeline invocation, in input order."""

    state: PipelineState = PipelineState.IDLE
    outcomes: list[RecordOutcome] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return all(o.status == OutcomeStatus.PROCESSED for o in self.outcomes)

    def count(self, status: OutcomeStatus) -> int:
        return sum(1 for o in self.outcomes if o.status == status)
