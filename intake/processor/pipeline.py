from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from intake.batch.models import FileState
from intake.delivery.models import DeliveryResult
from intake.processor.models import CandidateFile, NormalizedArtifact, StorageRecord
from intake.validation.models import ValidationVerdict


@dataclass(slots=True)
class PipelineContext:
    candidate: CandidateFile
    verdict: ValidationVerdict | None = None
    artifact: NormalizedArtifact | None = None
    record: StorageRecord | None = None
    delivery_result: DeliveryResult | None = None
    state: FileState = FileState.PENDING


class PipelineStep(ABC):
    state: ClassVar[FileState]

    @abstractmethod
    async def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
