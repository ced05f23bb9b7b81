import asyncio

from intake.batch.models import FileState
from intake.conversion.normalizer import FormatNormalizer
from intake.delivery.client import DeliveryClient
from intake.delivery.models import DeliveryConfig, DeliveryPayload
from intake.logging.logger import Log
from intake.processor.pipeline import PipelineContext, PipelineStep
from intake.storage.uploader import StorageUploader
from intake.validation.exceptions import ValidationRejection
from intake.validation.validator import FileValidator


class ValidateStep(PipelineStep):
    state = FileState.VALIDATING

    def __init__(self, validator: FileValidator) -> None:
        self._validator = validator

    async def run(self, context: PipelineContext) -> PipelineContext:
        verdict = self._validator.validate(context.candidate)
        context.verdict = verdict
        if not verdict.accepted:
            raise ValidationRejection(verdict)
        return context


class NormalizeStep(PipelineStep):
    state = FileState.NORMALIZING

    def __init__(self, normalizer: FormatNormalizer) -> None:
        self._normalizer = normalizer

    async def run(self, context: PipelineContext) -> PipelineContext:
        context.artifact = await asyncio.to_thread(
            self._normalizer.normalize, context.candidate
        )
        Log.info(
            f"Normalized {context.candidate.name}: {len(context.artifact.content)} bytes "
            f"(converted={context.artifact.converted})"
        )
        return context


class UploadStep(PipelineStep):
    state = FileState.UPLOADING

    def __init__(self, uploader: StorageUploader) -> None:
        self._uploader = uploader

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.artifact is None:
            raise ValueError("PipelineContext.artifact must be set before upload")
        context.record = await self._uploader.upload(context.artifact, context.candidate)
        Log.info(
            f"Uploaded {context.candidate.name} as artifact {context.record.artifact_id}"
        )
        return context


class DeliverStep(PipelineStep):
    state = FileState.DELIVERING

    def __init__(self, delivery_client: DeliveryClient, config: DeliveryConfig) -> None:
        self._delivery_client = delivery_client
        self._config = config

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.record is None:
            raise ValueError("PipelineContext.record must be set before delivery")
        payload = DeliveryPayload(
            artifact_id=context.record.artifact_id,
            access_url=context.record.access_url,
        )
        context.delivery_result = await self._delivery_client.deliver(payload, self._config)
        return context
