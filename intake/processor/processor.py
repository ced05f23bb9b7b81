from collections.abc import Callable

import httpx

from intake.batch.models import FileState
from intake.config.settings import Settings
from intake.conversion.factory import DocumentComposerFactory
from intake.conversion.normalizer import FormatNormalizer
from intake.conversion.pillow_decoder import PillowImageDecoder
from intake.delivery.client import DeliveryClient
from intake.delivery.models import DeliveryConfig
from intake.logging.logger import Log
from intake.processor.models import CandidateFile
from intake.processor.pipeline import PipelineContext, PipelineStep
from intake.processor.steps import DeliverStep, NormalizeStep, UploadStep, ValidateStep
from intake.storage.uploader import StorageUploader
from intake.validation.validator import FileValidator

StateListener = Callable[[FileState], None]


class Processor:
    """Runs one file through the pipeline steps in order.

    Pipeline: validate -> normalize -> upload -> deliver.
    The first failing step ends the run and its exception propagates.
    """

    def __init__(self, steps: list[PipelineStep]) -> None:
        self._steps = steps

    async def process(
        self,
        candidate: CandidateFile,
        on_state: StateListener | None = None,
    ) -> PipelineContext:
        """Run every step for a single file."""
        Log.info(f"Processing {candidate.name} ({candidate.size} bytes, {candidate.media_type})")
        context = PipelineContext(candidate=candidate)
        for step in self._steps:
            context.state = step.state
            if on_state is not None:
                on_state(step.state)
            context = await step.run(context)
        context.state = FileState.SUCCEEDED
        return context


def build_processor(settings: Settings, client: httpx.AsyncClient) -> Processor:
    """Build a Processor with all required adapters."""
    validator = FileValidator(max_file_size=settings.max_file_size_bytes)
    normalizer = FormatNormalizer(
        decoder=PillowImageDecoder(),
        composer=DocumentComposerFactory.create(settings),
    )
    uploader = StorageUploader(
        client=client,
        endpoint=settings.storage_endpoint,
        api_key=settings.storage_api_key,
        signed_url_expires_in=settings.signed_url_expires_in,
    )
    delivery_client = DeliveryClient(client)
    delivery_config = DeliveryConfig.from_settings(settings)
    return Processor(
        steps=[
            ValidateStep(validator),
            NormalizeStep(normalizer),
            UploadStep(uploader),
            DeliverStep(delivery_client, delivery_config),
        ]
    )
