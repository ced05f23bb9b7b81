from intake.config.settings import Settings
from intake.conversion.base import BaseDocumentComposer
from intake.conversion.pymupdf_composer import PyMuPdfComposer
from intake.conversion.reportlab_composer import ReportLabComposer


class DocumentComposerFactory:
    """Creates the correct PDF composer based on settings."""

    ADAPTERS: dict[str, type[BaseDocumentComposer]] = {
        "reportlab": ReportLabComposer,
        "pymupdf": PyMuPdfComposer,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseDocumentComposer:
        engine = settings.composer_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown composer engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()
