from intake.conversion.base import BaseDocumentComposer, BaseImageDecoder
from intake.conversion.factory import DocumentComposerFactory
from intake.conversion.normalizer import FormatNormalizer
from intake.conversion.pillow_decoder import PillowImageDecoder

__all__ = [
    "BaseDocumentComposer",
    "BaseImageDecoder",
    "DocumentComposerFactory",
    "FormatNormalizer",
    "PillowImageDecoder",
]
