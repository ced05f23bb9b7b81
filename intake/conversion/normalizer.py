"""Raster-to-PDF normalization of accepted candidate files."""

from typing import ClassVar

from intake.conversion.base import BaseDocumentComposer, BaseImageDecoder
from intake.conversion.exceptions import ConversionFailure
from intake.conversion.layout import fit_to_page
from intake.conversion.models import PageLayout
from intake.logging.logger import Log
from intake.processor.models import PDF_MEDIA_TYPE, CandidateFile, NormalizedArtifact


class FormatNormalizer:
    """Turns every accepted file into a PDF artifact.

    Raster images are decoded, fitted onto one page and composed into a PDF.
    PDFs pass through byte-for-byte.
    """

    RASTER_MEDIA_TYPES: ClassVar[frozenset[str]] = frozenset(
        {"image/jpeg", "image/jpg", "image/png"}
    )

    def __init__(
        self,
        *,
        decoder: BaseImageDecoder,
        composer: BaseDocumentComposer,
        page: PageLayout | None = None,
    ) -> None:
        self._decoder = decoder
        self._composer = composer
        self._page = page if page is not None else PageLayout()

    def normalize(self, file: CandidateFile) -> NormalizedArtifact:
        """Return the PDF artifact for a file.

        Raises:
            ConversionFailure: for unsupported media types or decode/compose errors.
        """
        media_type = file.media_type.lower()
        if media_type == PDF_MEDIA_TYPE:
            return NormalizedArtifact(content=file.content, source_name=file.name, converted=False)
        if media_type not in self.RASTER_MEDIA_TYPES:
            raise ConversionFailure(f"Cannot normalize media type {file.media_type!r}")

        image = self._decoder.decode(file.content)
        try:
            placement = fit_to_page(image.width, image.height, self._page)
        except ValueError as exc:
            raise ConversionFailure(str(exc)) from exc
        content = self._composer.compose(image, placement, self._page)
        Log.info(
            f"Converted {image.width}x{image.height} image to PDF "
            f"({len(content)} bytes, scale {placement.scale:.3f})"
        )
        return NormalizedArtifact(content=content, source_name=file.name, converted=True)
