import pymupdf

from intake.conversion.base import BaseDocumentComposer
from intake.conversion.exceptions import ConversionFailure
from intake.conversion.models import DecodedImage, PageLayout, Placement


class PyMuPdfComposer(BaseDocumentComposer):
    """Composes a single-page PDF using PyMuPDF."""

    def compose(
        self,
        image: DecodedImage,
        placement: Placement,
        page: PageLayout,
    ) -> bytes:
        try:
            pixmap = pymupdf.Pixmap(pymupdf.csRGB, image.width, image.height, image.pixels, 0)
            # PyMuPDF measures y from the top edge.
            top = page.height - placement.y - placement.height
            rect = pymupdf.Rect(
                placement.x,
                top,
                placement.x + placement.width,
                top + placement.height,
            )
            with pymupdf.open() as doc:  # type: ignore[no-untyped-call]
                pdf_page = doc.new_page(width=page.width, height=page.height)
                pdf_page.insert_image(rect, pixmap=pixmap, keep_proportion=False)
                return doc.tobytes()
        except Exception as exc:
            raise ConversionFailure(f"pymupdf composition failed: {exc}") from exc
