import io

from PIL import Image
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from intake.conversion.base import BaseDocumentComposer
from intake.conversion.exceptions import ConversionFailure
from intake.conversion.models import DecodedImage, PageLayout, Placement


class ReportLabComposer(BaseDocumentComposer):
    """Composes a single-page PDF using reportlab."""

    def compose(
        self,
        image: DecodedImage,
        placement: Placement,
        page: PageLayout,
    ) -> bytes:
        try:
            pil_image = Image.frombytes(image.mode, (image.width, image.height), image.pixels)
            buf = io.BytesIO()
            c = canvas.Canvas(buf, pagesize=(page.width, page.height))
            c.drawImage(
                ImageReader(pil_image),
                placement.x,
                placement.y,
                width=placement.width,
                height=placement.height,
            )
            c.showPage()
            c.save()
            return buf.getvalue()
        except Exception as exc:
            raise ConversionFailure(f"reportlab composition failed: {exc}") from exc
