from abc import ABC, abstractmethod

from intake.conversion.models import DecodedImage, PageLayout, Placement


class BaseImageDecoder(ABC):
    """Contract for raster image decoders."""

    @abstractmethod
    def decode(self, image_bytes: bytes) -> DecodedImage:
        """Decode raw image bytes into an RGB pixel buffer.

        Raises:
            ConversionFailure: if the bytes cannot be decoded.
        """


class BaseDocumentComposer(ABC):
    """Contract for all PDF composition adapters."""

    @abstractmethod
    def compose(
        self,
        image: DecodedImage,
        placement: Placement,
        page: PageLayout,
    ) -> bytes:
        """Draw the image at the given placement onto a single page.

        Returns:
            Bytes of a one-page PDF document.

        Raises:
            ConversionFailure: if composition fails for any reason.
        """
