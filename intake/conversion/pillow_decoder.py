import io

from PIL import Image

from intake.conversion.base import BaseImageDecoder
from intake.conversion.exceptions import ConversionFailure
from intake.conversion.models import DecodedImage


class PillowImageDecoder(BaseImageDecoder):
    """Decodes JPEG and PNG bytes with Pillow, flattening alpha onto white."""

    def decode(self, image_bytes: bytes) -> DecodedImage:
        try:
            with Image.open(io.BytesIO(image_bytes)) as image:
                image.load()
                rgb = self._to_rgb(image)
            return DecodedImage(width=rgb.width, height=rgb.height, pixels=rgb.tobytes())
        except ConversionFailure:
            raise
        except Exception as exc:
            raise ConversionFailure(f"Image decoding failed: {exc}") from exc

    @staticmethod
    def _to_rgb(image: Image.Image) -> Image.Image:
        if image.mode in ("RGBA", "LA") or (image.mode == "P" and "transparency" in image.info):
            rgba = image.convert("RGBA")
            background = Image.new("RGB", rgba.size, (255, 255, 255))
            background.paste(rgba, mask=rgba.getchannel("A"))
            return background
        return image.convert("RGB")
