from unittest.mock import MagicMock

import pytest

from intake.conversion.base import BaseDocumentComposer, BaseImageDecoder
from intake.conversion.exceptions import ConversionFailure
from intake.conversion.models import DecodedImage, PageLayout, Placement
from intake.conversion.normalizer import FormatNormalizer
from intake.processor.models import CandidateFile


def _make_normalizer() -> tuple[FormatNormalizer, MagicMock, MagicMock]:
    decoder = MagicMock(spec=BaseImageDecoder)
    composer = MagicMock(spec=BaseDocumentComposer)
    decoder.decode.return_value = DecodedImage(width=200, height=100, pixels=b"\x00" * 60000)
    composer.compose.return_value = b"%PDF-composed"
    page = PageLayout(width=600, height=800, margin=20)
    return FormatNormalizer(decoder=decoder, composer=composer, page=page), decoder, composer


def _file(media_type: str, content: bytes = b"raw", name: str = "scan.png") -> CandidateFile:
    return CandidateFile(content=content, media_type=media_type, name=name, size=len(content))


class TestRasterConversion:
    @pytest.mark.parametrize("media_type", ["image/png", "image/jpeg", "image/jpg"])
    def test_converts_raster_types(self, media_type: str) -> None:
        normalizer, decoder, composer = _make_normalizer()

        artifact = normalizer.normalize(_file(media_type))

        decoder.decode.assert_called_once_with(b"raw")
        assert artifact.content == b"%PDF-composed"
        assert artifact.media_type == "application/pdf"
        assert artifact.converted is True
        assert artifact.source_name == "scan.png"

    def test_passes_centered_placement_to_composer(self) -> None:
        normalizer, _decoder, composer = _make_normalizer()

        normalizer.normalize(_file("image/png"))

        _image, placement, page = composer.compose.call_args.args
        assert placement == Placement(x=200, y=350, width=200, height=100, scale=1.0)
        assert page == PageLayout(width=600, height=800, margin=20)


class TestPdfPassthrough:
    def test_returns_identical_bytes(self) -> None:
        normalizer, decoder, composer = _make_normalizer()
        content = b"%PDF-1.7 original bytes"

        artifact = normalizer.normalize(_file("application/pdf", content, "invoice.pdf"))

        assert artifact.content == content
        assert artifact.converted is False
        decoder.decode.assert_not_called()
        composer.compose.assert_not_called()


class TestFailures:
    def test_unsupported_media_type_fails_fast(self) -> None:
        normalizer, decoder, _composer = _make_normalizer()
        with pytest.raises(ConversionFailure, match="text/plain"):
            normalizer.normalize(_file("text/plain"))
        decoder.decode.assert_not_called()

    def test_decoder_failure_propagates(self) -> None:
        normalizer, decoder, composer = _make_normalizer()
        decoder.decode.side_effect = ConversionFailure("corrupt image")
        with pytest.raises(ConversionFailure, match="corrupt image"):
            normalizer.normalize(_file("image/png"))
        composer.compose.assert_not_called()

    def test_zero_sized_image_is_a_conversion_failure(self) -> None:
        normalizer, decoder, _composer = _make_normalizer()
        decoder.decode.return_value = DecodedImage(width=0, height=10, pixels=b"")
        with pytest.raises(ConversionFailure, match="positive"):
            normalizer.normalize(_file("image/png"))
