from unittest.mock import MagicMock

import pytest

from intake.conversion.factory import DocumentComposerFactory
from intake.conversion.pymupdf_composer import PyMuPdfComposer
from intake.conversion.reportlab_composer import ReportLabComposer


class TestDocumentComposerFactory:
    def test_creates_reportlab_composer(self) -> None:
        settings = MagicMock(composer_engine="reportlab")
        assert isinstance(DocumentComposerFactory.create(settings), ReportLabComposer)

    def test_creates_pymupdf_composer(self) -> None:
        settings = MagicMock(composer_engine="PyMuPDF")
        assert isinstance(DocumentComposerFactory.create(settings), PyMuPdfComposer)

    def test_raises_for_unknown_engine(self) -> None:
        settings = MagicMock(composer_engine="ghostscript")
        with pytest.raises(ValueError, match="ghostscript"):
            DocumentComposerFactory.create(settings)
