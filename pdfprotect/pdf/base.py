import base64
from abc import ABC, abstractmethod

from pdfprotect.pdf.models import TextFragment

PNG_DATA_URL_PREFIX = "data:image/png;base64,"


def to_png_data_url(png_bytes: bytes) -> str:
    return PNG_DATA_URL_PREFIX + base64.b64encode(png_bytes).decode("ascii")


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    @abstractmethod
    def extract_fragments(self, pdf_bytes: bytes) -> list[TextFragment]:
        """Extract positioned text runs from page 1.

        Args:
            pdf_bytes: Raw PDF file content. Treated as consumed by the call.

        Returns:
            Non-empty text fragments in the order the engine reports them
            (not necessarily reading order).

        Raises:
            PdfExtractionError: if the document cannot be opened or has no pages.
        """


class BasePageRenderer(ABC):
    """Contract for adapters that rasterize the header band of page 1."""

    def __init__(self, scale: float = 2.0, crop_ratio: float = 0.25) -> None:
        self._scale = scale
        self._crop_ratio = crop_ratio

    @abstractmethod
    def render_header(self, pdf_bytes: bytes) -> str:
        """Render page 1 and crop the top band.

        Returns:
            The cropped band as a PNG data URL.

        Raises:
            PdfRenderError: on any rendering failure.
        """
