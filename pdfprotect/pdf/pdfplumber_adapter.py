import io
import math

import pdfplumber

from pdfprotect.pdf.base import BasePageRenderer, BasePdfExtractor, to_png_data_url
from pdfprotect.pdf.exceptions import PdfExtractionError, PdfRenderError
from pdfprotect.pdf.models import TextFragment, make_fragment

POINTS_PER_INCH = 72


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts page 1 text runs using pdfplumber."""

    def extract_fragments(self, pdf_bytes: bytes) -> list[TextFragment]:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                if not pdf.pages:
                    raise PdfExtractionError("PDF has no pages")
                # keep_blank_chars keeps runs like "DOB: 05/03/1990" together
                words = pdf.pages[0].extract_words(
                    keep_blank_chars=True,
                    use_text_flow=True,
                )
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber extraction failed: {exc}") from exc
        return [
            make_fragment(word["text"], word["x0"], word["top"], word["x1"], word["bottom"])
            for word in words
            if word["text"]
        ]


class PdfPlumberRenderer(BasePageRenderer):
    """Rasterizes page 1 through pdfplumber's page image support."""

    def render_header(self, pdf_bytes: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                if not pdf.pages:
                    raise PdfRenderError("PDF has no pages")
                page_image = pdf.pages[0].to_image(
                    resolution=round(POINTS_PER_INCH * self._scale)
                )
                image = page_image.original
                width, height = image.size
                band = image.crop((0, 0, width, math.floor(height * self._crop_ratio)))
                buf = io.BytesIO()
                band.save(buf, format="PNG")
        except PdfRenderError:
            raise
        except Exception as exc:
            raise PdfRenderError(f"pdfplumber rendering failed: {exc}") from exc
        return to_png_data_url(buf.getvalue())
