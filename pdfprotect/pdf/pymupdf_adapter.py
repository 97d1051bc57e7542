import pymupdf

from pdfprotect.pdf.base import BasePageRenderer, BasePdfExtractor, to_png_data_url
from pdfprotect.pdf.exceptions import PdfExtractionError, PdfRenderError
from pdfprotect.pdf.models import TextFragment, make_fragment


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts page 1 text spans using PyMuPDF."""

    def extract_fragments(self, pdf_bytes: bytes) -> list[TextFragment]:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                if doc.page_count == 0:
                    raise PdfExtractionError("PDF has no pages")
                page_dict = doc[0].get_text("dict", sort=False)
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf extraction failed: {exc}") from exc

        fragments: list[TextFragment] = []
        for block in page_dict.get("blocks", []):
            # image blocks carry no "lines"
            for line in block.get("lines", []):
                for span in line.get("spans", []):
                    if not span.get("text"):
                        continue
                    x0, y0, x1, y1 = span["bbox"]
                    fragments.append(make_fragment(span["text"], x0, y0, x1, y1))
        return fragments


class PyMuPdfRenderer(BasePageRenderer):
    """Rasterizes the header band of page 1 with PyMuPDF."""

    def render_header(self, pdf_bytes: bytes) -> str:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                if doc.page_count == 0:
                    raise PdfRenderError("PDF has no pages")
                page = doc[0]
                bounds = page.rect
                band = pymupdf.Rect(
                    bounds.x0,
                    bounds.y0,
                    bounds.x1,
                    bounds.y0 + bounds.height * self._crop_ratio,
                )
                pixmap = page.get_pixmap(
                    matrix=pymupdf.Matrix(self._scale, self._scale),
                    clip=band,
                )
                png_bytes = pixmap.tobytes("png")
        except PdfRenderError:
            raise
        except Exception as exc:
            raise PdfRenderError(f"pymupdf rendering failed: {exc}") from exc
        return to_png_data_url(png_bytes)
