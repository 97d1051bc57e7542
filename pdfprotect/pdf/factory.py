from pdfprotect.config.settings import Settings
from pdfprotect.pdf.base import BasePageRenderer, BasePdfExtractor
from pdfprotect.pdf.pdfplumber_adapter import PdfPlumberAdapter, PdfPlumberRenderer
from pdfprotect.pdf.pymupdf_adapter import PyMuPdfAdapter, PyMuPdfRenderer


class PdfExtractorFactory:
    """Creates the correct PDF extractor based on settings."""

    ADAPTERS: dict[str, type[BasePdfExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()


class PageRendererFactory:
    """Creates the page renderer used for screenshot evidence."""

    RENDERERS: dict[str, type[BasePageRenderer]] = {
        "pdfplumber": PdfPlumberRenderer,
        "pymupdf": PyMuPdfRenderer,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePageRenderer:
        engine = settings.render_engine.lower()
        renderer_cls = cls.RENDERERS.get(engine)
        if renderer_cls is None:
            raise ValueError(
                f"Unknown render engine '{engine}'. Choose from: {list(cls.RENDERERS)}"
            )
        return renderer_cls(
            scale=settings.render_scale,
            crop_ratio=settings.screenshot_crop_ratio,
        )
