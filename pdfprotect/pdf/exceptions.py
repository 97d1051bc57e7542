class PdfError(Exception):
    """Base exception for PDF engine failures."""


class PdfExtractionError(PdfError):
    """Raised when page text cannot be extracted (corrupt or unreadable PDF)."""


class PdfRenderError(PdfError):
    """Raised when page 1 cannot be rasterized."""
