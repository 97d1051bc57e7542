from pdfprotect.config.settings import Settings
from pdfprotect.encryption.base import BasePdfEncryptor
from pdfprotect.encryption.pymupdf_adapter import PyMuPdfEncryptor
from pdfprotect.encryption.qpdf_adapter import QpdfEncryptor


class EncryptorFactory:
    """Creates the configured encryption tool adapter."""

    ENGINES = ("qpdf", "pymupdf")

    @classmethod
    def create(cls, settings: Settings) -> BasePdfEncryptor:
        engine = settings.encrypt_engine.lower()
        if engine == "qpdf":
            return QpdfEncryptor(settings.qpdf_path)
        if engine == "pymupdf":
            return PyMuPdfEncryptor()
        raise ValueError(
            f"Unknown encrypt engine '{engine}'. Choose from: {list(cls.ENGINES)}"
        )
