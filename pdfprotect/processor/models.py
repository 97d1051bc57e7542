from dataclasses import dataclass
from pathlib import Path

from pdfprotect.extraction.models import ExtractionResult
from pdfprotect.pdf.models import Coordinates

CONFIDENCE_TEXT = "text"
CONFIDENCE_MANUAL = "manual"

DOB_NOT_FOUND = "Could not find DOB"


@dataclass
class FileRecord:
    """One queued input file and everything the review and encryption steps need.

    Either the extraction fields (dob, password, text_context, raw_match) or
    ``error`` is populated. ``screenshot`` is independent of both.
    """

    file_path: Path
    file_name: str
    pdf_data: bytes | None
    dob: str | None
    password: str
    text_context: str | None
    raw_match: str | None
    screenshot: str | None
    confidence: str | None
    error: str | None
    coordinates: Coordinates | None = None
    output_path: Path | None = None
    encrypt_error: str | None = None
    password_edited: bool = False

    @classmethod
    def matched(
        cls,
        file_path: Path,
        pdf_data: bytes,
        extraction: ExtractionResult,
        screenshot: str | None,
    ) -> "FileRecord":
        return cls(
            file_path=file_path,
            file_name=file_path.name,
            pdf_data=pdf_data,
            dob=extraction.dob,
            password=extraction.password,
            text_context=extraction.text_context,
            raw_match=extraction.raw_match,
            screenshot=screenshot,
            confidence=CONFIDENCE_TEXT,
            error=None,
            coordinates=extraction.coordinates,
        )

    @classmethod
    def not_found(
        cls,
        file_path: Path,
        pdf_data: bytes,
        screenshot: str | None,
    ) -> "FileRecord":
        return cls(
            file_path=file_path,
            file_name=file_path.name,
            pdf_data=pdf_data,
            dob=None,
            password="",
            text_context=None,
            raw_match=None,
            screenshot=screenshot,
            confidence=None,
            error=DOB_NOT_FOUND,
        )

    @classmethod
    def failed(cls, file_path: Path, message: str) -> "FileRecord":
        return cls(
            file_path=file_path,
            file_name=file_path.name,
            pdf_data=None,
            dob=None,
            password="",
            text_context=None,
            raw_match=None,
            screenshot=None,
            confidence=None,
            error=message,
        )

    @property
    def is_ready(self) -> bool:
        return len(self.password) > 0

    def set_password(self, password: str) -> None:
        """Apply a reviewer's edit. Automatic code never calls this."""
        self.password = password
        self.password_edited = True
        if self.confidence is None:
            self.confidence = CONFIDENCE_MANUAL
