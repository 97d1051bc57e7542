from dataclasses import dataclass

from pdfprotect.pdf.models import Coordinates


@dataclass(frozen=True)
class DobMatch:
    """First DOB hit in page 1 text."""

    dob: str  # DD/MM/YYYY
    date_token: str  # captured date, separators normalized to "/", unpadded
    raw_match: str
    text_context: str
    start: int
    end: int
    rule: str


@dataclass(frozen=True)
class ExtractionResult:
    """Successful DOB extraction for one file."""

    dob: str
    password: str
    text_context: str
    raw_match: str
    coordinates: Coordinates | None = None
