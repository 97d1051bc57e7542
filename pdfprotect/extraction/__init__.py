from pdfprotect.extraction.exceptions import MalformedDateError
from pdfprotect.extraction.extractor import DobExtractor
from pdfprotect.extraction.locator import locate_evidence
from pdfprotect.extraction.matcher import DobMatcher, join_fragments, match_dob
from pdfprotect.extraction.password import generate_password

__all__ = [
    "DobExtractor",
    "DobMatcher",
    "MalformedDateError",
    "generate_password",
    "join_fragments",
    "locate_evidence",
    "match_dob",
]
