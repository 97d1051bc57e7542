from collections.abc import Sequence

from pdfprotect.extraction.locator import locate_evidence
from pdfprotect.extraction.matcher import DobMatcher, join_fragments
from pdfprotect.extraction.models import ExtractionResult
from pdfprotect.extraction.password import generate_password
from pdfprotect.pdf.models import TextFragment


class DobExtractor:
    """Runs matcher, password generator and evidence locator over page 1 fragments."""

    def __init__(self, matcher: DobMatcher | None = None) -> None:
        self._matcher = matcher or DobMatcher()

    def extract(self, fragments: Sequence[TextFragment]) -> ExtractionResult | None:
        """Return the extraction, or ``None`` when no DOB rule matched.

        Raises:
            MalformedDateError: if the captured date cannot be packed into a password.
        """
        found = self._matcher.match(join_fragments(fragments))
        if found is None:
            return None
        return ExtractionResult(
            dob=found.dob,
            password=generate_password(found.dob),
            text_context=found.text_context,
            raw_match=found.raw_match,
            coordinates=locate_evidence(found.date_token, fragments),
        )
