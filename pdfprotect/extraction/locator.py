import re
from collections.abc import Iterable

from pdfprotect.pdf.models import Coordinates, TextFragment

DOB_LABEL = re.compile(r"DOB", re.IGNORECASE)


def locate_evidence(date_token: str, fragments: Iterable[TextFragment]) -> Coordinates | None:
    """Box of the first fragment containing the date or a "DOB" label.

    Engines rarely report the whole date as one fragment, so the label acts as
    the fallback anchor. On documents with several DOB labels the first one
    wins even if it belongs to another field.
    """
    for fragment in fragments:
        if date_token in fragment.text or DOB_LABEL.search(fragment.text):
            return fragment.coordinates
    return None
