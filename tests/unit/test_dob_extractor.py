import re

import pytest

from pdfprotect.extraction.exceptions import MalformedDateError
from pdfprotect.extraction.extractor import DobExtractor
from pdfprotect.extraction.matcher import DobMatcher, DobRule
from pdfprotect.pdf.models import Coordinates, TextFragment


def _fragments(*texts: str) -> list[TextFragment]:
    return [
        TextFragment(text=text, x=10.0 * i, y=20.0, width=30.0, height=12.0)
        for i, text in enumerate(texts)
    ]


class TestDobExtractor:
    def test_builds_full_result(self) -> None:
        result = DobExtractor().extract(_fragments("Patient Record", "DOB: 1/2/2015", "Age: 9"))
        assert result is not None
        assert result.dob == "01/02/2015"
        assert result.password == "01022015"
        assert result.raw_match == "DOB: 1/2/2015"
        assert result.text_context == "Patient Record DOB: 1/2/2015 Age: 9"
        assert result.coordinates == Coordinates(10.0, 20.0, 30.0, 12.0)

    def test_locates_date_written_with_dashes(self) -> None:
        result = DobExtractor().extract(_fragments("Name", "Date of Birth", "-", "05-03-1990"))
        assert result is not None
        assert result.password == "05031990"
        # fragment holds "05-03-1990", the token is "05/03/1990": no date hit, no DOB label
        assert result.coordinates is None

    def test_returns_none_when_no_dob(self) -> None:
        assert DobExtractor().extract(_fragments("Invoice", "Total")) is None

    def test_propagates_malformed_date(self) -> None:
        matcher = DobMatcher(rules=[DobRule("year", re.compile(r"Born (\d{4})"))])
        with pytest.raises(MalformedDateError):
            DobExtractor(matcher).extract(_fragments("Born 1990"))
