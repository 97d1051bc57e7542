from pdfprotect.extraction.locator import locate_evidence
from pdfprotect.pdf.models import Coordinates, TextFragment


def _fragment(text: str, x: float) -> TextFragment:
    return TextFragment(text=text, x=x, y=100.0, width=50.0, height=12.0)


class TestLocateEvidence:
    def test_prefers_first_fragment_containing_date(self) -> None:
        fragments = [_fragment("Name: Jane", 10), _fragment("05/03/1990", 80)]
        assert locate_evidence("05/03/1990", fragments) == Coordinates(80, 100.0, 50.0, 12.0)

    def test_falls_back_to_dob_label(self) -> None:
        fragments = [
            _fragment("Patient", 10),
            _fragment("dob:", 60),
            _fragment("05/03/", 90),
            _fragment("1990", 120),
        ]
        result = locate_evidence("05/03/1990", fragments)
        assert result is not None
        assert result.x == 60

    def test_first_dob_label_wins(self) -> None:
        fragments = [_fragment("Guardian DOB", 10), _fragment("05/03/1990", 80)]
        result = locate_evidence("05/03/1990", fragments)
        assert result is not None
        assert result.x == 10

    def test_returns_none_without_candidates(self) -> None:
        assert locate_evidence("05/03/1990", [_fragment("Invoice", 10)]) is None

    def test_empty_fragments(self) -> None:
        assert locate_evidence("05/03/1990", []) is None
