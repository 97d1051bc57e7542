import pytest

from pdfprotect.extraction.exceptions import MalformedDateError
from pdfprotect.extraction.password import generate_password, split_date


class TestGeneratePassword:
    def test_pads_day_and_month(self) -> None:
        assert generate_password("5/3/1990") == "05031990"

    def test_two_digit_parts_unchanged(self) -> None:
        assert generate_password("12/11/2001") == "12112001"

    @pytest.mark.parametrize("dob", ["05-03-1990", "05.03.1990", "5-3.1990"])
    def test_accepts_dash_and_dot_separators(self, dob: str) -> None:
        assert generate_password(dob) == "05031990"

    def test_year_is_used_verbatim(self) -> None:
        assert generate_password("1/2/90") == "010290"

    def test_is_deterministic(self) -> None:
        assert generate_password("1/2/2015") == generate_password("1/2/2015")


class TestGeneratePasswordFailures:
    @pytest.mark.parametrize("dob", ["1990", "05/1990", "1/2/3/2015", ""])
    def test_raises_unless_three_parts(self, dob: str) -> None:
        with pytest.raises(MalformedDateError, match="Invalid DOB"):
            generate_password(dob)

    def test_malformed_date_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            split_date("1990")
