import re

from pdfprotect.extraction.exceptions import MalformedDateError

DATE_SEPARATORS = re.compile(r"[/\-.]")


def split_date(dob: str) -> tuple[str, str, str]:
    """Split a D/M/Y string on '/', '-' or '.'.

    Raises:
        MalformedDateError: unless there are exactly three parts.
    """
    parts = DATE_SEPARATORS.split(dob)
    if len(parts) != 3:
        raise MalformedDateError(f"Invalid DOB: {dob}")
    day, month, year = parts
    return day, month, year


def generate_password(dob: str) -> str:
    """Pack a D/M/Y date into a DDMMYYYY password.

    Day and month are zero-padded to two digits; the year is used as given,
    so ``"5/3/1990"`` gives ``"05031990"``. Encrypted output depends on the
    exact characters, so nothing else is normalized here.
    """
    day, month, year = split_date(dob)
    return f"{day.zfill(2)}{month.zfill(2)}{year}"
