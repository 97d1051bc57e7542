import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from pdfprotect.extraction.models import DobMatch
from pdfprotect.extraction.password import split_date
from pdfprotect.pdf.models import TextFragment

CONTEXT_CHARS = 80

_SLASH_DATE = r"([0-9]{1,2}/[0-9]{1,2}/[0-9]{4})"
_ANY_DATE = r"([0-9]{1,2}[/\-.][0-9]{1,2}[/\-.][0-9]{4})"
_LABEL_SEPARATOR = r"\s*[:\-|]\s*"


@dataclass(frozen=True)
class DobRule:
    name: str
    pattern: re.Pattern[str]
    group: int = 1


# Most specific labels first. Rule order decides, so with "DOB-01/01/2000 ...
# DOB | Age: 05/03/1990" on one page the "DOB | Age" date is taken.
DOB_RULES: tuple[DobRule, ...] = (
    DobRule("dob-colon", re.compile(r"DOB\s*:\s*" + _SLASH_DATE, re.IGNORECASE)),
    DobRule("dob-age", re.compile(r"DOB\s*\|\s*Age\s*:\s*" + _SLASH_DATE, re.IGNORECASE)),
    DobRule("dob-generic", re.compile(r"DOB" + _LABEL_SEPARATOR + _ANY_DATE, re.IGNORECASE)),
    DobRule(
        "date-of-birth",
        re.compile(r"Date\s+of\s+Birth" + _LABEL_SEPARATOR + _ANY_DATE, re.IGNORECASE),
    ),
    DobRule(
        "d-o-b",
        re.compile(r"D\.?\s*O\.?\s*B\.?" + _LABEL_SEPARATOR + _ANY_DATE, re.IGNORECASE),
    ),
)


def join_fragments(fragments: Iterable[TextFragment]) -> str:
    """Concatenate fragment text with single spaces, in extractor order."""
    return " ".join(fragment.text for fragment in fragments if fragment.text)


def normalize_separators(date_token: str) -> str:
    return date_token.replace("-", "/").replace(".", "/")


def pad_date(date_token: str) -> str:
    day, month, year = split_date(date_token)
    return f"{day.zfill(2)}/{month.zfill(2)}/{year}"


class DobMatcher:
    """Finds the DOB on page 1 by trying each rule in priority order."""

    def __init__(
        self,
        rules: Sequence[DobRule] = DOB_RULES,
        context_chars: int = CONTEXT_CHARS,
    ) -> None:
        self._rules = tuple(rules)
        self._context_chars = context_chars

    def match(self, text: str) -> DobMatch | None:
        """Return the hit of the first rule that matches anywhere in ``text``.

        Rule order decides, not text position. ``None`` means no DOB was found.
        """
        for rule in self._rules:
            found = rule.pattern.search(text)
            if found is None:
                continue
            date_token = normalize_separators(found.group(rule.group))
            return DobMatch(
                dob=pad_date(date_token),
                date_token=date_token,
                raw_match=found.group(0),
                text_context=self._context(text, found.start(), found.end()),
                start=found.start(),
                end=found.end(),
                rule=rule.name,
            )
        return None

    def _context(self, text: str, start: int, end: int) -> str:
        ctx_start = max(0, start - self._context_chars)
        ctx_end = min(len(text), end + self._context_chars)
        return text[ctx_start:ctx_end].strip()


def match_dob(text: str) -> DobMatch | None:
    return DobMatcher().match(text)
