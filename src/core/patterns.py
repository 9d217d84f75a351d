"""
Title patterns used to tell pet-sitting visits from personal time.

CLASSIFICATION_PATTERNS is evaluated in order and the first match wins.
Every personal pattern precedes every work pattern, so a title that mentions
both ("Lunch with Max - 30") is personal. A title matching nothing is
personal too.
"""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class TitlePattern:
    name: str
    regex: re.Pattern
    is_work: bool

    def matches(self, title: str) -> bool:
        return self.regex.search(title) is not None


def _personal(name: str, pattern: str) -> TitlePattern:
    return TitlePattern(name, re.compile(pattern, re.IGNORECASE), is_work=False)


def _work(name: str, pattern: str) -> TitlePattern:
    return TitlePattern(name, re.compile(pattern, re.IGNORECASE), is_work=True)


PERSONAL_PATTERNS = (
    _personal("admin", r"\b(admin|administration|administrative|paperwork|bookkeeping|billing)\b"),
    _personal("off_day", r"^\s*✨\s*off\s*✨"),
    _personal("day_off", r"\b(day\s*off|off\s*day|no\s*work)\b"),
    _personal("doctor", r"\b(doctor|dr\.|dentist|medical|appointment|appt)\b"),
    _personal("personal", r"\b(personal|private|family)\b"),
    _personal("blocked", r"\b(blocked|busy|unavailable|break)\b"),
    _personal("holiday", r"\b(holiday|vacation|pto|time\s*off)\b"),
    _personal("meals", r"\b(lunch|dinner|breakfast|meal)\b"),
    _personal("travel", r"\b(flight|airport|travel(?!.*time))\b"),
    _personal("entertainment", r"\b(movie|concert|show|game|party)\b"),
    _personal("self_care", r"\b(me time|self care|gym|workout|exercise)\b"),
)

MINUTES_SUFFIX = _work("minutes_suffix", r"\b(15|20|30|45|60)\b")
MEET_AND_GREET = _work("meet_and_greet", r"\b(MG|M&G|Meet\s*&?\s*Greet)\b")
HOUSESIT = _work("housesit", r"\b(HS|Housesit|House\s*sit)\b")
OVERNIGHT = _work("overnight", r"\b(ON|Overnight|Over\s*night)\b")
NAIL_TRIM = _work("nail_trim", r"\b(nail\s*trim|NT)\b")
WALK = _work("walk", r"\b(walk|walking)\b")
DROP_IN = _work("drop_in", r"\b(drop[\s-]?in|visit)\b")
CLIENT_PREFIX = _work("client_prefix", r"^([A-Za-z]+(?:\s*(?:&|and|,)\s*[A-Za-z]+)*)\s*[-–—]\s*")

WORK_PATTERNS = (
    MINUTES_SUFFIX,
    MEET_AND_GREET,
    HOUSESIT,
    OVERNIGHT,
    NAIL_TRIM,
    WALK,
    DROP_IN,
    CLIENT_PREFIX,
)

CLASSIFICATION_PATTERNS = PERSONAL_PATTERNS + WORK_PATTERNS
