"""Text normalization applied before moment grammar matching.

Idioms such as "noon" or "tomorrow" are rewritten into forms the grammar already understands. Each
rewrite only fires on a whole whitespace-delimited word, so "noonish" or "todays" are left alone.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta

# Start-of-string or preceded by whitespace; end-of-string or followed by whitespace.
_WORD_START = r"(?:^|(?<=\s))"
_WORD_END = r"(?=$|\s)"
_TWELVE_PREFIX = r"(?:12(?::00(?::00)?)?\s*)?"

_NOON_RE = re.compile(
    rf"{_WORD_START}{_TWELVE_PREFIX}(?:noon|mid(?:-?d)?ay){_WORD_END}",
    flags=re.IGNORECASE,
)
_MIDNIGHT_RE = re.compile(
    rf"{_WORD_START}{_TWELVE_PREFIX}mid-?night{_WORD_END}",
    flags=re.IGNORECASE,
)
_TODAY_RE = re.compile(rf"{_WORD_START}todd?ay{_WORD_END}", flags=re.IGNORECASE)
_TOMORROW_RE = re.compile(rf"{_WORD_START}tomm?orr?ow{_WORD_END}", flags=re.IGNORECASE)

NOON = "12:00:00 PM"
MIDNIGHT = "12:00:00 AM"
_ISO_DATE_FORMAT = "%Y-%m-%d"


def normalize_moment_text(text: str, reference: datetime) -> str:
    """Rewrite noon/midnight and today/tomorrow idioms.

    - "noon", "midday", "12 noon", "12:00 mid-day" -> "12:00:00 PM"
    - "midnight", "12 mid-night" -> "12:00:00 AM"
    - "today" / "tomorrow" (and common misspellings) -> the reference date (or the day after) as
      `yyyy-mm-dd`, which the year-first numeric date pattern reads back.
    """

    value = (text or "").strip()
    value = _NOON_RE.sub(NOON, value)
    value = _MIDNIGHT_RE.sub(MIDNIGHT, value)
    value = _TODAY_RE.sub(reference.strftime(_ISO_DATE_FORMAT), value)
    value = _TOMORROW_RE.sub((reference + timedelta(days=1)).strftime(_ISO_DATE_FORMAT), value)
    return value
