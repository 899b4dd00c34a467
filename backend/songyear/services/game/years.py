"""Release-year extraction for catalog date strings.

Catalog dates are free-form text from a third party. A round must never fail
because of one, so anything unparseable resolves to the current year and is
tagged ``was_fallback=True`` so callers can tell it apart from a real year.
"""

import logging
from datetime import date, datetime
from typing import Optional

from songyear.models import YearResult

log = logging.getLogger(__name__)

# Tried in order after ISO-8601 parsing fails
_DATE_FORMATS = (
    '%Y',
    '%Y-%m',
    '%Y/%m/%d',
    '%Y/%m',
    '%m/%d/%Y',
    '%d %B %Y',
    '%d %b %Y',
    '%B %d, %Y',
    '%b %d, %Y',
    '%B %Y',
    '%b %Y',
)


def _parse(value: str) -> Optional[datetime]:
    text = value.strip()
    if not text:
        return None
    # iTunes sends e.g. 2011-01-24T08:00:00Z
    iso = text[:-1] + '+00:00' if text.endswith(('Z', 'z')) else text
    try:
        return datetime.fromisoformat(iso)
    except ValueError:
        pass
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def extract_year(date_string, today: Optional[date] = None) -> YearResult:
    """Return the calendar year of ``date_string``.

    Falls back to ``today.year`` (default: the system date) when the value is
    not a string or cannot be parsed as a date. Never raises.
    """
    parsed = _parse(date_string) if isinstance(date_string, str) else None
    if parsed is not None:
        return YearResult(year=parsed.year)

    fallback_year = (today or date.today()).year
    log.warning(f"[date-fallback] unparseable release date {date_string!r}; using {fallback_year}")
    return YearResult(year=fallback_year, was_fallback=True)
