"""Report window resolution from optional caller-supplied dates"""

import logging
from datetime import date, datetime
from typing import Optional, Union

from bankintegration.domain.exceptions import InvalidDateFormatError
from bankintegration.domain.models import DateRange, to_utc
from bankintegration.utils.date_utils import first_of_month, last_of_month

logger = logging.getLogger(__name__)

DateInput = Union[date, str, None]


def parse_date(value: Union[date, str]) -> date:
    """
    Parse a calendar date from a date, datetime or ISO string.

    Date-time strings are accepted and truncated to their date part.

    Raises:
        InvalidDateFormatError: If value is not a recognizable date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError as e:
        raise InvalidDateFormatError(f"Invalid date: {value!r}") from e


def try_parse_date(value: DateInput) -> Optional[date]:
    """Like parse_date, but returns None for missing or unparseable input"""
    if value is None:
        return None
    try:
        return parse_date(value)
    except InvalidDateFormatError:
        return None


def current_month(now: datetime) -> DateRange:
    today = to_utc(now).date()
    return DateRange(first_of_month(today), last_of_month(today))


def resolve_date_range(
    now: datetime,
    explicit_from: DateInput = None,
    explicit_to: DateInput = None,
) -> DateRange:
    """
    Resolve the report window.

    Rules:
    - No dates: current month of `now` (UTC)
    - Only from: from through the last day of from's month
    - Both: used verbatim, ordering is not checked
    - Unparseable from: falls back to the current month
    - Unparseable to: treated as absent
    """
    from_date = try_parse_date(explicit_from)
    if from_date is None:
        if explicit_from is not None or explicit_to is not None:
            logger.warning(
                "Falling back to current month",
                extra={"explicit_from": str(explicit_from), "explicit_to": str(explicit_to)},
            )
        return current_month(now)

    to_date = try_parse_date(explicit_to)
    if to_date is None:
        if explicit_to is not None:
            logger.warning("Ignoring unparseable to date", extra={"explicit_to": str(explicit_to)})
        return DateRange(from_date, last_of_month(from_date))

    date_range = DateRange(from_date, to_date)
    if not date_range.is_ordered:
        logger.warning(
            "Report window ends before it starts",
            extra={"from": from_date.isoformat(), "to": to_date.isoformat()},
        )
    return date_range
