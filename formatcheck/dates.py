"""
formatcheck Date Validators

Structural and calendar validation of date/time strings in three grammar families, tried in order:

    1. ISO-8601: calendar, ordinal and week dates, with optional time, fraction and UTC offset.
    2. RFC-2822: email header dates ('Tue, 1 Jul 2003 10:52:37 +0200').
    3. Locale forms: 'M/D/YYYY', 'M-D-YY', 'YYYY.MM.DD', 'M. D. YYYY.' and a few relatives.

The first grammar that matches structurally decides the verdict; a calendar failure there does not fall
through to the next family. Dates without a zone are taken as UTC.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import calendar
import re

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .options import DateOptions, resolve_options
from .tools import as_text, fmt_type, fmt_value


# Grammars -------------------------------------------------------------------------------------------------------------

_ISO8601 = re.compile(
    r"""
    (?P<year>[+-]?[0-9]{4})
    (?![0-9]{2}(?![0-9]))                       # YYYYMM is not an ISO form
    (?:
        (?P<dsep>-?)
        (?:
            (?P<month>0[1-9]|1[0-2])
            (?:(?P=dsep)(?P<day>0[1-9]|[12][0-9]|3[01]))?
          | W(?P<week>0[1-9]|[1-4][0-9]|5[0-3])
            (?:-?(?P<weekday>[1-7]))?
          | (?P<ordinal>00[1-9]|0[1-9][0-9]|[12][0-9]{2}|3[0-5][0-9]|36[0-6])
        )
        (?:
            [T ]
            (?P<hour>[01][0-9]|2[0-4])
            (?:
                (?P<tsep>:?)(?P<minute>[0-5][0-9])
                (?:(?P=tsep)(?P<second>[0-5][0-9]))?
            )?
            (?:[.,](?P<fraction>[0-9]+))?
            (?P<offset>[zZ]|[+-](?:[01][0-9]|2[0-3])(?::?[0-5][0-9])?)?
        )?
    )?
    """,
    re.VERBOSE | re.ASCII,
)

_MONTH_NAMES = r"Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec"

_RFC2822 = re.compile(
    rf"""
    \s*
    (?:(?:Mon|Tue|Wed|Thu|Fri|Sat|Sun),?\s+)?
    (?:
        (?P<day>[0-9]{{1,2}})\s+(?P<month>{_MONTH_NAMES})
      | (?P<month_first>{_MONTH_NAMES})\s+(?P<day_second>[0-9]{{1,2}})
    )
    \s+(?P<year>[0-9]{{4}})
    \s+(?P<hour>[0-9]{{2}}):(?P<minute>[0-9]{{2}})(?::(?P<second>[0-9]{{2}}))?
    (?:\s+(?P<zone>(?:GMT|UTC|UT|Z)(?:\s*[+-][0-9]{{4}})?|[+-][0-9]{{4}}|[ECMP][SD]T))?
    (?:\s*\([^()]*\))?
    \s*
    """,
    re.VERBOSE | re.IGNORECASE | re.ASCII,
)

_LOCALE_FORMATS = (
    # 08/04/2011, 2-29-24, 11/2/23 12:24, 2/22/23 11:24:26 PM
    re.compile(
        r"""
        (?P<month>[0-9]{1,2})(?P<sep>[/-])(?P<day>[0-9]{1,2})(?P=sep)(?P<year>[0-9]{4}|[0-9]{2})
        (?:
            \s+(?P<hour>[0-9]{1,2}):(?P<minute>[0-9]{2})(?::(?P<second>[0-9]{2}))?
            (?:\s*(?P<meridiem>[AP]M))?
        )?
        """,
        re.VERBOSE | re.IGNORECASE | re.ASCII,
    ),
    # 2011.08.04, 2011/08/04
    re.compile(r"(?P<year>[0-9]{4})(?P<sep>[./])(?P<month>[0-9]{2})(?P=sep)(?P<day>[0-9]{2})", re.ASCII),
    # 04. 08. 2011., 2. 29. 2008. GMT
    re.compile(
        r"(?P<month>[0-9]{1,2})\.\s?(?P<day>[0-9]{1,2})\.\s?(?P<year>[0-9]{4})\."
        r"(?:\s+(?P<zone>GMT|UTC|Z|[+-][0-9]{4}))?",
        re.IGNORECASE | re.ASCII,
    ),
)

_MONTHS = {name.lower(): number for number, name in enumerate(_MONTH_NAMES.split("|"), start=1)}

# US zones as minutes east of UTC
_NAMED_ZONES = {
    "EST": -300, "EDT": -240,
    "CST": -360, "CDT": -300,
    "MST": -420, "MDT": -360,
    "PST": -480, "PDT": -420,
}

_TWO_DIGIT_YEAR_PIVOT = 50


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class _DateFields:
    """Broken-down date/time as matched by a grammar, before calendar checks."""
    year: int
    month: int | None = None
    day: int | None = None
    week: int | None = None
    weekday: int | None = None
    ordinal: int | None = None
    hour: int | None = None
    minute: int | None = None
    second: int | None = None
    fraction: str | None = None
    offset: int | None = None  # minutes east of UTC; None means no zone given


# Methods --------------------------------------------------------------------------------------------------------------


def is_date(value: str, options: DateOptions | Mapping[str, Any] | None = None, **overrides) -> bool:
    """
    Check whether a string is a calendar-correct date in a supported format.

    Examples:
        >>> is_date("2008-02-29")
        True
        >>> is_date("1900-02-29")
        False
        >>> is_date("Tue, 1 Jul 2003 10:52:37 +0200")
        True
        >>> is_date("08/04/2011", allow_locale_formats=False)
        False
    """
    opts = resolve_options(DateOptions, options, **overrides)
    try:
        _check_fields(_parse_fields(as_text(value, name="date"), opts))
    except ValueError:
        return False
    return True


def validate_date(value: str, options: DateOptions | Mapping[str, Any] | None = None, **overrides) -> str:
    """
    Validate a date/time string.

    The grammars enabled by options are tried in order ISO-8601, RFC-2822, locale forms. The first
    structural match is then checked for calendar correctness:

        - month in 1..12 and day within the month (Gregorian leap rule);
        - ordinal day within 365 or 366, ISO week within 52 or 53;
        - hour in 0..24, with 24 only as 24:00:00 and no nonzero fraction;
        - minute and second in 0..59; RFC-2822 and locale times use a 0..23 hour.

    Note:
        Two-digit locale years below 50 mean 20xx, others 19xx. Day names are not checked
        against the date they precede.

    Args:
        value: Candidate date string.
        options: DateOptions, a mapping of its fields, or None for defaults.
        **overrides: DateOptions fields applied on top of options.

    Returns:
        The input unchanged.

    Raises:
        TypeError: If value is not a string or options are mistyped.
        ValueError: If no enabled grammar matches, or the matched date is not a real calendar date.

    Examples:
        >>> validate_date("2011-08-04")
        '2011-08-04'
        >>> validate_date("2011-09-31")
        Traceback (most recent call last):
            ...
        ValueError: day 31 is out of range for 2011-09
    """
    opts = resolve_options(DateOptions, options, **overrides)
    value = as_text(value, name="date")
    _check_fields(_parse_fields(value, opts))
    return value


def parse_date(value: str, options: DateOptions | Mapping[str, Any] | None = None, **overrides) -> datetime | None:
    """
    Parse a date string into a timezone-aware datetime, or return None if it does not validate.

    Missing components default to the start of their period ('2009-05' is 2009-05-01T00:00Z) and a
    missing zone means UTC. Dates outside the datetime range (years before 1 or after 9999) give None.

    Examples:
        >>> parse_date("2009-05-19T14:39Z")
        datetime.datetime(2009, 5, 19, 14, 39, tzinfo=datetime.timezone.utc)
        >>> parse_date("2009-W01-1")
        datetime.datetime(2008, 12, 29, 0, 0, tzinfo=datetime.timezone.utc)
        >>> parse_date("foo") is None
        True
    """
    opts = resolve_options(DateOptions, options, **overrides)
    try:
        fields = _parse_fields(as_text(value, name="date"), opts)
        _check_fields(fields)
        return _to_datetime(fields)
    except (ValueError, OverflowError):
        return None


def is_after(value: str | datetime, comparison: str | datetime | None = None) -> bool:
    """
    Check whether a date is strictly later than comparison (default: now).

    Both operands go through parse_date; a naive datetime is taken as UTC. An operand that does not
    parse makes the result False.

    Examples:
        >>> is_after("2011-08-04", "2011-08-03")
        True
        >>> is_after("2011-08-03", "2011-08-03")
        False
        >>> is_after("2015-09-17", "invalid date")
        False
    """
    moment, reference = _as_moment(value), _as_reference(comparison)
    if moment is None or reference is None:
        return False
    return moment > reference


def is_before(value: str | datetime, comparison: str | datetime | None = None) -> bool:
    """
    Check whether a date is strictly earlier than comparison (default: now).

    Examples:
        >>> is_before("2010-07-02", "08/04/2011")
        True
        >>> is_before("08/04/2011", "08/04/2011")
        False
    """
    moment, reference = _as_moment(value), _as_reference(comparison)
    if moment is None or reference is None:
        return False
    return moment < reference


def is_iso8601(value: str, strict: bool = False) -> bool:
    """
    Check whether a string is an ISO-8601 date, optionally with time and offset.

    Without strict only the structure is checked (plus the 24:00 rule), so '2009-02-30' passes;
    strict=True adds the calendar checks of is_date().

    Examples:
        >>> is_iso8601("2009-W21-2T01:22")
        True
        >>> is_iso8601("200905")
        False
        >>> is_iso8601("2009-02-30"), is_iso8601("2009-02-30", strict=True)
        (True, False)
    """
    if not isinstance(strict, bool):
        raise TypeError(f"strict must be a bool, got {fmt_type(strict)}")
    try:
        m = _ISO8601.fullmatch(as_text(value, name="date"))
        if m is None:
            return False
        fields = _iso_fields(m)
        _check_time(fields)
        if strict:
            _check_fields(fields)
    except ValueError:
        return False
    return True


def is_rfc2822(value: str) -> bool:
    """
    Check whether a string is a calendar-correct RFC-2822 date.

    Examples:
        >>> is_rfc2822("Fri, 21 Nov 1997 09:55:06 -0600")
        True
        >>> is_rfc2822("Fri, 31 Nov 1997 09:55:06 -0600")
        False
    """
    return is_date(value, DateOptions(allow_iso8601=False, allow_locale_formats=False))


def is_leap_year(year: int) -> bool:
    """Gregorian leap year: divisible by 4, and not by 100 unless also by 400."""
    return calendar.isleap(year)


def days_in_month(year: int, month: int) -> int:
    """
    Number of days in a month of the proleptic Gregorian calendar.

    Examples:
        >>> days_in_month(2008, 2), days_in_month(1900, 2), days_in_month(2011, 9)
        (29, 28, 30)
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {fmt_value(month)}")
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return 30 if month in (4, 6, 9, 11) else 31


def iso_weeks_in_year(year: int) -> int:
    """
    Number of ISO weeks in a year: 53 when it starts on a Thursday, or on a Wednesday in a leap year.

    Examples:
        >>> iso_weeks_in_year(2009), iso_weeks_in_year(2010)
        (53, 52)
    """
    def p(y: int) -> int:
        return (y + y // 4 - y // 100 + y // 400) % 7

    return 53 if p(year) == 4 or p(year - 1) == 3 else 52


# Private Methods ------------------------------------------------------------------------------------------------------

def _parse_fields(text: str, opts: DateOptions) -> _DateFields:
    if opts.allow_iso8601:
        m = _ISO8601.fullmatch(text)
        if m:
            return _iso_fields(m)
    if opts.allow_rfc2822:
        m = _RFC2822.fullmatch(text)
        if m:
            return _rfc2822_fields(m)
    if opts.allow_locale_formats:
        for pattern in _LOCALE_FORMATS:
            m = pattern.fullmatch(text)
            if m:
                return _locale_fields(m)
    raise ValueError(f"invalid date {fmt_value(text)}: no supported date format matches")


def _iso_fields(m: re.Match) -> _DateFields:
    g = m.groupdict()
    return _DateFields(
        year=int(g["year"]),
        month=_opt_int(g["month"]),
        day=_opt_int(g["day"]),
        week=_opt_int(g["week"]),
        weekday=_opt_int(g["weekday"]),
        ordinal=_opt_int(g["ordinal"]),
        hour=_opt_int(g["hour"]),
        minute=_opt_int(g["minute"]),
        second=_opt_int(g["second"]),
        fraction=g["fraction"],
        offset=_iso_offset(g["offset"]),
    )


def _rfc2822_fields(m: re.Match) -> _DateFields:
    g = m.groupdict()
    month = g["month"] or g["month_first"]
    _check_clock_hour(int(g["hour"]))
    return _DateFields(
        year=int(g["year"]),
        month=_MONTHS[month.lower()],
        day=int(g["day"] or g["day_second"]),
        hour=int(g["hour"]),
        minute=int(g["minute"]),
        second=_opt_int(g["second"]),
        offset=_zone_offset(g["zone"]),
    )


def _locale_fields(m: re.Match) -> _DateFields:
    g = m.groupdict()
    year = int(g["year"])
    if len(g["year"]) == 2:
        year += 2000 if year < _TWO_DIGIT_YEAR_PIVOT else 1900

    hour = _opt_int(g.get("hour"))
    meridiem = g.get("meridiem")
    if meridiem:
        if not 1 <= hour <= 12:
            raise ValueError(f"hour {hour} is out of range for a 12-hour clock")
        hour = hour % 12 + (12 if meridiem.upper() == "PM" else 0)
    _check_clock_hour(hour)

    return _DateFields(
        year=year,
        month=int(g["month"]),
        day=int(g["day"]),
        hour=hour,
        minute=_opt_int(g.get("minute")),
        second=_opt_int(g.get("second")),
        offset=_zone_offset(g.get("zone")),
    )


def _check_fields(f: _DateFields) -> None:
    """Raise ValueError unless f names an existing calendar date and time of day."""
    if f.month is not None:
        dim = days_in_month(f.year, f.month)
        if f.day is not None and not 1 <= f.day <= dim:
            raise ValueError(f"day {f.day} is out of range for {f.year}-{f.month:02d}")
    if f.ordinal is not None:
        year_days = 366 if is_leap_year(f.year) else 365
        if not 1 <= f.ordinal <= year_days:
            raise ValueError(f"ordinal day {f.ordinal} is out of range for {f.year} ({year_days} days)")
    if f.week is not None and f.week > iso_weeks_in_year(f.year):
        raise ValueError(f"week {f.week} is out of range for {f.year}")
    _check_time(f)
    if f.offset is not None and abs(f.offset) >= 24 * 60:
        raise ValueError(f"UTC offset of {f.offset} minutes is out of range")


def _check_time(f: _DateFields) -> None:
    if f.hour is None:
        return
    if f.hour == 24:
        if f.minute or f.second or (f.fraction and f.fraction.strip("0")):
            raise ValueError("hour 24 is only valid as 24:00:00")
    elif not 0 <= f.hour <= 23:
        raise ValueError(f"hour {f.hour} is out of range")
    if f.minute is not None and not 0 <= f.minute <= 59:
        raise ValueError(f"minute {f.minute} is out of range")
    if f.second is not None and not 0 <= f.second <= 59:
        raise ValueError(f"second {f.second} is out of range")


def _to_datetime(f: _DateFields) -> datetime:
    if f.ordinal is not None:
        day = date(f.year, 1, 1) + timedelta(days=f.ordinal - 1)
    elif f.week is not None:
        day = date.fromisocalendar(f.year, f.week, f.weekday or 1)
    else:
        day = date(f.year, f.month or 1, f.day or 1)

    tz = timezone.utc if not f.offset else timezone(timedelta(minutes=f.offset))
    moment = datetime.combine(day, time(), tzinfo=tz)
    moment += timedelta(hours=f.hour or 0, minutes=f.minute or 0, seconds=f.second or 0)

    if f.fraction:
        # Fraction applies to the smallest unit present
        if f.second is not None:
            unit = 1
        elif f.minute is not None:
            unit = 60
        else:
            unit = 3600
        moment += timedelta(seconds=float(f"0.{f.fraction}") * unit)
    return moment


def _as_moment(value: str | datetime) -> datetime | None:
    if isinstance(value, datetime):
        return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)
    return parse_date(value)


def _as_reference(comparison: str | datetime | None) -> datetime | None:
    if comparison is None:
        return datetime.now(timezone.utc)
    return _as_moment(comparison)


def _iso_offset(offset: str | None) -> int | None:
    if offset is None:
        return None
    if offset in ("Z", "z"):
        return 0
    digits = offset[1:].replace(":", "")
    minutes = int(digits[:2]) * 60 + int(digits[2:] or 0)
    return -minutes if offset[0] == "-" else minutes


def _zone_offset(zone: str | None) -> int | None:
    if zone is None:
        return None
    zone = zone.upper()
    if zone in _NAMED_ZONES:
        return _NAMED_ZONES[zone]
    numeric = zone.lstrip("GMTUCZ").strip()
    if not numeric:
        return 0
    hours, minutes = int(numeric[1:3]), int(numeric[3:5])
    if minutes > 59:
        raise ValueError(f"invalid zone offset {fmt_value(zone)}")
    total = hours * 60 + minutes
    return -total if numeric[0] == "-" else total


def _check_clock_hour(hour: int | None) -> None:
    if hour is not None and hour > 23:
        raise ValueError(f"hour {hour} is out of range")


def _opt_int(s: str | None) -> int | None:
    return None if s is None else int(s)
