#
# formatcheck - Dates Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
from datetime import datetime, timedelta, timezone

# Third Party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from formatcheck.dates import (
    days_in_month,
    is_after,
    is_before,
    is_date,
    is_iso8601,
    is_leap_year,
    is_rfc2822,
    iso_weeks_in_year,
    parse_date,
    validate_date,
)
from formatcheck.options import DateOptions


# Tests ----------------------------------------------------------------------------------------------------------------


class TestIsDate:
    @pytest.mark.parametrize(
        "value",
        [
            pytest.param("2011-08-04", id="iso-date"),
            pytest.param("2011-09-30", id="iso-month-end"),
            pytest.param("2008-02-29", id="leap-day"),
            pytest.param("2000-02-29", id="leap-century"),
            pytest.param("04. 08. 2011.", id="dotted"),
            pytest.param("08/04/2011", id="us-slash"),
            pytest.param("08/31/2011", id="us-slash-month-end"),
            pytest.param("2011.08.04", id="ymd-dots"),
            pytest.param("2011/08/04", id="ymd-slashes"),
            pytest.param("2/29/24", id="two-digit-leap"),
            pytest.param("2-29-24", id="two-digit-leap-dash"),
            pytest.param("4. 8. 2011. GMT", id="dotted-zone"),
            pytest.param("2. 28. 2011. GMT", id="dotted-feb"),
            pytest.param("2. 29. 2008. GMT", id="dotted-leap"),
            pytest.param("2011-08-04 12:00", id="iso-space-time"),
            pytest.param("2/22/23", id="short-year"),
            pytest.param("2-23-22", id="short-year-dash"),
            pytest.param("11/2/23 12:24", id="slash-time"),
            pytest.param("2/22/23 23:24:26", id="slash-seconds"),
            pytest.param("2/22/23 11:24:26 PM", id="slash-meridiem"),
            pytest.param("Mon Aug 17 2015 00:24:56 GMT-0500 (CDT)", id="js-string"),
            pytest.param("2009-12T12:34", id="iso-month-time"),
            pytest.param("2009", id="iso-year"),
            pytest.param("2009-05", id="iso-year-month"),
            pytest.param("2009-001", id="iso-ordinal"),
            pytest.param("2009-05-19 00:00", id="iso-midnight"),
            pytest.param("2009-05-19 14:39:22", id="iso-seconds"),
            pytest.param("2009-05-19T14:39Z", id="iso-zulu"),
            pytest.param("2009-05-19 14:39:22-06:00", id="iso-offset"),
            pytest.param("2009-05-19 14:39:22+0600", id="iso-offset-basic"),
            pytest.param("2009-05-19 14:39:22-01", id="iso-offset-hours"),
            pytest.param("2015-10-20T00:53:09+12:00", id="iso-offset-max"),
            pytest.param("2007-04-06T00:00", id="iso-t-midnight"),
            pytest.param("2010-02-18T16:23:48.5", id="iso-fraction"),
            pytest.param("2016-01-20 07:11", id="iso-morning"),
        ],
    )
    def test_valid(self, value):
        """Accept calendar-correct dates in every supported family."""
        assert is_date(value) is True

    @pytest.mark.parametrize(
        "value",
        [
            pytest.param("Fri, 21 Nov 1997 09:55:06 -0600", id="rfc-basic"),
            pytest.param("Tue, 15 Nov 1994 12:45:26 GMT", id="rfc-gmt"),
            pytest.param("Tue, 1 Jul 2003 10:52:37 +0200", id="rfc-one-digit-day"),
            pytest.param("Thu, 13 Feb 1969 23:32:54 -0330", id="rfc-half-hour-zone"),
            pytest.param("Mon Sep 28 1964 00:05:49 GMT+1100 (AEDST)", id="rfc-gmt-offset-comment"),
            pytest.param("Mon Sep 28 1964 00:05:49 +1100 (AEDST)", id="rfc-offset-comment"),
            pytest.param("Mon Sep 28 1964 00:05:49 +1100", id="rfc-month-first"),
            pytest.param("Mon Sep 28 1964 00:05:49 \nGMT\n+1100\n", id="rfc-newlines"),
            pytest.param("Mon Sep 28 1964 00:05:49 \nGMT\n+1100\n(AEDST)", id="rfc-newlines-comment"),
            pytest.param("Thu,          13\n     Feb\n  1969\n        23:32\n     -0330", id="rfc-folded"),
            pytest.param(
                "Thu,          13\n     Feb\n  1969\n        23:32\n     -0330 (Newfoundland Time)",
                id="rfc-folded-comment",
            ),
            pytest.param("24 Nov 1997 14:22:01 -0800", id="rfc-no-day-name"),
            pytest.param("Thu,          29\n     Feb\n  1968\n        13:32\n     -0330", id="rfc-leap"),
            pytest.param("Fri, 30 Nov 1997 09:55:06 -0600", id="rfc-month-end"),
            pytest.param("Wed, 9 Apr 2014 06:21:03 -0200", id="rfc-negative-zone"),
            pytest.param("Wed, 10 Apr 2014 08:21:03 +0000", id="rfc-zero-zone"),
            pytest.param("Wed, 9 Apr 2014 08:21:03 EDT", id="rfc-named-zone"),
        ],
    )
    def test_valid_rfc2822(self, value):
        """Accept RFC-2822 dates, tolerating folded whitespace and comments."""
        assert is_date(value) is True
        assert is_rfc2822(value) is True

    @pytest.mark.parametrize(
        "value",
        [
            pytest.param("foo", id="word"),
            pytest.param("", id="empty"),
            pytest.param("2011-foo-04", id="word-month"),
            pytest.param("2011-09-31", id="september-31"),
            pytest.param("1900-02-29", id="century-not-leap"),
            pytest.param("2. 29. 1987. GMT", id="dotted-not-leap"),
            pytest.param("2. 29. 2011. GMT", id="dotted-not-leap-2011"),
            pytest.param("2/29/25", id="short-not-leap"),
            pytest.param("2-29-25", id="short-not-leap-dash"),
            pytest.param("13/01/2011", id="month-13"),
            pytest.param("2/3-2011", id="mixed-separators"),
            pytest.param("2/22/23 13:24 PM", id="meridiem-hour-13"),
            pytest.param("2/22/23 24:00", id="locale-hour-24"),
            pytest.param("GMT", id="zone-only"),
            pytest.param("2009367", id="ordinal-367"),
            pytest.param("2009-366", id="ordinal-366-common-year"),
            pytest.param("2007-04-05T24:50", id="hour-24-minutes"),
            pytest.param("2009-000", id="ordinal-zero"),
            pytest.param("2009-M511", id="junk-m"),
            pytest.param("2009-05-19T14a39r", id="junk-time"),
            pytest.param("2009-05-19T14:3924", id="mixed-time-separators"),
            pytest.param("2009-0519", id="mixed-date-separators"),
            pytest.param("2009-05-1914:39", id="missing-t"),
            pytest.param("2009-05-19r14:39", id="wrong-t"),
            pytest.param("2009-05-19 14:39:22+06a00", id="junk-offset"),
            pytest.param("2010-02-18T16.5:23.35:48", id="fraction-mid-time"),
            pytest.param("2010-02-18T16,25:23:48,444", id="comma-fraction-mid-time"),
            pytest.param("2009-02-30 14:", id="dangling-colon"),
            pytest.param("200912-32", id="basic-year-month"),
            pytest.param("2010-W53-1", id="week-53-in-52-week-year"),
            pytest.param("Thu,          29\n     Feb\n  1969\n        13:32\n     -0330", id="rfc-not-leap"),
            pytest.param("Fri, 31 Nov 1997 09:55:06 -0600", id="rfc-november-31"),
            pytest.param("Fri, 21 Nov 1997 25:55:06 -0600", id="rfc-hour-25"),
            pytest.param("Fri, 21 Nov 1997 09:55:06 +0575", id="rfc-zone-minutes"),
        ],
    )
    def test_invalid(self, value):
        """Reject malformed and calendar-incorrect dates."""
        assert is_date(value) is False

    @pytest.mark.parametrize(
        "value",
        [
            pytest.param("12", id="bare-number"),
            pytest.param("200905", id="basic-year-month"),
            pytest.param("2009-", id="dangling-dash"),
            pytest.param("2009-05-19 14:", id="dangling-colon"),
            pytest.param("200912-01", id="basic-then-extended"),
        ],
    )
    def test_no_lenient_fallback(self, value):
        """Reject inputs that only a lenient free-form parser would guess at."""
        assert is_date(value) is False

    @pytest.mark.parametrize(
        "value, options, expected",
        [
            pytest.param("2011-08-04", DateOptions(allow_iso8601=False), False, id="iso-disabled"),
            pytest.param("08/04/2011", DateOptions(allow_locale_formats=False), False, id="locale-disabled"),
            pytest.param(
                "Tue, 1 Jul 2003 10:52:37 +0200", DateOptions(allow_rfc2822=False), False, id="rfc-disabled"
            ),
            pytest.param("2011.08.04", {"allow_iso8601": False, "allow_rfc2822": False}, True, id="locale-only"),
        ],
    )
    def test_options(self, value, options, expected):
        """Enable and disable grammar families."""
        assert is_date(value, options) is expected

    def test_non_string_raises(self):
        """Raise TypeError for non-string input."""
        with pytest.raises(TypeError, match=r"(?i)date must be a string"):
            is_date(20110804)


class TestValidateDate:
    def test_returns_input(self):
        """Return the input unchanged on success."""
        assert validate_date("2. 29. 2008. GMT") == "2. 29. 2008. GMT"

    @pytest.mark.parametrize(
        "value, pattern",
        [
            pytest.param("2011-09-31", r"(?i)day 31 is out of range for 2011-09", id="day"),
            pytest.param("2010-366", r"(?i)ordinal day 366 is out of range", id="ordinal"),
            pytest.param("2010-W53", r"(?i)week 53 is out of range for 2010", id="week"),
            pytest.param("2007-04-05T24:30", r"(?i)hour 24 is only valid as 24:00:00", id="hour-24"),
            pytest.param("foo", r"(?i)no supported date format matches", id="no-format"),
        ],
    )
    def test_reason(self, value, pattern):
        """Explain why the date was rejected."""
        with pytest.raises(ValueError, match=pattern):
            validate_date(value)


class TestIsISO8601:
    @pytest.mark.parametrize(
        "value",
        [
            "2009-12T12:34",
            "2009",
            "2009-05-19",
            "20090519",
            "2009123",
            "2009-05",
            "2009-123",
            "2009-222",
            "2009-001",
            "2009-W01-1",
            "2009-W51-1",
            "2009-W511",
            "2009-W33",
            "2009W511",
            "2009-05-19 00:00",
            "2009-05-19 14",
            "2009-05-19 14:31",
            "2009-05-19 14:39:22",
            "2009-05-19T14:39Z",
            "2009-W21-2",
            "2009-W21-2T01:22",
            "2009-139",
            "2009-05-19 14:39:22-06:00",
            "2009-05-19 14:39:22+0600",
            "2009-05-19 14:39:22-01",
            "20090621T0545Z",
            "2007-04-06T00:00",
            "2007-04-05T24:00",
            "2010-02-18T16:23:48.5",
            "2010-02-18T16:23:48,444",
            "2010-02-18T16:23:48,3-06:00",
            "2010-02-18T16:23.4",
            "2010-02-18T16:23,25",
            "2010-02-18T16:23.33+0600",
            "2010-02-18T16.23334444",
            "2010-02-18T16,2283",
            "2009-05-19 143922.500",
            "2009-05-19 1439,55",
        ],
    )
    def test_valid(self, value):
        """Accept every ISO-8601 date, week, ordinal and time form."""
        assert is_iso8601(value) is True

    @pytest.mark.parametrize(
        "value",
        [
            "200905",
            "2009367",
            "2009-",
            "2007-04-05T24:50",
            "2009-000",
            "2009-M511",
            "2009M511",
            "2009-05-19T14a39r",
            "2009-05-19T14:3924",
            "2009-0519",
            "2009-05-1914:39",
            "2009-05-19 14:",
            "2009-05-19r14:39",
            "2009-05-19 14a39a22",
            "200912-01",
            "2009-05-19 14:39:22+06a00",
            "2009-05-19 146922.500",
            "2010-02-18T16.5:23.35:48",
            "2010-02-18T16:23.35:48",
            "2010-02-18T16:23.35:48.45",
            "2009-05-19 14.5.44",
            "2010-02-18T16:23.33.600",
            "2010-02-18T16,25:23:48,444",
            "2007-04-05T24:00:00.5",
            "2009-05-19\t14:39",
            "2009-05-19\n14:39",
        ],
    )
    def test_invalid(self, value):
        """Reject malformed ISO-8601 strings."""
        assert is_iso8601(value) is False

    def test_strict_adds_calendar_checks(self):
        """Check the calendar only in strict mode."""
        assert is_iso8601("2009-02-30") is True
        assert is_iso8601("2009-02-30", strict=True) is False
        assert is_iso8601("2008-02-29", strict=True) is True

    def test_strict_type(self):
        """Raise TypeError for a non-bool strict flag."""
        with pytest.raises(TypeError, match=r"(?i)strict must be a bool"):
            is_iso8601("2009", strict="yes")


class TestCalendarHelpers:
    @pytest.mark.parametrize(
        "year, expected",
        [(2008, True), (2011, False), (1900, False), (2000, True), (2024, True)],
        ids=["2008", "2011", "1900", "2000", "2024"],
    )
    def test_is_leap_year(self, year, expected):
        """Apply the Gregorian leap rule."""
        assert is_leap_year(year) is expected

    @pytest.mark.parametrize(
        "year, month, expected",
        [(2008, 2, 29), (1900, 2, 28), (2011, 9, 30), (2011, 12, 31), (2011, 4, 30)],
        ids=["leap-feb", "century-feb", "september", "december", "april"],
    )
    def test_days_in_month(self, year, month, expected):
        """Count days per month."""
        assert days_in_month(year, month) == expected

    def test_days_in_month_bad_month(self):
        """Reject months outside 1..12."""
        with pytest.raises(ValueError, match=r"(?i)month must be in 1\.\.12"):
            days_in_month(2011, 13)

    @pytest.mark.parametrize(
        "year",
        [2004, 2009, 2015, 2020, 2026, 2010, 2011, 2021],
    )
    def test_iso_weeks_in_year_matches_datetime(self, year):
        """Agree with the ISO calendar of the standard library."""
        expected = datetime(year, 12, 28).isocalendar()[1]
        assert iso_weeks_in_year(year) == expected


class TestParseDate:
    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param("2009-05-19T14:39Z", datetime(2009, 5, 19, 14, 39, tzinfo=timezone.utc), id="zulu"),
            pytest.param("2009-05", datetime(2009, 5, 1, tzinfo=timezone.utc), id="year-month"),
            pytest.param("2009-032", datetime(2009, 2, 1, tzinfo=timezone.utc), id="ordinal"),
            pytest.param("2009-W01-1", datetime(2008, 12, 29, tzinfo=timezone.utc), id="week"),
            pytest.param("2007-04-05T24:00", datetime(2007, 4, 6, tzinfo=timezone.utc), id="hour-24"),
            pytest.param(
                "2010-02-18T16:23:48.5", datetime(2010, 2, 18, 16, 23, 48, 500000, tzinfo=timezone.utc), id="fraction"
            ),
            pytest.param("2010-02-18T16.5", datetime(2010, 2, 18, 16, 30, tzinfo=timezone.utc), id="hour-fraction"),
            pytest.param("2/22/23 11:24:26 PM", datetime(2023, 2, 22, 23, 24, 26, tzinfo=timezone.utc), id="pm"),
            pytest.param("1/1/70 12:00 AM", datetime(1970, 1, 1, tzinfo=timezone.utc), id="midnight-am"),
        ],
    )
    def test_parse(self, value, expected):
        """Produce aware datetimes, defaulting to UTC and period starts."""
        assert parse_date(value) == expected

    def test_offset(self):
        """Apply numeric and named zone offsets."""
        parsed = parse_date("Fri, 21 Nov 1997 09:55:06 -0600")
        assert parsed.utcoffset() == timedelta(hours=-6)
        assert parsed == datetime(1997, 11, 21, 15, 55, 6, tzinfo=timezone.utc)
        assert parse_date("Wed, 9 Apr 2014 08:21:03 PDT").utcoffset() == timedelta(hours=-7)

    @pytest.mark.parametrize(
        "value",
        [
            pytest.param("foo", id="word"),
            pytest.param("2011-09-31", id="bad-day"),
            pytest.param("0000-01-01", id="year-zero"),
        ],
    )
    def test_unparsable(self, value):
        """Return None for invalid or unrepresentable dates."""
        assert parse_date(value) is None


class TestIsAfter:
    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param("2011-08-04", True, id="next-day"),
            pytest.param(datetime(2011, 9, 10), True, id="naive-datetime"),
            pytest.param("2015-09-17", True, id="years-later"),
            pytest.param("2010-07-02", False, id="earlier"),
            pytest.param("2011-08-03", False, id="same-instant"),
            pytest.param(datetime(1970, 1, 1, tzinfo=timezone.utc), False, id="epoch"),
            pytest.param("foo", False, id="unparsable"),
        ],
    )
    def test_against_date(self, value, expected):
        """Compare strictly against a given date."""
        assert is_after(value, "2011-08-03") is expected

    def test_against_now(self):
        """Compare against the current instant by default."""
        assert is_after("2100-08-04") is True
        assert is_after(datetime.now(timezone.utc) + timedelta(days=1)) is True
        assert is_after("2010-07-02") is False

    def test_unparsable_comparison(self):
        """Return False, not raise, when the comparison does not parse."""
        assert is_after("2015-09-17", "invalid date") is False
        assert is_after("invalid date", "invalid date") is False

    def test_offsets_compare_as_instants(self):
        """Compare instants across zones."""
        assert is_after("2011-08-03T12:00+02:00", "2011-08-03T11:00Z") is False
        assert is_after("2011-08-03T12:00-02:00", "2011-08-03T13:00Z") is True


class TestIsBefore:
    @pytest.mark.parametrize(
        "comparison",
        [
            pytest.param("08/04/2011", id="string"),
            pytest.param(datetime(2011, 8, 4), id="naive-datetime"),
        ],
    )
    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param("2010-07-02", True, id="earlier"),
            pytest.param("2010-08-04", True, id="year-earlier"),
            pytest.param(datetime(1970, 1, 1), True, id="epoch"),
            pytest.param("08/04/2011", False, id="same-instant"),
            pytest.param(datetime(2011, 10, 10), False, id="later"),
        ],
    )
    def test_against_date(self, value, comparison, expected):
        """Compare strictly against a given date."""
        assert is_before(value, comparison) is expected

    def test_against_now(self):
        """Compare against the current instant by default."""
        assert is_before("2000-08-04") is True
        assert is_before(datetime.now(timezone.utc) - timedelta(days=1)) is True
        assert is_before("2100-07-02") is False

    def test_unparsable(self):
        """Return False, not raise, for unparsable operands."""
        assert is_before("invalid date", "2011-08-03") is False
        assert is_before("1999-12-31", "invalid date") is False
