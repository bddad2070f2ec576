from datetime import date

import pytest

from conduct_ledger.services.calendar_service import CalendarResolver
from conduct_ledger.utils.datetime import UnparseableDate


def test_start_date_is_week_one(resolver: CalendarResolver):
    info = resolver.resolve(date(2025, 9, 8))
    assert info.week_index == 1
    assert info.week_label == "Week 1 (08/09 - 14/09)"
    assert info.week_end_date == date(2025, 9, 14)
    assert info.report_month_label == "9/2025"
    assert info.is_holiday is False


def test_day_before_start_is_pre_term(resolver: CalendarResolver):
    info = resolver.resolve("07/09/2025")
    assert info.week_index == 0
    assert info.week_label == "pre-term"
    assert info.week_end_date is None


def test_holiday_before_start_stays_pre_term(resolver: CalendarResolver):
    info = resolver.resolve("2/9/2025")
    assert info.week_index == 0
    assert info.is_holiday is True


def test_week_boundaries(resolver: CalendarResolver):
    assert resolver.resolve("14/09/2025").week_index == 1
    assert resolver.resolve("15/09/2025").week_index == 2
    assert resolver.resolve("15/09/2025").week_label == "Week 2 (15/09 - 21/09)"


def test_week_straddling_months_keeps_each_day_in_its_own_report_month(resolver: CalendarResolver):
    last_of_september = resolver.resolve("30/09/2025")
    first_of_october = resolver.resolve("01/10/2025")
    assert last_of_september.week_index == first_of_october.week_index == 4
    assert last_of_september.report_month_label == "9/2025"
    assert first_of_october.report_month_label == "10/2025"
    assert first_of_october.week_label == "Week 4 (29/09 - 05/10)"


@pytest.mark.parametrize("day", ["14/02/2026", "17/02/2026", "22/02/2026"])
def test_lunar_break_is_inclusive_and_overrides_week_arithmetic(resolver: CalendarResolver, day: str):
    info = resolver.resolve(day)
    assert info.week_index == -1
    assert info.week_label == "lunar new year break"
    assert info.is_holiday is True
    assert info.week_end_date is None


def test_days_around_lunar_break_keep_nominal_weeks(resolver: CalendarResolver):
    assert resolver.resolve("13/02/2026").week_index == 23
    assert resolver.resolve("23/02/2026").week_index == 25


def test_public_holiday_keeps_week_index(resolver: CalendarResolver):
    info = resolver.resolve("01/01/2026")
    assert info.week_index == 17
    assert info.is_holiday is True
    assert info.report_month_label == "1/2026"


def test_resolve_accepts_iso_and_unpadded_strings(resolver: CalendarResolver):
    assert resolver.resolve("2025-09-15") == resolver.resolve("15/9/2025") == resolver.resolve(date(2025, 9, 15))


def test_resolve_is_deterministic(resolver: CalendarResolver):
    assert resolver.resolve("20/11/2025") == resolver.resolve("20/11/2025")


@pytest.mark.parametrize("value", ["", "31/02/2026", "2025/09/15", "tomorrow", None])
def test_unparseable_date_fails_fast(resolver: CalendarResolver, value):
    with pytest.raises(UnparseableDate):
        resolver.resolve(value)


def test_inverted_lunar_break_is_rejected():
    with pytest.raises(ValueError):
        CalendarResolver(date(2025, 9, 8), lunar_break=(date(2026, 2, 22), date(2026, 2, 14)))


def test_week_bounds_rejects_non_teaching_weeks(resolver: CalendarResolver):
    with pytest.raises(ValueError):
        resolver.week_bounds(0)


def test_sunday_start_gives_saturday_week_ends():
    resolver = CalendarResolver(date(2025, 9, 7))
    info = resolver.resolve("10/09/2025")
    assert info.week_end_date == date(2025, 9, 13)
    assert info.week_end_date.weekday() == 5
    assert info.week_label == "Week 1 (07/09 - 13/09)"


def test_monday_start_gives_sunday_week_ends(resolver: CalendarResolver):
    assert resolver.resolve("10/09/2025").week_end_date.weekday() == 6
