"""School calendar resolution: week index, labels, report month and holidays."""

from __future__ import annotations

from datetime import date, timedelta
from functools import lru_cache
from typing import Iterable

from ..core.config import get_settings
from ..models import LUNAR_BREAK_LABEL, LUNAR_BREAK_WEEK, PRE_TERM_LABEL, PRE_TERM_WEEK, WeekInfo
from ..utils.datetime import format_day_month, parse_day, report_month_label


class CalendarResolver:
    """Maps a calendar day onto the school year.

    Weeks are 7-day periods counted from ``academic_start`` (week 1). Days
    before the start are pre-term (week 0) and days inside the lunar new year
    break resolve to week -1 regardless of where the arithmetic would put
    them. The report month is taken from the day itself, so a week that
    straddles two months contributes to both.

    A week ends six days after it starts, so the weekday of ``academic_start``
    fixes the week end: a Sunday start gives Saturday week ends, and the
    default Monday start gives Sunday week ends.
    """

    def __init__(
        self,
        academic_start: date,
        *,
        lunar_break: tuple[date, date] | None = None,
        holidays: Iterable[date] = (),
    ) -> None:
        if lunar_break is not None and lunar_break[0] > lunar_break[1]:
            raise ValueError("lunar break must start on or before its end")
        self.academic_start = academic_start
        self.lunar_break = lunar_break
        self.holidays = frozenset(holidays)

    def week_index(self, day: date) -> int:
        if self.in_lunar_break(day):
            return LUNAR_BREAK_WEEK
        if day < self.academic_start:
            return PRE_TERM_WEEK
        return ((day - self.academic_start).days // 7) + 1

    def week_bounds(self, week_index: int) -> tuple[date, date]:
        """Return the first and last day of a school week (weeks >= 1)."""

        if week_index < 1:
            raise ValueError(f"Week {week_index} has no calendar bounds")
        start = self.academic_start + timedelta(days=7 * (week_index - 1))
        return start, start + timedelta(days=6)

    def in_lunar_break(self, day: date) -> bool:
        if self.lunar_break is None:
            return False
        first, last = self.lunar_break
        return first <= day <= last

    def resolve(self, value: date | str) -> WeekInfo:
        """Resolve a day (or a ``d/m/yyyy`` string) to its :class:`WeekInfo`."""

        day = parse_day(value)
        index = self.week_index(day)
        is_holiday = index == LUNAR_BREAK_WEEK or day in self.holidays

        week_end = None
        if index == PRE_TERM_WEEK:
            label = PRE_TERM_LABEL
        elif index == LUNAR_BREAK_WEEK:
            label = LUNAR_BREAK_LABEL
        else:
            start, week_end = self.week_bounds(index)
            label = f"Week {index} ({format_day_month(start)} - {format_day_month(week_end)})"

        return WeekInfo(
            week_index=index,
            week_label=label,
            week_end_date=week_end,
            report_month_label=report_month_label(day),
            is_holiday=is_holiday,
        )


@lru_cache(maxsize=1)
def get_calendar_resolver() -> CalendarResolver:
    """Return the resolver built from cached settings."""

    settings = get_settings()
    return CalendarResolver(
        settings.academic_year_start,
        lunar_break=(settings.lunar_break_start, settings.lunar_break_end),
        holidays=settings.holidays,
    )
