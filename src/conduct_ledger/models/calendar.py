"""Resolved school-calendar position of a single day."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict

PRE_TERM_WEEK = 0
LUNAR_BREAK_WEEK = -1
PRE_TERM_LABEL = "pre-term"
LUNAR_BREAK_LABEL = "lunar new year break"


class WeekInfo(BaseModel):
    """Week index, labels and holiday status for a day."""

    model_config = ConfigDict(frozen=True)

    week_index: int
    week_label: str
    week_end_date: Optional[date]
    report_month_label: str
    is_holiday: bool
