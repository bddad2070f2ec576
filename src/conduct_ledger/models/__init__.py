"""Domain models for the conduct ledger."""

from .calendar import LUNAR_BREAK_LABEL, LUNAR_BREAK_WEEK, PRE_TERM_LABEL, PRE_TERM_WEEK, WeekInfo
from .event import Event
from .outcome import LedgerOutcome
from .remark import ClassRemark, MonthlyRemark
from .student import BASELINE_SCORE, Student

__all__ = [
    "BASELINE_SCORE",
    "ClassRemark",
    "Event",
    "LUNAR_BREAK_LABEL",
    "LUNAR_BREAK_WEEK",
    "LedgerOutcome",
    "MonthlyRemark",
    "PRE_TERM_LABEL",
    "PRE_TERM_WEEK",
    "Student",
    "WeekInfo",
]
