"""Public schema exports."""

from .event import EventCreate, EventWriteResult
from .period import PeriodSummary
from .ranking import ClassAverage, RankedStudent
from .reconciliation import (
	DeleteByClassAndWeek,
	DeleteByClassAndWeeks,
	DeleteByClasses,
	DeleteByIds,
	DeleteByPeriod,
)
from .student import ArchiveRequest, StudentCreate

__all__ = [
	"ArchiveRequest",
	"ClassAverage",
	"DeleteByClassAndWeek",
	"DeleteByClassAndWeeks",
	"DeleteByClasses",
	"DeleteByIds",
	"DeleteByPeriod",
	"EventCreate",
	"EventWriteResult",
	"PeriodSummary",
	"RankedStudent",
	"StudentCreate",
]
