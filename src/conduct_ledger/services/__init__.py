"""Service layer exports."""

from . import (
	advisory_service,
	calendar_service,
	ledger_service,
	period_service,
	ranking_service,
	reconciliation_service,
)

__all__ = [
	"advisory_service",
	"calendar_service",
	"ledger_service",
	"period_service",
	"ranking_service",
	"reconciliation_service",
]
