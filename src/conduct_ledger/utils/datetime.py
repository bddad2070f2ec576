"""Date helpers for day parsing and report-month buckets."""

from datetime import date, datetime

_DAY_FORMATS = ("%d/%m/%Y", "%Y-%m-%d")


class UnparseableDate(ValueError):
    """Raised when a value cannot be read as a calendar day."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Unparseable date: {value!r}")
        self.value = value


def parse_day(value: date | str) -> date:
    """Return the calendar day for a ``date`` or a ``d/m/yyyy`` / ISO string."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise UnparseableDate(value)

    text = value.strip()
    for fmt in _DAY_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise UnparseableDate(value)


def format_day(day: date) -> str:
    return day.strftime("%d/%m/%Y")


def format_day_month(day: date) -> str:
    return day.strftime("%d/%m")


def report_month_label(day: date) -> str:
    """Return the ``M/YYYY`` report-month bucket for the supplied day."""

    return f"{day.month}/{day.year}"


def report_month_sort_key(label: str) -> tuple[int, int]:
    """Return ``(year, month)`` for a report-month label, for ordering."""

    month, _, year = label.partition("/")
    try:
        return int(year), int(month)
    except ValueError as exc:
        raise UnparseableDate(label) from exc
