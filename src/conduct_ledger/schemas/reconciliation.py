"""Request payloads for bulk deletion endpoints."""

import re
from typing import Literal

from pydantic import BaseModel, Field, model_validator

REPORT_MONTH_PATTERN = re.compile(r"^(1[0-2]|[1-9])/\d{4}$")


class DeleteByIds(BaseModel):
    event_ids: list[str] = Field(..., min_length=1)


class DeleteByClasses(BaseModel):
    class_names: list[str] = Field(..., min_length=1)


class DeleteByClassAndWeeks(BaseModel):
    class_names: list[str] = Field(..., min_length=1)
    weeks: list[int] = Field(..., min_length=1)


class DeleteByClassAndWeek(BaseModel):
    class_name: str
    week: int


class DeleteByPeriod(BaseModel):
    """A school week (``period_type="week"``, int value) or a report month (``"month"``, ``"M/YYYY"``)."""

    period_type: Literal["week", "month"]
    value: int | str

    @model_validator(mode="after")
    def _check_value(self) -> "DeleteByPeriod":
        if self.period_type == "week" and not isinstance(self.value, int):
            raise ValueError("week periods take an integer week index")
        if self.period_type == "month" and not (
            isinstance(self.value, str) and REPORT_MONTH_PATTERN.match(self.value)
        ):
            raise ValueError("month periods take an M/YYYY report month")
        return self
