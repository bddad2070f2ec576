"""Free-text remarks attached to a student month or a class period."""

from pydantic import BaseModel


class MonthlyRemark(BaseModel):
    """Teacher remark for one student in one report month."""

    student_id: str
    month_year: str
    content: str
    recorded_by: str | None = None


class ClassRemark(BaseModel):
    """Remark for a whole class over a week or month label."""

    class_name: str
    period: str
    content: str
    recorded_by: str | None = None
