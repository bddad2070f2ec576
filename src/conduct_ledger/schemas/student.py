"""Pydantic schemas for roster endpoints."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models import Student


class StudentCreate(BaseModel):
    """Request body for adding a student to the roster."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    class_name: str = Field(..., alias="class")
    parent_name: Optional[str] = None

    def to_student(self) -> Student:
        return Student(id=self.id, name=self.name, class_name=self.class_name, parent_name=self.parent_name)


class ArchiveRequest(BaseModel):
    archive: bool = True
    reason: Optional[str] = Field(None, max_length=280)
