from datetime import date
from pydantic import BaseModel, field_validator


class AssignmentCreate(BaseModel):
    # Presence rules live in the service so that each gets its own message.
    student_fk: int | None = None
    instrument_fk: int | None = None
    uniform_fk: int | None = None
    date_out: date | None = None
    date_in: date | None = None

    @field_validator("student_fk", "instrument_fk", "uniform_fk", "date_out", "date_in", mode="before")
    @classmethod
    def blank_means_absent(cls, value):
        # An HTML select or date input with nothing chosen submits "".
        if isinstance(value, str) and not value.strip():
            return None
        return value


class AssignmentRow(BaseModel):
    assignment_id: int
    student_id: int
    student_name: str
    graduation_year: int
    instrument_id: int | None = None
    instrument_name: str | None = None
    instrument_number: str | None = None
    uniform_id: int | None = None
    uniform_type: str | None = None
    uniform_item_number: str | None = None
    uniform_size: str | None = None
    date_out: date
    date_in: date | None = None

    @property
    def is_active(self) -> bool:
        return self.date_in is None


class ActiveIds(BaseModel):
    instrument_id: int | None = None
    uniform_id: int | None = None
