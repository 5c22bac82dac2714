from pydantic import BaseModel, Field


class StudentBase(BaseModel):
    full_name: str = Field(..., min_length=1, max_length=255)
    graduation_year: int = Field(..., ge=1900, le=2999)
    instrument_played: str | None = None


class StudentCreate(StudentBase):
    model_config = {"str_strip_whitespace": True}


class StudentResponse(StudentBase):
    student_id: int

    model_config = {"from_attributes": True}
