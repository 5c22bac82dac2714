from pydantic import BaseModel, Field


class InstrumentBase(BaseModel):
    instrument_name: str = Field(..., min_length=1, max_length=128)
    instrument_number: str = Field(..., min_length=1, max_length=64)
    locker_number: str | None = None
    locker_code: str | None = None
    condition_notes: str | None = None


class InstrumentCreate(InstrumentBase):
    model_config = {"str_strip_whitespace": True, "coerce_numbers_to_str": True}


class InstrumentResponse(InstrumentBase):
    instrument_id: int

    model_config = {"from_attributes": True}
