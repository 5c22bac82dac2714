from pydantic import BaseModel, Field


class UniformBase(BaseModel):
    item_type: str = Field(..., min_length=1, max_length=128)
    item_number: str = Field(..., min_length=1, max_length=64)
    size: str | None = None
    status: str | None = None


class UniformCreate(UniformBase):
    model_config = {"str_strip_whitespace": True, "coerce_numbers_to_str": True}


class UniformResponse(UniformBase):
    uniform_id: int

    model_config = {"from_attributes": True}
