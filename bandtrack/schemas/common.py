from pydantic import BaseModel


class MessageResponse(BaseModel):
    message: str


class CreatedResponse(MessageResponse):
    id: int
