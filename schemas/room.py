from typing import Optional

from pydantic import BaseModel, Field, field_validator

from schemas._fields import reject_bool


class RoomCreate(BaseModel):
    number: str = Field(..., min_length=1, max_length=20)
    type: str = Field(..., min_length=1, max_length=40)
    price: float = Field(..., ge=0, allow_inf_nan=False)

    @field_validator("number", "type", mode="before")
    @classmethod
    def strip_text(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("price", mode="before")
    @classmethod
    def no_booleans(cls, value):
        return reject_bool(value)


class RoomUpdate(BaseModel):
    number: Optional[str] = Field(default=None, min_length=1, max_length=20)
    type: Optional[str] = Field(default=None, min_length=1, max_length=40)
    price: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)

    @field_validator("number", "type", mode="before")
    @classmethod
    def strip_text(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("price", mode="before")
    @classmethod
    def no_booleans(cls, value):
        return reject_bool(value)
