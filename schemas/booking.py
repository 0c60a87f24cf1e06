from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from models.booking import BookingStatus
from schemas._fields import parse_when, reject_bool
from utils.ids import MAX_ID

REQUIRED_CREATE_FIELDS = ("guestId", "roomId", "checkIn", "checkOut", "totalPrice")


class BookingCreate(BaseModel):
    """
    Body of POST /bookings.

    Ids are positive integers (numeric strings are accepted, booleans are not),
    dates are ISO 8601 and ``totalPrice`` must be a finite, non-negative number.
    """
    model_config = ConfigDict(populate_by_name=True)

    guest_id: int = Field(..., alias="guestId", ge=1, le=MAX_ID)
    room_id: int = Field(..., alias="roomId", ge=1, le=MAX_ID)
    check_in: datetime = Field(..., alias="checkIn")
    check_out: datetime = Field(..., alias="checkOut")
    total_price: float = Field(..., alias="totalPrice", ge=0, allow_inf_nan=False)
    notes: Optional[str] = None
    status: Optional[BookingStatus] = None

    @field_validator("check_in", "check_out", mode="before")
    @classmethod
    def parse_dates(cls, value):
        return parse_when(value)

    @field_validator("guest_id", "room_id", "total_price", mode="before")
    @classmethod
    def no_booleans(cls, value):
        return reject_bool(value)


class BookingUpdate(BaseModel):
    """Body of PUT /bookings/<id>. Every field is optional; only supplied ones apply."""
    model_config = ConfigDict(populate_by_name=True)

    guest_id: Optional[int] = Field(default=None, alias="guestId", ge=1, le=MAX_ID)
    room_id: Optional[int] = Field(default=None, alias="roomId", ge=1, le=MAX_ID)
    check_in: Optional[datetime] = Field(default=None, alias="checkIn")
    check_out: Optional[datetime] = Field(default=None, alias="checkOut")
    status: Optional[BookingStatus] = None
    total_price: Optional[float] = Field(default=None, alias="totalPrice", ge=0, allow_inf_nan=False)
    notes: Optional[str] = None

    @field_validator("check_in", "check_out", mode="before")
    @classmethod
    def parse_dates(cls, value):
        return parse_when(value)

    @field_validator("guest_id", "room_id", "total_price", mode="before")
    @classmethod
    def no_booleans(cls, value):
        return reject_bool(value)
