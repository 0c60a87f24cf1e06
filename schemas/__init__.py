from .booking import BookingCreate, BookingUpdate, REQUIRED_CREATE_FIELDS
from .guest import GuestCreate, GuestUpdate
from .room import RoomCreate, RoomUpdate
