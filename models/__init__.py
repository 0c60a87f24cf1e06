from .db import db
from .guest import Guest
from .room import Room
from .booking import Booking, BookingStatus
from .audit_log import AuditLog
