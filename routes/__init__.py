from .health import health_bp
from .booking import booking_bp
from .guests import guest_bp
from .rooms import room_bp
