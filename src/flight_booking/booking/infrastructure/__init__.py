from .dynamodb_booking_system_repository import (
    DynamoDBBookingSystemRepository as DynamoDBBookingSystemRepository,
)
from .file_booking_system_repository import (
    FileBookingSystemRepository as FileBookingSystemRepository,
)
from .snapshot import BookingSystemSnapshot as BookingSystemSnapshot
