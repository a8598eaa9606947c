from flight_booking.booking.applications.add_customer import (
    AddCustomerService as AddCustomerService,
)
from flight_booking.booking.applications.add_flight import (
    AddFlightService as AddFlightService,
)
from flight_booking.booking.applications.cancel_booking import (
    CancelBookingService as CancelBookingService,
)
from flight_booking.booking.applications.create_booking import (
    CreateBookingService as CreateBookingService,
)
from flight_booking.booking.applications.delete_customer import (
    DeleteCustomerService as DeleteCustomerService,
)
from flight_booking.booking.applications.delete_flight import (
    CancellationNotice as CancellationNotice,
)
from flight_booking.booking.applications.delete_flight import (
    DeleteFlightService as DeleteFlightService,
)
from flight_booking.booking.applications.delete_flight import (
    FlightDeletionResult as FlightDeletionResult,
)
from flight_booking.booking.applications.rebook_booking import (
    RebookBookingService as RebookBookingService,
)
from flight_booking.booking.applications.unit_of_work import (
    UnitOfWork as UnitOfWork,
)
