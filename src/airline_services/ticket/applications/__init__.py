from .register_reservation import (
    RegisterReservationService as RegisterReservationService,
)
from .register_reservation import TicketReserveResult as TicketReserveResult
from .reserve_ticket import ReserveTicketService as ReserveTicketService
from .reserve_ticket import TicketReserveSummary as TicketReserveSummary
from .validate_reservation import (
    ValidateReservationService as ValidateReservationService,
)
