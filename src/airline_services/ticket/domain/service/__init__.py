from .fare_calculator import FareCalculator as FareCalculator
from .fare_calculator import ceil_fare as ceil_fare
from .ticket_shared_service import TicketSharedService as TicketSharedService
