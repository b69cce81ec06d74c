from .flight_repository import FlightRepository as FlightRepository
from .reservation_repository import ReservationRepository as ReservationRepository
from .ticket_unit_of_work import TicketUnitOfWork as TicketUnitOfWork
