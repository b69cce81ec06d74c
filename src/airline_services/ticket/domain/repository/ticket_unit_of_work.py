from airline_services.shared.domain import AbstractUnitOfWork

from .flight_repository import FlightRepository
from .reservation_repository import ReservationRepository


class TicketUnitOfWork(AbstractUnitOfWork):
    """チケット予約のトランザクション境界

    flights.find_for_update で取得したロックと、flights / reservations への
    書き込みは commit で一括反映され、rollback ですべて破棄される。
    """

    flights: FlightRepository
    reservations: ReservationRepository
