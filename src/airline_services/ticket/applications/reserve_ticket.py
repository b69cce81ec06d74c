from dataclasses import dataclass
from datetime import date

from airline_services.shared.domain import Money
from airline_services.ticket.domain.entity import Reservation
from airline_services.ticket.domain.service import FareCalculator
from airline_services.ticket.domain.value_object import ReserveNo

from .register_reservation import RegisterReservationService
from .validate_reservation import ValidateReservationService


@dataclass(frozen=True)
class TicketReserveSummary:
    """予約完了情報"""

    reserve_no: ReserveNo
    payment_deadline: date
    total_fare: Money


class ReserveTicketService:
    """チケット予約ユースケース

    合計金額の計算 → 業務ルール検証 → 予約登録 の順に実行する。
    全区間に同じ搭乗者が搭乗する前提で、往路の搭乗者から金額を計算する。
    """

    def __init__(
        self,
        fare_calculator: FareCalculator,
        validator: ValidateReservationService,
        registrar: RegisterReservationService,
    ) -> None:
        self._fare_calculator = fare_calculator
        self._validator = validator
        self._registrar = registrar

    def reserve(self, reservation: Reservation) -> TicketReserveSummary:
        reserve_flights = reservation.reserve_flights
        total_fare = self._fare_calculator.calculate_total_fare(
            [reserve_flight.flight for reserve_flight in reserve_flights],
            reserve_flights[0].passengers,
        )
        reservation.price(total_fare)

        self._validator.validate(reservation)
        result = self._registrar.register(reservation)

        return TicketReserveSummary(
            reserve_no=result.reserve_no,
            payment_deadline=result.payment_deadline,
            total_fare=total_fare,
        )
