from collections import Counter
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from airline_services.shared.domain import (
    IntegrityFaultException,
    ResourceNotFoundException,
)
from airline_services.shared.utils import get_logger
from airline_services.ticket.domain.entity import Reservation, ReserveFlight
from airline_services.ticket.domain.exception import FareTypeNotAvailableException
from airline_services.ticket.domain.repository import TicketUnitOfWork
from airline_services.ticket.domain.service import TicketSharedService
from airline_services.ticket.domain.value_object import FlightKey, ReserveNo

logger = get_logger("ticket")


@dataclass(frozen=True)
class TicketReserveResult:
    """予約番号と支払期限"""

    reserve_no: ReserveNo
    payment_deadline: date


class RegisterReservationService:
    """予約登録ユースケース

    空席数の確認・更新と、予約・予約フライト・搭乗者の登録を
    1つの Unit of Work で行う。途中で失敗した場合はすべて取り消される。
    """

    def __init__(
        self,
        uow_factory: Callable[[], TicketUnitOfWork],
        shared_service: TicketSharedService,
    ) -> None:
        self._uow_factory = uow_factory
        self._shared_service = shared_service

    def register(self, reservation: Reservation) -> TicketReserveResult:
        reserve_flights = reservation.reserve_flights

        for reserve_flight in reserve_flights:
            flight = reserve_flight.flight
            if not self._shared_service.is_available_fare_type(
                flight.fare_type, flight.departure_date
            ):
                raise FareTypeNotAvailableException(flight.fare_type.fare_type_name)

        with self._uow_factory() as uow:
            for key, passenger_num in _lock_plan(reserve_flights):
                self._reserve_seats(uow, key, passenger_num)

            _expect_single_row(uow.reservations.insert(reservation), "insert reservation")
            reserve_no = reservation.reserve_no

            for reserve_flight in reserve_flights:
                _expect_single_row(
                    uow.reservations.insert_reserve_flight(reserve_flight),
                    "insert reserve flight",
                )
                for passenger in reserve_flight.passengers:
                    _expect_single_row(
                        uow.reservations.insert_passenger(passenger),
                        "insert passenger",
                    )

            uow.commit()

        logger.info(
            "Reservation registered",
            extra={"reserve_no": str(reserve_no), "flight_type": reservation.flight_type.value},
        )
        return TicketReserveResult(
            reserve_no=reserve_no,
            payment_deadline=reservation.payment_deadline,
        )

    def _reserve_seats(self, uow: TicketUnitOfWork, key: FlightKey, passenger_num: int) -> None:
        flight = uow.flights.find_for_update(key)
        if flight is None:
            raise ResourceNotFoundException(f"Flight not found: {key}")

        flight.reserve_seats(passenger_num)
        _expect_single_row(uow.flights.update(flight), "update flight")


def _lock_plan(reserve_flights: list[ReserveFlight]) -> list[tuple[FlightKey, int]]:
    """ロック対象のフライトキーと確保する座席数

    同一フライトへの座席数は合算し、キー順にロックすることで
    往路・復路の指定順に関わらずロック順序を一定にする。
    """
    passenger_nums: Counter[FlightKey] = Counter()
    for reserve_flight in reserve_flights:
        passenger_nums[reserve_flight.flight.key] += reserve_flight.passenger_num
    return sorted(passenger_nums.items())


def _expect_single_row(count: int, operation: str) -> None:
    if count != 1:
        logger.error(
            "Unexpected affected row count",
            extra={"operation": operation, "expected": 1, "actual": count},
        )
        raise IntegrityFaultException(operation, expected=1, actual=count)
