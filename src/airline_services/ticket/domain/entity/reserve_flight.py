from collections.abc import Sequence

from airline_services.shared.domain import Entity
from airline_services.ticket.domain.value_object import ReserveNo

from .flight import Flight
from .passenger import Passenger


class ReserveFlight(Entity[int | None]):
    """予約フライトエンティティ（予約の1区間）"""

    def __init__(
        self,
        flight: Flight,
        passengers: Sequence[Passenger],
        reserve_flight_no: int | None = None,
        reserve_no: ReserveNo | None = None,
    ) -> None:
        super().__init__(reserve_flight_no)
        if not passengers:
            raise ValueError("Reserve flight requires at least one passenger")
        self._flight = flight
        self._passengers = list(passengers)
        self._reserve_no = reserve_no

    @property
    def reserve_flight_no(self) -> int | None:
        return self.id

    @property
    def flight(self) -> Flight:
        return self._flight

    @property
    def passengers(self) -> list[Passenger]:
        return list(self._passengers)

    @property
    def passenger_num(self) -> int:
        return len(self._passengers)

    @property
    def reserve_no(self) -> ReserveNo | None:
        return self._reserve_no

    def assign_reserve_flight_no(self, reserve_flight_no: int) -> None:
        self._assign_id(reserve_flight_no)
        for passenger in self._passengers:
            passenger.attach_to(reserve_flight_no)

    def attach_to(self, reserve_no: ReserveNo) -> None:
        """登録された予約に紐付ける"""
        self._reserve_no = reserve_no

    def __repr__(self) -> str:
        return (
            f"ReserveFlight(reserve_flight_no={self.id}, reserve_no={self._reserve_no}, "
            f"flight={self._flight.key}, passenger_num={len(self._passengers)})"
        )
