from collections.abc import Sequence
from datetime import date

from airline_services.shared.domain import AggregateRoot, Money
from airline_services.ticket.domain.enum import FlightType
from airline_services.ticket.domain.value_object import Representative, ReserveNo

from .reserve_flight import ReserveFlight


class Reservation(AggregateRoot[ReserveNo | None]):
    """予約エンティティ（集約ルート）

    予約フライトは1件（片道）または2件（往路・復路の順）。
    予約・予約フライト・搭乗者は1トランザクションでまとめて登録される。
    """

    def __init__(
        self,
        representative: Representative,
        reserve_flights: Sequence[ReserveFlight],
        reserve_date: date,
        total_fare: Money | None = None,
        reserve_no: ReserveNo | None = None,
    ) -> None:
        super().__init__(reserve_no)
        if not reserve_flights:
            raise ValueError("Reservation requires at least one reserve flight")
        if len(reserve_flights) > FlightType.ROUND_TRIP.leg_count:
            raise ValueError(
                f"Reservation supports at most {FlightType.ROUND_TRIP.leg_count} flights"
            )
        self._representative = representative
        self._reserve_flights = list(reserve_flights)
        self._reserve_date = reserve_date
        self._total_fare = total_fare

    @property
    def reserve_no(self) -> ReserveNo | None:
        return self.id

    @property
    def representative(self) -> Representative:
        return self._representative

    @property
    def reserve_flights(self) -> list[ReserveFlight]:
        return list(self._reserve_flights)

    @property
    def reserve_date(self) -> date:
        return self._reserve_date

    @property
    def total_fare(self) -> Money | None:
        return self._total_fare

    @property
    def flight_type(self) -> FlightType:
        if len(self._reserve_flights) == FlightType.ROUND_TRIP.leg_count:
            return FlightType.ROUND_TRIP
        return FlightType.ONE_WAY

    @property
    def payment_deadline(self) -> date:
        """支払期限（往路の搭乗日）"""
        return self._reserve_flights[0].flight.departure_date

    def price(self, total_fare: Money) -> None:
        """合計金額を設定する"""
        self._total_fare = total_fare

    def assign_reserve_no(self, reserve_no: ReserveNo) -> None:
        self._assign_id(reserve_no)
        for reserve_flight in self._reserve_flights:
            reserve_flight.attach_to(reserve_no)

    def __repr__(self) -> str:
        return (
            f"Reservation(reserve_no={self.id}, representative={self._representative}, "
            f"flight_type={self.flight_type.value}, "
            f"reserve_flights={self._reserve_flights!r}, total_fare={self._total_fare})"
        )
