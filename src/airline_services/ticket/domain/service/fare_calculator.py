from collections.abc import Sequence

from airline_services.shared.config import TicketSettings
from airline_services.shared.domain import Money
from airline_services.ticket.domain.entity import Flight, Passenger

from .ticket_shared_service import TicketSharedService, truncating_div

_FARE_UNIT = 100


def ceil_fare(fare: int) -> int:
    """100円未満を切り上げる"""
    return -(-fare // _FARE_UNIT) * _FARE_UNIT


class FareCalculator:
    """予約チケットの合計金額を計算する

    フライト単位の金額 = 運賃 × 大人人数
        + 基本運賃 × (小児運賃比率 - 割引率) / 100 × 小児人数
    合計金額は全フライトの合計を 100 円単位に切り上げたもの。
    """

    def __init__(self, settings: TicketSettings, shared_service: TicketSharedService) -> None:
        self._adult_passenger_min_age = settings.adult_passenger_min_age
        self._child_fare_rate = settings.child_fare_rate
        self._shared_service = shared_service

    def calculate_total_fare(
        self, flights: Sequence[Flight], passengers: Sequence[Passenger]
    ) -> Money:
        if not flights:
            raise ValueError("Flights must not be empty")
        if not passengers:
            raise ValueError("Passengers must not be empty")
        if any(passenger is None for passenger in passengers):
            raise ValueError("Passengers must not contain None")
        if any(flight is None for flight in flights):
            raise ValueError("Flights must not contain None")

        child_num = sum(
            1 for passenger in passengers if passenger.age < self._adult_passenger_min_age
        )
        adult_num = len(passengers) - child_num

        total_fare = 0
        for flight in flights:
            basic_fare = self._shared_service.calculate_basic_fare(
                flight.flight_master.route.basic_fare,
                flight.boarding_class,
                flight.departure_date,
            )
            discount_rate = flight.fare_type.discount_rate
            boarding_fare = self._shared_service.calculate_fare(basic_fare, discount_rate)

            total_fare += (
                boarding_fare * adult_num
                + truncating_div(basic_fare * (self._child_fare_rate - discount_rate), 100)
                * child_num
            )

        return Money.jpy(ceil_fare(total_fare))
