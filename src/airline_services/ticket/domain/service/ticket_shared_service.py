from collections.abc import Callable, Sequence
from datetime import date, timedelta

from airline_services.shared.config import TicketSettings
from airline_services.ticket.domain.entity import Flight
from airline_services.ticket.domain.enum import FlightType
from airline_services.ticket.domain.exception import (
    FareTypeNotAvailableException,
    FlightTypeMismatchException,
    OutOfReservablePeriodException,
    ReturnFlightTooEarlyException,
)
from airline_services.ticket.domain.value_object import BoardingClass, FareType, PeakTime

_FULL_RATE = 100


def truncating_div(dividend: int, divisor: int) -> int:
    """0 方向へ切り捨てる整数除算"""
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend >= 0) == (divisor > 0) else -quotient


class TicketSharedService:
    """運賃計算・予約可否判定の共通サービス

    基本運賃の算出（搭乗クラス料金・ピーク時期の反映）、運賃種別の割引、
    運賃種別の予約可能期間判定、選択フライトの妥当性検証を行う。
    """

    def __init__(
        self,
        settings: TicketSettings,
        peak_times: Sequence[PeakTime] = (),
        today: Callable[[], date] = date.today,
    ) -> None:
        self._settings = settings
        self._peak_times = tuple(peak_times)
        self._today = today

    def today(self) -> date:
        return self._today()

    def peak_ratio(self, departure_date: date) -> int:
        for peak_time in self._peak_times:
            if peak_time.contains(departure_date):
                return peak_time.peak_ratio
        return _FULL_RATE

    def calculate_basic_fare(
        self, basic_fare_of_route: int, boarding_class: BoardingClass, departure_date: date
    ) -> int:
        """基本運賃 = (区間の基本運賃 + 搭乗クラス料金) × ピーク時期の比率 / 100"""
        return truncating_div(
            (basic_fare_of_route + boarding_class.extra_charge)
            * self.peak_ratio(departure_date),
            _FULL_RATE,
        )

    def calculate_fare(self, basic_fare: int, discount_rate: int) -> int:
        """運賃 = 基本運賃 × (100 - 割引率) / 100"""
        return truncating_div(basic_fare * (_FULL_RATE - discount_rate), _FULL_RATE)

    def is_available_fare_type(self, fare_type: FareType, departure_date: date) -> bool:
        """本日が運賃種別の予約可能期間内かどうか"""
        start, end = fare_type.reservable_period(departure_date)
        return start <= self.today() <= end

    def validate_flight_selection(
        self, flights: Sequence[Flight], flight_type: FlightType
    ) -> None:
        """選択されたフライトの組み合わせを検証する

        Raises:
            FlightTypeMismatchException: フライト数がフライト種別と一致しない
            OutOfReservablePeriodException: 搭乗日が予約可能期間外
            ReturnFlightTooEarlyException: 往路到着から復路出発までの間隔が不足
            FareTypeNotAvailableException: 運賃種別の予約可能期間外
        """
        if len(flights) != flight_type.leg_count:
            raise FlightTypeMismatchException(
                flight_type=flight_type.value,
                expected=flight_type.leg_count,
                actual=len(flights),
            )

        today = self.today()
        last_reservable_date = today + timedelta(days=self._settings.limit_day)
        for flight in flights:
            if not today <= flight.departure_date <= last_reservable_date:
                raise OutOfReservablePeriodException(limit_day=self._settings.limit_day)

        if flight_type is FlightType.ROUND_TRIP:
            outbound, inbound = flights
            interval = timedelta(minutes=self._settings.reserve_interval_time)
            if inbound.departure_datetime < outbound.arrival_datetime + interval:
                raise ReturnFlightTooEarlyException(
                    interval_minutes=self._settings.reserve_interval_time
                )

        for flight in flights:
            if not self.is_available_fare_type(flight.fare_type, flight.departure_date):
                raise FareTypeNotAvailableException(flight.fare_type.fare_type_name)
