from dataclasses import dataclass
from datetime import date, timedelta

from airline_services.ticket.domain.enum import FareTypeCd


@dataclass(frozen=True)
class FareType:
    """運賃種別

    割引率(%)、利用可能最少人数、搭乗日を基準とした予約可能期間を持つ。
    予約可能期間は「搭乗日の start_day_num 日前」から
    「搭乗日の end_day_num 日前」まで（両端を含む）。
    """

    fare_type_cd: FareTypeCd
    fare_type_name: str
    discount_rate: int = 0
    passenger_min_num: int = 1
    rsv_available_start_day_num: int = 355
    rsv_available_end_day_num: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.discount_rate <= 100:
            raise ValueError(f"Invalid discount rate: {self.discount_rate}")
        if self.passenger_min_num < 1:
            raise ValueError("Passenger minimum number must be at least 1")
        if self.rsv_available_start_day_num < self.rsv_available_end_day_num:
            raise ValueError(
                "Reservation window start must not be after its end"
            )

    def __str__(self) -> str:
        return f"{self.fare_type_name}({self.fare_type_cd.value})"

    def reservable_period(self, departure_date: date) -> tuple[date, date]:
        """搭乗日に対する予約可能期間（開始日, 終了日）"""
        return (
            departure_date - timedelta(days=self.rsv_available_start_day_num),
            departure_date - timedelta(days=self.rsv_available_end_day_num),
        )
