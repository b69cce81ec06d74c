from datetime import date, datetime

from airline_services.shared.domain import Entity
from airline_services.ticket.domain.exception import InsufficientSeatsException
from airline_services.ticket.domain.value_object import (
    BoardingClass,
    FareType,
    FlightKey,
    FlightMaster,
)


class Flight(Entity[FlightKey]):
    """フライトエンティティ

    搭乗日・便・搭乗クラス・運賃種別の組み合わせ単位で空席数を管理する。
    空席数は常に 0 以上。
    """

    def __init__(
        self,
        departure_date: date,
        flight_master: FlightMaster,
        boarding_class: BoardingClass,
        fare_type: FareType,
        vacant_num: int,
    ) -> None:
        super().__init__(
            FlightKey(
                departure_date=departure_date,
                flight_name=flight_master.flight_name,
                boarding_class_cd=boarding_class.boarding_class_cd,
                fare_type_cd=fare_type.fare_type_cd,
            )
        )
        if vacant_num < 0:
            raise ValueError("Vacant seat count cannot be negative")
        self._departure_date = departure_date
        self._flight_master = flight_master
        self._boarding_class = boarding_class
        self._fare_type = fare_type
        self._vacant_num = vacant_num

    @property
    def key(self) -> FlightKey:
        return self.id

    @property
    def departure_date(self) -> date:
        return self._departure_date

    @property
    def flight_master(self) -> FlightMaster:
        return self._flight_master

    @property
    def boarding_class(self) -> BoardingClass:
        return self._boarding_class

    @property
    def fare_type(self) -> FareType:
        return self._fare_type

    @property
    def vacant_num(self) -> int:
        return self._vacant_num

    @property
    def departure_datetime(self) -> datetime:
        return datetime.combine(self._departure_date, self._flight_master.departure_time)

    @property
    def arrival_datetime(self) -> datetime:
        return datetime.combine(self._departure_date, self._flight_master.arrival_time)

    def reserve_seats(self, passenger_num: int) -> None:
        """空席数から搭乗者数分の座席を確保する"""
        if passenger_num < 1:
            raise ValueError("Passenger number must be at least 1")
        if self._vacant_num < passenger_num:
            raise InsufficientSeatsException(
                flight=str(self.id),
                vacant_num=self._vacant_num,
                requested=passenger_num,
            )
        self._vacant_num -= passenger_num

    def __repr__(self) -> str:
        return (
            f"Flight(departure_date={self._departure_date.isoformat()}, "
            f"flight_name={self._flight_master.flight_name}, "
            f"boarding_class={self._boarding_class.boarding_class_cd.value}, "
            f"fare_type={self._fare_type.fare_type_cd.value}, "
            f"vacant_num={self._vacant_num})"
        )
