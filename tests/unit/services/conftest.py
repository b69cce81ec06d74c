from datetime import date, time
from unittest.mock import MagicMock

import pytest

from airline_services.member.domain import Gender, MembershipNumber
from airline_services.shared.config import TicketSettings
from airline_services.ticket.domain.entity import (
    Flight,
    Passenger,
    Reservation,
    ReserveFlight,
)
from airline_services.ticket.domain.enum import BoardingClassCd, FareTypeCd
from airline_services.ticket.domain.service import TicketSharedService
from airline_services.ticket.domain.value_object import (
    BoardingClass,
    FareType,
    FlightMaster,
    Representative,
    Route,
)

TODAY = date(2024, 6, 1)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def settings():
    """テスト用の業務設定（環境変数に依存しない）"""
    return TicketSettings(
        adult_passenger_min_age=12,
        child_fare_rate=50,
        representative_min_age=18,
        limit_day=355,
        reserve_interval_time=20,
        lock_timeout_seconds=2.0,
        lock_retry_interval_seconds=0.01,
    )


@pytest.fixture
def shared_service(settings):
    return TicketSharedService(settings, today=lambda: TODAY)


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def create_flight():
    """Flight を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        departure_date: date = date(2024, 7, 1),
        flight_name: str = "ATR001",
        basic_fare: int = 10000,
        boarding_class_cd: BoardingClassCd = BoardingClassCd.NORMAL,
        extra_charge: int = 0,
        fare_type_cd: FareTypeCd = FareTypeCd.NORMAL,
        fare_type_name: str = "通常運賃",
        discount_rate: int = 0,
        passenger_min_num: int = 1,
        rsv_available_start_day_num: int = 355,
        rsv_available_end_day_num: int = 0,
        vacant_num: int = 10,
        departure_time: time = time(8, 0),
        arrival_time: time = time(9, 30),
    ) -> Flight:
        return Flight(
            departure_date=departure_date,
            flight_master=FlightMaster(
                flight_name=flight_name,
                route=Route(
                    departure_airport_cd="HND",
                    arrival_airport_cd="CTS",
                    basic_fare=basic_fare,
                ),
                departure_time=departure_time,
                arrival_time=arrival_time,
            ),
            boarding_class=BoardingClass(
                boarding_class_cd=boarding_class_cd,
                boarding_class_name="一般席",
                extra_charge=extra_charge,
            ),
            fare_type=FareType(
                fare_type_cd=fare_type_cd,
                fare_type_name=fare_type_name,
                discount_rate=discount_rate,
                passenger_min_num=passenger_min_num,
                rsv_available_start_day_num=rsv_available_start_day_num,
                rsv_available_end_day_num=rsv_available_end_day_num,
            ),
            vacant_num=vacant_num,
        )

    return _factory


@pytest.fixture
def create_passenger():
    """Passenger を生成する Factory fixture"""

    def _factory(
        family_name: str = "ヤマダ",
        given_name: str = "ハナコ",
        age: int = 30,
        gender: Gender = Gender.FEMALE,
        membership_number: str | None = None,
    ) -> Passenger:
        return Passenger(
            family_name=family_name,
            given_name=given_name,
            age=age,
            gender=gender,
            membership_number=MembershipNumber.parse(membership_number),
        )

    return _factory


@pytest.fixture
def create_reservation(create_flight, create_passenger):
    """Reservation を生成する Factory fixture

    passengers は全区間に複製して載せる。
    """

    def _factory(
        flights: list[Flight] | None = None,
        passengers: list[Passenger] | None = None,
        rep_family_name: str = "ヤマダ",
        rep_given_name: str = "ハナコ",
        rep_gender: Gender = Gender.FEMALE,
        rep_age: int = 30,
        rep_membership_number: str | None = None,
    ) -> Reservation:
        flights = flights if flights is not None else [create_flight()]
        passengers = passengers if passengers is not None else [create_passenger()]
        return Reservation(
            representative=Representative(
                family_name=rep_family_name,
                given_name=rep_given_name,
                gender=rep_gender,
                age=rep_age,
                tel="090-0000-0000",
                mail="hanako@example.com",
                membership_number=MembershipNumber.parse(rep_membership_number),
            ),
            reserve_flights=[
                ReserveFlight(flight=flight, passengers=[p.copy() for p in passengers])
                for flight in flights
            ],
            reserve_date=TODAY,
        )

    return _factory
