from collections.abc import Sequence
from datetime import date
from typing import NotRequired, TypedDict

from airline_services.member.domain import Gender, MembershipNumber
from airline_services.ticket.domain.entity import (
    Flight,
    Passenger,
    Reservation,
    ReserveFlight,
)
from airline_services.ticket.domain.value_object import Representative


class RepresentativeDetails(TypedDict):
    """予約代表者の入力データ構造"""

    family_name: str
    given_name: str
    gender: str
    age: int
    tel: NotRequired[str]
    mail: NotRequired[str]
    membership_number: NotRequired[str | None]


class PassengerDetails(TypedDict):
    """搭乗者の入力データ構造"""

    family_name: str
    given_name: str
    gender: str
    age: int
    membership_number: NotRequired[str | None]


class ReservationFactory:
    """予約集約のファクトリ

    - プリミティブ型から Value Object への変換
    - 全区間に同じ搭乗者を載せる（区間ごとに別の搭乗者エンティティ）
    """

    def create(
        self,
        flights: Sequence[Flight],
        representative: RepresentativeDetails,
        passengers: Sequence[PassengerDetails],
        reserve_date: date,
    ) -> Reservation:
        if not passengers:
            raise ValueError("Passengers must not be empty")

        outbound_passengers = [self._to_passenger(details) for details in passengers]
        reserve_flights = [
            ReserveFlight(
                flight=flight,
                passengers=(
                    outbound_passengers
                    if index == 0
                    else [passenger.copy() for passenger in outbound_passengers]
                ),
            )
            for index, flight in enumerate(flights)
        ]

        return Reservation(
            representative=Representative(
                family_name=representative["family_name"],
                given_name=representative["given_name"],
                gender=Gender(representative["gender"]),
                age=representative["age"],
                tel=representative.get("tel", ""),
                mail=representative.get("mail", ""),
                membership_number=MembershipNumber.parse(
                    representative.get("membership_number")
                ),
            ),
            reserve_flights=reserve_flights,
            reserve_date=reserve_date,
        )

    def _to_passenger(self, details: PassengerDetails) -> Passenger:
        return Passenger(
            family_name=details["family_name"],
            given_name=details["given_name"],
            age=details["age"],
            gender=Gender(details["gender"]),
            membership_number=MembershipNumber.parse(details.get("membership_number")),
        )
