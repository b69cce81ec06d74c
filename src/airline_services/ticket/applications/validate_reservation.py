from airline_services.member.domain import (
    Gender,
    Member,
    MemberRepository,
    MembershipNumber,
)
from airline_services.shared.config import TicketSettings
from airline_services.shared.utils import get_logger
from airline_services.ticket.domain.entity import Reservation, ReserveFlight
from airline_services.ticket.domain.enum import FareTypeCd
from airline_services.ticket.domain.exception import (
    GroupDiscountMinimumNotMetException,
    LadiesDiscountGenderViolationException,
    PassengerIdentityMismatchException,
    PassengerMemberNotFoundException,
    RepresentativeIdentityMismatchException,
    RepresentativeMemberNotFoundException,
    RepresentativeTooYoungException,
)

logger = get_logger("ticket")


class ValidateReservationService:
    """予約情報の業務ルール検証ユースケース

    検証は以下の順に行い、最初に違反したルールの例外を送出する。
    1. 予約代表者の年齢
    2. 運賃種別の適用可否（レディース割・グループ割）
    3. 予約代表者と会員情報の照合
    4. 搭乗者と会員情報の照合

    会員情報の参照のみを行い、書き込みは一切行わない。
    """

    def __init__(self, settings: TicketSettings, member_repository: MemberRepository) -> None:
        self._representative_min_age = settings.representative_min_age
        self._member_repository = member_repository

    def validate(self, reservation: Reservation) -> None:
        self._validate_representative_age(reservation.representative.age)
        self._validate_fare_type(reservation.reserve_flights)
        self._validate_representative_member(reservation)
        self._validate_passenger_members(reservation.reserve_flights)

    def find_member(self, membership_number: MembershipNumber) -> Member | None:
        """会員番号に該当するカード会員情報を検索する"""
        return self._member_repository.find_by_id(membership_number)

    def _validate_representative_age(self, age: int) -> None:
        if age < self._representative_min_age:
            logger.info(
                "Representative is too young",
                extra={"age": age, "min_age": self._representative_min_age},
            )
            raise RepresentativeTooYoungException(self._representative_min_age)

    def _validate_fare_type(self, reserve_flights: list[ReserveFlight]) -> None:
        for reserve_flight in reserve_flights:
            fare_type = reserve_flight.flight.fare_type
            passengers = reserve_flight.passengers

            match fare_type.fare_type_cd:
                case FareTypeCd.LADIES:
                    if any(p.gender is not Gender.FEMALE for p in passengers):
                        raise LadiesDiscountGenderViolationException()
                case FareTypeCd.GROUP:
                    if len(passengers) < fare_type.passenger_min_num:
                        raise GroupDiscountMinimumNotMetException(
                            fare_type.fare_type_name, fare_type.passenger_min_num
                        )
                case FareTypeCd.NORMAL | FareTypeCd.ROUND_TRIP | FareTypeCd.EARLY_SAVER:
                    pass

    def _validate_representative_member(self, reservation: Reservation) -> None:
        representative = reservation.representative
        if representative.membership_number is None:
            return

        member = self.find_member(representative.membership_number)
        if member is None:
            raise RepresentativeMemberNotFoundException()

        if not member.is_same_person(
            representative.family_name, representative.given_name, representative.gender
        ):
            raise RepresentativeIdentityMismatchException()

    def _validate_passenger_members(self, reserve_flights: list[ReserveFlight]) -> None:
        for reserve_flight in reserve_flights:
            for position, passenger in enumerate(reserve_flight.passengers, start=1):
                if passenger.membership_number is None:
                    continue

                member = self.find_member(passenger.membership_number)
                if member is None:
                    raise PassengerMemberNotFoundException(position)

                if not member.is_same_person(
                    passenger.family_name, passenger.given_name, passenger.gender
                ):
                    raise PassengerIdentityMismatchException(position)
