import pytest

from airline_services.member.domain import Gender, Member, MembershipNumber
from airline_services.ticket.applications import ValidateReservationService
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


def _member(number: str, family: str = "ヤマダ", given: str = "ハナコ", gender=Gender.FEMALE):
    return Member(
        id=MembershipNumber(number),
        family_name="山田",
        given_name="花子",
        kana_family_name=family,
        kana_given_name=given,
        gender=gender,
    )


class TestValidateReservationService:
    """ValidateReservationService のテスト"""

    @pytest.fixture
    def validator(self, settings, mock_repository):
        mock_repository.find_by_id.return_value = None
        return ValidateReservationService(settings, mock_repository)

    def test_valid_reservation(self, validator, create_reservation, mock_repository):
        validator.validate(create_reservation())
        mock_repository.find_by_id.assert_not_called()

    def test_representative_too_young(self, validator, create_reservation):
        with pytest.raises(RepresentativeTooYoungException) as exc_info:
            validator.validate(create_reservation(rep_age=17))
        assert exc_info.value.min_age == 18
        assert exc_info.value.error_code == "e.ar.b2.2004"

    def test_representative_of_minimum_age_is_accepted(self, validator, create_reservation):
        validator.validate(create_reservation(rep_age=18))

    def test_ladies_discount_with_male_passenger(
        self, validator, create_reservation, create_flight, create_passenger
    ):
        flight = create_flight(fare_type_cd=FareTypeCd.LADIES, fare_type_name="レディース割")
        passengers = [create_passenger(), create_passenger(given_name="タロウ", gender=Gender.MALE)]

        with pytest.raises(LadiesDiscountGenderViolationException):
            validator.validate(create_reservation(flights=[flight], passengers=passengers))

    def test_ladies_discount_with_female_passengers(
        self, validator, create_reservation, create_flight, create_passenger
    ):
        flight = create_flight(fare_type_cd=FareTypeCd.LADIES, fare_type_name="レディース割")
        validator.validate(
            create_reservation(flights=[flight], passengers=[create_passenger(), create_passenger()])
        )

    def test_group_discount_below_minimum(self, validator, create_reservation, create_flight, create_passenger):
        flight = create_flight(
            fare_type_cd=FareTypeCd.GROUP, fare_type_name="グループ割", passenger_min_num=5
        )
        passengers = [create_passenger() for _ in range(3)]

        with pytest.raises(GroupDiscountMinimumNotMetException) as exc_info:
            validator.validate(create_reservation(flights=[flight], passengers=passengers))

        assert exc_info.value.fare_type_name == "グループ割"
        assert exc_info.value.passenger_min_num == 5
        assert exc_info.value.details == {"fare_type_name": "グループ割", "passenger_min_num": 5}

    def test_group_discount_at_minimum(self, validator, create_reservation, create_flight, create_passenger):
        flight = create_flight(
            fare_type_cd=FareTypeCd.GROUP, fare_type_name="グループ割", passenger_min_num=5
        )
        validator.validate(
            create_reservation(flights=[flight], passengers=[create_passenger() for _ in range(5)])
        )

    def test_age_is_checked_before_fare_type(
        self, validator, create_reservation, create_flight, create_passenger
    ):
        flight = create_flight(fare_type_cd=FareTypeCd.LADIES, fare_type_name="レディース割")
        reservation = create_reservation(
            flights=[flight],
            passengers=[create_passenger(gender=Gender.MALE)],
            rep_age=17,
        )
        with pytest.raises(RepresentativeTooYoungException):
            validator.validate(reservation)

    def test_representative_member_not_found(self, validator, create_reservation):
        with pytest.raises(RepresentativeMemberNotFoundException):
            validator.validate(create_reservation(rep_membership_number="0000000001"))

    def test_representative_identity_mismatch(self, validator, create_reservation, mock_repository):
        mock_repository.find_by_id.return_value = _member("0000000001", given="ヨシコ")

        with pytest.raises(RepresentativeIdentityMismatchException):
            validator.validate(create_reservation(rep_membership_number="0000000001"))

    def test_representative_identity_match(self, validator, create_reservation, mock_repository):
        mock_repository.find_by_id.return_value = _member("0000000001")

        validator.validate(create_reservation(rep_membership_number="0000000001"))

        mock_repository.find_by_id.assert_called_once_with(MembershipNumber("0000000001"))

    def test_passenger_member_not_found_reports_position(
        self, validator, create_reservation, create_passenger
    ):
        passengers = [create_passenger(), create_passenger(membership_number="0000000002")]

        with pytest.raises(PassengerMemberNotFoundException) as exc_info:
            validator.validate(create_reservation(passengers=passengers))

        assert exc_info.value.position == 2

    def test_passenger_identity_mismatch_reports_position(
        self, validator, create_reservation, create_passenger, mock_repository
    ):
        mock_repository.find_by_id.return_value = _member("0000000003", gender=Gender.MALE)
        passengers = [
            create_passenger(membership_number="0000000003"),
            create_passenger(),
        ]

        with pytest.raises(PassengerIdentityMismatchException) as exc_info:
            validator.validate(create_reservation(passengers=passengers))

        assert exc_info.value.position == 1

    def test_representative_is_checked_before_passengers(
        self, validator, create_reservation, create_passenger
    ):
        reservation = create_reservation(
            passengers=[create_passenger(membership_number="0000000002")],
            rep_membership_number="0000000001",
        )
        with pytest.raises(RepresentativeMemberNotFoundException):
            validator.validate(reservation)

    def test_validation_is_read_only_and_repeatable(
        self, validator, create_reservation, create_passenger, mock_repository
    ):
        """2回検証しても結果は同じで、参照以外の操作を行わない"""
        mock_repository.find_by_id.return_value = _member("0000000001")
        reservation = create_reservation(
            passengers=[create_passenger(membership_number="0000000001")],
            rep_membership_number="0000000001",
        )

        validator.validate(reservation)
        validator.validate(reservation)

        called = {name for name, _, _ in mock_repository.mock_calls}
        assert called == {"find_by_id"}
        assert reservation.reserve_no is None

    def test_find_member(self, validator, mock_repository):
        member = _member("0000000001")
        mock_repository.find_by_id.return_value = member

        assert validator.find_member(MembershipNumber("0000000001")) is member
