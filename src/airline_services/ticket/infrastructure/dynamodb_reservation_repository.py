from airline_services.ticket.domain.entity import Passenger, Reservation, ReserveFlight
from airline_services.ticket.domain.repository import ReservationRepository
from airline_services.ticket.domain.value_object import ReserveNo

from .dynamodb_sequence import DynamoDBSequence
from .dynamodb_transaction import DynamoDBTransaction

_NOT_EXISTS = "attribute_not_exists(PK)"


class DynamoDBReservationRepository(ReservationRepository):
    """DynamoDBを使用したReservationRepository の具象実装

    採番はアトミックカウンタで即時に行い、アイテムの登録は
    トランザクションに追加して commit 時に反映する。
    """

    def __init__(self, transaction: DynamoDBTransaction, sequence: DynamoDBSequence) -> None:
        self._transaction = transaction
        self._sequence = sequence

    def insert(self, reservation: Reservation) -> int:
        """予約を登録する"""
        reservation.assign_reserve_no(
            ReserveNo.from_sequence(self._sequence.next_value("RESERVE_NO"))
        )
        representative = reservation.representative
        item = {
            "PK": f"RESERVATION#{reservation.reserve_no}",
            "SK": "RESERVATION",
            "entity_type": "RESERVATION",
            "reserve_no": str(reservation.reserve_no),
            "reserve_date": reservation.reserve_date.isoformat(),
            "flight_type": reservation.flight_type.value,
            "rep_family_name": representative.family_name,
            "rep_given_name": representative.given_name,
            "rep_gender": representative.gender.value,
            "rep_age": representative.age,
            "rep_tel": representative.tel,
            "rep_mail": representative.mail,
            "payment_deadline": reservation.payment_deadline.isoformat(),
        }
        if representative.membership_number is not None:
            item["rep_membership_number"] = str(representative.membership_number)
        if reservation.total_fare is not None:
            item["total_fare_amount"] = str(reservation.total_fare.amount)
            item["total_fare_currency"] = str(reservation.total_fare.currency)
        self._put(item)
        return 1

    def insert_reserve_flight(self, reserve_flight: ReserveFlight) -> int:
        """予約フライトを登録する"""
        reserve_flight.assign_reserve_flight_no(self._sequence.next_value("RESERVE_FLIGHT_NO"))
        key = reserve_flight.flight.key
        self._put(
            {
                "PK": f"RESERVATION#{reserve_flight.reserve_no}",
                "SK": f"FLIGHT#{reserve_flight.reserve_flight_no:010d}",
                "entity_type": "RESERVE_FLIGHT",
                "reserve_flight_no": reserve_flight.reserve_flight_no,
                "reserve_no": str(reserve_flight.reserve_no),
                "departure_date": key.departure_date.isoformat(),
                "flight_name": key.flight_name,
                "boarding_class_cd": key.boarding_class_cd.value,
                "fare_type_cd": key.fare_type_cd.value,
                "passenger_num": reserve_flight.passenger_num,
            }
        )
        return 1

    def insert_passenger(self, passenger: Passenger) -> int:
        """搭乗者を登録する"""
        passenger.assign_passenger_no(self._sequence.next_value("PASSENGER_NO"))
        item = {
            "PK": f"RESERVE_FLIGHT#{passenger.reserve_flight_no}",
            "SK": f"PASSENGER#{passenger.passenger_no:010d}",
            "entity_type": "PASSENGER",
            "passenger_no": passenger.passenger_no,
            "reserve_flight_no": passenger.reserve_flight_no,
            "family_name": passenger.family_name,
            "given_name": passenger.given_name,
            "age": passenger.age,
            "gender": passenger.gender.value,
        }
        if passenger.membership_number is not None:
            item["membership_number"] = str(passenger.membership_number)
        self._put(item)
        return 1

    def _put(self, item: dict) -> None:
        self._transaction.stage("Put", {"Item": item, "ConditionExpression": _NOT_EXISTS})
