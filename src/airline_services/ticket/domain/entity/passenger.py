from airline_services.member.domain import Gender, MembershipNumber
from airline_services.shared.domain import Entity
from airline_services.shared.utils import normalize_kana


class Passenger(Entity[int | None]):
    """搭乗者エンティティ

    搭乗者番号と予約フライト番号は登録時に採番・設定される。
    """

    def __init__(
        self,
        family_name: str,
        given_name: str,
        age: int,
        gender: Gender,
        membership_number: MembershipNumber | None = None,
        passenger_no: int | None = None,
        reserve_flight_no: int | None = None,
    ) -> None:
        super().__init__(passenger_no)
        if age < 0:
            raise ValueError("Age cannot be negative")
        self._family_name = normalize_kana(family_name)
        self._given_name = normalize_kana(given_name)
        self._age = age
        self._gender = gender
        self._membership_number = membership_number
        self._reserve_flight_no = reserve_flight_no

    @property
    def passenger_no(self) -> int | None:
        return self.id

    @property
    def family_name(self) -> str:
        return self._family_name

    @property
    def given_name(self) -> str:
        return self._given_name

    @property
    def age(self) -> int:
        return self._age

    @property
    def gender(self) -> Gender:
        return self._gender

    @property
    def membership_number(self) -> MembershipNumber | None:
        return self._membership_number

    @property
    def reserve_flight_no(self) -> int | None:
        return self._reserve_flight_no

    def assign_passenger_no(self, passenger_no: int) -> None:
        self._assign_id(passenger_no)

    def attach_to(self, reserve_flight_no: int) -> None:
        """登録された予約フライトに紐付ける"""
        self._reserve_flight_no = reserve_flight_no

    def copy(self) -> "Passenger":
        """未登録状態の複製を返す（別区間に同じ搭乗者を載せる場合）"""
        return Passenger(
            family_name=self._family_name,
            given_name=self._given_name,
            age=self._age,
            gender=self._gender,
            membership_number=self._membership_number,
        )

    def __repr__(self) -> str:
        return (
            f"Passenger(passenger_no={self.id}, family_name={self._family_name}, "
            f"given_name={self._given_name}, age={self._age}, "
            f"gender={self._gender.value}, membership_number={self._membership_number})"
        )
