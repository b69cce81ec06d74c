from datetime import date

from airline_services.member.domain.enum import Gender
from airline_services.member.domain.value_object import MembershipNumber
from airline_services.shared.domain import AggregateRoot
from airline_services.shared.utils import normalize_kana


class Member(AggregateRoot[MembershipNumber]):
    """カード会員エンティティ

    予約処理からは参照のみ行う。
    """

    def __init__(
        self,
        id: MembershipNumber,
        family_name: str,
        given_name: str,
        kana_family_name: str,
        kana_given_name: str,
        gender: Gender,
        birthday: date | None = None,
        tel: str | None = None,
        mail: str | None = None,
    ) -> None:
        super().__init__(id)
        self._family_name = family_name
        self._given_name = given_name
        self._kana_family_name = normalize_kana(kana_family_name)
        self._kana_given_name = normalize_kana(kana_given_name)
        self._gender = gender
        self._birthday = birthday
        self._tel = tel
        self._mail = mail

    @property
    def membership_number(self) -> MembershipNumber:
        return self.id

    @property
    def family_name(self) -> str:
        return self._family_name

    @property
    def given_name(self) -> str:
        return self._given_name

    @property
    def kana_family_name(self) -> str:
        return self._kana_family_name

    @property
    def kana_given_name(self) -> str:
        return self._kana_given_name

    @property
    def gender(self) -> Gender:
        return self._gender

    @property
    def birthday(self) -> date | None:
        return self._birthday

    @property
    def tel(self) -> str | None:
        return self._tel

    @property
    def mail(self) -> str | None:
        return self._mail

    def is_same_person(self, kana_family_name: str, kana_given_name: str, gender: Gender) -> bool:
        """カナ氏名と性別が会員情報と一致するかどうか"""
        return (
            normalize_kana(kana_family_name) == self._kana_family_name
            and normalize_kana(kana_given_name) == self._kana_given_name
            and gender == self._gender
        )

    def __repr__(self) -> str:
        return (
            f"Member(membership_number={self.id}, "
            f"kana_family_name={self._kana_family_name}, "
            f"kana_given_name={self._kana_given_name}, "
            f"gender={self._gender.value})"
        )
