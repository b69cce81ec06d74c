from dataclasses import dataclass, field

from airline_services.member.domain import Gender, MembershipNumber
from airline_services.shared.utils import normalize_kana


@dataclass(frozen=True)
class Representative:
    """予約代表者"""

    family_name: str
    given_name: str
    gender: Gender
    age: int
    tel: str = ""
    mail: str = ""
    membership_number: MembershipNumber | None = field(default=None)

    def __post_init__(self) -> None:
        if self.age < 0:
            raise ValueError("Age cannot be negative")
        object.__setattr__(self, "family_name", normalize_kana(self.family_name))
        object.__setattr__(self, "given_name", normalize_kana(self.given_name))

    def __str__(self) -> str:
        return f"{self.family_name} {self.given_name}"
