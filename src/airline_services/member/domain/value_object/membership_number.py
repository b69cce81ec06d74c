import re
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class MembershipNumber:
    """会員番号

    10桁の数字。例: 0000000001
    """

    value: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^\d{10}$")

    def __post_init__(self) -> None:
        if not self.PATTERN.match(self.value):
            raise ValueError(
                f"Invalid membership number format: {self.value}. "
                "Expected format: 10 digits"
            )

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str | None) -> "MembershipNumber | None":
        """未入力 (None・空文字) の場合は None を返す"""
        if not value:
            return None
        return cls(value)
