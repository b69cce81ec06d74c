from dataclasses import dataclass

from airline_services.ticket.domain.enum import BoardingClassCd


@dataclass(frozen=True)
class BoardingClass:
    """搭乗クラス（クラス料金を含む）"""

    boarding_class_cd: BoardingClassCd
    boarding_class_name: str
    extra_charge: int = 0

    def __post_init__(self) -> None:
        if self.extra_charge < 0:
            raise ValueError("Extra charge cannot be negative")
