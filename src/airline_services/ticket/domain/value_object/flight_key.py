from dataclasses import dataclass
from datetime import date

from airline_services.ticket.domain.enum import BoardingClassCd, FareTypeCd


@dataclass(frozen=True, order=True)
class FlightKey:
    """フライト情報を一意に特定するキー

    搭乗日 + 便名 + 搭乗クラス + 運賃種別。空席数の排他ロックの単位でもある。
    順序付け可能で、複数フライトのロック取得順序の正規化に用いる。
    """

    departure_date: date
    flight_name: str
    boarding_class_cd: BoardingClassCd
    fare_type_cd: FareTypeCd

    def __post_init__(self) -> None:
        if not self.flight_name:
            raise ValueError("Flight name cannot be empty")

    def __str__(self) -> str:
        return (
            f"{self.departure_date.isoformat()}/{self.flight_name}/"
            f"{self.boarding_class_cd.value}/{self.fare_type_cd.value}"
        )
