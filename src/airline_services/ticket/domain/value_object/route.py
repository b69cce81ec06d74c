from dataclasses import dataclass


@dataclass(frozen=True)
class Route:
    """区間（出発空港・到着空港と基本運賃）"""

    departure_airport_cd: str
    arrival_airport_cd: str
    basic_fare: int

    def __post_init__(self) -> None:
        if self.basic_fare < 0:
            raise ValueError("Basic fare cannot be negative")
        if self.departure_airport_cd == self.arrival_airport_cd:
            raise ValueError("Departure and arrival airports must differ")

    def __str__(self) -> str:
        return f"{self.departure_airport_cd}-{self.arrival_airport_cd}"
