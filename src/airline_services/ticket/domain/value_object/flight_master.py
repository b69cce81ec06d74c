from dataclasses import dataclass
from datetime import time

from .route import Route


@dataclass(frozen=True)
class FlightMaster:
    """便の基本情報（便名・区間・出発/到着時刻）"""

    flight_name: str
    route: Route
    departure_time: time
    arrival_time: time

    def __str__(self) -> str:
        return (
            f"{self.flight_name} {self.route} "
            f"{self.departure_time:%H:%M}-{self.arrival_time:%H:%M}"
        )
