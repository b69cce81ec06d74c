from enum import Enum


class FlightType(str, Enum):
    """フライト種別"""

    ROUND_TRIP = "RT"
    ONE_WAY = "OW"

    @property
    def leg_count(self) -> int:
        """フライト種別に対応する区間数"""
        return 2 if self is FlightType.ROUND_TRIP else 1
