from enum import Enum


class FareTypeCd(str, Enum):
    """運賃種別コード"""

    NORMAL = "FT"
    ROUND_TRIP = "RT"
    EARLY_SAVER = "ES"
    LADIES = "LD"
    GROUP = "GD"
