from enum import Enum


class BoardingClassCd(str, Enum):
    """搭乗クラスコード"""

    NORMAL = "N"
    SPECIAL = "S"
