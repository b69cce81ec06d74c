from dataclasses import dataclass


@dataclass(frozen=True)
class ReserveNo:
    """予約番号（10桁の数字）"""

    value: str

    WIDTH = 10

    def __post_init__(self) -> None:
        if len(self.value) != self.WIDTH or not self.value.isdigit():
            raise ValueError(f"Invalid reserve number: {self.value}")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_sequence(cls, sequence: int) -> "ReserveNo":
        """採番値からゼロ埋めした予約番号を生成"""
        return cls(value=str(sequence).zfill(cls.WIDTH))
