from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class PeakTime:
    """ピーク時期（期間中は基本運賃に peak_ratio(%) を乗じる）"""

    start_date: date
    end_date: date
    peak_ratio: int

    def __post_init__(self) -> None:
        if self.end_date < self.start_date:
            raise ValueError("Peak time end date must not be before its start date")
        if self.peak_ratio <= 0:
            raise ValueError(f"Invalid peak ratio: {self.peak_ratio}")

    def contains(self, target: date) -> bool:
        return self.start_date <= target <= self.end_date
