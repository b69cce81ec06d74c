from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .currency import Currency


@dataclass(frozen=True)
class Money:
    """金額（通貨情報含む）

    運賃計算の結果をそのまま保持するため、負の金額も許容する
    （割引率が小児運賃比率を上回る小児のみの予約など）。
    """

    amount: Decimal
    currency: Currency

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    @classmethod
    def jpy(cls, amount: Decimal | int) -> Money:
        """日本円で Money を生成"""
        return cls(Decimal(amount), Currency.jpy())
