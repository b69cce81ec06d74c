from dataclasses import dataclass


@dataclass(frozen=True)
class Currency:
    """通貨コード（ISO 4217）

    運賃はすべて日本円で扱う。
    """

    code: str

    def __post_init__(self) -> None:
        if len(self.code) != 3 or not self.code.isalpha():
            raise ValueError(f"Invalid currency code: {self.code}")
        object.__setattr__(self, "code", self.code.upper())

    def __str__(self) -> str:
        return self.code

    @classmethod
    def jpy(cls) -> "Currency":
        """日本円"""
        return cls("JPY")
