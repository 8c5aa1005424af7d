from dataclasses import dataclass


@dataclass(frozen=True)
class Currency:
    """通貨コード（ISO 4217）

    例: JPY, USD, EUR
    """

    code: str

    def __post_init__(self) -> None:
        normalized = (self.code or "").strip().upper()
        if len(normalized) != 3 or not normalized.isalpha():
            raise ValueError(f"Invalid currency code: {self.code}")
        # frozen=True でも __post_init__ 内では object.__setattr__ が必要
        object.__setattr__(self, "code", normalized)

    def __str__(self) -> str:
        return self.code
