import re
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class EmailAddress:
    """メールアドレス

    前後の空白を除去し小文字に正規化した値を保持する。
    招待とユーザーの突き合わせは正規化後の完全一致で行う。
    """

    value: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[^@\s]+@[^@\s]+$")

    def __post_init__(self) -> None:
        normalized = (self.value or "").strip().lower()
        if not normalized:
            raise ValueError("Email cannot be blank")
        if not self.PATTERN.match(normalized):
            raise ValueError(f"Invalid email address: {self.value}")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
