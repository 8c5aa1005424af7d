import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from services.shared.utils import to_decimal


class CreateExpenseRequest(BaseModel):
    """経費登録リクエストスキーマ"""

    amount: Decimal = Field(..., ge=0, description="金額", examples=[3500])
    currency: str = Field(
        default="JPY",
        pattern="^[A-Za-z]{3}$",
        description="通貨コード（ISO 4217）",
        examples=["JPY", "USD"],
    )
    description: str = Field(default="", max_length=500)
    date: datetime.date = Field(..., description="支出日", examples=["2026-01-02"])

    @field_validator("amount", mode="before")
    @classmethod
    def convert_amount_to_decimal(cls, v):
        """Decimalに変換する"""
        return to_decimal(v)


class UpdateExpenseRequest(BaseModel):
    """経費更新リクエストスキーマ（指定した項目だけを更新）"""

    amount: Decimal | None = Field(default=None, ge=0)
    currency: str | None = Field(default=None, pattern="^[A-Za-z]{3}$")
    description: str | None = Field(default=None, max_length=500)
    date: datetime.date | None = None

    @field_validator("amount", mode="before")
    @classmethod
    def convert_amount_to_decimal(cls, v):
        return v if v is None else to_decimal(v)
