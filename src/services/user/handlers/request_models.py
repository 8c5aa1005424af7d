from pydantic import BaseModel, Field


class RegisterUserRequest(BaseModel):
    """利用者登録リクエストスキーマ"""

    email: str = Field(..., min_length=3, max_length=254, examples=["alice@example.com"])
    password: str = Field(..., min_length=1, max_length=128)
    display_name: str = Field(..., min_length=1, max_length=100, examples=["Alice"])
