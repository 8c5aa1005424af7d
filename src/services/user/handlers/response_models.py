from pydantic import BaseModel

from services.user.domain.entity import User


class UserData(BaseModel):
    """利用者データのレスポンスモデル（パスワードハッシュは含めない）"""

    user_id: str
    email: str
    display_name: str
    created_at: str


class SuccessResponse(BaseModel):
    status: str = "success"
    data: UserData


def to_response(user: User) -> dict:
    return SuccessResponse(
        data=UserData(
            user_id=str(user.id),
            email=str(user.email),
            display_name=user.display_name,
            created_at=str(user.created_at),
        )
    ).model_dump()
