"""계정 관련 Pydantic 응답 스키마 정의.

Account Pydantic response schema definitions.
The password hash is never part of a response.
"""

from pydantic import BaseModel

from app.models.user import AppUser


class AppUserResponse(BaseModel):
    """계정 응답 스키마.

    Attributes:
        app_user_id: 계정 ID (Account identifier)
        username: 로그인 아이디 (Login name)
        enabled: 활성 상태 (Whether the account may log in)
        roles: 역할 이름 목록, 정렬됨 (Granted role names, sorted)
    """

    app_user_id: int
    username: str
    enabled: bool
    roles: list[str]

    @classmethod
    def from_model(cls, app_user: AppUser) -> "AppUserResponse":
        return cls(
            app_user_id=app_user.app_user_id,
            username=app_user.username,
            enabled=app_user.enabled,
            roles=sorted(app_user.role_names),
        )
