"""인증 관련 Pydantic 요청/응답 스키마 정의.

Authentication-related Pydantic request/response schema definitions.
Covers registration, login, and token issuance.
"""

from pydantic import BaseModel


class LoginRequest(BaseModel):
    """로그인 요청 스키마.

    Attributes:
        username: 로그인 아이디 (Login name)
        password: 비밀번호 (Plain text password, verified against bcrypt hash)
    """

    username: str
    password: str


class RegisterRequest(BaseModel):
    """회원가입 요청 스키마.

    Registration request schema. Both fields are optional at the schema
    level so that missing values are reported as Result messages by
    AppUserService rather than rejected by Pydantic.

    Attributes:
        username: 로그인 아이디 (Desired login name, must contain "@")
        password: 비밀번호 (Plain text, will be bcrypt-hashed on server)
    """

    username: str | None = None
    password: str | None = None


class TokenResponse(BaseModel):
    """JWT 토큰 발급 응답 스키마.

    Attributes:
        access_token: JWT 액세스 토큰 (Access token)
        token_type: 토큰 유형 (Always "bearer" for Authorization header)
    """

    access_token: str
    token_type: str = "bearer"
