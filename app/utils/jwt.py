"""계정 액세스 토큰 발급/검증.

Access tokens for pantry accounts (PyJWT). A token names the account by id
and username; get_current_user re-checks the account on every request, so
the embedded roles are informational only.

Claims:
    sub       계정 ID 문자열 (Account id as a string)
    username  로그인 아이디 (Login name)
    roles     역할 이름, 정렬됨 (Sorted role names)
    exp       만료 시각 (Expiry, JWT_ACCESS_TOKEN_EXPIRE_MINUTES after issue)
    type      "access"
"""

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from app.config import settings
from app.models.user import AppUser

ACCESS_TOKEN_TYPE: str = "access"


def access_claims(app_user: AppUser) -> dict[str, Any]:
    """계정으로부터 토큰 클레임 구성 (Identity claims for an account)."""
    return {
        "sub": str(app_user.app_user_id),
        "username": app_user.username,
        "roles": sorted(app_user.role_names),
    }


def create_access_token(claims: dict[str, Any]) -> str:
    """클레임에 만료 시각과 토큰 유형을 붙여 서명합니다.

    Sign the claims with an expiry and the access token type.
    """
    expires_at: datetime = datetime.now(timezone.utc) + timedelta(
        minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES
    )
    payload: dict[str, Any] = {**claims, "exp": expires_at, "type": ACCESS_TOKEN_TYPE}
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> dict[str, Any]:
    """서명과 만료를 검증한 클레임 반환.

    Raises:
        jwt.InvalidTokenError: 서명 불일치, 만료, 형식 오류
                               (Bad signature, expired, or malformed token)
    """
    return jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
