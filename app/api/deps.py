"""FastAPI 의존성 주입 모듈 — 서비스 조립 및 인증.

FastAPI dependency injection module — Service wiring and authentication.
Builds request-scoped services from the request's database session and
extracts the current account from the bearer token.

Authentication Flow:
    1. 클라이언트가 Authorization: Bearer <token> 헤더를 전송
       (Client sends Authorization: Bearer <token> header)
    2. decode_token()이 JWT를 검증하고 페이로드를 반환
       (decode_token verifies JWT and returns payload)
    3. 페이로드의 "username"으로 AppUserService.authentication_lookup 호출
       (The account is resolved through the authentication lookup, so a
       disabled or deleted account is rejected even with a valid token)
"""

from typing import Annotated

import jwt
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.user import AppUser
from app.repositories.app_user_repository import AppUserRepository
from app.repositories.pantry_repository import PantryRepository
from app.services.app_user_service import AppUserService
from app.services.pantry_service import PantryService
from app.utils.exceptions import NotFoundError, UnauthorizedError
from app.utils.jwt import ACCESS_TOKEN_TYPE, decode_token
from app.utils.password import BcryptPasswordEncoder

# HTTP Bearer 토큰 추출기 — Authorization 헤더에서 JWT 토큰 추출
security: HTTPBearer = HTTPBearer()

_password_encoder: BcryptPasswordEncoder = BcryptPasswordEncoder()


def get_password_encoder() -> BcryptPasswordEncoder:
    return _password_encoder


def get_app_user_service(
    db: Annotated[AsyncSession, Depends(get_db)],
    encoder: Annotated[BcryptPasswordEncoder, Depends(get_password_encoder)],
) -> AppUserService:
    """요청 세션에 묶인 AppUserService를 생성합니다 (Request-scoped AppUserService)."""
    return AppUserService(AppUserRepository(db), encoder)


def get_pantry_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> PantryService:
    """요청 세션에 묶인 PantryService를 생성합니다 (Request-scoped PantryService)."""
    return PantryService(PantryRepository(db))


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(security)],
    service: Annotated[AppUserService, Depends(get_app_user_service)],
) -> AppUser:
    """JWT 토큰에서 현재 인증된 계정을 추출합니다.

    Decode JWT from the Authorization header and return the authenticated account.

    Raises:
        UnauthorizedError: 토큰이 유효하지 않거나 만료됨, 또는 계정이 없거나 비활성
                           (Invalid/expired token, or missing/disabled account)
    """
    try:
        payload: dict = decode_token(credentials.credentials)
    except jwt.InvalidTokenError:
        raise UnauthorizedError("Invalid or expired token")

    username: str | None = payload.get("username")
    if payload.get("type") != ACCESS_TOKEN_TYPE or username is None:
        raise UnauthorizedError("Invalid token")

    try:
        return await service.authentication_lookup(username)
    except NotFoundError:
        raise UnauthorizedError("User not found or disabled")
