"""인증 라우터 — 회원가입, 로그인, 내 정보.

Auth Router — Registration, login, and current-account endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_app_user_service, get_current_user
from app.database import get_db
from app.models.user import AppUser
from app.schemas.auth import LoginRequest, RegisterRequest, TokenResponse
from app.schemas.user import AppUserResponse
from app.services.app_user_service import AppUserService
from app.services.result import Result
from app.utils.exceptions import NotFoundError, UnauthorizedError, ValidationFailedError
from app.utils.jwt import access_claims, create_access_token

router: APIRouter = APIRouter()


@router.post("/register", response_model=AppUserResponse, status_code=201)
async def register(
    data: RegisterRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    service: Annotated[AppUserService, Depends(get_app_user_service)],
) -> AppUserResponse:
    """회원가입 — 기본 역할(USER)의 활성 계정 생성.

    Register an enabled account with the default role.
    Validation failures and duplicate usernames return 400 with every message.
    """
    result: Result[AppUser] = await service.create(data.username, data.password)
    if not result.success:
        raise ValidationFailedError(result.messages)

    await db.commit()
    return AppUserResponse.from_model(result.payload)


@router.post("/login", response_model=TokenResponse)
async def login(
    data: LoginRequest,
    service: Annotated[AppUserService, Depends(get_app_user_service)],
) -> TokenResponse:
    """로그인 — 활성 계정의 비밀번호 확인 후 액세스 토큰 발급.

    Verify the password of an enabled account and issue an access token.
    Unknown, disabled, and wrong-password logins all return the same 401.
    """
    try:
        app_user: AppUser = await service.authentication_lookup(data.username)
    except NotFoundError:
        raise UnauthorizedError("Invalid username or password")

    if not service.encoder.matches(data.password, app_user.password_hash):
        raise UnauthorizedError("Invalid username or password")

    return TokenResponse(access_token=create_access_token(access_claims(app_user)))


@router.get("/me", response_model=AppUserResponse)
async def me(
    current_user: Annotated[AppUser, Depends(get_current_user)],
) -> AppUserResponse:
    """현재 인증된 계정 정보를 반환합니다 (Current authenticated account)."""
    return AppUserResponse.from_model(current_user)
