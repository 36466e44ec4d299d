"""계정 라우터 — 계정 목록 및 상세 조회.

Account Router — Account listing and detail endpoints (authenticated).
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.deps import get_app_user_service, get_current_user
from app.models.user import AppUser
from app.schemas.user import AppUserResponse
from app.services.app_user_service import AppUserService
from app.utils.exceptions import NotFoundError

router: APIRouter = APIRouter()


@router.get("/", response_model=list[AppUserResponse])
async def list_users(
    service: Annotated[AppUserService, Depends(get_app_user_service)],
    current_user: Annotated[AppUser, Depends(get_current_user)],
) -> list[AppUserResponse]:
    """전체 계정 목록을 조회합니다 (List all accounts)."""
    return [AppUserResponse.from_model(u) for u in await service.find_all()]


@router.get("/{app_user_id}", response_model=AppUserResponse)
async def get_user(
    app_user_id: int,
    service: Annotated[AppUserService, Depends(get_app_user_service)],
    current_user: Annotated[AppUser, Depends(get_current_user)],
) -> AppUserResponse:
    """계정 상세 정보를 조회합니다.

    Retrieve one account by id.

    Raises:
        NotFoundError: 계정을 찾을 수 없을 때 (Account not found)
    """
    app_user: AppUser | None = await service.find_by_user_id(app_user_id)
    if app_user is None:
        raise NotFoundError("User not found")
    return AppUserResponse.from_model(app_user)
