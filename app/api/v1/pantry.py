"""팬트리 라우터 — 보유 재료 조회, 추가, 삭제.

Pantry Router — List, add, and delete pantry entries.
Reads are public; mutations require an authenticated account.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_user, get_pantry_service
from app.database import get_db
from app.models.pantry import Pantry
from app.models.user import AppUser
from app.schemas.common import MessageResponse
from app.schemas.pantry import PantryCreate, PantryResponse
from app.services.pantry_service import PantryService
from app.services.result import Result
from app.utils.exceptions import NotFoundError, ValidationFailedError

router: APIRouter = APIRouter()


@router.get("/", response_model=list[PantryResponse])
async def list_pantry(
    service: Annotated[PantryService, Depends(get_pantry_service)],
) -> list[Pantry]:
    """전체 팬트리 항목을 조회합니다 (List every pantry entry)."""
    return list(await service.find_all())


@router.get("/user/{app_user_id}", response_model=list[PantryResponse])
async def list_user_pantry(
    app_user_id: int,
    service: Annotated[PantryService, Depends(get_pantry_service)],
) -> list[Pantry]:
    """계정이 보유한 팬트리 항목을 조회합니다 (List one account's pantry)."""
    return list(await service.find_by_user_id(app_user_id))


@router.post("/", response_model=PantryResponse, status_code=201)
async def add_pantry(
    data: PantryCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    service: Annotated[PantryService, Depends(get_pantry_service)],
    current_user: Annotated[AppUser, Depends(get_current_user)],
) -> Pantry:
    """팬트리 항목을 추가합니다.

    Add a pantry entry. Every validation failure is returned at once as 400.
    """
    result: Result[Pantry] = await service.add(data.to_model())
    if not result.success:
        raise ValidationFailedError(result.messages)

    await db.commit()
    return result.payload


@router.delete("/{pantry_id}", response_model=MessageResponse)
async def delete_pantry(
    pantry_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    service: Annotated[PantryService, Depends(get_pantry_service)],
    current_user: Annotated[AppUser, Depends(get_current_user)],
) -> dict[str, str]:
    """팬트리 항목을 삭제합니다.

    Raises:
        NotFoundError: 항목을 찾을 수 없을 때 (Entry not found)
    """
    if not await service.delete(pantry_id):
        raise NotFoundError("Pantry entry not found")

    await db.commit()
    return {"message": "Pantry entry deleted"}
