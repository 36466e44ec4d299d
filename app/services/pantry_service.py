"""팬트리 서비스 — 사용자 보유 재료 추가/조회/삭제 비즈니스 로직.

Pantry Service — Business logic for listing, adding, and deleting the
ingredient quantities a user keeps on hand.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

from app.models.pantry import QUANTITY_SCALE, Pantry
from app.repositories.pantry_repository import PantryRepository
from app.services.result import Result, ResultType

_QUANTUM: Decimal = Decimal(1).scaleb(-QUANTITY_SCALE)


def round_quantity(quantity: float) -> float:
    """저장 정밀도로 반올림 (Round half away from zero to the stored scale)."""
    return float(Decimal(str(quantity)).quantize(_QUANTUM, rounding=ROUND_HALF_UP))


class PantryService:
    """팬트리 관련 비즈니스 로직을 처리하는 서비스.

    Service handling pantry business logic. Validation failures and rejected
    inserts are reported through Result; other storage errors propagate.
    """

    def __init__(self, repository: PantryRepository) -> None:
        self.repository = repository

    async def find_all(self) -> Sequence[Pantry]:
        return await self.repository.find_all()

    async def find_by_user_id(self, app_user_id: int) -> Sequence[Pantry]:
        return await self.repository.find_by_user_id(app_user_id)

    async def add(self, pantry: Pantry | None) -> Result[Pantry]:
        """팬트리 항목을 검증 후 추가합니다.

        Validate and insert a pantry entry. The quantity is first rounded to
        the stored scale, so a value that would be stored as 0 is rejected.

        Args:
            pantry: 추가할 항목 (Transient pantry entry)

        Returns:
            Result[Pantry]: 성공 시 ID가 할당된 항목, 실패 시 검증 메시지
                            (Persisted entry on success, messages otherwise)
        """
        if pantry is not None and pantry.quantity is not None:
            pantry.quantity = round_quantity(pantry.quantity)

        result: Result[Pantry] = self._validate(pantry)
        if not result.success:
            return result

        added: Pantry | None = await self.repository.add(pantry)
        if added is None:
            result.add_error_message("Failed to add ingredient to pantry.", ResultType.INVALID)
        else:
            result.payload = added

        return result

    async def delete(self, pantry_id: int) -> bool:
        return await self.repository.delete(pantry_id)

    def _validate(self, pantry: Pantry | None) -> Result[Pantry]:
        result: Result[Pantry] = Result()

        if pantry is None:
            result.add_error_message("Pantry cannot be null.", ResultType.INVALID)
            return result

        if not pantry.app_user_id:
            result.add_error_message("User ID is required.", ResultType.INVALID)

        if pantry.quantity is None or pantry.quantity <= 0:
            result.add_error_message("Quantity cannot be zero or negative", ResultType.INVALID)

        if pantry.ingredient_id is None or pantry.ingredient_id <= 0:
            result.add_error_message("Ingredient ID is required.", ResultType.INVALID)

        if pantry.measurement_id is None or pantry.measurement_id <= 0:
            result.add_error_message("Measurement unit is required.", ResultType.INVALID)

        return result
