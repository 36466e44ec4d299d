"""팬트리 관련 Pydantic 요청/응답 스키마 정의.

Pantry Pydantic request/response schema definitions.
"""

from pydantic import BaseModel, ConfigDict

from app.models.pantry import Pantry


class PantryCreate(BaseModel):
    """팬트리 항목 추가 요청 스키마.

    Pantry entry creation request schema. Range checks (positive quantity,
    positive ids) are done by PantryService so every violation is reported
    at once; missing fields default to 0 and fail those checks.

    Attributes:
        app_user_id: 소유자 계정 ID (Owning account id)
        ingredient_id: 재료 ID (Ingredient id)
        measurement_id: 측정 단위 ID (Measurement unit id)
        quantity: 수량 (Quantity on hand)
    """

    app_user_id: int = 0
    ingredient_id: int = 0
    measurement_id: int = 0
    quantity: float = 0

    def to_model(self) -> Pantry:
        return Pantry(
            app_user_id=self.app_user_id,
            ingredient_id=self.ingredient_id,
            measurement_id=self.measurement_id,
            quantity=self.quantity,
        )


class PantryResponse(BaseModel):
    """팬트리 항목 응답 스키마."""

    model_config = ConfigDict(from_attributes=True)

    pantry_id: int
    app_user_id: int
    ingredient_id: int
    measurement_id: int
    quantity: float
