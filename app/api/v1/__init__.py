"""v1 API 라우터 패키지 — 모든 엔드포인트 통합.

v1 API Router package — Aggregates all endpoints into a single router
for inclusion in the FastAPI application.

Included routers:
    - auth: 회원가입, 로그인, 내 정보 (Registration, login, current account)
    - users: 계정 조회 (Account lookup)
    - pantry: 팬트리 관리 (Pantry management)
"""

from fastapi import APIRouter

from app.api.v1.auth import router as auth_router
from app.api.v1.pantry import router as pantry_router
from app.api.v1.users import router as users_router

api_router: APIRouter = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["Auth"])
api_router.include_router(users_router, prefix="/users", tags=["Users"])
api_router.include_router(pantry_router, prefix="/pantry", tags=["Pantry"])
