"""계정 조회 API 테스트.

Account API tests — listing and detail lookup.
"""

from httpx import AsyncClient

from tests.conftest import auth_header, make_token

URL = "/api/v1/users/"


class TestUserRead:
    """계정 조회 테스트."""

    async def test_list_users(self, client: AsyncClient, cook, disabled_user):
        res = await client.get(URL, headers=auth_header(make_token(cook)))
        assert res.status_code == 200
        usernames = [u["username"] for u in res.json()]
        assert usernames == ["cook@example.com", "gone@example.com"]

    async def test_get_user_detail(self, client: AsyncClient, cook):
        res = await client.get(f"{URL}{cook.app_user_id}", headers=auth_header(make_token(cook)))
        assert res.status_code == 200
        data = res.json()
        assert data["username"] == "cook@example.com"
        assert data["roles"] == ["USER"]

    async def test_get_nonexistent_user(self, client: AsyncClient, cook):
        res = await client.get(f"{URL}9999", headers=auth_header(make_token(cook)))
        assert res.status_code == 404

    async def test_list_requires_token(self, client: AsyncClient, cook):
        res = await client.get(URL)
        assert res.status_code in (401, 403)
