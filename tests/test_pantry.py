"""팬트리 API 테스트 — 추가, 조회, 삭제.

Pantry API tests — add, list, and delete pantry entries over HTTP.
"""

from httpx import AsyncClient

from tests.conftest import auth_header, make_token

URL = "/api/v1/pantry/"


def entry(user, ingredient, measurement, quantity: float = 3) -> dict:
    return {
        "app_user_id": user.app_user_id,
        "ingredient_id": ingredient.ingredient_id,
        "measurement_id": measurement.measurement_id,
        "quantity": quantity,
    }


class TestPantryAdd:
    """팬트리 항목 추가 테스트."""

    async def test_add(self, client: AsyncClient, cook, flour, cup):
        res = await client.post(URL, json=entry(cook, flour, cup), headers=auth_header(make_token(cook)))
        assert res.status_code == 201
        data = res.json()
        assert data["pantry_id"] > 0
        assert data["app_user_id"] == cook.app_user_id
        assert data["quantity"] == 3

    async def test_add_zero_quantity(self, client: AsyncClient, cook, flour, cup):
        res = await client.post(URL, json=entry(cook, flour, cup, 0), headers=auth_header(make_token(cook)))
        assert res.status_code == 400
        assert res.json()["detail"] == [
            {"message": "Quantity cannot be zero or negative", "type": "INVALID"},
        ]

    async def test_add_empty_body_reports_every_field(self, client: AsyncClient, cook):
        res = await client.post(URL, json={}, headers=auth_header(make_token(cook)))
        assert res.status_code == 400
        assert [d["message"] for d in res.json()["detail"]] == [
            "User ID is required.",
            "Quantity cannot be zero or negative",
            "Ingredient ID is required.",
            "Measurement unit is required.",
        ]

    async def test_add_unknown_ingredient(self, client: AsyncClient, cook, cup):
        token = make_token(cook)
        body = {
            "app_user_id": cook.app_user_id,
            "ingredient_id": 999,
            "measurement_id": cup.measurement_id,
            "quantity": 1,
        }
        res = await client.post(URL, json=body, headers=auth_header(token))
        assert res.status_code == 400
        assert res.json()["detail"][0]["message"] == "Failed to add ingredient to pantry."

    async def test_add_requires_token(self, client: AsyncClient, cook, flour, cup):
        res = await client.post(URL, json=entry(cook, flour, cup))
        assert res.status_code in (401, 403)

    async def test_add_quantity_below_stored_precision(self, client: AsyncClient, cook, flour, cup):
        res = await client.post(URL, json=entry(cook, flour, cup, 0.004), headers=auth_header(make_token(cook)))
        assert res.status_code == 400
        assert res.json()["detail"] == [
            {"message": "Quantity cannot be zero or negative", "type": "INVALID"},
        ]


class TestPantryReadDelete:
    """팬트리 조회 및 삭제 테스트."""

    async def test_list_and_delete(self, client: AsyncClient, cook, flour, cup):
        headers = auth_header(make_token(cook))
        user_id = cook.app_user_id
        created = await client.post(URL, json=entry(cook, flour, cup), headers=headers)
        pantry_id = created.json()["pantry_id"]

        all_res = await client.get(URL)
        assert [p["pantry_id"] for p in all_res.json()] == [pantry_id]

        mine = await client.get(f"{URL}user/{user_id}")
        assert mine.status_code == 200
        assert len(mine.json()) == 1

        others = await client.get(f"{URL}user/{user_id + 1}")
        assert others.json() == []

        deleted = await client.delete(f"{URL}{pantry_id}", headers=headers)
        assert deleted.status_code == 200

        again = await client.delete(f"{URL}{pantry_id}", headers=headers)
        assert again.status_code == 404
