"""Users routes — HTTP contract for user CRUD.

Invariants:
    - Reads return list shape, writes return form shape (camelCase on the wire)
    - Domain errors map to 400/404 with the structured error envelope
    - DELETE returns {"deleted": true} and cascades task items
"""

from sqlalchemy import func, select

from taskhub.models.task_item import TaskItem


async def test_list_users(client, seed_data):
    res = await client.get("/api/users")
    assert res.status_code == 200
    assert [u["email"] for u in res.json()] == [
        "alice.borderland@testmail.com",
        "frodo.smith@testmail.com",
        "charlie.shane@testmail.com",
    ]


async def test_get_user(client, seed_data):
    res = await client.get(f"/api/users/{seed_data.frodo.identifier}")
    assert res.status_code == 200
    assert res.json() == {
        "identifier": seed_data.frodo.identifier,
        "email": "frodo.smith@testmail.com",
    }


async def test_get_unknown_user_returns_404(client, seed_data):
    res = await client.get("/api/users/nobody")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_create_template_is_blank(client):
    res = await client.get("/api/users/create")
    assert res.status_code == 200
    assert res.json() == {"identifier": "", "email": ""}


async def test_create_user(client, seed_data):
    res = await client.post(
        "/api/users/create", json={"identifier": "", "email": "new@testmail.com"},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["email"] == "new@testmail.com"
    assert body["identifier"]

    fetched = await client.get(f"/api/users/{body['identifier']}")
    assert fetched.json()["email"] == "new@testmail.com"


async def test_create_user_with_taken_email_returns_400(client, seed_data):
    res = await client.post(
        "/api/users/create", json={"email": "alice.borderland@testmail.com"},
    )
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["message"] == "Email is already taken."
    assert error["details"] == ["Email is already taken."]


async def test_update_template_is_prefilled(client, seed_data):
    res = await client.get(f"/api/users/update/{seed_data.alice.identifier}")
    assert res.status_code == 200
    assert res.json()["email"] == "alice.borderland@testmail.com"


async def test_update_user(client, seed_data):
    res = await client.put("/api/users/update", json={
        "identifier": seed_data.charlie.identifier, "email": "charlie@new.io",
    })
    assert res.status_code == 200
    assert res.json() == {
        "identifier": seed_data.charlie.identifier, "email": "charlie@new.io",
    }


async def test_update_unknown_user_returns_404(client, seed_data):
    res = await client.put("/api/users/update", json={
        "identifier": "missing", "email": "x@y.z",
    })
    assert res.status_code == 404


async def test_delete_user_cascades(client, seed_data, test_db):
    res = await client.delete(f"/api/users/{seed_data.alice.identifier}")
    assert res.status_code == 200
    assert res.json() == {"deleted": True}

    remaining = await test_db.execute(
        select(func.count()).select_from(TaskItem)
        .where(TaskItem.user_id == seed_data.alice.id),
    )
    assert remaining.scalar_one() == 0

    again = await client.delete(f"/api/users/{seed_data.alice.identifier}")
    assert again.status_code == 404
