"""Task Routes — HTTP contract for /todo/app/tasks.

Tests cover:
    - Create returns 201 with a per-owner Location
    - Get returns {title, description} for the owner, 404 text for anyone else
    - Invalid bodies return 400 with the plain-text message
    - Update returns 204, delete returns 204 then 404
    - List returns only the caller's tasks
    - 401 without credentials, 401 with bad ones
    - Admin-only accounts without USER are forbidden
"""

import pytest

from todo_app.core.domain_types import Role, UserId
from todo_app.repositories.user_repository import UserRepository


TASKS_URL = "/todo/app/tasks/"
ALICE_AUTH = ("Alice", "password123")
BOB_AUTH = ("Bob", "hunter22")


async def _create(client, auth, title, description):
    return await client.post(
        TASKS_URL, json={"title": title, "description": description}, auth=auth,
    )


async def test_create_task_returns_201_with_location(client, alice):
    res = await _create(client, ALICE_AUTH, "Buy milk", "2 liters")
    assert res.status_code == 201
    assert res.headers["location"] == "/todo/app/tasks/1"
    assert res.content == b""


async def test_second_task_location_uses_next_id(client, alice):
    await _create(client, ALICE_AUTH, "Buy milk", "2 liters")
    res = await _create(client, ALICE_AUTH, "Book tickets", "Vacation tickets to Hawaii")
    assert res.headers["location"] == "/todo/app/tasks/2"


async def test_get_task_returns_title_and_description(client, alice):
    await _create(client, ALICE_AUTH, "Buy milk", "2 liters")
    await _create(client, ALICE_AUTH, "Book tickets", "Vacation tickets to Hawaii")

    res = await client.get(f"{TASKS_URL}2", auth=ALICE_AUTH)

    assert res.status_code == 200
    assert res.json() == {
        "title": "Book tickets", "description": "Vacation tickets to Hawaii",
    }


async def test_get_task_as_other_user_returns_404_text(client, alice, bob):
    await _create(client, ALICE_AUTH, "Buy milk", "2 liters")
    await _create(client, ALICE_AUTH, "Book tickets", "Vacation tickets to Hawaii")

    res = await client.get(f"{TASKS_URL}2", auth=BOB_AUTH)

    assert res.status_code == 404
    assert res.text == "Invalid task ID."


async def test_create_task_with_empty_title_and_null_description_returns_400(
    client, alice,
):
    res = await _create(client, ALICE_AUTH, "", None)
    assert res.status_code == 400
    assert res.text == (
        "Invalid task attributes. Title and description cannot be empty or null."
    )


async def test_create_task_with_missing_body_fields_returns_400(client, alice):
    res = await client.post(TASKS_URL, json={}, auth=ALICE_AUTH)
    assert res.status_code == 400


async def test_create_task_with_malformed_json_returns_400(client, alice):
    res = await client.post(
        TASKS_URL, content=b"{not json", auth=ALICE_AUTH,
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_update_task_returns_204(client, alice):
    await _create(client, ALICE_AUTH, "Old", "old")

    res = await client.put(
        f"{TASKS_URL}1", json={"title": "New", "description": "new"}, auth=ALICE_AUTH,
    )

    assert res.status_code == 204
    assert (await client.get(f"{TASKS_URL}1", auth=ALICE_AUTH)).json()["title"] == "New"


async def test_update_missing_task_returns_404_before_validation(client, alice):
    res = await client.put(
        f"{TASKS_URL}9", json={"title": "", "description": None}, auth=ALICE_AUTH,
    )
    assert res.status_code == 404
    assert res.text == "Invalid task ID."


async def test_update_task_with_invalid_fields_returns_400(client, alice):
    await _create(client, ALICE_AUTH, "Old", "old")
    res = await client.put(
        f"{TASKS_URL}1", json={"title": "New", "description": ""}, auth=ALICE_AUTH,
    )
    assert res.status_code == 400


async def test_delete_task_returns_204_then_404(client, alice):
    await _create(client, ALICE_AUTH, "Gone", "soon")

    res = await client.delete(f"{TASKS_URL}1", auth=ALICE_AUTH)
    assert res.status_code == 204

    res = await client.get(f"{TASKS_URL}1", auth=ALICE_AUTH)
    assert res.status_code == 404


async def test_delete_other_users_task_returns_404(client, alice, bob):
    await _create(client, ALICE_AUTH, "Mine", "mine")
    res = await client.delete(f"{TASKS_URL}1", auth=BOB_AUTH)
    assert res.status_code == 404
    assert (await client.get(f"{TASKS_URL}1", auth=ALICE_AUTH)).status_code == 200


async def test_list_tasks_returns_only_callers_tasks(client, alice, bob):
    await _create(client, ALICE_AUTH, "A1", "a")
    await _create(client, ALICE_AUTH, "A2", "a")
    await _create(client, BOB_AUTH, "B1", "b")

    res = await client.get(TASKS_URL, auth=ALICE_AUTH)

    assert res.status_code == 200
    assert res.json() == [
        {"title": "A1", "description": "a"},
        {"title": "A2", "description": "a"},
    ]


async def test_non_integer_task_id_returns_400(client, alice):
    res = await client.get(f"{TASKS_URL}abc", auth=ALICE_AUTH)
    assert res.status_code == 400


async def test_list_tasks_without_credentials_returns_401(client):
    res = await client.get(TASKS_URL)
    assert res.status_code == 401
    assert res.headers["www-authenticate"].startswith("Basic")


@pytest.mark.parametrize("auth", [("Alice", "wrong"), ("Nobody", "password123")])
async def test_list_tasks_with_bad_credentials_returns_401(client, alice, auth):
    res = await client.get(TASKS_URL, auth=auth)
    assert res.status_code == 401


async def test_account_without_user_role_is_forbidden(client, test_db, hasher):
    users = UserRepository(test_db)
    auditor = await users.add("auditor", "audit@example.com", hasher.hash("pw"))
    await users.add_authority(auditor, Role.ADMIN)
    await test_db.commit()
    assert await users.roles_of(UserId(auditor.id)) == frozenset({Role.ADMIN})

    res = await client.get(TASKS_URL, auth=("auditor", "pw"))

    assert res.status_code == 403


@pytest.mark.parametrize("method", ["GET", "PUT", "DELETE"])
@pytest.mark.parametrize("task_id", [2**31, 2**64])
async def test_task_id_beyond_storage_range_returns_404(client, alice, method, task_id):
    res = await client.request(
        method, f"{TASKS_URL}{task_id}", auth=ALICE_AUTH,
        json={"title": "t", "description": "d"} if method == "PUT" else None,
    )
    assert res.status_code == 404
    assert res.text == "Invalid task ID."
