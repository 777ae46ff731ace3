import pytest

from tests.helpers import add_category, register


@pytest.fixture
async def headers(client):
    return await register(client)


async def _category(client, headers, name="Food", kind="expense"):
    response = await client.post("/categories/", json={"name": name, "type": kind}, headers=headers)
    return response.json()["id"]


async def _transaction(client, headers, category_id, day, amount, kind="expense", memo=None):
    response = await client.post(
        "/transactions/",
        json={"date": day, "amount": amount, "type": kind, "category_id": category_id, "memo": memo},
        headers=headers,
    )
    assert response.status_code == 201
    return response.json()


async def test_create_and_read(client, headers):
    category_id = await _category(client, headers)

    created = await _transaction(client, headers, category_id, "2024-03-05", 12.5, memo="lunch")
    fetched = await client.get(f"/transactions/{created['id']}", headers=headers)

    assert fetched.status_code == 200
    assert fetched.json()["amount"] == 12.5
    assert fetched.json()["memo"] == "lunch"
    assert fetched.json()["date"] == "2024-03-05"


async def test_create_against_unknown_category(client, headers):
    response = await client.post(
        "/transactions/",
        json={"date": "2024-03-05", "amount": 1, "type": "expense", "category_id": 999},
        headers=headers,
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Category 999 not found"


async def test_create_against_deleted_category(client, headers):
    category_id = await _category(client, headers)
    await client.delete(f"/categories/{category_id}", headers=headers)

    response = await client.post(
        "/transactions/",
        json={"date": "2024-03-05", "amount": 1, "type": "expense", "category_id": category_id},
        headers=headers,
    )

    assert response.status_code == 400


async def test_create_against_legacy_category(client, headers, session):
    legacy = await add_category(session, user_id=None, name="Misc")

    created = await _transaction(client, headers, legacy.id, "2024-03-05", 3)

    assert created["category_id"] == legacy.id


async def test_list_by_month(client, headers):
    category_id = await _category(client, headers)
    await _transaction(client, headers, category_id, "2024-03-31", 3)
    await _transaction(client, headers, category_id, "2024-03-01", 1)
    await _transaction(client, headers, category_id, "2024-04-01", 4)
    await _transaction(client, headers, category_id, "2024-02-29", 2)

    response = await client.get("/transactions/", params={"date": "2024-03-17"}, headers=headers)

    assert [t["date"] for t in response.json()] == ["2024-03-01", "2024-03-31"]


async def test_update_and_delete(client, headers):
    category_id = await _category(client, headers)
    other_id = await _category(client, headers, name="Salary", kind="income")
    created = await _transaction(client, headers, category_id, "2024-03-05", 10)

    updated = await client.put(
        f"/transactions/{created['id']}",
        json={"date": "2024-03-06", "amount": 20, "type": "income", "category_id": other_id, "memo": "fixed"},
        headers=headers,
    )
    assert updated.status_code == 200
    assert updated.json()["category_id"] == other_id
    assert updated.json()["type"] == "income"
    assert updated.json()["amount"] == 20

    deleted = await client.delete(f"/transactions/{created['id']}", headers=headers)
    assert deleted.json() == {"message": "Transaction deleted successfully"}
    assert (await client.get(f"/transactions/{created['id']}", headers=headers)).status_code == 404


async def test_other_users_transactions_are_hidden(client, headers):
    category_id = await _category(client, headers)
    created = await _transaction(client, headers, category_id, "2024-03-05", 10)
    other = await register(client, login="bob")

    assert (await client.get(f"/transactions/{created['id']}", headers=other)).status_code == 404
    assert (await client.delete(f"/transactions/{created['id']}", headers=other)).status_code == 404
    listed = await client.get("/transactions/", params={"date": "2024-03-01"}, headers=other)
    assert listed.json() == []


async def test_year_summary_groups_by_month_and_category(client, headers):
    food = await _category(client, headers)
    salary = await _category(client, headers, name="Salary", kind="income")
    await _transaction(client, headers, food, "2024-01-03", 10)
    await _transaction(client, headers, food, "2024-01-20", 5)
    await _transaction(client, headers, salary, "2024-01-25", 100, kind="income")
    await _transaction(client, headers, food, "2024-02-02", 7)
    await _transaction(client, headers, food, "2023-12-31", 99)

    response = await client.get("/transactions/summary", params={"date": "2024-06-01"}, headers=headers)

    assert response.status_code == 200
    assert response.json() == [
        {"month": 1, "category_id": food, "total_amount": 15.0},
        {"month": 1, "category_id": salary, "total_amount": 100.0},
        {"month": 2, "category_id": food, "total_amount": 7.0},
    ]


async def test_month_summary(client, headers):
    food = await _category(client, headers)
    salary = await _category(client, headers, name="Salary", kind="income")
    await _transaction(client, headers, food, "2024-03-03", 30)
    await _transaction(client, headers, salary, "2024-03-25", 100, kind="income")
    await _transaction(client, headers, food, "2024-04-01", 50)

    response = await client.get("/transactions/monthly-summary", params={"date": "2024-03-10"}, headers=headers)

    assert response.json() == {
        "start": "2024-03-01",
        "end": "2024-04-01",
        "income": 100.0,
        "expense": 30.0,
        "balance": 70.0,
    }
