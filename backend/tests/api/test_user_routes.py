"""User routes - profile read/update and stats."""

from unittest.mock import AsyncMock

from zenstudent.api.routes import users


async def test_profile_has_no_password(client, alice):
    res = await client.get("/api/user/profile", headers=alice["headers"])
    assert res.status_code == 200
    body = res.json()
    assert body["email"] == "alice@example.com"
    assert body["fullName"] == "Alice Doe"
    assert body["bio"] == ""
    assert not any("password" in key.lower() for key in body)


async def test_profile_update_is_partial_and_ignores_password(client, alice):
    res = await client.put("/api/user/profile", headers=alice["headers"], json={
        "university": "MIT", "major": "Math", "password": "changed!",
    })
    assert res.status_code == 200
    body = res.json()
    assert body["university"] == "MIT"
    assert body["major"] == "Math"
    assert body["fullName"] == "Alice Doe"

    # old password still works
    res = await client.post("/api/auth/login", json={
        "email": "alice@example.com", "password": "secret123",
    })
    assert res.status_code == 200


async def test_profile_email_change_to_taken_email_rejected(client, alice, bob):
    res = await client.put(
        "/api/user/profile", headers=alice["headers"],
        json={"email": "BOB@example.com"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "DUPLICATE_EMAIL"


async def test_stats_aggregate_owned_records(client, alice, bob):
    h = alice["headers"]
    await client.post("/api/moods", headers=h, json={"mood": 4})
    await client.post("/api/moods", headers=h, json={"mood": 2})
    await client.post("/api/goals", headers=h, json={
        "title": "Run", "category": "fitness", "targetValue": 5,
    })
    await client.post("/api/goals", headers=h, json={
        "title": "Read", "category": "academic", "targetValue": 5,
        "currentValue": 5, "completed": True,
    })
    await client.post("/api/expenses", headers=h, json={
        "title": "Lunch", "amount": 12.5, "category": "food",
    })
    await client.post("/api/expenses", headers=h, json={
        "title": "Bus", "amount": "2.25", "category": "transport",
    })
    # another user's data never leaks into the totals
    await client.post("/api/moods", headers=bob["headers"], json={"mood": 5})

    res = await client.get("/api/user/stats", headers=h)
    assert res.status_code == 200
    assert res.json() == {
        "moodEntries": 2,
        "activeGoals": 1,
        "completedGoals": 1,
        "totalSpent": 14.75,
        "daysActive": 0,
    }


async def test_profile_email_race_on_unique_index_is_400(client, alice, bob, monkeypatch):
    monkeypatch.setattr(users, "_email_taken", AsyncMock(return_value=False))
    res = await client.put(
        "/api/user/profile", headers=alice["headers"],
        json={"email": "bob@example.com", "bio": "mine now"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "DUPLICATE_EMAIL"

    profile = (await client.get("/api/user/profile", headers=alice["headers"])).json()
    assert profile["email"] == "alice@example.com"
    assert profile["bio"] == ""
