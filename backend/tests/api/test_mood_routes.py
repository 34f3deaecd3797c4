"""Mood routes - entries (create/list/delete) and custom moods."""

from uuid import uuid4


async def test_create_and_list_newest_first(client, auth):
    first = await client.post("/api/moods", headers=auth, json={
        "mood": 3, "note": "meh", "date": "2026-10-18",
    })
    second = await client.post("/api/moods", headers=auth, json={"mood": 5})
    assert first.status_code == second.status_code == 201
    assert first.json()["note"] == "meh"
    assert first.json()["date"] == "2026-10-18"

    res = await client.get("/api/moods", headers=auth)
    assert res.status_code == 200
    assert [m["id"] for m in res.json()] == [second.json()["id"], first.json()["id"]]


async def test_mood_out_of_range_rejected(client, auth):
    res = await client.post("/api/moods", headers=auth, json={"mood": 9})
    assert res.status_code == 400


async def test_delete_own_mood(client, auth):
    created = (await client.post("/api/moods", headers=auth, json={"mood": 4})).json()
    res = await client.delete(f"/api/moods/{created['id']}", headers=auth)
    assert res.status_code == 200
    assert res.json() == {"message": "Mood deleted"}
    assert (await client.get("/api/moods", headers=auth)).json() == []


async def test_delete_unknown_mood_is_404(client, auth):
    res = await client.delete(f"/api/moods/{uuid4()}", headers=auth)
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_custom_moods_scoped_to_caller(client, alice, bob):
    res = await client.post("/api/custom-moods", headers=alice["headers"], json={
        "emoji": "🤯", "name": "Overwhelmed", "value": 2,
    })
    assert res.status_code == 201
    assert res.json()["color"] == "#9C27B0"

    mine = (await client.get("/api/custom-moods", headers=alice["headers"])).json()
    theirs = (await client.get("/api/custom-moods", headers=bob["headers"])).json()
    assert [m["name"] for m in mine] == ["Overwhelmed"]
    assert theirs == []
