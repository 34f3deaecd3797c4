"""Analytics routes - dashboards computed from the caller's own records."""

from datetime import timedelta

from zenstudent.schemas.base import utc_today


async def test_expense_analytics_month_window(client, auth):
    today = utc_today()
    await client.post("/api/budgets", headers=auth, json={"category": "food", "amount": 50})
    await client.post("/api/expenses", headers=auth, json={
        "title": "Groceries", "amount": 60, "category": "food",
        "date": today.isoformat(),
    })
    await client.post("/api/expenses", headers=auth, json={
        "title": "Old rent", "amount": 500, "category": "rent",
        "date": (today - timedelta(days=800)).isoformat(),
    })

    res = await client.get("/api/analytics/expenses", headers=auth)
    assert res.status_code == 200
    body = res.json()
    assert body["window"] == "month"
    assert body["total"] == 60.0
    assert body["categoryTotals"] == [
        {"category": "food", "name": "Food & Dining", "amount": 60.0},
    ]
    status = body["budgetStatus"][0]
    assert status["isOverBudget"] is True
    assert status["overBy"] == 10.0
    assert body["insights"][0] == {
        "type": "warning",
        "message": "You're over budget in Food & Dining by $10.00",
    }

    everything = (await client.get(
        "/api/analytics/expenses", headers=auth, params={"window": "all"},
    )).json()
    assert everything["total"] == 560.0


async def test_expense_analytics_excludes_recurring_on_request(client, auth):
    await client.post("/api/expenses", headers=auth, json={
        "title": "Gym", "amount": 30, "category": "health", "isRecurring": True,
    })
    await client.post("/api/expenses", headers=auth, json={
        "title": "Snack", "amount": 3, "category": "food",
    })
    body = (await client.get(
        "/api/analytics/expenses", headers=auth,
        params={"window": "week", "includeRecurring": "false"},
    )).json()
    assert body["total"] == 3.0


async def test_invalid_window_rejected(client, auth):
    res = await client.get(
        "/api/analytics/expenses", headers=auth, params={"window": "decade"},
    )
    assert res.status_code == 400


async def test_mood_analytics_streak_and_average(client, auth):
    today = utc_today()
    for days_ago, mood in ((0, 5), (1, 4), (1, 2), (3, 1)):
        await client.post("/api/moods", headers=auth, json={
            "mood": mood, "date": (today - timedelta(days=days_ago)).isoformat(),
        })
    body = (await client.get("/api/analytics/moods", headers=auth)).json()
    assert body["period"] == "weekly"
    assert body["count"] == 4
    assert body["average"] == 3.0
    assert body["streak"] == 2
    assert len(body["trend"]) == 4


async def test_goal_analytics_due_today_and_overdue(client, auth):
    today = utc_today()
    await client.post("/api/goals", headers=auth, json={
        "title": "Essay", "category": "academic", "targetValue": 1,
        "dueDate": today.isoformat(),
    })
    await client.post("/api/goals", headers=auth, json={
        "title": "Taxes", "category": "financial", "targetValue": 1,
        "dueDate": (today - timedelta(days=2)).isoformat(),
    })
    await client.post("/api/goals", headers=auth, json={
        "title": "Done", "category": "fitness", "targetValue": 1,
        "currentValue": 1, "completed": True,
        "dueDate": (today - timedelta(days=2)).isoformat(),
    })

    body = (await client.get("/api/analytics/goals", headers=auth)).json()
    assert body["period"] == "all"
    assert body["count"] == 3
    assert [g["title"] for g in body["dueToday"]] == ["Essay"]
    assert [g["title"] for g in body["overdue"]] == ["Taxes"]
    assert {"name": "Completed", "value": 1} in body["progress"]

    fitness = (await client.get(
        "/api/analytics/goals", headers=auth, params={"category": "fitness"},
    )).json()
    assert fitness["count"] == 1


async def test_analytics_routes_publish_typed_responses(client):
    schema = (await client.get("/openapi.json")).json()
    paths = schema["paths"]
    for path, model in (
        ("/api/analytics/expenses", "ExpenseSummary"),
        ("/api/analytics/moods", "MoodSummary"),
        ("/api/analytics/goals", "GoalSummary"),
    ):
        content = paths[path]["get"]["responses"]["200"]["content"]
        assert content["application/json"]["schema"]["$ref"].endswith(model)


async def test_analytics_payload_shapes(client, auth):
    today = utc_today()
    await client.post("/api/budgets", headers=auth, json={"category": "food", "amount": 100})
    await client.post("/api/expenses", headers=auth, json={
        "title": "Lunch", "amount": 12.5, "category": "food",
    })
    await client.post("/api/goals", headers=auth, json={
        "title": "Essay", "category": "academic", "targetValue": 4,
        "currentValue": 1, "dueDate": today.isoformat(),
    })

    expenses = (await client.get("/api/analytics/expenses", headers=auth)).json()
    assert set(expenses["budgetStatus"][0]) == {
        "id", "category", "name", "amount", "spent", "percentage",
        "remaining", "overBy", "isOverBudget",
    }
    assert expenses["monthlyTrend"][-1]["amount"] == 12.5

    goals = (await client.get("/api/analytics/goals", headers=auth)).json()
    essay = goals["dueToday"][0]
    assert essay["targetValue"] == 4.0
    assert essay["progress"] == 25
    assert goals["performance"] == [
        {"category": "Academic", "progress": 25, "fullMark": 100},
    ]
