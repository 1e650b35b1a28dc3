from datetime import date, datetime, timedelta

import pytest


def _today_at(hour):
    return datetime.combine(date.today(), datetime.min.time()).replace(hour=hour).isoformat()


def test_health(client):
    assert client.get("/").json() == {"status": "API is running"}


def test_transaction_crud(client):
    base = "/users/alice/transactions/"
    created = client.post(base, json={
        "amount": 42.5, "description": "Lunch", "category": "Food",
        "type": "expense", "date": "2024-01-02T12:00:00",
    })
    assert created.status_code == 200
    txn = created.json()
    assert txn["user_id"] == "alice"
    assert txn["type"] == "expense"

    client.post(base, json={
        "amount": 10, "category": "Food", "type": "expense", "date": "2024-01-05T12:00:00",
    })
    listed = client.get(base).json()
    assert [t["date"][:10] for t in listed] == ["2024-01-05", "2024-01-02"]

    updated = client.put(f"{base}{txn['id']}", json={"amount": 50})
    assert updated.status_code == 200
    assert updated.json()["amount"] == 50
    assert updated.json()["description"] == "Lunch"

    assert client.delete(f"{base}{txn['id']}").status_code == 200
    assert client.delete(f"{base}{txn['id']}").status_code == 404
    assert len(client.get(base).json()) == 1


def test_transactions_are_scoped_to_owner(client):
    created = client.post("/users/bob/transactions/", json={
        "amount": 5, "category": "Food", "type": "expense", "date": "2024-01-02T12:00:00",
    }).json()

    assert client.get("/users/carol/transactions/").json() == []
    assert client.put(f"/users/carol/transactions/{created['id']}", json={"amount": 1}).status_code == 404
    assert client.delete(f"/users/carol/transactions/{created['id']}").status_code == 404


def test_transaction_validation(client):
    response = client.post("/users/dave/transactions/", json={
        "amount": -5, "category": "Food", "type": "expense", "date": "2024-01-02T12:00:00",
    })
    assert response.status_code == 422


def test_categories(client):
    base = "/users/erin/categories/"
    first = client.post(base, json={"name": "Food"}).json()
    second = client.post(base, json={"name": "Bills", "color": "#000000", "type": "expense"}).json()

    assert first["color"] == "#ef4444"
    assert second["color"] == "#000000"
    assert client.post(base, json={"name": "Food"}).status_code == 400
    assert [c["name"] for c in client.get(base).json()] == ["Bills", "Food"]

    assert client.delete(f"{base}{first['id']}").status_code == 200
    assert client.delete(f"{base}{first['id']}").status_code == 404


def test_budgets_with_progress(client):
    user = "frank"
    client.post(f"/users/{user}/transactions/", json={
        "amount": 75, "category": "Dining", "type": "expense", "date": _today_at(9),
    })
    budget = client.post(f"/users/{user}/budgets/", json={
        "category": "Dining", "amount": 50, "period": "monthly",
    }).json()
    assert budget["period"] == "monthly"

    listed = client.get(f"/users/{user}/budgets/").json()
    assert len(listed) == 1
    assert listed[0]["spent"] == 75
    assert listed[0]["remaining"] == -25
    assert listed[0]["is_over_budget"] is True

    updated = client.put(f"/users/{user}/budgets/{budget['id']}", json={"amount": 100}).json()
    assert updated["amount"] == 100
    assert client.get(f"/users/{user}/budgets/").json()[0]["is_over_budget"] is False

    assert client.put(f"/users/{user}/budgets/missing", json={"amount": 1}).status_code == 404
    assert client.delete(f"/users/{user}/budgets/{budget['id']}").status_code == 200


def test_goals_with_progress(client):
    base = "/users/gina/goals/"
    target = (date.today() + timedelta(days=30)).isoformat()
    goal = client.post(base, json={"title": "Emergency fund", "target_amount": 1000, "target_date": target}).json()
    assert goal["current_amount"] == 0

    progressed = client.post(f"{base}{goal['id']}/progress", json={"current_amount": 400})
    assert progressed.status_code == 200
    assert progressed.json()["progress_percent"] == 40.0
    assert progressed.json()["days_left"] == 30

    listed = client.get(base).json()
    assert listed[0]["remaining"] == 600
    assert listed[0]["is_completed"] is False

    renamed = client.put(f"{base}{goal['id']}", json={"title": "Rainy day"}).json()
    assert renamed["title"] == "Rainy day"

    assert client.post(f"{base}missing/progress", json={"current_amount": 1}).status_code == 404
    assert client.delete(f"{base}{goal['id']}").status_code == 200
    assert client.get(base).json() == []


def test_user_insights_use_stored_transactions(client):
    user = "hana"
    for payload in [
        {"amount": 1000, "category": "Salary", "type": "income", "date": _today_at(8)},
        {"amount": 250, "category": "Food", "type": "expense", "date": _today_at(12)},
        {"amount": 50, "category": "Transit", "type": "expense", "date": _today_at(18)},
    ]:
        client.post(f"/users/{user}/transactions/", json=payload)

    response = client.get(f"/users/{user}/insights", params={"timeframe": "month"})
    assert response.status_code == 200

    data = response.json()
    assert data["summary"]["topExpenseCategory"] == "Food"
    assert data["summary"]["savingsRate"] == "70.0"
    assert data["insights"][0]["description"] == \
        "Your highest expense category is Food with $250.00 spent this month."


def test_user_insights_without_transactions(client):
    data = client.get("/users/nobody/insights").json()
    assert data["insights"] == []
    assert data["summary"]["savingsRate"] == "0"


def test_analytics(client):
    assert client.get("/users/nobody/analytics/").json() is None

    user = "ivan"
    client.post(f"/users/{user}/transactions/", json={
        "amount": 30, "category": "Books", "type": "expense", "date": _today_at(10),
    })
    data = client.get(f"/users/{user}/analytics/").json()
    assert data["comparison"]["current_month"]["expenses"] == 30
    assert data["category_breakdown"] == [{"name": "Books", "value": 30}]
    assert data["daily_spending"][-1]["expenses"] == 30


@pytest.mark.parametrize("amount", ["inf", "-inf", "nan"])
def test_non_finite_amounts_are_rejected(client, amount):
    response = client.post("/users/dave/transactions/", json={
        "amount": amount, "category": "Food", "type": "expense", "date": "2024-01-02T12:00:00",
    })
    assert response.status_code == 422

    response = client.post("/users/dave/budgets/", json={"category": "Food", "amount": amount})
    assert response.status_code == 422


def test_updates_validate_amounts(client):
    txn = client.post("/users/fiona/transactions/", json={
        "amount": 20, "category": "Food", "type": "expense", "date": "2024-01-02T12:00:00",
    }).json()
    budget = client.post("/users/fiona/budgets/", json={"category": "Food", "amount": 100}).json()

    assert client.put(f"/users/fiona/transactions/{txn['id']}", json={"amount": -1}).status_code == 422
    assert client.put(f"/users/fiona/transactions/{txn['id']}", json={"amount": "inf"}).status_code == 422
    assert client.put(f"/users/fiona/budgets/{budget['id']}", json={"amount": -1}).status_code == 422

    assert client.get("/users/fiona/transactions/").json()[0]["amount"] == 20
    assert client.get("/users/fiona/budgets/").json()[0]["amount"] == 100


def test_dates_keep_local_wall_time(client):
    created = client.post("/users/greta/transactions/", json={
        "amount": 5, "category": "Food", "type": "expense", "date": "2024-01-02T23:30:00-05:00",
    }).json()
    assert created["date"] == "2024-01-02T23:30:00"

    updated = client.put(f"/users/greta/transactions/{created['id']}", json={
        "date": "2024-01-03T01:00:00+09:00",
    }).json()
    assert updated["date"] == "2024-01-03T01:00:00"


def test_transactions_filter_by_type(client):
    base = "/users/hank/transactions/"
    client.post(base, json={"amount": 900, "category": "Salary", "type": "income", "date": "2024-01-01T09:00:00"})
    client.post(base, json={"amount": 40, "category": "Food", "type": "expense", "date": "2024-01-02T09:00:00"})
    client.post(base, json={"amount": 60, "category": "Fuel", "type": "expense", "date": "2024-01-03T09:00:00"})

    assert len(client.get(base).json()) == 3
    assert [t["category"] for t in client.get(base, params={"type": "expense"}).json()] == ["Fuel", "Food"]
    assert [t["category"] for t in client.get(base, params={"type": "income"}).json()] == ["Salary"]
    assert client.get(base, params={"type": "transfer"}).status_code == 422


def test_export_and_delete_account(client):
    user = "judy"
    client.post(f"/users/{user}/transactions/", json={
        "amount": 12, "category": "Food", "type": "expense", "date": "2024-01-02T12:00:00",
    })
    client.post(f"/users/{user}/budgets/", json={"category": "Food", "amount": 200})
    client.post(f"/users/{user}/goals/", json={
        "title": "Bike", "target_amount": 500, "target_date": "2030-01-01",
    })
    client.post("/users/kate/transactions/", json={
        "amount": 1, "category": "Food", "type": "expense", "date": "2024-01-02T12:00:00",
    })

    exported = client.get(f"/users/{user}/export").json()
    assert set(exported) == {"transactions", "budgets", "goals", "exportDate"}
    assert [t["amount"] for t in exported["transactions"]] == [12]
    assert exported["budgets"][0]["category"] == "Food"
    assert exported["goals"][0]["title"] == "Bike"
    assert exported["transactions"][0]["user_id"] == user

    response = client.delete(f"/users/{user}")
    assert response.status_code == 200
    assert response.json()["deleted"] == {"transactions": 1, "budgets": 1, "goals": 1}

    emptied = client.get(f"/users/{user}/export").json()
    assert emptied["transactions"] == emptied["budgets"] == emptied["goals"] == []
    assert len(client.get("/users/kate/transactions/").json()) == 1


def test_delete_account_without_data(client):
    response = client.delete("/users/nobody")
    assert response.status_code == 200
    assert response.json()["deleted"] == {"transactions": 0, "budgets": 0, "goals": 0}


def test_dashboard(client):
    assert client.get("/users/nobody/analytics/dashboard").json()["monthly_balance"] == 0

    user = "liam"
    client.post(f"/users/{user}/transactions/", json={
        "amount": 100, "category": "Salary", "type": "income", "date": _today_at(9),
    })
    client.post(f"/users/{user}/transactions/", json={
        "amount": 30, "category": "Food", "type": "expense", "date": _today_at(12),
    })
    data = client.get(f"/users/{user}/analytics/dashboard").json()
    assert data["monthly_income"] == 100
    assert data["monthly_expenses"] == 30
    assert data["monthly_balance"] == 70
    assert len(data["last_7_days"]) == 7
    assert data["last_7_days"][-1]["income"] == 100
    assert data["last_7_days"][-1]["expenses"] == 30
