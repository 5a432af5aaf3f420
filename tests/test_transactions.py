from datetime import date, timedelta


def make_tx(**overrides):
    body = {"date": "2024-05-03", "details": "Salary", "amount": 100, "type": "earn"}
    body.update(overrides)
    return body


def create(client, headers, **overrides):
    res = client.post("/api/v1/expense", json=make_tx(**overrides), headers=headers)
    assert res.status_code == 201, res.text
    return res.json()["id"]


def test_create_returns_id(client, alice):
    res = client.post("/api/v1/expense", json=make_tx(), headers=alice)
    assert res.status_code == 201
    body = res.json()
    assert body["message"] == "Expense recorded successfully"
    assert body["id"]


def test_create_rejects_unknown_type(client, alice):
    res = client.post("/api/v1/expense", json=make_tx(type="gift"), headers=alice)
    assert res.status_code == 400
    assert res.json() == {"message": 'Invalid type. Must be "earn" or "expense"'}
    assert client.get("/api/v1/expenses", headers=alice).json() == []


def test_create_rejects_negative_amount_and_missing_fields(client, alice):
    assert client.post("/api/v1/expense", json=make_tx(amount=-1), headers=alice).status_code == 400
    body = make_tx()
    del body["details"]
    assert client.post("/api/v1/expense", json=body, headers=alice).status_code == 400


def test_create_ignores_owner_in_body(client, alice, bob):
    body = make_tx()
    body["user"] = "00000000-0000-0000-0000-000000000000"
    res = client.post("/api/v1/expense", json=body, headers=bob)
    assert res.status_code == 201

    bob_items = client.get("/api/v1/expenses", headers=bob).json()
    assert len(bob_items) == 1
    assert bob_items[0]["user"] != body["user"]
    assert client.get("/api/v1/expenses", headers=alice).json() == []


def test_create_accepts_iso_timestamp(client, alice):
    create(client, alice, date="2024-05-03T18:30:00.000Z")
    items = client.get("/api/v1/expenses", headers=alice).json()
    assert items[0]["date"] == "2024-05-03"


def test_list_shape(client, alice):
    tx_id = create(client, alice, details="Rent", amount=40.5, type="expense")
    items = client.get("/api/v1/expenses", headers=alice).json()
    assert len(items) == 1
    item = items[0]
    assert set(item) == {"id", "user", "date", "details", "amount", "type"}
    assert item["id"] == tx_id
    assert item["details"] == "Rent"
    assert item["amount"] == 40.5
    assert item["type"] == "expense"


def test_list_caps_at_100_newest_first(client, alice):
    start = date(2023, 1, 1)
    for i in range(105):
        create(client, alice, date=(start + timedelta(days=i)).isoformat(), details=f"tx {i}")

    items = client.get("/api/v1/expenses", headers=alice).json()
    assert len(items) == 100
    dates = [item["date"] for item in items]
    assert dates == sorted(dates, reverse=True)
    assert dates[0] == (start + timedelta(days=104)).isoformat()
    assert dates[-1] == (start + timedelta(days=5)).isoformat()


def test_round_trip(client, alice):
    tx_id = create(client, alice)
    assert [item["id"] for item in client.get("/api/v1/expenses", headers=alice).json()] == [tx_id]

    res = client.patch(
        f"/api/v1/expense/{tx_id}",
        json={"date": "2024-05-04", "details": "Groceries", "amount": 12.5, "type": "expense"},
        headers=alice,
    )
    assert res.status_code == 200
    body = res.json()
    assert body["message"] == "Expense updated successfully"
    assert body["expense"]["details"] == "Groceries"

    item = client.get("/api/v1/expenses", headers=alice).json()[0]
    assert item["date"] == "2024-05-04"
    assert item["details"] == "Groceries"
    assert item["amount"] == 12.5
    assert item["type"] == "expense"

    res = client.delete(f"/api/v1/expense/{tx_id}", headers=alice)
    assert res.status_code == 200
    assert res.json() == {"message": "Expense deleted successfully"}
    assert client.get("/api/v1/expenses", headers=alice).json() == []


def test_update_keeps_omitted_fields(client, alice):
    tx_id = create(client, alice, details="Salary", amount=100)
    res = client.patch(f"/api/v1/expense/{tx_id}", json={"type": "expense"}, headers=alice)
    assert res.status_code == 200
    expense = res.json()["expense"]
    assert expense["details"] == "Salary"
    assert expense["amount"] == 100
    assert expense["type"] == "expense"


def test_update_with_invalid_type_leaves_store_unchanged(client, alice):
    tx_id = create(client, alice)
    before = client.get("/api/v1/expenses", headers=alice).json()

    res = client.patch(
        f"/api/v1/expense/{tx_id}",
        json={"details": "Changed", "amount": 1, "type": "gift"},
        headers=alice,
    )
    assert res.status_code == 400
    assert client.get("/api/v1/expenses", headers=alice).json() == before


def test_other_users_records_are_not_found(client, alice, bob):
    tx_id = create(client, alice)

    assert client.get("/api/v1/expenses", headers=bob).json() == []

    res = client.patch(f"/api/v1/expense/{tx_id}", json=make_tx(details="hijack"), headers=bob)
    assert res.status_code == 404
    assert res.json() == {"message": "Expense not found or not authorized"}

    res = client.delete(f"/api/v1/expense/{tx_id}", headers=bob)
    assert res.status_code == 404

    items = client.get("/api/v1/expenses", headers=alice).json()
    assert [(item["id"], item["details"]) for item in items] == [(tx_id, "Salary")]


def test_unknown_and_malformed_ids_are_not_found(client, alice):
    missing = "6b1f4f55-5d0b-4a8e-9a39-0f3b4a8e1f00"
    assert client.patch(f"/api/v1/expense/{missing}", json=make_tx(), headers=alice).status_code == 404
    assert client.delete(f"/api/v1/expense/{missing}", headers=alice).status_code == 404
    assert client.delete("/api/v1/expense/not-an-id", headers=alice).status_code == 404


def test_routes_require_token(client):
    assert client.post("/api/v1/expense", json=make_tx()).status_code == 401
    assert client.delete("/api/v1/expense/whatever").status_code == 401
    assert client.get("/api/v1/financial-summary").status_code == 401


def test_non_finite_amounts_are_rejected(client, alice):
    # json.loads turns 1e400 into inf
    body = '{"date": "2024-05-03", "details": "Salary", "amount": 1e400, "type": "earn"}'
    res = client.post(
        "/api/v1/expense",
        content=body,
        headers={**alice, "Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert client.get("/api/v1/expenses", headers=alice).json() == []

    tx_id = create(client, alice)
    res = client.patch(
        f"/api/v1/expense/{tx_id}",
        content='{"amount": 1e400, "type": "earn"}',
        headers={**alice, "Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert client.get("/api/v1/expenses", headers=alice).json()[0]["amount"] == 100

    summary = client.get("/api/v1/financial-summary", headers=alice).json()
    assert summary["totalEarn"] == 100


def test_long_details_are_kept_whole(client, alice):
    details = "groceries " * 100
    create(client, alice, details=details)
    assert client.get("/api/v1/expenses", headers=alice).json()[0]["details"] == details
