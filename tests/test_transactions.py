def test_create_returns_row_joined_with_category(user_client, make_category, make_transaction):
    cat = make_category()
    txn = make_transaction(categoryId=cat["id"], amount=1200, description="March rent")
    assert txn["amount"] == "1200.00"
    assert txn["type"] == "expense"
    assert txn["date"] == "2024-03-01T00:00:00"
    assert txn["category"]["name"] == "Rent"
    assert txn["description"] == "March rent"


def test_amount_is_kept_as_exact_cents(make_transaction):
    txn = make_transaction(amount=0.1)
    assert txn["amount"] == "0.10"
    txn = make_transaction(amount="19.999")
    assert txn["amount"] == "20.00"


def test_create_without_category(make_transaction):
    txn = make_transaction()
    assert txn["categoryId"] is None
    assert txn["category"] is None


def test_create_validation(user_client):
    bad_bodies = [
        {"amount": 0, "type": "expense", "date": "2024-03-01"},
        {"amount": -5, "type": "expense", "date": "2024-03-01"},
        {"amount": 5, "type": "transfer", "date": "2024-03-01"},
        {"amount": 5, "type": "expense", "date": "not-a-date"},
        {"amount": 5, "type": "expense"},
        {"amount": 5, "type": "expense", "date": "2024-03-01", "description": "x" * 256},
    ]
    for body in bad_bodies:
        resp = user_client.post("/api/v1/transactions", json=body)
        assert resp.status_code == 400, body
        assert "error" in resp.get_json()


def test_cannot_use_another_users_category(user_client, other_client, make_category):
    foreign = make_category(client=other_client, name="Theirs")
    resp = user_client.post(
        "/api/v1/transactions",
        json={"amount": 5, "type": "expense", "date": "2024-03-01", "categoryId": foreign["id"]},
    )
    assert resp.status_code == 404


def test_list_is_paginated_and_newest_first(user_client, make_transaction):
    for day in range(1, 6):
        make_transaction(date=f"2024-03-0{day}", description=f"day {day}")

    resp = user_client.get("/api/v1/transactions?limit=2")
    body = resp.get_json()
    assert resp.status_code == 200
    assert [t["description"] for t in body["data"]] == ["day 5", "day 4"]
    assert body["pagination"] == {"total": 5, "limit": 2, "offset": 0, "hasMore": True}

    last = user_client.get("/api/v1/transactions?limit=2&offset=4").get_json()
    assert [t["description"] for t in last["data"]] == ["day 1"]
    assert last["pagination"]["hasMore"] is False


def test_same_day_ties_break_on_creation_order(user_client, make_transaction):
    first = make_transaction(description="first")
    second = make_transaction(description="second")
    data = user_client.get("/api/v1/transactions").get_json()["data"]
    assert [t["id"] for t in data] == [second["id"], first["id"]]


def test_limit_is_capped(app, user_client, make_transaction):
    make_transaction()
    body = user_client.get("/api/v1/transactions?limit=5000").get_json()
    assert body["pagination"]["limit"] == app.config["TRANSACTIONS_MAX_LIMIT"]


def test_filters_combine_with_and(user_client, make_category, make_transaction):
    food = make_category(name="Food", allocationBucket="needs")
    make_transaction(categoryId=food["id"], amount=20, date="2024-03-05", description="Corner store")
    make_transaction(categoryId=food["id"], amount=80, date="2024-03-20", description="Weekly shop")
    make_transaction(amount=3000, type="income", date="2024-03-25", description="Salary")
    make_transaction(amount=15, date="2024-04-02", description="April snack")

    def descriptions(qs):
        resp = user_client.get(f"/api/v1/transactions?{qs}")
        assert resp.status_code == 200, resp.get_json()
        return sorted(t["description"] for t in resp.get_json()["data"])

    assert descriptions("startDate=2024-03-01&endDate=2024-03-31") == [
        "Corner store", "Salary", "Weekly shop",
    ]
    # endDate includes the whole day
    assert descriptions("startDate=2024-03-20&endDate=2024-03-20") == ["Weekly shop"]
    assert descriptions("type=income") == ["Salary"]
    assert descriptions(f"categoryId={food['id']}&minAmount=50") == ["Weekly shop"]
    assert descriptions("maxAmount=20") == ["April snack", "Corner store"]
    assert descriptions("search=SHOP") == ["Weekly shop"]


def test_bad_query_params_are_rejected(user_client):
    assert user_client.get("/api/v1/transactions?limit=0").status_code == 400
    assert user_client.get("/api/v1/transactions?offset=-1").status_code == 400
    assert user_client.get("/api/v1/transactions?startDate=2024-13-01").status_code == 400
    assert user_client.get("/api/v1/transactions?startDate=2024-04-01&endDate=2024-03-01").status_code == 400


def test_partial_update(user_client, make_transaction):
    txn = make_transaction(amount=10, description="coffee")
    resp = user_client.patch(f"/api/v1/transactions/{txn['id']}", json={"amount": 12.5})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["amount"] == "12.50"
    assert body["description"] == "coffee"
    assert body["date"] == txn["date"]


def test_non_positive_amount_update_leaves_row_unchanged(user_client, make_transaction):
    txn = make_transaction(amount=10)
    for amount in (0, -1):
        resp = user_client.patch(f"/api/v1/transactions/{txn['id']}", json={"amount": amount})
        assert resp.status_code == 400
    assert user_client.get(f"/api/v1/transactions/{txn['id']}").get_json()["amount"] == "10.00"


def test_amount_rounding_to_zero_is_rejected(user_client, make_transaction):
    for amount in (0.001, "0.004"):
        resp = user_client.post(
            "/api/v1/transactions", json={"amount": amount, "type": "expense", "date": "2024-03-01"}
        )
        assert resp.status_code == 400, amount
        assert "Amount must be positive" in resp.get_json()["error"]

    txn = make_transaction(amount=10)
    resp = user_client.patch(f"/api/v1/transactions/{txn['id']}", json={"amount": 0.004})
    assert resp.status_code == 400
    assert user_client.get(f"/api/v1/transactions/{txn['id']}").get_json()["amount"] == "10.00"


def test_amount_rounding_past_the_column_limit_is_rejected(user_client):
    resp = user_client.post(
        "/api/v1/transactions", json={"amount": "99999999.995", "type": "expense", "date": "2024-03-01"}
    )
    assert resp.status_code == 400


def test_update_can_detach_category(user_client, make_category, make_transaction):
    cat = make_category()
    txn = make_transaction(categoryId=cat["id"])
    body = user_client.patch(f"/api/v1/transactions/{txn['id']}", json={"categoryId": None}).get_json()
    assert body["categoryId"] is None
    assert body["category"] is None


def test_update_and_delete_are_owner_scoped(user_client, other_client, make_transaction):
    txn = make_transaction()
    assert other_client.get(f"/api/v1/transactions/{txn['id']}").status_code == 404
    assert other_client.patch(f"/api/v1/transactions/{txn['id']}", json={"amount": 1}).status_code == 404
    assert other_client.delete(f"/api/v1/transactions/{txn['id']}").status_code == 404
    assert other_client.get("/api/v1/transactions").get_json()["pagination"]["total"] == 0


def test_delete(user_client, make_transaction):
    txn = make_transaction()
    resp = user_client.delete(f"/api/v1/transactions/{txn['id']}")
    assert resp.get_json() == {"message": "Transaction deleted successfully"}
    assert user_client.get(f"/api/v1/transactions/{txn['id']}").status_code == 404


def test_csv_export(user_client, make_category, make_transaction):
    cat = make_category()
    make_transaction(categoryId=cat["id"], amount=1200, description="Rent")
    make_transaction(amount=4.5, date="2024-04-01")

    resp = user_client.get("/api/v1/transactions/export.csv?startDate=2024-03-01&endDate=2024-03-31")
    assert resp.status_code == 200
    assert resp.headers["Content-Type"].startswith("text/csv")
    lines = resp.get_data(as_text=True).strip().splitlines()
    assert lines[0] == "Date,Type,Category,Amount,Description"
    assert lines[1:] == ["2024-03-01,expense,Rent,1200.00,Rent"]
