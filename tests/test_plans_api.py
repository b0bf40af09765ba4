"""API tests for saved plans and the theme preference (fakeredis-backed)."""


def _save(client, plan_type="meal", title=None, data=None):
    body = {"type": plan_type, "data": data if data is not None else {"days": []}}
    if title is not None:
        body["title"] = title
    return client.post("/plans", json=body)


def test_list_starts_empty(client):
    response = client.get("/plans")

    assert response.status_code == 200
    assert response.json() == {"plans": []}


def test_save_and_list_in_insertion_order(client):
    first = _save(client, "workout", data={"days": [{"day": 1}]})
    second = _save(client, "meal", title="Cut week 1")

    assert first.status_code == 201
    assert first.json()["index"] == 0
    assert first.json()["title"] == "Workout Plan"
    assert second.json()["index"] == 1

    plans = client.get("/plans").json()["plans"]
    assert [p["title"] for p in plans] == ["Workout Plan", "Cut week 1"]
    assert [p["index"] for p in plans] == [0, 1]
    assert plans[0]["data"] == {"days": [{"day": 1}]}
    assert isinstance(plans[0]["created"], int)


def test_default_meal_title(client):
    assert _save(client, "meal").json()["title"] == "Meal Plan"


def test_invalid_plan_type_rejected(client):
    response = client.post("/plans", json={"type": "yoga", "data": {}})

    assert response.status_code == 422


def test_get_and_export(client):
    _save(client, "meal", title="Bulk", data={"days": [{"label": "Mon"}]})

    record = client.get("/plans/0").json()
    assert record["title"] == "Bulk"

    export = client.get("/plans/0/export")
    assert export.status_code == 200
    assert export.headers["content-type"].startswith("application/json")
    assert 'filename="Bulk.json"' in export.headers["content-disposition"]
    assert export.json()["data"] == {"days": [{"label": "Mon"}]}


def test_delete_shifts_later_plans(client):
    _save(client, "meal", title="A")
    _save(client, "meal", title="B")
    _save(client, "meal", title="C")

    deleted = client.delete("/plans/1")

    assert deleted.status_code == 200
    assert deleted.json()["title"] == "B"
    assert [p["title"] for p in client.get("/plans").json()["plans"]] == ["A", "C"]


def test_missing_plan_is_404(client):
    response = client.get("/plans/3")

    assert response.status_code == 404
    assert response.json()["error"] == "Saved plan not found"
    assert client.delete("/plans/0").status_code == 404


def test_theme_defaults_to_dark(client):
    assert client.get("/plans/theme").json() == {"theme": "dark"}


def test_theme_set_and_toggle(client):
    assert client.put("/plans/theme", json={"theme": "light"}).json() == {"theme": "light"}
    assert client.get("/plans/theme").json() == {"theme": "light"}
    assert client.post("/plans/theme/toggle").json() == {"theme": "dark"}
    assert client.post("/plans/theme/toggle").json() == {"theme": "light"}


def test_invalid_theme_rejected(client):
    assert client.put("/plans/theme", json={"theme": "sepia"}).status_code == 422


def test_export_non_latin_title(client):
    _save(client, "meal", title="Plan été 💪")

    export = client.get("/plans/0/export")

    assert export.status_code == 200
    disposition = export.headers["content-disposition"]
    assert 'filename="Plan _t_ _.json"' in disposition
    assert "filename*=UTF-8''Plan%20%C3%A9t%C3%A9%20%F0%9F%92%AA.json" in disposition
    assert export.json()["title"] == "Plan été 💪"


def test_export_title_with_quotes(client):
    _save(client, "workout", title='My "cut" / week')

    disposition = client.get("/plans/0/export").headers["content-disposition"]

    assert 'filename="My _cut_ _ week.json"' in disposition


def test_store_outage_is_503(offline_client):
    response = offline_client.get("/plans")

    assert response.status_code == 503
    body = response.json()
    assert body["error"] == "Plan store unavailable"
    assert body["detail"]


def test_save_during_outage_is_503(offline_client):
    assert _save(offline_client, "meal").status_code == 503
    assert offline_client.get("/plans/theme").status_code == 503


def test_redis_health_reports_outage(offline_client):
    data = offline_client.get("/health/redis").json()

    assert data["status"] == "unhealthy"
    assert data["redis_connected"] is False
