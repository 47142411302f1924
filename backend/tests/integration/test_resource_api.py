"""End-to-end tests of the resource endpoints through the ASGI app."""

import pytest


async def _create_journal(client, headers, **overrides):
    body = {"date": "2024-01-05", "title": "Attention is all you need", **overrides}
    response = await client.post("/api/v1/journals", json=body, headers=headers)
    assert response.status_code == 201
    return response.json()["data"]


# ── authentication ───────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_missing_token_returns_401_envelope(client):
    response = await client.get("/api/v1/daily-logs")

    assert response.status_code == 401
    assert response.json() == {"success": False, "error": "Authentication required"}
    assert response.headers["www-authenticate"] == "Bearer"


@pytest.mark.asyncio
async def test_tampered_token_returns_401(client, alice_headers):
    headers = {"Authorization": alice_headers["Authorization"] + "x"}

    response = await client.get("/api/v1/daily-logs", headers=headers)

    assert response.status_code == 401
    assert response.json()["error"] == "Invalid access token"


# ── create / read ────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_create_takes_owner_from_token(client, alice, alice_headers, bob):
    record = await _create_journal(client, alice_headers, user_id=bob)

    assert record["user_id"] == alice
    assert record["title"] == "Attention is all you need"


@pytest.mark.asyncio
async def test_create_message_uses_entity_label(client, alice_headers):
    response = await client.post(
        "/api/v1/books", json={"title": "Dune"}, headers=alice_headers
    )

    assert response.status_code == 201
    assert response.json()["message"] == "Book created successfully"
    assert response.json()["data"]["reading_sessions"] == []


@pytest.mark.asyncio
async def test_invalid_body_returns_422_envelope(client, alice_headers):
    response = await client.post(
        "/api/v1/daily-logs",
        json={"date": "2024-01-05", "day_score": 11},
        headers=alice_headers,
    )

    body = response.json()
    assert response.status_code == 422
    assert body["success"] is False
    assert body["error"].startswith("day_score:")


@pytest.mark.asyncio
async def test_duplicate_daily_log_returns_409(client, alice_headers):
    body = {"date": "2024-01-05", "main_focus": "Write"}
    first = await client.post("/api/v1/daily-logs", json=body, headers=alice_headers)
    second = await client.post("/api/v1/daily-logs", json=body, headers=alice_headers)

    assert first.status_code == 201
    assert second.status_code == 409
    assert second.json()["success"] is False


# ── per-day upsert ───────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_put_by_date_creates_then_updates_same_record(client, alice_headers):
    url = "/api/v1/daily-logs/date/2024-01-05"

    created = await client.put(url, json={"main_focus": "draft"}, headers=alice_headers)
    updated = await client.put(url, json={"main_focus": "x"}, headers=alice_headers)
    fetched = await client.get(url, headers=alice_headers)
    listed = await client.get("/api/v1/daily-logs", headers=alice_headers)

    assert created.status_code == 200
    assert updated.json()["message"] == "Daily log saved successfully"
    assert updated.json()["data"]["id"] == created.json()["data"]["id"]
    assert fetched.json()["data"]["main_focus"] == "x"
    assert fetched.json()["data"]["date"] == "2024-01-05"
    assert listed.json()["meta"]["total"] == 1


@pytest.mark.asyncio
async def test_get_by_missing_date_returns_404(client, alice_headers):
    response = await client.get("/api/v1/daily-logs/date/2024-02-01", headers=alice_headers)

    assert response.status_code == 404
    assert response.json()["success"] is False


@pytest.mark.asyncio
async def test_wellness_upsert_stores_overall_score(client, alice_headers):
    response = await client.put(
        "/api/v1/wellness/date/2024-01-05",
        json={"sleep_quality": 8, "mood_score": 6},
        headers=alice_headers,
    )

    assert response.status_code == 200
    assert response.json()["data"]["wellness_score"] == pytest.approx(7.0)


# ── listing ──────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_list_pages_through_owned_records(client, alice_headers, bob_headers):
    for i in range(25):
        await _create_journal(client, alice_headers, title=f"Paper {i}")
    await _create_journal(client, bob_headers, title="Someone else's paper")

    middle = await client.get(
        "/api/v1/journals", params={"page": 2, "limit": 10}, headers=alice_headers
    )
    response = await client.get(
        "/api/v1/journals", params={"page": 3, "limit": 10}, headers=alice_headers
    )

    body = response.json()
    assert response.status_code == 200
    assert len(middle.json()["data"]) == 10
    assert middle.json()["meta"]["totalPages"] == 3
    assert len(body["data"]) == 5
    assert body["meta"] == {"page": 3, "limit": 10, "total": 25, "totalPages": 3}


@pytest.mark.asyncio
async def test_list_search_and_filters(client, alice_headers):
    await _create_journal(client, alice_headers, title="Scaling laws", category="ml")
    await _create_journal(client, alice_headers, title="Monetary policy", category="econ")

    searched = await client.get(
        "/api/v1/journals", params={"search": "SCALING"}, headers=alice_headers
    )
    filtered = await client.get(
        "/api/v1/journals", params={"category": "econ"}, headers=alice_headers
    )

    assert [r["title"] for r in searched.json()["data"]] == ["Scaling laws"]
    assert [r["title"] for r in filtered.json()["data"]] == ["Monetary policy"]


@pytest.mark.asyncio
async def test_page_beyond_any_offset_returns_empty_page(client, alice_headers):
    await _create_journal(client, alice_headers)

    response = await client.get(
        "/api/v1/journals",
        params={"page": "100000000000000000000"},
        headers=alice_headers,
    )

    body = response.json()
    assert response.status_code == 200
    assert body["data"] == []
    assert body["meta"]["total"] == 1


@pytest.mark.asyncio
async def test_owner_filter_in_query_is_ignored(client, alice_headers, bob):
    await _create_journal(client, alice_headers)

    response = await client.get(
        "/api/v1/journals", params={"user_id": bob}, headers=alice_headers
    )

    assert response.json()["meta"]["total"] == 1


@pytest.mark.asyncio
async def test_invalid_start_date_returns_422(client, alice_headers):
    response = await client.get(
        "/api/v1/journals", params={"startDate": "not-a-date"}, headers=alice_headers
    )

    assert response.status_code == 422
    assert "startDate" in response.json()["error"]


# ── ownership ────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_other_users_record_is_not_found(client, alice_headers, bob_headers):
    record = await _create_journal(client, bob_headers, title="Private")
    url = f"/api/v1/journals/{record['id']}"

    read = await client.get(url, headers=alice_headers)
    write = await client.put(url, json={"title": "Hijacked"}, headers=alice_headers)
    remove = await client.delete(url, headers=alice_headers)
    after = await client.get(url, headers=bob_headers)

    assert read.status_code == 404
    assert write.status_code == 404
    assert remove.status_code == 404
    assert after.json()["data"]["title"] == "Private"


@pytest.mark.asyncio
async def test_update_then_delete(client, alice_headers):
    record = await _create_journal(client, alice_headers)
    url = f"/api/v1/journals/{record['id']}"

    updated = await client.put(url, json={"rating_usefulness": 9}, headers=alice_headers)
    deleted = await client.delete(url, headers=alice_headers)
    again = await client.delete(url, headers=alice_headers)
    missing = await client.get(url, headers=alice_headers)

    assert updated.json()["data"]["rating_usefulness"] == 9
    assert updated.json()["data"]["title"] == record["title"]
    assert deleted.json() == {
        "success": True,
        "data": None,
        "message": "Journal entry deleted successfully",
        "error": None,
        "meta": None,
    }
    assert missing.status_code == 404
    assert again.status_code == 404


# ── child collections ────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_workout_sets_are_added_and_removed_through_parent(
    client, alice_headers, bob_headers
):
    created = await client.post(
        "/api/v1/workouts",
        json={"date": "2024-01-05", "workout_type": "gym"},
        headers=alice_headers,
    )
    workout_id = created.json()["data"]["id"]

    added = await client.post(
        f"/api/v1/workouts/{workout_id}/sets",
        json={"exercise_name": "Squat", "reps": 5, "weight_kg": 100},
        headers=alice_headers,
    )
    foreign = await client.post(
        f"/api/v1/workouts/{workout_id}/sets",
        json={"exercise_name": "Bench"},
        headers=bob_headers,
    )
    workout = await client.get(f"/api/v1/workouts/{workout_id}", headers=alice_headers)
    set_id = added.json()["data"]["id"]
    removed = await client.delete(
        f"/api/v1/workouts/{workout_id}/sets/{set_id}", headers=alice_headers
    )
    after = await client.get(f"/api/v1/workouts/{workout_id}", headers=alice_headers)

    assert added.status_code == 201
    assert foreign.status_code == 404
    assert [s["exercise_name"] for s in workout.json()["data"]["sets"]] == ["Squat"]
    assert removed.status_code == 200
    assert after.json()["data"]["sets"] == []


# ── aggregations ─────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_goal_stats_route_is_not_shadowed_by_id_route(client, alice_headers):
    for status in ("achieved", "in_progress", "achieved", "dropped"):
        await client.post(
            "/api/v1/goals", json={"title": status, "status": status}, headers=alice_headers
        )

    response = await client.get("/api/v1/goals/stats", headers=alice_headers)

    data = response.json()["data"]
    assert response.status_code == 200
    assert data["total"] == 4
    assert data["achieved"] == 2
    assert data["successRate"] == pytest.approx(50.0)


@pytest.mark.asyncio
async def test_weekly_summary_covers_seven_days(client, alice_headers):
    for day, score in (("2024-01-01", 6), ("2024-01-07", 8), ("2024-01-08", 2)):
        await client.put(
            f"/api/v1/daily-logs/date/{day}", json={"day_score": score}, headers=alice_headers
        )

    response = await client.get(
        "/api/v1/daily-logs/weekly-summary",
        params={"startDate": "2024-01-01"},
        headers=alice_headers,
    )

    data = response.json()["data"]
    assert data["endDate"] == "2024-01-07"
    assert data["totalDays"] == 2
    assert data["averageDayScore"] == pytest.approx(7.0)


# ── profile ──────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_profile_read_and_update(client, alice_headers):
    read = await client.get("/api/v1/users/me", headers=alice_headers)
    updated = await client.patch(
        "/api/v1/users/me", json={"timezone": "Europe/Berlin"}, headers=alice_headers
    )

    assert read.json()["data"]["email"] == "alice@example.com"
    assert "password_hash" not in read.json()["data"]
    assert updated.json()["data"]["timezone"] == "Europe/Berlin"
    assert updated.json()["data"]["name"] == "Alice"


@pytest.mark.asyncio
async def test_profile_of_unknown_user_is_404(client, auth_for):
    response = await client.get(
        "/api/v1/users/me", headers=auth_for("00000000-0000-0000-0000-0000000000ff")
    )

    assert response.status_code == 404
