import logging


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_profile_defaults_and_update(client):
    profile = client.get("/profile/").json()
    assert profile["username"] == "Dreamer"
    assert profile["isPremium"] is False

    response = client.patch("/profile/", json={"username": "Luna", "isPremium": True})
    assert response.status_code == 200
    assert response.json()["username"] == "Luna"
    assert client.patch("/profile/", json={"username": ""}).status_code == 422
    assert client.patch("/profile/", json={"username": "   "}).status_code == 400


def test_books_flow(client):
    books = client.get("/books/").json()
    assert len(books) == 3
    book = next(b for b in books if b["id"] == "success-virus")
    assert book["isPurchased"] is False
    assert book["coverUrl"].startswith("https://")
    assert [p["pageNumber"] for p in book["pages"]] == [1, 2, 3]

    assert client.put("/books/success-virus/progress", json={"progress": 10}).status_code == 400

    purchased = client.post("/books/success-virus/purchase")
    assert purchased.status_code == 200
    assert purchased.json()["isPurchased"] is True
    assert client.post("/books/success-virus/purchase").status_code == 400
    assert client.get("/books/purchase-status").json() == {"hasRecentPurchase": True}

    other = client.get("/books/manifestation-mastery").json()
    assert other["effectivePrice"] < other["price"]

    page = client.put("/books/success-virus/page", json={"pageIndex": 2}).json()
    assert page["readingProgress"] == 100
    assert page["currentPageIndex"] == 2

    assert client.put("/books/success-virus/progress", json={"progress": 150}).status_code == 422
    assert client.get("/books/missing").status_code == 404
    assert client.post("/books/missing/purchase").status_code == 404


def test_community_flow(client):
    shared = client.post(
        "/community/",
        json={"intention": "Abundance", "category": "abundance", "color": "#FFD700", "rarity": "epic"},
    )
    assert shared.status_code == 201
    post = shared.json()
    assert post["username"] == "Dreamer"
    assert post["likedByUser"] is False

    received = client.post(
        "/community/received",
        json={
            "username": "Sol",
            "intention": "Health",
            "category": "health",
            "color": "#00CED1",
            "rarity": "rare",
            "likes": 5,
            "sharedAt": "2020-01-01T00:00:00",
        },
    )
    assert received.status_code == 201

    feed = client.get("/community/").json()
    assert [p["id"] for p in feed] == [post["id"], received.json()["id"]]
    assert [p["id"] for p in client.get("/community/mine").json()] == [post["id"]]

    liked = client.post(f"/community/{post['id']}/like").json()
    assert liked["likes"] == 1 and liked["likedByUser"] is True
    unliked = client.post(f"/community/{post['id']}/like").json()
    assert unliked["likes"] == 0 and unliked["likedByUser"] is False

    assert client.post("/community/missing/like").status_code == 404
    bad = client.post(
        "/community/",
        json={"intention": "x", "category": "fame", "color": "#fff", "rarity": "epic"},
    )
    assert bad.status_code == 422
    negative = client.post(
        "/community/received",
        json={"username": "Sol", "intention": "x", "category": "love", "color": "#fff", "rarity": "rare", "likes": -1},
    )
    assert negative.status_code == 422


def test_received_offset_timestamp_stored_as_utc(client):
    received = client.post(
        "/community/received",
        json={
            "username": "Sol",
            "intention": "Calm mornings",
            "category": "peace",
            "color": "#98FB98",
            "rarity": "rare",
            "sharedAt": "2024-03-04T12:00:00+05:00",
        },
    )
    assert received.status_code == 201
    assert received.json()["sharedAt"] == "2024-03-04T07:00:00"

    feed = client.get("/community/").json()
    post = next(p for p in feed if p["id"] == received.json()["id"])
    assert post["sharedAt"] == "2024-03-04T07:00:00"


def test_weekly_manifestations(client):
    state = client.get("/weekly-manifestations/").json()
    assert len(state["manifestations"]) == 1
    assert state["extraSlots"] == 0
    assert state["lastGeneratedWeek"] == state["manifestations"][0]["weekStart"]

    state = client.post("/weekly-manifestations/extra-slots", json={"count": 2}).json()
    assert len(state["manifestations"]) == 3
    assert state["extraSlots"] == 2
    assert client.post("/weekly-manifestations/extra-slots", json={"count": 0}).status_code == 422

    manifestation_id = state["manifestations"][0]["id"]
    used = client.post(f"/weekly-manifestations/{manifestation_id}/use").json()
    assert used["used"] is True
    assert client.post("/weekly-manifestations/missing/use").status_code == 404

    regenerated = client.post("/weekly-manifestations/regenerate").json()
    assert len(regenerated["manifestations"]) == 3
    assert all(not m["used"] for m in regenerated["manifestations"])


def test_inventory_and_seeds(client):
    item = client.post(
        "/inventory/", json={"intention": "Joy", "category": "love", "stage": "blooming"}
    ).json()
    assert item["color"] == "#FF69B4"
    client.post("/inventory/", json={"intention": "Calm", "category": "peace", "stage": "sprout"})

    assert client.get("/inventory/stats").json() == {"totalSeeds": 2, "bloomingSeeds": 1}
    assert len(client.get("/inventory/", params={"stage": "blooming"}).json()) == 1
    assert client.get("/inventory/", params={"stage": "wilted"}).status_code == 422
    assert client.post(
        "/inventory/", json={"intention": "x", "category": "love", "stage": "wilted"}
    ).status_code == 422

    assert client.delete(f"/inventory/{item['id']}").status_code == 204
    assert client.delete(f"/inventory/{item['id']}").status_code == 404

    seed = client.post("/seeds/", json={"rarity": "legendary"}).json()
    assert seed["rarity"] == "legendary"
    rolled = client.post("/seeds/", json={}).json()
    assert rolled["rarity"] in {"common", "rare", "epic", "legendary"}
    counts = client.get("/seeds/counts").json()
    assert counts["total"] == 2
    assert set(counts["counts"]) == {"common", "rare", "epic", "legendary"}
    assert client.post("/seeds/", json={"rarity": "mythic"}).status_code == 422
    assert client.delete(f"/seeds/{seed['id']}").status_code == 204


def test_journal_flow(client):
    assert client.get("/journal/today").json() is None

    created = client.post(
        "/journal/",
        json={"date": "2024-03-04", "gratitude": ["sun", " "], "thoughts": "Nice", "mood": "good"},
    )
    assert created.status_code == 201
    entry = created.json()
    assert entry["gratitude"] == ["sun"]
    assert "createdAt" in entry

    updated = client.patch(f"/journal/{entry['id']}", json={"mood": "amazing"}).json()
    assert updated["mood"] == "amazing"
    assert updated["thoughts"] == "Nice"

    assert client.post(
        "/journal/", json={"date": "2024-03-04", "mood": "ecstatic"}
    ).status_code == 422
    assert [e["id"] for e in client.get("/journal/").json()] == [entry["id"]]
    assert client.delete(f"/journal/{entry['id']}").status_code == 204
    assert client.get(f"/journal/{entry['id']}").status_code == 404


def test_quests_flow(client):
    quests = client.get("/quests/").json()
    assert len(quests) == 3
    for quest in quests:
        assert quest["currentValue"] == 0
        assert "gems" in quest["reward"]

    quest_type = quests[0]["type"]
    progressed = client.post("/quests/progress", json={"type": quest_type, "amount": 50}).json()
    for quest in progressed:
        if quest["type"] == quest_type:
            assert quest["completed"] is True
            assert quest["currentValue"] == quest["targetValue"]

    summary = client.get("/quests/summary").json()
    assert summary["total"] == 3
    assert summary["completed"] >= 1
    assert len(client.get("/quests/active").json()) == 3 - summary["completed"]

    assert client.post("/quests/progress", json={"type": "meditate"}).status_code == 422
    assert client.post("/quests/progress", json={"type": quest_type, "amount": 0}).status_code == 422
    assert len(client.post("/quests/refresh").json()) == 3


def test_rankings_flow(client):
    board = client.post(
        "/rankings/seeds", json={"id": "ann", "username": "Ann", "totalSeeds": 5, "bloomingSeeds": 3}
    ).json()
    assert board == [
        {"id": "ann", "username": "Ann", "score": 3.0, "rank": 1, "totalSeeds": 5, "bloomingSeeds": 3}
    ]
    assert client.post(
        "/rankings/seeds", json={"id": "bo", "username": "Bo", "totalSeeds": 1, "bloomingSeeds": 3}
    ).status_code == 422
    assert client.post(
        "/rankings/seeds", json={"id": "user", "username": "Me", "totalSeeds": 1, "bloomingSeeds": 1}
    ).status_code == 400

    assert client.get("/rankings/seeds/me").json() == {"board": "seeds", "rank": 0}
    client.post("/inventory/", json={"intention": "Joy", "category": "love", "stage": "blooming"})
    refreshed = client.post("/rankings/seeds/refresh").json()
    assert [r["id"] for r in refreshed] == ["ann", "user"]
    assert client.get("/rankings/seeds/me").json()["rank"] == 2

    profile = client.post("/rankings/check-in").json()
    assert profile["currentStreak"] == 1
    assert profile["longestStreak"] == 1
    streaks = client.get("/rankings/streaks").json()
    assert streaks[0]["id"] == "user"
    assert client.get("/rankings/streaks/me").json()["rank"] == 1

    assert client.post(
        "/rankings/streaks", json={"id": "sol", "username": "Sol", "currentStreak": 4, "longestStreak": 2}
    ).status_code == 422
    assert client.get("/rankings/gems/me").status_code == 404


def test_rejected_requests_are_logged(client, caplog):
    caplog.set_level(logging.WARNING)
    client.post("/books/success-virus/purchase")
    assert client.post("/books/success-virus/purchase").status_code == 400
    assert client.get("/rankings/gems/me").status_code == 404

    warnings = [(r.name, r.getMessage()) for r in caplog.records if r.levelno == logging.WARNING]
    assert any(
        name == "manifest_garden.api.routes" and message.startswith("Rejected purchase of book success-virus")
        for name, message in warnings
    )
    assert any(
        name == "manifest_garden.api.ranking_routes" and "gems" in message for name, message in warnings
    )
