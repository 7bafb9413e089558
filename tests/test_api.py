"""HTTP-level tests for auth, trips, photos and album suggestions."""

from conftest import register

API = "/api/v1"


def create_trip(client, headers, title="Kyoto") -> int:
    r = client.post(f"{API}/trips", json={"title": title, "start_date": "2024-03-04"}, headers=headers)
    assert r.status_code == 201, r.text
    return r.json()["id"]


def add_photos(client, headers, trip_id, photos) -> list[int]:
    r = client.post(f"{API}/trips/{trip_id}/photos", json={"photos": photos}, headers=headers)
    assert r.status_code == 201, r.text
    return [p["id"] for p in r.json()["photos"]]


def test_health(client):
    r = client.get(f"{API}/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_register_login_and_duplicate(client):
    register(client, "aiko")

    r = client.post(f"{API}/auth/register", json={"username": "aiko", "password": "correct-horse"})
    assert r.status_code == 409

    r = client.post(f"{API}/auth/login", json={"username": "aiko", "password": "correct-horse"})
    assert r.status_code == 200
    assert r.json()["token_type"] == "bearer"

    r = client.post(f"{API}/auth/login", json={"username": "aiko", "password": "wrong-horse"})
    assert r.status_code == 401


def test_requires_valid_token(client):
    assert client.get(f"{API}/trips").status_code in (401, 403)
    r = client.get(f"{API}/trips", headers={"Authorization": "Bearer not-a-token"})
    assert r.status_code == 401


def test_trip_listing_is_per_user(client):
    alice = register(client, "alice")
    bob = register(client, "bob")
    create_trip(client, alice, "Kyoto")

    assert [t["title"] for t in client.get(f"{API}/trips", headers=alice).json()] == ["Kyoto"]
    assert client.get(f"{API}/trips", headers=bob).json() == []


def test_photo_validation(client):
    headers = register(client)
    trip_id = create_trip(client, headers)

    r = client.post(f"{API}/trips/{trip_id}/photos", json={"photos": [{"latitude": 91}]}, headers=headers)
    assert r.status_code == 422
    r = client.post(f"{API}/trips/{trip_id}/photos", json={"photos": []}, headers=headers)
    assert r.status_code == 422


def test_suggestions_end_to_end(client):
    headers = register(client)
    trip_id = create_trip(client, headers)
    ids = add_photos(client, headers, trip_id, [
        {"taken_at": "2024-03-05T10:00:00Z", "latitude": 35.0116, "longitude": 135.7681},
        {"taken_at": "2024-03-05T10:30:00Z", "latitude": 35.0117, "longitude": 135.7682},
        {"taken_at": "2024-03-05T11:00:00Z", "latitude": 35.0118, "longitude": 135.7683},
        {"taken_at": "2024-03-05T14:00:00Z"},
        {"caption": "no metadata"},
    ])

    r = client.get(f"{API}/trips/{trip_id}/album-suggestions", headers=headers)
    assert r.status_code == 200
    body = r.json()
    assert body["total"] == 2

    date_s, location_s = body["suggestions"]
    assert date_s == {
        "name": "March 5, 2024",
        "photoIds": ids[:3],
        "type": "date",
        "confidence": date_s["confidence"],
        "metadata": {"date": "2024-03-05"},
    }
    assert abs(date_s["confidence"] - 0.8) < 1e-9
    assert location_s["type"] == "location"
    assert location_s["name"] == "Location (35.01, 135.77)"
    assert location_s["metadata"] == {"locationName": "Location (35.01, 135.77)"}
    assert abs(location_s["confidence"] - 0.7) < 1e-9


def test_offset_timestamps_are_stored_as_utc(client):
    headers = register(client)
    trip_id = create_trip(client, headers)
    add_photos(client, headers, trip_id, [{"taken_at": "2024-03-05T01:30:00+09:00"}])

    r = client.get(f"{API}/trips/{trip_id}/photos/unsorted", headers=headers)
    assert r.json()["photos"][0]["taken_at"] == "2024-03-04T16:30:00"


def test_empty_suggestions_for_small_trip(client):
    headers = register(client)
    trip_id = create_trip(client, headers)
    add_photos(client, headers, trip_id, [{"taken_at": "2024-03-05T10:00:00Z"}])

    r = client.get(f"{API}/trips/{trip_id}/album-suggestions", headers=headers)
    assert r.status_code == 200
    assert r.json() == {"suggestions": [], "total": 0}


def test_accept_suggestion_flow(client):
    headers = register(client)
    trip_id = create_trip(client, headers)
    ids = add_photos(client, headers, trip_id, [
        {"taken_at": f"2024-03-05T10:{m:02d}:00"} for m in (0, 10, 20, 30)
    ])

    [suggestion] = client.get(f"{API}/trips/{trip_id}/album-suggestions", headers=headers).json()["suggestions"]
    order = list(reversed(suggestion["photoIds"]))

    r = client.post(
        f"{API}/trips/{trip_id}/album-suggestions/accept",
        json={"name": suggestion["name"], "photoIds": order},
        headers=headers,
    )
    assert r.status_code == 201
    album_id = r.json()["albumId"]

    r = client.get(f"{API}/trips/{trip_id}/albums/{album_id}", headers=headers)
    assert r.status_code == 200
    assert r.json()["photoIds"] == order
    assert r.json()["name"] == "March 5, 2024"

    # accepted photos are no longer unsorted
    r = client.get(f"{API}/trips/{trip_id}/photos/unsorted", headers=headers)
    assert r.json()["total"] == 0
    assert set(ids) == set(order)
    r = client.get(f"{API}/trips/{trip_id}/album-suggestions", headers=headers)
    assert r.json()["suggestions"] == []


def test_accept_rejects_foreign_photos(client):
    headers = register(client)
    trip_a = create_trip(client, headers, "A")
    trip_b = create_trip(client, headers, "B")
    [mine] = add_photos(client, headers, trip_a, [{"caption": "a"}])
    [theirs] = add_photos(client, headers, trip_b, [{"caption": "b"}])

    r = client.post(
        f"{API}/trips/{trip_a}/album-suggestions/accept",
        json={"name": "Mixed", "photoIds": [mine, theirs]},
        headers=headers,
    )
    assert r.status_code == 400
    assert r.json()["detail"] == "Some photos do not belong to this trip"

    r = client.get(f"{API}/trips/{trip_a}/photos/unsorted", headers=headers)
    assert r.json()["total"] == 1


def test_accept_validates_body(client):
    headers = register(client)
    trip_id = create_trip(client, headers)

    r = client.post(
        f"{API}/trips/{trip_id}/album-suggestions/accept",
        json={"name": "", "photoIds": [1]},
        headers=headers,
    )
    assert r.status_code == 422
    r = client.post(
        f"{API}/trips/{trip_id}/album-suggestions/accept",
        json={"name": "Empty", "photoIds": []},
        headers=headers,
    )
    assert r.status_code == 422


def test_other_users_trip_is_not_found(client):
    alice = register(client, "alice")
    mallory = register(client, "mallory")
    trip_id = create_trip(client, alice)
    [photo_id] = add_photos(client, alice, trip_id, [{"caption": "x"}])

    r = client.get(f"{API}/trips/{trip_id}/album-suggestions", headers=mallory)
    assert r.status_code == 404
    assert r.json()["detail"] == "Trip not found"

    r = client.post(
        f"{API}/trips/{trip_id}/album-suggestions/accept",
        json={"name": "Mine now", "photoIds": [photo_id]},
        headers=mallory,
    )
    assert r.status_code == 404

    r = client.post(f"{API}/trips/{trip_id}/photos", json={"photos": [{"caption": "y"}]}, headers=mallory)
    assert r.status_code == 404


def test_album_of_another_trip_is_not_found(client):
    headers = register(client)
    trip_a = create_trip(client, headers, "A")
    trip_b = create_trip(client, headers, "B")
    ids = add_photos(client, headers, trip_a, [{"caption": "a"}])
    r = client.post(
        f"{API}/trips/{trip_a}/album-suggestions/accept",
        json={"name": "A album", "photoIds": ids},
        headers=headers,
    )
    album_id = r.json()["albumId"]

    assert client.get(f"{API}/trips/{trip_b}/albums/{album_id}", headers=headers).status_code == 404


def test_refresh_issues_working_access_token(client):
    r = client.post(f"{API}/auth/register", json={"username": "kenji", "password": "correct-horse"})
    tokens = r.json()

    r = client.post(f"{API}/auth/refresh", json={"refresh_token": tokens["refresh_token"]})
    assert r.status_code == 200
    headers = {"Authorization": f"Bearer {r.json()['access_token']}"}
    assert client.get(f"{API}/trips", headers=headers).status_code == 200

    # access tokens cannot be used to refresh, refresh tokens cannot call the API
    r = client.post(f"{API}/auth/refresh", json={"refresh_token": tokens["access_token"]})
    assert r.status_code == 401
    r = client.get(f"{API}/trips", headers={"Authorization": f"Bearer {tokens['refresh_token']}"})
    assert r.status_code == 401

    r = client.post(f"{API}/auth/refresh", json={"refresh_token": "garbage"})
    assert r.status_code == 401


def test_accept_caps_photo_count(client):
    from tripalbums.schemas.album import MAX_ALBUM_PHOTOS

    headers = register(client)
    trip_id = create_trip(client, headers)

    r = client.post(
        f"{API}/trips/{trip_id}/album-suggestions/accept",
        json={"name": "Huge", "photoIds": list(range(1, MAX_ALBUM_PHOTOS + 2))},
        headers=headers,
    )
    assert r.status_code == 422
