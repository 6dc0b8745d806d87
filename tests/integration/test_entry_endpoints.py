"""
Mood entry endpoint coverage: planting, garden, history and deletion.
"""
from datetime import timedelta

from sqlmodel import select

from mood_garden.models.mood_entry import MoodEntry
from tests.lib import MoodGardenApiClient


def test_create_entry_returns_entry_and_streak(api_client: MoodGardenApiClient):
    created = api_client.create_entry("user-1", mood="amazing", plant="🌸", journal="Great day")

    entry = created["entry"]
    assert created["streak"] == 1
    assert entry["id"]
    assert entry["user_id"] == "user-1"
    assert entry["mood"] == "amazing"
    assert entry["plant"] == "🌸"
    assert entry["journal"] == "Great day"
    assert entry["date"] == "2024-03-10T12:00:00Z"


def test_create_entry_without_journal(api_client: MoodGardenApiClient):
    created = api_client.create_entry("user-1", mood="okay", plant="🌿")

    assert created["entry"]["journal"] == ""


def test_garden_lists_entries_newest_first(api_client: MoodGardenApiClient, clock):
    start = clock.now
    for hours, mood in enumerate(["sad", "okay", "happy"]):
        clock.set(start + timedelta(hours=hours))
        api_client.create_entry("user-1", mood=mood)

    entries = api_client.get_garden("user-1")["entries"]

    assert [entry["mood"] for entry in entries] == ["happy", "okay", "sad"]


def test_garden_respects_limit(api_client: MoodGardenApiClient, clock):
    start = clock.now
    for minutes in range(4):
        clock.set(start + timedelta(minutes=minutes))
        api_client.create_entry("user-1")

    assert len(api_client.get_garden("user-1", limit=2)["entries"]) == 2


def test_garden_of_new_user_is_empty(api_client: MoodGardenApiClient):
    assert api_client.get_garden("nobody") == {"entries": []}


def test_garden_is_isolated_per_user(api_client: MoodGardenApiClient):
    api_client.create_entry("alice", mood="happy")
    api_client.create_entry("bob", mood="sad")

    entries = api_client.get_garden("alice")["entries"]

    assert len(entries) == 1
    assert entries[0]["user_id"] == "alice"


def test_history_pagination(api_client: MoodGardenApiClient, clock):
    start = clock.now
    for minutes in range(5):
        clock.set(start + timedelta(minutes=minutes))
        api_client.create_entry("user-1")

    page = api_client.get_history("user-1", page=2, limit=2)

    assert len(page["entries"]) == 2
    assert page["pagination"] == {"page": 2, "limit": 2, "total": 5, "totalPages": 3}


def test_history_defaults(api_client: MoodGardenApiClient):
    api_client.create_entry("user-1")

    page = api_client.get_history("user-1")

    assert page["pagination"] == {"page": 1, "limit": 20, "total": 1, "totalPages": 1}


def test_history_of_new_user(api_client: MoodGardenApiClient):
    page = api_client.get_history("nobody")

    assert page["entries"] == []
    assert page["pagination"]["total"] == 0
    assert page["pagination"]["totalPages"] == 0


def test_delete_entry(api_client: MoodGardenApiClient, db_session):
    entry_id = api_client.create_entry("user-1")["entry"]["id"]

    response = api_client.delete_entry("user-1", entry_id)

    assert response == {"message": "Entry deleted successfully"}
    assert api_client.get_garden("user-1")["entries"] == []
    assert db_session.exec(select(MoodEntry)).all() == []


def test_delete_entry_keeps_streak(api_client: MoodGardenApiClient):
    entry_id = api_client.create_entry("user-1")["entry"]["id"]

    api_client.delete_entry("user-1", entry_id)

    assert api_client.get_streak("user-1") == 1


def test_delete_entry_of_another_user_is_not_found(api_client: MoodGardenApiClient):
    entry_id = api_client.create_entry("alice")["entry"]["id"]

    response = api_client.request("DELETE", f"/users/bob/entries/{entry_id}")

    assert response.status_code == 404
    assert response.json() == {"error": "Entry not found"}
    assert len(api_client.get_garden("alice")["entries"]) == 1
