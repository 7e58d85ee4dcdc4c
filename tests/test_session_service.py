"""Tests for session lifecycle."""

import pytest

from dj_wishboard.domain.errors import EmptyName, SessionNotFound


@pytest.mark.parametrize("name", ["", "   ", None])
def test_create_rejects_blank_name(services, name) -> None:
    with pytest.raises(EmptyName):
        services.sessions.create(name)

    assert services.state.sessions == []
    assert services.repository.writes == []


def test_create_applies_defaults_and_persists(services) -> None:
    session = services.sessions.create("  Summer Party  ")

    assert session.name == "Summer Party"
    assert session.active is True
    assert len(session.id) == 6
    assert len(session.dj_key) == 32
    assert session.settings.max_wishes_per_guest == 0
    assert session.settings.require_name is True
    assert session.settings.allow_comment is True
    assert services.sessions.list_sessions() == [session]
    assert services.repository.writes[-1]["sessions"][0]["id"] == session.id


def test_create_parses_loose_settings(services) -> None:
    session = services.sessions.create(
        "Party",
        {"max_wishes_per_guest": "3", "require_name": "false", "allow_comment": None},
    )

    assert session.settings.max_wishes_per_guest == 3
    assert session.settings.require_name is False
    assert session.settings.allow_comment is False


def test_sessions_get_distinct_keys(services) -> None:
    first = services.sessions.create("One")
    second = services.sessions.create("Two")

    assert first.dj_key != second.dj_key
    assert first.dj_key


def test_get_unknown_session_raises(services) -> None:
    with pytest.raises(SessionNotFound):
        services.sessions.get("NOPE00")


def test_update_settings_merges_provided_fields(services) -> None:
    session = services.sessions.create("Party", {"max_wishes_per_guest": 2})

    updated = services.sessions.update_settings(session.id, {"require_name": "yes"})

    assert updated.settings.require_name is False
    assert updated.settings.max_wishes_per_guest == 2
    assert updated.settings.allow_comment is True
    assert services.sessions.get(session.id) == updated


def test_update_settings_coerces_limit(services) -> None:
    session = services.sessions.create("Party", {"max_wishes_per_guest": 5})

    updated = services.sessions.update_settings(
        session.id, {"max_wishes_per_guest": "lots", "allow_comment": True}
    )

    assert updated.settings.max_wishes_per_guest == 0
    assert updated.settings.allow_comment is True


def test_update_settings_unknown_session(services) -> None:
    with pytest.raises(SessionNotFound):
        services.sessions.update_settings("NOPE00", {"require_name": True})


@pytest.mark.parametrize(
    ("value", "expected"), [("1", True), (1, True), ("true", True), ("no", False)]
)
def test_set_active(services, value, expected) -> None:
    session = services.sessions.create("Party")
    services.sessions.set_active(session.id, False)

    updated = services.sessions.set_active(session.id, value)

    assert updated.active is expected
    assert services.repository.writes[-1]["sessions"][0]["active"] is expected


def test_delete_cascades_only_matching_wishes(services) -> None:
    party = services.sessions.create("Party", {"require_name": False})
    other = services.sessions.create("Other", {"require_name": False})
    for title in ("A", "B"):
        services.wishes.submit(session_id=party.id, title=title, artist="X")
    kept = services.wishes.submit(session_id=other.id, title="C", artist="Y")

    removed, removed_count = services.sessions.delete(party.id)

    assert removed == party
    assert removed_count == 2
    assert services.sessions.list_sessions() == [other]
    assert services.wishes.list_all() == [kept]
    assert services.repository.writes[-1]["sessions"][0]["id"] == other.id
    assert len(services.repository.writes[-1]["wishes"]) == 1


def test_delete_unknown_session(services) -> None:
    with pytest.raises(SessionNotFound):
        services.sessions.delete("NOPE00")


def test_state_survives_failed_save(services) -> None:
    services.repository.fail_writes = True

    session = services.sessions.create("Party")

    assert services.sessions.get(session.id) == session
