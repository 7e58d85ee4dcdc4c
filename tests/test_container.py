"""Tests for container wiring."""

import json
from pathlib import Path

from dj_wishboard.config import Settings
from dj_wishboard.containers import build_container


def test_build_container_shares_state(container) -> None:
    assert container.session_service.state is container.state
    assert container.wish_service.state is container.state
    assert container.access_gate.state is container.state


def test_build_container_reloads_saved_snapshot(tmp_path: Path) -> None:
    settings = Settings(data_file=tmp_path / "nested" / "data.json")
    first = build_container(settings)
    session = first.session_service.create("Party", {"require_name": False})
    first.wish_service.submit(session_id=session.id, title="A", artist="B")

    second = build_container(settings)

    assert second.session_service.get(session.id) == session
    assert len(second.wish_service.list_by_session(session.id)) == 1


def test_unreadable_record_does_not_wipe_the_file(tmp_path: Path) -> None:
    data_file = tmp_path / "data.json"
    data_file.write_text(
        json.dumps(
            {
                "sessions": [
                    {
                        "id": "GOOD01",
                        "name": "Good",
                        "active": True,
                        "createdAt": "2024-01-01T10:00:00.000Z",
                        "djKey": "k" * 32,
                    },
                    {"id": "OLD002", "name": "Old", "djKey": "x" * 32},
                ],
                "wishes": [],
            }
        ),
        encoding="utf-8",
    )
    container = build_container(Settings(data_file=data_file))

    created = container.session_service.create("New")

    stored = json.loads(data_file.read_text(encoding="utf-8"))
    assert [s["id"] for s in stored["sessions"]] == ["GOOD01", "OLD002", created.id]
