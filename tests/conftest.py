"""Shared test fixtures."""

import random
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest

from dj_wishboard.config import Settings
from dj_wishboard.containers import AppContainer, build_container
from dj_wishboard.domain.state import WishboardState
from dj_wishboard.services.access import AccessGate
from dj_wishboard.services.identifiers import IdentifierGenerator
from dj_wishboard.services.persistence import PersistenceStore, SnapshotRepository
from dj_wishboard.services.sessions import SessionService
from dj_wishboard.services.wishes import WishService


@dataclass
class InMemorySnapshotRepository(SnapshotRepository):
    """In-memory snapshot repository for tests."""

    payload: dict[str, object] | None = None
    writes: list[dict[str, object]] = field(default_factory=list)
    fail_writes: bool = False

    def read(self) -> dict[str, object] | None:
        return self.payload

    def write(self, payload: dict[str, object]) -> None:
        if self.fail_writes:
            raise OSError("disk full")
        self.payload = payload
        self.writes.append(payload)


@dataclass
class SteppingClock:
    """Clock that advances one second per call."""

    current: datetime = field(
        default_factory=lambda: datetime(2024, 6, 1, 20, 0, tzinfo=UTC)
    )

    def __call__(self) -> datetime:
        value = self.current
        self.current += timedelta(seconds=1)
        return value


@dataclass
class Services:
    """Services wired around one shared state, as the container does."""

    state: WishboardState
    store: PersistenceStore
    repository: InMemorySnapshotRepository
    sessions: SessionService
    wishes: WishService
    gate: AccessGate


@pytest.fixture
def identifiers() -> IdentifierGenerator:
    return IdentifierGenerator(random.Random(1234))


@pytest.fixture
def repository() -> InMemorySnapshotRepository:
    return InMemorySnapshotRepository()


@pytest.fixture
def services(
    repository: InMemorySnapshotRepository, identifiers: IdentifierGenerator
) -> Services:
    clock = SteppingClock()
    state = WishboardState()
    store = PersistenceStore(repository=repository, identifiers=identifiers)
    gate = AccessGate(state)
    wishes = WishService(state=state, store=store, clock=clock)
    sessions = SessionService(
        state=state,
        store=store,
        identifiers=identifiers,
        wish_service=wishes,
        access_gate=gate,
        clock=clock,
    )
    return Services(
        state=state,
        store=store,
        repository=repository,
        sessions=sessions,
        wishes=wishes,
        gate=gate,
    )


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(data_file=tmp_path / "data.json")


@pytest.fixture
def container(
    settings: Settings,
    repository: InMemorySnapshotRepository,
    identifiers: IdentifierGenerator,
) -> AppContainer:
    return build_container(settings, repository=repository, identifiers=identifiers)
