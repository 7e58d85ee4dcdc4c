"""Dependency container wiring for the application."""

from dataclasses import dataclass

from dj_wishboard.adapters.json_snapshot_repository import JsonSnapshotRepository
from dj_wishboard.config import Settings
from dj_wishboard.domain.state import WishboardState
from dj_wishboard.services.access import AccessGate
from dj_wishboard.services.identifiers import IdentifierGenerator
from dj_wishboard.services.persistence import PersistenceStore, SnapshotRepository
from dj_wishboard.services.sessions import SessionService
from dj_wishboard.services.wishes import WishService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    state: WishboardState
    store: PersistenceStore
    access_gate: AccessGate
    session_service: SessionService
    wish_service: WishService


def build_container(
    settings: Settings | None = None,
    repository: SnapshotRepository | None = None,
    identifiers: IdentifierGenerator | None = None,
) -> AppContainer:
    """Create the default dependency container and load the stored snapshot."""
    resolved_settings = settings or Settings()
    resolved_identifiers = identifiers or IdentifierGenerator()
    store = PersistenceStore(
        repository=repository or JsonSnapshotRepository(resolved_settings.data_file),
        identifiers=resolved_identifiers,
    )
    sessions, wishes = store.load()
    state = WishboardState(sessions=sessions, wishes=wishes)
    access_gate = AccessGate(state)
    wish_service = WishService(state=state, store=store)
    session_service = SessionService(
        state=state,
        store=store,
        identifiers=resolved_identifiers,
        wish_service=wish_service,
        access_gate=access_gate,
    )
    return AppContainer(
        settings=resolved_settings,
        state=state,
        store=store,
        access_gate=access_gate,
        session_service=session_service,
        wish_service=wish_service,
    )
