"""Backend package for the meeting room scheduler."""

from .config import BackendSettings, configure_logging, load_settings
from .gate import SessionGate
from .security import Base64TokenCodec, TokenClaims, TokenCodec
from .state import build_seed_rooms, build_seed_users
from .store import (
    AppointmentStore,
    IdentityStore,
    InMemoryAppointmentStore,
    InMemoryIdentityStore,
    InMemoryRoomCatalog,
    RoomCatalog,
    SchedulerStores,
    create_stores,
)

__all__ = [
    "AppointmentStore",
    "BackendSettings",
    "Base64TokenCodec",
    "build_seed_rooms",
    "build_seed_users",
    "configure_logging",
    "create_stores",
    "IdentityStore",
    "InMemoryAppointmentStore",
    "InMemoryIdentityStore",
    "InMemoryRoomCatalog",
    "load_settings",
    "RoomCatalog",
    "SchedulerStores",
    "SessionGate",
    "TokenClaims",
    "TokenCodec",
]
