"""Store interfaces and in-memory implementations for users, rooms and appointments."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
import logging
import threading
from typing import Protocol
import uuid

from roomscheduler.backend.engine import find_conflict, format_instant, normalize_instant
from roomscheduler.backend.errors import (
    AppointmentNotFoundError,
    ConflictError,
    ForbiddenError,
    InvalidRangeError,
    RoomNotFoundError,
)
from roomscheduler.backend.models import Appointment, Room, User
from roomscheduler.backend.security import Base64TokenCodec, TokenClaims, TokenCodec, now_ms
from roomscheduler.backend.state import build_seed_rooms, build_seed_users

logger = logging.getLogger(__name__)


class IdentityStore(Protocol):
    def validate_credentials(self, username: str, password: str) -> User | None:
        """Return the user matching both fields exactly."""

    def issue_token(self, user: User) -> str:
        """Encode a bearer token for the user."""

    def resolve_token(self, token: str) -> User | None:
        """Return the user a token refers to, or None when it is invalid."""


class RoomCatalog(Protocol):
    def list_rooms(self) -> list[Room]:
        """Return rooms in catalog order."""

    def exists(self, room_id: str) -> bool:
        """Return True when the room is in the catalog."""

    def get(self, room_id: str) -> Room | None:
        """Return the room or None."""


class AppointmentStore(Protocol):
    def create(self, room_id: str, start_time: datetime, end_time: datetime, user: User) -> Appointment:
        """Book a room for ``[start_time, end_time)`` or raise a SchedulerError."""

    def list(self) -> list[Appointment]:
        """Return appointments in insertion order."""

    def cancel(self, appointment_id: str, user: User) -> None:
        """Remove an appointment owned by ``user`` or raise a SchedulerError."""


@dataclass
class InMemoryIdentityStore:
    users: list[User]
    codec: TokenCodec = field(default_factory=Base64TokenCodec)
    clock: Callable[[], int] = now_ms

    def __post_init__(self) -> None:
        self._users_by_id: dict[str, User] = {}
        usernames: set[str] = set()
        for user in self.users:
            if user.id in self._users_by_id or user.username in usernames:
                raise ValueError(f"Duplicate user: {user.username}")
            self._users_by_id[user.id] = user
            usernames.add(user.username)

    def validate_credentials(self, username: str, password: str) -> User | None:
        # Plain-text comparison; credentials are neither hashed nor compared in constant time.
        for user in self.users:
            if user.username == username and user.password == password:
                return user
        return None

    def issue_token(self, user: User) -> str:
        return self.codec.encode(TokenClaims(user_id=user.id, issued_at_ms=self.clock()))

    def resolve_token(self, token: str) -> User | None:
        claims = self.codec.decode(token)
        if claims is None:
            return None
        return self._users_by_id.get(claims.user_id)


@dataclass
class InMemoryRoomCatalog:
    rooms: list[Room]

    def __post_init__(self) -> None:
        self._rooms_by_id: dict[str, Room] = {}
        for room in self.rooms:
            if room.id in self._rooms_by_id:
                raise ValueError(f"Duplicate room id: {room.id}")
            self._rooms_by_id[room.id] = room

    def list_rooms(self) -> list[Room]:
        return list(self.rooms)

    def exists(self, room_id: str) -> bool:
        return room_id in self._rooms_by_id

    def get(self, room_id: str) -> Room | None:
        return self._rooms_by_id.get(room_id)


@dataclass
class InMemoryAppointmentStore:
    rooms: RoomCatalog

    def __post_init__(self) -> None:
        self._appointments: dict[str, Appointment] = {}
        self._lock = threading.Lock()

    def create(self, room_id: str, start_time: datetime, end_time: datetime, user: User) -> Appointment:
        start = normalize_instant(start_time)
        end = normalize_instant(end_time)
        if start >= end:
            raise InvalidRangeError(context={"startTime": format_instant(start), "endTime": format_instant(end)})
        if not self.rooms.exists(room_id):
            raise RoomNotFoundError(room_id=room_id)

        # Check-then-insert must be atomic across concurrent callers.
        with self._lock:
            conflicting = find_conflict(self._appointments.values(), room_id=room_id, start=start, end=end)
            if conflicting is not None:
                logger.info(
                    "Rejected booking for room %s by user %s: overlaps appointment %s",
                    room_id,
                    user.id,
                    conflicting.id,
                )
                raise ConflictError(room_id=room_id, conflicting_id=conflicting.id)

            appointment = Appointment(
                id=str(uuid.uuid4()),
                room_id=room_id,
                user_id=user.id,
                start_time=format_instant(start),
                end_time=format_instant(end),
            )
            self._appointments[appointment.id] = appointment

        logger.info(
            "Created appointment %s for room %s (%s - %s)",
            appointment.id,
            room_id,
            appointment.start_time,
            appointment.end_time,
        )
        return appointment

    def list(self) -> list[Appointment]:
        with self._lock:
            return list(self._appointments.values())

    def cancel(self, appointment_id: str, user: User) -> None:
        with self._lock:
            appointment = self._appointments.get(appointment_id)
            if appointment is None:
                raise AppointmentNotFoundError(appointment_id=appointment_id)
            if appointment.user_id != user.id:
                logger.warning("User %s may not cancel appointment %s", user.id, appointment_id)
                raise ForbiddenError(appointment_id=appointment_id)
            del self._appointments[appointment_id]
        logger.info("Cancelled appointment %s", appointment_id)


@dataclass(frozen=True)
class SchedulerStores:
    identity: IdentityStore
    rooms: RoomCatalog
    appointments: AppointmentStore


def create_stores(users: list[User] | None = None, rooms: list[Room] | None = None) -> SchedulerStores:
    identity = InMemoryIdentityStore(users=users if users is not None else build_seed_users())
    catalog = InMemoryRoomCatalog(rooms=rooms if rooms is not None else build_seed_rooms())
    return SchedulerStores(
        identity=identity,
        rooms=catalog,
        appointments=InMemoryAppointmentStore(rooms=catalog),
    )
