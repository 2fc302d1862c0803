"""Domain models for users, rooms and appointments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class User:
    id: str
    username: str
    password: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "username": self.username}


@dataclass(frozen=True)
class Room:
    id: str
    name: str
    capacity: int

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "capacity": self.capacity}


@dataclass(frozen=True)
class Appointment:
    id: str
    room_id: str
    user_id: str
    start_time: str
    end_time: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "roomId": self.room_id,
            "userId": self.user_id,
            "startTime": self.start_time,
            "endTime": self.end_time,
        }
