"""Seed data loaded into the identity store and room catalog at start."""

from __future__ import annotations

import uuid

from .models import Room, User

SEED_USERS: tuple[tuple[str, str], ...] = (
    ("funcionario1", "password1"),
    ("julio.lima", "123456"),
)

SEED_ROOMS: tuple[tuple[str, int], ...] = (
    ("Sala Alpha", 10),
    ("Sala Beta", 8),
    ("Sala Gamma", 12),
)


def build_seed_users() -> list[User]:
    return [User(id=str(uuid.uuid4()), username=username, password=password) for username, password in SEED_USERS]


def build_seed_rooms() -> list[Room]:
    """Return the fixed room list in catalog order with fresh ids."""
    return [Room(id=str(uuid.uuid4()), name=name, capacity=capacity) for name, capacity in SEED_ROOMS]
