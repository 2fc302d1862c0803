"""Security helpers for session token handling in the backend.

Tokens are a base64 encoding of ``"<user_id>:<issued_at_ms>"``. They are
reversible and carry no signature: anyone who knows a user id can forge one.
The codec sits behind ``TokenCodec`` so a signed scheme can replace it
without changing the identity store contract.
"""

from __future__ import annotations

import base64
import binascii
import time
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class TokenClaims:
    user_id: str
    issued_at_ms: int


class TokenCodec(Protocol):
    def encode(self, claims: TokenClaims) -> str:
        """Serialize claims into a bearer token string."""

    def decode(self, token: str) -> TokenClaims | None:
        """Return claims for a well-formed token, otherwise None."""


class Base64TokenCodec:
    def encode(self, claims: TokenClaims) -> str:
        payload = f"{claims.user_id}:{claims.issued_at_ms}".encode("utf-8")
        return base64.b64encode(payload).decode("ascii")

    def decode(self, token: str) -> TokenClaims | None:
        try:
            decoded = base64.b64decode(token, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError, ValueError):
            return None

        parts = decoded.split(":")
        if len(parts) != 2:
            return None
        user_id, issued_raw = parts
        if user_id == "" or not (issued_raw.isascii() and issued_raw.isdigit()):
            return None
        return TokenClaims(user_id=user_id, issued_at_ms=int(issued_raw))


def now_ms() -> int:
    return time.time_ns() // 1_000_000
