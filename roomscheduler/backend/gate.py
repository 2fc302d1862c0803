"""Session gate resolving bearer tokens into users before scheduling operations."""

from __future__ import annotations

from dataclasses import dataclass
import logging

from roomscheduler.backend.errors import UnauthenticatedError
from roomscheduler.backend.models import User
from roomscheduler.backend.store import IdentityStore

logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"


def extract_bearer_token(authorization: str | None) -> str:
    """Return the token from an ``Authorization: Bearer <token>`` header value."""
    if authorization is None or authorization.strip() == "":
        raise UnauthenticatedError(reason="missing", message="Authentication token not provided")

    scheme, _, token = authorization.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != BEARER_SCHEME or token == "":
        raise UnauthenticatedError(reason="invalid", message="Invalid authentication token")
    return token


@dataclass
class SessionGate:
    identity: IdentityStore

    def authenticate(self, authorization: str | None) -> User:
        try:
            token = extract_bearer_token(authorization)
        except UnauthenticatedError as exc:
            logger.debug("Rejected request: %s authorization", exc.reason)
            raise

        user = self.identity.resolve_token(token)
        if user is None:
            logger.debug("Rejected request: token did not resolve to a known user")
            raise UnauthenticatedError(reason="invalid", message="Invalid authentication token")
        return user
