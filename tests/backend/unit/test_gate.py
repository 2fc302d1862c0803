import pytest

from roomscheduler.backend.errors import UnauthenticatedError
from roomscheduler.backend.gate import SessionGate, extract_bearer_token
from roomscheduler.backend.models import User
from roomscheduler.backend.store import InMemoryIdentityStore

ALICE = User(id="user-1", username="alice", password="secret")


def _gate() -> tuple[SessionGate, InMemoryIdentityStore]:
    identity = InMemoryIdentityStore(users=[ALICE])
    return SessionGate(identity=identity), identity


def test_extract_bearer_token_accepts_case_insensitive_scheme() -> None:
    assert extract_bearer_token("Bearer abc") == "abc"
    assert extract_bearer_token("bearer   abc ") == "abc"


@pytest.mark.parametrize("header", [None, "", "   "])
def test_missing_authorization_is_unauthenticated_missing(header: str | None) -> None:
    gate, _ = _gate()

    with pytest.raises(UnauthenticatedError) as excinfo:
        gate.authenticate(header)

    assert excinfo.value.reason == "missing"


@pytest.mark.parametrize("header", ["Bearer", "Basic abc", "Bearer not-a-token", "token-without-scheme"])
def test_invalid_authorization_is_unauthenticated_invalid(header: str) -> None:
    gate, _ = _gate()

    with pytest.raises(UnauthenticatedError) as excinfo:
        gate.authenticate(header)

    assert excinfo.value.reason == "invalid"


def test_valid_token_resolves_to_user() -> None:
    gate, identity = _gate()
    token = identity.issue_token(ALICE)

    assert gate.authenticate(f"Bearer {token}") == ALICE


def test_token_for_unknown_user_is_rejected() -> None:
    gate, _ = _gate()
    other = InMemoryIdentityStore(users=[User(id="user-9", username="eve", password="x")])
    forged = other.issue_token(other.users[0])

    with pytest.raises(UnauthenticatedError) as excinfo:
        gate.authenticate(f"Bearer {forged}")

    assert excinfo.value.reason == "invalid"
