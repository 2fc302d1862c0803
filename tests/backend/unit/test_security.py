import base64

from roomscheduler.backend.security import Base64TokenCodec, TokenClaims, now_ms


def test_encode_produces_base64_of_user_id_and_timestamp() -> None:
    codec = Base64TokenCodec()

    token = codec.encode(TokenClaims(user_id="user-1", issued_at_ms=1700000000000))

    assert base64.b64decode(token).decode("utf-8") == "user-1:1700000000000"


def test_decode_returns_claims_for_well_formed_token() -> None:
    codec = Base64TokenCodec()
    token = base64.b64encode(b"user-1:42").decode("ascii")

    claims = codec.decode(token)

    assert claims == TokenClaims(user_id="user-1", issued_at_ms=42)


def test_decode_rejects_malformed_tokens() -> None:
    codec = Base64TokenCodec()

    assert codec.decode("not base64!!") is None
    assert codec.decode(base64.b64encode(b"\xff\xfe").decode("ascii")) is None
    assert codec.decode(base64.b64encode(b"user-only").decode("ascii")) is None
    assert codec.decode(base64.b64encode(b"a:b:c").decode("ascii")) is None
    assert codec.decode(base64.b64encode(b"user-1:soon").decode("ascii")) is None
    assert codec.decode(base64.b64encode(b":123").decode("ascii")) is None
    assert codec.decode(base64.b64encode("user-1:\u00b2".encode("utf-8")).decode("ascii")) is None
    assert codec.decode("") is None


def test_now_ms_returns_epoch_milliseconds() -> None:
    value = now_ms()

    assert value > 1_600_000_000_000
