"""Tests for token issuing and validation."""

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from primekart.services.token_service import (
    TokenClaims,
    TokenRejected,
    TokenRejectionReason,
    TokenService,
)

SECRET = "unit-test-secret"


class FakeClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def service(clock):
    return TokenService(SECRET, clock=clock)


@pytest.fixture
def claims():
    return TokenClaims(id="65a000000000000000000001", name="Alice", email="alice@x.com", role="user")


def test_fresh_token_validates(service, claims):
    token = service.issue(claims)

    assert service.validate(token) == claims


def test_token_embeds_seven_day_expiry(service, claims, clock):
    token = service.issue(claims)
    payload = jwt.get_unverified_claims(token)

    assert payload["exp"] - payload["iat"] == int(timedelta(days=7).total_seconds())
    assert payload["iat"] == int(clock.now.timestamp())
    assert {"id", "email", "role", "name"} <= payload.keys()


def test_token_still_valid_just_before_expiry(service, claims, clock):
    token = service.issue(claims)
    clock.advance(timedelta(days=7) - timedelta(seconds=1))

    assert service.validate(token).email == "alice@x.com"


def test_token_expires_after_seven_days(service, claims, clock):
    token = service.issue(claims)
    clock.advance(timedelta(days=7, seconds=1))

    with pytest.raises(TokenRejected) as exc_info:
        service.validate(token)

    assert exc_info.value.reason is TokenRejectionReason.EXPIRED


def test_token_signed_with_other_key_is_rejected(claims, clock):
    token = TokenService("another-secret", clock=clock).issue(claims)

    with pytest.raises(TokenRejected) as exc_info:
        TokenService(SECRET, clock=clock).validate(token)

    assert exc_info.value.reason is TokenRejectionReason.SIGNATURE_INVALID


def test_tampered_payload_is_rejected(service, claims):
    header, _, signature = service.issue(claims).split(".")
    forged_payload = jwt.encode(
        {"id": claims.id, "email": claims.email, "role": "admin"}, "x", algorithm="HS256"
    ).split(".")[1]

    with pytest.raises(TokenRejected) as exc_info:
        service.validate(f"{header}.{forged_payload}.{signature}")

    assert exc_info.value.reason is TokenRejectionReason.SIGNATURE_INVALID


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
def test_malformed_token_is_rejected(service, token):
    with pytest.raises(TokenRejected) as exc_info:
        service.validate(token)

    assert exc_info.value.reason is TokenRejectionReason.MALFORMED


def test_token_missing_identity_claims_is_malformed(service, clock):
    exp = clock.now + timedelta(days=1)
    token = jwt.encode({"email": "alice@x.com", "exp": exp}, SECRET, algorithm="HS256")

    with pytest.raises(TokenRejected) as exc_info:
        service.validate(token)

    assert exc_info.value.reason is TokenRejectionReason.MALFORMED


def test_missing_signing_key_is_refused():
    with pytest.raises(ValueError):
        TokenService("")
