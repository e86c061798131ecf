"""Unit tests for AuthorizationGate token issue/verify and owner checks."""

import datetime as dt

import jwt
import pytest

from dreamstay.models import BookingError, ErrorCode
from dreamstay.services import AuthorizationGate
from dreamstay.services.auth import TOKEN_ISSUER

SECRET = "test-secret-for-tokens"


class TestIssueAndVerify:
    """Tests for issue_token and verify."""

    def test_issued_token_verifies_to_same_email(self, gate: AuthorizationGate) -> None:
        issued = gate.issue_token("guest@example.com")

        identity = gate.verify(issued.token)

        assert identity.email == "guest@example.com"
        assert identity.expires_at > identity.issued_at

    def test_expiry_matches_ttl(self) -> None:
        gate = AuthorizationGate(SECRET, ttl_seconds=600)
        before = dt.datetime.now(dt.UTC)

        issued = gate.issue_token("guest@example.com")

        delta = issued.expires_at - before
        assert dt.timedelta(seconds=598) <= delta <= dt.timedelta(seconds=601)

    def test_claims_carry_issuer(self, gate: AuthorizationGate) -> None:
        token = gate.issue_token("guest@example.com").token
        claims = jwt.decode(token, SECRET, algorithms=["HS256"], issuer=TOKEN_ISSUER)
        assert claims["sub"] == "guest@example.com"


class TestVerifyFailures:
    """Every rejection maps to a specific error code."""

    def test_missing_token(self, gate: AuthorizationGate) -> None:
        with pytest.raises(BookingError) as exc_info:
            gate.verify(None)
        assert exc_info.value.code == ErrorCode.AUTH_REQUIRED

    def test_empty_token(self, gate: AuthorizationGate) -> None:
        with pytest.raises(BookingError) as exc_info:
            gate.verify("")
        assert exc_info.value.code == ErrorCode.AUTH_REQUIRED

    def test_expired_token(self, gate: AuthorizationGate) -> None:
        past = dt.datetime.now(dt.UTC) - dt.timedelta(hours=2)
        token = jwt.encode(
            {
                "sub": "guest@example.com",
                "iat": past,
                "exp": past + dt.timedelta(hours=1),
                "iss": TOKEN_ISSUER,
            },
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(BookingError) as exc_info:
            gate.verify(token)
        assert exc_info.value.code == ErrorCode.SESSION_EXPIRED

    def test_wrong_secret(self, gate: AuthorizationGate) -> None:
        token = AuthorizationGate("another-secret-value").issue_token("guest@example.com").token

        with pytest.raises(BookingError) as exc_info:
            gate.verify(token)
        assert exc_info.value.code == ErrorCode.TOKEN_INVALID

    def test_garbage_token(self, gate: AuthorizationGate) -> None:
        with pytest.raises(BookingError) as exc_info:
            gate.verify("not-a-jwt")
        assert exc_info.value.code == ErrorCode.TOKEN_INVALID

    def test_wrong_issuer(self, gate: AuthorizationGate) -> None:
        now = dt.datetime.now(dt.UTC)
        token = jwt.encode(
            {
                "sub": "guest@example.com",
                "iat": now,
                "exp": now + dt.timedelta(hours=1),
                "iss": "someone-else",
            },
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(BookingError) as exc_info:
            gate.verify(token)
        assert exc_info.value.code == ErrorCode.TOKEN_INVALID

    def test_subject_not_an_email(self, gate: AuthorizationGate) -> None:
        now = dt.datetime.now(dt.UTC)
        token = jwt.encode(
            {"sub": "nobody", "iat": now, "exp": now + dt.timedelta(hours=1), "iss": TOKEN_ISSUER},
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(BookingError) as exc_info:
            gate.verify(token)
        assert exc_info.value.code == ErrorCode.TOKEN_INVALID


class TestAuthorizeOwner:
    def test_owner_passes(self, gate: AuthorizationGate) -> None:
        identity = gate.verify(gate.issue_token("guest@example.com").token)
        gate.authorize_owner(identity, "guest@example.com")

    def test_other_user_is_rejected(self, gate: AuthorizationGate) -> None:
        identity = gate.verify(gate.issue_token("guest@example.com").token)

        with pytest.raises(BookingError) as exc_info:
            gate.authorize_owner(identity, "other@example.com")
        assert exc_info.value.code == ErrorCode.USER_MISMATCH

    def test_revoke_is_a_no_op(self, gate: AuthorizationGate) -> None:
        token = gate.issue_token("guest@example.com").token
        gate.revoke()
        assert gate.verify(token).email == "guest@example.com"
