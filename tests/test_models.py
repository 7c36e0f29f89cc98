"""
Unit tests for the request, response and session models.
"""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from automate_api.domain.models.auth_request import (
    FullAuthRequest,
    RefreshRequest,
    clean_passcode
)
from automate_api.domain.models.credential import Credential
from automate_api.domain.models.session import Session
from automate_api.domain.models.token_response import TokenResponse


def test_full_auth_payload_without_passcode():
    request = FullAuthRequest(username="admin", password="pw")

    assert request.payload() == {"username": "admin", "password": "pw"}


def test_full_auth_payload_strips_passcode_whitespace():
    request = FullAuthRequest(username="admin", password="pw", two_factor_passcode=" 123 456\n")

    assert request.payload() == {"username": "admin", "password": "pw", "TwoFactorPasscode": "123456"}


def test_clean_passcode_handles_none():
    assert clean_passcode(None) == ""


@pytest.mark.parametrize("raw", ["Bearer abc.def", "bearer abc.def", "abc.def", "  Bearer   abc.def "])
def test_refresh_payload_drops_bearer_prefix(raw):
    assert RefreshRequest(token=raw).payload() == "abc.def"


def test_password_is_not_rendered():
    credential = Credential(username="admin", password="s3cret")

    assert "s3cret" not in repr(credential)
    assert "s3cret" not in repr(FullAuthRequest(username="admin", password=credential.password))


def test_credential_requires_username():
    with pytest.raises(ValidationError):
        Credential(username="   ", password="pw")


def test_token_response_reads_server_field_names():
    response = TokenResponse.model_validate({
        "accesstoken": "tok",
        "ExpirationDate": "2030-01-01T00:00:00Z",
        "IsTwoFactorRequired": False,
        "TokenType": "ignored",
    })

    assert response.access_token == "tok"
    assert response.expiration_date == datetime(2030, 1, 1, tzinfo=timezone.utc)
    assert response.is_two_factor_required is False
    assert response.has_token


def test_token_response_accepts_pascal_case_token():
    assert TokenResponse.model_validate({"AccessToken": "tok"}).access_token == "tok"


def test_token_response_defaults_are_empty():
    response = TokenResponse.model_validate({})

    assert response.access_token == ""
    assert response.expiration_date is None
    assert response.is_two_factor_required is None
    assert not response.has_token


def _session(**kwargs) -> Session:
    data = {
        "server": "host.example.com",
        "base_uri": "https://host.example.com/cwa/api",
        "authorization": "Bearer tok",
    }
    data.update(kwargs)
    return Session(**data)


def test_session_rejects_empty_token():
    with pytest.raises(ValidationError):
        _session(authorization="Bearer ")


def test_session_headers_and_token():
    session = _session()

    assert session.access_token == "tok"
    assert session.headers()["Authorization"] == "Bearer tok"
    assert session.headers()["Content-Type"] == "application/json"


def test_session_without_expiration_never_expires():
    session = _session()

    assert not session.is_expired
    assert session.is_valid


def test_session_expiry():
    past = datetime.now(timezone.utc) - timedelta(minutes=1)
    future = datetime.now(timezone.utc) + timedelta(hours=1)

    assert _session(expires_at=past).is_expired
    assert not _session(expires_at=future).is_expired


def test_naive_expiration_is_treated_as_utc():
    naive_past = datetime.now(timezone.utc).replace(tzinfo=None) - timedelta(minutes=1)

    assert _session(expires_at=naive_past).is_expired
