import datetime
import time

import pytest
from joserfc.errors import InvalidClaimError
from joserfc.errors import MissingClaimError

from rplogout import IDTokenClaims
from rplogout.claims import LogoutHintClaimsRegistry


def test_registered_claims_as_attributes():
    claims = IDTokenClaims({"iss": "https://provider.test", "sub": "user-1"})
    assert claims.iss == "https://provider.test"
    assert claims.sub == "user-1"
    assert claims.sid is None

    with pytest.raises(AttributeError):
        claims.email  # noqa: B018


def test_audience():
    assert IDTokenClaims({}).audience == []
    assert IDTokenClaims({"aud": ""}).audience == []
    assert IDTokenClaims({"aud": "client-1"}).audience == ["client-1"]
    assert IDTokenClaims({"aud": ("client-1", "client-2")}).audience == [
        "client-1",
        "client-2",
    ]


def test_datetime_values():
    issued_at = datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc)
    claims = IDTokenClaims({"iat": issued_at})
    assert claims["iat"] == 1704067200
    assert claims.issued_at == issued_at
    assert claims.expires_at is None


def test_unsupported_values():
    with pytest.raises(ValueError, match="address"):
        IDTokenClaims({"address": {"country": "FI"}})

    with pytest.raises(ValueError, match="amr"):
        IDTokenClaims({"amr": ["pwd", 1]})


def test_validate_issuer():
    claims = IDTokenClaims(
        {"iss": "https://provider.test"},
        options={"iss": {"essential": True, "value": "https://provider.test"}},
    )
    claims.validate()

    claims = IDTokenClaims(
        {"iss": "https://other.test"},
        options={"iss": {"essential": True, "value": "https://provider.test"}},
    )
    with pytest.raises(InvalidClaimError):
        claims.validate()

    claims = IDTokenClaims(
        {}, options={"iss": {"essential": True, "value": "https://provider.test"}}
    )
    with pytest.raises(MissingClaimError):
        claims.validate()


def test_expired_claims_are_accepted():
    registry = LogoutHintClaimsRegistry()
    registry.validate({"exp": int(time.time()) - 3600})


def test_not_before_is_checked():
    registry = LogoutHintClaimsRegistry()
    with pytest.raises(InvalidClaimError):
        registry.validate({"nbf": int(time.time()) + 3600})

    registry = LogoutHintClaimsRegistry(leeway=7200)
    registry.validate({"nbf": int(time.time()) + 3600})


@pytest.mark.parametrize(
    "claims",
    [
        {"exp": "soon"},
        {"iat": "1704067200"},
        {"nbf": None},
        {"auth_time": True},
        {"exp": False},
    ],
)
def test_invalid_numeric_dates(claims):
    with pytest.raises(ValueError, match=next(iter(claims))):
        IDTokenClaims(claims)


def test_boolean_values():
    with pytest.raises(ValueError, match="email_verified"):
        IDTokenClaims({"email_verified": True})
