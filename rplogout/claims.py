from __future__ import annotations

import calendar
import datetime
from typing import Any
from typing import Union

from joserfc.jwt import BaseClaimsRegistry
from joserfc.jwt import ClaimsOption
from joserfc.jwt import JWTClaimsRegistry

#: A claim value is a string, a list of strings or a NumericDate
ClaimValue = Union[str, list[str], int, float]


class BaseClaims(dict):
    registry_cls = BaseClaimsRegistry
    REGISTERED_CLAIMS = []

    def __init__(
        self,
        claims: dict[str, Any],
        options: dict[str, ClaimsOption] | None = None,
    ):
        super().__init__(claims)
        self.options = options or {}

    def __getattr__(self, key):
        try:
            return object.__getattribute__(self, key)
        except AttributeError as error:
            if key in self.REGISTERED_CLAIMS:
                return self.get(key)
            raise error

    def validate(self, now=None, leeway=0):
        validator = self.registry_cls(**self.options)
        validator.validate(self)


class LogoutHintClaimsRegistry(JWTClaimsRegistry):
    """Claims registry for ID Tokens presented as ``id_token_hint``.
    ``exp`` is not checked, ``nbf`` and ``iat`` still are.
    """

    # rpinitiated §2: "The OP SHOULD accept ID Tokens when the RP identified by the
    # ID Token's aud claim and/or sid claim has a current session or had a
    # recent session at the OP, even when the exp time has passed."
    def validate_exp(self, value: int) -> None:
        pass


class IDTokenClaims(BaseClaims):
    """Claims of an issued ID Token, as recorded in the authorization
    store when the token was issued.

    Values are restricted to strings, lists of strings and NumericDate
    timestamps. ``datetime`` values are converted to timestamps::

        claims = IDTokenClaims({
            "iss": "https://provider.test",
            "sub": "user-1",
            "aud": "client-id",
            "iat": datetime.datetime.now(datetime.timezone.utc),
        })
        claims.audience  # ["client-id"]
    """

    registry_cls = LogoutHintClaimsRegistry
    REGISTERED_CLAIMS = [
        "iss",
        "sub",
        "aud",
        "exp",
        "iat",
        "nbf",
        "auth_time",
        "nonce",
        "azp",
        "sid",
    ]

    def __init__(
        self,
        claims: dict[str, Any],
        options: dict[str, ClaimsOption] | None = None,
    ):
        claims = {key: _convert_value(key, claims[key]) for key in claims}
        super().__init__(claims, options)

    @property
    def audience(self) -> list[str]:
        aud = self.get("aud")
        if not aud:
            return []
        if isinstance(aud, str):
            return [aud]
        return list(aud)

    @property
    def issued_at(self):
        return _to_datetime(self.get("iat"))

    @property
    def expires_at(self):
        return _to_datetime(self.get("exp"))

    def validate(self, now=None, leeway=0):
        validator = self.registry_cls(now, leeway, **self.options)
        validator.validate(self)


#: claims holding a NumericDate
NUMERIC_DATE_CLAIMS = ("exp", "iat", "nbf", "auth_time")


def _convert_value(key: str, value: Any) -> ClaimValue:
    if isinstance(value, datetime.datetime):
        return calendar.timegm(value.utctimetuple())
    if isinstance(value, bool):
        raise ValueError(f'Unsupported value for claim "{key}": {value!r}')
    if key in NUMERIC_DATE_CLAIMS:
        if isinstance(value, (int, float)):
            return value
        raise ValueError(f'Claim "{key}" must be a NumericDate value, got {value!r}')
    if isinstance(value, (str, int, float)):
        return value
    if isinstance(value, (list, tuple, set, frozenset)):
        if all(isinstance(v, str) for v in value):
            return list(value)
    raise ValueError(f'Unsupported value for claim "{key}": {value!r}')


def _to_datetime(value):
    if value is None:
        return None
    return datetime.datetime.fromtimestamp(value, datetime.timezone.utc)
