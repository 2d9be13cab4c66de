import datetime
import time

import pytest

from rplogout import AuthenticatedPrincipal
from rplogout import Authorization
from rplogout import AuthorizationServerContext
from rplogout import LogoutRequestValidator
from rplogout import RegisteredClient
from rplogout import SessionRecord
from rplogout import Token

ISSUER = "https://provider.test"


class MyLogoutRequestValidator(LogoutRequestValidator):
    """Validator reading from in-memory stores."""

    def __init__(self, leeway=0):
        super().__init__(leeway=leeway)
        self.authorizations = []
        self.clients = {}
        self.sessions = []

    def query_authorization(self, token_value, token_type):
        for authorization in self.authorizations:
            token = authorization.get_token(token_type)
            if token is not None and token.token_value == token_value:
                return authorization
        return None

    def get_client_by_id(self, registered_client_id):
        return self.clients.get(registered_client_id)

    def get_active_sessions(self, principal, include_expired=False):
        return [
            s
            for s in self.sessions
            if s.principal == principal and (include_expired or not s.expired)
        ]


@pytest.fixture
def context():
    return AuthorizationServerContext(issuer=ISSUER)


@pytest.fixture
def principal():
    return AuthenticatedPrincipal("principal")


@pytest.fixture
def client():
    return RegisteredClient(
        id="registration-1",
        client_id="client-1",
        redirect_uris=frozenset(["https://client.test/callback-1"]),
        post_logout_redirect_uris=frozenset(
            ["https://client.test/logout", "https://client.test/logged-out"]
        ),
    )


@pytest.fixture
def validator(client):
    validator = MyLogoutRequestValidator()
    validator.clients[client.id] = client
    return validator


@pytest.fixture
def id_token_claims(principal, client):
    now = int(time.time())
    return {
        "iss": ISSUER,
        "sub": principal.name,
        "aud": [client.client_id],
        "iat": now - 60,
        "exp": now + 60,
    }


@pytest.fixture
def save_id_token(validator, client, principal):
    """Record an issued ID Token in the authorization store."""

    def save(claims, token_value="id-token", invalidated=False):
        authorization = Authorization(
            id=f"authorization-{len(validator.authorizations) + 1}",
            registered_client_id=client.id,
            principal_name=principal.name,
            tokens={
                "id_token": Token(
                    token_value=token_value,
                    claims=claims,
                    invalidated=invalidated,
                )
            },
        )
        validator.authorizations.append(authorization)
        return authorization

    return save


@pytest.fixture
def save_session(validator):
    """Record a session of the principal in the session directory."""

    def save(principal, session_id, expired=False):
        session = SessionRecord(
            principal=principal,
            session_id=session_id,
            last_request=datetime.datetime.now(datetime.timezone.utc),
            expired=expired,
        )
        validator.sessions.append(session)
        return session

    return save
