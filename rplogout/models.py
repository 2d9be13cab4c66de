"""rplogout.models.
~~~~~~~~~~~~~~~

Value objects exchanged between the logout validator and the stores it
reads from. The validator never modifies any of them.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from dataclasses import field
from typing import Any
from typing import ClassVar
from typing import Union

from authlib.common.urls import add_params_to_uri

from .claims import IDTokenClaims
from .consts import ID_TOKEN_TYPE
from .registration import ClientMetadataClaims


@dataclass(frozen=True)
class AnonymousPrincipal:
    """The End-User agent is not authenticated at the OP."""

    is_authenticated: ClassVar[bool] = False

    @property
    def name(self):
        return None


@dataclass(frozen=True)
class AuthenticatedPrincipal:
    """The End-User currently authenticated at the OP."""

    name: str
    is_authenticated: ClassVar[bool] = True


Principal = Union[AnonymousPrincipal, AuthenticatedPrincipal]

ANONYMOUS = AnonymousPrincipal()


@dataclass
class Token:
    """An issued token as recorded in the authorization store."""

    token_value: str
    claims: IDTokenClaims = field(default_factory=lambda: IDTokenClaims({}))
    #: True once the token was consumed, revoked or logged out
    invalidated: bool = False

    def __post_init__(self):
        if not isinstance(self.claims, IDTokenClaims):
            self.claims = IDTokenClaims(self.claims)

    @property
    def issued_at(self):
        return self.claims.issued_at

    @property
    def expires_at(self):
        return self.claims.expires_at

    @property
    def is_active(self):
        return not self.invalidated


@dataclass
class Authorization:
    """One grant of a registered client to a principal, with the tokens
    issued for it, keyed by token type.
    """

    id: str
    registered_client_id: str
    principal_name: str
    tokens: dict[str, Token] = field(default_factory=dict)

    def get_token(self, token_type: str) -> Token | None:
        return self.tokens.get(token_type)

    @property
    def id_token(self) -> Token | None:
        return self.get_token(ID_TOKEN_TYPE)


@dataclass(frozen=True)
class RegisteredClient:
    #: Identifier of the client in the client registry
    id: str
    client_id: str
    redirect_uris: frozenset[str] = frozenset()
    post_logout_redirect_uris: frozenset[str] = frozenset()

    def check_post_logout_redirect_uri(self, post_logout_redirect_uri: str) -> bool:
        # rpinitiated §3: "The OP MUST NOT perform post-logout redirection if
        # the post_logout_redirect_uri value supplied does not exactly match
        # one of the previously registered post_logout_redirect_uris values."
        return post_logout_redirect_uri in self.post_logout_redirect_uris

    @classmethod
    def from_metadata(
        cls, id: str, client_id: str, metadata: dict[str, Any]
    ) -> RegisteredClient:
        """Create a client from its registered metadata, validating the
        ``post_logout_redirect_uris`` with :class:`ClientMetadataClaims`.
        """
        claims = ClientMetadataClaims(metadata)
        claims.validate()
        return cls(
            id=id,
            client_id=client_id,
            redirect_uris=frozenset(claims.redirect_uris or ()),
            post_logout_redirect_uris=frozenset(claims.post_logout_redirect_uris or ()),
        )


@dataclass(frozen=True)
class SessionRecord:
    """A session of a principal, as known by the session directory."""

    principal: Principal
    session_id: str
    last_request: datetime.datetime
    expired: bool = False


@dataclass(frozen=True)
class LogoutRequest:
    """An RP-Initiated Logout request, as parsed by the hosting server."""

    id_token_hint: str
    principal: Principal = ANONYMOUS
    #: Identifier of the End-User's current session at the OP
    session_id: str | None = None
    client_id: str | None = None
    post_logout_redirect_uri: str | None = None
    state: str | None = None

    def __post_init__(self):
        if not self.id_token_hint:
            raise ValueError("id_token_hint cannot be empty")
        if self.principal is None:
            raise ValueError("principal cannot be None")


@dataclass(frozen=True)
class LogoutResult:
    """A validated logout request, returned by
    :meth:`LogoutRequestValidator.validate`. The hosting server terminates
    the session and redirects to :attr:`redirect_uri` when there is one.
    """

    principal: Principal
    id_token: Token = field(repr=False)
    #: Identifier of the matched live session, not the hashed ``sid``
    session_id: str | None
    client_id: str
    post_logout_redirect_uri: str | None = None
    state: str | None = None
    client: RegisteredClient | None = field(default=None, repr=False)
    authenticated: bool = True

    @property
    def redirect_uri(self) -> str | None:
        if not self.post_logout_redirect_uri:
            return None
        # rpinitiated §3: "If the post_logout_redirect_uri value is provided
        # and the preceding conditions are met, the OP MUST include the
        # state value if the RP's initial Logout Request included state."
        if self.state:
            return add_params_to_uri(
                self.post_logout_redirect_uri, {"state": self.state}
            )
        return self.post_logout_redirect_uri
