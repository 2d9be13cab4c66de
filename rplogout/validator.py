"""rplogout.validator.
~~~~~~~~~~~~~~~~~~

Validation of OpenID Connect RP-Initiated Logout requests per
`Section 2`_ and `Section 4`_. The ``id_token_hint`` is not decoded, it
is looked up in the authorization store which keeps the claims of every
issued ID Token.

.. _`Section 2`: https://openid.net/specs/openid-connect-rpinitiated-1_0.html#RPLogout
.. _`Section 4`: https://openid.net/specs/openid-connect-rpinitiated-1_0.html#ValidationAndErrorHandling
"""

from __future__ import annotations

import logging

from joserfc.errors import ClaimError
from joserfc.errors import JoseError

from .claims import IDTokenClaims
from .consts import ID_TOKEN_TYPE
from .context import AuthorizationServerContext
from .errors import InvalidRequestError
from .errors import InvalidTokenError
from .models import AuthenticatedPrincipal
from .models import Authorization
from .models import LogoutRequest
from .models import LogoutResult
from .models import RegisteredClient
from .models import SessionRecord
from .util import create_session_id_hash

log = logging.getLogger(__name__)

#: claims whose validation errors are reported under their own name
_NAMED_CLAIMS = ("iss", "sub", "aud")


class LogoutRequestValidator:
    """Validate a :class:`LogoutRequest` against the authorization store,
    the client registry and the session directory. Developers MUST
    implement the missing methods to connect their stores::

        class MyLogoutRequestValidator(LogoutRequestValidator):
            def query_authorization(self, token_value, token_type):
                return Authorization.query.filter_by(
                    token_type=token_type, token_value=token_value
                ).first()

            def get_client_by_id(self, registered_client_id):
                return Client.query.get(registered_client_id)

            def get_active_sessions(self, principal, include_expired=False):
                return session_registry.get_all_sessions(principal.name)

    Then validate each logout request in the server context it was
    received in::

        validator = MyLogoutRequestValidator(leeway=60)
        try:
            result = validator.validate(logout_request, context)
        except LogoutError as error:
            return handle_error_response(error)
    """

    #: Token type of the ``id_token_hint`` in the authorization store
    TOKEN_TYPE = ID_TOKEN_TYPE

    def __init__(self, leeway=0):
        # A small allowance of time, in seconds, to account for clock skew
        # when checking the "nbf" and "iat" claims.
        self.leeway = leeway

    def validate(
        self, request: LogoutRequest, context: AuthorizationServerContext
    ) -> LogoutResult:
        """Validate the logout request.

        :param request: The :class:`LogoutRequest` to validate
        :param context: The :class:`AuthorizationServerContext` of this request
        :returns: :class:`LogoutResult` of the authenticated logout request
        :raises InvalidTokenError: If the ID Token can not be tied to the
            client, the principal or the session
        :raises InvalidRequestError: If ``client_id`` or
            ``post_logout_redirect_uri`` do not match the ID Token's client
        """
        authorization = self.query_authorization(
            request.id_token_hint, self.TOKEN_TYPE
        )
        id_token = self._validate_id_token(authorization)

        claims = id_token.claims
        self.validate_id_token_claims(claims, context)

        audience = claims.audience
        if not audience:
            log.debug("Missing 'aud' claim in ID Token of %r", authorization)
            raise InvalidTokenError("aud")

        client = self.get_client_by_id(authorization.registered_client_id)
        if client is None:
            log.debug(
                "Registered client %r of %r does not exist",
                authorization.registered_client_id,
                authorization,
            )
            raise InvalidTokenError("id_token_hint")

        self._validate_client(request, client, audience)

        session = None
        principal = request.principal
        if principal.is_authenticated:
            if not claims.sub or claims.sub != principal.name:
                log.debug("ID Token subject does not match %r", principal)
                raise InvalidTokenError("sub")
            session = self.validate_session(request, claims)

        log.debug("Validated logout request of %r for %r", principal, client)
        return LogoutResult(
            principal=principal,
            id_token=id_token,
            session_id=session.session_id if session else None,
            client_id=client.client_id,
            post_logout_redirect_uri=request.post_logout_redirect_uri,
            state=request.state,
            client=client,
        )

    def _validate_id_token(self, authorization: Authorization | None):
        if authorization is None:
            log.debug("No authorization found for the id_token_hint")
            raise InvalidTokenError("id_token_hint")

        id_token = authorization.get_token(self.TOKEN_TYPE)
        if id_token is None or id_token.invalidated:
            log.debug("ID Token of %r is not active", authorization)
            raise InvalidTokenError("id_token_hint")
        return id_token

    def validate_id_token_claims(
        self, claims: IDTokenClaims, context: AuthorizationServerContext
    ):
        """Validate the issuer of the ID Token and that it is already in
        use. Expired ID Tokens are accepted.
        """
        # rpinitiated §2: "When an id_token_hint parameter is present, the OP MUST
        # validate that it was the issuer of the ID Token."
        claims = IDTokenClaims(
            claims, options={"iss": {"essential": True, "value": context.issuer}}
        )
        try:
            claims.validate(leeway=self.leeway)
        except ClaimError as exc:
            log.debug("Invalid ID Token claims: %r", exc)
            if exc.claim in _NAMED_CLAIMS:
                raise InvalidTokenError(exc.claim) from exc
            raise InvalidTokenError("id_token_hint") from exc
        except JoseError as exc:
            log.debug("Invalid ID Token claims: %r", exc)
            raise InvalidTokenError("id_token_hint") from exc

    def _validate_client(
        self, request: LogoutRequest, client: RegisteredClient, audience: list[str]
    ):
        if client.client_id not in audience:
            log.debug("ID Token audience %r does not contain %r", audience, client)
            raise InvalidTokenError("aud")

        # rpinitiated §2: "When both client_id and id_token_hint are present, the OP
        # MUST verify that the Client Identifier matches the one used as the
        # audience of the ID Token."
        if request.client_id and request.client_id != client.client_id:
            log.debug("client_id %r does not match %r", request.client_id, client)
            raise InvalidRequestError("client_id")

        redirect_uri = request.post_logout_redirect_uri
        if redirect_uri and not client.check_post_logout_redirect_uri(redirect_uri):
            log.debug("post_logout_redirect_uri %r is not registered", redirect_uri)
            raise InvalidRequestError("post_logout_redirect_uri")

    def validate_session(
        self, request: LogoutRequest, claims: IDTokenClaims
    ) -> SessionRecord | None:
        """Tie the ID Token to the End-User's current session through the
        ``sid`` claim, and return the matched session.
        """
        sessions = self.get_active_sessions(request.principal, include_expired=False)
        session = None
        if request.session_id:
            session = next(
                (s for s in sessions if s.session_id == request.session_id), None
            )

        sid = claims.sid
        if sid:
            if session is not None and sid != create_session_id_hash(
                session.session_id
            ):
                log.debug("ID Token 'sid' does not match session %r", session)
                raise InvalidTokenError("sid")
            return session

        if session is not None:
            log.debug("Missing 'sid' claim for session %r", session)
        else:
            log.debug("No active session matches the ID Token")
        raise InvalidTokenError("sid")

    def query_authorization(
        self, token_value: str, token_type: str
    ) -> Authorization | None:
        """Fetch the authorization the token was issued for.

        :param token_value: The ``id_token_hint`` value
        :param token_type: Always :attr:`TOKEN_TYPE`
        :returns: :class:`Authorization` or None
        """
        raise NotImplementedError()

    def get_client_by_id(self, registered_client_id: str) -> RegisteredClient | None:
        """Fetch a client by its identifier in the client registry.

        :param registered_client_id: :attr:`Authorization.registered_client_id`
        :returns: :class:`RegisteredClient` or None
        """
        raise NotImplementedError()

    def get_active_sessions(
        self, principal: AuthenticatedPrincipal, include_expired: bool = False
    ) -> list[SessionRecord]:
        """Fetch the sessions of the principal. Expired sessions MUST be
        left out unless ``include_expired`` is true.

        :param principal: The authenticated principal
        :param include_expired: Whether to include expired sessions
        :returns: list of :class:`SessionRecord`
        """
        raise NotImplementedError()
