"""rplogout.errors.
~~~~~~~~~~~~~~~

Errors raised while validating an RP-Initiated Logout request. They are
regular :class:`authlib.oauth2.OAuth2Error` instances, so the hosting
server can render them with ``error()`` or ``error.get_body()``::

    try:
        result = validator.validate(logout_request, context)
    except LogoutError as error:
        status_code, body, headers = error()

https://openid.net/specs/openid-connect-rpinitiated-1_0.html#ValidationAndErrorHandling
"""

from authlib.oauth2.base import OAuth2Error

from .consts import ERROR_URI

__all__ = ["LogoutError", "InvalidRequestError", "InvalidTokenError"]


class LogoutError(OAuth2Error):
    """Base error of the logout request validation. The description
    only names the offending parameter or claim.
    """

    description_template = "OpenID Connect 1.0 Logout Request Parameter: {}"

    def __init__(self, parameter_name, uri=ERROR_URI, state=None):
        self.parameter_name = parameter_name
        description = self.description_template.format(parameter_name)
        super().__init__(description=description, uri=uri, state=state)

    def __call__(self, uri=None):
        return super().__call__(uri=uri or self.uri)


class InvalidRequestError(LogoutError):
    """A caller supplied parameter, ``client_id`` or
    ``post_logout_redirect_uri``, is inconsistent with the authorization
    the ID Token belongs to.
    """

    error = "invalid_request"


class InvalidTokenError(LogoutError):
    """The ``id_token_hint`` can not be tied to a valid issued ID Token,
    its client, the current End-User, or the End-User's session.

    Unlike :class:`authlib.oauth2.rfc6750.InvalidTokenError`, this is not a
    bearer token challenge, no ``WWW-Authenticate`` header is sent.
    """

    error = "invalid_token"
