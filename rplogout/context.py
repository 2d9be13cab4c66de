from dataclasses import dataclass

from authlib.common.urls import is_valid_url


@dataclass(frozen=True)
class AuthorizationServerContext:
    """The authorization server environment a logout request is validated
    in. Create one per request and pass it to
    :meth:`LogoutRequestValidator.validate`::

        context = AuthorizationServerContext(issuer="https://provider.test")
        result = validator.validate(logout_request, context)
    """

    #: Issuer Identifier of this authorization server, compared with the
    #: ``iss`` claim of the ID Token
    issuer: str

    def __post_init__(self):
        if not self.issuer or not is_valid_url(self.issuer, fragments_allowed=False):
            raise ValueError(f'"issuer" MUST be a valid URL, got {self.issuer!r}')
