"""Client metadata for OpenID Connect RP-Initiated Logout 1.0.

https://openid.net/specs/openid-connect-rpinitiated-1_0.html#ClientMetadata
"""

from joserfc.errors import InvalidClaimError

from authlib.common.security import is_secure_transport
from authlib.common.urls import is_valid_url

from .claims import BaseClaims


class ClientMetadataClaims(BaseClaims):
    """Validate the ``post_logout_redirect_uris`` of a client before it is
    turned into a :class:`rplogout.models.RegisteredClient`::

        claims = ClientMetadataClaims(client_metadata)
        claims.validate()
    """

    REGISTERED_CLAIMS = [
        "redirect_uris",
        "post_logout_redirect_uris",
        "token_endpoint_auth_method",
    ]

    def validate(self, now=None, leeway=0):
        super().validate(now, leeway)
        self._validate_post_logout_redirect_uris()

    def _validate_post_logout_redirect_uris(self):
        # rpinitiated §3.1: "post_logout_redirect_uris - Array of URLs supplied
        # by the RP to which it MAY request that the End-User's User Agent be
        # redirected using the post_logout_redirect_uri parameter after a
        # logout has been performed. These URLs SHOULD use the https scheme
        # [...]; however, they MAY use the http scheme, provided that the
        # Client Type is confidential."
        uris = self.post_logout_redirect_uris
        if not uris:
            return

        if isinstance(uris, str) or not isinstance(uris, (list, tuple)):
            raise InvalidClaimError("post_logout_redirect_uris")

        is_public = self.token_endpoint_auth_method == "none"

        for uri in uris:
            if not isinstance(uri, str) or not is_valid_url(uri):
                raise InvalidClaimError("post_logout_redirect_uris")

            if is_public and not is_secure_transport(uri):
                raise ValueError(
                    '"post_logout_redirect_uris" MUST use "https" scheme for public clients'
                )
