"""
rplogout
~~~~~~~~

Validation engine of OpenID Connect RP-Initiated Logout requests for
authorization servers. It ties an ``id_token_hint`` to the issued ID
Token, its registered client, the End-User and the End-User's session.

https://openid.net/specs/openid-connect-rpinitiated-1_0.html
"""

from .claims import IDTokenClaims
from .consts import ID_TOKEN_TYPE
from .consts import version
from .context import AuthorizationServerContext
from .errors import InvalidRequestError
from .errors import InvalidTokenError
from .errors import LogoutError
from .models import ANONYMOUS
from .models import AnonymousPrincipal
from .models import AuthenticatedPrincipal
from .models import Authorization
from .models import LogoutRequest
from .models import LogoutResult
from .models import RegisteredClient
from .models import SessionRecord
from .models import Token
from .registration import ClientMetadataClaims
from .util import create_session_id_hash
from .validator import LogoutRequestValidator

__version__ = version

__all__ = [
    "ID_TOKEN_TYPE",
    "ANONYMOUS",
    "AnonymousPrincipal",
    "AuthenticatedPrincipal",
    "Authorization",
    "AuthorizationServerContext",
    "ClientMetadataClaims",
    "IDTokenClaims",
    "InvalidRequestError",
    "InvalidTokenError",
    "LogoutError",
    "LogoutRequest",
    "LogoutRequestValidator",
    "LogoutResult",
    "RegisteredClient",
    "SessionRecord",
    "Token",
    "create_session_id_hash",
]
