import hashlib

from joserfc.util import to_bytes
from joserfc.util import to_str
from joserfc.util import urlsafe_b64encode


def create_session_id_hash(session_id: str) -> str:
    """Create the ``sid`` claim value of a live session identifier.

    The raw session identifier never leaves the server, the ID Token
    carries the base64url encoded SHA-256 digest of it instead. The
    digest is not keyed, changing the algorithm breaks the correlation
    of every ID Token issued before.
    """
    digest = hashlib.sha256(to_bytes(session_id)).digest()
    return to_str(urlsafe_b64encode(digest))
