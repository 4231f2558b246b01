"""Principal: the authenticated identity attached to one request."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Principal:
    """Identity derived from a validated access token.

    Built once per request by the authentication middleware and discarded at
    request end; the signed token is the durable artifact.
    """

    account_id: int
    role: str
    issued_at: datetime
    expires_at: datetime
