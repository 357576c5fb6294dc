import logging
from datetime import UTC, datetime, timedelta
from uuid import UUID

from jose import JWTError, jwt

from taskpilot.config import SECRET, Config

logger = logging.getLogger(__name__)


class AccessToken:
    def __init__(self, user_id: UUID, created_date: datetime | None = None):
        self.user_id = user_id
        self.created_date = created_date or datetime.now(UTC).replace(tzinfo=None)
        self.lifetime = timedelta(seconds=Config.access_token_lifetime)

    @property
    def expires_date(self) -> datetime:
        return self.created_date + self.lifetime

    def to_token(self) -> str:
        return jwt.encode({Config.token_user_claim: str(self.user_id),
                           "iat": self.created_date.replace(tzinfo=UTC),
                           "exp": self.expires_date.replace(tzinfo=UTC)},
                          SECRET,
                          algorithm=Config.algorithm)

    @classmethod
    def from_token(cls, token: str) -> "AccessToken":
        """Decode and verify a token; expired or forged tokens raise JWTError."""
        payload = jwt.decode(token, SECRET, algorithms=[Config.algorithm])
        return cls(user_id=UUID(payload[Config.token_user_claim]),
                   created_date=datetime.fromtimestamp(payload["iat"], UTC).replace(tzinfo=None))


def caller_id_from_token(token: str | None) -> UUID | None:
    if not token:
        return None
    try:
        return AccessToken.from_token(token).user_id
    except (JWTError, KeyError, ValueError, TypeError) as exc:
        logger.debug("Rejected access token: %s", exc)
        return None


def caller_id_from_header(authorization: str | None) -> UUID | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer":
        return None
    return caller_id_from_token(token.strip())
