from datetime import (
    datetime,
    timezone
)
from pydantic import (
    BaseModel,
    field_validator
)

from automate_api.domain.models.auth_request import BEARER_PREFIX


class Session(BaseModel):
    """Bearer credentials for one Automate server, shared by every API call."""

    server       : str
    base_uri     : str
    authorization: str
    expires_at   : datetime | None = None

    @field_validator("authorization")
    @classmethod
    def require_token(cls, v: str) -> str:
        if not BEARER_PREFIX.sub("", v).strip():
            raise ValueError("authorization must carry a non-empty access token")

        return v

    @property
    def access_token(self) -> str:
        return BEARER_PREFIX.sub("", self.authorization)

    @property
    def is_expired(self) -> bool:
        if self.expires_at is None:
            return False

        expires_at = self.expires_at

        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)

        return datetime.now(timezone.utc) >= expires_at

    @property
    def is_valid(self) -> bool:
        return not self.is_expired

    def headers(self) -> dict[str, str]:
        return {
            "Authorization": self.authorization,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
