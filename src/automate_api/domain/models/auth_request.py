import re

from pydantic import (
    BaseModel,
    SecretStr,
    field_validator
)
from typing import Any

BEARER_PREFIX = re.compile(r"^\s*bearer\s+", re.IGNORECASE)


def clean_passcode(code: str | None) -> str:
    """Strip every whitespace character out of a one-time code."""
    if not code:
        return ""

    return re.sub(r"\s+", "", code)


class FullAuthRequest(BaseModel):
    username           : str
    password           : SecretStr
    two_factor_passcode: str = ""

    @field_validator("two_factor_passcode", mode="before")
    @classmethod
    def strip_passcode(cls, v: Any) -> str:
        return clean_passcode(v)

    def payload(self) -> dict[str, str]:
        body = {
            "username": self.username,
            "password": self.password.get_secret_value(),
        }

        if self.two_factor_passcode:
            body["TwoFactorPasscode"] = self.two_factor_passcode

        return body


class RefreshRequest(BaseModel):
    token: str

    @field_validator("token", mode="before")
    @classmethod
    def strip_bearer(cls, v: Any) -> str:
        if isinstance(v, str):
            return BEARER_PREFIX.sub("", v).strip()

        return v

    def payload(self) -> str:
        return self.token


AuthRequest = FullAuthRequest | RefreshRequest
