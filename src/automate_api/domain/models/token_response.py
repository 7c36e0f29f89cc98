import logging
import re

from datetime import (
    datetime,
    timezone
)
from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator
)
from typing import Any

LOGGER = logging.getLogger(__name__)

ASPNET_DATE = re.compile(r"^/Date\((-?\d+)(?:[+-]\d{4})?\)/$")


class TokenResponse(BaseModel):
    access_token          : str             = Field(default="", validation_alias=AliasChoices("accesstoken", "AccessToken", "accessToken"))
    expiration_date       : datetime | None = Field(default=None, validation_alias=AliasChoices("ExpirationDate", "expirationDate", "expirationdate"))
    is_two_factor_required: bool | None     = Field(default=None, validation_alias=AliasChoices("IsTwoFactorRequired", "isTwoFactorRequired", "istwofactorrequired"))

    model_config = ConfigDict(extra="ignore")

    @field_validator("expiration_date", mode="wrap")
    @classmethod
    def lenient_expiration(cls, v: Any, handler: ValidatorFunctionWrapHandler) -> datetime | None:
        if isinstance(v, str):
            match = ASPNET_DATE.match(v.strip())

            if match:
                return datetime.fromtimestamp(int(match.group(1)) / 1000, tz=timezone.utc)

        try:
            return handler(v)
        except ValidationError:
            LOGGER.warning("Unrecognized ExpirationDate %r; keeping the token without an expiration", v)

            return None

    @property
    def has_token(self) -> bool:
        return bool(self.access_token)
