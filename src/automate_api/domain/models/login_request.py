from pydantic import (
    BaseModel,
    SecretStr
)


class LoginRequest(BaseModel):
    server         : str | None       = None
    username       : str | None       = None
    password       : SecretStr | None = None
    token          : str | None       = None
    two_factor_code: str | None       = None
    force          : bool             = False
