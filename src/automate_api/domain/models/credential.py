from pydantic import (
    BaseModel,
    SecretStr,
    StringConstraints
)
from typing import Annotated


class Credential(BaseModel):
    username: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    password: SecretStr
