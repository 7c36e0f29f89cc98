import httpx
import logging

from pydantic import ValidationError

from automate_api.config.settings import Settings
from automate_api.domain.errors import TransportError
from automate_api.domain.models.auth_request import (
    AuthRequest,
    RefreshRequest
)
from automate_api.domain.models.token_response import TokenResponse
from automate_api.utils.server import base_uri

LOGGER = logging.getLogger(__name__)


class AutomateClient:
    def __init__(self, settings: Settings, transport: httpx.BaseTransport | None = None):
        self.__settings = settings
        self.__transport = transport

    def base_uri(self, server: str) -> str:
        return base_uri(server, self.__settings.CWA_API_PATH)

    def token_url(self, server: str, refresh: bool = False) -> str:
        url = f"{self.base_uri(server)}/{self.__settings.CWA_TOKEN_PATH.strip('/')}"

        if refresh:
            url += "/" + self.__settings.CWA_REFRESH_SUFFIX.strip("/")

        return url

    def get_headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def request_token(self, server: str, request: AuthRequest) -> TokenResponse:
        url = self.token_url(server, refresh=isinstance(request, RefreshRequest))

        LOGGER.debug("POST %s", url)

        try:
            with httpx.Client(
                timeout=self.__settings.CWA_HTTP_TIMEOUT,
                verify=self.__settings.CWA_VERIFY_TLS,
                transport=self.__transport
            ) as c:
                r = c.post(url, headers=self.get_headers(), json=request.payload())
        except httpx.HTTPError as e:
            raise TransportError(f"POST {url} failed: {e}") from e

        if r.status_code >= 400:
            raise TransportError(
                f"POST {url} returned {r.status_code}: {r.text}",
                status_code=r.status_code
            )

        try:
            payload = r.json()
        except ValueError as e:
            raise TransportError(f"POST {url} returned a non-JSON body", status_code=r.status_code) from e

        if not isinstance(payload, dict):
            raise TransportError(f"POST {url} returned an unexpected body", status_code=r.status_code)

        try:
            return TokenResponse.model_validate(payload)
        except ValidationError as e:
            raise TransportError(f"POST {url} returned a malformed token response: {e}", status_code=r.status_code) from e
