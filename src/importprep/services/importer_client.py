"""REST client for the chat server's importer endpoints."""

import logging
from typing import Any

import httpx

from importprep.config import ServerConfig, get_config
from importprep.errors import BackendError
from importprep.models.import_data import ImportFileData, ImportOperation

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


class ImporterClient:
    """Calls getImportFileData, getCurrentImportOperation and startImport."""

    def __init__(
        self,
        server: ServerConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._server = server or get_config().server
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(
            base_url=self._server.url,
            timeout=self._server.timeout_seconds,
        )

    def _headers(self) -> dict[str, str]:
        headers = {}
        if self._server.user_id:
            headers["X-User-Id"] = self._server.user_id
        token = self._server.auth_token.get_secret_value()
        if token:
            headers["X-Auth-Token"] = token
        return headers

    async def _request(self, method: str, endpoint: str, **kwargs: Any) -> Any:
        url = f"{API_PREFIX}/{endpoint}"
        try:
            response = await self._http.request(method, url, headers=self._headers(), **kwargs)
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise BackendError(f"Request to {endpoint} failed: {e}") from e

        if response.is_error:
            details = None
            try:
                body = response.json()
                if isinstance(body, dict):
                    details = body.get("error")
            except ValueError:
                pass
            logger.warning("%s %s returned %d", method, url, response.status_code)
            raise BackendError(
                f"{endpoint} returned HTTP {response.status_code}",
                status_code=response.status_code,
                details=details,
            )

        if not response.content:
            return None
        return response.json()

    async def get_import_file_data(self) -> ImportFileData | None:
        """Fetch the prepared file snapshot; None when no import is set up."""
        data = await self._request("GET", "getImportFileData")
        if data is None:
            return None
        return ImportFileData.model_validate(data)

    async def get_current_import_operation(self) -> ImportOperation:
        """Fetch the current import operation descriptor."""
        data = await self._request("GET", "getCurrentImportOperation")
        if not isinstance(data, dict) or "operation" not in data:
            raise BackendError("getCurrentImportOperation returned no operation")
        return ImportOperation.model_validate(data["operation"] or {})

    async def start_import(self, payload: dict[str, Any]) -> None:
        """Ask the server to start importing the given selection."""
        await self._request("POST", "startImport", json=payload)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()
