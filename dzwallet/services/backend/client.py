"""RPC client for the wallet backend-as-a-service"""

import time
from typing import Any, Dict, Optional

import httpx

from dzwallet.core.config import settings
from dzwallet.core.exception import BackendAPIError
from dzwallet.core.logging import log_backend_call, logger

RPC_PATH = "/rest/v1/rpc/{name}"


class BackendClient:
    """HTTP client for the backend's stored-procedure (RPC) endpoints"""

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url or settings.BACKEND_URL
        self.api_key = api_key if api_key is not None else settings.BACKEND_API_KEY
        self.timeout = timeout or settings.BACKEND_TIMEOUT
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _auth_headers(self) -> Dict[str, str]:
        # The gateway authenticates with the project key on both headers
        if not self.api_key:
            return {}
        return {"apikey": self.api_key, "Authorization": f"Bearer {self.api_key}"}

    @property
    def client(self) -> httpx.AsyncClient:
        """Shared AsyncClient, recreated after close()"""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers={"Accept": "application/json", **self._auth_headers()},
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            logger.debug("Backend client closed")

    async def rpc(self, name: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Call a backend stored procedure.

        Returns the decoded JSON body (usually a list of rows). Raises
        BackendAPIError on a non-2xx answer or a transport failure.
        """
        started = time.perf_counter()
        try:
            response = await self.client.post(RPC_PATH.format(name=name), json=params or {})
        except httpx.RequestError as e:
            log_backend_call(name, (time.perf_counter() - started) * 1000, ok=False)
            logger.error("Backend request error on {}: {}", name, e)
            raise BackendAPIError(
                status_code=503,
                message=f"Failed to connect to backend: {e}",
                details={"rpc": name},
            ) from e

        log_backend_call(name, (time.perf_counter() - started) * 1000, ok=response.status_code < 400)

        if response.status_code >= 400:
            try:
                error_data = response.json() if response.content else {}
            except ValueError:
                error_data = {"message": response.text}
            if not isinstance(error_data, dict):
                error_data = {"message": str(error_data)}

            logger.error("RPC {} failed ({}): {}", name, response.status_code, error_data)
            raise BackendAPIError(
                status_code=response.status_code,
                message=error_data.get("message") or "Unknown error",
                details={"rpc": name, **error_data},
            )

        return response.json() if response.content else None

    async def rpc_first(self, name: str, params: Optional[Dict[str, Any]] = None) -> Optional[Dict[str, Any]]:
        """Call an RPC that returns rows and keep only the first one"""
        data = await self.rpc(name, params)
        if isinstance(data, list):
            return data[0] if data else None
        return data

    async def rpc_rows(self, name: str, params: Optional[Dict[str, Any]] = None) -> list[Dict[str, Any]]:
        data = await self.rpc(name, params)
        if data is None:
            return []
        return data if isinstance(data, list) else [data]


backend_client = BackendClient()
