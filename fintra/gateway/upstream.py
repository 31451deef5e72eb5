from __future__ import annotations
import logging
from typing import Any, Optional

import httpx

from fintra.utils.exceptions import UpstreamError
from .schema import UpstreamQuery

logger = logging.getLogger(__name__)

# Keys the provider puts in a 200 body when it throttles or rejects a call.
_PROVIDER_NOTICE_KEYS = ("Error Message", "Note", "Information")


class AlphaVantageClient:
    """
    Thin async wrapper over the provider's single query endpoint.

    One instance (and its pooled httpx.AsyncClient) is shared by all requests;
    it holds no per-request state.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base_url = base_url
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=timeout,
            limits=httpx.Limits(max_keepalive_connections=10, max_connections=50),
        )

    async def fetch(self, query: UpstreamQuery) -> Any:
        """Perform one upstream call and return the decoded JSON body."""
        try:
            resp = await self._client.get(self.base_url, params=query.as_params())
        except httpx.HTTPError as e:
            raise UpstreamError(str(e) or e.__class__.__name__) from e

        if resp.status_code < 200 or resp.status_code >= 300:
            # the request URL carries the API key, so keep it out of the message
            raise UpstreamError(f"Request failed with status code {resp.status_code}", status=resp.status_code)

        try:
            body = resp.json()
        except ValueError as e:
            raise UpstreamError(f"Invalid JSON from upstream: {e}", status=resp.status_code) from e

        if isinstance(body, dict):
            for key in _PROVIDER_NOTICE_KEYS:
                if key in body:
                    logger.warning("Upstream %s notice for %s: %s", key, query.function_code, str(body[key])[:200])
                    break
        return body

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
