"""Shared HTTP client for upstream sports providers.

Handles raw HTTP requests only - no data transformation.

Degrade-to-empty policy: every failure is logged and converted into a
FetchOutcome carrying the provider's empty payload shape. Nothing raised
while fetching ever escapes fetch_json().

Classification:
- 429                        -> RATE_LIMITED (warning)
- non-JSON content / body    -> MALFORMED (warning); some providers serve
                                HTML error pages with a 200 under load
- other non-2xx              -> HTTP_ERROR (error)
- timeout / connection error -> NETWORK_ERROR (error)
"""

import copy
import logging
from collections.abc import Mapping
from typing import Any

import httpx

from sportsfeed.config import Config
from sportsfeed.core import FetchOutcome, FetchStatus
from sportsfeed.providers.errors import (
    ProviderRateLimited,
    ProviderRequestError,
    ProviderResponseError,
    ProviderTransportError,
)

logger = logging.getLogger(__name__)


class UpstreamClient:
    """Low-level provider client with a pooled httpx.Client.

    Provider clients subclass this and add endpoint methods returning
    FetchOutcome via fetch_json().
    """

    # Provider name, used in logs
    name: str = "upstream"

    # Payload returned in place of any failed response
    EMPTY_PAYLOAD: dict = {}

    def __init__(
        self,
        base_url: str,
        user_agent: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._user_agent = user_agent or Config.UPSTREAM_USER_AGENT
        self._timeout = timeout if timeout is not None else Config.REQUEST_TIMEOUT
        self._transport = transport
        self._client: httpx.Client | None = None

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(
                timeout=self._timeout,
                headers={"User-Agent": self._user_agent},
                limits=httpx.Limits(max_connections=10, max_keepalive_connections=5),
                transport=self._transport,
            )
        return self._client

    def empty_payload(self) -> dict:
        """Fresh copy of the empty payload shape."""
        return copy.deepcopy(self.EMPTY_PAYLOAD)

    def _request(self, path: str, params: Mapping[str, Any] | None = None) -> dict:
        """GET a provider path and return the decoded JSON object.

        Raises:
            ProviderRateLimited: HTTP 429
            ProviderRequestError: any other non-2xx
            ProviderTransportError: no response at all
            ProviderResponseError: response is not a JSON object
        """
        url = f"{self._base_url}/{path.lstrip('/')}"
        try:
            response = self._get_client().get(url, params=params)
        except httpx.RequestError as e:
            raise ProviderTransportError(f"Request failed for {url}: {e}") from e

        if response.status_code == 429:
            raise ProviderRateLimited(f"HTTP 429 for {url}")

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ProviderRequestError(f"HTTP {response.status_code} for {url}") from e

        content_type = response.headers.get("content-type", "")
        if "application/json" not in content_type:
            raise ProviderResponseError(f"Non-JSON response ({content_type or 'no content type'}) for {url}")

        try:
            data = response.json()
        except ValueError as e:
            raise ProviderResponseError(f"Invalid JSON body for {url}") from e

        if not isinstance(data, dict):
            raise ProviderResponseError(f"Expected JSON object for {url}, got {type(data).__name__}")

        return data

    def fetch_json(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        label: str = "",
    ) -> FetchOutcome:
        """Fetch a provider path, degrading every failure to the empty payload.

        Args:
            path: Path relative to the client's base URL
            params: Query parameters
            label: What is being fetched, for log messages (e.g. league id)

        Returns:
            FetchOutcome with the decoded payload, or the empty payload and
            the failure classification
        """
        label = label or path
        try:
            return FetchOutcome(FetchStatus.OK, self._request(path, params))
        except ProviderRateLimited:
            logger.warning(f"{self.name}: rate limited when fetching {label}. Returning empty data.")
            return FetchOutcome(FetchStatus.RATE_LIMITED, self.empty_payload())
        except ProviderResponseError as e:
            logger.warning(f"{self.name}: malformed response for {label}: {e}. Returning empty data.")
            return FetchOutcome(FetchStatus.MALFORMED, self.empty_payload())
        except ProviderTransportError as e:
            logger.error(f"{self.name}: error fetching {label}: {e}")
            return FetchOutcome(FetchStatus.NETWORK_ERROR, self.empty_payload())
        except ProviderRequestError as e:
            logger.error(f"{self.name}: failed to fetch {label}: {e}")
            return FetchOutcome(FetchStatus.HTTP_ERROR, self.empty_payload())

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            self._client.close()
            self._client = None
