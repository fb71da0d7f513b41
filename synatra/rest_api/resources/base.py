"""
Base resource class for Synatra API resources.
"""

from typing import Any, Optional

import logging

import httpx

from synatra._version import SDK_VERSION
from synatra.exceptions import NetworkError, RemoteServiceError


class BaseResource:
    """Base class for all Synatra API resources."""

    def __init__(self, api_url: str, transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Initialize the resource.

        Args:
            api_url: Base URL of the Synatra API
            transport: Optional httpx transport, mostly useful to stub the API out
        """
        self.api_url = api_url
        self.transport = transport
        self.headers = {
            "X-SDK-Version": f"synatra-python-sdk/{SDK_VERSION}",
            "User-Agent": f"synatra-python-sdk/{SDK_VERSION}",
        }

        self.logger = logging.getLogger(f"synatra.rest_api.{self.__class__.__name__}")

        # One session for the lifetime of the resource, closed by close()
        self._client = httpx.AsyncClient(headers=self.headers, transport=self.transport)

    def _get_endpoint_url(self, path: str) -> str:
        """
        Get the full URL for an API endpoint.

        Args:
            path: API endpoint path (without leading slash)

        Returns:
            Full URL for the API endpoint
        """
        # Ensure path doesn't start with a slash
        if path.startswith("/"):
            path = path[1:]

        # Ensure API URL doesn't end with a slash
        base_url = self.api_url
        if base_url.endswith("/"):
            base_url = base_url[:-1]

        return f"{base_url}/{path}"

    def _handle_response(self, response: httpx.Response, error_msg: str = "API request failed") -> Any:
        """
        Handle API response, raising exceptions for errors.

        Args:
            response: HTTP response from API
            error_msg: Error message prefix for exceptions

        Returns:
            Parsed JSON response

        Raises:
            RemoteServiceError: On a non-2xx status or a body that is not JSON
        """
        if not response.is_success:
            self.logger.error(f"{error_msg}: HTTP {response.status_code}")
            raise RemoteServiceError(f"{error_msg}: HTTP error! status: {response.status_code}", response.status_code)

        try:
            data: Any = response.json()
        except ValueError:
            self.logger.error(f"Failed to parse JSON response: {response.text}")
            raise RemoteServiceError(f"{error_msg}: Invalid JSON response", response.status_code)

        return data

    async def _get(self, endpoint: str, params: Optional[dict[str, Any]] = None) -> Any:
        """
        Make an async GET request to the API.

        Args:
            endpoint: API endpoint path
            params: Optional query parameters

        Returns:
            Parsed JSON response

        Raises:
            NetworkError: If the API cannot be reached
        """
        url = self._get_endpoint_url(endpoint)
        self.logger.debug(f"GET {url} with params: {params}")

        try:
            response = await self._client.get(url, params=params)
        except httpx.TransportError as e:
            raise NetworkError(f"Network error: Unable to fetch {endpoint}") from e
        return self._handle_response(response, f"GET {endpoint} failed")

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self._client.aclose()
