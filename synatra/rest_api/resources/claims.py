"""
Claims resource for the Synatra API.
"""

from typing import Any

from synatra.rest_api.resources.base import BaseResource


class ClaimsResource(BaseResource):
    """Resource for claim-related API endpoints."""

    async def get_user_claims(self, wallet_address: str) -> list[dict[str, Any]]:
        """
        Get claim records opened by a wallet.

        Args:
            wallet_address: Base58 address of the wallet

        Returns:
            Claim records exactly as returned by the API

        Raises:
            RemoteServiceError: If the API returns an error status
            NetworkError: If the API cannot be reached
        """
        endpoint = f"claims/users/{wallet_address}"
        response_data: list[dict[str, Any]] = await self._get(endpoint)
        return response_data
