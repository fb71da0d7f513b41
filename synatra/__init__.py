"""
Synatra SDK - Python SDK for the Synatra liquid staking program on Solana.

This package provides:
- SynatraClient: pool queries, stake and unstake transactions, claim lookups
- rpc: address derivation and instruction builders for the on-chain program
- rest_api: resources for the Synatra web API
"""

from synatra._version import SDK_VERSION
from synatra.client import SynatraClient
from synatra.config import SynatraConfig, get_config, get_network_config
from synatra.exceptions import (
    InsufficientBalanceError,
    InvalidArgumentError,
    InvalidNetworkError,
    NetworkError,
    PoolNotFoundError,
    RemoteServiceError,
    SynatraError,
    TokenAccountNotFoundError,
    UnauthenticatedError,
)
from synatra.models import Claim, Pool, Signer

__all__ = [
    "SDK_VERSION",
    "SynatraClient",
    "SynatraConfig",
    "get_config",
    "get_network_config",
    "Claim",
    "Pool",
    "Signer",
    "SynatraError",
    "InvalidArgumentError",
    "UnauthenticatedError",
    "PoolNotFoundError",
    "InsufficientBalanceError",
    "TokenAccountNotFoundError",
    "InvalidNetworkError",
    "NetworkError",
    "RemoteServiceError",
]
