"""
Configuration settings for the Synatra SDK.
"""

from typing import Optional

import os
from dataclasses import dataclass

from dotenv import load_dotenv
from solders.keypair import Keypair

from synatra.consts import DEVNET_PROGRAM_ADDRESS, MAINNET_PROGRAM_ADDRESS, SYNATRA_API_URL
from synatra.exceptions import InvalidArgumentError, InvalidNetworkError

MAINNET = "mainnet"
DEVNET = "devnet"


def get_network_config(network: str) -> dict:
    """Get network-specific endpoints and program address."""
    if network == MAINNET:
        return {
            "rpc_url": "https://api.mainnet-beta.solana.com",
            "program_id": MAINNET_PROGRAM_ADDRESS,
        }
    elif network == DEVNET:
        return {
            "rpc_url": "https://api.devnet.solana.com",
            "program_id": DEVNET_PROGRAM_ADDRESS,
        }
    else:
        raise InvalidNetworkError(f"Invalid network '{network}'! It's neither '{MAINNET}' nor '{DEVNET}'.")


@dataclass
class SynatraConfig:
    """Connection and signing settings shared by every Synatra client call."""

    rpc_url: str
    api_url: str = SYNATRA_API_URL
    program_id: str = MAINNET_PROGRAM_ADDRESS
    priority_fee_micro_lamports: int = 0
    enable_logging: bool = False
    keypair: Optional[Keypair] = None

    def __post_init__(self):
        fee = self.priority_fee_micro_lamports
        if not isinstance(fee, int) or isinstance(fee, bool) or fee < 0:
            raise InvalidArgumentError("Priority fee must be a non-negative integer")

    @classmethod
    def for_network(cls, network: str = MAINNET, **overrides) -> "SynatraConfig":
        """Create a config from one of the known network presets."""
        network_config = get_network_config(network)
        params = {
            "rpc_url": network_config["rpc_url"],
            "program_id": network_config["program_id"],
        }
        params.update(overrides)
        return cls(**params)

    @classmethod
    def from_env(cls) -> "SynatraConfig":
        """Create a config instance from environment variables."""
        load_dotenv()

        # Blank entries (e.g. "SYNATRA_RPC_URL=" in a .env) fall back to the defaults
        network_config = get_network_config(os.environ.get("SYNATRA_NETWORK") or MAINNET)

        private_key = os.environ.get("SYNATRA_PRIVATE_KEY")

        return cls(
            rpc_url=os.environ.get("SYNATRA_RPC_URL") or network_config["rpc_url"],
            api_url=os.environ.get("SYNATRA_API_URL") or SYNATRA_API_URL,
            program_id=os.environ.get("SYNATRA_PROGRAM_ID") or network_config["program_id"],
            priority_fee_micro_lamports=int(os.environ.get("SYNATRA_PRIORITY_FEE") or "0"),
            enable_logging=os.environ.get("SYNATRA_ENABLE_LOGGING", "False").lower() == "true",
            keypair=Keypair.from_base58_string(private_key) if private_key else None,
        )


def get_config() -> SynatraConfig:
    """Get configuration from environment."""
    return SynatraConfig.from_env()
