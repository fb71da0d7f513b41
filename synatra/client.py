"""
Synatra Client - Main entry point for the Synatra staking program.

This module provides a client that reads pool state, stakes and unstakes
through the on-chain program, and lists claim records from the Synatra API.
"""

from typing import Any, Optional, Union

import logging

import httpx
from anchorpy import Program, Provider, Wallet
from solana.rpc.async_api import AsyncClient
from solana.rpc.commitment import Confirmed
from solana.rpc.core import RPCException
from solana.rpc.types import TxOpts
from solders.keypair import Keypair
from solders.pubkey import Pubkey

from synatra.config import SynatraConfig, get_config
from synatra.exceptions import (
    InsufficientBalanceError,
    InvalidArgumentError,
    PoolNotFoundError,
    TokenAccountNotFoundError,
    UnauthenticatedError,
)
from synatra.models import Pool, Signer
from synatra.rest_api.resources import ClaimsResource
from synatra.rpc.actions import StakingParams, UnstakingParams, stake, unstake
from synatra.rpc.idl import load_program_idl
from synatra.rpc.pda import get_ata, get_claim_address, get_global_address, get_pool_address
from synatra.rpc.utils import is_native_sol

logger = logging.getLogger("synatra.client")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class SynatraClient:
    """
    Client for the Synatra liquid staking program.

    The RPC connection, provider and program are created once and reused for
    the lifetime of the client. Nothing here is locked: concurrent calls are
    fine, and ordering of stake/unstake submissions against one pool is left
    to the program.
    """

    def __init__(
        self,
        config: SynatraConfig,
        wallet: Union[Signer, Keypair, None] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the Synatra client.

        Args:
            config: Connection and signing settings
            wallet: Optional signer; falls back to ``config.keypair``
            transport: Optional httpx transport for the claims API
        """
        self._config = config
        self.program_id = Pubkey.from_string(config.program_id)
        self.api_url = config.api_url
        self.priority_fee_micro_lamports = 0
        self.set_priority_fee(config.priority_fee_micro_lamports)
        self.enable_logging = config.enable_logging

        self.connection = AsyncClient(config.rpc_url, commitment=Confirmed)

        if wallet is None:
            wallet = config.keypair
        signer = self._as_wallet(wallet) if wallet is not None else None

        # anchorpy needs some wallet on the provider even for read-only use
        self.provider = Provider(
            self.connection,
            signer if signer is not None else Wallet(Keypair()),
            TxOpts(preflight_commitment=Confirmed),
        )
        self.program = Program(load_program_idl(), self.program_id, self.provider)

        self.global_address = get_global_address(self.program_id)
        self.user_public_key: Optional[Pubkey] = signer.public_key if signer is not None else None

        self.claims = ClaimsResource(self.api_url, transport=transport)

        logger.debug(f"Synatra client for program {self.program_id} on {config.rpc_url}")

    @classmethod
    def from_env(cls) -> "SynatraClient":
        """Create a client configured from environment variables."""
        return cls(get_config())

    @property
    def config(self) -> SynatraConfig:
        return self._config

    @staticmethod
    def _as_wallet(wallet: Union[Signer, Keypair]) -> Signer:
        if isinstance(wallet, Keypair):
            return Wallet(wallet)
        return wallet

    def set_wallet(self, wallet: Union[Signer, Keypair]) -> None:
        """Replace the signer used for stake, unstake and claim lookups."""
        signer = self._as_wallet(wallet)
        self.provider.wallet = signer
        self.user_public_key = signer.public_key

    def remove_wallet(self) -> None:
        """Clear the active signer; later signed operations fail until a new one is set."""
        self.provider.wallet = Wallet(Keypair())
        self.user_public_key = None

    def set_priority_fee(self, priority_fee_micro_lamports: int) -> None:
        """Set the compute unit price attached to every subsequent transaction."""
        if not _is_int(priority_fee_micro_lamports) or priority_fee_micro_lamports < 0:
            raise InvalidArgumentError("Priority fee must be a non-negative integer")
        self.priority_fee_micro_lamports = priority_fee_micro_lamports

    # Address derivation

    def get_pool_address(self, pool_id: int) -> Pubkey:
        return get_pool_address(self.program_id, pool_id)

    def get_claim_address(self, pool_id: int, nonce: int) -> Pubkey:
        return get_claim_address(self.program_id, pool_id, nonce)

    # Validation

    def _validate_wallet(self) -> None:
        if self.user_public_key is None:
            raise UnauthenticatedError("No wallet set")

    @staticmethod
    def _validate_pool_id(pool_id: Any) -> None:
        if not _is_int(pool_id) or pool_id < 0:
            raise InvalidArgumentError("Invalid pool ID")

    @staticmethod
    def _validate_amount(amount: Any) -> None:
        if not _is_int(amount) or amount <= 0:
            raise InvalidArgumentError("Amount must be positive")

    async def _validate_token_balance(self, mint: Pubkey, required_amount: int) -> None:
        """Check the wallet holds at least ``required_amount`` of ``mint`` (lamports for SOL)."""
        if is_native_sol(mint):
            resp = await self.connection.get_balance(self.user_public_key)
            if resp.value < required_amount:
                raise InsufficientBalanceError("Insufficient SOL balance")
            return

        user_token_ata = get_ata(self.user_public_key, mint)
        try:
            resp = await self.connection.get_token_account_balance(user_token_ata)
        except RPCException as e:
            raise TokenAccountNotFoundError(f"Token account {user_token_ata} not found") from e

        if int(resp.value.amount) < required_amount:
            raise InsufficientBalanceError("Insufficient token balance")

    async def _require_pool(self, pool_id: int) -> Pool:
        pool = await self.get_pool(pool_id)
        if pool is None:
            raise PoolNotFoundError(f"Pool {pool_id} not found")
        return pool

    # Pool queries

    async def get_pool(self, pool_id: int) -> Optional[Pool]:
        """
        Fetch a pool by id.

        Args:
            pool_id: Non-negative pool id

        Returns:
            The pool, or None when the account is missing or cannot be decoded

        Raises:
            InvalidArgumentError: If the pool id is not a non-negative integer
        """
        self._validate_pool_id(pool_id)
        pool_address = self.get_pool_address(pool_id)

        try:
            account = await self.program.account["Pool"].fetch(pool_address)
        except Exception as err:  # missing or undecodable account
            if self.enable_logging:
                logger.error(f"pool not found: {err}")
            else:
                logger.debug(f"Pool {pool_id} at {pool_address} not found: {err}")
            return None

        return Pool.from_account(account)

    async def get_current_supply(self, pool_id: int) -> int:
        """Total supply of the pool's receipt token, in base units."""
        pool = await self._require_pool(pool_id)
        resp = await self.connection.get_token_supply(pool.receipt_token)
        return int(resp.value.amount)

    # Transactions

    async def stake(self, pool_id: int, amount: int) -> str:
        """
        Stake into a pool and receive receipt tokens.

        Args:
            pool_id: Pool to stake into
            amount: Amount of the pool's stake asset, in base units

        Returns:
            Transaction signature

        Raises:
            UnauthenticatedError: If no wallet is set
            InvalidArgumentError: If the amount is not a positive integer
            PoolNotFoundError: If the pool does not exist
            InsufficientBalanceError: If the wallet holds less than ``amount``
            TokenAccountNotFoundError: If the wallet has no token account for the stake asset
        """
        self._validate_wallet()
        self._validate_amount(amount)

        pool = await self._require_pool(pool_id)
        await self._validate_token_balance(pool.stake_token, amount)

        return await stake(
            self.program,
            StakingParams(
                signer=self.user_public_key,
                pool_address=self.get_pool_address(pool_id),
                pool=pool,
                amount=amount,
                priority_fee_micro_lamports=self.priority_fee_micro_lamports,
            ),
        )

    async def unstake(self, pool_id: int, receipt_amount: int) -> str:
        """
        Burn receipt tokens and open a claim for the withdrawal.

        The claim address is derived from the pool nonce read here. Another
        unstake landing on the same pool before this transaction does will
        advance the nonce and the program will reject this submission.

        Raises:
            UnauthenticatedError: If no wallet is set
            InvalidArgumentError: If the amount is not a positive integer
            PoolNotFoundError: If the pool does not exist
            InsufficientBalanceError: If the wallet holds fewer receipt tokens
            TokenAccountNotFoundError: If the wallet has no receipt token account
        """
        self._validate_wallet()
        self._validate_amount(receipt_amount)

        pool = await self._require_pool(pool_id)
        await self._validate_token_balance(pool.receipt_token, receipt_amount)

        return await unstake(
            self.program,
            UnstakingParams(
                program_id=self.program_id,
                signer=self.user_public_key,
                pool_address=self.get_pool_address(pool_id),
                pool=pool,
                receipt_amount=receipt_amount,
                priority_fee_micro_lamports=self.priority_fee_micro_lamports,
            ),
        )

    # Claims API

    async def get_claims(self) -> list[dict[str, Any]]:
        """
        List the wallet's claim records from the Synatra API.

        Raises:
            UnauthenticatedError: If no wallet is set
            RemoteServiceError: If the API answers with a non-2xx status
            NetworkError: If the API cannot be reached
        """
        self._validate_wallet()
        return await self.claims.get_user_claims(str(self.user_public_key))

    async def close(self) -> None:
        """Close the RPC connection and the claims API session."""
        await self.connection.close()
        await self.claims.close()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit - automatically closes the connections."""
        await self.close()
