from typing import Any, Optional, Protocol, Union, runtime_checkable

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field
from solders.pubkey import Pubkey


@runtime_checkable
class Signer(Protocol):
    """Anything that exposes an address and can sign transactions.

    ``anchorpy.Wallet`` is the usual implementation.
    """

    @property
    def public_key(self) -> Pubkey: ...

    def sign_transaction(self, tx: Any) -> Any: ...


@dataclass(frozen=True)
class Pool:
    """Synatra staking pool as stored on-chain."""

    id: int
    manager: Pubkey
    oracle: Pubkey
    stake_token: Pubkey
    receipt_token: Pubkey
    stake_rate: int
    unstake_rate: int
    receipt_max_supply: int
    nonce: int  # Incremented by the program on every unstake

    @classmethod
    def from_account(cls, account: Any) -> "Pool":
        """Build a Pool from a decoded ``Pool`` account, normalizing u64 fields to int."""
        return cls(
            id=int(account.id),
            manager=account.manager,
            oracle=account.oracle,
            stake_token=account.stake_token,
            receipt_token=account.receipt_token,
            stake_rate=int(account.stake_rate),
            unstake_rate=int(account.unstake_rate),
            receipt_max_supply=int(account.receipt_max_supply),
            nonce=int(account.nonce),
        )


class Claim(BaseModel):
    """Claim record as served by the Synatra API under ``/claims/users/<address>``."""

    model_config = ConfigDict(populate_by_name=True)

    address: str
    user: str
    pool_id: Union[str, int] = Field(alias="poolId")
    pool_address: str = Field(alias="poolAddress")
    receipt_amount: int = Field(alias="receiptAmount")
    nonce: int
    unstake_rate: int = Field(alias="unstakeRate")
    unstake_transaction: str = Field(alias="unstakeTransaction")
    unstake_date: str = Field(alias="unstakeDate")
    claim_amount: int = Field(alias="claimAmount")
    fulfilled: bool = False
    fulfilled_transaction: Optional[str] = Field(default=None, alias="fulfilledTransaction")
    fulfilled_date: Optional[str] = Field(default=None, alias="fulfilledDate")
    claimed: bool = False
    claimed_transaction: Optional[str] = Field(default=None, alias="claimedTransaction")
    claimed_date: Optional[str] = Field(default=None, alias="claimedDate")
