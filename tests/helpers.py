"""Shared constants and factories for the Synatra SDK tests."""

from types import SimpleNamespace

from solders.pubkey import Pubkey
from solders.signature import Signature

SOL_POOL_ID = 0
TOKEN_POOL_ID = 1
TEST_API_URL = "https://api.synatra.test"
TEST_SIGNATURE = Signature.default()


def make_pool_account(pool_id: int, stake_token: Pubkey, nonce: int = 0) -> SimpleNamespace:
    """Shape of a decoded ``Pool`` account as anchorpy returns it."""
    return SimpleNamespace(
        id=pool_id,
        manager=Pubkey.new_unique(),
        oracle=Pubkey.new_unique(),
        stake_token=stake_token,
        receipt_token=Pubkey.new_unique(),
        stake_rate=1_000_000_000,
        unstake_rate=1_000_000_000,
        receipt_max_supply=10**15,
        nonce=nonce,
    )
