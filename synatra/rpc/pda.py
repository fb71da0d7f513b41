"""Deterministic address derivation for Synatra accounts.

Every address here must match the program's own derivation bit for bit,
otherwise submitted instructions reference the wrong accounts and are
rejected.
"""

from solders.pubkey import Pubkey
from spl.token.instructions import get_associated_token_address

from synatra.consts import CLAIM_SEED_PREFIX, GLOBAL_SEED, POOL_SEED_PREFIX


def find_program_address(seed: str, program_id: Pubkey) -> Pubkey:
    """Derive the program address for a single UTF-8 seed.

    Args:
        seed: Seed string, e.g. ``"pool-0"``
        program_id: Owning program

    Returns:
        The derived address (the bump seed is dropped)
    """
    address, _bump = Pubkey.find_program_address([seed.encode("utf-8")], program_id)
    return address


def pool_seed(pool_id: int) -> str:
    return f"{POOL_SEED_PREFIX}-{pool_id}"


def claim_seed(pool_id: int, nonce: int) -> str:
    return f"{CLAIM_SEED_PREFIX}-{pool_id}-{nonce}"


def get_global_address(program_id: Pubkey) -> Pubkey:
    return find_program_address(GLOBAL_SEED, program_id)


def get_pool_address(program_id: Pubkey, pool_id: int) -> Pubkey:
    return find_program_address(pool_seed(pool_id), program_id)


def get_claim_address(program_id: Pubkey, pool_id: int, nonce: int) -> Pubkey:
    return find_program_address(claim_seed(pool_id, nonce), program_id)


def get_ata(owner: Pubkey, mint: Pubkey) -> Pubkey:
    """Associated token account of ``owner`` for ``mint``.

    Owners may be program addresses (the pool holds its own stake tokens),
    so no on-curve check is made.
    """
    return get_associated_token_address(owner, mint)
