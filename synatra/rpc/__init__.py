# Actions
from synatra.rpc.actions import (
    StakingParams,
    UnstakingParams,
    build_stake_accounts,
    build_unstake_accounts,
    stake,
    unstake,
)

# IDL
from synatra.rpc.idl import load_program_idl

# Address derivation
from synatra.rpc.pda import (
    claim_seed,
    find_program_address,
    get_ata,
    get_claim_address,
    get_global_address,
    get_pool_address,
    pool_seed,
)

__all__ = [
    # Actions - Parameter classes
    "StakingParams",
    "UnstakingParams",
    # Actions - Functions
    "build_stake_accounts",
    "build_unstake_accounts",
    "stake",
    "unstake",
    # IDL
    "load_program_idl",
    # Address derivation
    "claim_seed",
    "find_program_address",
    "get_ata",
    "get_claim_address",
    "get_global_address",
    "get_pool_address",
    "pool_seed",
]
