from synatra.rpc.actions.stake import StakingParams, build_stake_accounts, stake
from synatra.rpc.actions.unstake import UnstakingParams, build_unstake_accounts, unstake

__all__ = [
    "StakingParams",
    "build_stake_accounts",
    "stake",
    "UnstakingParams",
    "build_unstake_accounts",
    "unstake",
]
