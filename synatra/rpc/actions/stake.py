import logging
from dataclasses import dataclass

from anchorpy import Context, Program
from solders.pubkey import Pubkey

from synatra.consts import PROGRAM_ACCOUNTS
from synatra.models import Pool
from synatra.rpc.pda import get_ata
from synatra.rpc.utils import is_native_sol, priority_fee_instruction

logger = logging.getLogger("synatra.rpc.actions")


@dataclass
class StakingParams:
    """Data class to store staking parameters."""

    signer: Pubkey
    pool_address: Pubkey
    pool: Pool
    amount: int  # Amount of stake asset in base units (lamports for SOL pools)
    priority_fee_micro_lamports: int = 0


def build_stake_accounts(params: StakingParams) -> dict[str, Pubkey]:
    """
    Build the account map for a stake instruction.

    SOL pools take lamports straight from the signer, so only the receipt side
    needs token accounts. Token pools also move the stake token from the
    signer's ATA into the pool's own ATA.
    """
    stake_token = params.pool.stake_token
    receipt_token = params.pool.receipt_token

    accounts = {
        "signer": params.signer,
        "pool": params.pool_address,
        "receipt_token": receipt_token,
        "user_receipt_ata": get_ata(params.signer, receipt_token),
    }

    if not is_native_sol(stake_token):
        accounts["stake_token"] = stake_token
        accounts["user_stake_ata"] = get_ata(params.signer, stake_token)
        accounts["pool_stake_ata"] = get_ata(params.pool_address, stake_token)

    accounts.update(PROGRAM_ACCOUNTS)
    return accounts


async def stake(program: Program, params: StakingParams) -> str:
    """
    Stakes SOL or an SPL token into a Synatra pool in exchange for receipt tokens.

    Args:
        program (Program): anchorpy Program bound to the Synatra IDL and a provider holding the signer.
        params (StakingParams): Pool, signer and amount to stake.

    Returns:
        str: Signature of the submitted transaction.
    """
    instruction = "stake_sol" if is_native_sol(params.pool.stake_token) else "stake_token"
    accounts = build_stake_accounts(params)

    logger.debug(f"Submitting {instruction} for pool {params.pool.id} with amount {params.amount}")
    signature = await program.rpc[instruction](
        params.amount,
        ctx=Context(
            accounts=accounts,
            pre_instructions=[priority_fee_instruction(params.priority_fee_micro_lamports)],
        ),
    )
    logger.info(f"Staked in pool {params.pool.id}: {signature}")

    return str(signature)
