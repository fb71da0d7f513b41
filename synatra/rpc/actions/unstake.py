import logging
from dataclasses import dataclass

from anchorpy import Context, Program
from solders.pubkey import Pubkey

from synatra.consts import PROGRAM_ACCOUNTS
from synatra.models import Pool
from synatra.rpc.pda import get_ata, get_claim_address
from synatra.rpc.utils import priority_fee_instruction

logger = logging.getLogger("synatra.rpc.actions")


@dataclass
class UnstakingParams:
    """Data class to store unstaking parameters."""

    program_id: Pubkey
    signer: Pubkey
    pool_address: Pubkey
    pool: Pool
    receipt_amount: int  # Amount of receipt tokens to burn
    priority_fee_micro_lamports: int = 0

    @property
    def claim_address(self) -> Pubkey:
        # Uses the nonce as read; if another unstake lands first the program rejects this one
        return get_claim_address(self.program_id, self.pool.id, self.pool.nonce)


def build_unstake_accounts(params: UnstakingParams) -> dict[str, Pubkey]:
    receipt_token = params.pool.receipt_token
    accounts = {
        "signer": params.signer,
        "pool": params.pool_address,
        "receipt_token": receipt_token,
        "user_receipt_ata": get_ata(params.signer, receipt_token),
        "claim_record": params.claim_address,
    }
    accounts.update(PROGRAM_ACCOUNTS)
    return accounts


async def unstake(program: Program, params: UnstakingParams) -> str:
    """
    Burns receipt tokens and opens a claim record for the withdrawal.

    Args:
        program (Program): anchorpy Program bound to the Synatra IDL and a provider holding the signer.
        params (UnstakingParams): Pool, signer and receipt amount to unstake.

    Returns:
        str: Signature of the submitted transaction.
    """
    accounts = build_unstake_accounts(params)

    logger.debug(
        f"Submitting unstake for pool {params.pool.id} with receipt amount {params.receipt_amount}, "
        f"claim record {accounts['claim_record']}"
    )
    signature = await program.rpc["unstake"](
        params.receipt_amount,
        ctx=Context(
            accounts=accounts,
            pre_instructions=[priority_fee_instruction(params.priority_fee_micro_lamports)],
        ),
    )
    logger.info(f"Unstaked from pool {params.pool.id}: {signature}")

    return str(signature)
