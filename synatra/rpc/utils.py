"""Transaction helpers shared by the RPC actions."""

from solders.compute_budget import set_compute_unit_price
from solders.instruction import Instruction
from solders.pubkey import Pubkey

from synatra.consts import NATIVE_SOL_ADDRESS


def priority_fee_instruction(priority_fee_micro_lamports: int) -> Instruction:
    """Compute budget instruction setting the price per compute unit."""
    return set_compute_unit_price(priority_fee_micro_lamports)


def is_native_sol(mint: Pubkey) -> bool:
    return str(mint) == NATIVE_SOL_ADDRESS
