from solders.pubkey import Pubkey
from solders.system_program import ID as SYSTEM_PROGRAM_ID
from spl.token.constants import ASSOCIATED_TOKEN_PROGRAM_ID, TOKEN_PROGRAM_ID

# Placeholder mint the program uses for pools staking native SOL.
# Compared as a string only, it is not a real mint account.
NATIVE_SOL_ADDRESS = "So11111111111111111111111111111111111111111"

SYNATRA_API_URL = "https://api.synatra.xyz"

MAINNET_PROGRAM_ADDRESS = "synatfE5AvWtbDT9sSvDsF9gmeqR9qeq3FA84bhxWur"
DEVNET_PROGRAM_ADDRESS = "G2HTbxYa9XpiZviwnjtTrPCpfRxT8c6L9BvvJFo59ESx"

GLOBAL_SEED = "global"
POOL_SEED_PREFIX = "pool"
CLAIM_SEED_PREFIX = "claim"

# Accounts every Synatra instruction expects alongside its own
PROGRAM_ACCOUNTS: dict[str, Pubkey] = {
    "associated_token_program": ASSOCIATED_TOKEN_PROGRAM_ID,
    "token_program": TOKEN_PROGRAM_ID,
    "system_program": SYSTEM_PROGRAM_ID,
}
