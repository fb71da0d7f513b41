#!/usr/bin/env python3
"""
Example script unstaking receipt tokens and listing the resulting claims.

Before running this example, ensure you have a .env file with the following variables:
- SYNATRA_PRIVATE_KEY: Base58 secret key of the wallet holding receipt tokens
- SYNATRA_NETWORK: mainnet or devnet
"""
import asyncio
import logging

from synatra import Claim, SynatraClient

SOL_POOL_ID = 0
RECEIPT_AMOUNT = 500_000


async def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    async with SynatraClient.from_env() as client:
        if client.user_public_key is None:
            print("Error: SYNATRA_PRIVATE_KEY is not set.")
            return

        pool = await client.get_pool(SOL_POOL_ID)
        if pool is None:
            print(f"Pool {SOL_POOL_ID} not found")
            return

        print(f"Expected claim record: {client.get_claim_address(SOL_POOL_ID, pool.nonce)}")
        signature = await client.unstake(SOL_POOL_ID, RECEIPT_AMOUNT)
        print(f"Unstake transaction: {signature}")

        print("\n--- Claims ---")
        for record in await client.get_claims():
            claim = Claim.model_validate(record)
            status = "claimed" if claim.claimed else "fulfilled" if claim.fulfilled else "pending"
            print(f"{claim.address}: {claim.claim_amount} ({status})")


if __name__ == "__main__":
    asyncio.run(main())
