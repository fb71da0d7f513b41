#!/usr/bin/env python3
"""
Example script staking into a Synatra pool.

Before running this example, ensure you have a .env file with the following variables:
- SYNATRA_PRIVATE_KEY: Base58 secret key of the staking wallet
- SYNATRA_NETWORK: mainnet or devnet
- SYNATRA_PRIORITY_FEE: Optional compute unit price in micro-lamports
"""
import asyncio
import logging

from synatra import SynatraClient

SOL_POOL_ID = 0
STAKE_AMOUNT = 1_000_000  # 0.001 SOL in lamports


async def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    async with SynatraClient.from_env() as client:
        if client.user_public_key is None:
            print("Error: SYNATRA_PRIVATE_KEY is not set.")
            return

        print(f"Staking {STAKE_AMOUNT} lamports from {client.user_public_key} into pool {SOL_POOL_ID}")
        signature = await client.stake(SOL_POOL_ID, STAKE_AMOUNT)
        print(f"Stake transaction: {signature}")


if __name__ == "__main__":
    asyncio.run(main())
