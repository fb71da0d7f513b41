#!/usr/bin/env python3
"""
Example script reading Synatra pool state.

Before running this example, ensure you have a .env file with the following variables:
- SYNATRA_NETWORK: mainnet or devnet (defaults to mainnet)
- SYNATRA_RPC_URL: Optional RPC endpoint override
"""
import asyncio
import logging

from synatra import SynatraClient

POOL_IDS = [0, 1]


async def main():
    """Print the state and receipt supply of the known pools."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    async with SynatraClient.from_env() as client:
        print(f"Program: {client.program_id}")
        print(f"Global state: {client.global_address}")

        for pool_id in POOL_IDS:
            print(f"\n--- Pool {pool_id} ({client.get_pool_address(pool_id)}) ---")
            pool = await client.get_pool(pool_id)
            if pool is None:
                print("Pool not found")
                continue

            print(f"Stake token: {pool.stake_token}")
            print(f"Receipt token: {pool.receipt_token}")
            print(f"Stake rate: {pool.stake_rate}, unstake rate: {pool.unstake_rate}")
            print(f"Nonce: {pool.nonce}")
            print(f"Receipt supply: {await client.get_current_supply(pool_id)} / {pool.receipt_max_supply}")


if __name__ == "__main__":
    asyncio.run(main())
