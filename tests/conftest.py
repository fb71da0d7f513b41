"""
Pytest fixtures for the Synatra SDK tests.

The ledger connection and the anchorpy program are replaced with mocks, so no
test here touches the network.
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from solders.keypair import Keypair
from solders.pubkey import Pubkey

from synatra import SynatraClient, SynatraConfig
from synatra.consts import NATIVE_SOL_ADDRESS
from tests.helpers import SOL_POOL_ID, TEST_API_URL, TEST_SIGNATURE, TOKEN_POOL_ID, make_pool_account


@pytest.fixture
def keypair() -> Keypair:
    return Keypair()


@pytest.fixture
def config() -> SynatraConfig:
    return SynatraConfig(rpc_url="http://localhost:8899", api_url=TEST_API_URL)


@pytest.fixture
def sol_pool_account() -> SimpleNamespace:
    return make_pool_account(SOL_POOL_ID, Pubkey.from_string(NATIVE_SOL_ADDRESS), nonce=3)


@pytest.fixture
def token_pool_account() -> SimpleNamespace:
    return make_pool_account(TOKEN_POOL_ID, Pubkey.new_unique(), nonce=0)


@pytest.fixture
def pool_accounts(sol_pool_account, token_pool_account) -> dict:
    return {SOL_POOL_ID: sol_pool_account, TOKEN_POOL_ID: token_pool_account}


def _mock_program(client: SynatraClient, pool_accounts: dict) -> MagicMock:
    by_address = {client.get_pool_address(pool_id): account for pool_id, account in pool_accounts.items()}

    async def fetch(address):
        if address not in by_address:
            raise ValueError(f"Account does not exist {address}")
        return by_address[address]

    program = MagicMock()
    program.account = {"Pool": SimpleNamespace(fetch=AsyncMock(side_effect=fetch))}
    program.rpc = {
        "stake_sol": AsyncMock(return_value=TEST_SIGNATURE),
        "stake_token": AsyncMock(return_value=TEST_SIGNATURE),
        "unstake": AsyncMock(return_value=TEST_SIGNATURE),
    }
    return program


def _mock_connection() -> AsyncMock:
    connection = AsyncMock()
    connection.get_balance.return_value = SimpleNamespace(value=10**12)
    connection.get_token_account_balance.return_value = SimpleNamespace(value=SimpleNamespace(amount=str(10**12)))
    connection.get_token_supply.return_value = SimpleNamespace(value=SimpleNamespace(amount="123456789"))
    return connection


@pytest.fixture
def client(config, keypair, pool_accounts) -> SynatraClient:
    """Client with a wallet, a mocked ledger connection and a mocked program."""
    synatra_client = SynatraClient(config, keypair)
    synatra_client.connection = _mock_connection()
    synatra_client.program = _mock_program(synatra_client, pool_accounts)
    return synatra_client


@pytest.fixture
def walletless_client(config, pool_accounts) -> SynatraClient:
    synatra_client = SynatraClient(config)
    synatra_client.connection = _mock_connection()
    synatra_client.program = _mock_program(synatra_client, pool_accounts)
    return synatra_client
