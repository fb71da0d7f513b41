import pytest
from anchorpy import Wallet
from solders.compute_budget import set_compute_unit_price
from solders.keypair import Keypair
from solders.pubkey import Pubkey

from synatra import InvalidArgumentError, SynatraClient, SynatraConfig, UnauthenticatedError
from synatra.consts import MAINNET_PROGRAM_ADDRESS, SYNATRA_API_URL
from synatra.rpc.pda import find_program_address
from synatra.rpc.utils import priority_fee_instruction


def test_client_initialization(config, keypair):
    client = SynatraClient(config, keypair)

    assert client.program_id == Pubkey.from_string(MAINNET_PROGRAM_ADDRESS)
    assert client.priority_fee_micro_lamports == 0
    assert client.user_public_key == keypair.pubkey()
    assert client.global_address == find_program_address("global", client.program_id)


def test_client_without_wallet(config):
    client = SynatraClient(config)
    assert client.user_public_key is None


def test_client_uses_config_keypair(keypair):
    client = SynatraClient(SynatraConfig(rpc_url="http://localhost:8899", keypair=keypair))
    assert client.user_public_key == keypair.pubkey()


def test_constructor_parameters(keypair):
    config = SynatraConfig(rpc_url="http://localhost:8899", priority_fee_micro_lamports=5000)
    client = SynatraClient(config, keypair)

    assert client.api_url == SYNATRA_API_URL
    assert client.priority_fee_micro_lamports == 5000


def test_wallet_management(config, keypair):
    client = SynatraClient(config, keypair)
    other = Wallet(Keypair())

    client.set_wallet(other)
    assert client.user_public_key == other.public_key
    assert client.provider.wallet is other

    client.remove_wallet()
    assert client.user_public_key is None
    with pytest.raises(UnauthenticatedError, match="No wallet set"):
        client._validate_wallet()

    plain_keypair = Keypair()
    client.set_wallet(plain_keypair)
    assert client.user_public_key == plain_keypair.pubkey()


def test_priority_fee(config):
    client = SynatraClient(config)

    client.set_priority_fee(1000)
    assert client.priority_fee_micro_lamports == 1000
    assert priority_fee_instruction(client.priority_fee_micro_lamports) == set_compute_unit_price(1000)

    client.set_priority_fee(0)
    assert client.priority_fee_micro_lamports == 0


@pytest.mark.validation
@pytest.mark.parametrize("fee", [-1, 1.5, "100", True])
def test_priority_fee_validation(config, fee):
    client = SynatraClient(config)
    with pytest.raises(InvalidArgumentError):
        client.set_priority_fee(fee)
    assert client.priority_fee_micro_lamports == 0


@pytest.mark.validation
def test_pool_id_validation():
    with pytest.raises(InvalidArgumentError, match="Invalid pool ID"):
        SynatraClient._validate_pool_id(-1)
    with pytest.raises(InvalidArgumentError):
        SynatraClient._validate_pool_id(1.0)
    SynatraClient._validate_pool_id(0)
    SynatraClient._validate_pool_id(1)


@pytest.mark.validation
def test_amount_validation():
    with pytest.raises(InvalidArgumentError, match="Amount must be positive"):
        SynatraClient._validate_amount(-100)
    with pytest.raises(InvalidArgumentError, match="Amount must be positive"):
        SynatraClient._validate_amount(0)
    with pytest.raises(InvalidArgumentError):
        SynatraClient._validate_amount(False)
    SynatraClient._validate_amount(1_000_000)


def test_pool_and_claim_addresses(config):
    client = SynatraClient(config)

    assert client.get_pool_address(0) != client.get_pool_address(1)
    assert client.get_claim_address(0, 0) != client.get_claim_address(1, 0)
    assert client.get_claim_address(1, 4) == find_program_address("claim-1-4", client.program_id)


@pytest.mark.asyncio
async def test_context_manager_closes_connection(client):
    async with client as entered:
        assert entered is client
    client.connection.close.assert_awaited_once()
    assert client.claims._client.is_closed


@pytest.mark.validation
def test_config_priority_fee_validated():
    with pytest.raises(InvalidArgumentError):
        SynatraConfig(rpc_url="http://localhost:8899", priority_fee_micro_lamports=-5)


@pytest.mark.validation
def test_client_rejects_invalid_priority_fee_from_config(keypair):
    config = SynatraConfig(rpc_url="http://localhost:8899")
    config.priority_fee_micro_lamports = -5

    with pytest.raises(InvalidArgumentError, match="Priority fee"):
        SynatraClient(config, keypair)
