import pytest

from leasechain.deploy.compiler import CompileFailure
from leasechain.deploy.pipeline import ContractDeployer, DeploymentRequest
from leasechain.errors import (
    CompilationError,
    ConfigurationError,
    MissingParametersError,
    TransactionFailedError,
    UnsupportedChainError,
)
from leasechain.tests.utils import LEASE_ABI, TEST_CHAINS, TEST_PRIVATE_KEY


@pytest.mark.asyncio
async def test_deploy_links_to_block_explorer(deployer, compile_source, client_factory, chain_client):
    request = DeploymentRequest(chain_name="Testnet", contract="contract Lease {}", constructor_arguments=[1500])

    result = await deployer.deploy(request)

    assert result.hash == "0xabc"
    assert result.link_to_block_explorer == "https://explorer.testnet.local/tx/0xabc"
    assert result.abi == LEASE_ABI
    compile_source.assert_called_once_with("contract Lease {}", "0.8.24")
    client_factory.assert_called_once_with(TEST_CHAINS[0], TEST_PRIVATE_KEY)
    chain_client.deploy_contract.assert_called_once_with(LEASE_ABI, "6080604052", [1500])
    chain_client.wait_for_receipt.assert_called_once_with("0xabc", 180)


@pytest.mark.asyncio
async def test_deploy_without_explorer_returns_bare_hash(deployer):
    request = DeploymentRequest(chain_name="Devnet", contract="contract Lease {}")

    result = await deployer.deploy(request)

    assert result.link_to_block_explorer == "0xabc"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "chain_name, contract",
    [(None, "contract Lease {}"), ("", "contract Lease {}"), ("Testnet", None), ("Testnet", "")],
)
async def test_missing_parameters_fail_before_compiling(
    deployer, compile_source, client_factory, chain_name, contract
):
    with pytest.raises(MissingParametersError):
        await deployer.deploy(DeploymentRequest(chain_name=chain_name, contract=contract))

    compile_source.assert_not_called()
    client_factory.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("chain_name", ["testnet", "Mainnet", "Sepolia"])
async def test_unsupported_chain_fails_before_compiling(deployer, compile_source, client_factory, chain_name):
    with pytest.raises(UnsupportedChainError):
        await deployer.deploy(DeploymentRequest(chain_name=chain_name, contract="contract Lease {}"))

    compile_source.assert_not_called()
    client_factory.assert_not_called()


@pytest.mark.asyncio
async def test_compile_failure_skips_signing(deployer, compile_source, client_factory):
    compile_source.return_value = CompileFailure(diagnostics=["ParserError: Expected ';'"])

    with pytest.raises(CompilationError) as exc_info:
        await deployer.deploy(DeploymentRequest(chain_name="Testnet", contract="contract {"))

    assert exc_info.value.status_code == 500
    assert exc_info.value.message == "Error while compiling"
    assert exc_info.value.error == "ParserError: Expected ';'"
    client_factory.assert_not_called()


@pytest.mark.asyncio
async def test_failed_receipt_is_a_client_error(deployer, chain_client):
    chain_client.wait_for_receipt.return_value = {"status": 0, "transactionHash": "0xabc"}

    with pytest.raises(TransactionFailedError) as exc_info:
        await deployer.deploy(DeploymentRequest(chain_name="Testnet", contract="contract Lease {}"))

    assert exc_info.value.status_code == 400


@pytest.mark.asyncio
async def test_submission_errors_propagate(deployer, chain_client):
    chain_client.deploy_contract.side_effect = ConnectionError("rpc unreachable")

    with pytest.raises(ConnectionError):
        await deployer.deploy(DeploymentRequest(chain_name="Testnet", contract="contract Lease {}"))

    chain_client.wait_for_receipt.assert_not_called()


@pytest.mark.asyncio
async def test_missing_private_key_is_a_configuration_error(test_settings, compile_source, client_factory):
    test_settings.DEPLOYER_PRIVATE_KEY = None
    deployer = ContractDeployer(
        test_settings, chains=TEST_CHAINS, compile_source=compile_source, client_factory=client_factory
    )

    with pytest.raises(ConfigurationError):
        await deployer.deploy(DeploymentRequest(chain_name="Testnet", contract="contract Lease {}"))

    client_factory.assert_not_called()


def test_rpc_overrides_from_settings_are_applied(test_settings):
    test_settings.CHAIN_RPC_URLS = {"Testnet": "http://override:8545"}

    deployer = ContractDeployer(test_settings, chains=TEST_CHAINS)

    assert deployer.chains[0].rpc_url == "http://override:8545"
    assert deployer.chains[1] == TEST_CHAINS[1]
