from unittest.mock import MagicMock

import pytest

from leasechain.core.config import Settings
from leasechain.deploy.chain_client import ChainClient
from leasechain.deploy.compiler import CompileSuccess, ContractArtifact
from leasechain.deploy.pipeline import ContractDeployer
from leasechain.tests.utils import LEASE_ABI, TEST_ADDRESS, TEST_CHAINS, TEST_PRIVATE_KEY


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        DEPLOYER_PRIVATE_KEY=TEST_PRIVATE_KEY,
        LLM_API_KEY="dummy_key",
        CHAIN_RPC_URLS={},
        SOLC_VERSION="0.8.24",
        GENERATION_MAX_TOKENS=4000,
        RECEIPT_TIMEOUT_SECONDS=180,
        EXPOSE_ERROR_DETAILS=True,
    )


@pytest.fixture
def lease_artifact() -> ContractArtifact:
    return ContractArtifact(name="Lease", bytecode="6080604052", abi=LEASE_ABI)


@pytest.fixture
def compile_source(lease_artifact):
    return MagicMock(
        return_value=CompileSuccess(source_unit="source", contracts={"Lease": lease_artifact})
    )


@pytest.fixture
def chain_client():
    client = MagicMock(spec=ChainClient)
    client.address = TEST_ADDRESS
    client.deploy_contract.return_value = "0xabc"
    client.wait_for_receipt.return_value = {"status": 1, "transactionHash": "0xabc"}
    return client


@pytest.fixture
def client_factory(chain_client):
    return MagicMock(return_value=chain_client)


@pytest.fixture
def deployer(test_settings, compile_source, client_factory) -> ContractDeployer:
    return ContractDeployer(
        test_settings,
        chains=TEST_CHAINS,
        compile_source=compile_source,
        client_factory=client_factory,
    )
