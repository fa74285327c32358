import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable

from leasechain.chains import SUPPORTED_CHAINS, ChainDescriptor, apply_rpc_overrides, get_chain
from leasechain.core.config import Settings
from leasechain.deploy.chain_client import ChainClient, build_client
from leasechain.deploy.compiler import (
    CompileFailure,
    CompileResult,
    ContractArtifact,
    compile_contract,
)
from leasechain.errors import (
    CompilationError,
    ConfigurationError,
    MissingParametersError,
    TransactionFailedError,
)

logger = logging.getLogger(__name__)

RECEIPT_SUCCESS = 1


@dataclass
class DeploymentRequest:
    chain_name: str | None
    contract: str | None
    constructor_arguments: list[Any] = field(default_factory=list)


@dataclass
class DeploymentResult:
    hash: str
    link_to_block_explorer: str
    abi: list[dict[str, Any]]


class ContractDeployer:
    """Validates, compiles, signs and broadcasts a contract deployment."""

    def __init__(
        self,
        settings: Settings,
        chains: Iterable[ChainDescriptor] = SUPPORTED_CHAINS,
        compile_source: Callable[[str, str], CompileResult] = compile_contract,
        client_factory: Callable[[ChainDescriptor, str], ChainClient] = build_client,
    ):
        self.settings = settings
        self.chains = apply_rpc_overrides(chains, settings.CHAIN_RPC_URLS)
        self.compile_source = compile_source
        self.client_factory = client_factory

    def resolve_chain(self, request: DeploymentRequest) -> ChainDescriptor:
        if not request.chain_name or not request.contract:
            raise MissingParametersError()
        return get_chain(request.chain_name, self.chains)

    def compile(self, source: str) -> ContractArtifact:
        result = self.compile_source(source, self.settings.SOLC_VERSION)
        if isinstance(result, CompileFailure):
            raise CompilationError(error="\n".join(result.diagnostics) or None)
        return result.first_artifact()

    def connect(self, chain: ChainDescriptor) -> ChainClient:
        if self.settings.DEPLOYER_PRIVATE_KEY is None:
            raise ConfigurationError("Deployer account is not configured")
        return self.client_factory(chain, self.settings.DEPLOYER_PRIVATE_KEY.get_secret_value())

    async def deploy(self, request: DeploymentRequest) -> DeploymentResult:
        chain = self.resolve_chain(request)
        artifact = await asyncio.to_thread(self.compile, request.contract)
        client = self.connect(chain)

        logger.info(
            "Deploying contract %s to %s from %s", artifact.name, chain.name, client.address
        )
        tx_hash = await asyncio.to_thread(
            client.deploy_contract,
            artifact.abi,
            artifact.bytecode,
            list(request.constructor_arguments),
        )
        receipt = await asyncio.to_thread(
            client.wait_for_receipt, tx_hash, self.settings.RECEIPT_TIMEOUT_SECONDS
        )

        if receipt.get("status") != RECEIPT_SUCCESS:
            logger.warning("Deployment transaction %s failed on %s", tx_hash, chain.name)
            raise TransactionFailedError()

        logger.info("Deployment receipt: %s", receipt)
        return DeploymentResult(
            hash=tx_hash,
            link_to_block_explorer=chain.explorer_link(tx_hash),
            abi=artifact.abi,
        )
