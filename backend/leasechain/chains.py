"""Static registry of the chains contracts can be deployed to."""

from dataclasses import dataclass, replace
from typing import Iterable, Mapping

from leasechain.errors import UnsupportedChainError


@dataclass(frozen=True)
class ChainDescriptor:
    """One supported network."""

    name: str  # Registry key, matched case-sensitively
    chain_id: int
    rpc_url: str
    explorer_url: str | None = None  # Base URL, e.g. "https://sepolia.etherscan.io"
    poa: bool = False  # Blocks carry extraData longer than 32 bytes

    def explorer_link(self, tx_hash: str) -> str:
        """Return the explorer URL for ``tx_hash``, or the bare hash when no explorer is known."""
        if self.explorer_url:
            return f"{self.explorer_url}/tx/{tx_hash}"
        return tx_hash


SUPPORTED_CHAINS: tuple[ChainDescriptor, ...] = (
    ChainDescriptor(
        name="Sepolia",
        chain_id=11155111,
        rpc_url="https://rpc.sepolia.org",
        explorer_url="https://sepolia.etherscan.io",
    ),
    ChainDescriptor(
        name="Base Sepolia",
        chain_id=84532,
        rpc_url="https://sepolia.base.org",
        explorer_url="https://sepolia.basescan.org",
    ),
    ChainDescriptor(
        name="OP Sepolia",
        chain_id=11155420,
        rpc_url="https://sepolia.optimism.io",
        explorer_url="https://optimism-sepolia.blockscout.com",
    ),
    ChainDescriptor(
        name="Arbitrum Sepolia",
        chain_id=421614,
        rpc_url="https://sepolia-rollup.arbitrum.io/rpc",
        explorer_url="https://sepolia.arbiscan.io",
    ),
    ChainDescriptor(
        name="Polygon Amoy",
        chain_id=80002,
        rpc_url="https://rpc-amoy.polygon.technology",
        explorer_url="https://amoy.polygonscan.com",
        poa=True,
    ),
    ChainDescriptor(
        name="Localhost",
        chain_id=1337,
        rpc_url="http://127.0.0.1:8545",
    ),
)


def apply_rpc_overrides(
    chains: Iterable[ChainDescriptor], rpc_urls: Mapping[str, str]
) -> tuple[ChainDescriptor, ...]:
    """Return ``chains`` with RPC endpoints replaced from ``rpc_urls`` (keyed by chain name)."""
    return tuple(
        replace(chain, rpc_url=rpc_urls[chain.name]) if chain.name in rpc_urls else chain
        for chain in chains
    )


def get_chain(name: str, chains: Iterable[ChainDescriptor] = SUPPORTED_CHAINS) -> ChainDescriptor:
    """Look up a chain by exact name.

    Raises:
        UnsupportedChainError: If no registry entry has this name.
    """
    for chain in chains:
        if chain.name == name:
            return chain
    raise UnsupportedChainError()
