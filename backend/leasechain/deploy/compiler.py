import logging
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any

import solcx
from solcx.exceptions import SolcError, SolcNotInstalled

logger = logging.getLogger(__name__)

# Key of the single source unit in the standard-JSON input.
SOURCE_UNIT = "source"


@dataclass(frozen=True)
class ContractArtifact:
    name: str
    bytecode: str  # Hex string as emitted by solc, without 0x prefix
    abi: list[dict[str, Any]]


@dataclass(frozen=True)
class CompileSuccess:
    source_unit: str
    contracts: dict[str, ContractArtifact]

    def first_artifact(self) -> ContractArtifact:
        """Return the first contract in the order the compiler emitted them.

        Multi-contract sources are not disambiguated by name.
        """
        return next(iter(self.contracts.values()))


@dataclass(frozen=True)
class CompileFailure:
    diagnostics: list[str] = field(default_factory=list)


CompileResult = CompileSuccess | CompileFailure


def build_compiler_input(source: str) -> dict[str, Any]:
    return {
        "language": "Solidity",
        "sources": {SOURCE_UNIT: {"content": source}},
        "settings": {"outputSelection": {"*": {"*": ["*"]}}},
    }


@lru_cache(maxsize=None)
def ensure_solc(version: str) -> None:
    """Install the requested solc release unless it is already available."""
    try:
        solcx.get_executable(version)
    except SolcNotInstalled:
        logger.info("Installing solc %s", version)
        solcx.install_solc(version)


def _diagnostics(output: dict[str, Any]) -> list[str]:
    return [
        err.get("formattedMessage") or err.get("message", "")
        for err in output.get("errors", [])
        if err.get("severity") == "error"
    ]


def parse_compiler_output(output: dict[str, Any]) -> CompileResult:
    """Turn solc standard-JSON output into a typed result.

    The absence of contracts under the source unit is the failure signal; solc
    may return an envelope without raising on some error conditions.
    """
    unit = output.get("contracts", {}).get(SOURCE_UNIT, {})
    if not unit:
        return CompileFailure(diagnostics=_diagnostics(output))

    contracts = {
        name: ContractArtifact(
            name=name,
            bytecode=entry["evm"]["bytecode"]["object"],
            abi=entry["abi"],
        )
        for name, entry in unit.items()
    }
    return CompileSuccess(source_unit=SOURCE_UNIT, contracts=contracts)


def compile_contract(source: str, solc_version: str) -> CompileResult:
    """Compile a single Solidity source unit with the given solc release."""
    ensure_solc(solc_version)
    try:
        output = solcx.compile_standard(
            build_compiler_input(source),
            solc_version=solc_version,
            allow_empty=True,
        )
    except SolcError as e:
        logger.warning("solc rejected the contract source: %s", e.message)
        return CompileFailure(diagnostics=[e.message])

    result = parse_compiler_output(output)
    if isinstance(result, CompileSuccess):
        logger.info("Compiled contracts: %s", ", ".join(result.contracts))
    else:
        logger.warning("Compilation produced no contracts: %s", result.diagnostics)
    return result
