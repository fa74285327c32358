from typing import Any

from leasechain.core.config import Settings
from leasechain.errors import MissingAgreementError
from leasechain.generation.llm_client import LLMClient
from leasechain.generation.prompts import build_lease_contract_prompt

# Completions are always deterministic.
GENERATION_TEMPERATURE = 0


class ContractGenerator:
    """
    Turns a lease agreement into a Solidity contract draft via one LLM completion.
    """

    def __init__(self, settings: Settings, llm: LLMClient | None = None):
        self.settings = settings
        self.llm = llm or LLMClient(settings)

    async def generate(self, agreement: str | None) -> dict[str, Any]:
        """Return the provider's raw completion envelope for ``agreement``."""
        if not agreement:
            raise MissingAgreementError()

        return await self.llm.complete(
            build_lease_contract_prompt(agreement),
            max_tokens=self.settings.GENERATION_MAX_TOKENS,
            temperature=GENERATION_TEMPERATURE,
        )
